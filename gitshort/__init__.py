# gitshort/__init__.py
"""git shorthand expander: `cam` -> `commit --amend`."""

__version__ = "0.1.0"
