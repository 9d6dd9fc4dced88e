# gitshort/grammar/__init__.py
"""The git shorthand grammar (authored data built from gitshort.tree builders)."""

from .commands import ast, root
