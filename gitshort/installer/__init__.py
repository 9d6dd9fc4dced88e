# gitshort/installer/__init__.py
from .loader import load_template, render_installer
