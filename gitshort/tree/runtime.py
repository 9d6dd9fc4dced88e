# gitshort/tree/runtime.py
from __future__ import annotations
from typing import List, Optional
from .ast import Node
from .engine import expand

class Expander:
    """Expand whole shorthand expressions against a root grammar node."""
    def __init__(self, root: Node):
        self.root = root

    def run(self, text: str, eol: bool = True) -> Optional[str]:
        """Return the expansion, or None unless the entire input was consumed."""
        out: List[str] = []
        rest = expand(self.root, text, eol, out)
        if rest is None or rest:
            return None
        return "".join(out)
