# gitshort/tree/__init__.py
"""Shorthand grammar trees.

This package provides:
- AST nodes for the combinator language (eat/emit/number/external/or/seq/set)
- Builder functions for authoring grammars
- The expansion engine and a whole-input runner
- Read-only introspection: ambiguity detection and a textual dump

It knows nothing about git; resolvers are plain callables.
"""

from .ast import (
    Eol, Eat, Emit, Number, External, Choice, Seq, Unordered, Node,
)
from .engine import expand
from .runtime import Expander
from .ambiguity import Ambiguity, Limits, derivations, find_ambiguities
from .render import render
