# gitshort/tree/builders.py
"""Combinator constructors used to author grammars.

Builders never fail. A grammar is plain data; mistakes in it (shadowed
alternatives, overlapping flags) are found with ``ambiguity.find_ambiguities``
and the grammar tests, not at runtime.
"""

from __future__ import annotations
from .ast import (
    Eol, Eat, Emit, Number, External, Choice, Seq, Unordered, Node, Resolver
)

# Cursor marker understood by the shell installer.
CURSOR = "%"

# ---- primitives ----

def or_(*nodes: Node) -> Node:
    return Choice(tuple(nodes))

def seq(*nodes: Node) -> Node:
    return Seq(tuple(nodes))

def set_(*nodes: Node) -> Node:
    return Unordered(tuple(nodes))

def some(*nodes: Node) -> Node:
    """Like ``set_`` but at least one child has to match."""
    return Unordered(tuple(nodes), require_one=True)

def number() -> Node:
    return Number()

def eol() -> Node:
    return Eol()

def custom(func: Resolver) -> Node:
    return External(func)

def fail() -> Node:
    return or_()

# ---- derived ----

def opt(node: Node) -> Node:
    return set_(node)

def word(i: str, o: str) -> Node:
    """Consume ``i``, produce ``o``."""
    return seq(Eat(i), Emit(o))

def map_(i: str, o: Node) -> Node:
    return seq(Eat(i), o)

def prefix(p: str, node: Node) -> Node:
    return seq(Emit(p), node)

def arg(node: Node) -> Node:
    return prefix(" ", node)

def flag(i: str, o: str) -> Node:
    """Long flag: ``flag("a", "all")`` turns ``a`` into ``--all``."""
    return prefix("--", word(i, o))

def f(i: str, o: str) -> Node:
    """Short flag: ``f("b", "b")`` turns ``b`` into ``-b``."""
    return prefix("-", word(i, o))

def prefix_set(p: str, *nodes: Node) -> Node:
    return set_(*(prefix(p, n) for n in nodes))

def prefix_or(p: str, *nodes: Node) -> Node:
    return or_(*(prefix(p, n) for n in nodes))

def argset(*nodes: Node) -> Node:
    return prefix_set(" ", *nodes)

def number_or_zero() -> Node:
    # bare numeric flags default to 0
    return or_(Number(), Emit("0"))

def map_custom(i: str, func: Resolver) -> Node:
    return seq(Eat(i), External(func))

def param(i: str, o: str, value: Node) -> Node:
    """``--o=<value>``; the cursor marker stands in when no value matches."""
    return seq(Emit("--"), word(i, o), prefix("=", or_(value, Emit(CURSOR))))

def param_req(i: str, o: str, value: Node) -> Node:
    """``--o=<value>`` where the value has to be typed."""
    return seq(Emit("--"), word(i, o), prefix("=", value))

def param_opt(i: str, o: str, value: Node) -> Node:
    """``--o`` with an optional ``=<value>``, the ``=`` typed as well."""
    return seq(Emit("--"), word(i, o), opt(seq(word("=", "="), value)))
