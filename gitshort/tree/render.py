# gitshort/tree/render.py
from __future__ import annotations
from typing import List
from .ast import (
    Eol, Eat, Emit, Number, External, Choice, Seq, Unordered, Node, children
)

# Indented dump of a grammar tree, one node per line.
# `Seq(Eat, Emit)` pairs are folded into  'i' -> 'o'.

def _label(node: Node) -> str:
    if isinstance(node, Eol):
        return "eol"
    if isinstance(node, Eat):
        return f"eat {node.text!r}"
    if isinstance(node, Emit):
        return f"emit {node.text!r}"
    if isinstance(node, Number):
        return "number"
    if isinstance(node, External):
        return f"external {node.name}"
    if isinstance(node, Choice):
        return "or" if node.alts else "fail"
    if isinstance(node, Seq):
        return "seq"
    if isinstance(node, Unordered):
        return "some" if node.require_one else "set"
    raise AssertionError(f"unknown node: {node!r}")


def _is_word(node: Node) -> bool:
    return (isinstance(node, Seq) and len(node.items) == 2
            and isinstance(node.items[0], Eat) and isinstance(node.items[1], Emit))


def _walk(node: Node, depth: int, lines: List[str]) -> None:
    pad = "  " * depth
    if _is_word(node):
        eat, emit = node.items
        lines.append(f"{pad}{eat.text!r} -> {emit.text!r}")
        return
    lines.append(pad + _label(node))
    for child in children(node):
        _walk(child, depth + 1, lines)


def render(node: Node) -> str:
    lines: List[str] = []
    _walk(node, 0, lines)
    return "\n".join(lines)
