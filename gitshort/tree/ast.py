# gitshort/tree/ast.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

# ---- Shorthand grammar node definitions ----

Resolver = Callable[[], Optional[str]]

@dataclass(frozen=True)
class Eol:
    pass  # matches only at the end of the line

@dataclass(frozen=True)
class Eat:
    text: str  # consumed from the input, produces nothing

@dataclass(frozen=True)
class Emit:
    text: str  # appended to the output, consumes nothing

@dataclass(frozen=True)
class Number:
    pass  # one or more ASCII digits, echoed to the output

@dataclass(frozen=True)
class External:
    func: Resolver  # called once per attempt; None means no match

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", "external")

@dataclass(frozen=True)
class Choice:
    alts: Tuple["Node", ...]

@dataclass(frozen=True)
class Seq:
    items: Tuple["Node", ...]

@dataclass(frozen=True)
class Unordered:
    """Each child is used at most once, in any input order.

    Output is rendered in declared order. With ``require_one`` the node fails
    when no child matched.
    """
    items: Tuple["Node", ...]
    require_one: bool = False

Node = Union[Eol, Eat, Emit, Number, External, Choice, Seq, Unordered]


def children(node: Node) -> Tuple[Node, ...]:
    if isinstance(node, Choice):
        return node.alts
    if isinstance(node, (Seq, Unordered)):
        return node.items
    return ()
