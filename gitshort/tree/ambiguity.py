# gitshort/tree/ambiguity.py
"""Bounded enumeration of the shorthands a grammar accepts.

Every string the grammar can derive is replayed through the expander. A
shorthand is reported when

- the expander rejects it, or produces something the grammar does not derive
  for it (an alternative or flag swallowed by an earlier one), or
- one of its derivations can't be produced by any shorthand at all
  (e.g. ``gm`` read as ``--merge`` leaving the ``main`` target unreachable).

Two spellings overlapping is fine as long as both expansions stay reachable:
``ds`` may mean ``--dissociate`` when ``sd`` still gives ``--sparse --depth``.

Choices are ordered, so a later alternative deriving the same shorthand as an
earlier one is never taken and is left out. An earlier alternative that only
matches at the end of the line (``Eol``) leaves the later one to the cases where
more input follows.

The grammar is finite except for ``Number`` and the size of ``Unordered``
selections, so both are bounded by ``Limits``.
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import permutations, product
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from .ast import (
    Eol, Eat, Emit, Number, External, Choice, Seq, Unordered, Node
)
from .runtime import Expander


@dataclass(frozen=True)
class Limits:
    numbers: Tuple[str, ...] = ("1",)   # sample inputs for Number
    max_picks: int = 2                  # children per Unordered selection


@dataclass(frozen=True)
class Derivation:
    shorthand: str
    expansion: str
    pinned: bool = False      # passed an Eol; nothing may be consumed after it
    needs_more: bool = False  # only reached when more input follows


@dataclass(frozen=True)
class Ambiguity:
    shorthand: str
    produced: Optional[str]      # what the expander actually returns
    readings: Tuple[str, ...]    # every expansion the grammar derives


DEFAULT_LIMITS = Limits()


def _join(a: Derivation, b: Derivation) -> Optional[Derivation]:
    if a.pinned and b.shorthand:
        return None
    pinned = a.pinned or b.pinned
    needs_more = b.needs_more or (a.needs_more and not b.shorthand)
    if pinned and needs_more:
        return None
    return Derivation(a.shorthand + b.shorthand, a.expansion + b.expansion,
                      pinned, needs_more)


def _seq_from(items: Sequence[Node], eol: bool, limits: Limits) -> Iterator[Derivation]:
    if not items:
        yield Derivation("", "")
        return
    for head in _derive(items[0], eol, limits):
        for tail in _seq_from(items[1:], eol, limits):
            joined = _join(head, tail)
            if joined is not None:
                yield joined


def _ordered(node: Choice, eol: bool, limits: Limits) -> Iterator[Derivation]:
    ends: Set[str] = set()   # taken by an earlier alternative at the end of the line
    mids: Set[str] = set()   # taken by an earlier alternative with more input after
    for alt in node.alts:
        found = list(_derive(alt, eol, limits))
        for d in found:
            if d.pinned:
                if d.shorthand not in ends:
                    yield d
            elif d.shorthand not in mids:
                if d.shorthand in ends and not d.needs_more:
                    d = Derivation(d.shorthand, d.expansion, needs_more=True)
                yield d
        for d in found:
            if not d.needs_more:
                ends.add(d.shorthand)
            if not d.pinned:
                mids.add(d.shorthand)


def _unordered(node: Unordered, eol: bool, limits: Limits) -> Iterator[Derivation]:
    options = [list(_derive(item, eol, limits)) for item in node.items]
    lo = 1 if node.require_one else 0
    hi = min(limits.max_picks, len(node.items))
    for k in range(lo, hi + 1):
        for picks in permutations(range(len(node.items)), k):
            for combo in product(*(options[i] for i in picks)):
                # shorthand follows pick order, expansion follows declared order
                short = Derivation("", "")
                for d in combo:
                    joined = _join(short, Derivation(d.shorthand, "", d.pinned, d.needs_more))
                    if joined is None:
                        break
                    short = joined
                else:
                    ordered = sorted(zip(picks, combo), key=lambda p: p[0])
                    yield Derivation(
                        short.shorthand,
                        "".join(d.expansion for _, d in ordered),
                        short.pinned,
                        short.needs_more,
                    )


def _derive(node: Node, eol: bool, limits: Limits) -> Iterator[Derivation]:
    if isinstance(node, Eol):
        if eol:
            yield Derivation("", "", pinned=True)
    elif isinstance(node, Eat):
        yield Derivation(node.text, "")
    elif isinstance(node, Emit):
        yield Derivation("", node.text)
    elif isinstance(node, Number):
        for sample in limits.numbers:
            yield Derivation(sample, sample)
    elif isinstance(node, External):
        yield Derivation("", f"<{node.name}>")
    elif isinstance(node, Choice):
        yield from _ordered(node, eol, limits)
    elif isinstance(node, Seq):
        yield from _seq_from(node.items, eol, limits)
    elif isinstance(node, Unordered):
        yield from _unordered(node, eol, limits)
    else:
        raise AssertionError(f"unknown node: {node!r}")


def derivations(node: Node, eol: bool = True,
                limits: Limits = DEFAULT_LIMITS) -> Iterator[Derivation]:
    """Lazily yield every (bounded) derivation of ``node`` as a whole input."""
    for d in _derive(node, eol, limits):
        if not d.needs_more:
            yield d


def stub_externals(node: Node) -> Node:
    """Copy of ``node`` whose resolvers return ``<resolver_name>``."""
    if isinstance(node, External):
        placeholder = f"<{node.name}>"
        return External(lambda: placeholder)
    if isinstance(node, Choice):
        return Choice(tuple(stub_externals(n) for n in node.alts))
    if isinstance(node, Seq):
        return Seq(tuple(stub_externals(n) for n in node.items))
    if isinstance(node, Unordered):
        return Unordered(tuple(stub_externals(n) for n in node.items), node.require_one)
    return node


def find_ambiguities(node: Node, eol: bool = True,
                     limits: Limits = DEFAULT_LIMITS) -> List[Ambiguity]:
    readings: Dict[str, List[str]] = {}
    for d in derivations(node, eol, limits):
        seen = readings.setdefault(d.shorthand, [])
        if d.expansion not in seen:
            seen.append(d.expansion)

    runner = Expander(stub_externals(node))
    produced = {shorthand: runner.run(shorthand, eol) for shorthand in readings}
    reachable = set(produced.values())

    found: List[Ambiguity] = []
    for shorthand, exps in readings.items():
        result = produced[shorthand]
        if result not in exps or any(e not in reachable for e in exps):
            found.append(Ambiguity(shorthand, result, tuple(exps)))
    return found
