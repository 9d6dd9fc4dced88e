# gitshort/tree/engine.py
from __future__ import annotations
from typing import List, Optional
import regex

from .ast import (
    Eol, Eat, Emit, Number, External, Choice, Seq, Unordered, Node
)

# Expansion engine:
# - expand() matches a node against the front of `text` and returns the rest.
# - Output goes into `out`, a list of string chunks used as an append log.
# - On failure the result is None and `out` is exactly as it was on entry.
# - No state outside the call stack; the tree is never modified.

_DIGITS = regex.compile(r"[0-9]+")


def expand(node: Node, text: str, eol: bool, out: List[str]) -> Optional[str]:
    if isinstance(node, Eol):
        if not text and eol:
            return text
        return None

    if isinstance(node, Eat):
        if text.startswith(node.text):
            return text[len(node.text):]
        return None

    if isinstance(node, Emit):
        out.append(node.text)
        return text

    if isinstance(node, Number):
        m = _DIGITS.match(text)
        if m is None:
            return None
        out.append(m.group(0))
        return text[m.end():]

    if isinstance(node, External):
        value = node.func()
        if value is None:
            return None
        out.append(value)
        return text

    if isinstance(node, Choice):
        # children clean up after themselves, nothing to snapshot here
        for alt in node.alts:
            rest = expand(alt, text, eol, out)
            if rest is not None:
                return rest
        return None

    if isinstance(node, Seq):
        mark = len(out)
        cur = text
        for item in node.items:
            rest = expand(item, cur, eol, out)
            if rest is None:
                del out[mark:]
                return None
            cur = rest
        return cur

    if isinstance(node, Unordered):
        return _expand_unordered(node, text, eol, out)

    raise AssertionError(f"unknown node: {node!r}")


def _expand_unordered(node: Unordered, text: str, eol: bool, out: List[str]) -> Optional[str]:
    # one scratch buffer per child; None = not used yet
    slots: List[Optional[List[str]]] = [None] * len(node.items)
    cur = text
    progressed = True
    while progressed:
        progressed = False
        for idx, item in enumerate(node.items):
            if slots[idx] is not None:
                continue
            buf: List[str] = []
            rest = expand(item, cur, eol, buf)
            if rest is not None:
                slots[idx] = buf
                cur = rest
                progressed = True
                break  # rescan from the first child

    used = [buf for buf in slots if buf is not None]
    if node.require_one and not used:
        return None
    for buf in used:
        out.extend(buf)
    return cur
