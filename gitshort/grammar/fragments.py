# gitshort/grammar/fragments.py
"""Sub-grammars shared between several git commands."""

from __future__ import annotations
from ..tree.ast import Node, Emit
from ..tree.builders import (
    CURSOR, or_, seq, opt, word, map_, map_custom, flag, param, param_opt,
    number, eol,
)
from ..vcs import (
    current_branch, current_upstream, main_branch, main_remote,
    main_remote_head, current_remote,
)


def target_branch(current: bool = True) -> Node:
    # without ``h`` where the command spends it on a flag
    head = (map_custom("h", current_branch),) if current else ()
    return or_(
        *head,
        map_custom("u", current_upstream),
        map_custom("m", main_branch),
        map_custom("o", main_remote_head),
    )


def remote() -> Node:
    return or_(
        map_custom("h", current_remote),
        map_custom("o", main_remote),
    )


def recurse_submodules() -> Node:
    return flag("rs", "recurse-submodules")


def target_commit(current: bool = True) -> Node:
    return or_(
        target_branch(current),
        seq(word("-", "HEAD~"), opt(number())),
        seq(word("@", "HEAD@{"), number(), Emit("}")),
    )


def commit_value() -> Node:
    """A commit, or ``=`` for the cursor."""
    return or_(target_commit(), word("=", CURSOR))


def message() -> Node:
    # quoted only when the message is the last thing typed
    return param("m", "message", seq(eol(), Emit(f'"{CURSOR}"')))


def track() -> Node:
    return or_(
        flag("nt", "no-track"),
        param_opt("t", "track", or_(word("d", "direct"), word("i", "indirect"))),
    )


def pretty() -> Node:
    return param_opt(
        "f",
        "pretty",
        or_(
            word("o", "oneline"),
            word("s", "short"),
            word("m", "medium"),
            word("ff", "fuller"),
            word("f", "full"),
            word("rf", "reference"),
            word("r", "raw"),
            word("e", "email"),
            word("t", "tformat:" + CURSOR),
            word("F", "format:" + CURSOR),
        ),
    )


def reflog_expire_value() -> Node:
    return or_(
        word("a", "all"),
        word("n", "never"),
        map_("=", Emit(CURSOR)),
    )
