# gitshort/grammar/commands.py
"""The git shorthand grammar.

One alternative per git command. A command is its shorthand word followed by a
space-prefixed set of flags (any order, each at most once) and, where git takes
one, an optional target. Longer shorthands sharing a first letter come first
(``bl`` before ``b``, ``rl`` before ``r``).

Inside a command every expansion has to stay reachable (``gsh grammar
--check``):

- no flag is spelled like a target (``h``, ``u``, ``m``, ``o``, ``-``, ``@``),
  otherwise the set eats the target;
- a flag that is a prefix of another comes after it (``ds`` before ``d``);
- values that could run into the next flag are required (``param_req``) or
  typed after ``=`` (``param_opt``).
"""

from __future__ import annotations
from typing import Optional
from ..tree.ast import Node, Emit
from ..tree.builders import (
    CURSOR, or_, seq, opt, word, prefix, prefix_or, argset, arg, flag, f,
    param, param_req, param_opt, number, number_or_zero, eol,
)
from .fragments import (
    target_branch, remote, recurse_submodules, target_commit,
    commit_value, message, track, pretty, reflog_expire_value,
)

_ROOT: Optional[Node] = None


def root() -> Node:
    """The full grammar, built on first use."""
    global _ROOT
    if _ROOT is None:
        _ROOT = ast()
    return _ROOT


def ast() -> Node:
    return or_(
        add(),
        blame(),
        branch(),
        commit(),
        diff(),
        rebase(),
        fetch(),
        checkout(),
        show(),
        init(),
        clone(),
        log(),
        merge(),
        push(),
        pull(),
        reflog(),
        reset(),
        switch(),
        tag(),
        restore(),
        status(),
        worktree(),
        clean(),
        stash(),
    )


def alone(node: Node) -> Node:
    """Only when nothing else follows on the line."""
    return seq(node, eol())


def add() -> Node:
    return seq(
        word("a", "add"),
        argset(
            flag("na", "no-all"),
            flag("a", "all"),
            flag("f", "force"),
            flag("v", "verbose"),
            flag("d", "dry-run"),
            flag("s", "sparse"),
            flag("i", "interactive"),
            flag("N", "intent-to-add"),
            flag("r", "refresh"),
            flag("u", "update"),
            flag("p", "patch"),
        ),
        opt(arg(or_(word(".", "."), word("/", ":/")))),
    )


def blame() -> Node:
    return seq(
        word("bl", "blame"),
        argset(
            f("t", "t"),
            f("w", "w"),
            f("s", "s"),
            flag("1", "first-parent"),
            seq(f("l", "L"), Emit(" " + CURSOR)),
            flag("n", "show-number"),
        ),
    )


def branch() -> Node:
    return seq(
        word("b", "branch"),
        argset(
            flag("f", "force"),
            flag("d", "delete"),
            param_req("me", "merged", commit_value()),
            param_req("nme", "no-merged", commit_value()),
            flag("m", "move"),
            flag("c", "copy"),
            flag("r", "remotes"),
            flag("a", "all"),
            f("vv", "vv"),
            flag("v", "verbose"),
            flag("q", "quiet"),
            param_req("u", "set-upstream-to", commit_value()),
            track(),
        ),
    )


def commit() -> Node:
    return seq(
        word("c", "commit"),
        argset(
            flag("a", "amend"),
            flag("d", "dry-run"),
            flag("ne", "no-edit"),
            flag("e", "edit"),
            flag("nv", "no-verify"),
            flag("v", "verify"),
            flag("i", "include"),
            flag("o", "only"),
            flag("st", "status"),
            flag("s", "signoff"),
            flag("ng", "no-gpg-sign"),
            param_opt("g", "gpg-sign", Emit(CURSOR)),
            param_req(
                "f",
                "fixup",
                seq(
                    opt(or_(word("a", "amend:"), word("r", "reword:"))),
                    commit_value(),
                ),
            ),
            param_req("q", "squash", commit_value()),
            param_req("c", "reedit-message", commit_value()),
            param_req("C", "reuse-message", commit_value()),
            message(),
        ),
    )


def diff() -> Node:
    return seq(
        word("d", "diff"),
        argset(
            flag("r", "raw"),
            flag("m", "minimal"),
            flag("h", "histogram"),
            flag("p", "patience"),
            flag("ss", "shortstat"),
            flag("s", "stat"),
            flag("ni", "no-indent-heuristic"),
            flag("i", "indent-heuristic"),
            flag("b", "ignore-space-change"),
            flag("w", "ignore-all-space"),
            param("u", "unified", number_or_zero()),
        ),
    )


def rebase() -> Node:
    return seq(
        word("e", "rebase"),
        or_(
            prefix_or(
                " ",
                alone(flag("a", "abort")),
                alone(flag("c", "continue")),
                alone(flag("e", "edit-todo")),
                alone(flag("h", "show-current-patch")),
                alone(flag("q", "quit")),
                alone(flag("s", "skip")),
            ),
            seq(
                argset(
                    flag("i", "interactive"),
                    flag("nf", "no-ff"),
                    flag("r", "root"),
                    flag("q", "quiet"),
                    flag("ns", "no-stat"),
                    flag("s", "stat"),
                    flag("nU", "no-update-refs"),
                    flag("U", "update-refs"),
                    flag("nV", "no-verify"),
                    flag("V", "verify"),
                    flag("v", "verbose"),
                ),
                opt(arg(target_commit())),
            ),
        ),
    )


def fetch() -> Node:
    return seq(
        word("f", "fetch"),
        argset(
            flag("4", "ipv4"),
            flag("6", "ipv6"),
            flag("na", "no-all"),
            flag("a", "all"),
            flag("A", "append"),
            flag("d", "dry-run"),
            flag("f", "force"),
            flag("k", "keep"),
            flag("m", "multiple"),
            flag("p", "prune"),
            flag("nt", "no-tags"),
            flag("t", "tags"),
        ),
        opt(arg(remote())),
    )


def checkout() -> Node:
    return seq(
        word("g", "checkout"),
        argset(
            f("bb", "B"),
            f("b", "b"),
            f("B", "B"),
            f("l", "l"),
            flag("f", "force"),
            flag("ng", "no-guess"),
            flag("g", "guess"),
            flag("d", "detach"),
            flag("M", "merge"),
            flag("p", "patch"),
            flag("no", "no-overlay"),
            flag("os", "ours"),
            flag("ts", "theirs"),
            track(),
        ),
        opt(arg(target_commit())),
    )


def show() -> Node:
    return seq(
        word("h", "show"),
        argset(
            flag("l", "oneline"),
            flag("nn", "no-notes"),
            flag("a", "abbrev-commit"),
            flag("s", "no-patch"),
            f("M", "m"),
            pretty(),
        ),
        opt(arg(target_commit())),
    )


def init() -> Node:
    return seq(
        word("i", "init"),
        argset(
            flag("b", "bare"),
            flag("q", "quiet"),
            param("i", "initial-branch", Emit(CURSOR)),
        ),
    )


def clone() -> Node:
    return seq(
        word("k", "clone"),
        argset(
            flag("S", "single-branch"),
            flag("B", "bare"),
            flag("h", "shared"),
            flag("l", "local"),
            flag("m", "mirror"),
            flag("ng", "no-checkout"),
            flag("s", "sparse"),
            flag("nt", "no-tags"),
            flag("nhl", "no-hardlinks"),
            flag("t", "tags"),
            param("b", "branch", Emit(CURSOR)),
            param("ds", "dissociate", Emit(CURSOR)),
            param("d", "depth", number()),
            param("j", "jobs", number()),
            param("o", "origin", Emit(CURSOR)),
            param("rf", "reference", Emit(CURSOR)),
            param("rv", "revision", Emit(CURSOR)),
        ),
    )


def log() -> Node:
    return seq(
        word("l", "log"),
        argset(
            flag("nac", "no-abbrev-commit"),
            flag("ac", "abbrev-commit"),
            flag("P", "first-parent"),
            flag("l", "oneline"),
            flag("nd", "no-decorate"),
            param_opt(
                "d",
                "decorate",
                or_(
                    word("s", "short"),
                    word("f", "full"),
                    word("a", "auto"),
                    word("n", "no"),
                ),
            ),
            flag("F", "follow"),
            flag("me", "merges"),
            flag("a", "all"),
            flag("g", "graph"),
            flag("p", "patch"),
            flag("b", "ignore-space-change"),
            flag("w", "ignore-all-space"),
            param("N", "max-count", number()),
            pretty(),
        ),
        opt(arg(target_commit())),
    )


def merge() -> Node:
    return seq(
        word("m", "merge"),
        or_(
            prefix_or(
                " ",
                alone(flag("c", "continue")),
                alone(flag("a", "abort")),
                alone(flag("q", "quit")),
            ),
            seq(
                argset(
                    flag("ffo", "ff-only"),
                    flag("nf", "no-ff"),
                    flag("sq", "squash"),
                    flag("nc", "no-commit"),
                    flag("ne", "no-edit"),
                    flag("e", "edit"),
                    flag("v", "verbose"),
                ),
                opt(arg(target_commit())),
            ),
        ),
    )


def push() -> Node:
    return seq(
        word("p", "push"),
        argset(
            flag("nT", "no-thin"),
            flag("T", "thin"),
            flag("nt", "no-tags"),
            flag("t", "tags"),
            flag("f", "force"),
            flag("d", "dry-run"),
            flag("q", "quiet"),
            flag("v", "verbose"),
            flag("nV", "no-verify"),
            flag("V", "verify"),
            flag("4", "ipv4"),
            flag("6", "ipv6"),
            flag("u", "set-upstream"),
        ),
        opt(seq(arg(remote()), opt(arg(target_branch())))),
    )


def pull() -> Node:
    return seq(
        word("q", "pull"),
        argset(
            flag("a", "all"),
            flag("p", "prune"),
            flag("nv", "no-verify"),
            flag("v", "verify"),
            flag("Fo", "ff-only"),
            flag("nF", "no-ff"),
            flag("F", "ff"),
            flag("f", "force"),
            flag("nr", "no-rebase"),
            flag("r", "rebase"),
            flag("d", "dry-run"),
            flag("nt", "no-tags"),
            flag("t", "tags"),
            flag("4", "ipv4"),
            flag("6", "ipv6"),
        ),
    )


def reflog() -> Node:
    return seq(
        word("rl", "reflog"),
        opt(prefix_or(
            " ",
            word("s", "show"),
            word("l", "list"),
            word("e", "exists"),
            seq(
                word("x", "expire"),
                argset(
                    flag("a", "all"),
                    flag("d", "dry-run"),
                    flag("r", "rewrite"),
                    flag("sf", "stale-fix"),
                    flag("sw", "single-worktree"),
                    flag("u", "updateref"),
                    param("U", "expire-unreachable", reflog_expire_value()),
                    param("e", "expire", reflog_expire_value()),
                ),
            ),
            seq(
                word("d", "delete"),
                argset(
                    flag("d", "dry-run"),
                    flag("r", "rewrite"),
                    flag("u", "updateref"),
                ),
            ),
            seq(
                word("D", "drop"),
                opt(seq(
                    prefix(" ", flag("a", "all")),
                    opt(prefix(" ", flag("sw", "single-worktree"))),
                )),
            ),
        )),
    )


def reset() -> Node:
    return seq(
        word("r", "reset"),
        opt(prefix_or(
            " ",
            flag("s", "soft"),
            flag("h", "hard"),
            flag("M", "merge"),
            flag("k", "keep"),
            flag("r", "recurse-submodules"),
        )),
        argset(flag("q", "quiet"), flag("nr", "no-refresh")),
        opt(arg(target_commit(current=False))),
    )


def switch() -> Node:
    return seq(
        word("s", "switch"),
        argset(
            flag("f", "force"),
            flag("C", "force-create"),
            flag("c", "create"),
            flag("d", "detach"),
            flag("ng", "no-guess"),
            flag("iow", "ignore-other-worktrees"),
            track(),
        ),
        opt(arg(target_branch())),
    )


def tag() -> Node:
    return seq(
        word("t", "tag"),
        argset(
            flag("a", "annotate"),
            flag("ns", "no-sign"),
            flag("s", "sign"),
            flag("f", "force"),
            flag("d", "delete"),
            flag("v", "verify"),
            flag("l", "list"),
            flag("ic", "ignore-case"),
            flag("oe", "omit-empty"),
            flag("e", "edit"),
            message(),
        ),
    )


def restore() -> Node:
    return seq(
        word("u", "restore"),
        argset(
            flag("p", "patch"),
            flag("w", "worktree"),
            flag("i", "staged"),  # index
            flag("o", "ours"),
            flag("t", "theirs"),
            flag("m", "merge"),
            param_req("s", "source", commit_value()),
            recurse_submodules(),
        ),
    )


def status() -> Node:
    return seq(
        word("v", "status"),
        argset(
            flag("s", "short"),
            flag("l", "long"),
            flag("z", "show-stash"),
            flag("v", "verbose"),
            flag("na", "no-ahead-behind"),
            flag("a", "ahead-behind"),
            flag("nr", "no-renames"),
            flag("r", "renames"),
            param("fr", "find-renames", number()),
            param_opt(
                "u",
                "untracked-files",
                or_(word("no", "no"), word("n", "normal"), word("a", "all")),
            ),
            param_opt(
                "i",
                "ignored",
                or_(word("no", "no"), word("t", "traditional"), word("m", "matching")),
            ),
        ),
    )


def worktree() -> Node:
    return seq(
        word("w", "worktree"),
        prefix_or(
            " ",
            seq(
                word("a", "add"),
                argset(
                    flag("f", "force"),
                    flag("d", "detach"),
                    flag("nc", "no-checkout"),
                    flag("ng", "no-guess-remote"),
                    flag("nrp", "no-relative-paths"),
                    flag("nt", "no-track"),
                    flag("l", "lock"),
                    flag("o", "orphan"),
                    flag("q", "quiet"),
                ),
            ),
            seq(word("v", "list"), argset(flag("v", "verbose"))),
            seq(word("m", "move"), argset(flag("f", "force"))),
            seq(
                word("p", "prune"),
                argset(flag("d", "dry-run"), flag("v", "verbose")),
            ),
            seq(word("r", "remove"), argset(flag("f", "force"))),
            word("R", "repair"),
            word("l", "lock"),
            word("u", "unlock"),
        ),
    )


def clean() -> Node:
    return seq(
        word("x", "clean"),
        argset(
            f("d", "d"),
            f("xx", "xX"),
            f("x", "x"),
            f("X", "X"),
            flag("f", "force"),
            flag("i", "interactive"),
            flag("n", "dry-run"),
            flag("q", "quiet"),
        ),
    )


def stash() -> Node:
    return seq(
        word("z", "stash"),
        opt(prefix_or(
            " ",
            seq(
                word("p", "push"),
                argset(
                    flag("a", "all"),
                    flag("p", "patch"),
                    flag("s", "staged"),
                    message(),
                ),
            ),
            word("o", "pop"),
            seq(
                word("s", "save"),
                argset(
                    flag("a", "all"),
                    flag("p", "patch"),
                    flag("s", "staged"),
                    flag("q", "quiet"),
                ),
            ),
            word("l", "list"),
            word("h", "show"),
            word("d", "drop"),
            word("a", "apply"),
            word("b", "branch"),
            word("c", "clear"),
            word("m", "create"),
            word("t", "store"),
        )),
    )
