# gitshort/vcs/__init__.py
"""git queries used as external resolvers.

Every resolver takes no arguments and returns ``Optional[str]``. Anything that
keeps git from answering (no repository, no commits yet, detached HEAD, git not
installed) is reported as ``None``, which the expander treats as "no match".

Calls are synchronous and have no timeout.
"""

from __future__ import annotations
from typing import List, Optional
import subprocess
import regex

GIT = "git"


def git_query_command(*args: str) -> Optional[str]:
    """Run ``git *args`` and return its trimmed stdout, or None on failure."""
    try:
        proc = subprocess.run([GIT, *args], capture_output=True, check=False)
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    try:
        return proc.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        return None


# ---- resolvers ----

def current_branch() -> Optional[str]:
    """The checked out branch; git prints nothing on a detached HEAD."""
    return git_query_command("branch", "--show-current") or None


def current_upstream() -> Optional[str]:
    """The branch tracked by the current branch."""
    branch = current_branch()
    if branch is None:
        return None
    return git_query_command("rev-parse", "--abbrev-ref", branch + "@{upstream}") or None


def main_remote() -> Optional[str]:
    """The "main" remote, first of:

    1. ``checkout.defaultRemote`` when set
    2. ``origin`` when such a remote exists
    3. the first remote listed by ``git remote``
    """
    configured = git_query_command("config", "get", "checkout.defaultRemote")
    if configured:
        return configured
    names = remotes()
    if names is None:
        return None
    if "origin" in names:
        return "origin"
    return names[0] if names else None


def main_remote_head() -> Optional[str]:
    """HEAD branch of the main remote, e.g. ``origin/main``."""
    remote = main_remote()
    if remote is None:
        return None
    return remote_head(remote)


def main_branch() -> Optional[str]:
    """First local branch tracking the main remote's HEAD."""
    head = main_remote_head()
    if head is None:
        return None
    refs = git_query_command(
        "for-each-ref", "--format=%(refname:short) %(upstream:short)", "refs/heads"
    )
    if refs is None:
        return None
    for line in refs.splitlines():
        branch, _, upstream = line.partition(" ")
        if upstream == head:
            return branch
    return None


def current_remote() -> Optional[str]:
    """Remote tracked by the current branch."""
    branch = current_branch()
    if branch is None:
        return None
    return tracked_remote(branch)


# ---- helpers ----

def remote_head(remote: str) -> Optional[str]:
    return git_query_command("symbolic-ref", "--short", f"refs/remotes/{remote}/HEAD") or None


def remotes() -> Optional[List[str]]:
    output = git_query_command("remote")
    if output is None:
        return None
    return output.splitlines()


def tracked_remote(branch: str) -> Optional[str]:
    remote = git_query_command(
        "branch", "--list", "--format=%(upstream:remotename)", branch
    )
    return remote or None


def is_real_command(shorthand: str) -> bool:
    """True when ``shorthand`` is itself a git command (``git help --all``)."""
    if not shorthand:
        return False
    listing = git_query_command("help", "--all")
    if listing is None:
        return False
    pattern = regex.compile(r"^   " + regex.escape(shorthand) + r"(?:\s|$)", regex.MULTILINE)
    return pattern.search(listing) is not None
