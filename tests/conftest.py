# tests/conftest.py
import pytest

from gitshort import vcs

HELP_ALL = """See 'git help <command>' to read about a specific subcommand

Main Porcelain Commands
   add                     Add file contents to the index
   am                      Apply a series of patches from a mailbox
   commit                  Record changes to the repository
   mv                      Move or rename a file, a directory, or a symlink

Low-level Commands / Manipulators
   apply                   Apply a patch to files and/or to the index
"""

# A repository on branch `feature`, tracking origin/feature, with two remotes.
REPO = {
    ("branch", "--show-current"): "feature",
    ("config", "get", "checkout.defaultRemote"): None,
    ("remote",): "origin\nupstream",
    ("symbolic-ref", "--short", "refs/remotes/origin/HEAD"): "origin/main",
    ("for-each-ref", "--format=%(refname:short) %(upstream:short)", "refs/heads"):
        "main origin/main\nfeature origin/feature",
    ("rev-parse", "--abbrev-ref", "feature@{upstream}"): "origin/feature",
    ("branch", "--list", "--format=%(upstream:remotename)", "feature"): "origin",
    ("help", "--all"): HELP_ALL,
}


@pytest.fixture
def fake_git(monkeypatch):
    """
    Replace `git` with a lookup table. Tests may edit the returned dict;
    unknown queries fail like a non-zero git exit.
    """
    answers = dict(REPO)
    calls = []

    def query(*args):
        calls.append(args)
        return answers.get(args)

    monkeypatch.setattr(vcs, "git_query_command", query)
    return answers, calls
