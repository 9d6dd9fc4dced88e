# tests/test_builders.py

from gitshort.tree import Emit, Expander, Unordered, render
from gitshort.tree.builders import (
    CURSOR, fail, word, map_, arg, flag, f, opt, some, set_, prefix_set,
    prefix_or, argset, number, number_or_zero, map_custom, param, param_req,
    param_opt, eol, seq, or_, custom,
)


def run(node, text, eol_mode=True):
    return Expander(node).run(text, eol_mode)


def branch_name():
    return "feature"


def test_word_and_flags():
    assert run(word("a", "add"), "a") == "add"
    assert run(flag("a", "all"), "a") == "--all"
    assert run(f("b", "B"), "b") == "-B"
    assert run(arg(word("x", "y")), "x") == " y"


def test_fail_never_matches():
    assert run(fail(), "") is None
    assert run(or_(fail(), word("a", "A")), "a") == "A"


def test_opt_is_single_child_set():
    node = opt(word("a", "A"))
    assert isinstance(node, Unordered) and not node.require_one
    assert run(node, "") == ""
    assert run(node, "a") == "A"


def test_some_requires_one():
    node = some(word("a", "A"))
    assert node.require_one
    assert run(node, "") is None


def test_prefix_set_and_prefix_or():
    node = seq(word("c", "commit"), prefix_set(" ", flag("a", "amend"), flag("e", "edit")))
    assert run(node, "cea") == "commit --amend --edit"
    node = seq(word("z", "stash"), prefix_or(" ", word("p", "push"), word("o", "pop")))
    assert run(node, "zo") == "stash pop"
    assert run(node, "z") is None


def test_argset_prefixes_each_child():
    node = argset(flag("a", "all"), flag("v", "verbose"))
    assert run(node, "va") == " --all --verbose"


def test_number_or_zero_defaults_bare_flag():
    node = param("u", "unified", number_or_zero())
    assert run(node, "u") == "--unified=0"
    assert run(node, "u12") == "--unified=12"


def test_param_falls_back_to_cursor():
    node = param("d", "depth", number())
    assert run(node, "d3") == "--depth=3"
    assert run(node, "d") == f"--depth={CURSOR}"


def test_param_req_needs_a_value():
    node = param_req("s", "source", or_(word("h", "HEAD"), word("=", CURSOR)))
    assert run(node, "sh") == "--source=HEAD"
    assert run(node, "s=") == f"--source={CURSOR}"
    assert run(node, "s") is None


def test_param_opt_value_is_optional():
    node = param_opt("g", "gpg-sign", Emit(CURSOR))
    assert run(node, "g") == "--gpg-sign"
    assert run(node, "g=") == f"--gpg-sign={CURSOR}"
    node = param_opt("d", "decorate", word("s", "short"))
    assert run(node, "d=s") == "--decorate=short"
    assert run(node, "ds") is None
    assert run(node, "d=") is None


def test_map_custom_uses_resolver():
    node = map_custom("h", branch_name)
    assert run(node, "h") == "feature"
    assert run(map_custom("h", lambda: None), "h") is None


def test_map_consumes_before_node():
    assert run(map_("=", custom(branch_name)), "=") == "feature"


def test_eol_builder():
    node = seq(word("q", "quit"), eol())
    assert run(node, "q", True) == "quit"
    assert run(node, "q", False) is None


# --- render ---

def test_render_folds_words():
    node = seq(word("a", "add"), some(flag("f", "force")))
    assert render(node) == "\n".join([
        "seq",
        "  'a' -> 'add'",
        "  some",
        "    seq",
        "      emit '--'",
        "      'f' -> 'force'",
    ])


def test_render_leaves():
    node = or_(eol(), number(), custom(branch_name), fail(), set_())
    assert render(node) == "\n".join([
        "or",
        "  eol",
        "  number",
        "  external branch_name",
        "  fail",
        "  set",
    ])
