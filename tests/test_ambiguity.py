# tests/test_ambiguity.py
from gitshort.tree import Ambiguity, Emit, Limits, derivations, find_ambiguities
from gitshort.tree.builders import (
    word, flag, argset, set_, or_, seq, eol, number, number_or_zero, opt,
    prefix, map_custom, param,
)


def resolver_that_must_not_run():
    raise AssertionError("resolver called during the check")


def test_derivations_of_word():
    [d] = list(derivations(word("a", "add")))
    assert (d.shorthand, d.expansion, d.pinned) == ("a", "add", False)


def test_unordered_derivations_follow_declared_order():
    node = seq(word("a", "add"), argset(flag("f", "force"), flag("v", "verbose")))
    pairs = {(d.shorthand, d.expansion) for d in derivations(node)}
    assert pairs == {
        ("a", "add"),
        ("af", "add --force"),
        ("av", "add --verbose"),
        ("afv", "add --force --verbose"),
        ("avf", "add --force --verbose"),
    }


def test_max_picks_bounds_selection():
    node = argset(flag("a", "all"), flag("b", "b"), flag("c", "c"))
    shorts = {d.shorthand for d in derivations(node, limits=Limits(max_picks=1))}
    assert shorts == {"", "a", "b", "c"}


def test_eol_derivations():
    quit_ = seq(word("q", "quit"), eol())
    assert list(derivations(quit_, eol=False)) == []
    [d] = list(derivations(quit_, eol=True))
    assert d.pinned

    node = set_(seq(word("q", "Q"), eol()), word("v", "V"))
    shorts = {d.shorthand for d in derivations(node)}
    assert shorts == {"", "q", "v", "vq"}


def test_clean_grammar_has_no_ambiguities():
    node = seq(word("a", "add"), argset(flag("f", "force"), flag("v", "verbose")))
    assert find_ambiguities(node) == []


def test_duplicate_shorthand_is_reported():
    node = set_(word("a", "x"), word("a", "y"))
    assert find_ambiguities(node) == [Ambiguity("a", "x", ("x", "y"))]


def test_shadowed_alternative_is_reported():
    node = or_(word("a", "all"), word("ab", "abort"))
    assert find_ambiguities(node) == [Ambiguity("ab", None, ("abort",))]


def test_adjacent_numbers_are_reported():
    node = seq(number(), opt(prefix(" ", number())))
    found = find_ambiguities(node, limits=Limits(numbers=("1",), max_picks=1))
    assert found == [Ambiguity("11", "11", ("1 1",))]


def test_resolvers_are_stubbed():
    node = or_(map_custom("h", resolver_that_must_not_run), word("x", "X"))
    pairs = [(d.shorthand, d.expansion) for d in derivations(node)]
    assert pairs == [("h", "<resolver_that_must_not_run>"), ("x", "X")]
    assert find_ambiguities(node) == []


def test_earlier_alternative_hides_same_shorthand():
    node = param("u", "unified", number_or_zero())
    pairs = {(d.shorthand, d.expansion) for d in derivations(node)}
    assert pairs == {("u", "--unified=0"), ("u1", "--unified=1")}
    assert find_ambiguities(node) == []


def test_end_of_line_alternative_leaves_the_rest():
    node = seq(or_(seq(word("q", "quit"), eol()), word("q", "quiet")), opt(word("v", "V")))
    pairs = {(d.shorthand, d.expansion) for d in derivations(node)}
    assert pairs == {("q", "quit"), ("qv", "quietV")}
    assert find_ambiguities(node) == []


def test_quoted_message_at_end_of_line():
    message = param("m", "message", seq(eol(), Emit('"%"')))
    node = seq(word("c", "commit"), argset(flag("a", "amend"), message))
    readings = {(d.shorthand, d.expansion) for d in derivations(node)}
    assert ("cm", 'commit --message="%"') in readings
    assert ("cm", "commit --message=%") not in readings
    assert ("cma", "commit --amend --message=%") in readings
    assert find_ambiguities(node) == []


def test_overlap_with_another_spelling_is_accepted():
    # "ab" reads X, while "ba" still gives Y and Z together
    node = set_(word("ab", "X"), word("a", "Y"), word("b", "Z"))
    assert find_ambiguities(node) == []


def test_unreachable_reading_is_reported():
    # the set eats the "m" the target would have used
    node = seq(set_(word("m", "M")), opt(word("m", "main")))
    assert find_ambiguities(node) == [Ambiguity("m", "M", ("main", "M"))]
