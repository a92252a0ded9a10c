"""
Property-based tests for argument node matching.

Covers prefix matching of Fixed nodes, parse-based matching of Argument
nodes, the exhausted-input terminal case and recursion into children.
"""

from dataclasses import replace

import pytest
from hypothesis import given, settings, strategies as st, assume

from cmdtree.grammar import ArgumentNode, GrammarError, NodeKind, TypedValue, ValueKind


# Strategies for generating grammar trees

leaf_nodes = st.one_of(
    st.integers(min_value=0, max_value=255).map(ArgumentNode.fixed_u8),
    st.floats(width=32, allow_nan=False).map(ArgumentNode.fixed_f32),
    st.text(max_size=6).map(ArgumentNode.fixed_text),
    st.just(ArgumentNode.any_u8()),
    st.just(ArgumentNode.any_f32()),
    st.just(ArgumentNode.any_text()),
)


def _with_children(children_strategy):
    return st.tuples(leaf_nodes, st.lists(children_strategy, max_size=3)).map(
        lambda pair: replace(pair[0], children=tuple(pair[1]))
    )


node_trees = st.recursive(leaf_nodes, _with_children, max_leaves=12)


class TestFixedNodes:

    def test_exact_and_prefix_match(self):
        node = ArgumentNode.fixed_text("clear")
        assert node.match_input("clear") == ["clear"]
        assert node.match_input("cl") == ["clear"]

    def test_mismatch(self):
        node = ArgumentNode.fixed_text("clear")
        assert node.match_input("xyz") == []
        assert node.match_input("Clear") == []
        assert node.match_input("clearer") == []

    def test_numeric_literals_match_their_rendered_form(self):
        assert ArgumentNode.fixed_u8(42).match_input("4") == ["42"]
        assert ArgumentNode.fixed_f32(1.5).match_input("1.") == ["1.5"]
        assert ArgumentNode.fixed_f32(1.0).match_input("1.0") == []

    def test_leaf_with_exhausted_input_yields_label(self):
        assert ArgumentNode.fixed_text("clear").match_input("") == ["clear"]


class TestArgumentNodes:

    def test_u8_argument(self):
        node = ArgumentNode.any_u8()
        assert node.match_input("42") == ["Any u8"]
        assert node.match_input("abc") == []
        assert node.match_input("300") == []

    def test_f32_argument(self):
        node = ArgumentNode.any_f32()
        assert node.match_input("2.5") == ["Any f32"]
        assert node.match_input("two") == []

    def test_text_argument_accepts_anything(self):
        node = ArgumentNode.any_text()
        assert node.match_input("hello world") == ["Any String"]

    def test_leaf_with_exhausted_input_yields_label(self):
        assert ArgumentNode.any_u8().match_input("") == ["Any u8"]
        assert ArgumentNode.any_text().match_input("") == ["Any String"]

    def test_numeric_argument_with_children_rejects_empty_input(self):
        node = ArgumentNode.any_u8(ArgumentNode.fixed_text("x"))
        assert node.match_input("") == []

    def test_text_argument_with_children_accepts_empty_input(self):
        node = ArgumentNode.any_text(ArgumentNode.fixed_text("x"))
        assert node.match_input("") == ["Any String", "x"]


class TestRecursion:
    """
    Children are matched after their parent, with the same remaining input.

    The root-only traversal that stopped at the first level is a fixed
    defect: every test here reaches beyond depth one.
    """

    def test_empty_input_reaches_children(self):
        node = ArgumentNode.fixed_text("port", ArgumentNode.any_u8())
        assert node.match_input("") == ["port", "Any u8"]

    def test_children_see_the_same_input(self):
        node = ArgumentNode.fixed_text("port", ArgumentNode.fixed_text("portal"))
        assert node.match_input("por") == ["port", "portal"]

    def test_child_rejection_does_not_affect_parent(self):
        node = ArgumentNode.fixed_text("port", ArgumentNode.any_u8())
        assert node.match_input("po") == ["port"]

    def test_parent_rejection_skips_children(self):
        node = ArgumentNode.fixed_text("port", ArgumentNode.any_text())
        assert node.match_input("x") == []

    def test_three_levels(self):
        node = ArgumentNode.fixed_text(
            "a",
            ArgumentNode.fixed_text("ab", ArgumentNode.fixed_text("abc")),
            ArgumentNode.fixed_text("b"),
        )
        assert node.match_input("a") == ["a", "ab", "abc"]
        assert node.match_input("") == ["a", "ab", "abc", "b"]

    def test_children_in_declared_order_without_dedup(self):
        node = ArgumentNode.any_text(
            ArgumentNode.fixed_text("z"),
            ArgumentNode.fixed_text("z"),
            ArgumentNode.any_text(),
        )
        assert node.match_input("z") == ["Any String", "z", "z", "Any String"]


class TestConstruction:

    def test_fixed_without_value_rejected(self):
        with pytest.raises(GrammarError):
            ArgumentNode.fixed(ValueKind.TEXT, None)
        with pytest.raises(GrammarError):
            ArgumentNode(NodeKind.FIXED, TypedValue(ValueKind.U8))

    def test_argument_with_value_rejected(self):
        with pytest.raises(GrammarError):
            ArgumentNode(NodeKind.ARGUMENT, TypedValue(ValueKind.U8, 3))

    def test_invalid_literal_rejected(self):
        with pytest.raises(GrammarError):
            ArgumentNode.fixed_u8(300)

    def test_non_node_child_rejected(self):
        with pytest.raises(GrammarError):
            ArgumentNode.fixed_text("a", "b")

    def test_with_child_returns_new_node(self):
        parent = ArgumentNode.fixed_text("net")
        child = ArgumentNode.any_u8()
        extended = parent.with_child(child)

        assert parent.children == ()
        assert extended.children == (child,)
        assert extended.value == parent.value

    def test_nodes_are_immutable(self):
        node = ArgumentNode.fixed_text("a")
        with pytest.raises(AttributeError):
            node.children = (ArgumentNode.any_u8(),)


@settings(max_examples=200)
@given(value=st.text(max_size=8), typed=st.text(max_size=8))
def test_fixed_match_iff_prefix(value: str, typed: str):
    """A Fixed text node matches exactly when its value starts with the input."""
    result = ArgumentNode.fixed_text(value).match_input(typed)
    assert bool(result) == value.startswith(typed)
    if result:
        assert result == [value]


@settings(max_examples=200)
@given(value=st.integers(min_value=0, max_value=255), typed=st.text(alphabet="0123456789+-x", max_size=4))
def test_fixed_u8_match_iff_prefix(value: int, typed: str):
    result = ArgumentNode.fixed_u8(value).match_input(typed)
    assert bool(result) == str(value).startswith(typed)


@settings(max_examples=200)
@given(
    kind=st.sampled_from(list(ValueKind)),
    typed=st.one_of(st.text(min_size=1, max_size=8), st.integers().map(str), st.floats().map(str)),
)
def test_argument_match_iff_parses(kind: ValueKind, typed: str):
    """An Argument node matches non-empty input exactly when the input parses as its kind."""
    result = ArgumentNode.argument(kind).match_input(typed)
    assert bool(result) == (kind.parse(typed) is not None)
    if result:
        assert result == [kind.label]


@settings(max_examples=100)
@given(tree=node_trees, typed=st.text(alphabet="0123456789.abc", max_size=4))
def test_matching_is_idempotent(tree: ArgumentNode, typed: str):
    """Matching the same tree with the same input always gives the same ordered result."""
    assert tree.match_input(typed) == tree.match_input(typed)


@settings(max_examples=100)
@given(tree=node_trees, typed=st.text(alphabet="0123456789.abc", max_size=4))
def test_first_candidate_belongs_to_the_root(tree: ArgumentNode, typed: str):
    """Any non-empty result starts with the root's own candidate."""
    result = tree.match_input(typed)
    assume(result)
    assert result[0] == tree.representative_string()
