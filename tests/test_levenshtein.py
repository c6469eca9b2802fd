import pytest

from vlrutil.levenshtein import (
    generalized_levenshtein_distance,
    generalized_levenshtein_distance_custom_cost,
)


def test_classic_worked_example():
    assert generalized_levenshtein_distance("kitten", "sitting") == 3


@pytest.mark.parametrize("text", ["", "a", "hello", "levenshtein"])
def test_identical_sequences_have_zero_distance(text):
    assert generalized_levenshtein_distance(text, text) == 0


@pytest.mark.parametrize("text", ["a", "abc", "some longer text"])
def test_distance_from_empty_is_length(text):
    assert generalized_levenshtein_distance("", text) == len(text)
    assert generalized_levenshtein_distance(text, "") == len(text)


@pytest.mark.parametrize(
    "a,b",
    [("kitten", "sitting"), ("flaw", "lawn"), ("abc", "cba"), ("", "xyz")],
)
def test_symmetric_with_unit_costs(a, b):
    assert generalized_levenshtein_distance(a, b) == generalized_levenshtein_distance(b, a)


@pytest.mark.parametrize(
    "a,b,c",
    [("kitten", "sitting", "mitten"), ("abc", "xbz", "yyy"), ("", "ab", "abc")],
)
def test_triangle_inequality(a, b, c):
    ab = generalized_levenshtein_distance(a, b)
    bc = generalized_levenshtein_distance(b, c)
    ac = generalized_levenshtein_distance(a, c)
    assert ac <= ab + bc


def test_expensive_replace_prefers_delete_and_insert():
    result = generalized_levenshtein_distance("a", "b", replace_cost=5)
    assert result == 2


def test_insert_cost_scales_for_empty_source():
    insert_cost = 3
    result = generalized_levenshtein_distance("", "abcd", insert_cost=insert_cost)
    assert result == insert_cost * len("abcd")


def test_delete_cost_scales_for_empty_target():
    delete_cost = 4
    result = generalized_levenshtein_distance("abc", "", delete_cost=delete_cost)
    assert result == delete_cost * len("abc")


def test_custom_cost_treating_everything_as_equal():
    result = generalized_levenshtein_distance_custom_cost(
        "abc", "xyz", 1, 1, lambda a, b: 0
    )
    assert result == 0


def test_custom_cost_case_insensitive():
    def delta(a, b):
        return 0 if a.lower() == b.lower() else 1

    assert generalized_levenshtein_distance_custom_cost("HeLLo", "hello", 1, 1, delta) == 0


def test_works_on_lists():
    assert generalized_levenshtein_distance([1, 2, 3], [1, 2, 3]) == 0
    assert generalized_levenshtein_distance([1, 2, 3], [1, 2]) == 1


def test_float_costs():
    result = generalized_levenshtein_distance("", "ab", insert_cost=0.5)
    assert result == pytest.approx(0.5 * 2)