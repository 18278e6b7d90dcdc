import pytest

from nodechain.node import build
from nodechain.traversal import (
    detect_cycle,
    get_intersection_node,
    has_cycle,
    is_palindrome,
    middle_node,
)


def _with_cycle(values, pos):
    head = build(values)
    nodes = list(head)
    nodes[-1].next = nodes[pos]
    return head, nodes


@pytest.mark.parametrize("values", [[], [1], [1, 2], [3, 2, 0, -4]])
def test_has_cycle_false_for_plain_lists(values):
    assert has_cycle(build(values)) is False


@pytest.mark.parametrize(
    "values,pos", [([1], 0), ([1, 2], 0), ([3, 2, 0, -4], 1), ([1, 2, 3, 4, 5], 4)]
)
def test_has_cycle_true_for_cycles(values, pos):
    head, _ = _with_cycle(values, pos)
    assert has_cycle(head) is True


@pytest.mark.parametrize(
    "values,pos",
    [([1], 0), ([1, 2], 0), ([3, 2, 0, -4], 1), ([1, 2, 3, 4, 5, 6], 3)],
)
def test_detect_cycle_returns_entry(values, pos):
    head, nodes = _with_cycle(values, pos)
    assert detect_cycle(head) is nodes[pos]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
def test_detect_cycle_none_without_cycle(values):
    assert detect_cycle(build(values)) is None


def _join(prefix_values, common):
    head = build(prefix_values)
    list(head)[-1].next = common
    return head


def test_intersection_found():
    common = build([8, 4, 5])
    head_a = _join([4, 1], common)
    head_b = _join([5, 6, 1], common)
    assert get_intersection_node(head_a, head_b) is common
    assert get_intersection_node(head_b, head_a) is common


def test_intersection_absent():
    assert get_intersection_node(build([2, 6, 4]), build([1, 5])) is None
    assert get_intersection_node(build([1, 2]), build([1, 2])) is None


def test_intersection_with_empty_list():
    assert get_intersection_node(None, build([1])) is None
    assert get_intersection_node(build([1]), None) is None


def test_intersection_same_head():
    head = build([1, 2, 3])
    assert get_intersection_node(head, head) is head


@pytest.mark.parametrize("length", range(1, 9))
def test_middle_node(length):
    head = build(range(length))
    nodes = list(head)
    assert middle_node(head) is nodes[length // 2]


def test_middle_node_empty():
    assert middle_node(None) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2, 2, 1], [1, 2, 3, 2, 1]])
def test_palindromes(values):
    assert is_palindrome(build(values)) is True


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 2, 3]])
def test_non_palindromes(values):
    assert is_palindrome(build(values)) is False


def test_palindrome_leaves_list_intact():
    values = [1, 2, 3, 2, 1]
    head = build(values)
    is_palindrome(head)
    assert [node.val for node in head] == values