import pytest

from nodechain.node import ListNode, build, to_list


def test_build_empty_returns_none():
    assert build([]) is None
    assert to_list(None) == []


@pytest.mark.parametrize(
    "values",
    [[1], [1, 2], [5, 4, 3, 2, 1], [0, -1, 0, 7], list(range(50))],
)
def test_round_trip(values):
    assert to_list(build(values)) == values


def test_build_links_in_order():
    head = build([1, 2, 3])
    assert head.val == 1
    assert head.next.val == 2
    assert head.next.next.val == 3
    assert head.next.next.next is None


def test_build_accepts_any_iterable():
    assert to_list(build(iter(range(5)))) == list(range(5))


def test_default_node():
    node = ListNode()
    assert node.val == 0
    assert node.next is None


def test_iteration_yields_nodes():
    head = build([3, 1, 4])
    nodes = list(head)
    assert len(nodes) == 3
    assert nodes[0] is head
    assert nodes[1] is head.next
    assert nodes[2] is head.next.next


def test_nodes_compare_by_identity():
    first = ListNode(1)
    second = ListNode(1)
    assert (first == second) is False
    assert first == first


def test_repr_is_safe_on_cycle():
    node = ListNode(7)
    node.next = node
    assert repr(node) == "ListNode(val=7)"