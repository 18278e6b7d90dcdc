"""Operations that remove nodes from linked lists."""

from __future__ import annotations

from typing import Optional

from nodechain.node import ListNode


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node counted from the end and return the head.

    Raises ValueError when ``n`` is below 1 and IndexError when the list is
    shorter than ``n``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise IndexError(f"list has fewer than {n} nodes")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Drop every node holding ``val`` and return the new head."""
    dummy = ListNode(0)
    tail = dummy
    node = head
    while node is not None:
        if node.val != val:
            tail.next = node
            tail = node
        node = node.next
    tail.next = None
    return dummy.next


def delete_node(node: ListNode) -> None:
    """Delete ``node`` from its list given only the node itself.

    The node takes over its successor's value and link, so it cannot be the
    last node; that raises ValueError.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node")
    node.val = following.val
    node.next = following.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Collapse runs of equal adjacent values into one node each."""
    if head is None:
        return None
    tail = head
    node = head.next
    while node is not None:
        if node.val != tail.val:
            tail.next = node
            tail = node
        node = node.next
    tail.next = None
    return head