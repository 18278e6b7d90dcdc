"""Operations that rearrange, combine or reorder linked lists."""

from __future__ import annotations

from typing import Optional

from nodechain.node import ListNode


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        following = node.next
        node.next = prev
        prev = node
        node = following
    return prev


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``left`` to ``right`` in place.

    Raises ValueError when the positions fall outside the list.
    """
    if head is None or left >= right:
        return head
    length = sum(1 for _ in head)
    if left < 1 or right > length:
        raise ValueError(
            f"positions {left}..{right} out of range for a list of {length}"
        )

    dummy = ListNode(0, head)
    prev = dummy
    for _ in range(left - 1):
        prev = prev.next
    current = prev.next
    for _ in range(right - left):
        moved = current.next
        current.next = moved.next
        moved.next = prev.next
        prev.next = moved
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right and return its new head."""
    if head is None or head.next is None:
        return head
    if k < 0:
        raise ValueError("rotation must not be negative")
    nodes = list(head)
    k %= len(nodes)
    if k == 0:
        return head
    new_tail = nodes[len(nodes) - k - 1]
    new_head = new_tail.next
    nodes[-1].next = head
    new_tail.next = None
    return new_head


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Move nodes below ``x`` before the others, keeping relative order."""
    if head is None or head.next is None:
        return head
    less_head = ListNode(0)
    greater_head = ListNode(0)
    less, greater = less_head, greater_head
    node = head
    while node is not None:
        if node.val < x:
            less.next = node
            less = node
        else:
            greater.next = node
            greater = node
        node = node.next
    greater.next = None
    less.next = greater_head.next
    return less_head.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the values of the list in ascending order, in place."""
    if head is None or head.next is None:
        return head
    nodes = list(head)
    for node, value in zip(nodes, sorted(node.val for node in nodes)):
        node.val = value
    return head


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take ``list1`` first."""
    dummy = ListNode(0)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            tail = list1
            list1 = list1.next
        else:
            tail.next = list2
            tail = list2
            list2 = list2.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry > 0:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next