"""Read-only walks over linked lists: cycles, intersections, middles."""

from __future__ import annotations

from typing import Optional

from nodechain.node import ListNode, to_list


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return whether the list starting at ``head`` loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or ``None`` if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Return whether the values read the same forwards and backwards."""
    values = to_list(head)
    return values == values[::-1]