"""Singly linked list nodes and conversions to and from Python sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list.

    Nodes compare by identity, so two distinct nodes holding the same value
    are different nodes.
    """

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        """Yield this node and every node after it.

        On a list with a cycle this never ends.
        """
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def build(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; ``None`` if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    if head is None:
        return []
    return [node.val for node in head]