# nodechain

A small library of algorithms on singly linked lists. Each function works on
chains of `ListNode` objects. Most functions relink or change the nodes they
are given in place and return the head of the result. `add_two_numbers` builds
a new chain.

## Nodes

`nodechain.node.ListNode` is a dataclass with two fields: `val` (default `0`)
and `next` (default `None`). Nodes compare by identity, so two distinct nodes
that hold the same value are not equal. Iterating over a node yields that node
and every node after it. On a chain with a cycle the iteration never ends.

```python
from nodechain.node import ListNode, build, to_list

head = build([1, 2, 3, 4, 5])
to_list(head)               # [1, 2, 3, 4, 5]
[n.val for n in head]       # [1, 2, 3, 4, 5]
build([])                   # None
to_list(None)               # []
```

## Traversal (`nodechain.traversal`)

These functions only read the chain. None of them changes it.

```python
from nodechain.node import build
from nodechain.traversal import (
    has_cycle, detect_cycle, get_intersection_node, middle_node, is_palindrome,
)

head = build([1, 2, 3, 2, 1])
is_palindrome(head)      # True
middle_node(head).val    # 3
has_cycle(head)          # False
detect_cycle(head)       # None
```

- `has_cycle(head)` reports whether the chain loops back on itself.
- `detect_cycle(head)` returns the node where the cycle begins. If there is no
  cycle it returns `None`.
- `get_intersection_node(head_a, head_b)` returns the first node that both
  chains share. If they share none, or if either chain is `None`, it returns
  `None`.
- `middle_node(head)` returns the middle node. For an even length it returns
  the second of the two middle nodes.
- `is_palindrome(head)` reports whether the values read the same in both
  directions.

## Reordering (`nodechain.reorder`)

```python
from nodechain.node import build, to_list
from nodechain.reorder import (
    reverse_list, reverse_between, rotate_right, partition,
    sort_list, merge_two_lists, add_two_numbers,
)

to_list(reverse_list(build([1, 2, 3])))                        # [3, 2, 1]
to_list(reverse_between(build([1, 2, 3, 4, 5]), 2, 4))         # [1, 4, 3, 2, 5]
to_list(rotate_right(build([1, 2, 3, 4, 5]), 2))               # [4, 5, 1, 2, 3]
to_list(partition(build([1, 4, 3, 2, 5, 2]), 3))               # [1, 2, 2, 4, 3, 5]
to_list(sort_list(build([4, 2, 1, 3])))                        # [1, 2, 3, 4]
to_list(merge_two_lists(build([1, 2, 4]), build([1, 3, 4])))   # [1, 1, 2, 3, 4, 4]
to_list(add_two_numbers(build([2, 4, 3]), build([5, 6, 4])))   # [7, 0, 8]
```

- `reverse_between(head, left, right)` uses 1-based positions. It raises
  `ValueError` when `left < right` and the positions fall outside the chain.
  When `left >= right` the chain comes back unchanged.
- `rotate_right(head, k)` takes `k` modulo the length of the chain. It raises
  `ValueError` for a negative `k` on a chain of two or more nodes.
- `partition(head, x)` moves the nodes below `x` in front of the others. Both
  groups keep their original order.
- `sort_list(head)` sorts the values in place. The nodes stay in the same
  order and take new values.
- `merge_two_lists(list1, list2)` splices two sorted chains into one. When two
  values are equal, the node from `list1` comes first.
- `add_two_numbers(l1, l2)` treats each chain as the digits of a number, least
  significant digit first. It returns their sum as a new chain in the same
  form.

## Removal (`nodechain.removal`)

```python
from nodechain.node import build, to_list
from nodechain.removal import (
    remove_nth_from_end, remove_elements, delete_node, delete_duplicates,
)

to_list(remove_nth_from_end(build([1, 2, 3, 4, 5]), 2))  # [1, 2, 3, 5]
to_list(remove_elements(build([1, 2, 6, 3, 6]), 6))     # [1, 2, 3]
to_list(delete_duplicates(build([1, 1, 2, 3, 3])))       # [1, 2, 3]

head = build([4, 5, 1, 9])
delete_node(head.next)   # removes the value 5
to_list(head)            # [4, 1, 9]
```

- `remove_nth_from_end(head, n)` raises `ValueError` when `n` is below 1. It
  raises `IndexError` when the chain has fewer than `n` nodes.
- `remove_elements(head, val)` drops every node that holds `val`.
- `delete_duplicates(head)` collapses each run of equal adjacent values into a
  single node.
- `delete_node(node)` removes a node when only that node is at hand, without
  its predecessor. The node copies the value and link of its successor, so it
  cannot be the last node. For the last node it raises `ValueError`.

## Scope

This is a library only. It has no command-line interface, and it does not
read lists from files or save them.