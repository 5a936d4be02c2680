# algopractice

Compact implementations of classic interview-style algorithms, built on
plain Python data types. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algopractice.trees`

`TreeNode(val=0, left=None, right=None)` is a binary tree node. The module
provides these functions for working with it:

- traversals that return a list of values: `inorder`, `inorder_iter`,
  `preorder`, `preorder_iter`, `postorder`, `postorder_iter`. The `_iter`
  versions use an explicit stack rather than recursion. An empty tree
  (`None`) gives `[]`.
- `max_depth(root)` and `min_depth(root)` count the nodes on the longest and
  the shortest root-to-leaf path. `min_depth_bfs(root)` finds the shortest one
  by breadth-first search. An empty tree has depth 0.
- `sum_values(root)` adds up every value in the tree.
- `is_same_tree(p, q)` checks that two trees have the same shape and the
  same values.
- `find_value(root, val)` searches a binary search tree for a value.
- `flatten(root)` rearranges the tree in place into a chain linked through
  `right`, in preorder.
- `first_child(root)` returns the left child if there is one, otherwise the
  right child, otherwise the node itself. For `None` it returns `None`.

```python
from algopractice.trees import TreeNode, inorder, max_depth

root = TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3, TreeNode(5)))
print(inorder(root))    # [4, 2, 1, 5, 3]
print(max_depth(root))  # 3
```

### `algopractice.linked_lists`

`ListNode(val=0, next=None)` is a singly linked list node.
`ListNode.from_iterable(values)` builds a list and returns its head, or `None`
when there are no values. Iterating over a node yields the values from that
node to the end of the list.

- `merge_two_lists(list1, list2)` splices two sorted lists into one sorted
  list and reuses their nodes. When two values are equal, the node from
  `list2` comes first.
- `delete_duplicates(head)` removes, in place, each node whose value repeats
  the value of the node before it, and returns `head`.

```python
from algopractice.linked_lists import ListNode, merge_two_lists

merged = merge_two_lists(ListNode.from_iterable([1, 2, 3]),
                         ListNode.from_iterable([1, 3, 4]))
print(list(merged))  # [1, 1, 2, 3, 3, 4]
```

### `algopractice.arrays`

- `find_max(values)` returns the largest value, or `0` for an empty sequence.
- `merge_sorted(nums1, m, nums2, n)` copies the first `n` items of `nums2`
  into `nums1`, starting at position `m`, and then sorts `nums1` in place. It
  raises `ValueError` if `m` or `n` is negative, if `nums2` holds fewer than
  `n` items, or if `nums1` cannot hold `m + n` items.
- `remove_duplicates(nums)` moves one value from each run of equal values to
  the front of `nums` and returns how many there are.
- `remove_element(nums, val)` moves every item that is not equal to `val` to
  the front of `nums` and returns how many there are.

In `remove_duplicates` and `remove_element`, the items after the returned
length are left as they were.

### `algopractice.text`

- `reverse_string(text)` returns the text reversed. It raises `ValueError`
  for an empty string.
- `reverse_string_recursive(text)` returns the text reversed, built
  recursively. An empty string gives `""`.
- `roman_to_int(s)` converts a Roman numeral to an integer. It raises
  `ValueError` for an empty string or for a character that is not a Roman
  numeral.
- `str_str(haystack, needle)` returns the index of the first occurrence of
  `needle` in `haystack`, or `-1` if there is none.

```python
from algopractice.text import roman_to_int, str_str

print(roman_to_int("LVIII"))  # 58
print(str_str("sado", "sad"))  # 0
```

### `algopractice.counting`

`climb_stairs(n)` counts the ways to climb `n` steps taking one or two steps
at a time. For `n` of 1 or less it returns 1.

## What is not included

This is a library only. It has no command-line program. Nothing in it
generates random input or prints results; you call the functions and use
the values they return.