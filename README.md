# algobox

A small library of classic algorithms and data structures in plain Python,
with no runtime dependencies.

## Contents

| Module | What it provides |
| --- | --- |
| `algobox.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort_halving`, `shell_sort_knuth`, `merge_sort`, `heap_sort`, `heap_sort_descending`, `quick_sort`, `quick_sort_iterative`, `quick_sort_median_of_three`, `counting_sort`, `radix_sort`, `bucket_sort` |
| `algobox.search` | `binary_search`, `binary_search_recursive` |
| `algobox.dp` | `knapsack`, `edit_distance`, `lcs_length`, `lis_length` |
| `algobox.arith` | `gcd`, `pow_mod`, `pow_mod_linear`, `prime_table`, `russian_peasant`, `russian_peasant_recursive` |
| `algobox.strmatch` | `prefix_table`, `kmp_search`, `naive_search` |
| `algobox.fifo` | `Queue` |
| `algobox.stacks` | `ArrayStack` (fixed capacity), `LinkedStack` |
| `algobox.linked_list` | `Node` and functions over singly linked lists |
| `algobox.bst` | `BinarySearchTree` |
| `algobox.traversal` | `TreeNode` with recursive and iterative traversals |
| `algobox.avl` | `AVLNode`, `AVLTree` |
| `algobox.rbtree` | `Color`, `RBNode`, `RedBlackTree` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting and searching

Every sorting function takes an iterable and returns a new sorted list; the
input is left unchanged.

```python
from algobox.sorting import quick_sort, heap_sort_descending, counting_sort, bucket_sort
from algobox.search import binary_search

quick_sort([5, 3, 9, 1])                # [1, 3, 5, 9]
heap_sort_descending([5, 3, 9, 1])      # [9, 5, 3, 1]
counting_sort([3, 2, 2, 1, 5, 0])       # [0, 1, 2, 2, 3, 5]
bucket_sort([0.78, 0.17, 0.39, 0.26])   # [0.17, 0.26, 0.39, 0.78]
binary_search([2, 4, 6, 8], 6)          # 2
binary_search([2, 4, 6, 8], 5)          # -1
```

`counting_sort` and `radix_sort` accept non-negative integers only and raise
`ValueError` otherwise; `bucket_sort` raises `ValueError` for values outside
`[0, 1)`.

## Dynamic programming, arithmetic and string matching

```python
from algobox.dp import knapsack, edit_distance, lcs_length, lis_length
from algobox.arith import gcd, pow_mod, prime_table, russian_peasant
from algobox.strmatch import prefix_table, kmp_search, naive_search

knapsack([10, 20, 30, 40], [100, 300, 350, 420], 60)  # 750
edit_distance("kitten", "sitting")                     # 3
lcs_length("abcde", "ace")                             # 3
lis_length([21, 30, 15, 18, 19, 36, 15, 22, 50])       # 5

gcd(128, 56)                 # 8
pow_mod(2, 10, 1000)         # 24
prime_table(20)              # [2, 3, 5, 7, 11, 13, 17, 19]
russian_peasant(26, 47)      # 1222

prefix_table("ababaca")              # [0, 0, 1, 2, 3, 0, 1]
kmp_search("aab", "acaabcabaabbc")   # [2, 8]
naive_search("aab", "acaabcabaabbc") # [2, 8]
```

`pow_mod` and `pow_mod_linear` raise `ValueError` for a negative exponent;
the `russian_peasant` functions raise `ValueError` when the first factor is
not positive. The search functions report overlapping matches too.

## Data structures

```python
from algobox.fifo import Queue
from algobox.stacks import ArrayStack, LinkedStack

q = Queue()
q.push(10)
q.push(20)
q.top()      # 10
q.pop()      # 10
len(q)       # 1

s = ArrayStack(20)
s.push(7)
s.is_full()  # False
s.pop()      # 7
```

Popping or reading the top of an empty `Queue`, `ArrayStack` or
`LinkedStack` raises `IndexError`. An `ArrayStack` needs a capacity of at
least 5 (`ValueError` otherwise) and raises `OverflowError` when pushed past
it.

Linked lists are chains of `Node`; functions that change a list take its
head and return the new head, and an empty list is `None`:

```python
from algobox.linked_list import build_sorted, insert_sorted, reverse, to_list

head = build_sorted([30, 10, 20])
head = insert_sorted(head, 15)
to_list(head)            # [10, 15, 20, 30]
to_list(reverse(head))   # [30, 20, 15, 10]
```

The module also offers `build_head_insert`, `build_tail_insert`,
`random_values`, `delete_value`, `delete_duplicates`, `find_middle`,
`merge_sorted`, `has_cycle` and `intersection_node`.

## Trees

```python
from algobox.bst import BinarySearchTree
from algobox.avl import AVLTree
from algobox.rbtree import RedBlackTree
from algobox.traversal import TreeNode, inorder, level_order

bst = BinarySearchTree([12, 2, 34, 18])
bst.min(), bst.max()     # (2, 34)
18 in bst                # True

avl = AVLTree([10, 22, 35, 44, 58, 27, 8, 23, 30])
avl.preorder()           # [35, 22, 10, 8, 27, 23, 30, 44, 58]
avl.delete(44)
avl.preorder()           # [22, 10, 8, 35, 27, 23, 30, 58]

rb = RedBlackTree([7, 6, 5, 4, 3, 2, 1])
rb.preorder()            # [6, 4, 2, 1, 3, 5, 7]
rb.inorder()             # [1, 2, 3, 4, 5, 6, 7]

root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3, TreeNode(6)))
inorder(root)            # [4, 2, 5, 1, 6, 3]
level_order(root)        # [1, 2, 3, 4, 5, 6]
```

`BinarySearchTree` and `AVLTree` ignore values already present;
`RedBlackTree` keeps duplicates and its `find` returns the node
(`RBNode`, with its `color`) rather than the value. `min` (and `max` on
`BinarySearchTree`) raises `ValueError` on an empty tree; deleting an absent
value does nothing.

## What this package does not do

It is a library only: there is no command-line program and nothing reads
input or prints results. Call the functions from your own code.