# dsakit

A small library of classic data structures and algorithms in plain Python, with no
third-party dependencies.

## Installation

```
pip install dsakit
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.dynamic_array` | `DynamicArray`: a growable array whose `capacity()` doubles when full; `push`, `replace`, `insert`, `pop`, `get` |
| `dsakit.array_ops` | `remove_elements`, `merge_sorted`, `move_zeroes`, `reverse_string`, `reverse_string_swapping`, `reverse_string_recursive`, `has_common_item`, `has_common_item_fast`, `find_pair_with_sum`, `find_pair_with_sum_sorted`, `find_pair_with_sum_unsorted` |
| `dsakit.searching` | `linear_search`, `binary_search` (both return an index or `None`) |
| `dsakit.sorting` | `bubble_sort`, `better_bubble_sort`, `heapify`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsakit.recursion` | `factorial`, `fibonacci`, `fibonacci_series`, `fibonacci_iterative` |
| `dsakit.hashing` | `HashTable` (open addressing with linear probing, 128 slots by default), `first_recurring` |
| `dsakit.linked_list` | `LinkedList` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList`, with in-place `reverse()` and `reversed()` iteration |
| `dsakit.stacks` | `ArrayStack` (bounded, 128 by default), `LinkedStack`, `StackEmptyError`, `StackFullError` |
| `dsakit.queues` | `LinkedQueue`, `TwoStackQueue`, `QueueEmptyError` |
| `dsakit.priority_queue` | `PriorityQueue` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.graphs` | `Graph` (adjacency lists, `bfs`), `Edge`, `build_linked_adjacency`, `dfs_matrix`, `dijkstra`, `bellman_ford`, `NegativeCycleError` |

The sorting functions take any iterable and return a new sorted list; only `heapify`
works in place on a mutable sequence.

## Examples

Sorting and searching:

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search

values = merge_sort([10, 9, 8, 7, 6, 5, 4, 3, 2, 1])
index = binary_search(values, 7)   # 6
```

Containers support `len()`, iteration and `str()`:

```python
from dsakit.linked_list import LinkedList
from dsakit.stacks import ArrayStack

items = LinkedList([2, 4, 6, 8, 10])
items.insert(3, 4)          # element 3 at zero-based position 4
items.remove(1)             # remove uses one-based positions
print(list(items))          # [4, 6, 8, 3, 10]

stack = ArrayStack()
stack.push(12)
stack.push(11)
print(stack.peek())         # 11
```

A binary search tree:

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([20, 10, 30, 25, 40, 1])
tree.delete(30)
print(25 in tree, list(tree))   # True [1, 10, 20, 25, 40]
```

Shortest paths:

```python
from dsakit.graphs import Edge, bellman_ford, dijkstra

edges = [Edge(0, 1, -1), Edge(0, 2, 4), Edge(1, 2, 3)]
print(bellman_ford(3, edges, 0))            # [0, -1, 2]

matrix = [[0, 4, 1], [4, 0, 2], [1, 2, 0]]  # 0 means no edge
print(dijkstra(matrix, 0))                  # [0, 3, 1]
```

Unreachable vertices get `math.inf`.

## Errors

- `bellman_ford` raises `NegativeCycleError` when a negative-weight cycle is reachable
  from the source.
- Popping or peeking an empty stack raises `StackEmptyError`; pushing onto a full
  `ArrayStack` raises `StackFullError`.
- Taking from an empty `LinkedQueue`, `TwoStackQueue` or `PriorityQueue` raises
  `QueueEmptyError`.
- `HashTable.get`, `HashTable.remove` and `BinarySearchTree.delete` raise `KeyError`
  for a missing key; out-of-range positions raise `IndexError`.

## What it does not do

dsakit is a library only: it has no command-line program, and nothing in it reads
input from the terminal or stores data on disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```