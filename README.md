# algopack

A collection of classic algorithms and data structures in plain Python,
with no runtime dependencies. Python 3.10 or later is required.

## Installation

```
pip install algopack
```

## What is inside

| Module | Contents |
| --- | --- |
| `algopack.bits` | Operations on signed 8-bit values (-128..127) that wrap like an 8-bit register: `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `is_even`, `is_positive`, `multiply_by_two`, `divide_by_two`, `twos_complement`, `multiply_signed`, `multiply_unsigned`, `count_ones`, `bit_distance`, `bits_length`, `is_power_of_two` |
| `algopack.ciphers` | `caesar`, `rot13`, `transposition` |
| `algopack.containers` | `Queue` (FIFO) and `Stack` (LIFO) |
| `algopack.linked_list` | `LinkedList` and `EmptyListError` |
| `algopack.nqueens` | `nqueens`, `solve_nq_util`, `is_safe` |
| `algopack.kmp` | `knuth_morris_pratt`, `precompute_table` |
| `algopack.sequences` | `edit_distance`, `edit_distance_se`, `longest_common_subsequence` |
| `algopack.optimization` | `coin_problem`, `egg_drop`, `knapsack`, `rod_cutting`, `rod_cutting_recursive` |
| `algopack.graphs` | `Vertex`, `Edge`, `Graph`, `breadth_first_search`, `depth_first_search` |
| `algopack.sorting` | `is_sorted`, `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `heap_sort`, `quick_sort`, `merge_sort` |
| `algopack.distribution_sort` | `counting_sort`, `radix_sort` |

## Notes on behaviour

- `algopack.bits` functions raise `ValueError` for values outside the
  signed 8-bit range or bit positions outside 0..7. `multiply_unsigned` and
  `bits_length` raise `OverflowError` when the result would not fit.
- `caesar` rotates only ASCII letters and keeps their case; `rot13` and
  `transposition` upper-case their input first. `transposition` pads with
  `'X'` and raises `ValueError` for an empty key.
- `Queue.dequeue`, `Queue.peek`, `Stack.pop` and `Stack.peek` return `None`
  when the container is empty. `LinkedList.pop_first` and
  `LinkedList.pop_last` raise `EmptyListError` (a subclass of `IndexError`);
  `peek_first` and `peek_last` return `None`. `LinkedList.drain()` yields
  and removes values from the front.
- `nqueens(n)` returns a board of `'-'` and `'Q'` cells; when no placement
  is found it issues a `RuntimeWarning` and returns the empty board.
- `knuth_morris_pratt`, `edit_distance` and `edit_distance_se` work on the
  UTF-8 bytes of `str` arguments (they also accept `bytes`), so offsets and
  distances are counted in bytes. `longest_common_subsequence` works by
  character.
- `knapsack` returns `(best_value, total_weight, items)` with 1-based item
  indices.
- `Graph` is directed; it accepts plain integers for vertices and
  `(source, target)` pairs for edges. The searches return whether `end` is
  reachable from `start`.
- All sorts in `algopack.sorting` except `merge_sort` sort the list in
  place; `merge_sort` returns a new list. `counting_sort` returns a new,
  stable list ordered by a non-negative integer `key` (the items
  themselves by default); `radix_sort` sorts non-negative integers in
  place.

## Examples

```python
from algopack.ciphers import caesar, rot13, transposition

caesar("one sheep two sheep", 3)    # 'rqh vkhhs wzr vkhhs'
rot13("hello world")                # 'URYYB JBEYQ'
transposition("key", "lorem")       # 'OMLERX'
```

```python
from algopack.sequences import edit_distance, longest_common_subsequence
from algopack.optimization import knapsack, coin_problem

edit_distance("My Cat", "My Case")                     # 2
longest_common_subsequence("aggtab", "gxtxayb")        # 'gtab'
coin_problem(12, [1, 5, 10])                           # 4
knapsack(26, [12, 7, 11, 8, 9], [24, 13, 23, 15, 16])  # (51, 26, [2, 3, 4])
```

```python
from algopack.linked_list import LinkedList

items = LinkedList()
items.extend([2, 5, 6])
items.add_first(1)
items.pop_last()     # 6
len(items)           # 3
```

```python
from algopack.graphs import Graph, breadth_first_search

graph = Graph([1, 2, 3], [(1, 2), (2, 3)])
breadth_first_search(graph, 1, 3)   # True
breadth_first_search(graph, 3, 1)   # False
```

```python
from algopack.sorting import quick_sort, merge_sort, is_sorted

data = [5, 4, 1, 6, 0]
quick_sort(data)       # sorts in place
is_sorted(data)        # True
merge_sort([3, 1, 2])  # returns a new list: [1, 2, 3]
```

```python
from algopack.kmp import knuth_morris_pratt

knuth_morris_pratt("abababa", "ab")  # [0, 2, 4]
```

## What it does not do

algopack is a library only: it has no command-line interface and keeps no
state beyond the objects you create.

## Running the tests

```
pip install -e ".[test]"
pytest
```