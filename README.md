# structkit

Compact implementations of classic data structures, each with a small,
predictable API and errors that are raised rather than printed. The package
has no dependencies outside the standard library.

## Installation

```
pip install structkit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Names | Purpose |
| --- | --- | --- |
| `structkit.array` | `FixedArray`, `ArrayFullError` | Array with a fixed capacity: append, insert, edit, delete, get, find, fill, copy |
| `structkit.typed_array` | `TypedArray` | A `FixedArray` that accepts only values of one type |
| `structkit.deque` | `LinkedDeque`, `EmptyDequeError` | Double-ended queue on a doubly linked list |
| `structkit.graph` | `MatrixGraph` | Undirected graph stored as an adjacency matrix |
| `structkit.bst` | `BinarySearchTree` | Binary search tree without duplicates, with pre-, in- and post-order traversals |
| `structkit.clock` | `Time`, `bigger`, `sort_times_descending` | Ordered hour/minute/second values |
| `structkit.records` | `Employee`, `Book`, `KeyedPriorityQueue`, `KeyedSet` | Records, plus collections ordered by a key function |

## Examples

### Fixed-capacity array

```python
from structkit.array import FixedArray, ArrayFullError

arr = FixedArray(3)
arr.append(1)
arr.append(3)
arr.insert(1, 2)        # [1, 2, 3]
arr.get(0)              # 1
arr.find(3)             # 2
arr.find(99)            # -1
arr.is_full()           # True
len(arr)                # 3

try:
    arr.append(4)
except ArrayFullError:
    pass

clone = arr.copy()
clone.edit(0, 10)
print(arr)              # 1 2 3
arr.delete(0)
print(arr)              # 2 3
```

- `insert` accepts any index from `0` to `len(arr)`; `edit`, `delete` and
  `get` accept `0` to `len(arr) - 1`. Other indices raise `IndexError`.
- Adding to a full array raises `ArrayFullError` (a subclass of `OverflowError`).
- `fill(values)` replaces the contents and needs exactly `capacity` values,
  otherwise it raises `ValueError`.
- `str()` of an empty array is `"Array is Empty"`.
- A capacity of zero or less gives an array that can hold nothing.

### Typed array

```python
from structkit.typed_array import TypedArray

words = TypedArray(str, 5)
words.fill(["you", "are", "an", "amazing", "person."])
words.append("!")       # raises ArrayFullError: the array is full
words.edit(0, 42)       # raises TypeError, the array is unchanged
```

`TypedArray` behaves like `FixedArray`, checks the type of every value passed
to `append`, `insert`, `edit` and `fill`, and exposes the type as `item_type`.

### Linked deque

```python
from structkit.deque import LinkedDeque

d = LinkedDeque([2, 3])
d.insert_front(1)
d.insert_rear(4)
d.peek_front(), d.peek_rear()   # (1, 4)
d.delete_front()
list(d)                         # [2, 3, 4]
list(reversed(d))               # [4, 3, 2]
d.clear()
d.is_empty()                    # True
```

Looking at an end of an empty deque raises `EmptyDequeError` (a subclass of
`IndexError`). Deleting from an empty deque does nothing.

### Adjacency-matrix graph

```python
from structkit.graph import MatrixGraph

g = MatrixGraph(4, [(0, 1), (1, 2)])
g.add_edge(2, 3)
g.has_edge(3, 2)        # True
g.neighbors(1)          # [0, 2]
g.edge_count()          # 3
g.rows()                # [(0, 1, 0, 0), (1, 0, 1, 0), (0, 1, 0, 1), (0, 0, 1, 0)]
```

Vertices are numbered `0 .. vertex_count - 1`; any other vertex raises
`IndexError`. `edge_count()` counts every call to `add_edge`, so adding the
same edge twice counts it twice.

### Binary search tree

```python
from structkit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(30)         # False: duplicates are ignored
tree.preorder()         # [50, 30, 20, 40, 70]
tree.inorder()          # [20, 30, 40, 50, 70]
tree.postorder()        # [20, 40, 30, 70, 50]
40 in tree              # True
len(tree)               # 5
list(tree)              # iterates in order: [20, 30, 40, 50, 70]
```

### Times

```python
from structkit.clock import Time, bigger, sort_times_descending

t1 = Time(12, 34, 56)
t2 = Time.parse("4 56 32")          # "4:56:32" works too
str(bigger(t1, t2))                 # "12 : 34 : 56"
t2.describe()                       # "4hr 56min 32sec"
sort_times_descending([t2, t1])     # [Time(12, 34, 56), Time(4, 56, 32)]
bigger(34, 56)                      # 56
```

`Time` values compare by hour, then minute, then second. `bigger(a, b)` works
for any values that support `<` and returns `a` when neither is smaller.

### Keyed collections

```python
from structkit.records import Employee, Book, KeyedPriorityQueue, KeyedSet

queue = KeyedPriorityQueue(key=lambda e: e.name)
queue.push(Employee(1, "Srijan", 10000))
queue.push(Employee(2, "Arjun", 65000))
queue.top().name        # "Srijan": the largest key comes first
queue.pop().name        # "Srijan"
len(queue)              # 1

books = KeyedSet(key=lambda b: b.book_id)
books.add(Book(1, "Atomic Habits", 120.30))      # True
books.add(Book(1, "Crack Interview", 1200.00))   # False: same key, ignored
len(books)              # 1

numbers = KeyedSet([12, 45, 67, 84, 7, 8, 3, 3, 12], reverse=True)
list(numbers)           # [84, 67, 45, 12, 8, 7, 3]
numbers.count(12)       # 1
numbers.erase_range(2, -2)   # removes positions 2..4, returns 3
list(numbers)           # [84, 67, 7, 3]
```

- Without a `key`, items are their own keys.
- Among items with equal keys, `KeyedPriorityQueue` returns the one pushed
  first; `pop` and `top` on an empty queue raise `IndexError`.
- `KeyedSet.discard(item)` removes the item with the same key and returns
  whether one was removed; `erase_range(start, stop)` follows slice rules.

## What the package does not do

structkit is a library only. It has no command-line program and never reads
from standard input: arrays are filled with `fill`, graphs get their edges
from a list or from `add_edge`, and times are built directly or with
`Time.parse`. Nothing is stored on disk. The graph offers no traversal or
search algorithms, and the search tree offers no removal of values.