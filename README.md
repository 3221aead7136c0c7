# adtkit

This package provides classic abstract data types and a few small programs built on them. The caller supplies the ordering or hashing function for each container.

## Containers

- `adtkit.vector.Vector(size=0, destroy_value=None)` is a growable array. `size` sets the number of slots it starts with, and each slot holds `None`.
  - Element access is positional through `vec[i]` and `vec[i] = x`. Both raise `IndexError` when the position is out of range.
  - It also has `append`, `remove_last`, `find`, `find_index`, `clear` and `capacity()`, and supports iteration and `reversed()`.
  - The capacity starts at 10 or more and doubles when the vector is full. It halves when more than three quarters of it are empty, but never drops below 20.
- `adtkit.linked_list.LinkedList(destroy_value=None)` is a singly linked list.
  - `insert_next(node, value)` and `remove_next(node)` work on the position *after* a `ListNode`. `None` stands for the position before the first node.
  - `insert_next` returns the new node. `remove_next` raises `IndexError` when there is no node to remove.
  - It also has `first()`, `last()`, `next_node(node)`, `find`, `find_node`, `clear`, `len()` and iteration over the values.
- `adtkit.hash_map.HashMap(compare=default_compare, destroy_key=None, destroy_value=None, hash_func=None)` is a hash table that uses open addressing and linear probing.
  - Table sizes come from a fixed list of primes, starting at 53. The table grows once the count of live and deleted slots passes half the table.
  - It has `insert`, `remove` (which returns whether the key was found), `find`, `find_node`, `items()`, `in`, iteration over the keys, `clear`, `capacity()` and `set_hash_function`.
  - `set_hash_function` re-places every key that is already stored.
  - The module provides three hash functions:
    - `hash_string` is djb2 over UTF-8, reduced to 32 bits.
    - `hash_int` is the integer reduced to 32 bits.
    - `hash_pointer` hashes by object identity.
  - When no hash function is given, the map uses Python's `hash`.
- `adtkit.priority_queue.PriorityQueue(compare=default_compare, destroy_value=None, values=None)` is a binary max-heap.
  - It has `max()`, `insert`, `remove_max`, `clear` and `len()`.
  - `max()` and `remove_max()` raise `IndexError` on an empty queue.
- `adtkit.int_vector.IntVector(size=0)` is a vector that holds only integers. A new one starts filled with `0`.
  - Storing anything other than an integer raises `TypeError`.
  - `find(value)` returns `INT_MIN` (-2**31) when the value is absent.

Compare functions are three-way: they return a negative number, zero or a positive number. `adtkit.common.default_compare` uses the natural ordering.

Each container accepts destroy callbacks, and `set_destroy_value` (plus `set_destroy_key` on maps) replaces the callback and returns the previous one.
- The container calls the callback for every element it removes.
- It also calls it when it replaces an element with a different object.
- It never passes `None` to the callback.

```python
from adtkit.common import default_compare
from adtkit.hash_map import HashMap, hash_int
from adtkit.priority_queue import PriorityQueue

m = HashMap(default_compare, None, None, hash_int)
m.insert(1, "one")
assert m.find(1) == "one"
assert m.remove(1) and m.find(1) is None

pq = PriorityQueue(default_compare, None, [3, 1, 2])
assert pq.max() == 3
pq.remove_max()
assert pq.max() == 2
```

## Programs

- `adtkit.fibonacci.fibonacci(n)` returns the n-th Fibonacci number. `fibonacci(0)` is 0 and `fibonacci(1)` is 1.
  - The function keeps a memo between calls, and `fibonacci_reset()` clears it.
  - A negative `n` raises `ValueError`.
- `adtkit.pair_sum.pair_sum(target, numbers)` returns a pair `(a, b)` from `numbers` with `a + b == target`, where `b` occurs earlier in the sequence. It returns `None` when there is no such pair.
- `adtkit.io` moves whole files in and out of vectors of lines:
  - `read_stream_as_vector` and `read_file_as_vector` return a `Vector` with one line per element and the newline removed. `read_file_as_vector` raises `OSError` if the file cannot be read.
  - `write_vector_to_stream` and `write_vector_to_file` write each string followed by a newline and return the number of characters written.

## Command

```
adtkit-cat [FILE ...]
```

The command prints each file in turn. With no arguments, or with `-` as a file name, it reads standard input. If a file cannot be read, it prints `cat: FILE: cannot read file` to standard error and goes on with the next file. It always exits with status 0.

## What it does not include

The package has no ordered set, stack, plain FIFO queue, graph or binary tree type. Its only containers are the ones listed above.

## Tests

```
pip install -e .[test]
pytest
```