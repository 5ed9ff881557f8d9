# handcontainers

A small collection of containers and value types, each built by hand with
clear, predictable behaviour. Containers that track capacity (`Vector`,
`DynamicString`) expose it as a `capacity` property, so growth policies can
be observed directly.

| Module | What it gives you |
| --- | --- |
| `handcontainers.circular_buffer` | `CircularBuffer`, a fixed-capacity ring that overwrites the oldest item when full |
| `handcontainers.lru_cache` | `LRUCache`, a key/value cache that evicts the least recently used entry |
| `handcontainers.rational` | `Rational`, an immutable, always-normalised fraction with arithmetic operators |
| `handcontainers.any_value` | `AnyValue`, `any_cast` and `BadCastError`, a type-checked box for a value of any type |
| `handcontainers.smart_pointers` | `UniquePtr`, `SharedPtr`, `WeakPtr` and `ControlBlock` for explicit ownership with optional deleters |
| `handcontainers.linked_list` | `LinkedList`, a doubly linked list around a sentinel node |
| `handcontainers.block_deque` | `BlockDeque`, a double-ended queue stored in blocks of 16 items referenced from a growable map |
| `handcontainers.vector` | `Vector`, a growable array whose capacity doubles when full |
| `handcontainers.dynamic_string` | `DynamicString`, a mutable string with explicit capacity |

## Installation

```
pip install .
```

The package has no runtime dependencies. It needs Python 3.10 or later.
It is a library only: it installs no command-line program.

## Examples

```python
from handcontainers.circular_buffer import CircularBuffer

buffer = CircularBuffer(4)
for value in range(1, 10):
    buffer.push(value)
list(buffer)        # [6, 7, 8, 9]
buffer.pop()        # 6
buffer.capacity     # 4
```

```python
from handcontainers.lru_cache import LRUCache

cache = LRUCache(2)
cache.put(1, "A")
cache.put(2, "B")
cache.get(1)                # "A"
cache.put(3, "C")           # evicts key 2
cache.get(2, "missing")     # "missing"
```

```python
from handcontainers.rational import Rational

r = Rational(3, 5)
str(r + 2)                            # "13/5"
str(Rational(1, 3) + Rational(3, 6))  # "5/6"
Rational(1, 0)                        # raises ZeroDivisionError
```

```python
from handcontainers.any_value import AnyValue, any_cast

box = AnyValue(42)
any_cast(box, int)   # 42
any_cast(box, str)   # raises BadCastError
```

```python
from handcontainers.smart_pointers import SharedPtr, WeakPtr

shared = SharedPtr(10)
weak = WeakPtr(shared)
other = weak.lock()
shared.use_count()  # 2
```

```python
from handcontainers.vector import Vector

v = Vector(range(5))
v.insert(2, 999)    # 2
list(v)             # [0, 1, 999, 2, 3, 4]
v.capacity          # 10
```

```python
from handcontainers.dynamic_string import DynamicString

s = DynamicString("hello") + DynamicString("world")
str(s.substr(5, 5))  # "world"
s.find("lo")         # 3
```

## Errors

Operations on an empty container (`pop`, `front`, `back` and the like) and
out-of-range indices raise `IndexError`. `DynamicString.pop_back` on an
empty string does nothing. Invalid sizes or capacities raise `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```