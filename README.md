# rpnkit

A small collection of classic containers and an infix-to-postfix converter.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Converting expressions to reverse Polish notation

`rpnkit.rpn.to_rpn` turns an infix expression built from single-letter
operands (ASCII letters), the operators `+ - * /` and parentheses into
reverse Polish notation. Operators of equal priority are emitted left to
right. Characters that are neither letters, operators nor parentheses
(spaces, digits, a trailing newline) are ignored, and an unmatched opening
parenthesis ends up in the output.

```python
from rpnkit.rpn import priority, to_rpn

to_rpn("a+b*c")      # "abc*+"
to_rpn("(a+b)*c")    # "ab+c*"
priority("*")        # 2
priority("+")        # 1
priority("(")        # 0
priority("x")        # -1
```

From the command line, pass a file whose first line holds the expression:

```
rpnkit expression.txt
```

The command reads at most the first 127 characters of the first line and
prints the result after the label `Обратная польская запись: `. If the file
cannot be opened it prints an error to standard error and exits with status
1; if the file is empty it prints `Error open file?` and exits with status 0.

### What it does not do

The converter only reorders the expression. It does not evaluate it, does
not accept multi-character names or numbers as operands, and does not report
malformed expressions such as unbalanced parentheses.

## Containers

All containers support `len()` and iteration, and each has a `copy()`
method that returns an independent copy.

### Array

A fixed-size array whose slots start out with a fill value (`None` by
default). Negative indices count from the end; indexing outside the array
raises `IndexError`, and a negative size raises `ValueError`.

```python
from rpnkit.array import Array

arr = Array(10, 0)
for i in range(len(arr)):
    arr[i] = i * 2
copy = arr.copy()
list(copy)           # [0, 2, 4, ..., 18]
```

### LinkedList

A doubly linked list of `Item` nodes. `insert` adds at the front,
`insert_after` adds after a given item, and both return the new item.
`erase_first` and `erase_next` remove an item and return the item that
now takes its place (or `None`); removing from an empty list, or after the
last item, raises `IndexError`. Passing an item from another list raises
`ValueError`. Each `Item` has `data`, `next` and `prev`.

```python
from rpnkit.linkedlist import LinkedList

lst = LinkedList()
lst.insert(1)
lst.insert(2)
lst.insert(3)
lst.insert_after(lst.first(), 4)
lst.erase_first()
list(lst)            # [4, 2, 1]
LinkedList([1, 2, 3]).first().data   # 1
```

### Stack

Last in, first out. Iteration runs from the top down; `peek` and `pop` on
an empty stack raise `IndexError`.

```python
from rpnkit.stack import Stack

stack = Stack()
stack.push(1)
stack.push(2)
stack.peek()         # 2
stack.pop()          # 2
bool(stack)          # True while items remain
```

### Queue

First in, first out. `remove` returns the value it removes; `peek` and
`remove` on an empty queue raise `IndexError`.

```python
from rpnkit.queue import Queue

queue = Queue()
queue.insert(1)
queue.insert(2)
queue.peek()         # 1
queue.remove()       # 1
queue.peek()         # 2
```

### Vector

A resizable array; growing pads new slots with the fill value, shrinking
keeps the leading elements.

```python
from rpnkit.vector import Vector

vec = Vector([], 0)
vec.resize(5)
for i in range(len(vec)):
    vec[i] = i
vec.resize(3)
list(vec)            # [0, 1, 2]
```

## Practice exercises

`rpnkit.practice` holds a few small exercises on sequences and lookups:

- `sums_before_after(values, shared)` sums the values, zeroes the last one
  (in place when `shared` is true, on a copy otherwise) and sums again.
- `reverse_sequence(values)` returns the values in reverse order.
- `lookup_all(pairs, queries)` answers each query with the first matching
  definition, or `Not found`.
- `filter_below(values, limit)` keeps the values smaller than `limit`.

They are also reachable from the command line, reading whitespace-separated
input from standard input:

```
rpnkit-practice sums [--by-value]
rpnkit-practice reverse     # N, then N integers
rpnkit-practice lookup      # N, then N word/definition pairs, then queries
rpnkit-practice filter      # N, then N integers, then the limit
```

Truncated or malformed input makes the command print a message to standard
error and exit with status 1.