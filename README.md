# dsakit

Classic data structures and algorithms in plain Python. The package has no
runtime dependencies.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `dsakit.arrays`

- `all_subarrays(values)`: every contiguous subarray, ordered by start index and then by end index.
- `all_pairs(values)`: every pair `(x, y)` in which `x` comes before `y`.
- `linear_search(values, key)` and `binary_search(values, key)`: the index of `key`, or `None` if it is absent. `binary_search` expects an ascending sequence.
- `kadane_max_sum`, `prefix_max_sum` and `brute_force_max_sum`: the largest sum of a contiguous subarray, found in linear, quadratic and cubic time. All three return `0` when every value is negative or the input is empty.
- `subarray_sums(values)`: each contiguous subarray paired with its sum.
- `reverse_in_place(values)`: reverses a mutable sequence.

### `dsakit.grid`

- `search_sorted_matrix(matrix, key)`: for a matrix whose rows and columns are both ascending, returns `(row, col)` of `key` or `None`. The search starts at the top-right corner.
- `spiral_order(matrix)`: the elements in clockwise order, starting at the top-left corner and working inward.
- `wave_order(matrix)`: the columns from last to first, read downward and upward in turn.
- `parse_matrix(text, rows, cols)`: reads whitespace-separated integers into a `rows` by `cols` matrix. It raises `ValueError` if the dimensions are negative or there are too few values.
- `format_matrix(matrix)`: one line per row, with the values separated by spaces.

Functions that take a matrix raise `ValueError` when its rows differ in length.

### `dsakit.recursion`

- `bubble_sort(values)`: sorts in place.
- `bubble_sort_stepwise(values)`: a generator that sorts in place and yields `(index, swapped)` after each comparison.
- `factorial(n)` and `fibonacci(n)`, with `fibonacci(0) == 0` and `fibonacci(1) == 1`.
- `power(base, exponent)` computes the power by repeated multiplication. `fast_power(base, exponent)` computes it by squaring.
- `increasing(n)` returns `[1, ..., n]` and `decreasing(n)` returns `[n, ..., 1]`.
- `first_occurrence(values, key)` and `last_occurrence(values, key)`: the index of the first or last match, or `None`.
- `is_strictly_increasing(values)`.

A negative `n` or `exponent` raises `ValueError`.

### `dsakit.linked_list`

`LinkedList` is a singly linked list made of `Node` objects, each with a `value` and a `next`. It keeps both ends, and its first node is available as `head`. It can be built from an iterable and supports:

- `push_front` and `push_back`;
- `insert(value, position)`, which raises `IndexError` when `position` is out of range;
- `search(value)`;
- `pop_front()`, which returns the removed value and raises `IndexError` when the list is empty;
- `reverse()`, which works in place;
- `len()` and iteration.

### `dsakit.queues`

`CircularQueue(capacity=10)` is a fixed-size FIFO queue. It has `push`, `pop` (which returns the item), `front`, `full`, `empty` and `len()`. Pushing onto a full queue raises `OverflowError`. Reading or popping from an empty queue raises `IndexError`.

### `dsakit.stacks`

There are three stacks, each with `push`, `pop`, `top` and `empty`:

- `LinkedStack`, built on a linked chain of nodes;
- `QueueStack`, built on two FIFO queues;
- `ListStack`, built on a Python list. It holds items of any type and also supports `len()`.

`pop` and `top` raise `IndexError` on an empty stack.

Three helpers work with any of these stacks:

- `drain(stack)` pops everything and returns it, top first.
- `insert_at_bottom(stack, value)` places `value` beneath every item.
- `reverse_stack(stack)` reverses the stack in place.

## Example

```python
from dsakit.arrays import kadane_max_sum, binary_search
from dsakit.grid import spiral_order
from dsakit.stacks import ListStack, reverse_stack, drain

kadane_max_sum([-2, 30, 54, 10, 23, 32, -10, 48, -99, 117, 32])   # 257
binary_search([1, 2, 5, 10, 19, 21, 30, 45], 19)                   # 4
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])                    # [1, 2, 3, 6, 9, 8, 7, 4, 5]

stack = ListStack()
for value in (1, 2, 3):
    stack.push(value)
reverse_stack(stack)
drain(stack)                                                        # [1, 2, 3]
```

## Demonstrations

The `dsakit-demo` command runs scripted demonstrations of the list, queue and stack types and prints their output. With no arguments it runs all of them. You can also name one or more:

    dsakit-demo linked-list stack-reverse

The available names are:

- `linked-list`
- `queue`
- `queue-stl`
- `stack-linked`
- `stack-stl`
- `stack-queues`
- `stack-vector`
- `insert-at-bottom`
- `stack-reverse`

From Python, `dsakit.demo.run_demo(name)` returns a demonstration's output as a string. It raises `ValueError` for an unknown name.

## Limitations

The array, matrix and recursion routines are available only as library functions. No command reads input for them from the terminal.