# dsakit

A collection of classic data-structure and algorithm routines, written as
plain Python functions and classes with no third-party dependencies, plus a
small command with a few interactive record-keeping tools.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `dsakit.arrays`       | `longest_mountain`, `longest_consecutive_run`, `pair_sum`, `trapped_water`, `max_profit_single`, `max_profit_multiple`, `unsorted_subarray`, `triplet_sum`, `max_subarray_sum`, `merge_sorted` |
| `dsakit.searching`    | `binary_search`, `first_occurrence`, `last_occurrence`, `frequency`, `rotated_search`, `min_pair`, `square_root`, `can_place_birds`, `angry_birds` |
| `dsakit.power`        | `binpow`, `binpow_recursive` |
| `dsakit.sorting`      | `bubble_sort`, `insertion_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `quick_sort` |
| `dsakit.bits`         | `count_different_bits`, `single_among_k`, `single_among_pairs`, `two_singles_among_pairs`, `set_bit`, `clear_bit`, `find_bit` |
| `dsakit.recursion`    | `permutations`, `subsequences`, `tower_of_hanoi`, `fibonacci`, `can_place`, `solve_sudoku` |
| `dsakit.stacks`       | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError`, `is_balanced`, `precedence`, `infix_to_postfix` |
| `dsakit.linked_queue` | `LinkedQueue`, `QueueUnderflowError` |
| `dsakit.linked_list`  | `LinkedList` with insertion, deletion, reversal and loop detection/removal |
| `dsakit.assignments`  | `calculate`, `lookup_word`, `Book`, `Student`, `Employee`, `format_books`, `format_students`, `append_employees`, `read_employee_list`, `main` |

The sorting functions accept any iterable and return a new sorted list,
leaving their input untouched.

## Examples

```python
from dsakit.arrays import pair_sum, trapped_water, unsorted_subarray
from dsakit.searching import binary_search, frequency
from dsakit.recursion import fibonacci, tower_of_hanoi
from dsakit.stacks import infix_to_postfix, is_balanced

trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])     # 6
pair_sum([1, 2], 10)                                    # None
unsorted_subarray([1, 2, 3])                            # None (already sorted)
binary_search([1, 5, 10, 12, 13, 15, 18], 18)           # 6
frequency([0, 1, 1, 1, 1, 2, 2, 2, 3, 4, 4, 5, 10], 1)  # 4
fibonacci(10)                                           # 55
tower_of_hanoi(1)                                       # [(1, 3)]
is_balanced("(a+b)*[c*(a+b)]")                          # True
infix_to_postfix("a+b*c")                               # "abc*+"
```

Stacks and queues raise exceptions rather than returning sentinel values:

```python
from dsakit.stacks import ArrayStack, StackOverflowError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    print("full")
```

`StackUnderflowError` and `QueueUnderflowError` are raised when popping,
peeking or dequeuing from an empty container. All three are subclasses of
`IndexError`.

Linked lists are iterable:

```python
from dsakit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.reverse()
list(items)        # [3, 2, 1]

items.make_loop(2)
items.has_loop()   # True
items.remove_loop()
list(items)        # [3, 2, 1]
```

Iterating or reversing a list that contains a loop raises `ValueError`.

## Command line

The package installs one command, `dsakit`, with a sub-command per tool.
Answers are read from standard input as whitespace-separated words.

```
dsakit calc                 # chain + - * / left to right, no precedence
dsakit dict [WORD]          # look a word up in the built-in word list
dsakit books                # enter books, then list them
dsakit students             # enter students, then list them
dsakit employees [--file PATH]
```

`dsakit employees` shows a menu: `1` appends new employee records to a text
file (`employee.txt` by default), `2` prints that file, and `0` exits.

The command returns exit status 1 and prints an error when input ends early,
a number cannot be read, or a division by zero occurs.

## Limitations

- The word list behind `lookup_word` and `dsakit dict` holds only three
  words: `consent`, `influential` and `circumscribe`.
- Books and students entered with `dsakit books` and `dsakit students` are
  only printed; they are not saved anywhere.
- The employee file is plain text for reading by people. `read_employee_list`
  returns its whole text; records are not parsed back into `Employee` objects,
  and there is no way to edit or delete them.