# algokit

A small collection of classic algorithms and data structures, written as
plain Python for reading, experimenting and teaching. Nothing outside the
standard library is needed.

## Installation

```
pip install algokit
```

To run the test suite:

```
pip install "algokit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `heap_sort`, `quick_sort` (each returns a new ascending list), `kth_largest` |
| `algokit.searching` | `linear_search`, `binary_search` (return an index or `None`) |
| `algokit.matrix` | `format_matrix`, `max_row_sum` (returns a `MaxRow` of index and total), `matrix_sum`, `transpose`, `multiply` |
| `algokit.bst` | `BinarySearchTree` with `insert`, `delete`, `inorder`, `preorder`, `postorder`, `smallest`, `largest`, `clear`, `in` and `len`; raises `DuplicateValueError` and `EmptyTreeError` |
| `algokit.linked_list` | `LinkedList` with `insert_begin`, `insert_at`, `insert_end`, `delete_begin`, `delete_at`, `delete_end` (positions count from 1) and `format`; raises `EmptyListError` |
| `algokit.stack` | `Stack` (fixed capacity, default 100) and `LinkedStack`; raise `StackOverflowError` and `StackEmptyError` |
| `algokit.bounded_queue` | `BoundedQueue`, a FIFO queue over a fixed number of slots (default 5); raises `QueueFullError` and `QueueEmptyError` |
| `algokit.graph` | `DirectedGraph` on numbered vertices with `neighbours`, `edges` and `format` |
| `algokit.scheduling` | `fcfs`, `priority_schedule` and `round_robin`, each returning a `ScheduleReport` of `ProcessStats` with average turnaround and waiting times |
| `algokit.bankers` | Banker's algorithm: `need_matrix`, `safe_sequence` (a safe order of process indices, or `None`) |
| `algokit.buffer` | `BoundedBuffer`, a producer/consumer simulation with `produce` and `consume`; raises `BufferFullError` and `BufferEmptyError` |
| `algokit.puzzles` | `is_safe`, `solve_sudoku`, `n_queens`, `format_queens`, `longest_common_subsequence`, `minimum_jumps` |
| `algokit.number_tricks` | `is_armstrong`, `years_to_overtake`, `factorial`, `factorial_recursive`, `gcd`, `reversed_digits`, `is_palindrome`, `product`, `tribonacci`, `square_root`, `exponent_expression`, `ordinal_suffix`, `ordinal_table`, `duplicate_positions`, `duplicate_indices` |
| `algokit.dates` | `next_date` |
| `algokit.text` | `caesar_shift`, `concatenate`, `plus_pattern`, `number_triangle`, `even_odd` |
| `algokit.geometry` | `side_lengths`, `heron_area`, `base_height_area` |
| `algokit.report_card` | `Grade`, `Student`, `grade_for`, `builtin_students`, `format_report` and the `main` command |

## Examples

```python
from algokit.sorting import merge_sort, kth_largest
from algokit.number_tricks import factorial, gcd, ordinal_suffix
from algokit.puzzles import n_queens, longest_common_subsequence

merge_sort([80, 90, 100, 40, 50, 30, 20, 70, 60, 10])
kth_largest([12, 15, 7, 3, 8, 16, 25], 4)     # 12

factorial(5)                                  # 120
gcd(12, 18)                                   # 6
ordinal_suffix(11)                            # "th"
ordinal_suffix(22)                            # "nd"

longest_common_subsequence("abaaba", "babbab")
solutions = n_queens(4)                       # column of the queen in each row
```

Data structures raise exceptions when an operation cannot be done, for
example popping from an empty stack or adding to a full queue:

```python
from algokit.stack import Stack, StackEmptyError

stack = Stack()
stack.push(3)
stack.pop()
try:
    stack.pop()
except StackEmptyError:
    print("nothing left")
```

Scheduling functions return their results rather than printing them:

```python
from algokit.scheduling import fcfs

report = fcfs([1, 2, 3], [0, 1, 2], [5, 3, 8])
for process in report.processes:
    print(process.process_id, process.completion, process.turnaround, process.waiting)
print(report.average_turnaround, report.average_waiting)
```

## Command line

The report card generator can be started from the shell:

```
algokit-report-card
```

It reads whitespace-separated values from standard input: the number of
students in the class, then a roll number. Students 1 to 4 are on record,
and asking for one of them prints that student's marks, C.G.P.A. and grade.
Asking for a roll number above 4 instead reads a name and five marks for
each of the remaining students, roll numbers 5 up to the class size, and
prints a report for each. If the input ends early or holds something that
is not a number, it prints an error and exits with status 1.

## What it does not do

Apart from the report card command, the package offers no interactive
programs: the data structures, schedulers and puzzles are used from Python
code only, and nothing is stored between runs.