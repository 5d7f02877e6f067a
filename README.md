# schedsim

Small simulations of classic operating-system topics:

- CPU scheduling: first come first served, shortest job first, shortest
  remaining time first, non-preemptive priority, round robin and highest
  response ratio next.
- Deadlock avoidance with the banker's algorithm.
- An integer infix calculator that works through postfix notation.
- The bounded queue, stacks, min-heap and sorted list the simulations are
  built on.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `schedsim`, with one subcommand per
simulation:

| Subcommand         | What it does                                        |
|--------------------|-----------------------------------------------------|
| `banker`           | deadlock avoidance with the banker's algorithm      |
| `fcfs`             | first-come, first-served scheduling                 |
| `sjf`              | shortest-job-first scheduling                       |
| `npp`              | non-preemptive priority scheduling                  |
| `rr`               | round-robin scheduling                              |
| `srtf`             | shortest-remaining-time-first scheduling            |
| `hrrn`             | highest-response-ratio-next scheduling              |
| `queue-demo`       | exercise the bounded FIFO queue                     |
| `stack-demo`       | exercise the linked stack                           |
| `array-stack-demo` | exercise the array stack                            |
| `heap-demo`        | exercise the min-heap priority queue                |

The scheduling and banker subcommands prompt for their numbers and read
whitespace-separated integers from standard input, so they can also be fed
from a pipe:

```
printf '3 24 3 3' | schedsim fcfs
```

The schedulers print a tab-separated table (process, burst, waiting and
turnaround times, plus arrival or priority where they apply) followed by the
average waiting and turnaround times. `banker` prints the allocation, maximum
and need matrices and then either a safe sequence or a deadlock message.
Invalid or missing input prints `error: ...` on standard error and the
command exits with status 1.

```
schedsim --help
```

## Library use

Each scheduler is one function in its own module and returns a list of
`schedsim.results.ProcessStats` (`pid`, `burst`, `waiting`, `arrival`,
`priority`, and a `turnaround()` method):

| Module          | Function                             | Input                          |
|-----------------|--------------------------------------|--------------------------------|
| `schedsim.fcfs` | `fcfs(bursts)`                       | burst times                    |
| `schedsim.sjf`  | `sjf(bursts)`                        | burst times                    |
| `schedsim.rr`   | `round_robin(bursts, quantum)`       | burst times, positive quantum  |
| `schedsim.npp`  | `non_preemptive_priority(processes)` | `(burst, priority)` pairs      |
| `schedsim.srtf` | `srtf(processes)`                    | `(burst, arrival)` pairs       |
| `schedsim.hrrn` | `hrrn(processes)`                    | `(arrival, burst)` pairs       |

Process ids are 1-based positions in the input. `fcfs`, `sjf`, `rr`, `npp`
and `srtf` accept at most 10 processes, `hrrn` at most 20; more raises
`OverflowError`. In `fcfs`, `sjf`, `rr` and `npp` every process arrives at
time zero; lower priority numbers run first in `npp`. `hrrn` uses an integer
response ratio, `(burst + waited) // burst`, with ties going to the earlier
arrival, and raises `ValueError` if the CPU would sit idle. `srtf` admits at
most one arriving process per time step and raises `ValueError` when two
processes arrive at the same instant and one cannot be admitted.

`schedsim.results` summarises the statistics with `average_waiting`,
`average_turnaround` and `format_table(stats, columns)`, whose columns are
any of `P`, `PN`, `BT`, `AT`, `WT` and `TAT`.

```python
from schedsim.fcfs import fcfs
from schedsim.results import average_turnaround, average_waiting, format_table

stats = fcfs([24, 3, 3])
print(average_waiting(stats), average_turnaround(stats))  # 17.0 27.0
print(format_table(stats))
```

### Deadlock avoidance

`compute_need(allocation, maximum)` returns the need matrix;
`find_safe_sequence(allocation, need, available)` returns a safe order of
0-based process indices, or `None` when there is none; `format_matrix`
renders a matrix as tab-separated lines.

```python
from schedsim.banker import compute_need, find_safe_sequence

allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
need = compute_need(allocation, maximum)
print(find_safe_sequence(allocation, need, [3, 3, 2]))
```

### Postfix calculator

`schedsim.postfix` handles non-negative integer literals, parentheses and
`+ - * / %`. Division and remainder truncate toward zero; malformed
expressions raise `ValueError`, division by zero `ZeroDivisionError`.

```python
from schedsim.postfix import calculate, evaluate, infix_to_postfix, tokenize

print(tokenize("4*5+6/2-1"))          # ['4', '*', '5', '+', '6', '/', '2', '-', '1']
print(infix_to_postfix("4*5+6/2-1"))  # 4 5 * 6 2 / + 1 -
print(evaluate("4 5 * 6 2 / + 1 -"))  # 22
print(calculate("(1+2)*3"))           # 9
```

### Containers

- `schedsim.fifo.BoundedQueue(items=(), capacity=10)`: FIFO queue with
  `enqueue`, `dequeue`, `head`, `tail`, `is_empty`, `is_full`, `clear`;
  `capacity=None` removes the limit.
- `schedsim.stacks.LinkedStack()`: unbounded stack with `push`, `pop`,
  `peek`, `is_empty`, `clear`.
- `schedsim.stacks.ArrayStack(capacity=10)`: bounded stack with `push`,
  `pop`, `top`, `rear` (bottom item), `is_empty`, `is_full`, `clear`.
- `schedsim.heap.MinHeap(capacity=10, key=None)`: binary min-heap with
  `push`, `pop`, `head`, `tail`, `is_empty`, `is_full`, `clear`.
- `schedsim.sortedlist.SortedList(key=None, capacity=20)`: list kept in
  ascending key order, with `add`, indexing and iteration.

Adding to a full container raises `OverflowError`; reading or removing from
an empty one raises `IndexError`.

## What it does not do

The schedulers model a single CPU with integer times and take their input
as Python values or interactively on standard input; there is no input-file
format, no saved output and no charting of the schedule.