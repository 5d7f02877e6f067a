"""Command-line front end for the scheduling, deadlock and container demos."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Iterator, List, Optional, Sequence, TextIO, Tuple

from schedsim.banker import compute_need, find_safe_sequence, format_matrix
from schedsim.fcfs import fcfs
from schedsim.fifo import BoundedQueue
from schedsim.heap import MinHeap
from schedsim.hrrn import hrrn
from schedsim.npp import non_preemptive_priority
from schedsim.results import ProcessStats, format_table
from schedsim.rr import round_robin
from schedsim.sjf import sjf
from schedsim.srtf import srtf
from schedsim.stacks import ArrayStack, LinkedStack

MAX_BANKER_SIZE = 10

_YES_NO = {True: "YES", False: "NO"}


class _Input:
    """Reads whitespace-separated integers, showing a prompt before each."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def integer(self, prompt: str) -> int:
        print(prompt, end="", flush=True)
        try:
            token = next(self._tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _read_count(inp: _Input) -> int:
    count = inp.integer("\nInput number of processes: ")
    if count < 1:
        raise ValueError("number of processes must be positive")
    return count


def _ask(inp: _Input, pid: int, *labels: str) -> Tuple[int, ...]:
    print(f"\nP{pid}: ")
    return tuple(inp.integer(f"{label}: ") for label in labels)


def _read_processes(inp: _Input, *labels: str) -> List[Tuple[int, ...]]:
    count = _read_count(inp)
    return [_ask(inp, pid, *labels) for pid in range(1, count + 1)]


def _show(stats: Sequence[ProcessStats], columns: Sequence[str]) -> None:
    print()
    print(format_table(stats, columns))


def _run_fcfs(inp: _Input) -> None:
    bursts = [burst for (burst,) in _read_processes(inp, "Burst Time")]
    _show(fcfs(bursts), ("P", "BT", "WT", "TAT"))


def _run_sjf(inp: _Input) -> None:
    count = _read_count(inp)
    bursts = []
    for pid in range(1, count + 1):
        (burst,) = _ask(inp, pid, "Burst Time")
        print("Arrival Time: 0")
        bursts.append(burst)
    _show(sjf(bursts), ("P", "BT", "AT", "WT", "TAT"))


def _run_npp(inp: _Input) -> None:
    processes = _read_processes(inp, "Burst Time", "Priority No")
    _show(non_preemptive_priority(processes), ("P", "PN", "BT", "WT", "TAT"))


def _run_rr(inp: _Input) -> None:
    bursts = [burst for (burst,) in _read_processes(inp, "Burst Time")]
    quantum = inp.integer("\nInput quantum value: ")
    _show(round_robin(bursts, quantum), ("P", "BT", "WT", "TAT"))


def _run_srtf(inp: _Input) -> None:
    processes = _read_processes(inp, "Burst Time", "Arrival Time")
    _show(srtf(processes), ("P", "BT", "AT", "WT", "TAT"))


def _run_hrrn(inp: _Input) -> None:
    processes = _read_processes(inp, "Arrival Time", "Burst Time")
    _show(hrrn(processes), ("P", "BT", "AT", "WT", "TAT"))


def _read_size(inp: _Input, prompt: str, what: str) -> int:
    value = inp.integer(prompt)
    if not 1 <= value <= MAX_BANKER_SIZE:
        raise ValueError(f"number of {what} must be between 1 and {MAX_BANKER_SIZE}")
    return value


def _run_banker(inp: _Input) -> None:
    print("\n DEADLOCK AVOIDANCE USING BANKER'S ALGORITHM")
    processes = _read_size(inp, "\n Enter total no. of processes : ", "processes")
    resources = _read_size(inp, "\n Enter total no. of resources : ", "resources")
    allocation: List[List[int]] = []
    maximum: List[List[int]] = []
    for pid in range(1, processes + 1):
        print(f"\n Process {pid}")
        held_row: List[int] = []
        max_row: List[int] = []
        for res in range(1, resources + 1):
            held_row.append(inp.integer(f" Allocation for resource {res} : "))
            max_row.append(inp.integer(f" Maximum for resource {res} : "))
        allocation.append(held_row)
        maximum.append(max_row)
    print("\n Available resources : ")
    available = [inp.integer(f" Resource {res} : ") for res in range(1, resources + 1)]

    need = compute_need(allocation, maximum)
    for title, matrix in (("Allocation", allocation), ("Maximum", maximum), ("Need", need)):
        print(f"\n {title}")
        print(format_matrix(matrix))

    sequence = find_safe_sequence(allocation, need, available)
    if sequence is None:
        print("\n Deadlock has occurred.")
        return
    print()
    print("<" + "".join(f" P{index + 1}  " for index in sequence) + ">")
    print(" A safety sequence has been detected.")


def _run_queue_demo(_: _Input) -> None:
    queue: BoundedQueue[int] = BoundedQueue([1, 2, 3, 4, 5])

    print(f"Elements in Queue = {queue}")
    print(f"Head: {queue.head()}")
    print(f"Tail: {queue.tail()}")
    queue.enqueue(6)
    print("Enqueued 6")
    print(f"Elements in Queue = {queue}")
    print(f"Head: {queue.head()}")
    print(f"Tail: {queue.tail()}")
    queue.dequeue()
    print("Dequeued")
    print(f"Elements in Queue = {queue}")
    print(f"Head: {queue.head()}")
    print(f"Tail: {queue.tail()}")
    print(f"Is queue empty? {_YES_NO[queue.is_empty()]}")
    print(f"Is queue full? {_YES_NO[queue.is_full()]}")
    queue.clear()
    print("QUEUE CLEARED")
    print(f"Is queue empty? {_YES_NO[queue.is_empty()]}")
    print(f"Elements in Queue = {queue}")


def _run_stack_demo(_: _Input) -> None:
    stack: LinkedStack[int] = LinkedStack()
    print(f"Stack = {stack}")
    for item in (1, 2, 3, 4, 5):
        stack.push(item)
    print(f"Stack = {stack}")
    print(f"Top item = {stack.peek()}")
    stack.push(6)
    print(f"Pushed(6) = {stack}")
    print(f"Top item = {stack.peek()}")
    stack.pop()
    print(f"Popped Once = {stack}")
    print(f"Top item = {stack.peek()}")
    stack.pop()
    print(f"Popped Once More = {stack}")
    print(f"Top item = {stack.peek()}")
    print(f"Is stack empty? {_YES_NO[stack.is_empty()]}")
    stack.clear()
    print("STACK CLEARED")
    print(f"Is stack empty? {_YES_NO[stack.is_empty()]}")
    print(f"Stack = {stack}")


def _run_array_stack_demo(_: _Input) -> None:
    stack: ArrayStack[int] = ArrayStack()
    for item in (5, 4, 3, 2, 1):
        stack.push(item)
    print(f"Elements in Stack: {stack}")
    print(f"Top: {stack.top()}")
    print("Push(element): 6")
    stack.push(6)
    print(f"Elements in Stack: {stack}")
    for _ in range(2):
        print("After Pop():")
        stack.pop()
        print(f"Elements in Stack: {stack}")
    print(f"Is stack empty? {_YES_NO[stack.is_empty()]}")
    stack.clear()
    print("After calling clear():")
    print(f"Is stack empty? {_YES_NO[stack.is_empty()]}")
    print(f"Elements in Stack: {stack}")


def _run_heap_demo(_: _Input) -> None:
    heap: MinHeap[int] = MinHeap()
    for item in (1, 2, 3, 4, 6):
        heap.push(item)

    print(f"Elements in Queue: {heap}")
    print(f"Head: {heap.head()}")
    print(f"Tail: {heap.tail()}")
    print("Enqueue (element): 5")
    heap.push(5)
    print(f"Elements in Queue: {heap}")
    print(f"Head: {heap.head()}")
    print(f"Tail: {heap.tail()}")
    heap.pop()
    print("After Dequeue():")
    print(f"Elements in Queue: {heap}")
    print(f"Is queue empty? {_YES_NO[heap.is_empty()]}")
    print(f"Is queue full? {_YES_NO[heap.is_full()]}")
    heap.clear()
    print("After calling clear():")
    print(f"Is queue empty? {_YES_NO[heap.is_empty()]}")
    print(f"Elements in Queue: {heap}")


_COMMANDS: Dict[str, Tuple[Callable[[_Input], None], str]] = {
    "banker": (_run_banker, "deadlock avoidance with the banker's algorithm"),
    "fcfs": (_run_fcfs, "first-come, first-served scheduling"),
    "sjf": (_run_sjf, "shortest-job-first scheduling"),
    "npp": (_run_npp, "non-preemptive priority scheduling"),
    "rr": (_run_rr, "round-robin scheduling"),
    "srtf": (_run_srtf, "shortest-remaining-time-first scheduling"),
    "hrrn": (_run_hrrn, "highest-response-ratio-next scheduling"),
    "queue-demo": (_run_queue_demo, "exercise the bounded FIFO queue"),
    "stack-demo": (_run_stack_demo, "exercise the linked stack"),
    "array-stack-demo": (_run_array_stack_demo, "exercise the array stack"),
    "heap-demo": (_run_heap_demo, "exercise the min-heap priority queue"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling, deadlock avoidance and data structure demos.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command; values are read from standard input as prompted."""
    args = _build_parser().parse_args(argv)
    run, _ = _COMMANDS[args.command]
    try:
        run(_Input(sys.stdin))
    except (ValueError, OverflowError, EOFError) as exc:
        print(file=sys.stdout)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())