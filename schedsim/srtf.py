"""Shortest-remaining-time-first (preemptive) scheduling."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, List, Tuple

from schedsim.heap import MinHeap
from schedsim.results import ProcessStats

MAX_PROCESSES = 10

_by_arrival = attrgetter("arrival")
_by_remaining = attrgetter("remaining")


@dataclass
class _Job:
    pid: int
    burst: int
    arrival: int
    remaining: int


def srtf(processes: Iterable[Tuple[int, int]]) -> List[ProcessStats]:
    """Schedule ``(burst, arrival)`` pairs one time unit at a time.

    At most one waiting process is admitted per step; a process that arrives
    at the same instant as another cannot be admitted once time has moved on,
    and a ValueError is raised for it. The result is ordered by arrival.
    """
    ready: MinHeap[_Job] = MinHeap(capacity=MAX_PROCESSES, key=_by_arrival)
    for pid, (burst, arrival) in enumerate(processes, start=1):
        if burst < 0:
            raise ValueError("burst times must not be negative")
        ready.push(_Job(pid=pid, burst=burst, arrival=arrival, remaining=burst))
    if ready.is_empty():
        return []

    total = len(ready)
    first = ready.pop()
    clock = first.arrival
    running: MinHeap[_Job] = MinHeap(capacity=MAX_PROCESSES, key=_by_remaining)
    running.push(first)
    finished: MinHeap[ProcessStats] = MinHeap(capacity=MAX_PROCESSES, key=_by_arrival)

    while len(finished) < total:
        if not ready.is_empty():
            upcoming = ready.head()
            if upcoming.arrival < clock:
                raise ValueError(
                    f"P{upcoming.pid} arriving at {upcoming.arrival} "
                    f"was not admitted before time {clock}"
                )
            if upcoming.arrival == clock:
                running.push(ready.pop())
        if running.is_empty():
            clock = ready.head().arrival
            continue
        current = running.head()
        if current.remaining == 0:
            running.pop()
            finished.push(
                ProcessStats(
                    pid=current.pid,
                    burst=current.burst,
                    waiting=clock - current.arrival - current.burst,
                    arrival=current.arrival,
                )
            )
            continue
        current.remaining -= 1
        clock += 1

    return [finished.pop() for _ in range(total)]