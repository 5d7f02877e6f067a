"""Non-preemptive priority scheduling (lower number means higher priority)."""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable, List, Tuple

from schedsim.heap import MinHeap
from schedsim.results import ProcessStats

MAX_PROCESSES = 10

_by_priority = attrgetter("priority")


def non_preemptive_priority(
    processes: Iterable[Tuple[int, int]],
) -> List[ProcessStats]:
    """Schedule ``(burst, priority)`` pairs, all arriving at time zero.

    Process ids are 1-based positions in ``processes``. The result is ordered
    by priority. Raises OverflowError for more than ``MAX_PROCESSES`` processes.
    """
    ready: MinHeap[ProcessStats] = MinHeap(capacity=MAX_PROCESSES, key=_by_priority)
    for pid, (burst, priority) in enumerate(processes, start=1):
        ready.push(ProcessStats(pid=pid, burst=burst, waiting=0, priority=priority))

    done: MinHeap[ProcessStats] = MinHeap(capacity=MAX_PROCESSES, key=_by_priority)
    finish = 0
    while not ready.is_empty():
        stats = ready.pop()
        finish += stats.burst
        stats.waiting = finish - stats.burst
        done.push(stats)

    return [done.pop() for _ in range(len(done))]