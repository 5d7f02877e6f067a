"""Shortest-job-first scheduling (non-preemptive, all arrivals at time zero)."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from schedsim.heap import MinHeap
from schedsim.results import ProcessStats

MAX_PROCESSES = 10


def sjf(bursts: Iterable[int]) -> List[ProcessStats]:
    """Run processes in order of increasing burst time.

    Process ids are 1-based positions in ``bursts``. The result is in the
    order the processes run. Raises OverflowError for more than
    ``MAX_PROCESSES`` processes.
    """
    ready: MinHeap[Tuple[int, int]] = MinHeap(
        capacity=MAX_PROCESSES, key=lambda job: job[1]
    )
    for pid, burst in enumerate(bursts, start=1):
        ready.push((pid, burst))

    results: List[ProcessStats] = []
    finish = 0
    while not ready.is_empty():
        pid, burst = ready.pop()
        finish += burst
        results.append(ProcessStats(pid=pid, burst=burst, waiting=finish - burst))
    return results