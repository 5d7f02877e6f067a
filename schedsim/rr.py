"""Round-robin scheduling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from schedsim.fifo import BoundedQueue
from schedsim.results import ProcessStats

MAX_PROCESSES = 10


@dataclass
class _Job:
    pid: int
    burst: int
    remaining: int
    waiting: int = 0


def round_robin(bursts: Iterable[int], quantum: int) -> List[ProcessStats]:
    """Schedule processes, all arriving at time zero, in slices of ``quantum``.

    The result is in the order the ready queue holds the processes once the
    last one completes.
    """
    if quantum < 1:
        raise ValueError("quantum must be positive")
    queue: BoundedQueue[_Job] = BoundedQueue(capacity=MAX_PROCESSES)
    for pid, burst in enumerate(bursts, start=1):
        if burst < 1:
            raise ValueError("burst times must be positive")
        queue.enqueue(_Job(pid=pid, burst=burst, remaining=burst))

    total = len(queue)
    completed = 0
    clock = 0
    while completed < total:
        job = queue.dequeue()
        if job.remaining:
            if job.remaining <= quantum:
                clock += job.remaining
                job.remaining = 0
                job.waiting = clock - job.burst
                completed += 1
            else:
                job.remaining -= quantum
                clock += quantum
        queue.enqueue(job)

    return [ProcessStats(pid=j.pid, burst=j.burst, waiting=j.waiting) for j in queue]