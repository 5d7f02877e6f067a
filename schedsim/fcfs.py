"""First-come, first-served scheduling."""

from __future__ import annotations

from typing import Iterable, List

from schedsim.fifo import BoundedQueue
from schedsim.results import ProcessStats

MAX_PROCESSES = 10


def fcfs(bursts: Iterable[int]) -> List[ProcessStats]:
    """Schedule processes in input order, all arriving at time zero.

    Raises OverflowError for more than ``MAX_PROCESSES`` processes.
    """
    queue: BoundedQueue[ProcessStats] = BoundedQueue(capacity=MAX_PROCESSES)
    finish = 0
    for pid, burst in enumerate(bursts, start=1):
        queue.enqueue(ProcessStats(pid=pid, burst=burst, waiting=finish))
        finish += burst
    return [queue.dequeue() for _ in range(len(queue))]