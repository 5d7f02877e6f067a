"""Highest-response-ratio-next (non-preemptive) scheduling."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, List, Optional, Tuple

from schedsim.results import ProcessStats
from schedsim.sortedlist import SortedList

MAX_PROCESSES = 20


@dataclass
class _Job:
    pid: int
    arrival: int
    burst: int
    waiting: int = 0
    complete: bool = False


def hrrn(processes: Iterable[Tuple[int, int]]) -> List[ProcessStats]:
    """Schedule ``(arrival, burst)`` pairs by highest response ratio.

    The ratio ``(burst + time waited) // burst`` is an integer; ties go to the
    earlier arrival. Scheduling runs while the clock is below the sum of all
    bursts; a ValueError is raised if the CPU would idle or a process would be
    left unscheduled. The result is ordered by arrival.
    """
    jobs: SortedList[_Job] = SortedList(
        key=attrgetter("arrival"), capacity=MAX_PROCESSES
    )
    for pid, (arrival, burst) in enumerate(processes, start=1):
        if burst < 1:
            raise ValueError("burst times must be positive")
        jobs.add(_Job(pid=pid, arrival=arrival, burst=burst))
    if not len(jobs):
        return []

    total_burst = sum(job.burst for job in jobs)
    clock = jobs[0].arrival
    while clock < total_burst:
        chosen: Optional[_Job] = None
        best = 0
        for job in jobs:
            if job.complete or job.arrival > clock:
                continue
            ratio = (job.burst + clock - job.arrival) // job.burst
            if chosen is None or ratio > best:
                chosen, best = job, ratio
        if chosen is None:
            raise ValueError(f"no process is ready at time {clock}")
        clock += chosen.burst
        chosen.waiting = clock - chosen.arrival - chosen.burst
        chosen.complete = True

    pending = [f"P{job.pid}" for job in jobs if not job.complete]
    if pending:
        raise ValueError(f"schedule ended at {clock} before {', '.join(pending)} ran")

    return [
        ProcessStats(pid=j.pid, burst=j.burst, waiting=j.waiting, arrival=j.arrival)
        for j in jobs
    ]