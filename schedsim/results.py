"""Per-process scheduling results and their tabular report."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean
from typing import Callable, Dict, Iterable, List, Optional, Sequence

DEFAULT_COLUMNS = ("P", "BT", "WT", "TAT")


@dataclass
class ProcessStats:
    """Outcome of scheduling one process."""

    pid: int
    burst: int
    waiting: int
    arrival: int = 0
    priority: Optional[int] = None

    def turnaround(self) -> int:
        return self.waiting + self.burst


_COLUMNS: Dict[str, Callable[[ProcessStats], object]] = {
    "P": lambda s: f"P{s.pid}",
    "PN": lambda s: s.priority,
    "BT": lambda s: s.burst,
    "AT": lambda s: s.arrival,
    "WT": lambda s: s.waiting,
    "TAT": lambda s: s.turnaround(),
}


def average_waiting(stats: Iterable[ProcessStats]) -> float:
    """Mean waiting time; raises ValueError for no processes."""
    return fmean(s.waiting for s in stats)


def average_turnaround(stats: Iterable[ProcessStats]) -> float:
    """Mean turnaround time; raises ValueError for no processes."""
    return fmean(s.turnaround() for s in stats)


def format_table(
    stats: Iterable[ProcessStats], columns: Sequence[str] = DEFAULT_COLUMNS
) -> str:
    """Render a tab-separated table followed by the two averages."""
    unknown = [name for name in columns if name not in _COLUMNS]
    if unknown:
        raise ValueError(f"unknown columns: {', '.join(unknown)}")
    rows = list(stats)
    lines: List[str] = ["\t".join(columns)]
    lines.extend(
        "\t".join(str(_COLUMNS[name](s)) for name in columns) for s in rows
    )
    lines.append(f"Average WT = {average_waiting(rows):.2f}")
    lines.append(f"Average TAT = {average_turnaround(rows):.2f}")
    return "\n".join(lines)