"""Deadlock avoidance with the banker's algorithm."""

from __future__ import annotations

from typing import List, Optional, Sequence

Matrix = Sequence[Sequence[int]]


def compute_need(allocation: Matrix, maximum: Matrix) -> List[List[int]]:
    """Return the need matrix, ``maximum - allocation`` element by element."""
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum differ in process count")
    need: List[List[int]] = []
    for alloc_row, max_row in zip(allocation, maximum):
        if len(alloc_row) != len(max_row):
            raise ValueError("allocation and maximum differ in resource count")
        need.append([most - held for held, most in zip(alloc_row, max_row)])
    return need


def find_safe_sequence(
    allocation: Matrix, need: Matrix, available: Sequence[int]
) -> Optional[List[int]]:
    """Return a safe order of process indices, or ``None`` if none is found.

    Each pass scans every unfinished process in index order and lets it run
    when its need fits in the work vector; at most one pass per process is made.
    """
    count = len(allocation)
    if len(need) != count:
        raise ValueError("allocation and need differ in process count")
    resources = len(available)
    for row in (*allocation, *need):
        if len(row) != resources:
            raise ValueError("matrix row does not match the number of resources")

    work = list(available)
    finished = [False] * count
    sequence: List[int] = []
    for _ in range(count):
        for index, (held, wanted) in enumerate(zip(allocation, need)):
            if finished[index]:
                continue
            if all(w <= free for w, free in zip(wanted, work)):
                work = [free + h for free, h in zip(work, held)]
                finished[index] = True
                sequence.append(index)
        if len(sequence) == count:
            return sequence
    return sequence if count == 0 else None


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix as lines of tab-terminated values."""
    return "\n".join("".join(f"{value}\t" for value in row) for row in matrix)