import pytest

from schedsim.fcfs import fcfs
from schedsim.sjf import MAX_PROCESSES, sjf


def test_worked_example():
    result = sjf([6, 8, 7, 3])
    assert [s.pid for s in result] == [4, 1, 3, 2]
    assert [s.waiting for s in result] == [0, 3, 9, 16]


def test_matches_fcfs_on_sorted_bursts():
    bursts = [5, 2, 9, 1, 4]
    expected = [s.waiting for s in fcfs(sorted(bursts))]
    assert [s.waiting for s in sjf(bursts)] == expected


def test_bursts_run_in_nondecreasing_order():
    result = sjf([4, 1, 7, 3, 3, 9, 2])
    runs = [s.burst for s in result]
    assert runs == sorted(runs)


def test_each_process_waits_for_those_before_it():
    bursts = [10, 3, 6, 2]
    result = sjf(bursts)
    assert result[0].waiting == 0
    for before, after in zip(result, result[1:]):
        assert after.waiting == before.waiting + before.burst
    assert sorted(s.pid for s in result) == list(range(1, len(bursts) + 1))


def test_pid_keeps_its_burst():
    bursts = [8, 1, 5]
    for stats in sjf(bursts):
        assert stats.burst == bursts[stats.pid - 1]


def test_empty_input():
    assert sjf([]) == []


def test_too_many_processes():
    with pytest.raises(OverflowError):
        sjf([1] * (MAX_PROCESSES + 1))