import pytest

from schedsim.fcfs import MAX_PROCESSES, fcfs
from schedsim.results import average_waiting


def test_classic_example():
    result = fcfs([24, 3, 3])
    assert [s.waiting for s in result] == [0, 24, 27]
    assert average_waiting(result) == 17


def test_pids_and_bursts_in_input_order():
    bursts = [4, 1, 7, 2]
    result = fcfs(bursts)
    assert [s.pid for s in result] == list(range(1, len(bursts) + 1))
    assert [s.burst for s in result] == bursts


def test_each_process_waits_for_previous_turnaround():
    result = fcfs([5, 9, 2, 6])
    assert result[0].waiting == 0
    for previous, current in zip(result, result[1:]):
        assert current.waiting == previous.turnaround()


def test_last_turnaround_is_total_burst():
    bursts = [3, 8, 1]
    assert fcfs(bursts)[-1].turnaround() == sum(bursts)


def test_empty_input():
    assert fcfs([]) == []


def test_too_many_processes():
    with pytest.raises(OverflowError):
        fcfs([1] * (MAX_PROCESSES + 1))