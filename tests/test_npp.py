import pytest

from schedsim.npp import MAX_PROCESSES, non_preemptive_priority


def test_worked_example():
    result = non_preemptive_priority([(10, 3), (1, 1), (2, 4), (1, 5), (5, 2)])
    assert [s.pid for s in result] == [2, 5, 1, 3, 4]
    assert [s.waiting for s in result] == [0, 1, 6, 16, 18]


def test_priorities_in_nondecreasing_order():
    result = non_preemptive_priority([(3, 7), (2, 1), (4, 4), (1, 9), (6, 2)])
    priorities = [s.priority for s in result]
    assert priorities == sorted(priorities)


def test_each_process_keeps_its_burst_and_priority():
    processes = [(4, 2), (9, 0), (1, 5)]
    for stats in non_preemptive_priority(processes):
        assert (stats.burst, stats.priority) == processes[stats.pid - 1]


def test_waiting_chain_in_run_order():
    result = non_preemptive_priority([(5, 3), (2, 1), (7, 2), (3, 4)])
    assert result[0].waiting == 0
    for before, after in zip(result, result[1:]):
        assert after.waiting == before.waiting + before.burst


def test_equal_priorities_schedule_everyone():
    processes = [(2, 1)] * 5
    result = non_preemptive_priority(processes)
    assert sorted(s.pid for s in result) == list(range(1, 6))
    assert sorted(s.waiting for s in result) == [2 * k for k in range(5)]


def test_empty_input():
    assert non_preemptive_priority([]) == []


def test_too_many_processes():
    with pytest.raises(OverflowError):
        non_preemptive_priority([(1, 1)] * (MAX_PROCESSES + 1))