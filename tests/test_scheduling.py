import pytest

from osalgos.scheduling import fcfs, priority, round_robin, sjf

BURSTS = [[24, 3, 3], [6, 8, 7, 3], [5], [2, 9, 1, 4, 4, 7]]


def _check_back_to_back(schedule):
    clock = 0
    for process in schedule:
        assert process.waiting == clock
        assert process.turnaround == process.waiting + process.burst
        assert process.completion == process.turnaround
        clock += process.burst


def test_fcfs_textbook_averages():
    schedule = fcfs([24, 3, 3])
    assert schedule.average_waiting() == 17
    assert schedule.average_turnaround() == 27


@pytest.mark.parametrize("bursts", BURSTS)
def test_fcfs_keeps_input_order(bursts):
    schedule = fcfs(bursts)
    assert [p.pid for p in schedule] == list(range(1, len(bursts) + 1))
    assert [p.burst for p in schedule] == bursts
    _check_back_to_back(schedule)


@pytest.mark.parametrize("bursts", BURSTS)
def test_sjf_orders_by_burst(bursts):
    schedule = sjf(bursts)
    assert [p.burst for p in schedule] == sorted(bursts)
    assert sorted(p.pid for p in schedule) == list(range(1, len(bursts) + 1))
    for process in schedule:
        assert bursts[process.pid - 1] == process.burst
    _check_back_to_back(schedule)


def test_sjf_tie_order_follows_exchange_sort():
    assert [p.pid for p in sjf([2, 2, 1])] == [3, 2, 1]


def test_sjf_never_waits_longer_on_average_than_fcfs():
    for bursts in BURSTS:
        assert sjf(bursts).average_waiting() <= fcfs(bursts).average_waiting()


def test_priority_orders_by_priority():
    bursts = [10, 1, 2, 1, 5]
    priorities = [3, 1, 4, 5, 2]
    schedule = priority(bursts, priorities)
    assert [p.priority for p in schedule] == sorted(priorities)
    for process in schedule:
        assert bursts[process.pid - 1] == process.burst
        assert priorities[process.pid - 1] == process.priority
    _check_back_to_back(schedule)


def test_priority_length_mismatch():
    with pytest.raises(ValueError):
        priority([1, 2, 3], [1, 2])


@pytest.mark.parametrize("bursts", BURSTS)
@pytest.mark.parametrize("quantum", [1, 2, 4, 100])
def test_round_robin_invariants(bursts, quantum):
    schedule = round_robin(bursts, quantum)
    assert [p.pid for p in schedule] == list(range(1, len(bursts) + 1))
    assert max(p.completion for p in schedule) == sum(bursts)
    for process in schedule:
        assert process.waiting == process.turnaround - process.burst
        assert process.waiting >= 0


@pytest.mark.parametrize("bursts", BURSTS)
def test_round_robin_with_large_quantum_matches_fcfs(bursts):
    assert round_robin(bursts, max(bursts)) == fcfs(bursts)


def test_round_robin_short_job_finishes_first_with_unit_quantum():
    schedule = round_robin([3, 1], 1)
    assert schedule.processes[1].completion < schedule.processes[0].completion


@pytest.mark.parametrize("quantum", [0, -2])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(ValueError):
        round_robin([1, 2], quantum)


def test_round_robin_rejects_zero_burst():
    with pytest.raises(ValueError):
        round_robin([0, 2], 2)


@pytest.mark.parametrize("algorithm", [fcfs, sjf])
def test_empty_and_negative_rejected(algorithm):
    with pytest.raises(ValueError):
        algorithm([])
    with pytest.raises(ValueError):
        algorithm([3, -1])


def test_averages_truncate():
    schedule = fcfs([3, 4])
    total = sum(p.waiting for p in schedule)
    assert schedule.average_waiting() * len(schedule) <= total
    assert (schedule.average_waiting() + 1) * len(schedule) > total