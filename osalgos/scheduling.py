"""Non-preemptive and round-robin CPU scheduling for processes that all arrive at time zero."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True)
class ScheduledProcess:
    """Timing of one process; pids are 1-based positions in the input."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    priority: int | None = None

    @property
    def completion(self) -> int:
        return self.turnaround


@dataclass(frozen=True)
class Schedule:
    """Processes in the order they appear in the schedule's table."""

    processes: tuple[ScheduledProcess, ...]

    def __iter__(self) -> Iterator[ScheduledProcess]:
        return iter(self.processes)

    def __len__(self) -> int:
        return len(self.processes)

    def average_waiting(self) -> int:
        """Mean waiting time, truncated to a whole number."""
        return sum(p.waiting for p in self.processes) // len(self.processes)

    def average_turnaround(self) -> int:
        """Mean turnaround time, truncated to a whole number."""
        return sum(p.turnaround for p in self.processes) // len(self.processes)


def _check_bursts(bursts: Iterable[int]) -> list[int]:
    bursts = list(bursts)
    if not bursts:
        raise ValueError("at least one process is required")
    if any(burst < 0 for burst in bursts):
        raise ValueError("burst times must not be negative")
    return bursts


def _exchange_sort(items: Sequence[_T], key: Callable[[_T], int]) -> list[_T]:
    """Order items by key, breaking ties exactly as a pairwise exchange sort does."""
    ordered = list(items)
    for i in range(len(ordered)):
        for j in range(i + 1, len(ordered)):
            if key(ordered[i]) > key(ordered[j]):
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def _run(ordered: Iterable[tuple[int, int, int | None]]) -> Schedule:
    clock = 0
    processes = []
    for pid, burst, prio in ordered:
        processes.append(ScheduledProcess(pid, burst, clock, clock + burst, prio))
        clock += burst
    return Schedule(tuple(processes))


def fcfs(bursts: Iterable[int]) -> Schedule:
    """First come, first served."""
    bursts = _check_bursts(bursts)
    return _run((pid, burst, None) for pid, burst in enumerate(bursts, 1))


def sjf(bursts: Iterable[int]) -> Schedule:
    """Shortest job first, non-preemptive."""
    bursts = _check_bursts(bursts)
    jobs = [(pid, burst, None) for pid, burst in enumerate(bursts, 1)]
    return _run(_exchange_sort(jobs, key=lambda job: job[1]))


def priority(bursts: Iterable[int], priorities: Iterable[int]) -> Schedule:
    """Non-preemptive priority scheduling; a lower number runs first."""
    bursts = _check_bursts(bursts)
    priorities = list(priorities)
    if len(priorities) != len(bursts):
        raise ValueError("one priority is required for each process")
    jobs = [
        (pid, burst, prio)
        for pid, (burst, prio) in enumerate(zip(bursts, priorities), 1)
    ]
    return _run(_exchange_sort(jobs, key=lambda job: job[2]))


def round_robin(bursts: Iterable[int], quantum: int) -> Schedule:
    """Round robin with a fixed time quantum; the table keeps input order."""
    bursts = _check_bursts(bursts)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(burst == 0 for burst in bursts):
        raise ValueError("burst times must be positive for round robin")
    remaining = list(bursts)
    completion: dict[int, int] = {}
    clock = 0
    while len(completion) < len(bursts):
        for index, left in enumerate(remaining):
            if left == 0:
                continue
            run = min(left, quantum)
            clock += run
            remaining[index] = left - run
            if remaining[index] == 0:
                completion[index] = clock
    return Schedule(
        tuple(
            ScheduledProcess(
                pid=index + 1,
                burst=burst,
                waiting=completion[index] - burst,
                turnaround=completion[index],
            )
            for index, burst in enumerate(bursts)
        )
    )