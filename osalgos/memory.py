"""Contiguous allocation with external fragmentation, and fixed partitions with internal fragmentation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Allocation:
    """A process's request and the memory left free after it."""

    pid: int
    size: int
    remaining: int


@dataclass(frozen=True)
class ExternalFragmentationReport:
    """Allocations up to and including the first request that did not fit."""

    allocations: tuple[Allocation, ...]
    fragmentation: int | None = None
    failed_process: int | None = None

    @property
    def occurred(self) -> bool:
        return self.fragmentation is not None


@dataclass(frozen=True)
class InternalFragmentationRow:
    """A process placed in a fixed-size block and the space it leaves unused."""

    pid: int
    block_size: int
    size: int
    fragmentation: int


def allocate_contiguous(total: int, requests: Iterable[int]) -> ExternalFragmentationReport:
    """Allocate requests one after another until one exceeds the free memory.

    The failing request is reported with the shortfall as its fragmentation
    and shown with nothing remaining; later requests are not considered.
    """
    if total < 0:
        raise ValueError("total memory must not be negative")
    free = total
    allocations = []
    for pid, size in enumerate(requests, 1):
        left = free - size
        if left < 0:
            allocations.append(Allocation(pid, size, 0))
            return ExternalFragmentationReport(tuple(allocations), abs(left), pid)
        allocations.append(Allocation(pid, size, left))
        free = left
    return ExternalFragmentationReport(tuple(allocations))


def partition_count(total: int, block_size: int) -> int:
    """Number of whole blocks of the given size that fit in memory."""
    if block_size <= 0:
        raise ValueError("block size must be positive")
    return total // block_size


def fixed_partitions(
    total: int, block_size: int, requests: Iterable[int]
) -> list[InternalFragmentationRow]:
    """Place one request in each block; there must be one request per block."""
    count = partition_count(total, block_size)
    requests = list(requests)
    if len(requests) != count:
        raise ValueError(f"expected {count} requests, one per partition, got {len(requests)}")
    return [
        InternalFragmentationRow(pid, block_size, size, block_size - size)
        for pid, size in enumerate(requests, 1)
    ]