"""Page replacement algorithms: first-in first-out and optimal."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class PageStep:
    """One page reference and the frame contents after it was served."""

    page: int
    fault: bool
    frames: tuple[int, ...]


@dataclass(frozen=True)
class PagingResult:
    """The full trace of a page replacement run."""

    steps: tuple[PageStep, ...]

    @property
    def faults(self) -> int:
        return sum(step.fault for step in self.steps)

    @property
    def hits(self) -> int:
        return len(self.steps) - self.faults

    @property
    def final_frames(self) -> tuple[int, ...]:
        return self.steps[-1].frames if self.steps else ()


def _check_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise ValueError(f"number of frames must be positive, got {capacity}")


def fifo(pages: Iterable[int], capacity: int) -> PagingResult:
    """Serve the references, evicting frames in the order they were filled."""
    _check_capacity(capacity)
    frames: list[int] = []
    victim = 0
    steps = []
    for page in pages:
        fault = page not in frames
        if fault:
            if len(frames) < capacity:
                frames.append(page)
            else:
                frames[victim] = page
                victim = (victim + 1) % capacity
        steps.append(PageStep(page, fault, tuple(frames)))
    return PagingResult(tuple(steps))


def optimal(pages: Iterable[int], capacity: int) -> PagingResult:
    """Serve the references, evicting the page whose next use is farthest away.

    Among pages that are never used again, the one in the lowest frame goes.
    """
    _check_capacity(capacity)
    pages = list(pages)
    frames: list[int] = []
    steps = []
    for position, page in enumerate(pages):
        fault = page not in frames
        if fault:
            if len(frames) < capacity:
                frames.append(page)
            else:
                future = pages[position + 1:]

                def next_use(frame_page: int) -> int:
                    if frame_page in future:
                        return future.index(frame_page)
                    return len(future)

                victim, _ = max(enumerate(frames), key=lambda entry: next_use(entry[1]))
                frames[victim] = page
        steps.append(PageStep(page, fault, tuple(frames)))
    return PagingResult(tuple(steps))