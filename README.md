# osalgos

Small, readable implementations of the algorithms met in an operating-systems
course:

- **Page replacement** (`osalgos.paging`): `fifo` and `optimal` replacement.
  Each run returns a `PagingResult` holding one `PageStep` per reference
  (the page, whether it faulted, and the frame contents afterwards), with
  `faults`, `hits` and `final_frames` properties. When several pages are never
  used again, `optimal` evicts the one in the lowest frame.
- **CPU scheduling** (`osalgos.scheduling`): `fcfs`, `sjf`, non-preemptive
  `priority` (a lower number runs first) and `round_robin`, for processes that
  all arrive at time zero. Each returns a `Schedule` of `ScheduledProcess`
  rows with `pid` (1-based input position), `burst`, `waiting`, `turnaround`,
  `completion` and, for `priority`, the process's `priority`.
  `average_waiting()` and `average_turnaround()` return the means truncated to
  whole numbers.
- **Memory fragmentation** (`osalgos.memory`): `allocate_contiguous` allocates
  requests one after another until one does not fit and returns an
  `ExternalFragmentationReport` (the `Allocation` rows, the shortfall as
  `fragmentation`, the `failed_process`, and `occurred`);
  `partition_count` and `fixed_partitions` place one request in each
  fixed-size block and report the unused space as `InternalFragmentationRow`
  values.
- **Producer/consumer** (`osalgos.producer_consumer`): a `Semaphore` whose
  `wait()` returns `False` instead of blocking, a `BoundedBuffer` (capacity 1
  to 20) guarded by mutex, empty and full semaphores, and `simulate`, which
  produces every item and then consumes them all.

Invalid input (no processes, negative bursts, a non-positive quantum or frame
count, a wrong number of priorities or partition requests) raises
`ValueError`. `BoundedBuffer.produce` raises `queue.Full` when no slot is free
and `BoundedBuffer.consume` raises `queue.Empty` when there is nothing to take.

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

## Using the library

```python
from osalgos.paging import fifo, optimal
from osalgos.scheduling import fcfs, sjf, priority, round_robin
from osalgos.memory import allocate_contiguous, partition_count, fixed_partitions
from osalgos.producer_consumer import Semaphore, BoundedBuffer, simulate

reference = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
print(fifo(reference, 3).faults)
print(optimal(reference, 3).final_frames)

schedule = round_robin([24, 3, 3], quantum=4)
print(schedule.average_waiting(), schedule.average_turnaround())

by_priority = priority([10, 1, 2], [3, 1, 2])
print([process.pid for process in by_priority])

report = allocate_contiguous(100, [30, 40, 50])
print(report.occurred, report.fragmentation, report.failed_process)

print(partition_count(100, 25))
rows = fixed_partitions(100, 25, [20, 25, 10, 5])

buffer = BoundedBuffer(3)
buffer.produce(1)
print(buffer.consume())
print(simulate([1, 2, 3]))
```

`fcfs`, `sjf` and `priority` list their processes in the order they ran;
`round_robin` keeps the input order.

## Command line

Installing the package provides an `osalgos` command with two subcommands.

Optimal page replacement over a reference string with a given number of
frames; it prints the frames after each page fault and the total:

```
osalgos optimal --frames 3 7 0 1 2 0 3 0 4 2 3 0 3 2
```

Round-robin scheduling with a time quantum; it prints burst, waiting,
turnaround and completion time for each process:

```
osalgos round-robin --quantum 4 24 3 3
```

Invalid values are reported as usage errors. See all options with:

```
osalgos --help
```

## What it does not do

The command line covers only optimal page replacement and round robin; FIFO
paging, the other schedulers, the fragmentation reports and the
producer/consumer buffer are available from Python only. Processes are never
run concurrently: the semaphores are counters that report unavailability
rather than blocking threads.

## Running the tests

```
pip install ".[test]"
pytest
```