"""Command-line front end for the page replacement and round-robin simulations."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from osalgos.paging import optimal
from osalgos.scheduling import round_robin

RR_HEADER = "BT   WT   TAT   CT"


def _run_optimal(args: argparse.Namespace) -> None:
    result = optimal(args.pages, args.frames)
    for step in result.steps:
        if step.fault:
            frames = " ".join(str(page) for page in step.frames)
            print(f"Frames after inserting {step.page}: {frames}")
    print()
    print(f"Total Page Faults: {result.faults}")


def _run_round_robin(args: argparse.Namespace) -> None:
    schedule = round_robin(args.bursts, args.quantum)
    print(RR_HEADER)
    for process in schedule:
        print(
            f"{process.burst}   {process.waiting}   "
            f"{process.turnaround}   {process.completion}"
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osalgos",
        description="Simulate page replacement and CPU scheduling algorithms.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    opt = commands.add_parser(
        "optimal", help="optimal page replacement over a reference string"
    )
    opt.add_argument(
        "-f", "--frames", type=int, required=True, help="number of page frames"
    )
    opt.add_argument("pages", nargs="+", type=int, help="page reference sequence")
    opt.set_defaults(handler=_run_optimal)

    rr = commands.add_parser(
        "round-robin", help="round-robin scheduling with a fixed time quantum"
    )
    rr.add_argument(
        "-q", "--quantum", type=int, required=True, help="time quantum"
    )
    rr.add_argument("bursts", nargs="+", type=int, help="burst time of each process")
    rr.set_defaults(handler=_run_round_robin)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the chosen simulation and print its report."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        args.handler(args)
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())