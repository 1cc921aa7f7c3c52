"""First-in-first-out page replacement."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable, Sequence

from pagesim.args import Arguments, ArgumentCountError, parse_arguments, read_pages


def fifo_faults(pages: Iterable[int], capacity: int) -> int:
    """Count page faults for a reference string under FIFO replacement."""
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    frames: deque[int] = deque()
    resident: set[int] = set()
    faults = 0
    for page in pages:
        if page in resident:
            continue
        faults += 1
        if len(frames) == capacity:
            resident.discard(frames.popleft())
        frames.append(page)
        resident.add(page)
    return faults


def _run_simulation(
    argv: Sequence[str] | None,
    report: Callable[[Arguments], str],
    failure_end: str = "\n",
) -> int:
    """Parse the command line, run ``report`` and print its text; return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_arguments(argv)
    except ArgumentCountError as exc:
        print(exc)
        return 1
    try:
        text = report(args)
    except (OSError, ValueError):
        print("Something went wrong.", end=failure_end)
        return 1
    print(text)
    return 0


def _report(args: Arguments) -> str:
    pages = read_pages(args.file_name, args.page_size)
    addresses = read_pages(args.file_name, 1)
    faults = fifo_faults(pages, args.n_physical)
    body = "".join(f"{page}\n{address}\n\n" for page, address in zip(pages, addresses))
    return (
        f"{body}Page size: {args.page_size} | Page count: {args.n_physical}\n"
        f"Page faults: {faults} | Total: {len(pages)}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the FIFO simulation: ``fifo <physical_pages> <page_size> <file>``."""
    return _run_simulation(argv, _report)


if __name__ == "__main__":
    raise SystemExit(main())