"""Least-recently-used page replacement."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Sequence

from pagesim.args import Arguments, read_pages
from pagesim.fifo import _run_simulation


def lru_faults(pages: Iterable[int], capacity: int) -> int:
    """Count page faults for a reference string under LRU replacement."""
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    frames: OrderedDict[int, None] = OrderedDict()
    faults = 0
    for page in pages:
        if page in frames:
            frames.move_to_end(page)
            continue
        faults += 1
        if len(frames) == capacity:
            frames.popitem(last=False)
        frames[page] = None
    return faults


def _report(args: Arguments) -> str:
    pages = read_pages(args.file_name, args.page_size)
    faults = lru_faults(pages, args.n_physical)
    return (
        f"Total {len(pages)} | Page size: {args.page_size} | Pages: {args.n_physical}\n"
        f"Page faults: {faults}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the LRU simulation: ``lru <physical_pages> <page_size> <file>``."""
    return _run_simulation(argv, _report, failure_end="")


if __name__ == "__main__":
    raise SystemExit(main())