"""Optimal (furthest next use) page replacement."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pagesim.args import Arguments, read_pages
from pagesim.fifo import _run_simulation

MAX_REFERENCES = 100_000
NO_FURTHER_REFERENCE = -1


class TooManyReferencesError(ValueError):
    """Raised when a reference string exceeds MAX_REFERENCES entries."""

    def __init__(self, count: int) -> None:
        super().__init__(f"{count} references exceed the limit of {MAX_REFERENCES}")
        self.count = count


@dataclass
class _Frame:
    page: int
    next_ref: int


def next_references(pages: Iterable[int]) -> list[int]:
    """For each reference, the index of the next reference to the same page, or -1."""
    pages = list(pages)
    result = [NO_FURTHER_REFERENCE] * len(pages)
    seen: dict[int, int] = {}
    for index, page in reversed(list(enumerate(pages))):
        result[index] = seen.get(page, NO_FURTHER_REFERENCE)
        seen[page] = index
    return result


def _victim(frames: list[_Frame]) -> int:
    """The first frame never used again, else the one used furthest ahead."""
    for index, frame in enumerate(frames):
        if frame.next_ref == NO_FURTHER_REFERENCE:
            return index
    return max(range(len(frames)), key=lambda index: frames[index].next_ref)


def optimal_faults(pages: Iterable[int], capacity: int) -> int:
    """Count page faults for a reference string under optimal replacement."""
    pages = list(pages)
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    if len(pages) > MAX_REFERENCES:
        raise TooManyReferencesError(len(pages))

    frames: list[_Frame] = []
    faults = 0
    for page, next_ref in zip(pages, next_references(pages)):
        resident = next((frame for frame in frames if frame.page == page), None)
        if resident is not None:
            resident.next_ref = next_ref
            continue
        faults += 1
        if len(frames) < capacity:
            frames.append(_Frame(page, next_ref))
        else:
            frames[_victim(frames)] = _Frame(page, next_ref)
    return faults


def _report(args: Arguments) -> str:
    pages = read_pages(args.file_name, args.page_size)
    faults = optimal_faults(pages, args.n_physical)
    return (
        f"Pages: {args.n_physical} | Page size: {args.page_size}\n"
        f"Page faults: {faults} | Total: {len(pages)}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the optimal simulation: ``optimal <physical_pages> <page_size> <file>``."""
    return _run_simulation(argv, _report)


if __name__ == "__main__":
    raise SystemExit(main())