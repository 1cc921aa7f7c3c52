# pagesim

`pagesim` simulates three page replacement policies over a trace of memory
references and counts the page faults each one causes:

- **FIFO**: evicts the page that has been resident the longest.
- **LRU**: evicts the page that has gone unreferenced the longest.
- **Optimal**: evicts a page that is never referenced again if there is one,
  otherwise the page whose next reference lies furthest in the future.

## Installation

```
pip install .
```

## Input

A trace file holds one memory address per line, written as a decimal integer.
Each line is read like C's `atoi`: leading whitespace and an optional sign are
accepted, parsing stops at the first non-digit, and a line with no leading
number counts as address 0. Each address is divided by the page size
(truncating toward zero) to find its page number.

```
0
4096
8192
100
12288
```

## Command-line use

Each simulator takes exactly three arguments: the number of physical page
frames, the page size, and the path of the trace file.

```
pagesim-fifo 4 4096 trace.txt
pagesim-lru 4 4096 trace.txt
pagesim-optimal 4 4096 trace.txt
```

The same commands are available as `python -m pagesim.fifo`,
`python -m pagesim.lru` and `python -m pagesim.optimal`.

What each command prints:

- `pagesim-fifo`: for every reference, its page number and its address
  followed by a blank line; then
  `Page size: <size> | Page count: <frames>` and
  `Page faults: <faults> | Total: <references>`.
- `pagesim-lru`: `Total <references> | Page size: <size> | Pages: <frames>`
  and `Page faults: <faults>`.
- `pagesim-optimal`: `Pages: <frames> | Page size: <size>` and
  `Page faults: <faults> | Total: <references>`.

With the wrong number of arguments a command prints
`Wrong argument count expected 3, but got <n>.` and exits with status 1.
If the trace file cannot be read, the page size is 0, the frame count is
below 1, or (for `pagesim-optimal`) the trace holds more than 100,000
references, it prints `Something went wrong.` and exits with status 1.
Numeric arguments are read like the trace lines, so a non-numeric value
counts as 0.

## Library use

The policies can also be called on any iterable of page numbers:

```python
from pagesim.args import read_pages
from pagesim.fifo import fifo_faults
from pagesim.lru import lru_faults
from pagesim.optimal import optimal_faults

pages = read_pages("trace.txt", 4096)
print(fifo_faults(pages, 4))
print(lru_faults(pages, 4))
print(optimal_faults(pages, 4))
```

Each `*_faults` function raises `ValueError` when the capacity is below 1.
`optimal_faults` raises `pagesim.optimal.TooManyReferencesError` (a
`ValueError`) for more than 100,000 references.

Other pieces of `pagesim.args`:

- `parse_arguments(argv)` turns `[frames, page_size, file_name]` into an
  `Arguments` value (`n_physical`, `page_size`, `file_name`) and raises
  `ArgumentCountError` when the list does not hold exactly three items.
- `atoi(text)` parses a leading decimal integer, returning 0 if there is none.
- `read_pages(path, page_size)` reads a trace file into a list of page
  numbers and raises `ValueError` for a page size of 0.

`pagesim.optimal.next_references(pages)` gives, for each reference, the index
of the next reference to the same page, or -1 if the page is not referenced
again.

## Running the tests

```
pip install .[test]
pytest
```