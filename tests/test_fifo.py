import pytest

from pagesim.fifo import fifo_faults, main

TEXTBOOK = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "pages, capacity, expected",
    [
        (TEXTBOOK, 3, 15),
        (BELADY, 3, 9),
        (BELADY, 4, 10),
        (TEXTBOOK, 10, 6),
        ([], 3, 0),
        (iter(BELADY), 3, 9),
    ],
)
def test_fault_counts(pages, capacity, expected):
    assert fifo_faults(pages, capacity) == expected


@pytest.mark.parametrize("capacity", [1, 2, 3, 4, 5])
def test_faults_bounded(capacity):
    faults = fifo_faults(TEXTBOOK, capacity)
    assert len(set(TEXTBOOK)) <= faults <= len(TEXTBOOK)


def test_rejects_zero_capacity():
    with pytest.raises(ValueError):
        fifo_faults(TEXTBOOK, 0)


def test_main_prints_pages_and_summary(tmp_path, capsys):
    addresses = [0, 4096, 8192, 4100, 12288]
    path = tmp_path / "refs.txt"
    path.write_text("".join(f"{a}\n" for a in addresses))

    assert main(["2", "4096", str(path)]) == 0

    assert capsys.readouterr().out == (
        "0\n0\n\n1\n4096\n\n2\n8192\n\n1\n4100\n\n3\n12288\n\n"
        "Page size: 4096 | Page count: 2\n"
        "Page faults: 4 | Total: 5\n"
    )


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["3"], "Wrong argument count expected 3, but got 1.\n"),
        (["3", "4096", "{missing}"], "Something went wrong.\n"),
    ],
)
def test_main_failures(tmp_path, capsys, argv, expected):
    argv = [arg.format(missing=tmp_path / "absent.txt") for arg in argv]
    assert main(argv) == 1
    assert capsys.readouterr().out == expected