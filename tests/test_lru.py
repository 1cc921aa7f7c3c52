import pytest

from pagesim.fifo import fifo_faults
from pagesim.lru import lru_faults, main

REFERENCES = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]


@pytest.mark.parametrize(
    "pages, capacity, expected",
    [
        (REFERENCES, 3, 12),
        (REFERENCES, 10, 6),
        ([1, 2, 1, 3, 1], 2, 3),
        ([4, 4, 5, 5, 5, 4], 1, 3),
    ],
)
def test_fault_counts(pages, capacity, expected):
    assert lru_faults(pages, capacity) == expected


def test_recently_used_page_beats_fifo():
    assert lru_faults([1, 2, 1, 3, 1], 2) < fifo_faults([1, 2, 1, 3, 1], 2)


def test_no_anomaly_more_frames_never_hurt():
    counts = [lru_faults([1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5], c) for c in range(1, 7)]
    assert counts == sorted(counts, reverse=True)


def test_rejects_zero_capacity():
    with pytest.raises(ValueError):
        lru_faults(REFERENCES, 0)


def test_main_prints_summary(tmp_path, capsys):
    path = tmp_path / "refs.txt"
    path.write_text("".join(f"{p}\n" for p in REFERENCES))

    assert main(["3", "1", str(path)]) == 0

    assert capsys.readouterr().out == "Total 20 | Page size: 1 | Pages: 3\nPage faults: 12\n"


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], "Wrong argument count expected 3, but got 0.\n"),
        (["3", "4096", "{missing}"], "Something went wrong."),
    ],
)
def test_main_failures(tmp_path, capsys, argv, expected):
    argv = [arg.format(missing=tmp_path / "absent.txt") for arg in argv]
    assert main(argv) == 1
    assert capsys.readouterr().out == expected