from fenwicklib.bits import (
    covered_range, lowbit, next_index, parent_index, prefix_path, update_path)


def test_lowbit():
    assert lowbit(1) == 1
    assert lowbit(6) == 2
    assert lowbit(12) == 4
    assert lowbit(64) == 64


def test_covered_range():
    # 1-based layout: 1, 1..2, 3, 1..4, 5, 5..6, 7, 1..8
    expected = [(0, 0), (0, 1), (2, 2), (0, 3), (4, 4), (4, 5), (6, 6), (0, 7)]
    assert [covered_range(i) for i in range(8)] == expected


def test_parent_and_next():
    assert parent_index(0) == -1
    assert parent_index(6) == 5
    assert parent_index(5) == 3
    assert parent_index(3) == -1
    assert next_index(0) == 1
    assert next_index(4) == 5
    assert next_index(5) == 7


def test_prefix_path_covers_prefix_exactly():
    for i in range(100):
        covered = []
        for slot in prefix_path(i):
            lo, hi = covered_range(slot)
            covered.extend(range(lo, hi + 1))
        assert sorted(covered) == list(range(i + 1))


def test_update_path():
    assert list(update_path(0, 10)) == [0, 1, 3, 7]
    assert list(update_path(5, 10)) == [5, 7]
    assert list(update_path(9, 10)) == [9]
    assert list(update_path(0, 0)) == []


def test_update_path_hits_every_covering_slot():
    n = 37
    for i in range(n):
        covering = [s for s in range(n) if covered_range(s)[0] <= i <= s]
        assert list(update_path(i, n)) == covering
