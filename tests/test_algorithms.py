import random

import pytest

from sorting.algorithms import (
    ALGORITHMS,
    SortCounters,
    UnknownAlgorithmError,
    bubble_sort,
    counting_sort,
    merge,
    partition,
    run_algorithm,
)
from sorting.moves import MoveLog, SetValueAtIndex, SwapByIndex, SwapPivot, replay


def random_arrays(count=25, seed=7):
    rng = random.Random(seed)
    arrays = [[], [0], [300], [4, 4, 4, 4], list(range(20)), list(range(20, 0, -1))]
    for _ in range(count):
        size = rng.randint(2, 60)
        arrays.append([rng.randint(0, 300) for _ in range(size)])
    # heavy duplicates
    arrays.append([rng.randint(0, 3) for _ in range(40)])
    return arrays


@pytest.mark.parametrize("label", list(ALGORITHMS))
def test_replaying_moves_reproduces_sorted_array(label):
    for source in random_arrays():
        run = run_algorithm(label, source)
        assert run.array == sorted(source)
        assert replay(source, run.moves) == sorted(source)


@pytest.mark.parametrize("label", list(ALGORITHMS))
def test_runs_are_deterministic(label):
    source = random_arrays(count=1, seed=3)[-2]
    first = run_algorithm(label, list(source))
    second = run_algorithm(label, list(source))
    assert first.array == second.array
    assert first.moves == second.moves


@pytest.mark.parametrize("label", list(ALGORITHMS))
@pytest.mark.parametrize("source", [[], [42]])
def test_degenerate_inputs_record_nothing(label, source):
    run = run_algorithm(label, source)
    assert run.array == source
    assert len(run.moves) == 0


def test_run_does_not_touch_source():
    source = [5, 3, 1, 4, 2]
    run_algorithm("Quick Sort", source)
    assert source == [5, 3, 1, 4, 2]


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        run_algorithm("Bogo Sort", [2, 1])


def test_bubble_sort_records_each_swap():
    array = [5, 3, 1, 4, 2]
    moves = MoveLog()
    bubble_sort(array, moves)
    assert array == [1, 2, 3, 4, 5]
    assert moves.to_list() == [
        SwapByIndex(0, 1),
        SwapByIndex(1, 2),
        SwapByIndex(2, 3),
        SwapByIndex(3, 4),
        SwapByIndex(0, 1),
        SwapByIndex(2, 3),
        SwapByIndex(1, 2),
    ]


def test_merge_sort_records_every_write():
    run = run_algorithm("Merge Sort", [5, 3, 1, 4, 2])
    assert run.array == [1, 2, 3, 4, 5]
    assert all(isinstance(move, SetValueAtIndex) for move in run.moves)
    # merges of sizes 2, 3, 2 and 5
    assert len(run.moves) == 12


class Tagged:
    def __init__(self, value, tag):
        self.value = value
        self.tag = tag

    def __gt__(self, other):
        return self.value > other.value


def test_merge_prefers_left_run_on_ties():
    left = Tagged(1, "left")
    right = Tagged(1, "right")
    array = [left, right]
    aux = [None, None]
    moves = MoveLog()
    merge(array, aux, 0, 0, 1, moves)
    assert array == [left, right]
    assert moves.to_list() == [SetValueAtIndex(0, left), SetValueAtIndex(1, right)]


def test_merge_copies_remainder():
    array = [1, 2, 0, 5]
    aux = [0] * 4
    moves = MoveLog()
    merge(array, aux, 0, 1, 3, moves)
    assert array == [0, 1, 2, 5]
    assert [move.index for move in moves] == [0, 1, 2, 3]


def test_counting_sort_places_from_the_end():
    array = [2, 2, 0, 1]
    moves = MoveLog()
    counting_sort(array, moves)
    assert array == [0, 1, 2, 2]
    assert moves.to_list() == [
        SetValueAtIndex(1, 1),
        SetValueAtIndex(0, 0),
        SetValueAtIndex(3, 2),
        SetValueAtIndex(2, 2),
    ]


def test_counting_sort_is_stable():
    array = [(2, "a"), (2, "b"), (0, "c"), (1, "d"), (0, "e")]
    moves = MoveLog()
    counting_sort(array, moves, key=lambda item: item[0])
    assert array == [(0, "c"), (0, "e"), (1, "d"), (2, "a"), (2, "b")]


def test_quick_sort_moves():
    run = run_algorithm("Quick Sort", [5, 3, 1, 4, 2])
    assert run.array == [1, 2, 3, 4, 5]
    assert run.moves.to_list() == [
        SwapPivot(0, 4),
        SwapByIndex(1, 2),
        SwapPivot(0, 1),
        SwapPivot(2, 2),
    ]


@pytest.mark.parametrize("source", [[2, 0, 1], [1, 2, 3, 4], [4, 3, 2, 1], [3, 3, 3]])
def test_partition_terminates_on_edge_inputs(source):
    array = list(source)
    p = partition(array, 0, len(array) - 1, MoveLog())
    assert all(value <= array[p] for value in array[:p])
    assert all(value >= array[p] for value in array[p + 1:])


def test_partition_splits_around_pivot():
    rng = random.Random(11)
    for _ in range(50):
        array = [rng.randint(0, 300) for _ in range(rng.randint(2, 40))]
        lo = rng.randint(0, len(array) - 2)
        hi = rng.randint(lo + 1, len(array) - 1)
        outside = array[:lo] + array[hi + 1:]
        p = partition(array, lo, hi, MoveLog())
        assert lo <= p <= hi
        assert all(value <= array[p] for value in array[lo:p])
        assert all(value >= array[p] for value in array[p + 1:hi + 1])
        assert array[:lo] + array[hi + 1:] == outside


def test_counters_are_reported():
    run = run_algorithm("Bubble Sort", [3, 2, 1])
    assert run.counters.comparisons == 3
    assert run.counters.array_accesses > 0


def test_counters_reset():
    counters = SortCounters(comparisons=4, array_accesses=9)
    counters.reset()
    assert counters == SortCounters()


@pytest.mark.parametrize("source", [list(range(2000)), [7] * 2000, list(range(2000, 0, -1))])
def test_quick_sort_handles_long_degenerate_runs(source):
    run = run_algorithm("Quick Sort", source)
    assert run.array == sorted(source)
    assert replay(source, run.moves) == sorted(source)


def test_quick_sort_finishes_left_range_first():
    # pivots placed left to right on sorted input
    run = run_algorithm("Quick Sort", [1, 2, 3, 4])
    assert run.moves.to_list() == [SwapPivot(0, 0), SwapPivot(1, 1), SwapPivot(2, 2)]
