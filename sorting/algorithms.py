import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from sorting.moves import MoveLog

logger = logging.getLogger(__name__)


@dataclass
class SortCounters:
    """Comparisons and array accesses performed by one sort run."""

    comparisons: int = 0
    array_accesses: int = 0

    def compare(self, count: int = 1):
        self.comparisons += count

    def access(self, count: int = 1):
        self.array_accesses += count

    def reset(self):
        self.comparisons = 0
        self.array_accesses = 0


# ---------- Bubble sort ----------

def bubble_sort(array: List[int], moves: MoveLog, counters: Optional[SortCounters] = None):
    """
    Calls :func:`bubble` over ``[0, i]`` for ``i`` from ``len(array) - 1``
    down to 1.
    """
    counters = counters or SortCounters()
    for i in range(len(array) - 1, 0, -1):
        bubble(array, 0, i, moves, counters)


def bubble(array, lo, hi, moves, counters):
    """
    Swaps every out-of-order adjacent pair in ``[lo, hi]``. Afterwards the
    largest element of the range sits at ``hi``.
    """
    for i in range(lo, hi):
        counters.compare()
        counters.access(2)
        if array[i] > array[i + 1]:
            moves.swap(i, i + 1)
            _swap(array, i, i + 1, counters)


def _swap(array, index1, index2, counters):
    array[index1], array[index2] = array[index2], array[index1]
    counters.access(4)


# ---------- Merge sort ----------

def merge_sort(array, aux, lo, hi, moves: MoveLog, counters: Optional[SortCounters] = None):
    """
    Top-down merge sort of ``array[lo..hi]`` (inclusive) using ``aux`` as the
    copy buffer. ``aux`` must be at least as long as ``array``.
    """
    counters = counters or SortCounters()
    if hi <= lo:
        return
    mid = lo + (hi - lo) // 2
    merge_sort(array, aux, lo, mid, moves, counters)
    merge_sort(array, aux, mid + 1, hi, moves, counters)
    merge(array, aux, lo, mid, hi, moves, counters)


def merge(array, aux, lo, mid, hi, moves: MoveLog, counters: Optional[SortCounters] = None):
    """
    Merges the sorted runs ``[lo, mid]`` and ``[mid + 1, hi]``. Every write
    into ``array`` is recorded, including the tail copied after one run is
    exhausted. Ties take the left run.
    """
    counters = counters or SortCounters()
    for k in range(lo, hi + 1):
        aux[k] = array[k]
    counters.access(2 * (hi - lo + 1))

    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            value = aux[j]
            j += 1
        elif j > hi:
            value = aux[i]
            i += 1
        else:
            counters.compare()
            counters.access(2)
            if aux[i] > aux[j]:
                value = aux[j]
                j += 1
            else:
                value = aux[i]
                i += 1
        moves.set_value(k, value)
        array[k] = value
        counters.access(2)


# ---------- Counting sort ----------

def counting_sort(
    array: List,
    moves: MoveLog,
    counters: Optional[SortCounters] = None,
    key: Optional[Callable] = None,
):
    """
    Stable counting sort for non-negative integers. The caller guarantees the
    values are bounded; negative values are not checked.

    ``key`` maps an element to its integer key when the elements are not
    plain integers themselves.

    Only the placements into the output buffer are recorded; the final copy
    back into ``array`` writes the same values at the same indices.
    """
    counters = counters or SortCounters()
    if len(array) <= 1:
        return
    key = key or (lambda item: item)

    count = [0] * (max(key(item) for item in array) + 1)
    for item in array:
        count[key(item)] += 1
    counters.access(len(array))

    # count[k] becomes one past the last output position of k
    for i in range(len(count) - 1):
        count[i + 1] += count[i]

    aux = [None] * len(array)
    for i in range(len(array) - 1, -1, -1):
        item = array[i]
        count[key(item)] -= 1
        position = count[key(item)]
        aux[position] = item
        moves.set_value(position, item)
        counters.access(2)

    array[:] = aux
    counters.access(2 * len(aux))


# ---------- Quick sort ----------

def quick_sort(array, lo, hi, moves: MoveLog, counters: Optional[SortCounters] = None):
    """
    Sorts ``array[lo..hi]`` (inclusive). Pending ranges live on an explicit
    stack so sorted or all-equal input of any length cannot exhaust the
    interpreter's recursion limit. The left range is always finished before
    the right one, in the order a recursive quick sort would visit them.
    """
    counters = counters or SortCounters()
    pending = [(lo, hi)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        location = partition(array, lo, hi, moves, counters)
        pending.append((location + 1, hi))
        pending.append((lo, location - 1))


def partition(array, lo, hi, moves: MoveLog, counters: Optional[SortCounters] = None) -> int:
    """
    Hoare-style partition around ``array[lo]``. Returns the final index of the
    pivot: everything left of it is ``<=`` the pivot and everything right of it
    is ``>=`` the pivot.
    """
    counters = counters or SortCounters()
    pivot = array[lo]
    start = lo
    end = hi
    while True:
        # <= so that the pivot itself is skipped on the first pass;
        # bounded by hi because the run may hold nothing larger than the pivot
        while array[start] <= pivot:
            counters.compare()
            counters.access()
            if start >= hi:
                break
            start += 1
        # strictly > so end stops at the pivot at the latest
        while array[end] > pivot:
            counters.compare()
            counters.access()
            end -= 1
        # >= rather than == handles [2, 0, 1], where both cursors land on 2
        if start >= end:
            break
        _swap(array, start, end, counters)
        moves.swap(start, end)
    _swap(array, lo, end, counters)
    moves.swap_pivot(lo, end)
    return end


# ---------- Registry ----------

@dataclass
class SortRun:
    label: str
    array: List[int]
    moves: MoveLog
    counters: SortCounters = field(default_factory=SortCounters)


class UnknownAlgorithmError(KeyError):
    pass


def _run_bubble(array, moves, counters):
    bubble_sort(array, moves, counters)


def _run_merge(array, moves, counters):
    aux = [0] * len(array)
    merge_sort(array, aux, 0, len(array) - 1, moves, counters)


def _run_counting(array, moves, counters):
    counting_sort(array, moves, counters)


def _run_quick(array, moves, counters):
    quick_sort(array, 0, len(array) - 1, moves, counters)


BUBBLE_SORT = "Bubble Sort"
MERGE_SORT = "Merge Sort"
COUNTING_SORT = "Counting Sort"
QUICK_SORT = "Quick Sort"

ALGORITHMS: Dict[str, Callable[[List[int], MoveLog, SortCounters], None]] = {
    BUBBLE_SORT: _run_bubble,
    MERGE_SORT: _run_merge,
    COUNTING_SORT: _run_counting,
    QUICK_SORT: _run_quick,
}


def run_algorithm(label: str, source: Sequence[int]) -> SortRun:
    """
    Sorts a fresh copy of ``source`` with the algorithm named ``label`` and
    returns the sorted copy together with its move log and counters.
    """
    try:
        routine = ALGORITHMS[label]
    except KeyError:
        raise UnknownAlgorithmError(label) from None

    run = SortRun(label=label, array=list(source), moves=MoveLog())
    run.moves.clear()
    routine(run.array, run.moves, run.counters)
    logger.debug(
        "%s: %d elements, %d moves, %d comparisons, %d accesses",
        label,
        len(run.array),
        len(run.moves),
        run.counters.comparisons,
        run.counters.array_accesses,
    )
    return run
