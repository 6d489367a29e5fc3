from dataclasses import dataclass
from typing import List, MutableSequence, Sequence, Union


@dataclass(frozen=True)
class SwapByIndex:
    """Two display entries exchange places."""

    index_a: int
    index_b: int


@dataclass(frozen=True)
class SetValueAtIndex:
    """The display entry at ``index`` is overwritten with ``value``."""

    index: int
    value: int


@dataclass(frozen=True)
class SwapPivot:
    """
    Same effect as :class:`SwapByIndex`, tagged separately so that the
    pivot placement of quick sort can be told apart during replay.
    """

    pivot_index: int
    swap_index: int


Move = Union[SwapByIndex, SetValueAtIndex, SwapPivot]


class MoveLog:
    """
    Append-only record of the moves performed by one sort run, kept in
    emission order.
    """

    def __init__(self):
        self._moves: List[Move] = []

    def __len__(self):
        return len(self._moves)

    def __iter__(self):
        return iter(self._moves)

    def __getitem__(self, index):
        return self._moves[index]

    def __eq__(self, other):
        if isinstance(other, MoveLog):
            return self._moves == other._moves
        return NotImplemented

    def __repr__(self):
        return f"MoveLog({self._moves!r})"

    def clear(self):
        self._moves.clear()

    def swap(self, index_a: int, index_b: int):
        self._moves.append(SwapByIndex(index_a, index_b))

    def set_value(self, index: int, value: int):
        self._moves.append(SetValueAtIndex(index, value))

    def swap_pivot(self, pivot_index: int, swap_index: int):
        self._moves.append(SwapPivot(pivot_index, swap_index))

    def to_list(self) -> List[Move]:
        return list(self._moves)


def apply_move(target: MutableSequence, move: Move):
    if isinstance(move, SwapByIndex):
        a, b = move.index_a, move.index_b
        target[a], target[b] = target[b], target[a]
    elif isinstance(move, SwapPivot):
        a, b = move.pivot_index, move.swap_index
        target[a], target[b] = target[b], target[a]
    elif isinstance(move, SetValueAtIndex):
        target[move.index] = move.value
    else:
        raise TypeError(f"Unknown move record: {move!r}")


def replay(values: Sequence[int], moves) -> List[int]:
    """Apply ``moves`` in order to a copy of ``values`` and return the copy."""
    result = list(values)
    for move in moves:
        apply_move(result, move)
    return result
