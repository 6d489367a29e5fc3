import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from core import config
from sorting.moves import Move, SetValueAtIndex, SwapByIndex, SwapPivot
from sorting.scales import BarScales

logger = logging.getLogger(__name__)


class SortModel:
    """
    Holds the source array that every run starts from. After a run the
    sorted result becomes the new source, mirroring what is on screen.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._values: List[int] = []

    @property
    def length(self) -> int:
        return len(self._values)

    def generate(self, size: int) -> List[int]:
        if size < 0:
            raise ValueError(f"Array size must be non-negative, got {size}")
        self._values = [
            self._rng.randint(config.MIN_VALUE, config.MAX_VALUE) for _ in range(size)
        ]
        logger.debug("Generated array of %d values", size)
        return self.snapshot()

    def load_values(self, values: Sequence[int]):
        self._values = [int(value) for value in values]

    def commit_sorted(self, values: Sequence[int]):
        self.load_values(values)

    def snapshot(self) -> List[int]:
        return list(self._values)


@dataclass
class Bar:
    value: int
    width: float
    height: float
    color: str


class DisplayState:
    """
    Per-element visual attributes, index-aligned with the working array.
    Only the replay and validation players mutate it.
    """

    def __init__(self, bars: List[Bar], scales: BarScales):
        self.bars = bars
        self.scales = scales

    def __len__(self):
        return len(self.bars)

    def __getitem__(self, index) -> Bar:
        return self.bars[index]

    def __iter__(self):
        return iter(self.bars)

    def values(self) -> List[int]:
        return [bar.value for bar in self.bars]

    def colors(self) -> List[str]:
        return [bar.color for bar in self.bars]

    def swap(self, index_a: int, index_b: int):
        self._check_index(index_a)
        self._check_index(index_b)
        self.bars[index_a], self.bars[index_b] = self.bars[index_b], self.bars[index_a]

    def set_value(self, index: int, value: int):
        self._check_index(index)
        bar = self.bars[index]
        bar.value = value
        bar.height, bar.color = self.scales.measure(value)

    def set_color(self, index: int, color: str):
        self._check_index(index)
        self.bars[index].color = color

    def apply(self, move: Move):
        if isinstance(move, SwapByIndex):
            self.swap(move.index_a, move.index_b)
        elif isinstance(move, SwapPivot):
            self.swap(move.pivot_index, move.swap_index)
        elif isinstance(move, SetValueAtIndex):
            self.set_value(move.index, move.value)
        else:
            raise TypeError(f"Unknown move record: {move!r}")

    def _check_index(self, index: int):
        if index < 0 or index >= len(self.bars):
            raise IndexError("Index out of range")


def bar_width(count: int, canvas_width: float) -> float:
    if count <= 0:
        return 0.0
    return float(int(canvas_width // count) + config.BAR_PADDING)


def build_display(values: Sequence[int], canvas_width: float, canvas_height: float) -> DisplayState:
    scales = BarScales.from_values(values, canvas_height)
    width = bar_width(len(values), canvas_width)
    bars = []
    for value in values:
        height, color = scales.measure(value)
        bars.append(Bar(value=value, width=width, height=height, color=color))
    return DisplayState(bars, scales)
