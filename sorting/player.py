import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from core import config
from sorting.sort_model import DisplayState

logger = logging.getLogger(__name__)


class _TickTask:
    """
    Work drained one step per ``tick()``. Whatever drives the ticks (a QTimer,
    a test loop) stops once ``tick()`` returns False.
    """

    def __init__(self, on_finished: Optional[Callable[[], None]] = None):
        self._on_finished = on_finished
        self.finished = False

    def tick(self) -> bool:
        if self.finished:
            return False
        if self._step():
            return True
        self.finished = True
        if self._on_finished:
            self._on_finished()
        return False

    def run_to_end(self):
        while self.tick():
            pass

    def _step(self) -> bool:
        raise NotImplementedError


class MovePlayer(_TickTask):
    """
    Replays a move log against a display state, one move per tick, in the
    order the moves were recorded.
    """

    def __init__(self, moves, display: DisplayState, on_finished=None):
        super().__init__(on_finished)
        self.display = display
        self._pending = list(moves)
        self._pending.reverse()

    def _step(self) -> bool:
        if not self._pending:
            return False
        self.display.apply(self._pending.pop())
        return True


@dataclass(frozen=True)
class ValidationRecord:
    index: int
    original_color: str


def collect_validation_records(display: DisplayState, source: Sequence[int]) -> List[ValidationRecord]:
    """
    Compares the display against a reference sort of ``source`` from index 0
    and returns one record per index up to the first mismatch.
    """
    reference = sorted(source)
    records = []
    for index, expected in enumerate(reference):
        if index >= len(display) or display[index].value != expected:
            break
        records.append(ValidationRecord(index, display[index].color))
    if len(records) < len(reference):
        logger.warning(
            "Display diverges from the reference sort at index %d", len(records)
        )
    return records


class ValidationPlayer(_TickTask):
    """
    Sweeps the highlight colour across the validated prefix. Each tick puts
    the previous bar back to its saved colour before lighting the next one.
    """

    def __init__(
        self,
        records: Sequence[ValidationRecord],
        display: DisplayState,
        on_finished=None,
        highlight: str = config.HIGHLIGHT_COLOR,
    ):
        super().__init__(on_finished)
        self.display = display
        self.highlight = highlight
        self._pending = list(records)
        self._pending.reverse()
        self._lit: Optional[ValidationRecord] = None
        self.validated: List[int] = []

    def _step(self) -> bool:
        self._restore()
        if not self._pending:
            return False
        record = self._pending.pop()
        self.display.set_color(record.index, self.highlight)
        self._lit = record
        self.validated.append(record.index)
        return True

    def _restore(self):
        if self._lit is not None:
            self.display.set_color(self._lit.index, self._lit.original_color)
            self._lit = None
