import enum
import logging
from typing import Optional, Sequence

from core import config
from sorting.algorithms import (
    ALGORITHMS,
    SortCounters,
    SortRun,
    UnknownAlgorithmError,
    run_algorithm,
)
from sorting.player import MovePlayer, ValidationPlayer, collect_validation_records
from sorting.sort_model import DisplayState

logger = logging.getLogger(__name__)


class RunState(enum.Enum):
    IDLE = "idle"
    SORTING = "sorting"
    REPLAYING = "replaying"
    VALIDATING = "validating"


class SessionBusyError(RuntimeError):
    pass


class SessionObserver:
    """Callbacks raised by :class:`SortSession`. All default to no-ops."""

    def state_changed(self, state: RunState):
        pass

    def counters_changed(self, counters: SortCounters):
        pass

    def display_changed(self, display: DisplayState):
        pass

    def run_finished(self, run: SortRun):
        pass


class SortSession:
    """
    Drives one run at a time through sort -> replay -> validate.

    ``start`` sorts synchronously; afterwards the owner calls ``tick`` at
    ``interval_ms`` until it returns False, at which point the session is
    idle again and ``run_finished`` has been raised.
    """

    def __init__(self, observer: Optional[SessionObserver] = None):
        self.observer = observer or SessionObserver()
        self.state = RunState.IDLE
        self.run: Optional[SortRun] = None
        self.display: Optional[DisplayState] = None
        self._source: Sequence[int] = ()
        self._task = None

    @property
    def busy(self) -> bool:
        return self.state is not RunState.IDLE

    def start(self, label: str, source: Sequence[int], display: DisplayState) -> SortRun:
        if self.busy:
            raise SessionBusyError(f"Cannot start {label!r} while {self.state.value}")
        if label not in ALGORITHMS:
            raise UnknownAlgorithmError(label)
        if len(display) != len(source):
            raise ValueError("Display state and source array differ in length")

        self.display = display
        self._source = list(source)

        self._set_state(RunState.SORTING)
        try:
            self.run = run_algorithm(label, self._source)
        except Exception:
            logger.exception("%s failed on %d elements", label, len(self._source))
            self._set_state(RunState.IDLE)
            raise
        self.observer.counters_changed(self.run.counters)
        logger.info("%s recorded %d moves", label, len(self.run.moves))

        self._task = MovePlayer(self.run.moves, display, on_finished=self._begin_validation)
        self._set_state(RunState.REPLAYING)
        return self.run

    def interval_ms(self) -> int:
        if self.state is RunState.VALIDATING:
            return config.VALIDATION_INTERVAL_MS
        return config.REPLAY_INTERVAL_MS

    def tick(self) -> bool:
        """Advance the active phase by one step. False once the run is over."""
        if self._task is None:
            return False
        task = self._task
        task.tick()
        if self.display is not None:
            self.observer.display_changed(self.display)
        return self._task is not None

    def run_to_end(self):
        while self.tick():
            pass

    def _begin_validation(self):
        records = collect_validation_records(self.display, self._source)
        self._task = ValidationPlayer(records, self.display, on_finished=self._finish)
        self._set_state(RunState.VALIDATING)

    def _finish(self):
        self._task = None
        run = self.run
        self._set_state(RunState.IDLE)
        logger.info("%s finished", run.label)
        self.observer.run_finished(run)

    def _set_state(self, state: RunState):
        self.state = state
        self.observer.state_changed(state)
