import logging

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)


class TickDriver(QObject):
    """
    Calls ``task.tick()`` from a QTimer until the task returns False.

    The task may expose ``interval_ms()``; it is re-read after every tick so a
    task can change cadence between phases. The interval is scaled by the
    global speed.
    """

    finished = pyqtSignal()

    def __init__(self, global_ctrl, parent=None):
        super().__init__(parent)
        self.global_ctrl = global_ctrl
        self._task = None
        self._base_interval = 0
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_timeout)
        self.global_ctrl.speedChanged.connect(self._on_speed_changed)

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def start(self, task, interval_ms: int = 5):
        if self.active:
            raise RuntimeError("TickDriver is already running a task")
        self._task = task
        self._base_interval = self._task_interval(interval_ms)
        self._timer.start(self.global_ctrl.scale_interval(self._base_interval))

    def _task_interval(self, fallback: int) -> int:
        getter = getattr(self._task, "interval_ms", None)
        return getter() if callable(getter) else fallback

    def _on_timeout(self):
        more = self._task.tick()
        if not more:
            self._timer.stop()
            self._task = None
            self.finished.emit()
            return
        interval = self._task_interval(self._base_interval)
        if interval != self._base_interval:
            self._base_interval = interval
            self._timer.setInterval(self.global_ctrl.scale_interval(interval))

    def _on_speed_changed(self, _speed):
        if self.active:
            self._timer.setInterval(self.global_ctrl.scale_interval(self._base_interval))
