from PyQt5.QtCore import QObject, pyqtSignal


class GlobalController(QObject):
    """
    Holds the playback speed multiplier shared by every tick driver and
    broadcasts changes so running timers pick up the new cadence.
    """

    speedChanged = pyqtSignal(float)

    MIN_SPEED = 0.5
    MAX_SPEED = 3.0

    def __init__(self):
        super().__init__()
        self._speed = 1.0

    @property
    def speed(self) -> float:
        return self._speed

    def set_speed(self, value: float):
        """Clamp to 0.5x - 3x and broadcast if it changed."""
        value = max(self.MIN_SPEED, min(self.MAX_SPEED, value))
        if abs(value - self._speed) > 1e-3:
            self._speed = value
            self.speedChanged.emit(self._speed)

    def scale_interval(self, base_ms: int) -> int:
        """
        Tick interval at the current speed. Higher speed -> shorter interval,
        never below 1 ms.
        """
        if self._speed <= 0:
            return base_ms
        return max(1, int(round(base_ms / self._speed)))
