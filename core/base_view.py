from PyQt5.QtCore import QObject, QRectF, Qt, pyqtSignal
from PyQt5.QtWidgets import QGraphicsScene


class BaseStructureView(QObject):
    """
    Base class for visualization views, providing:
    - a QGraphicsScene bound to the shared canvas
    - interaction locking so controllers can disable their panels
    """

    interactionLocked = pyqtSignal(bool)

    def __init__(self, global_ctrl):
        super().__init__()
        self.global_ctrl = global_ctrl
        self.scene = QGraphicsScene()
        self._locked = False
        self._canvas = None  # bound QGraphicsView (optional)

    @property
    def locked(self) -> bool:
        return self._locked

    def bind_canvas(self, view):
        self._canvas = view
        if view:
            view.setScene(self.scene)
            view.resetTransform()

    def canvas_size(self):
        """(width, height) of the bound viewport, or (0, 0) when unbound."""
        if not self._canvas:
            return 0, 0
        rect = self._canvas.viewport().rect()
        return rect.width(), rect.height()

    def fit_scene(self, width, height):
        if not self._canvas:
            return
        target = QRectF(0, 0, max(width, 1.0), max(height, 1.0))
        self.scene.setSceneRect(target)
        self._canvas.resetTransform()
        self._canvas.fitInView(target, Qt.IgnoreAspectRatio)

    def lock_interactions(self):
        if not self._locked:
            self._locked = True
            self.interactionLocked.emit(True)

    def unlock_interactions(self):
        if self._locked:
            self._locked = False
            self.interactionLocked.emit(False)
