from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter, QResizeEvent
from PyQt5.QtWidgets import QFrame, QGraphicsView


class CustomGraphicsView(QGraphicsView):
    """
    Bar canvas:
    - no scroll bars, the scene is always fitted to the viewport
    - emits ``resized(width, height)`` so bars can be re-measured
    """

    resized = pyqtSignal(int, int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRenderHints(self.renderHints() | QPainter.Antialiasing)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setInteractive(False)
        self.setFrameShape(QFrame.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        size = self.viewport().size()
        self.resized.emit(size.width(), size.height())

    def wheelEvent(self, event):
        # the scene always fills the viewport; nothing to scroll or zoom
        event.ignore()
