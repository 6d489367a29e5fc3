from PyQt5.QtCore import QRectF, Qt
from PyQt5.QtGui import QBrush, QColor
from PyQt5.QtWidgets import QGraphicsItem, QGraphicsObject

from core import config
from core.base_view import BaseStructureView


class SortView(BaseStructureView):
    """Draws a display state as bottom-aligned bars."""

    def __init__(self, global_ctrl):
        super().__init__(global_ctrl)
        self.scene.setBackgroundBrush(QColor("#1e1e24"))
        self.items = []
        self._canvas_height = 0.0

    def bind_canvas(self, view):
        super().bind_canvas(view)
        _, self._canvas_height = self.canvas_size()

    # ---------- Public API ----------

    def reset(self):
        self.scene.clear()
        self.items = []

    def render(self, display):
        """Sync bar items with ``display``; called after every tick."""
        if len(self.items) != len(display):
            self._rebuild(len(display))

        height = max([self._canvas_height] + [bar.height for bar in display])
        step = display[0].width if len(display) else 0.0
        for idx, bar in enumerate(display):
            item = self.items[idx]
            item.set_geometry(
                idx * step,
                height - bar.height,
                max(1.0, bar.width - config.BAR_PADDING),
                bar.height,
            )
            item.setFillColor(bar.color)

        self.fit_scene(step * len(display), height)

    def set_canvas_height(self, height):
        self._canvas_height = float(height)

    # ---------- Internal helpers ----------

    def _rebuild(self, count):
        self.reset()
        for _ in range(count):
            item = BarItem()
            self.scene.addItem(item)
            self.items.append(item)


class BarItem(QGraphicsObject):
    def __init__(self):
        super().__init__()
        self._rect = QRectF()
        self.fillColor = QColor("#b8b8d6")
        self.setCacheMode(QGraphicsItem.NoCache)

    def boundingRect(self):
        return QRectF(0, 0, self._rect.width(), self._rect.height())

    def paint(self, painter, option, widget=None):
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self.fillColor))
        painter.drawRect(self.boundingRect())

    def set_geometry(self, x, y, width, height):
        if width != self._rect.width() or height != self._rect.height():
            self.prepareGeometryChange()
        self._rect = QRectF(x, y, width, height)
        self.setPos(x, y)
        self.update()

    def setFillColor(self, color):
        color = QColor(color)
        if color != self.fillColor:
            self.fillColor = color
            self.update()
