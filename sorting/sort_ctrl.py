import logging

from PyQt5.QtCore import QObject, Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from core import config
from core.animation import TickDriver
from core.global_ctrl import GlobalController
from sorting.algorithms import ALGORITHMS, BUBBLE_SORT
from sorting.scales import viridis_gradient
from sorting.session import SessionObserver, SortSession
from sorting.sort_model import SortModel, build_display
from sorting.sort_view import SortView

logger = logging.getLogger(__name__)


class SessionSignals(QObject, SessionObserver):
    """Re-emits session callbacks as Qt signals."""

    stateChanged = pyqtSignal(object)
    countersChanged = pyqtSignal(int, int)
    displayChanged = pyqtSignal(object)
    runFinished = pyqtSignal(object)

    def state_changed(self, state):
        self.stateChanged.emit(state)

    def counters_changed(self, counters):
        self.countersChanged.emit(counters.comparisons, counters.array_accesses)

    def display_changed(self, display):
        self.displayChanged.emit(display)

    def run_finished(self, run):
        self.runFinished.emit(run)


class SortController(QWidget):
    """
    Builds the sorting panel and bridges the model, the session and the view.
    """

    def __init__(self, global_ctrl: GlobalController, seed=None, initial_size=None):
        super().__init__()
        self.model = SortModel(seed)
        self.view = SortView(global_ctrl)
        self.signals = SessionSignals(self)
        self.session = SortSession(self.signals)
        self.driver = TickDriver(global_ctrl, self)
        self.display = None
        self._panel_locked = False
        self._active_label = None

        self.comparison_count = 0
        self.array_access_count = 0

        size = initial_size if initial_size is not None else config.DEFAULT_ARRAY_SIZE
        self._initial_size = max(config.MIN_ARRAY_SIZE, min(config.MAX_ARRAY_SIZE, size))

        self.panel = self._create_panel()

        self.view.interactionLocked.connect(self._on_lock_state)
        self.signals.countersChanged.connect(self._on_counters_changed)
        self.signals.displayChanged.connect(self.view.render)
        self.signals.runFinished.connect(self._on_run_finished)
        self.signals.stateChanged.connect(self._on_state_changed)

    # ---------- Panel UI ----------

    def _create_panel(self):
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(12)
        layout.setVerticalSpacing(12)
        layout.setColumnStretch(0, 1)
        layout.setColumnStretch(1, 1)

        # Array
        array_group = QGroupBox("Array")
        array_group.setStyleSheet("QGroupBox { color: white; }")
        array_layout = QVBoxLayout(array_group)
        array_layout.setContentsMargins(12, 10, 12, 12)
        array_layout.setSpacing(6)

        size_row = QHBoxLayout()
        self.size_slider = QSlider(Qt.Horizontal)
        self.size_slider.setRange(config.MIN_ARRAY_SIZE, config.MAX_ARRAY_SIZE)
        self.size_slider.setValue(self._initial_size)
        self.size_value_label = QLabel(str(self._initial_size))
        size_row.addWidget(QLabel("Size"))
        size_row.addWidget(self.size_slider, 1)
        size_row.addWidget(self.size_value_label)
        array_layout.addLayout(size_row)

        self.generate_btn = QPushButton("Generate Array")
        self.generate_btn.clicked.connect(self._on_generate)
        array_layout.addWidget(self.generate_btn)
        layout.addWidget(array_group, 0, 0)

        # Algorithms
        algo_group = QGroupBox("Algorithms")
        algo_group.setStyleSheet("QGroupBox { color: white; }")
        algo_layout = QGridLayout(algo_group)
        algo_layout.setContentsMargins(12, 10, 12, 12)
        algo_layout.setSpacing(6)
        self.algorithm_buttons = {}
        for idx, label in enumerate(ALGORITHMS):
            button = QPushButton(label)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked, name=label: self.start_sort(name))
            algo_layout.addWidget(button, idx // 2, idx % 2)
            self.algorithm_buttons[label] = button
        layout.addWidget(algo_group, 0, 1)

        # Counters + legend
        stats_group = QGroupBox("Statistics")
        stats_group.setStyleSheet("QGroupBox { color: white; }")
        stats_layout = QVBoxLayout(stats_group)
        stats_layout.setContentsMargins(12, 10, 12, 12)
        stats_layout.setSpacing(6)
        self.comparison_label = QLabel()
        self.array_access_label = QLabel()
        self.legend = QLabel()
        self.legend.setFixedHeight(14)
        self.legend.setStyleSheet(self._legend_style())
        stats_layout.addWidget(self.comparison_label)
        stats_layout.addWidget(self.array_access_label)
        stats_layout.addWidget(self.legend)
        layout.addWidget(stats_group, 1, 0, 1, 2)

        layout.setRowStretch(2, 1)

        self.size_slider.valueChanged.connect(self._on_size_changed)
        self._refresh_counter_labels()
        self._update_panel_enabled_state()
        return container

    @staticmethod
    def _legend_style():
        colors = viridis_gradient(10)
        last = len(colors) - 1
        stops = ", ".join(f"stop:{i / last:.3f} {color}" for i, color in enumerate(colors))
        return f"background: qlineargradient(x1:0, y1:0, x2:1, y2:0, {stops});"

    def build_panel(self):
        return self.panel

    # ---------- Controller lifecycle ----------

    def on_activate(self, graphics_view):
        self.view.bind_canvas(graphics_view)
        graphics_view.resized.connect(self._on_canvas_resized)
        if self.model.length == 0:
            self.generate(self.size_slider.value())

    # ---------- Public API ----------

    def generate(self, size):
        if self.session.busy:
            return
        self.model.generate(size)
        self._reset_counters()
        self._rebuild_display()

    def start_sort(self, label):
        if self.session.busy or self.display is None:
            logger.debug("Ignoring %s request while %s", label, self.session.state.value)
            # undo the check state Qt toggled on click
            self._update_panel_enabled_state()
            return
        self._active_label = label
        self._reset_counters()
        self.view.lock_interactions()
        try:
            self.session.start(label, self.model.snapshot(), self.display)
        except Exception:
            self._active_label = None
            self.view.unlock_interactions()
            self._update_panel_enabled_state()
            raise
        self.driver.start(self.session)

    # ---------- UI handlers ----------

    def _on_generate(self):
        self.generate(self.size_slider.value())

    def _on_size_changed(self, value):
        self.size_value_label.setText(str(value))
        self.generate(value)
        self._update_panel_enabled_state()

    def _on_canvas_resized(self, width, height):
        self.view.set_canvas_height(height)
        if not self.session.busy:
            self._rebuild_display()

    def _on_counters_changed(self, comparisons, accesses):
        self.comparison_count = comparisons
        self.array_access_count = accesses
        self._refresh_counter_labels()

    def _on_state_changed(self, state):
        logger.debug("Run state: %s", state.value)

    def _on_run_finished(self, run):
        self.model.commit_sorted(self.display.values())
        self._active_label = None
        self.view.unlock_interactions()
        self._update_panel_enabled_state()

    def _on_lock_state(self, locked):
        self._panel_locked = locked
        self._update_panel_enabled_state()

    # ---------- State helpers ----------

    def _rebuild_display(self):
        width, height = self.view.canvas_size()
        self.display = build_display(self.model.snapshot(), width, height)
        self.view.render(self.display)

    def _reset_counters(self):
        self._on_counters_changed(0, 0)

    def _refresh_counter_labels(self):
        self.comparison_label.setText(f"Comparisons: {self.comparison_count}")
        self.array_access_label.setText(f"Array accesses: {self.array_access_count}")

    def _update_panel_enabled_state(self):
        locked = self._panel_locked
        self.generate_btn.setDisabled(locked)
        self.size_slider.setDisabled(locked)
        too_big = self.size_slider.value() > config.BUBBLE_SORT_SIZE_LIMIT
        for label, button in self.algorithm_buttons.items():
            button.setChecked(label == self._active_label)
            button.setDisabled(locked or (label == BUBBLE_SORT and too_big))
