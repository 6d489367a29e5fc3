import argparse
import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from core import config
from core.global_ctrl import GlobalController
from core.logging_config import setup_logging
from sorting.sort_ctrl import SortController
from widgets.graphics_view import CustomGraphicsView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: bar canvas on top, controls below."""

    def __init__(self, seed=None, initial_size=None):
        super().__init__()
        self.setWindowTitle("Sorting Algorithm Visualizer")
        self.resize(1280, 760)

        self.global_ctrl = GlobalController()
        self.controller = SortController(
            self.global_ctrl, seed=seed, initial_size=initial_size
        )

        self._build_ui()
        self._connect_signals()

        self.controller.on_activate(self.graphics_view)

    def _build_ui(self):
        central = QWidget(self)
        self.setCentralWidget(central)

        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(8)

        self.graphics_view = CustomGraphicsView()
        root_layout.addWidget(self.graphics_view, 1)

        speed_layout = QHBoxLayout()
        speed_label = QLabel("Animation Speed")
        self.speed_value_label = QLabel("1.0×")
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(50, 300)  # maps to 0.5x – 3x
        self.speed_slider.setValue(100)
        speed_layout.addWidget(speed_label)
        speed_layout.addWidget(self.speed_slider, 1)
        speed_layout.addWidget(self.speed_value_label)
        root_layout.addLayout(speed_layout)

        root_layout.addWidget(self.controller.build_panel(), 0)

    def _connect_signals(self):
        self.speed_slider.valueChanged.connect(self._on_speed_slider_changed)

    def _on_speed_slider_changed(self, value):
        speed = value / 100.0
        self.speed_value_label.setText(f"{speed:.1f}×")
        self.global_ctrl.set_speed(speed)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sorting Algorithm Visualizer")
    parser.add_argument(
        "--size",
        type=int,
        default=config.DEFAULT_ARRAY_SIZE,
        help=f"Initial array size ({config.MIN_ARRAY_SIZE}-{config.MAX_ARRAY_SIZE})",
    )
    parser.add_argument("--seed", type=int, help="Random seed for array generation")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser.parse_known_args(argv)


def main():
    args, qt_args = parse_args()
    setup_logging(args.log_level, args.log_file)

    app = QApplication([sys.argv[0]] + qt_args)
    window = MainWindow(seed=args.seed, initial_size=args.size)
    window.showMaximized()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
