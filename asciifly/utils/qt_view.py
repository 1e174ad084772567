from __future__ import annotations

import logging
import sys

from PySide6.QtCore import QElapsedTimer, Qt, QTimer
from PySide6.QtGui import QFont, QFontDatabase
from PySide6.QtWidgets import QApplication, QLabel, QSizePolicy, QVBoxLayout, QWidget

from asciifly.core.loop import FrameLoop
from asciifly.core.raster import grid_dimensions

logger = logging.getLogger(__name__)


def monospace_font(pixel_size: int) -> QFont:
    font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
    font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPixelSize(pixel_size)
    return font


class ButterflyView(QWidget):
    def __init__(self, font_px: int = 14, fps: int = 60):
        super().__init__()
        self.setWindowTitle("asciifly")
        self.resize(900, 900)
        self.setStyleSheet("background: #000; color: #e8e8e8;")

        self.label = QLabel(self)
        self.label.setFont(monospace_font(font_px))
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.label.setTextFormat(Qt.TextFormat.PlainText)
        # the text must not drive the window size, the window drives the grid
        self.label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.label)

        self.loop = FrameLoop(self.label.setText, self._measure_grid())
        self.clock = QElapsedTimer()
        self.clock.start()

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.on_tick)
        self.timer.start(max(1, int(1000 / fps)))

    def _measure_grid(self):
        return grid_dimensions(self.width(), self.height(), self.label.font().pixelSize())

    def on_tick(self):
        self.loop.tick(self.clock.elapsed())

    def resizeEvent(self, event):
        self.loop.resize(self._measure_grid())
        super().resizeEvent(event)

    def closeEvent(self, event):
        self.timer.stop()
        logger.info("view closed after %d frames", self.loop.frames)
        super().closeEvent(event)


def main(argv=None) -> int:
    try:
        app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
        w = ButterflyView()
        w.show()
        return app.exec()
    except Exception:
        logger.exception("failed to start the Qt view")
        return 1
