from __future__ import annotations

import logging
import shutil
import signal
import sys
import threading
from typing import Callable, Optional, TextIO

from asciifly.core.loop import FrameLoop
from asciifly.core.raster import GridDimensions, grid_dimensions

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR = "\033[2J"
HOME = "\033[H"


def terminal_lines() -> int:
    return shutil.get_terminal_size((80, 24)).lines


def terminal_grid(nominal_font_px: float = 16.0, size: Optional[tuple[int, int]] = None) -> GridDimensions:
    """Grid for the current terminal, treating each cell as a ``nominal_font_px`` glyph."""
    cols, rows = size or shutil.get_terminal_size((80, 24))
    return grid_dimensions(cols * nominal_font_px * 0.6, rows * nominal_font_px, nominal_font_px)


class TerminalSink:
    """Redraws each frame from the top-left corner of the terminal.

    The grid never has fewer than 25 rows, so on a shorter terminal the frame
    is cropped around its centre to leave the last line free; writing past it
    would scroll the screen every frame.
    """

    def __init__(self, out: Optional[TextIO] = None, lines: Callable[[], int] = terminal_lines):
        self.out = out or sys.stdout
        self.lines = lines
        self._warned = False

    def __enter__(self):
        self.out.write(HIDE_CURSOR + CLEAR)
        return self

    def __exit__(self, *exc):
        self.out.write(SHOW_CURSOR + "\n")
        self.out.flush()
        return False

    def crop(self, text: str) -> str:
        rows = text.split("\n")
        limit = max(1, self.lines() - 1)
        if len(rows) <= limit:
            return text
        if not self._warned:
            logger.warning("terminal shows %d rows, cropping %d-row frames", limit, len(rows))
            self._warned = True
        start = (len(rows) - limit) // 2
        return "\n".join(rows[start : start + limit])

    def __call__(self, text: str) -> None:
        # a narrower grid after resize would leave stale glyphs behind
        self.out.write(HOME + self.crop(text).replace("\n", "\033[K\n") + "\033[J")
        self.out.flush()


def run_terminal(fps: float = 30.0, max_frames: Optional[int] = None) -> int:
    cancel = threading.Event()
    with TerminalSink() as sink:
        loop = FrameLoop(sink, terminal_grid())

        previous = None
        if hasattr(signal, "SIGWINCH"):
            previous = signal.signal(signal.SIGWINCH, lambda *_: loop.resize(terminal_grid()))

        try:
            return loop.run(cancel, fps=fps, max_frames=max_frames)
        except KeyboardInterrupt:
            cancel.set()
            logger.info("stopped by user after %d frames", loop.frames)
            return loop.frames
        finally:
            if previous is not None:
                signal.signal(signal.SIGWINCH, previous)
