from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .params import DEFAULT_PARAMS, AestheticParams
from .raster import GridDimensions, render_frame

logger = logging.getLogger(__name__)


class FrameLoop:
    """Renders frames for the most recently committed grid into a text sink."""

    def __init__(self, sink: Callable[[str], None], grid: GridDimensions, params: AestheticParams = DEFAULT_PARAMS):
        self.sink = sink
        self.grid = grid
        self.params = params
        self.frames = 0

    def resize(self, grid: GridDimensions) -> None:
        if grid != self.grid:
            logger.debug("grid %dx%d -> %dx%d", self.grid.cols, self.grid.rows, grid.cols, grid.rows)
        self.grid = grid

    def tick(self, time_ms: float) -> str:
        text = render_frame(time_ms, self.grid, self.params)
        self.sink(text)
        self.frames += 1
        return text

    def run(
        self,
        cancel: threading.Event,
        fps: float = 60.0,
        max_frames: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Draw frames until ``cancel`` is set or ``max_frames`` is reached.

        Returns the number of frames drawn by this call.
        """
        if not fps > 0:
            raise ValueError(f"fps must be positive, got {fps}")
        frame_dt = 1.0 / fps
        start = clock()
        drawn = 0
        logger.info("frame loop started at %.0f fps", fps)
        while not cancel.is_set():
            if max_frames is not None and drawn >= max_frames:
                break
            now = clock()
            self.tick((now - start) * 1000.0)
            drawn += 1
            wait = frame_dt - (clock() - now)
            if wait > 0:
                sleep(wait)
        logger.info("frame loop stopped after %d frames", drawn)
        return drawn
