"""
Debug observers.
Log every intermediate value of a frame and keep the diagnostic line segments.
"""

import logging
from typing import Dict, Optional

from ..computation.albedo_lighting import FrameSnapshot, DebugLine
from .base_observer import FrameObserver


class DebugLogObserver(FrameObserver):
    """Logs the frame snapshot at debug level."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def on_frame(self, snapshot: FrameSnapshot) -> None:
        if not self.logger.isEnabledFor(logging.DEBUG):
            return

        for name, value in snapshot.as_dict().items():
            self.logger.debug(f"PlanetShine: {name} {value}")
        self.logger.debug(f"PlanetShine: visible_light_position_average "
                          f"{snapshot.visibility.average_light_position}")
        if snapshot.ambient_color is not None:
            self.logger.debug(f"PlanetShine: ambient_color {snapshot.ambient_color}")


class DebugLinesObserver(FrameObserver):
    """
    Keeps the three debug line segments of the latest frame.

    Lines: 'light_direction' (averaged reflector -> vessel), 'sun_direction'
    (sun -> vessel), 'body_direction' (body -> vessel).
    """

    def __init__(self):
        self.lines: Dict[str, DebugLine] = {}
        self.frames_seen = 0

    def on_frame(self, snapshot: FrameSnapshot) -> None:
        self.lines = dict(snapshot.debug_lines)
        self.frames_seen += 1

    def on_close(self) -> None:
        self.lines = {}
