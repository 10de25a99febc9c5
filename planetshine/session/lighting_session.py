"""
Lighting session for a flight.

Owns the configuration snapshot, the albedo light pool, the optional
ambient sink and the registered observers. The host creates one session
when a flight starts, calls `update()` once per frame and `close()` when
the flight ends.
"""

import time
import logging
from typing import List, Optional, Set

from ..config.planetshine_config_schemas import PlanetShineConfig
from ..scene.bodies import FrameInputs
from ..scene.light_pool import LightPool, AmbientLight
from ..computation.albedo_lighting import FrameSnapshot, compute_albedo_lighting
from ..computation.ambient_blender import vacuum_color
from ..computation.light_distributor import distribute_lights
from ..observers.base_observer import FrameObserver
from ..observers.debug_observers import DebugLogObserver, DebugLinesObserver


class LightingSession:
    """Per-flight albedo lighting context."""

    def __init__(self, config: PlanetShineConfig, ambient_light: Optional[AmbientLight] = None):
        """
        Initialize the session.

        Args:
            config: Lighting configuration, fixed for the session's lifetime
            ambient_light: Ambient sink, or None if the host has none
        """
        self.config = config
        self.ambient_light = ambient_light
        self.light_pool: Optional[LightPool] = None
        self.observers: List[FrameObserver] = []
        self.debug_lines: Optional[DebugLinesObserver] = None
        self.frame_count = 0
        self.last_update_ms = 0.0
        self._reported_unknown_bodies: Set[str] = set()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def is_started(self) -> bool:
        return self.light_pool is not None

    def start(self) -> None:
        """
        Create the light pool and prime the ambient sink.

        Starting an already started session discards the previous pool.
        """
        if self.is_started:
            self.logger.info("Session restarted; discarding previous light pool")

        if self.ambient_light is not None:
            self.ambient_light.vacuum_ambient_color = vacuum_color(self.config.vacuum_light_level)

        self.light_pool = LightPool(self.config.albedo_lights_quantity)

        if self.config.debug and self.debug_lines is None:
            self.debug_lines = DebugLinesObserver()
            self.register_observer(DebugLogObserver())
            self.register_observer(self.debug_lines)

        self.logger.info(f"Lighting session started with {self.light_pool.capacity} albedo lights")

    def recreate_light_pool(self) -> None:
        """Discard the light records and recreate them with identical capacity."""
        if self.light_pool is None:
            raise RuntimeError("Session not started")
        self.light_pool.recreate()

    def register_observer(self, observer: FrameObserver) -> None:
        """
        Register an observer notified after each completed frame.

        Args:
            observer: FrameObserver instance
        """
        self.observers.append(observer)
        self.logger.debug(f"Registered {type(observer).__name__}")

    def update(self, frame: FrameInputs) -> Optional[FrameSnapshot]:
        """
        Run the albedo lighting computation for one frame.

        The full result is computed before anything is written; the pool
        and ambient tint are then overwritten in one pass. A frame without
        vessel or active body is skipped and leaves the previous state.

        Args:
            frame: Host inputs for this frame

        Returns:
            FrameSnapshot of the frame, or None if it was skipped.

        Raises:
            RuntimeError: If the session has not been started
        """
        if self.light_pool is None:
            raise RuntimeError("Session not started")

        update_start = time.time() if self.config.debug else None

        result = compute_albedo_lighting(frame, self.config, compute_ambient=self.ambient_light is not None)
        if result is None:
            return None

        distribute_lights(self.light_pool, result.distribution, result.light_color)
        if self.ambient_light is not None and result.ambient_color is not None:
            self.ambient_light.vacuum_ambient_color = result.ambient_color

        self.frame_count += 1
        snapshot = result.snapshot

        if snapshot.uses_default_properties and snapshot.body_name not in self._reported_unknown_bodies:
            self._reported_unknown_bodies.add(snapshot.body_name)
            self.logger.info(f"No albedo properties for body '{snapshot.body_name}'; using defaults")

        for observer in self.observers:
            observer.on_frame(snapshot)

        if update_start is not None:
            self.last_update_ms = (time.time() - update_start) * 1000.0
            self.logger.debug(f"PlanetShine: total update time {self.last_update_ms:.3f} ms")

        return snapshot

    def close(self) -> None:
        """Tear down the session: notify observers and release the light pool."""
        for observer in self.observers:
            observer.on_close()
        self.observers = []
        self.debug_lines = None
        self.light_pool = None
        self.logger.info(f"Lighting session closed after {self.frame_count} frames")
