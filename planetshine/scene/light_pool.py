"""
Render-side sinks for the albedo lighting computation.

This module provides:
- LightSourceRecord: one directional albedo light
- LightPool: fixed-capacity, pre-allocated collection of records
- AmbientLight: sink receiving the vacuum ambient tint

Records are allocated once per session and overwritten in place every frame.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple
import numpy as np

logger = logging.getLogger(__name__)

# Default forward direction of a freshly created light
DEFAULT_LIGHT_DIRECTION = (0.0, 0.0, 1.0)


@dataclass
class LightSourceRecord:
    """
    A directional light.

    Attributes:
        direction: Unit vector the light travels along (toward the vessel).
        intensity: Light intensity (>= 0).
        color: RGB color.
        enabled: Whether the host should draw this light.
    """
    direction: np.ndarray = field(default_factory=lambda: np.array(DEFAULT_LIGHT_DIRECTION))
    intensity: float = 0.0
    color: np.ndarray = field(default_factory=lambda: np.ones(3))
    enabled: bool = False


@dataclass
class AmbientLight:
    """Ambient sink; the host reads vacuum_ambient_color each frame."""
    vacuum_ambient_color: np.ndarray = field(default_factory=lambda: np.zeros(3))


class LightPool:
    """
    Fixed-capacity pool of albedo light records.

    The pool's capacity never changes after creation. `recreate()` discards
    the records and builds fresh ones with the same capacity.
    """

    def __init__(self, capacity: int):
        """
        Create the pool.

        Args:
            capacity: Number of lights (N >= 0)
        """
        if capacity < 0:
            raise ValueError(f"Light pool capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._records: List[LightSourceRecord] = []
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.recreate()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> Tuple[LightSourceRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LightSourceRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> LightSourceRecord:
        return self._records[index]

    def recreate(self) -> None:
        """Discard all records and allocate new ones with identical capacity."""
        self._records = [LightSourceRecord() for _ in range(self._capacity)]
        self.logger.debug(f"Allocated {self._capacity} albedo light records")

    def overwrite(self, lights: Sequence[Tuple[np.ndarray, float]], color: np.ndarray) -> None:
        """
        Overwrite every record in place.

        Args:
            lights: One (direction, intensity) pair per record, in index order
            color: RGB color applied to all records

        Raises:
            ValueError: If the number of lights differs from the pool capacity
        """
        if len(lights) != self._capacity:
            raise ValueError(f"Expected {self._capacity} lights, got {len(lights)}")

        for record, (direction, intensity) in zip(self._records, lights):
            record.direction = np.array(direction, dtype=np.float64)
            record.intensity = float(intensity)
            record.color = np.array(color, dtype=np.float64)
            record.enabled = True
