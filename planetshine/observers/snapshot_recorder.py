"""Records frame snapshots for export and plotting."""

import logging
from typing import List, Optional

from ..computation.albedo_lighting import FrameSnapshot
from .base_observer import FrameObserver

logger = logging.getLogger(__name__)


class SnapshotRecorder(FrameObserver):
    """
    Collects snapshots of completed frames.

    Without a limit every frame is kept, which suits bounded offline sweeps.
    Attach to a live session only with max_snapshots set.

    Args:
        max_snapshots: Keep only the most recent snapshots if set
    """

    def __init__(self, max_snapshots: Optional[int] = None):
        if max_snapshots is not None and max_snapshots <= 0:
            raise ValueError(f"max_snapshots must be positive, got {max_snapshots}")
        self.max_snapshots = max_snapshots
        self.snapshots: List[FrameSnapshot] = []

    def on_frame(self, snapshot: FrameSnapshot) -> None:
        self.snapshots.append(snapshot)
        if self.max_snapshots is not None and len(self.snapshots) > self.max_snapshots:
            del self.snapshots[0]

    def clear(self) -> None:
        self.snapshots.clear()

    def on_close(self) -> None:
        logger.debug(f"Recorder closed with {len(self.snapshots)} snapshots")
