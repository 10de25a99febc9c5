"""
Base class for frame observers.
Observers receive the diagnostic snapshot after each completed frame.
"""

from abc import ABC, abstractmethod

from ..computation.albedo_lighting import FrameSnapshot


class FrameObserver(ABC):
    """Base class for all frame observers."""

    @abstractmethod
    def on_frame(self, snapshot: FrameSnapshot) -> None:
        """
        Handle the snapshot of a completed frame.

        Args:
            snapshot: All intermediate values of the frame
        """
        pass

    def on_close(self) -> None:
        """Called once when the owning session is closed."""
        pass
