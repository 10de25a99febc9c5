"""Frame observers for diagnostics."""

from .base_observer import FrameObserver
from .debug_observers import DebugLogObserver, DebugLinesObserver
from .snapshot_recorder import SnapshotRecorder

__all__ = ['FrameObserver', 'DebugLogObserver', 'DebugLinesObserver', 'SnapshotRecorder']
