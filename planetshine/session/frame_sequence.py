"""
Run a lighting session over a sequence of frames.

Useful for offline sweeps (altitude profiles, sun angle profiles) and
benchmarks, where frames come from a list instead of a host tick.
"""

import time
import logging
from typing import List, Optional, Sequence

from tqdm.auto import tqdm

from ..scene.bodies import FrameInputs
from ..computation.albedo_lighting import FrameSnapshot
from .lighting_session import LightingSession

logger = logging.getLogger(__name__)


def run_frame_sequence(
    session: LightingSession,
    frames: Sequence[FrameInputs],
    show_progress: bool = True
) -> List[Optional[FrameSnapshot]]:
    """
    Update the session once per frame, in order.

    Args:
        session: Started lighting session
        frames: Frame inputs
        show_progress: If True, display tqdm progress bar

    Returns:
        One entry per frame: its snapshot, or None if the frame was skipped.
    """
    if not session.is_started:
        raise RuntimeError("Session must be started before running frames")

    logger.info(f"Running albedo lighting for {len(frames)} frames")
    sequence_start = time.time()

    frame_iter = frames
    if show_progress:
        frame_iter = tqdm(frames, desc="Computing albedo lighting", unit="frame", mininterval=0.5)

    snapshots: List[Optional[FrameSnapshot]] = []
    for frame in frame_iter:
        snapshots.append(session.update(frame))

    skipped = sum(1 for s in snapshots if s is None)
    elapsed = time.time() - sequence_start
    logger.info(f"Computed {len(frames) - skipped} frames ({skipped} skipped) in {elapsed:.2f}s")

    return snapshots
