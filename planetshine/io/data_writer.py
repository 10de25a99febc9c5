"""
Data export utilities for albedo lighting snapshots.

Writes one CSV row per recorded frame with the named intermediates, the
per-light intensity and the ambient color, for offline tuning of the
lighting configuration.
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Sequence
import numpy as np

from ..computation.albedo_lighting import FrameSnapshot

logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = [
    'vessel_altitude',
    'visible_surface',
    'sun_angle',
    'visible_light_ratio',
    'visible_light_angle_effect',
    'atmosphere_reflection_effect',
    'atmosphere_ambient_ratio',
    'area_spread_angle',
    'area_spread_angle_ratio',
    'light_distance_effect',
    'light_intensity',
]


def save_lighting_data(
    output_dir: Path,
    snapshots: Sequence[FrameSnapshot],
    label: str = "sweep",
    timestamp: Optional[str] = None
) -> Path:
    """
    Save recorded snapshots to CSV.

    Args:
        output_dir: Directory to save CSV file (created if missing)
        snapshots: Recorded frame snapshots
        label: Filename label, e.g. 'altitude_sweep'
        timestamp: Optional HHMM timestamp string. If not provided, generates current time.

    Returns:
        Path to the saved CSV file

    Raises:
        ValueError: If no snapshots are provided
        RuntimeError: If CSV saving fails
    """
    if len(snapshots) == 0:
        raise ValueError("No snapshots provided")

    logger.info("Saving albedo lighting data to CSV...")

    try:
        if timestamp is None:
            timestamp = datetime.now().strftime("%H%M")
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        data_path = output_dir / f"{timestamp}_{label}_{len(snapshots)}frames.csv"

        rows: List[dict] = [snapshot.as_dict() for snapshot in snapshots]
        ambient = np.array([
            snapshot.ambient_color if snapshot.ambient_color is not None else np.full(3, np.nan)
            for snapshot in snapshots
        ])

        data_array = np.column_stack([
            np.array([row['body'] for row in rows], dtype=object),
            *[np.array([row[column] for row in rows]) for column in SNAPSHOT_COLUMNS],
            ambient[:, 0],
            ambient[:, 1],
            ambient[:, 2],
        ])
        header = ",".join(['body'] + SNAPSHOT_COLUMNS + ['ambient_r', 'ambient_g', 'ambient_b'])

        np.savetxt(data_path, data_array, delimiter=',', header=header, fmt='%s', comments='')

        logger.info(f"Data saved: {data_path}")
        return data_path

    except Exception as e:
        logger.error(f"Failed to save albedo lighting data: {e}")
        raise RuntimeError(f"CSV export failed: {e}") from e
