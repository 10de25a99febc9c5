"""
Lighting Profile Plotting Module
================================

Plots how the albedo lights and ambient tint respond to a swept variable
(altitude, sun angle, trajectory time), for tuning the configuration.

Functions:
    create_lighting_profile_plot: Two-panel plot of intensities and effect ratios
"""

import time
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from .plot_styling import FIGURE_SIZE, PLOT_DPI, TITLE_MAPPING
from ..computation.albedo_lighting import FrameSnapshot

logger = logging.getLogger(__name__)


def _get_date_output_dir(output_dir: Path) -> Path:
    """
    Create and return a date-based subdirectory (yymmdd format) within output_dir.
    """
    date_folder = datetime.now().strftime("%y%m%d")
    date_output_dir = Path(output_dir) / date_folder
    date_output_dir.mkdir(parents=True, exist_ok=True)
    return date_output_dir


def create_lighting_profile_plot(
    x_values: np.ndarray,
    snapshots: Sequence[FrameSnapshot],
    x_label: str,
    plot_mode: str,
    output_dir: Optional[Path] = None,
    no_plot: bool = False,
    save: bool = True
) -> float:
    """
    Create a lighting profile plot.

    Top panel: per-light intensity and ambient tint luminance. Bottom panel:
    visibility ratio, angle effect, reflection effect and ambient fade ratio.

    Args:
        x_values: Swept variable, one value per snapshot
        snapshots: Frame snapshots
        x_label: Axis label for the swept variable
        plot_mode: One of 'altitude', 'sun_angle', 'trajectory'
        output_dir: Base output directory (date subfolder created automatically)
        no_plot: If True, don't display the plot
        save: If True, save PNG to the date-based folder

    Returns:
        Time taken to generate plot in seconds (0.0 on failure)
    """
    logger.info("Creating lighting profile plot...")
    plot_start = time.time()

    try:
        if len(snapshots) == 0:
            raise ValueError("No snapshots provided")
        if len(x_values) != len(snapshots):
            raise ValueError("x_values and snapshots must have same length")
        if save and output_dir is None:
            raise ValueError("output_dir required when save=True")
    except Exception as e:
        logger.error(f"Input validation failed: {e}")
        return 0.0

    x_values = np.asarray(x_values, dtype=np.float64)
    intensity = np.array([s.light_intensity for s in snapshots])
    ambient_luminance = np.array([
        float(np.mean(s.ambient_color)) if s.ambient_color is not None else np.nan
        for s in snapshots
    ])
    visibility_ratio = np.array([s.visibility.visibility_ratio for s in snapshots])
    angle_effect = np.array([s.visibility.angle_effect for s in snapshots])
    reflection_effect = np.array([s.atmosphere.reflection_effect for s in snapshots])
    ambient_fade_ratio = np.array([s.atmosphere.ambient_fade_ratio for s in snapshots])

    fig = None
    try:
        fig, (ax_top, ax_bottom) = plt.subplots(2, 1, figsize=FIGURE_SIZE, sharex=True)

        title = TITLE_MAPPING.get(plot_mode, f'Albedo Lighting - {plot_mode}')
        fig.suptitle(f'{title} ({snapshots[0].body_name})', fontsize=16, fontweight='bold')

        ax_top.plot(x_values, intensity, c='b', label='Per-light intensity')
        if np.isfinite(ambient_luminance).any():
            ax_top.plot(x_values, ambient_luminance, c='orange', label='Ambient (mean RGB)')
        ax_top.set_ylabel('Intensity', fontsize=12)
        ax_top.grid(True, alpha=0.3)
        ax_top.legend(loc='upper right')

        ax_bottom.plot(x_values, visibility_ratio, label='Visibility ratio')
        ax_bottom.plot(x_values, angle_effect, label='Angle effect')
        ax_bottom.plot(x_values, reflection_effect, label='Reflection effect')
        ax_bottom.plot(x_values, ambient_fade_ratio, label='Ambient fade ratio')
        ax_bottom.set_ylim(-0.05, 1.05)
        ax_bottom.set_ylabel('Ratio', fontsize=12)
        ax_bottom.set_xlabel(x_label, fontsize=12)
        ax_bottom.grid(True, alpha=0.3)
        ax_bottom.legend(loc='upper right')

        if save:
            date_dir = _get_date_output_dir(output_dir)
            timestamp = datetime.now().strftime("%H%M")
            png_path = date_dir / f"{timestamp}_{plot_mode}_profile_{len(snapshots)}frames.png"
            plt.savefig(png_path, dpi=PLOT_DPI, bbox_inches='tight')
            logger.info(f"Plot saved: {png_path}")

        plot_time = time.time() - plot_start
        logger.info(f"Lighting profile plot generated ({plot_time:.2f}s)")

        if not no_plot:
            plt.show()

        return plot_time

    except Exception as e:
        logger.error(f"Plot generation failed: {e}")
        return 0.0

    finally:
        if fig is not None:
            plt.close(fig)
        else:
            plt.close('all')
