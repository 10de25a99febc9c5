#!/usr/bin/env python3
"""
PlanetShine Example 2: Altitude Sweep
=====================================

Sweeps the vessel from the surface of Kerbin out to 10 radii, records
every frame, saves the snapshots to CSV and plots the lighting profile.

Run from project root:
    python examples/02_altitude_sweep.py

Expected output:
    - CSV and PNG saved to data/results/altitude_sweep/<date>/
"""

import sys
import logging
from pathlib import Path

# =============================================================================
# SETUP PROJECT ROOT
# =============================================================================
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from planetshine.config import PlanetShineConfigManager
from planetshine.scene import AmbientLight, build_distance_sweep
from planetshine.session import LightingSession, run_frame_sequence
from planetshine.observers import SnapshotRecorder
from planetshine.io import save_lighting_data
from planetshine.visualization import create_lighting_profile_plot, setup_matplotlib_backend


BODY_RADIUS = 600_000.0


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    setup_matplotlib_backend(headless=True)

    print("=" * 60)
    print("PlanetShine Example 2: Altitude Sweep")
    print("=" * 60)

    config_manager = PlanetShineConfigManager(PROJECT_ROOT)
    config = config_manager.load_config()

    # =========================================================================
    # STEP 1: Build frames
    # =========================================================================
    num_points = 200
    altitudes = np.linspace(1_000.0, 10.0 * BODY_RADIUS, num_points)
    frames = build_distance_sweep(BODY_RADIUS, BODY_RADIUS + altitudes, sun_angle_deg=30.0)
    print(f"\n[1/3] Built {num_points} frames")

    # =========================================================================
    # STEP 2: Run session
    # =========================================================================
    print("\n[2/3] Running lighting session...")

    recorder = SnapshotRecorder()
    session = LightingSession(config, ambient_light=AmbientLight())
    session.start()
    session.register_observer(recorder)
    run_frame_sequence(session, frames)
    session.close()

    # =========================================================================
    # STEP 3: Save and plot
    # =========================================================================
    print("\n[3/3] Saving results...")

    output_dir = config_manager.get_output_directory("altitude_sweep")
    csv_path = save_lighting_data(output_dir, recorder.snapshots, label="altitude_sweep")
    print(f"  CSV: {csv_path}")

    create_lighting_profile_plot(
        x_values=altitudes / 1000.0,
        snapshots=recorder.snapshots,
        x_label='Altitude (km)',
        plot_mode='altitude',
        output_dir=output_dir,
        no_plot=True,
        save=True
    )

    print(f"Plot saved to: {output_dir}/<today's date>/")
    print("\nExample complete!")


if __name__ == "__main__":
    main()
