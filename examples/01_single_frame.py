#!/usr/bin/env python3
"""
PlanetShine Example 1: Single Frame
===================================

Computes one frame of albedo lighting for a vessel in low Kerbin orbit
and prints every light record and the ambient tint.

Run from project root:
    python examples/01_single_frame.py
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
from planetshine.scene import AmbientLight, build_frame
from planetshine.session import LightingSession


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("PlanetShine Example 1: Single Frame")
    print("=" * 60)

    # =========================================================================
    # STEP 1: Load Configuration
    # =========================================================================
    print("\n[1/3] Loading configuration...")

    config = PlanetShineConfigManager(PROJECT_ROOT).load_config()
    print(f"  Albedo lights: {config.albedo_lights_quantity}")

    # =========================================================================
    # STEP 2: Start Session
    # =========================================================================
    print("\n[2/3] Starting lighting session...")

    ambient = AmbientLight()
    session = LightingSession(config, ambient_light=ambient)
    session.start()
    print(f"  Initial ambient: {np.round(ambient.vacuum_ambient_color, 4)}")

    # =========================================================================
    # STEP 3: Compute Frame
    # =========================================================================
    print("\n[3/3] Computing frame (100 km altitude, sun 40 deg from zenith)...")

    frame = build_frame(body_radius=600_000.0, vessel_distance=700_000.0, sun_angle_deg=40.0)
    snapshot = session.update(frame)

    print("\n" + "=" * 60)
    print("RESULTS")
    print("=" * 60)

    for name, value in snapshot.as_dict().items():
        print(f"  {name:<38} {value}")

    print("\nLights:")
    for i, record in enumerate(session.light_pool):
        print(f"  #{i}: direction={np.round(record.direction, 4)} "
              f"intensity={record.intensity:.4f} color={np.round(record.color, 3)}")

    print(f"\nAmbient: {np.round(ambient.vacuum_ambient_color, 4)}")

    session.close()
    print("\nExample complete!")


if __name__ == "__main__":
    main()
