#!/usr/bin/env python3
"""
PlanetShine Frame Update Benchmark
==================================

Runs the per-frame albedo lighting update over an orbit-like sequence of
frames and reports the time spent per frame. The update runs inside the
host's frame loop, so it has to stay well under a millisecond.

Usage:
    python benchmark_frame_update.py [num_frames]

    num_frames: Number of frames (default: 2000)

Example:
    python benchmark_frame_update.py 10000
"""

import sys
import time
from pathlib import Path

# Project setup
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np


def benchmark_frame_update(num_frames: int = 2000, show_progress: bool = True):
    """
    Time the albedo lighting update over a full revolution around Kerbin.

    Args:
        num_frames: Number of frames
        show_progress: Show progress bar during computation

    Returns:
        Dict with timing breakdown and results
    """
    timings = {}
    total_start = time.time()

    # =========================================================================
    # PHASE 1: Configuration
    # =========================================================================
    phase1_start = time.time()

    from planetshine.config import PlanetShineConfigManager
    from planetshine.scene import AmbientLight, build_sun_angle_sweep
    from planetshine.session import LightingSession, run_frame_sequence

    config_manager = PlanetShineConfigManager(PROJECT_ROOT)
    config = config_manager.load_config()

    timings['config_loading'] = time.time() - phase1_start

    # =========================================================================
    # PHASE 2: Frame generation
    # =========================================================================
    phase2_start = time.time()

    sun_angles = np.linspace(0.0, 180.0, num_frames)
    frames = build_sun_angle_sweep(
        body_radius=600_000.0,
        vessel_distance=700_000.0,
        sun_angles_deg=sun_angles,
        body_name="Kerbin"
    )

    timings['frame_generation'] = time.time() - phase2_start

    # =========================================================================
    # PHASE 3: Frame updates (MAIN BENCHMARK TARGET)
    # =========================================================================
    phase3_start = time.time()

    session = LightingSession(config, ambient_light=AmbientLight())
    session.start()
    snapshots = run_frame_sequence(session, frames, show_progress=show_progress)
    session.close()

    timings['updates'] = time.time() - phase3_start
    timings['total'] = time.time() - total_start

    intensities = np.array([s.light_intensity for s in snapshots if s is not None])

    return {
        'timings': timings,
        'intensities': intensities,
        'num_frames': num_frames,
        'num_lights': config.albedo_lights_quantity
    }


def print_results(results: dict):
    """Print benchmark results."""
    timings = results['timings']

    print()
    print("=" * 70)
    print("PLANETSHINE FRAME UPDATE BENCHMARK RESULTS")
    print("=" * 70)
    print()
    print("Configuration:")
    print(f"  Frames:        {results['num_frames']:,}")
    print(f"  Albedo lights: {results['num_lights']}")
    print()
    print("Timing Breakdown:")
    print("-" * 50)
    print(f"  Config loading:    {timings['config_loading']:>8.3f}s")
    print(f"  Frame generation:  {timings['frame_generation']:>8.3f}s")
    print(f"  Frame updates:     {timings['updates']:>8.3f}s  <-- Main benchmark")
    print("-" * 50)
    print(f"  TOTAL:             {timings['total']:>8.3f}s")
    print()

    per_frame_ms = timings['updates'] / results['num_frames'] * 1000
    print("Performance Metrics:")
    print(f"  Time per frame:    {per_frame_ms:.3f}ms")
    print(f"  Frames/sec:        {results['num_frames'] / timings['updates']:,.0f}")
    print()

    intensities = results['intensities']
    if len(intensities) > 0:
        print("Lighting Results:")
        print(f"  Intensity range:   {intensities.min():.4f} to {intensities.max():.4f}")
    print()
    print("=" * 70)


if __name__ == "__main__":
    num_frames = 2000
    if len(sys.argv) > 1:
        try:
            num_frames = int(sys.argv[1])
        except ValueError:
            print(f"Invalid num_frames: {sys.argv[1]}, using default 2000")

    print(f"Running benchmark with {num_frames} frames...")
    print()

    results = benchmark_frame_update(num_frames=num_frames, show_progress=True)
    print_results(results)
