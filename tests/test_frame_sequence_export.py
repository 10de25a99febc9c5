"""Tests for frame sequences, CSV export and profile plots."""

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from planetshine.scene.bodies import FrameInputs
from planetshine.scene.frame_builders import build_distance_sweep, build_sun_angle_sweep
from planetshine.scene.light_pool import AmbientLight
from planetshine.session import LightingSession, run_frame_sequence
from planetshine.io import save_lighting_data
from planetshine.io.data_writer import SNAPSHOT_COLUMNS
from planetshine.visualization import create_lighting_profile_plot

from conftest import KERBIN_RADIUS, LOW_ORBIT_DISTANCE


@pytest.fixture
def session(config):
    session = LightingSession(config, ambient_light=AmbientLight())
    session.start()
    yield session
    session.close()


class TestFrameSequence:

    def test_one_snapshot_per_frame(self, session):
        frames = build_sun_angle_sweep(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, np.linspace(0.0, 180.0, 7))
        snapshots = run_frame_sequence(session, frames, show_progress=False)

        assert len(snapshots) == 7
        assert session.frame_count == 7
        angles = [s.visibility.sun_angle for s in snapshots]
        np.testing.assert_allclose(angles, np.linspace(0.0, 180.0, 7), atol=1e-6)

    def test_skipped_frames_are_none(self, session):
        frames = build_sun_angle_sweep(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, [10.0, 20.0])
        frames.insert(1, FrameInputs())
        snapshots = run_frame_sequence(session, frames, show_progress=False)

        assert snapshots[0] is not None
        assert snapshots[1] is None
        assert snapshots[2] is not None

    def test_with_progress_bar(self, session):
        frames = build_distance_sweep(KERBIN_RADIUS, [650_000.0, 700_000.0], 0.0)
        assert len(run_frame_sequence(session, frames, show_progress=True)) == 2

    def test_requires_started_session(self, config):
        with pytest.raises(RuntimeError):
            run_frame_sequence(LightingSession(config), [], show_progress=False)


class TestExport:

    def test_csv_layout(self, session, tmp_path):
        distances = [620_000.0, 700_000.0, 2.0e6]
        snapshots = run_frame_sequence(session, build_distance_sweep(KERBIN_RADIUS, distances, 30.0),
                                       show_progress=False)
        path = save_lighting_data(tmp_path / "out", snapshots, label="altitude_sweep", timestamp="1200")

        assert path.name == "1200_altitude_sweep_3frames.csv"
        lines = path.read_text().strip().splitlines()
        header = lines[0].split(',')
        assert header == ['body'] + SNAPSHOT_COLUMNS + ['ambient_r', 'ambient_g', 'ambient_b']
        assert len(lines) == 4

        first = lines[1].split(',')
        assert first[0] == "Kerbin"
        assert float(first[header.index('vessel_altitude')]) == pytest.approx(snapshots[0].geometry.altitude)
        assert float(first[header.index('light_intensity')]) == pytest.approx(snapshots[0].light_intensity)

    def test_empty_export_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            save_lighting_data(tmp_path, [])


class TestProfilePlot:

    def test_plot_saved(self, session, tmp_path):
        angles = np.linspace(0.0, 180.0, 10)
        snapshots = run_frame_sequence(session, build_sun_angle_sweep(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, angles),
                                       show_progress=False)
        plot_time = create_lighting_profile_plot(angles, snapshots, "Sun angle (deg)", "sun_angle",
                                                 output_dir=tmp_path, no_plot=True)

        assert plot_time > 0.0
        saved = list(tmp_path.glob("*/*_sun_angle_profile_10frames.png"))
        assert len(saved) == 1

    def test_mismatched_lengths_fail_gracefully(self, session, tmp_path):
        snapshots = run_frame_sequence(
            session, build_sun_angle_sweep(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, [0.0, 90.0]), show_progress=False)
        assert create_lighting_profile_plot(np.arange(3), snapshots, "x", "sun_angle",
                                            output_dir=tmp_path, no_plot=True) == 0.0
