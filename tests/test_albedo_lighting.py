"""Tests for the per-frame albedo lighting computation."""

import numpy as np
import pytest

from planetshine.config.planetshine_config_schemas import PlanetShineConfig, DEFAULT_BODY_PROPERTIES
from planetshine.computation.albedo_lighting import compute_albedo_lighting
from planetshine.scene.bodies import CelestialBody, FrameInputs
from planetshine.scene.frame_builders import build_frame

from conftest import KERBIN_RADIUS, LOW_ORBIT_DISTANCE


class TestSkippedFrames:

    def test_no_vessel(self, config):
        frame = build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 0.0)
        frame.vessel_position = None
        assert compute_albedo_lighting(frame, config) is None

    def test_no_active_body(self, config):
        frame = build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 0.0)
        frame.active_body_index = None
        assert compute_albedo_lighting(frame, config) is None

    def test_active_body_out_of_range(self, config):
        frame = build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 0.0)
        frame.active_body_index = 7
        assert compute_albedo_lighting(frame, config) is None

    def test_empty_frame(self, config):
        assert compute_albedo_lighting(FrameInputs(), config) is None


class TestBodyProperties:

    def test_configured_body(self, config, kerbin_properties):
        result = compute_albedo_lighting(build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 30.0), config)
        assert result.snapshot.uses_default_properties is False
        assert result.snapshot.body_properties == kerbin_properties
        np.testing.assert_array_equal(result.light_color, kerbin_properties.albedo_color)

    def test_missing_body_uses_documented_defaults(self, config):
        frame = build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 30.0, body_name="Unlisted")
        result = compute_albedo_lighting(frame, config)

        assert result.snapshot.uses_default_properties is True
        props = result.snapshot.body_properties
        assert props.albedo_color == (100.0 / 256.0, 100.0 / 256.0, 100.0 / 256.0)
        assert props.albedo_intensity == 1.0
        assert props.atmosphere_ambient_level == 0.3
        assert props == DEFAULT_BODY_PROPERTIES
        np.testing.assert_array_equal(result.light_color, np.full(3, 100.0 / 256.0))

    def test_defaults_unchanged_after_frames(self, config):
        expected = (100.0 / 256.0,) * 3
        first = compute_albedo_lighting(build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 30.0, body_name="Bop"), config)

        with pytest.raises(TypeError):
            first.snapshot.body_properties.albedo_color[0] = 1.0

        second = compute_albedo_lighting(build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 30.0, body_name="Pol"), config)
        assert DEFAULT_BODY_PROPERTIES.albedo_color == expected
        np.testing.assert_array_equal(second.light_color, np.array(expected))


class TestFrameComputation:

    def test_identical_inputs_give_identical_outputs(self, config):
        first = compute_albedo_lighting(build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 42.0), config)
        second = compute_albedo_lighting(build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 42.0), config)

        for (d1, i1), (d2, i2) in zip(first.distribution.lights, second.distribution.lights):
            np.testing.assert_array_equal(d1, d2)
            assert i1 == i2
        np.testing.assert_array_equal(first.ambient_color, second.ambient_color)
        assert first.snapshot.as_dict() == second.snapshot.as_dict()

    def test_ambient_color_formula(self, config, kerbin_properties):
        result = compute_albedo_lighting(build_frame(KERBIN_RADIUS, 620_000.0, 20.0), config)
        snapshot = result.snapshot
        expected = (snapshot.atmosphere.ambient_effect * snapshot.visibility.angle_effect
                    * np.array(kerbin_properties.albedo_color) + config.vacuum_light_level)
        np.testing.assert_allclose(result.ambient_color, expected)
        assert snapshot.atmosphere.ambient_effect > 0.0

    def test_ambient_is_vacuum_floor_far_away(self, config):
        result = compute_albedo_lighting(build_frame(KERBIN_RADIUS, 5.0e7, 0.0), config)
        np.testing.assert_allclose(result.ambient_color, np.full(3, config.vacuum_light_level))

    def test_ambient_skipped_when_not_requested(self, config):
        result = compute_albedo_lighting(build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 0.0), config,
                                         compute_ambient=False)
        assert result.ambient_color is None
        assert result.snapshot.ambient_color is None

    def test_orbiting_the_sun(self, config):
        sun = CelestialBody(name="Sun", position=np.zeros(3), radius=261_600_000.0)
        frame = FrameInputs(vessel_position=np.array([3.0e8, 0.0, 0.0]), bodies=[sun], active_body_index=0)
        result = compute_albedo_lighting(frame, config)

        assert result.snapshot.visibility.sun_angle == 0.0
        np.testing.assert_array_equal(result.snapshot.geometry.body_sun_direction,
                                      result.snapshot.geometry.body_vessel_direction)
        for direction, intensity in result.distribution.lights:
            assert np.all(np.isfinite(direction))
            assert np.isfinite(intensity)

    def test_debug_lines(self, config):
        frame = build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 30.0)
        lines = compute_albedo_lighting(frame, config).snapshot.debug_lines

        assert set(lines) == {'light_direction', 'sun_direction', 'body_direction'}
        for line in lines.values():
            np.testing.assert_array_equal(line.end, frame.vessel_position)
        np.testing.assert_array_equal(lines['sun_direction'].start, frame.bodies[0].position)
        np.testing.assert_array_equal(lines['body_direction'].start, frame.bodies[1].position)

    def test_snapshot_dict_has_named_intermediates(self, config):
        values = compute_albedo_lighting(build_frame(KERBIN_RADIUS, LOW_ORBIT_DISTANCE, 30.0), config).snapshot.as_dict()
        for key in ('vessel_altitude', 'visible_surface', 'sun_angle', 'visible_light_ratio',
                    'atmosphere_reflection_effect', 'area_spread_angle', 'light_distance_effect',
                    'light_intensity'):
            assert key in values


@pytest.mark.parametrize("vessel_distance", [0.0, 1.0, 594_000.0, 600_000.0, 650_000.0, 1.2e6, 8.0e7])
@pytest.mark.parametrize("sun_angle", [0.0, 45.0, 90.0, 135.0, 180.0])
def test_outputs_are_finite_and_bounded(vessel_distance, sun_angle):
    config = PlanetShineConfig()
    result = compute_albedo_lighting(build_frame(KERBIN_RADIUS, vessel_distance, sun_angle), config)
    snapshot = result.snapshot

    for ratio in (snapshot.visibility.visibility_ratio, snapshot.visibility.angle_effect,
                  snapshot.visibility.boosted_angle_effect, snapshot.atmosphere.reflection_effect,
                  snapshot.atmosphere.ambient_fade_ratio, snapshot.distribution.spread_ratio):
        assert 0.0 <= ratio <= 1.0

    assert np.all(np.isfinite(result.ambient_color))
    assert len(result.distribution.lights) == config.albedo_lights_quantity
    for direction, intensity in result.distribution.lights:
        assert np.all(np.isfinite(direction))
        assert np.isfinite(intensity) and intensity >= 0.0
