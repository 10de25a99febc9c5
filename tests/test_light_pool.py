"""Tests for the fixed-capacity light pool."""

import numpy as np
import pytest

from planetshine.scene.light_pool import LightPool, LightSourceRecord, DEFAULT_LIGHT_DIRECTION


class TestLightPool:

    def test_capacity(self):
        pool = LightPool(4)
        assert pool.capacity == 4
        assert len(pool) == 4
        assert all(isinstance(r, LightSourceRecord) for r in pool)

    def test_new_records_are_disabled(self):
        for record in LightPool(3):
            assert record.enabled is False
            assert record.intensity == 0.0
            np.testing.assert_array_equal(record.direction, DEFAULT_LIGHT_DIRECTION)

    def test_empty_pool(self):
        pool = LightPool(0)
        assert len(pool) == 0
        pool.overwrite([], np.ones(3))

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            LightPool(-1)

    def test_overwrite_in_place(self):
        pool = LightPool(2)
        originals = pool.records
        color = np.array([0.1, 0.2, 0.3])
        pool.overwrite([(np.array([1.0, 0.0, 0.0]), 0.5), (np.array([0.0, 1.0, 0.0]), 0.25)], color)

        assert pool[0] is originals[0]
        assert pool[1] is originals[1]
        np.testing.assert_array_equal(pool[1].direction, [0.0, 1.0, 0.0])
        assert pool[0].intensity == 0.5
        assert pool[1].intensity == 0.25
        assert all(r.enabled for r in pool)
        np.testing.assert_array_equal(pool[0].color, color)

    def test_overwrite_copies_color(self):
        pool = LightPool(1)
        color = np.array([0.5, 0.5, 0.5])
        pool.overwrite([(np.array([1.0, 0.0, 0.0]), 1.0)], color)
        color[0] = 9.0
        assert pool[0].color[0] == 0.5

    def test_overwrite_wrong_count_rejected(self):
        pool = LightPool(2)
        with pytest.raises(ValueError):
            pool.overwrite([(np.array([1.0, 0.0, 0.0]), 1.0)], np.ones(3))

    def test_recreate_keeps_capacity_with_new_records(self):
        pool = LightPool(3)
        pool.overwrite([(np.array([1.0, 0.0, 0.0]), 1.0)] * 3, np.ones(3))
        old_records = pool.records

        pool.recreate()

        assert pool.capacity == 3
        assert len(pool) == 3
        assert all(new is not old for new, old in zip(pool.records, old_records))
        assert not any(r.enabled for r in pool)
