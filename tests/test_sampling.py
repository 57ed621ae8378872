"""Tests for the rejection samplers and optics helpers."""

import pytest

from core.errors import SamplingError
from core.utils import random_in_unit_disk, random_in_unit_sphere, reflect, refract, schlick
from core.vector import Vector3


class TestRejectionSampling:

    def test_sphere_samples_strictly_inside(self, rng):
        for _ in range(2000):
            p = random_in_unit_sphere(rng)
            assert p.squared_length() < 1.0

    def test_disk_samples_strictly_inside_and_flat(self, rng):
        for _ in range(2000):
            p = random_in_unit_disk(rng)
            assert p.squared_length() < 1.0
            assert p.z == 0.0

    def test_exhausted_sampler_raises(self, fixed_rng):
        # Every draw lands in a corner of the bounding cube.
        corner = fixed_rng(uniform_value=0.9)
        with pytest.raises(SamplingError):
            random_in_unit_sphere(corner)
        with pytest.raises(SamplingError):
            random_in_unit_disk(corner)


def test_reflect():
    assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)


def test_refract_straight_through_at_normal_incidence():
    refracted = refract(Vector3(0, 0, -1), Vector3(0, 0, 1), 1 / 1.5)
    assert tuple(refracted) == pytest.approx((0.0, 0.0, -1.0))


def test_refract_total_internal_reflection():
    assert refract(Vector3(1, -0.1, 0), Vector3(0, 1, 0), 1.5) is None


class TestSchlick:

    def test_head_on_is_r0(self):
        r0 = ((1 - 1.5) / (1 + 1.5)) ** 2
        assert schlick(1.0, 1.5) == r0

    def test_grazing_tends_to_one(self):
        assert schlick(0.0, 1.5) == pytest.approx(1.0)
        assert schlick(1e-3, 1.5) > schlick(0.5, 1.5) > schlick(1.0, 1.5)
