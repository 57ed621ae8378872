"""Tests for material scattering."""

import logging

import pytest

from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.material import NO_MATERIAL
from materials.metal import Metal
from materials.presets import PRESETS, preset
from materials.scatter import scatter

UP = Vector3(0, 0, 1)


def hit_at_origin(material, normal=UP):
    return HitRecord(1.0, Vector3(0, 0, 0), normal, material)


class TestLambertian:

    def test_always_scatters_with_albedo(self, rng):
        material = Lambertian(Vector3(0.8, 0.3, 0.3))
        rec = hit_at_origin(material)
        for _ in range(200):
            ray_in = Ray(Vector3(0, 0, 1), Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), -1), time=0.3)
            scattered, attenuation, ok = scatter(material, ray_in, rec, rng)
            assert ok
            assert attenuation == material.albedo
            assert scattered.origin == rec.p
            assert scattered.time == 0.3
            # normal + point in unit sphere stays in the normal's hemisphere
            assert scattered.direction.dot(UP) > 0

    def test_rejects_albedo_outside_unit_range(self):
        with pytest.raises(ConfigurationError):
            Lambertian(Vector3(1.2, 0.5, 0.5))


class TestMetal:

    def test_mirror_reflection_head_on(self, rng):
        material = Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.0)
        ray_in = Ray(Vector3(0, 0, 2), Vector3(0, 0, -2), time=0.7)
        scattered, attenuation, ok = scatter(material, ray_in, hit_at_origin(material), rng)
        assert ok
        assert scattered.direction == Vector3(0, 0, 1)
        assert attenuation == material.albedo
        assert scattered.time == 0.7

    def test_mirror_reflection_oblique(self, rng):
        material = Metal(Vector3(0.5, 0.5, 0.5), fuzz=0.0)
        ray_in = Ray(Vector3(-1, 0, 1), Vector3(1, 0, -1))
        scattered, _, ok = scatter(material, ray_in, hit_at_origin(material), rng)
        assert ok
        assert tuple(scattered.direction) == pytest.approx((2 ** -0.5, 0, 2 ** -0.5))

    def test_reflection_below_surface_is_absorbed(self, rng):
        material = Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.0)
        # Travelling along the normal reflects into the surface.
        ray_in = Ray(Vector3(0, 0, -1), Vector3(0, 0, 1))
        scattered, _, ok = scatter(material, ray_in, hit_at_origin(material), rng)
        assert not ok
        assert scattered.direction.dot(UP) <= 0

    def test_success_iff_above_surface(self, rng):
        material = Metal(Vector3(0.8, 0.8, 0.8), fuzz=1.0)
        rec = hit_at_origin(material)
        ray_in = Ray(Vector3(-1, 0, 0.1), Vector3(1, 0, -0.1))
        outcomes = set()
        for _ in range(500):
            scattered, _, ok = scatter(material, ray_in, rec, rng)
            assert ok == (scattered.direction.dot(UP) > 0)
            outcomes.add(ok)
        assert outcomes == {True, False}

    def test_fuzz_clamped(self, caplog):
        with caplog.at_level(logging.WARNING):
            material = Metal(Vector3(0.5, 0.5, 0.5), fuzz=3.0)
        assert material.fuzz == 1.0
        assert "clamped" in caplog.text

    def test_negative_fuzz_rejected(self):
        with pytest.raises(ConfigurationError):
            Metal(Vector3(0.5, 0.5, 0.5), fuzz=-0.1)

    def test_nan_fuzz_rejected(self):
        with pytest.raises(ConfigurationError):
            Metal(Vector3(0.5, 0.5, 0.5), fuzz=float("nan"))


class TestDielectric:

    def test_refracts_straight_through_head_on(self, fixed_rng):
        material = Dielectric(1.5)
        ray_in = Ray(Vector3(0, 0, 1), Vector3(0, 0, -1), time=0.2)
        # R0 is 0.04, so a draw of 0.5 picks refraction.
        scattered, attenuation, ok = scatter(material, ray_in, hit_at_origin(material), fixed_rng(random_value=0.5))
        assert ok
        assert attenuation == Vector3(1.0, 1.0, 1.0)
        assert tuple(scattered.direction) == pytest.approx((0, 0, -1))
        assert scattered.time == 0.2

    def test_reflects_when_fresnel_draw_is_low(self, fixed_rng):
        material = Dielectric(1.5)
        ray_in = Ray(Vector3(0, 0, 1), Vector3(0, 0, -1))
        scattered, _, ok = scatter(material, ray_in, hit_at_origin(material), fixed_rng(random_value=0.01))
        assert ok
        assert tuple(scattered.direction) == pytest.approx((0, 0, 1))

    def test_total_internal_reflection(self, fixed_rng):
        material = Dielectric(1.5)
        # Leaving the glass at a grazing angle.
        ray_in = Ray(Vector3(-1, -0.1, 0), Vector3(1, 0.1, 0))
        rec = hit_at_origin(material, normal=Vector3(0, 1, 0))
        scattered, attenuation, ok = scatter(material, ray_in, rec, fixed_rng(random_value=0.999))
        assert ok
        assert attenuation == Vector3(1.0, 1.0, 1.0)
        unit = ray_in.direction.normalize()
        assert tuple(scattered.direction) == pytest.approx((unit.x, -unit.y, 0.0))

    def test_refraction_bends_toward_normal_when_entering(self, fixed_rng):
        material = Dielectric(1.5)
        ray_in = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        rec = hit_at_origin(material, normal=Vector3(0, 1, 0))
        scattered, _, _ = scatter(material, ray_in, rec, fixed_rng(random_value=0.99))
        d = scattered.direction.normalize()
        assert d.y < 0
        # sin(theta_t) = sin(45 deg) / 1.5
        assert d.x == pytest.approx((2 ** -0.5) / 1.5)

    def test_rejects_non_positive_index(self):
        with pytest.raises(ConfigurationError):
            Dielectric(0.0)

    def test_rejects_non_finite_index(self):
        with pytest.raises(ConfigurationError):
            Dielectric(float("nan"))

    def test_index_below_one_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            Dielectric(0.8)
        assert "below vacuum" in caplog.text


class TestDispatch:

    def test_no_material_never_scatters(self, rng):
        ray_in = Ray(Vector3(0, 0, 1), Vector3(0, 0, -1))
        _, attenuation, ok = scatter(NO_MATERIAL, ray_in, hit_at_origin(NO_MATERIAL), rng)
        assert not ok
        assert attenuation == Vector3(0, 0, 0)

    def test_unknown_material_raises(self, rng):
        ray_in = Ray(Vector3(0, 0, 1), Vector3(0, 0, -1))
        with pytest.raises(TypeError):
            scatter(object(), ray_in, hit_at_origin(None), rng)


class TestMaterialValues:

    def test_equality_by_fields(self):
        assert Metal(Vector3(0.5, 0.5, 0.5), 0.2) == Metal(Vector3(0.5, 0.5, 0.5), 0.2)
        assert Metal(Vector3(0.5, 0.5, 0.5), 0.2) != Metal(Vector3(0.5, 0.5, 0.5), 0.3)
        assert Lambertian(Vector3(0.5, 0.5, 0.5)) != Metal(Vector3(0.5, 0.5, 0.5), 0.0)

    def test_immutable(self):
        material = Dielectric(1.5)
        with pytest.raises(AttributeError):
            material.ref_idx = 2.0

    def test_presets(self):
        for name in PRESETS:
            assert preset(name) == preset(name)
        with pytest.raises(KeyError):
            preset("unobtainium")
