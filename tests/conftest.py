"""Pytest configuration and shared fixtures."""

import random

import pytest

from camera.camera import Camera
from core.vector import Vector2, Vector3
from geometry.scenes import two_spheres


class FixedRandom:
    """Stand-in random source that replays fixed values."""

    def __init__(self, random_value=0.5, uniform_value=0.0):
        self.random_value = random_value
        self.uniform_value = uniform_value

    def random(self):
        return self.random_value

    def uniform(self, a, b):
        return self.uniform_value


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def pinhole_camera():
    """Camera at the origin looking down -z with a 2:1 viewport."""
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0),
                  vfov=90.0, aspect_ratio=2.0, aperture=0.0, focus_dist=1.0,
                  shutter=Vector2(0.0, 0.0))


@pytest.fixture
def small_world():
    return two_spheres()
