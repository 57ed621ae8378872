# geometry/sphere.py
import math
from typing import Optional
from core.errors import ConfigurationError
from core.vector import Vector2, Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from materials.material import Material

class Sphere(Hittable):
    """
    A sphere that moves linearly from center0 at time.t0 to center1 at time.t1.

    The sign of the radius is kept: a negative radius flips the normal inwards,
    which together with a positive sphere of the same center makes a hollow shell.
    """
    def __init__(self, center0: Vector3, radius: float, material: Material,
                 center1: Vector3 = None, time: Vector2 = None):
        if radius == 0 or not math.isfinite(radius):
            raise ConfigurationError(f"sphere radius must be finite and non-zero, got {radius}")
        if center1 is None:
            center1 = center0
        if time is None:
            time = Vector2(0.0, 1.0)
        if not all(math.isfinite(c) for c in (*center0, *center1, *time)):
            raise ConfigurationError("sphere centers and time interval must be finite")
        if time.t0 > time.t1:
            raise ConfigurationError(f"sphere time interval is reversed: {time}")
        self.center0 = center0
        self.center1 = center1
        self.radius = radius
        self.material = material
        self.time = time

    @property
    def is_moving(self) -> bool:
        return self.center0 != self.center1

    def center(self, time: float) -> Vector3:
        """Center of the sphere at the given time, interpolated along its path."""
        span = self.time.span()
        if span == 0 or not self.is_moving:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * ((time - self.time.t0) / span)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(ray.time)
        oc = ray.origin - center
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c

        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Each root is checked against the interval on its own; the near one wins.
        for root in ((-b - sqrt_disc) / a, (-b + sqrt_disc) / a):
            if t_min < root < t_max:
                p = ray.point_at(root)
                return HitRecord(root, p, (p - center) / self.radius, self.material)
        return None

    def __repr__(self) -> str:
        if self.is_moving:
            return f"Sphere({self.center0!r} -> {self.center1!r}, {self.radius}, {self.material!r})"
        return f"Sphere({self.center0!r}, {self.radius}, {self.material!r})"
