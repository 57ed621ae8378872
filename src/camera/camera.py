# camera/camera.py
import math
import logging
from core.errors import ConfigurationError
from core.vector import Vector2, Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

logger = logging.getLogger(__name__)

class Camera:
    """
    Thin-lens camera with a shutter interval.

    The basis and viewport are derived once here and never change, so one
    camera can be shared by every render task.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, shutter: Vector2 = None):
        if shutter is None:
            shutter = Vector2(0.0, 0.0)
        if not all(math.isfinite(c) for c in (vfov, aspect_ratio, aperture, focus_dist,
                                              *look_from, *look_at, *vup, *shutter)):
            raise ConfigurationError("camera settings must be finite numbers")
        if not 0.0 < vfov < 180.0:
            raise ConfigurationError(f"vertical fov must be in (0, 180) degrees, got {vfov}")
        if aspect_ratio <= 0:
            raise ConfigurationError(f"aspect ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ConfigurationError(f"aperture must be non-negative, got {aperture}")
        if focus_dist <= 0:
            raise ConfigurationError(f"focus distance must be positive, got {focus_dist}")
        if shutter.t0 > shutter.t1:
            raise ConfigurationError(f"shutter opens after it closes: {shutter}")

        view = look_from - look_at
        if view.length() == 0:
            raise ConfigurationError("look_from and look_at coincide")
        side = vup.cross(view)
        if side.length() == 0:
            raise ConfigurationError(f"up vector {vup} is parallel to the view direction")

        self.origin = look_from
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.shutter = shutter

        theta = vfov * math.pi / 180.0
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        self.w = view.normalize()
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        self.lower_left_corner = (look_from -
                                  self.u * (half_width * focus_dist) -
                                  self.v * (half_height * focus_dist) -
                                  self.w * focus_dist)
        self.horizontal = self.u * (2.0 * half_width * focus_dist)
        self.vertical = self.v * (2.0 * half_height * focus_dist)
        logger.debug("camera at %s, basis u=%s v=%s w=%s", self.origin, self.u, self.v, self.w)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through viewport point (s, t) with depth of field and motion blur."""
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3(0.0, 0.0, 0.0)

        time = self.shutter.t0 + rng.random() * self.shutter.span()

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction, time)
