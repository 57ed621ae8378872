# materials/metal.py
import math
import logging
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult, check_albedo

logger = logging.getLogger(__name__)

class Metal(Material):
    """
    Metal material with reflective properties. Fuzz blurs the reflection and
    is clamped to [0, 1].
    """
    _fields = ("albedo", "fuzz")

    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        check_albedo(albedo)
        if not math.isfinite(fuzz) or fuzz < 0:
            raise ConfigurationError(f"metal fuzz must be a non-negative number, got {fuzz}")
        if fuzz > 1:
            logger.warning("metal fuzz %s clamped to 1.0", fuzz)
        self.albedo = albedo
        self.fuzz = min(fuzz, 1.0)

def metal_scatter(material: Metal, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
    reflected = reflect(ray_in.direction.normalize(), rec.normal)
    scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * material.fuzz, ray_in.time)
    # Absorb the ray if fuzz pushed it below the surface.
    return scattered, material.albedo, scattered.direction.dot(rec.normal) > 0
