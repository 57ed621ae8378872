# materials/dielectric.py
import math
import logging
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

logger = logging.getLogger(__name__)

class Dielectric(Material):
    """
    Clear dielectric (glass, water) that reflects or refracts with
    Schlick-weighted probability.
    """
    _fields = ("ref_idx",)

    def __init__(self, ref_idx: float):
        if not math.isfinite(ref_idx) or ref_idx <= 0:
            raise ConfigurationError(f"refractive index must be positive, got {ref_idx}")
        if ref_idx < 1:
            logger.warning("refractive index %s is below vacuum", ref_idx)
        self.ref_idx = ref_idx

def dielectric_scatter(material: Dielectric, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
    attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
    direction = ray_in.direction
    d_dot_n = direction.dot(rec.normal)

    # Determine if we're exiting or entering the material
    if d_dot_n > 0:
        outward_normal = -rec.normal
        ni_over_nt = material.ref_idx
        cosine = material.ref_idx * d_dot_n / direction.length()
    else:
        outward_normal = rec.normal
        ni_over_nt = 1.0 / material.ref_idx
        cosine = -d_dot_n / direction.length()

    refracted = refract(direction, outward_normal, ni_over_nt)
    if refracted is not None and rng.random() >= schlick(cosine, material.ref_idx):
        return Ray(rec.p, refracted, ray_in.time), attenuation, True

    # Total internal reflection, or the Fresnel draw picked reflection.
    return Ray(rec.p, reflect(direction.normalize(), rec.normal), ray_in.time), attenuation, True
