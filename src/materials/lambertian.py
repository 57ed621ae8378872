# materials/lambertian.py
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult, check_albedo

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    _fields = ("albedo",)

    def __init__(self, albedo: Vector3):
        check_albedo(albedo)
        self.albedo = albedo

def lambertian_scatter(material: Lambertian, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
    """
    Scatter a ray according to a Lambertian reflection model.
    Diffuse scattering never fails; the albedo is the attenuation.
    """
    # Pick a random scatter direction by adding a random vector to the normal.
    scatter_direction = rec.normal + random_in_unit_sphere(rng)
    scattered = Ray(rec.p, scatter_direction, ray_in.time)
    return scattered, material.albedo, True
