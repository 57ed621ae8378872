# materials/scatter.py
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import NoMaterial, ScatterResult
from materials.lambertian import Lambertian, lambertian_scatter
from materials.metal import Metal, metal_scatter
from materials.dielectric import Dielectric, dielectric_scatter

_BLACK = Vector3(0.0, 0.0, 0.0)

def scatter(material, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
    """
    Scatters ray_in off the surface described by rec.

    Returns (scattered_ray, attenuation, scattered?). This is the only place
    that branches on the material kind; a new material must be added here.
    """
    kind = type(material)
    if kind is Lambertian:
        return lambertian_scatter(material, ray_in, rec, rng)
    if kind is Metal:
        return metal_scatter(material, ray_in, rec, rng)
    if kind is Dielectric:
        return dielectric_scatter(material, ray_in, rec, rng)
    if kind is NoMaterial:
        return ray_in, _BLACK, False
    raise TypeError(f"unknown material {material!r}")
