# renderer/integrator.py
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from materials.scatter import scatter

MAX_DEPTH = 50
# Scattered rays start on the surface; ignore hits closer than this.
T_MIN = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def background(ray: Ray) -> Vector3:
    """Vertical white-to-blue sky gradient."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def trace(ray: Ray, world: Hittable, depth: int, rng, max_depth: int = MAX_DEPTH) -> Vector3:
    """
    Estimates the radiance arriving along ray.

    Paths that survive max_depth bounces contribute black.
    """
    rec = world.hit(ray, T_MIN, float("inf"))
    if rec is None:
        return background(ray)
    if depth >= max_depth:
        return BLACK

    scattered, attenuation, ok = scatter(rec.material, ray, rec, rng)
    if not ok:
        return BLACK
    return attenuation * trace(scattered, world, depth + 1, rng, max_depth)

def trace_normals(ray: Ray, world: Hittable, depth: int = 0, rng=None, max_depth: int = MAX_DEPTH) -> Vector3:
    """Debug shading: maps the surface normal at the first hit to a color."""
    rec = world.hit(ray, 0.0, float("inf"))
    if rec is None:
        return background(ray)
    n = rec.normal
    return Vector3(n.x + 1.0, n.y + 1.0, n.z + 1.0) * 0.5
