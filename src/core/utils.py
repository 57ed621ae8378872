# core/utils.py
import math
from typing import Optional
from core.errors import SamplingError
from core.vector import Vector3

# Acceptance is ~0.524 for the sphere and ~0.785 for the disk, so running out
# of attempts has probability below 1e-280.
MAX_REJECTION_ATTEMPTS = 1000

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere.
    Draws from the [-1, 1]^3 cube and rejects points outside the sphere.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p
    raise SamplingError(f"no point inside the unit sphere after {MAX_REJECTION_ATTEMPTS} draws")

def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point strictly inside the unit disk on the z=0 plane.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    0.0)
        if p.dot(p) < 1.0:
            return p
    raise SamplingError(f"no point inside the unit disk after {MAX_REJECTION_ATTEMPTS} draws")

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with normal n using Snell's law.
    Returns None on total internal reflection.
    """
    uv = v.normalize()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant <= 0:
        return None
    return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)

def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
