# materials/material.py
from typing import Tuple
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3

# (scattered_ray, attenuation, scattered?)
ScatterResult = Tuple[Ray, Vector3, bool]

def check_albedo(albedo: Vector3):
    if not all(0.0 <= c <= 1.0 for c in albedo):
        raise ConfigurationError(f"albedo components must lie in [0, 1], got {albedo}")

class Material:
    """
    Base of the closed set of surface materials.

    Materials are plain immutable values: two materials with equal fields are
    interchangeable, and primitives hold them by value. Scattering is not a
    method; see materials.scatter.scatter for the single dispatch point.
    """
    _fields: Tuple[str, ...] = ()

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self._fields)

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + tuple(getattr(self, f) for f in self._fields))

    def __repr__(self) -> str:
        args = ", ".join(f"{f}={getattr(self, f)!r}" for f in self._fields)
        return f"{type(self).__name__}({args})"

class NoMaterial(Material):
    """Sentinel material that never scatters."""

NO_MATERIAL = NoMaterial()
