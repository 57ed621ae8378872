# materials/presets.py
from typing import Callable, Dict
from core.vector import Vector3
from materials.material import Material
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=1.0)

    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with their refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class ColorPresets:
    """Common albedo presets for diffuse materials."""

    RED = Vector3(0.8, 0.3, 0.3)
    YELLOW = Vector3(0.8, 0.8, 0.0)
    BLUE = Vector3(0.1, 0.2, 0.5)
    BROWN = Vector3(0.4, 0.2, 0.1)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

PRESETS: Dict[str, Callable[[], Material]] = {
    "gold": MetalPresets.gold,
    "silver": MetalPresets.silver,
    "copper": MetalPresets.copper,
    "mirror": MetalPresets.mirror,
    "glass": DielectricPresets.glass,
    "water": DielectricPresets.water,
    "diamond": DielectricPresets.diamond,
    "red": lambda: ColorPresets.matte(ColorPresets.RED),
    "yellow": lambda: ColorPresets.matte(ColorPresets.YELLOW),
    "blue": lambda: ColorPresets.matte(ColorPresets.BLUE),
    "brown": lambda: ColorPresets.matte(ColorPresets.BROWN),
    "gray": lambda: ColorPresets.matte(ColorPresets.GRAY),
}

def preset(name: str) -> Material:
    """Look up a preset material by name."""
    try:
        return PRESETS[name]()
    except KeyError:
        raise KeyError(f"unknown material preset {name!r}; choose from {sorted(PRESETS)}") from None
