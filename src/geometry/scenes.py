# geometry/scenes.py
import logging
from core.vector import Vector2, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import ColorPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)

def two_spheres() -> HittableList:
    """A small diffuse sphere resting on a very large one."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.RED)))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.YELLOW)))
    return world

def material_showcase() -> HittableList:
    """Diffuse, metal and hollow glass spheres side by side."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.YELLOW)))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.gold()))
    # Outer glass surface plus an inverted inner one makes a thin bubble.
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-1, 0, -1), -0.45, DielectricPresets.glass()))
    return world

def random_scene(rng, moving: bool = True) -> HittableList:
    """
    The classic cover scene: a field of small random spheres around three
    large ones. With moving=True the diffuse spheres bounce upward during
    the shutter interval [0, 1].
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))

    keep_clear = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - keep_clear).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                center1 = center + Vector3(0, 0.5 * rng.random(), 0) if moving else center
                world.add(Sphere(center, 0.2, Lambertian(albedo), center1, Vector2(0.0, 1.0)))
            elif choose_mat < 0.95:
                albedo = Vector3(0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()))
                world.add(Sphere(center, 0.2, Metal(albedo, 0.5 * rng.random())))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))
    logger.info("random scene with %d spheres", len(world))
    return world

# Preset name -> (builder taking an rng, default camera settings).
SCENES = {
    "two_spheres": (
        lambda rng: two_spheres(),
        dict(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1), vup=Vector3(0, 1, 0),
             vfov=90.0, aperture=0.0, focus_dist=1.0, shutter=Vector2(0.0, 0.0)),
    ),
    "showcase": (
        lambda rng: material_showcase(),
        dict(look_from=Vector3(-2, 2, 1), look_at=Vector3(0, 0, -1), vup=Vector3(0, 1, 0),
             vfov=40.0, aperture=0.1, focus_dist=(Vector3(-2, 2, 1) - Vector3(0, 0, -1)).length(),
             shutter=Vector2(0.0, 0.0)),
    ),
    "random": (
        random_scene,
        dict(look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0), vup=Vector3(0, 1, 0),
             vfov=20.0, aperture=0.1, focus_dist=10.0, shutter=Vector2(0.0, 1.0)),
    ),
}
