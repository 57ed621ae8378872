# config.py
import os
import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (AliasChoices, BaseModel, Field, TypeAdapter, ValidationError,
                      confloat, conint, field_validator)

from camera.camera import Camera
from core.errors import ConfigurationError
from core.vector import Vector2, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.material import NO_MATERIAL, Material
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import PRESETS, preset

logger = logging.getLogger(__name__)

# Logging settings
LOG_LEVEL = os.getenv("RAYTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("RAYTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Render settings
WORKERS = int(os.getenv("RAYTRACER_WORKERS", "2"))
TILES = int(os.getenv("RAYTRACER_TILES", "2"))
SEED = int(os.getenv("RAYTRACER_SEED", "0"))
MAX_DEPTH = int(os.getenv("RAYTRACER_MAX_DEPTH", "50"))

# JSON accepts NaN and Infinity; no render setting may be either.
Finite = confloat(allow_inf_nan=False)
Unit = confloat(ge=0.0, le=1.0, allow_inf_nan=False)
Triple = Tuple[Finite, Finite, Finite]
Pair = Tuple[Finite, Finite]
PositiveInt = conint(strict=True, gt=0)

def _ordered(interval: Tuple[float, float]) -> Tuple[float, float]:
    if interval[0] > interval[1]:
        raise ValueError(f"interval start {interval[0]} is after its end {interval[1]}")
    return interval

class LambertianModel(BaseModel):
    type: Literal["lambertian"]
    albedo: Tuple[Unit, Unit, Unit]

    def build(self) -> Material:
        return Lambertian(Vector3(*self.albedo))

class MetalModel(BaseModel):
    type: Literal["metal"]
    albedo: Tuple[Unit, Unit, Unit]
    fuzz: confloat(ge=0.0, allow_inf_nan=False) = 0.0

    def build(self) -> Material:
        return Metal(Vector3(*self.albedo), self.fuzz)

class DielectricModel(BaseModel):
    type: Literal["dielectric"]
    refractive_index: confloat(gt=0.0, allow_inf_nan=False)

    def build(self) -> Material:
        return Dielectric(self.refractive_index)

class PresetModel(BaseModel):
    type: Literal["preset"]
    name: str

    @field_validator("name")
    @classmethod
    def known_preset(cls, v):
        if v not in PRESETS:
            raise ValueError(f"unknown material preset {v!r}; choose from {sorted(PRESETS)}")
        return v

    def build(self) -> Material:
        return preset(self.name)

class NoMaterialModel(BaseModel):
    type: Literal["none"] = "none"

    def build(self) -> Material:
        return NO_MATERIAL

MaterialModel = Annotated[
    Union[LambertianModel, MetalModel, DielectricModel, PresetModel, NoMaterialModel],
    Field(discriminator="type"),
]

class SphereModel(BaseModel):
    center0: Triple = Field(validation_alias=AliasChoices("center0", "center"))
    center1: Optional[Triple] = None
    time_interval: Pair = (0.0, 1.0)
    radius: Finite
    material: MaterialModel = Field(default_factory=NoMaterialModel)

    @field_validator("radius")
    @classmethod
    def non_zero(cls, v):
        if v == 0:
            raise ValueError("radius must be non-zero")
        return v

    @field_validator("time_interval")
    @classmethod
    def ordered_interval(cls, v):
        return _ordered(v)

    def build(self) -> Sphere:
        center1 = Vector3(*self.center1) if self.center1 is not None else None
        return Sphere(Vector3(*self.center0), self.radius, self.material.build(),
                      center1, Vector2(*self.time_interval))

class CameraModel(BaseModel):
    look_from: Triple = (0.0, 0.0, 0.0)
    look_at: Triple = (0.0, 0.0, -1.0)
    up: Triple = (0.0, 1.0, 0.0)
    vfov_deg: confloat(gt=0.0, lt=180.0, allow_inf_nan=False) = 90.0
    aspect: Optional[confloat(gt=0.0, allow_inf_nan=False)] = None
    aperture: confloat(ge=0.0, allow_inf_nan=False) = 0.0
    focus_distance: confloat(gt=0.0, allow_inf_nan=False) = 1.0
    shutter: Pair = (0.0, 0.0)

    @field_validator("shutter")
    @classmethod
    def ordered_shutter(cls, v):
        return _ordered(v)

    def build(self, default_aspect: float) -> Camera:
        """An explicit aspect wins; otherwise the camera follows the image shape."""
        aspect = self.aspect if self.aspect is not None else default_aspect
        return Camera(Vector3(*self.look_from), Vector3(*self.look_at), Vector3(*self.up),
                      self.vfov_deg, aspect, self.aperture, self.focus_distance,
                      Vector2(*self.shutter))

class RenderConfigModel(BaseModel):
    width: PositiveInt
    height: PositiveInt
    samples_per_pixel: PositiveInt
    camera: CameraModel = Field(default_factory=CameraModel)
    scene: List[SphereModel] = Field(default_factory=list)

_MATERIAL = TypeAdapter(MaterialModel)

def _location(loc, where: str) -> str:
    text = where
    for part in loc:
        if isinstance(part, int):
            text += f"[{part}]"
        else:
            text += f".{part}" if text else str(part)
    return text or "render configuration"

def _validate(validate, data: Any, where: str = ""):
    """Runs a pydantic validator, reporting failures as ConfigurationError."""
    try:
        return validate(data)
    except ValidationError as e:
        problems = "; ".join(f"{_location(err['loc'], where)}: {err['msg']}" for err in e.errors())
        raise ConfigurationError(problems) from None

def _build(build, where: str):
    try:
        return build()
    except ConfigurationError as e:
        raise ConfigurationError(f"{where}: {e}") from None

class RenderConfig:
    """A parsed render configuration: image size, sampling, camera and world."""
    def __init__(self, width: int, height: int, samples_per_pixel: int,
                 camera_settings: CameraModel, world: HittableList):
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.camera_settings = camera_settings
        self.world = world
        self.camera = self.camera_for(width, height)

    def camera_for(self, width: int, height: int) -> Camera:
        """The configured camera for an image of the given size."""
        return _build(lambda: self.camera_settings.build(width / height), "camera")

    def __repr__(self) -> str:
        return (f"RenderConfig({self.width}x{self.height}, spp={self.samples_per_pixel}, "
                f"{len(self.world)} spheres)")

def parse_material(data: Dict[str, Any], where: str = "material") -> Material:
    """
    Build a material from its JSON form, e.g.
    ``{"type": "metal", "albedo": [0.8, 0.6, 0.2], "fuzz": 0.3}``.
    """
    model = _validate(_MATERIAL.validate_python, data, where)
    return _build(model.build, where)

def parse_sphere(data: Dict[str, Any], where: str = "sphere") -> Sphere:
    model = _validate(SphereModel.model_validate, data, where)
    return _build(model.build, where)

def parse_camera(data: Dict[str, Any], default_aspect: float) -> Camera:
    model = _validate(CameraModel.model_validate, data, "camera")
    return _build(lambda: model.build(default_aspect), "camera")

def parse_render_config(data: Dict[str, Any]) -> RenderConfig:
    """Validate a decoded JSON render configuration and build its camera and world."""
    model = _validate(RenderConfigModel.model_validate, data)
    world = HittableList(_build(s.build, f"scene[{i}]") for i, s in enumerate(model.scene))
    config = RenderConfig(model.width, model.height, model.samples_per_pixel, model.camera, world)
    logger.debug("parsed %r", config)
    return config

def load_render_config(path: Union[str, Path]) -> RenderConfig:
    """Read and validate a JSON render configuration file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path} is not valid JSON: {e}") from e
    logger.info("loaded render configuration from %s", path)
    return parse_render_config(data)
