"""Scene description: ambient light, camera, light and the objects to render."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from minirt.vector import Vec3


class Target(Enum):
    """The kinds of scene element that can be selected and edited."""

    AMBIENT = "a"
    CAMERA = "k"
    LIGHT = "l"
    SPHERE = "s"
    PLANE = "p"
    CYLINDER = "c"


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} outside 0..255")


@dataclass
class Ambient:
    ratio: float
    color: Color


@dataclass
class Camera:
    position: Vec3
    direction: Vec3
    fov: int


@dataclass
class Light:
    position: Vec3
    brightness: float


@dataclass
class Sphere:
    position: Vec3
    diameter: float
    color: Color


@dataclass
class Plane:
    position: Vec3
    direction: Vec3
    color: Color


@dataclass
class Cylinder:
    position: Vec3
    direction: Vec3
    diameter: float
    height: float
    color: Color


Element = Union[Ambient, Camera, Light, Sphere, Plane, Cylinder]

_COLORED = frozenset({Target.AMBIENT, Target.SPHERE, Target.PLANE, Target.CYLINDER})
_POSITIONED = frozenset(
    {Target.CAMERA, Target.LIGHT, Target.SPHERE, Target.PLANE, Target.CYLINDER}
)
_DIRECTED = frozenset({Target.CAMERA, Target.PLANE, Target.CYLINDER})


@dataclass
class Scene:
    """Everything a scene file describes."""

    ambient: Ambient
    camera: Camera
    light: Light
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)

    def copy(self) -> Scene:
        """Return an independent deep copy of the scene."""
        return copy.deepcopy(self)

    def _element(self, target: Target, index: int) -> Element:
        if target is Target.AMBIENT:
            return self.ambient
        if target is Target.CAMERA:
            return self.camera
        if target is Target.LIGHT:
            return self.light
        items = {
            Target.SPHERE: self.spheres,
            Target.PLANE: self.planes,
            Target.CYLINDER: self.cylinders,
        }[target]
        if not 0 <= index < len(items):
            raise IndexError(f"no {target.name.lower()} with index {index}")
        return items[index]

    @staticmethod
    def _require(target: Target, allowed: frozenset, what: str) -> None:
        if target not in allowed:
            raise ValueError(f"{target.name.lower()} has no {what}")

    def get_color(self, target: Target, index: int = 0) -> Color:
        self._require(target, _COLORED, "colour")
        return self._element(target, index).color

    def set_color(self, target: Target, index: int, color: Color) -> None:
        self._require(target, _COLORED, "colour")
        self._element(target, index).color = color

    def get_position(self, target: Target, index: int = 0) -> Vec3:
        self._require(target, _POSITIONED, "position")
        return self._element(target, index).position

    def set_position(self, target: Target, index: int, position: Vec3) -> None:
        self._require(target, _POSITIONED, "position")
        self._element(target, index).position = position

    def get_direction(self, target: Target, index: int = 0) -> Vec3:
        self._require(target, _DIRECTED, "direction")
        return self._element(target, index).direction

    def set_direction(self, target: Target, index: int, direction: Vec3) -> None:
        self._require(target, _DIRECTED, "direction")
        self._element(target, index).direction = direction