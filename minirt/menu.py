"""Keyboard-driven menus for editing a scene between renders."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import replace
from enum import Enum, IntEnum
from typing import Callable, Optional

from minirt.scene import Color, Scene, Target
from minirt.vector import Vec3


class Key(IntEnum):
    """X11 keysyms for the non-letter keys the menus react to."""

    ESCAPE = 65307
    ENTER = 65293
    UP = 65362
    DOWN = 65364


class Mode(Enum):
    """Which menu currently receives key presses."""

    INSTRUCTIONS = "instructions"
    MAIN = "main"
    COLOR = "color"
    POSITION = "position"
    DIRECTION = "direction"
    EDIT = "edit"


class _Field(Enum):
    FOV = "fov"
    BRIGHTNESS = "brightness"
    AMBIENT = "ambient"
    SPHERE_DIAMETER = "sp_dia"
    CYLINDER_DIAMETER = "cy_dia"
    CYLINDER_HEIGHT = "cy_height"


_CURRENT_LABEL = {
    _Field.FOV: "CURRENT FOV: {:d}\n",
    _Field.BRIGHTNESS: "CURRENT BRIGHTNESS: {:f}\n",
    _Field.AMBIENT: "CURRENT AMBIENT: {:f}\n",
    _Field.SPHERE_DIAMETER: "CURRENT SPHERE DIAMETER: {:f}\n",
    _Field.CYLINDER_DIAMETER: "CURRENT CYLINDER DIAMETER: {:f}\n",
    _Field.CYLINDER_HEIGHT: "CURRENT CYLINDER HEIGHT: {:f}\n",
}

_NEW_LABEL = {
    _Field.FOV: "NEW FOV IF APPLIED: {:d}\n",
    _Field.BRIGHTNESS: "NEW BRIGHTNESS IF APPLIED: {:f}\n",
    _Field.AMBIENT: "NEW AMBIENT IF APPLIED: {:f}\n",
    _Field.SPHERE_DIAMETER: "NEW DIMENSION IF APPLIED: {:f}\n",
    _Field.CYLINDER_DIAMETER: "NEW DIMENSION IF APPLIED: {:f}\n",
    _Field.CYLINDER_HEIGHT: "NEW DIMENSION IF APPLIED: {:f}\n",
}

_FIELD_KEYS = {
    (Target.CYLINDER, "r"): _Field.CYLINDER_DIAMETER,
    (Target.CYLINDER, "h"): _Field.CYLINDER_HEIGHT,
    (Target.SPHERE, "r"): _Field.SPHERE_DIAMETER,
    (Target.CAMERA, "f"): _Field.FOV,
    (Target.AMBIENT, "b"): _Field.AMBIENT,
    (Target.LIGHT, "b"): _Field.BRIGHTNESS,
}

_RATIOS = (_Field.BRIGHTNESS, _Field.AMBIENT)
_INSTRUCTIONS = (
    "-------------------INSTRUCTIONS-----------\n\n\n",
    "1.Press C to enter camera menu.\n",
    "2.Press L to enter light menu.\n",
    "3.Press A to enter ambient menu.\n",
    "4.Click on an object to enter that object's menu.\n",
    "5.Press R to render the scene again.\n",
    "6.Press ESC to exit the program\n",
)


def _letter(keysym: int) -> Optional[str]:
    if 65 <= keysym <= 90 or 97 <= keysym <= 122:
        return chr(keysym).lower()
    return None


def _clear_terminal() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)


class Menu:
    """Menu state machine that edits ``scene`` in response to keysyms."""

    def __init__(
        self,
        scene: Scene,
        write: Optional[Callable[[str], object]] = None,
        clear: Optional[Callable[[], object]] = None,
    ):
        self.scene = scene
        self._write = write or _write_stdout
        self._clear = clear or _clear_terminal
        self.mode = Mode.INSTRUCTIONS
        self.target: Optional[Target] = None
        self.index = 0
        self.field: Optional[_Field] = None
        self.value: float = 0
        self.color: Optional[Color] = None
        self.channel: Optional[str] = None
        self.position: Optional[Vec3] = None
        self.direction: Optional[Vec3] = None
        self.axis: Optional[str] = None

    def print_instructions(self) -> None:
        for line in _INSTRUCTIONS:
            self._write(line)

    def select(self, target: Target, index: int = 0) -> None:
        """Open the main menu for the given scene element."""
        if target in (Target.SPHERE, Target.PLANE, Target.CYLINDER):
            self.scene.get_position(target, index)
        self.target = target
        self.index = index
        self._enter_main()

    def handle_key(self, keysym: int) -> None:
        """Feed one key press to the active menu."""
        handler = {
            Mode.MAIN: self._main_key,
            Mode.COLOR: self._color_key,
            Mode.POSITION: self._position_key,
            Mode.DIRECTION: self._direction_key,
            Mode.EDIT: self._edit_key,
        }.get(self.mode)
        if handler is not None:
            handler(keysym)

    # main menu

    def _enter_main(self) -> None:
        m = self.target
        self.mode = Mode.MAIN
        self._clear()
        self._write("---------ENTERING MENU------------\n\n")
        if m is not Target.AMBIENT:
            self._write("P to change position.\n")
        if m in (Target.PLANE, Target.CYLINDER, Target.CAMERA):
            self._write("V to change vector.\n")
        if m not in (Target.CAMERA, Target.LIGHT):
            self._write("C to change color.\n")
        if m is Target.AMBIENT:
            self._write("B to change ambient strength.\n")
        if m is Target.CAMERA:
            self._write("F to change cam FOV.\n")
        if m is Target.LIGHT:
            self._write("B to change brightness.\n")
        if m in (Target.SPHERE, Target.CYLINDER):
            self._write("R to change object diameter.\n")
        if m is Target.CYLINDER:
            self._write("H to change cylinder height.\n")
        self._write("ESC to see the instructions.\n")

    def _main_key(self, keysym: int) -> None:
        m = self.target
        if keysym == Key.ESCAPE:
            self.mode = Mode.INSTRUCTIONS
            self._clear()
            self.target = None
            self._write("---------EXITING MENU------------\n\n")
            self.print_instructions()
            return
        if m is not Target.AMBIENT and keysym in (67, 112):
            self._enter_position()
        elif m in (Target.PLANE, Target.CYLINDER, Target.CAMERA) and keysym in (86, 118):
            self._enter_direction()
        elif m not in (Target.CAMERA, Target.LIGHT) and keysym in (99, 67):
            self._enter_color()
        chosen = _FIELD_KEYS.get((m, _letter(keysym)))
        if chosen is not None:
            self._enter_edit(chosen)

    # colour menu

    def _enter_color(self) -> None:
        self.mode = Mode.COLOR
        self.color = self.scene.get_color(self.target, self.index)
        self.channel = None
        self._write("---------ENTERING COLOR MENU------------\n\n")
        self._write("Press r to change r value of the color.\n")
        self._write("Press g to change g value of the color.\n")
        self._write("Press b to change b value of the color.\n")
        self._write("Press Enter to apply these changes\n")
        self._write("ESC to exit color menu.\n")
        c = self.color
        self._write(f"CURRENT COLOR: R:{c.r:d}  G:{c.g:d}  B:{c.b:d}\n")

    def _color_key(self, keysym: int) -> None:
        if keysym == Key.ESCAPE:
            self._clear()
            self._write("---------EXITING COLOR MENU------------\n\n")
            self._enter_main()
            return
        letter = _letter(keysym)
        if letter in ("r", "g", "b"):
            self.channel = letter
        if keysym in (Key.UP, Key.DOWN):
            self._change_color(keysym)
            c = self.color
            self._write(f"NEW VALUE IF APPLIED: R:{c.r:d}  G:{c.g:d}  B:{c.b:d}\n")
        if keysym == Key.ENTER:
            self.scene.set_color(self.target, self.index, self.color)
            self._write("Changes applied.\n")
            self._enter_color()

    def _change_color(self, keysym: int) -> None:
        if self.channel is None:
            self._write("Select a color you want to change first.\n")
            return
        sign = -1 if keysym == Key.DOWN else 1
        updated = getattr(self.color, self.channel) + sign
        if 0 <= updated <= 255:
            self.color = replace(self.color, **{self.channel: updated})

    # position menu

    def _enter_position(self) -> None:
        self.mode = Mode.POSITION
        self.position = self.scene.get_position(self.target, self.index)
        self.axis = None
        self._write("---------ENTERING CRD MENU------------\n\n")
        self._write("Press x to change X coordinate.\n")
        self._write("Press y to change Y coordinate.\n")
        self._write("Press z to change Z coordinate.\n")
        self._write("Press Enter to apply these changes\n")
        self._write("ESC to exit crd menu.\n")
        p = self.position
        self._write(f"CURRENT CRD: X:{p.x:f}  Y:{p.y:f}  Z:{p.z:f}\n")

    def _position_key(self, keysym: int) -> None:
        if keysym == Key.ESCAPE:
            self._clear()
            self._write("---------EXITING CRD MENU------------\n\n")
            self._enter_main()
            return
        letter = _letter(keysym)
        if letter in ("x", "y", "z"):
            self.axis = letter
        if keysym in (Key.UP, Key.DOWN):
            if self.axis is None:
                self._write("Select a crd you want to change first.\n")
            else:
                sign = -1 if keysym == Key.DOWN else 1
                updated = getattr(self.position, self.axis) + sign
                if -1000 <= updated <= 1000:
                    self.position = replace(self.position, **{self.axis: updated})
            p = self.position
            self._write(f"NEW VALUE IF APPLIED: X:{p.x:f}  Y:{p.y:f}  Z:{p.z:f}\n")
        if keysym == Key.ENTER:
            self.scene.set_position(self.target, self.index, self.position)
            self._write("Changes applied.\n")
            self._enter_position()

    # direction menu

    def _enter_direction(self) -> None:
        self.mode = Mode.DIRECTION
        self.direction = self.scene.get_direction(self.target, self.index)
        self.axis = None
        self._write("---------ENTERING VEC MENU------------\n\n")
        self._write("Press x to change X vector.\n")
        self._write("Press y to change Y vector.\n")
        self._write("Press z to change Z vector.\n")
        self._write("Press Enter to apply these changes\n")
        self._write("ESC to exit vec menu.\n")
        d = self.direction
        self._write(f"CURRENT VEC: X:{d.x:f}  Y:{d.y:f}  Z:{d.z:f}\n")

    def _direction_key(self, keysym: int) -> None:
        if keysym == Key.ESCAPE:
            self._clear()
            self._write("---------EXITING VEC MENU------------\n\n")
            self._enter_main()
            return
        letter = _letter(keysym)
        if letter in ("x", "y", "z"):
            self.axis = letter
        if keysym in (Key.UP, Key.DOWN):
            if self.axis is None:
                self._write("Select a vec you want to change first.\n")
            else:
                step = -0.1 if keysym == Key.DOWN else 0.1
                moved = replace(
                    self.direction,
                    **{self.axis: getattr(self.direction, self.axis) + step},
                )
                self.direction = moved.normalized()
            d = self.direction
            self._write(f"NEW VALUE IF APPLIED: X:{d.x:f}  Y:{d.y:f}  Z:{d.z:f}\n")
        if keysym == Key.ENTER:
            self.scene.set_direction(self.target, self.index, self.direction)
            self._enter_direction()

    # value edit menu

    def _read_field(self, chosen: _Field) -> float:
        s, i = self.scene, self.index
        if chosen is _Field.FOV:
            return s.camera.fov
        if chosen is _Field.BRIGHTNESS:
            return s.light.brightness
        if chosen is _Field.AMBIENT:
            return s.ambient.ratio
        if chosen is _Field.SPHERE_DIAMETER:
            return s.spheres[i].diameter
        if chosen is _Field.CYLINDER_DIAMETER:
            return s.cylinders[i].diameter
        return s.cylinders[i].height

    def _write_field(self, chosen: _Field, value: float) -> None:
        s, i = self.scene, self.index
        if chosen is _Field.FOV:
            s.camera.fov = int(value)
        elif chosen is _Field.BRIGHTNESS:
            s.light.brightness = value
        elif chosen is _Field.AMBIENT:
            s.ambient.ratio = value
        elif chosen is _Field.SPHERE_DIAMETER:
            s.spheres[i].diameter = value
        elif chosen is _Field.CYLINDER_DIAMETER:
            s.cylinders[i].diameter = value
        else:
            s.cylinders[i].height = value

    def _enter_edit(self, chosen: _Field) -> None:
        self.mode = Mode.EDIT
        self.field = chosen
        self.value = self._read_field(chosen)
        self._write("------------ENTERING EDIT MENU------------\n\n")
        self._write("1.Press UP button to increase the value.\n")
        self._write("2.Press DOWN button to decrease the value.\n")
        self._write("3.Press ENTER to apply the value change.\n")
        self._write("4.Press ESC to exit the edit menu.\n")
        self._write(_CURRENT_LABEL[chosen].format(self.value))

    def _edit_key(self, keysym: int) -> None:
        if keysym == Key.ESCAPE:
            self.field = None
            self._clear()
            self._write("---------EXITED EDIT MENU------------\n\n")
            self._enter_main()
            return
        if keysym == Key.UP:
            self._increase()
        if keysym == Key.DOWN:
            self._decrease()
        if keysym == Key.ENTER:
            self._write_field(self.field, self.value)
            self._write("Changes applied.\n")
            self._enter_main()

    def _increase(self) -> None:
        v = self.value
        if self.field is _Field.FOV:
            if v + 1 <= 180:
                v += 1
        elif self.field in _RATIOS:
            if v + 0.1 <= 1.01:
                v += 0.1
        elif v + 1 <= 200:
            v += 1
        self.value = v
        self._write(_NEW_LABEL[self.field].format(v))

    def _decrease(self) -> None:
        v = self.value
        if self.field is _Field.FOV:
            if v - 1 >= 0:
                v -= 1
        elif self.field in _RATIOS:
            if v - 0.1 >= 0:
                v -= 0.1
        elif v - 1 > 0:
            v -= 1
        self.value = v
        self._write(_NEW_LABEL[self.field].format(v))