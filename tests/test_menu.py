import pytest

from minirt.menu import Key, Menu, Mode
from minirt.scene import (
    Ambient,
    Camera,
    Color,
    Cylinder,
    Light,
    Plane,
    Scene,
    Sphere,
    Target,
)
from minirt.vector import Vec3


def make_scene():
    return Scene(
        ambient=Ambient(0.2, Color(255, 255, 255)),
        camera=Camera(Vec3(0, 0, -20), Vec3(0, 0, 1), 70),
        light=Light(Vec3(-40, 0, 30), 1.0),
        spheres=[Sphere(Vec3(0, 0, 20), 1.0, Color(255, 0, 0))],
        planes=[Plane(Vec3(0, -5, 0), Vec3(0, 1, 0), Color(0, 255, 0))],
        cylinders=[
            Cylinder(Vec3(1000, 0, 20), Vec3(0, 0, 1), 14.0, 21.0, Color(10, 0, 255))
        ],
    )


class Recorder:
    def __init__(self):
        self.parts = []
        self.clears = 0

    def write(self, text):
        self.parts.append(text)

    def clear(self):
        self.clears += 1

    @property
    def text(self):
        return "".join(self.parts)


@pytest.fixture
def setup():
    scene = make_scene()
    rec = Recorder()
    return scene, Menu(scene, rec.write, rec.clear), rec


def press(menu, *keys):
    for key in keys:
        menu.handle_key(ord(key) if isinstance(key, str) else key)


def test_keys_ignored_before_selection(setup):
    scene, menu, rec = setup
    press(menu, "c", Key.UP, Key.ENTER)
    assert menu.mode is Mode.INSTRUCTIONS
    assert rec.parts == []


def test_select_sphere_lists_options(setup):
    _, menu, rec = setup
    menu.select(Target.SPHERE, 0)
    assert menu.mode is Mode.MAIN
    assert rec.clears == 1
    assert "P to change position.\n" in rec.parts
    assert "C to change color.\n" in rec.parts
    assert "R to change object diameter.\n" in rec.parts
    assert "V to change vector.\n" not in rec.parts


def test_select_bad_index(setup):
    _, menu, _ = setup
    with pytest.raises(IndexError):
        menu.select(Target.PLANE, 3)


def test_escape_from_main_shows_instructions(setup):
    _, menu, rec = setup
    menu.select(Target.CAMERA)
    press(menu, Key.ESCAPE)
    assert menu.mode is Mode.INSTRUCTIONS
    assert menu.target is None
    assert "---------EXITING MENU------------\n\n" in rec.parts
    assert "6.Press ESC to exit the program\n" in rec.parts


def test_color_edit_applies(setup):
    scene, menu, rec = setup
    menu.select(Target.PLANE, 0)
    press(menu, "c")
    assert menu.mode is Mode.COLOR
    press(menu, "r", Key.UP, Key.UP, Key.ENTER)
    assert scene.planes[0].color == Color(2, 255, 0)
    assert "Changes applied.\n" in rec.parts


def test_color_clamped_and_needs_channel(setup):
    scene, menu, rec = setup
    menu.select(Target.SPHERE, 0)
    press(menu, "c", Key.UP)
    assert "Select a color you want to change first.\n" in rec.parts
    press(menu, "R", Key.UP, "b", Key.DOWN)
    assert menu.color == scene.spheres[0].color


def test_color_escape_discards(setup):
    scene, menu, _ = setup
    menu.select(Target.AMBIENT)
    press(menu, "C", "g", Key.DOWN, Key.ESCAPE)
    assert menu.mode is Mode.MAIN
    assert scene.ambient.color == Color(255, 255, 255)


def test_position_keys(setup):
    scene, menu, _ = setup
    menu.select(Target.SPHERE, 0)
    press(menu, "P")
    assert menu.mode is Mode.MAIN
    press(menu, "C")
    assert menu.mode is Mode.POSITION
    start = scene.spheres[0].position
    press(menu, "x", Key.DOWN, Key.ENTER)
    assert scene.spheres[0].position == Vec3(start.x - 1, start.y, start.z)


def test_position_bounded(setup):
    scene, menu, _ = setup
    menu.select(Target.CYLINDER, 0)
    press(menu, "p", "x", Key.UP, Key.ENTER)
    assert scene.cylinders[0].position.x == 1000


def test_ambient_has_no_position_menu(setup):
    _, menu, _ = setup
    menu.select(Target.AMBIENT)
    press(menu, "p")
    assert menu.mode is Mode.MAIN


def test_direction_stays_normalized(setup):
    scene, menu, _ = setup
    menu.select(Target.PLANE, 0)
    press(menu, "v", "x", Key.UP, Key.UP, Key.ENTER)
    assert menu.mode is Mode.DIRECTION
    assert scene.planes[0].direction.magnitude() == pytest.approx(1.0)
    assert scene.planes[0].direction.x > 0


def test_sphere_has_no_direction_menu(setup):
    _, menu, _ = setup
    menu.select(Target.SPHERE, 0)
    press(menu, "v")
    assert menu.mode is Mode.MAIN


def test_fov_edit(setup):
    scene, menu, _ = setup
    start = scene.camera.fov
    menu.select(Target.CAMERA)
    press(menu, "f")
    assert menu.mode is Mode.EDIT
    press(menu, Key.DOWN, Key.ENTER)
    assert scene.camera.fov == start - 1
    assert menu.mode is Mode.MAIN


def test_fov_upper_limit(setup):
    scene, menu, _ = setup
    scene.camera.fov = 180
    menu.select(Target.CAMERA)
    press(menu, "F", Key.UP, Key.ENTER)
    assert scene.camera.fov == 180


def test_brightness_upper_limit(setup):
    scene, menu, rec = setup
    menu.select(Target.LIGHT)
    press(menu, "b", Key.UP)
    assert menu.value == scene.light.brightness
    assert any(p.startswith("NEW BRIGHTNESS IF APPLIED:") for p in rec.parts)


def test_sphere_diameter_stays_positive(setup):
    scene, menu, _ = setup
    menu.select(Target.SPHERE, 0)
    press(menu, "r", Key.DOWN, Key.ENTER)
    assert scene.spheres[0].diameter == 1.0


def test_cylinder_height_edit_escape_discards(setup):
    scene, menu, rec = setup
    start = scene.cylinders[0].height
    menu.select(Target.CYLINDER, 0)
    press(menu, "h", Key.UP)
    assert menu.value == start + 1
    press(menu, Key.ESCAPE)
    assert scene.cylinders[0].height == start
    assert menu.mode is Mode.MAIN
    assert "---------EXITED EDIT MENU------------\n\n" in rec.parts


def test_ambient_ratio_decrease(setup):
    scene, menu, _ = setup
    start = scene.ambient.ratio
    menu.select(Target.AMBIENT)
    press(menu, "b", Key.DOWN, Key.ENTER)
    assert scene.ambient.ratio == pytest.approx(start - 0.1)