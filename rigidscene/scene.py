"""The scene: a ground plane, two cubes, two lights and a sky camera."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .cvec import PI, Vec
from .matrix4 import Matrix4, normal_matrix
from .rigtform import RigTForm, inv, rig_tform_to_matrix

FRUST_MIN_FOV = 60.0
FRUST_NEAR = -0.1
FRUST_FAR = -50.0
GROUND_Y = -2.0
GROUND_SIZE = 10.0

DEFAULT_WINDOW_WIDTH = 512
DEFAULT_WINDOW_HEIGHT = 512

LIGHT1 = Vec(2.0, 3.0, 14.0)
LIGHT2 = Vec(-2.0, -3.0, -5.0)

GROUND_COLOR = Vec(0.1, 0.95, 0.1)
CUBE1_COLOR = Vec(0.0, 0.0, 1.0)
CUBE2_COLOR = Vec(1.0, 0.0, 0.0)

# Corners of the ground square (x, y, z), all with normal (0, 1, 0).
GROUND_VERTICES = (
    Vec(-GROUND_SIZE, GROUND_Y, -GROUND_SIZE),
    Vec(-GROUND_SIZE, GROUND_Y, GROUND_SIZE),
    Vec(GROUND_SIZE, GROUND_Y, GROUND_SIZE),
    Vec(GROUND_SIZE, GROUND_Y, -GROUND_SIZE),
)
GROUND_NORMAL = Vec(0.0, 1.0, 0.0)
GROUND_INDICES = (0, 1, 2, 0, 2, 3)

# Vertex and fragment shader pairs: diffuse lighting, then solid colour.
SHADER_FILES = (
    ("./shaders/basic-gl3.vshader", "./shaders/diffuse-gl3.fshader"),
    ("./shaders/basic-gl3.vshader", "./shaders/solid-gl3.fshader"),
)


def frust_fov_y(width: int, height: int) -> float:
    """Vertical field of view in degrees keeping at least 60 degrees both ways."""
    if width >= height:
        return FRUST_MIN_FOV
    rad_per_deg = 0.5 * PI / 180
    return (
        math.atan2(
            math.sin(FRUST_MIN_FOV * rad_per_deg) * height / width,
            math.cos(FRUST_MIN_FOV * rad_per_deg),
        )
        / rad_per_deg
    )


@dataclass(frozen=True)
class DrawItem:
    """One object to draw: its geometry kind, matrices and colour."""

    geometry: str
    model_view: Matrix4
    normal: Matrix4
    color: Vec


class Scene:
    """The state of the scene shown in the window."""

    def __init__(self) -> None:
        self.window_width = DEFAULT_WINDOW_WIDTH
        self.window_height = DEFAULT_WINDOW_HEIGHT
        self.fov_y = FRUST_MIN_FOV
        self.sky_rbt = RigTForm(Vec(0.0, 0.25, 4.0))
        self.cube1_rbt = RigTForm(Vec(-1.0, 0.0, 0.0))
        self.cube2_rbt = RigTForm(Vec(-1.0, 0.0, 0.0))
        self.cube1_color = CUBE1_COLOR
        self.cube2_color = CUBE2_COLOR
        self.active_shader = 0
        self.edit_cube1 = True

    def reshape(self, width: int, height: int) -> None:
        """Record a new window size and update the field of view."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {width}x{height}")
        self.window_width = width
        self.window_height = height
        self.fov_y = frust_fov_y(width, height)

    def projection_matrix(self) -> Matrix4:
        return Matrix4.make_projection(
            self.fov_y,
            self.window_width / float(self.window_height),
            FRUST_NEAR,
            FRUST_FAR,
        )

    def eye_lights(self) -> tuple[Vec, Vec]:
        """Positions of the two lights in eye coordinates."""
        inv_eye = inv(self.sky_rbt)
        return tuple(
            (inv_eye * light.resized(4, 1.0)).resized(3) for light in (LIGHT1, LIGHT2)
        )

    def draw_items(self) -> list[DrawItem]:
        """The ground and both cubes, in drawing order."""
        inv_eye = inv(self.sky_rbt)
        objects = (
            ("ground", RigTForm(), GROUND_COLOR),
            ("cube", self.cube2_rbt, self.cube2_color),
            ("cube", self.cube1_rbt, self.cube1_color),
        )
        items = []
        for geometry, rbt, color in objects:
            mvm = rig_tform_to_matrix(inv_eye * rbt)
            items.append(DrawItem(geometry, mvm, normal_matrix(mvm), color))
        return items