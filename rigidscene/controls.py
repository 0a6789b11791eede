"""Mouse and keyboard handling that edits the scene."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, Optional, TextIO, Union

from .cvec import Vec
from .quat import Quat
from .rigtform import RigTForm, inv, lin_fact, trans_fact
from .scene import Scene

ESCAPE = "\x1b"
SCREENSHOT_FILE = "out.ppm"

ScreenshotHandler = Callable[[int, int, str], None]


class MouseButton(IntEnum):
    """Mouse buttons, numbered as the windowing toolkit reports them."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class ButtonState(IntEnum):
    """Whether a mouse button went down or came up."""

    DOWN = 0
    UP = 1


def help_text() -> str:
    """The help menu shown for the 'h' key."""
    return (
        " ============== H E L P ==============\n\n"
        "h\t\thelp menu\n"
        "s\t\tsave screenshot\n"
        "f\t\tToggle flat shading on/off.\n"
        "o\t\tCycle object to edit\n"
        "v\t\tCycle view\n"
        "drag left mouse to rotate\n"
    )


class Controller:
    """Turns mouse and keyboard events into changes of a ``Scene``."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.left_down = False
        self.right_down = False
        self.middle_down = False
        self.click_x = 0
        self.click_y = 0
        self.screenshot_handler: Optional[ScreenshotHandler] = None
        self.output: TextIO = sys.stdout

    @property
    def click_down(self) -> bool:
        """True while any mouse button is held."""
        return self.left_down or self.right_down or self.middle_down

    def _to_gl_y(self, y: int) -> int:
        return self.scene.window_height - y - 1

    def mouse(self, button: MouseButton, state: ButtonState, x: int, y: int) -> None:
        """Record a button press or release at window position (x, y)."""
        button = MouseButton(button)
        state = ButtonState(state)
        self.click_x = x
        self.click_y = self._to_gl_y(y)
        pressed = state is ButtonState.DOWN
        if button is MouseButton.LEFT:
            self.left_down = pressed
        elif button is MouseButton.RIGHT:
            self.right_down = pressed
        else:
            self.middle_down = pressed

    def _motion_transform(self, dx: float, dy: float) -> RigTForm:
        if self.left_down and not self.right_down:
            return RigTForm(
                rotation=Quat.make_x_rotation(-dy) * Quat.make_y_rotation(dx)
            )
        if self.right_down and not self.left_down:
            return RigTForm(Vec(dx, dy, 0.0) * 0.01)
        if self.middle_down or (self.left_down and self.right_down):
            return RigTForm(Vec(0.0, 0.0, -dy) * 0.01)
        return RigTForm()

    def motion(self, x: int, y: int) -> bool:
        """Drag the edited cube; return True if the scene changed."""
        scene = self.scene
        dx = float(x - self.click_x)
        dy = float(self._to_gl_y(y) - self.click_y)
        m = self._motion_transform(dx, dy)

        changed = False
        if self.click_down:
            # The auxiliary frame is centred on the first cube for either cube.
            a = trans_fact(scene.cube1_rbt) * lin_fact(scene.sky_rbt)
            motion = a * m * inv(a)
            if scene.edit_cube1:
                scene.cube1_rbt = motion * scene.cube1_rbt
            else:
                scene.cube2_rbt = motion * scene.cube2_rbt
            changed = True

        self.click_x = x
        self.click_y = self._to_gl_y(y)
        return changed

    def keyboard(self, key: Union[str, int]) -> bool:
        """Handle a key press; return True when the view should be redrawn."""
        if isinstance(key, int):
            key = chr(key)
        scene = self.scene
        if key == ESCAPE:
            raise SystemExit(0)
        if key == "h":
            print(help_text(), file=self.output)
        elif key == "s":
            if self.screenshot_handler is None:
                raise RuntimeError("no screenshot handler is set")
            self.screenshot_handler(
                scene.window_width, scene.window_height, SCREENSHOT_FILE
            )
        elif key == "f":
            scene.active_shader ^= 1
        elif key == "o":
            scene.edit_cube1 = not scene.edit_cube1
        return True