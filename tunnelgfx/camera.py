"""Orthographic and perspective cameras and the input-driven camera controls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from tunnelgfx.inputs import Key, Keyboard, Mouse
from tunnelgfx.mathlib import PI, Matrix, Rotation, Vector, clamp, cross, dot

FLT_EPSILON = 1.1920929e-07

_Y_AXIS = Vector(0.0, 1.0, 0.0, 0.0)
_DEFAULT_UP = Vector(0.0, 1.0, 0.0)
_ZERO = Vector(0.0, 0.0, 0.0, 0.0)


@dataclass
class ViewProj:
    """View and projection matrices handed to shaders."""

    view: Matrix = field(default_factory=Matrix.identity)
    proj: Matrix = field(default_factory=Matrix.identity)


class Camera2D:
    """Orthographic camera for screen-space drawing."""

    def __init__(self, width: float, height: float, depth: float = 1.0) -> None:
        self.view_proj = ViewProj()
        self.orthographic(width, height, depth)

    def orthographic(self, width: float, height: float, depth: float = 1.0) -> None:
        """Set up an orthographic projection of the given extent."""
        self.width = width
        self.height = height
        self.depth = depth
        ident = Matrix.identity()
        self.view_proj.proj = Matrix(
            Vector(2.0 / width, 0.0, 0.0, 0.0),
            Vector(0.0, 2.0 / height, 0.0, 0.0),
            ident.row_2,
            ident.row_3,
        )
        self.view_proj.view = Matrix(
            ident.row_0,
            ident.row_1,
            Vector(0.0, 0.0, -2.0 / depth, 0.0),
            ident.row_3,
        )


class Camera3D:
    """Perspective camera looking from ``pos`` towards ``look_at``."""

    def __init__(
        self,
        width: float,
        height: float,
        look_at: Vector,
        pos: Vector,
        absolute_up: Vector = _DEFAULT_UP,
    ) -> None:
        self.view_proj = ViewProj()
        self.fov_y = 45.0
        self.aspect_ratio = float(width) / float(height)
        self.near_dist = 1.0
        self.far_dist = 1000.0
        self.ndc_convert = Matrix.translation(0.0, 0.0, 1.0) * Matrix.scale(1.0, 1.0, 0.5)
        self.orient_and_pos(look_at, pos, absolute_up)

    def update_view_proj(self) -> None:
        """Rebuild the view and projection matrices from the camera state."""
        d = 1.0 / math.tan(self.fov_y / 2.0)
        near, far = self.near_dist, self.far_dist
        proj = Matrix(
            Vector(d / self.aspect_ratio, 0.0, 0.0, 0.0),
            Vector(0.0, d, 0.0, 0.0),
            Vector(0.0, 0.0, -(far + near) / (far - near), -1.0),
            Vector(0.0, 0.0, (-2.0 * far * near) / (far - near), 0.0),
        )
        self.view_proj.proj = proj * self.ndc_convert

        r, u, f = self.right, self.up, self.direction
        self.view_proj.view = Matrix(
            Vector(r.x, u.x, f.x, 0.0),
            Vector(r.y, u.y, f.y, 0.0),
            Vector(r.z, u.z, f.z, 0.0),
            Vector(-dot(self.pos, r), -dot(self.pos, u), -dot(self.pos, f), 1.0),
        )

    def orient_and_pos(
        self, look_at: Vector, pos: Vector, absolute_up: Vector = _DEFAULT_UP
    ) -> None:
        """Place the camera and rebuild its orthonormal basis."""
        self.look_at = look_at
        self.pos = pos
        self.direction = (-(look_at - pos)).normalized()
        self.right = cross(absolute_up, self.direction).normalized()
        self.up = cross(self.direction, self.right).normalized()
        self.update_view_proj()


class CameraType(IntEnum):
    """The camera controls the engine cycles through."""

    GOD = 0
    FIRST_PERSON = 1
    MOUSE = 2
    UI = 3


class _Camera3DControl:
    def __init__(
        self,
        width: float,
        height: float,
        look_at: Vector,
        pos: Vector,
        absolute_up: Vector = _Y_AXIS,
    ) -> None:
        self.camera3d = Camera3D(width, height, look_at, pos, absolute_up)

    @property
    def view_proj(self) -> ViewProj:
        return self.camera3d.view_proj

    def _move_and_orient(self, diff: Vector, rot: Matrix, speed: float) -> None:
        if diff.length() > FLT_EPSILON:
            diff = diff.normalized()
        diff = diff * speed
        camera = self.camera3d
        pos = camera.pos + diff
        camera.orient_and_pos(pos + rot.row_2, pos, rot.row_1)


def _sum_moves(keyboard: Keyboard, moves) -> Vector:
    diff = _ZERO
    for key, step in moves:
        if keyboard.is_down(key):
            diff = diff + step
    return diff


class GodCamera(_Camera3DControl):
    """Free-flying camera steered with the keyboard."""

    CAM_SPEED = 12.0
    ROT_SPEED = 2.5

    def process_input(self, keyboard: Keyboard, mouse: Mouse, delta: float, active: bool = True) -> None:
        camera = self.camera3d
        adj_cam = self.CAM_SPEED * delta
        adj_rot = self.ROT_SPEED * delta

        rot = Matrix.orientation(camera.look_at - camera.pos, _Y_AXIS)

        diff = _sum_moves(
            keyboard,
            (
                (Key.W, rot.row_2 * adj_cam),
                (Key.S, rot.row_2 * -adj_cam),
                (Key.A, rot.row_0 * adj_cam),
                (Key.D, rot.row_0 * -adj_cam),
                (Key.Q, _Y_AXIS * adj_cam),
                (Key.E, _Y_AXIS * -adj_cam),
            ),
        )

        if keyboard.is_down(Key.LEFT):
            rot = rot * Matrix.rotation(Rotation.Y, -adj_rot)
        if keyboard.is_down(Key.RIGHT):
            rot = rot * Matrix.rotation(Rotation.Y, adj_rot)
        if keyboard.is_down(Key.UP):
            rot = rot * Matrix.axis_rotation(rot.row_0, -adj_rot)
        if keyboard.is_down(Key.DOWN):
            rot = rot * Matrix.axis_rotation(rot.row_0, adj_rot)
        if keyboard.is_down(Key.DIGIT_0):
            rot = Matrix.orientation(camera.look_at - camera.pos, _Y_AXIS)

        self._move_and_orient(diff, rot, adj_cam)


class FirstPersonCamera(_Camera3DControl):
    """Walking camera: keys move on the ground plane, the mouse looks around."""

    CAM_SPEED = 12.0
    ROT_SPEED = 1.0

    def process_input(self, keyboard: Keyboard, mouse: Mouse, delta: float, active: bool = True) -> None:
        camera = self.camera3d
        adj_cam = self.CAM_SPEED * delta
        adj_rot = self.ROT_SPEED * delta

        rot = Matrix.orientation(camera.look_at - camera.pos, _Y_AXIS)
        forward = Vector(rot.row_2.x, 0.0, rot.row_2.z)
        left = cross(_Y_AXIS, forward)

        diff = _sum_moves(
            keyboard,
            (
                (Key.W, forward * adj_cam),
                (Key.S, forward * -adj_cam),
                (Key.A, left * adj_cam),
                (Key.D, left * -adj_cam),
            ),
        )

        if active and not mouse.set_pos and (mouse.delta_x or mouse.delta_y):
            if mouse.delta_x != 0:
                rot = rot * Matrix.rotation(Rotation.Y, adj_rot * float(mouse.delta_x))
            if mouse.delta_y != 0:
                rot = rot * Matrix.axis_rotation(rot.row_0, adj_rot * float(mouse.delta_y))

        self._move_and_orient(diff, rot, adj_cam)


class MouseCamera(_Camera3DControl):
    """Orbits a fixed point on a sphere, driven by mouse movement."""

    CIRCLE_DIAMETER = 200.0
    CLAMP_Y_TOP = PI / 3.0
    CLAMP_Y_BOTTOM = -PI / 3.0
    CAMERA_SPEED = 0.01
    TARGET = Vector(0.0, 5.0, 0.0)
    UP = Vector(0.0, 1.0, 0.0)

    def __init__(
        self,
        width: float,
        height: float,
        look_at: Vector,
        pos: Vector,
        absolute_up: Vector = _Y_AXIS,
    ) -> None:
        super().__init__(width, height, look_at, pos, absolute_up)
        self.xz_angle = 0.0
        self.y_angle = self.CLAMP_Y_TOP

    def process_input(self, keyboard: Keyboard, mouse: Mouse, delta: float, active: bool = True) -> None:
        if not active or mouse.set_pos or not (mouse.delta_x or mouse.delta_y):
            return
        if mouse.delta_x != 0:
            self.xz_angle += float(mouse.delta_x) * self.CAMERA_SPEED
        if mouse.delta_y != 0:
            self.y_angle = clamp(
                self.y_angle + float(mouse.delta_y) * self.CAMERA_SPEED,
                self.CLAMP_Y_BOTTOM,
                self.CLAMP_Y_TOP,
            )
        radius = math.sqrt(self.CIRCLE_DIAMETER)
        new_pos = Vector(
            math.sin(self.xz_angle) * radius,
            math.sin(self.y_angle) * radius,
            -math.cos(self.xz_angle) * radius,
        )
        self.camera3d.orient_and_pos(self.TARGET, new_pos, self.UP)


class UICamera:
    """Fixed orthographic camera for user-interface drawing."""

    def __init__(self, width: float, height: float, depth: float) -> None:
        self.camera2d = Camera2D(width, height, depth)

    @property
    def view_proj(self) -> ViewProj:
        return self.camera2d.view_proj

    def process_input(self, keyboard: Keyboard, mouse: Mouse, delta: float, active: bool = True) -> None:
        """The UI camera does not react to input."""


class CameraRig:
    """The engine's set of camera controls; G cycles the current one.

    The caller updates the mouse before calling :meth:`update`.
    """

    def __init__(self, width: int, height: int) -> None:
        self.controls = {
            CameraType.GOD: GodCamera(
                width, height, Vector(0.0, 0.0, 0.0, 0.0), Vector(10.0, 15.0, -10.0)
            ),
            CameraType.FIRST_PERSON: FirstPersonCamera(
                width, height, Vector(0.0, 0.0, 26.0), Vector(0.0, 0.0, 25.0)
            ),
            CameraType.MOUSE: MouseCamera(
                width, height, Vector(0.0, 0.0, 0.0, 0.0), Vector(10.0, 15.0, -10.0)
            ),
            CameraType.UI: UICamera(float(width), float(height), 1.0),
        }
        self.current = CameraType.GOD
        self._toggle_held = False

    @property
    def active_control(self):
        return self.controls[self.current]

    @property
    def view_proj(self) -> ViewProj:
        return self.active_control.view_proj

    def update(self, keyboard: Keyboard, mouse: Mouse, delta: float, active: bool = True) -> None:
        """Switch camera on a fresh press of G, then let the current camera handle input."""
        if not active:
            return
        pressed = keyboard.is_down(Key.G)
        if pressed and not self._toggle_held:
            self.current = CameraType((self.current + 1) % len(CameraType))
        self._toggle_held = pressed
        self.active_control.process_input(keyboard, mouse, delta, active)