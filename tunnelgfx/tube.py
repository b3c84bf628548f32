"""Drawable entities and the scrolling tube of coloured segments."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from tunnelgfx.assets import Image
from tunnelgfx.mathlib import Matrix, Rotation, Vector, mult
from tunnelgfx.mesh import Mesh, PrefabType, build_prefab

SEGMENT_WIDTH = 16.0
SEGMENT_HEIGHT = 9.0

BLACK = Vector(0.0, 0.0, 0.0)
WHITE = Vector(1.0, 1.0, 1.0)


@dataclass
class ColorEntity:
    """A mesh drawn with its vertex colours."""

    mesh: Mesh
    world: Matrix = field(default_factory=Matrix.identity)


@dataclass
class SingleColorEntity:
    """A mesh drawn in one colour."""

    mesh: Mesh
    world: Matrix = field(default_factory=Matrix.identity)
    color: Vector = field(default_factory=Vector)


@dataclass
class UIEntity:
    """A screen-space image with a position, angle and scale."""

    image: Image
    mesh: Optional[Mesh] = None
    x: float = 100.0
    y: float = -100.0
    angle: float = 0.0
    scale: float = 0.25

    def world(self) -> Matrix:
        """Scale to the texture's size, rotate about Z, then translate."""
        texture = self.image.texture
        scale_mat = Matrix.scale(
            self.scale * float(texture.width), self.scale * float(texture.height), 1.0
        )
        rot_mat = Matrix.rotation(Rotation.Z, self.angle)
        trans_mat = Matrix.translation(self.x, self.y, 0.0)
        return mult(scale_mat, rot_mat, trans_mat)


class Tube:
    """A ring of segments moving along +Z; the farthest one is recycled to the front."""

    def __init__(
        self,
        num_segments: int = 500,
        thickness: float = 2.5,
        offset_z: float = 25.0,
        speed: float = 10.0,
    ) -> None:
        if num_segments <= 0:
            raise ValueError("a tube needs at least one segment")
        self.num_segments = num_segments
        self.thickness = thickness
        self.offset_z = offset_z
        self.speed = speed
        self.max_dist = float(num_segments) * thickness + offset_z
        self.curr_one = num_segments - 1

        mesh = build_prefab(PrefabType.SEGMENT)
        self.segments = [
            SingleColorEntity(
                mesh,
                self._segment_world(0.0, 0.0, float(index) * thickness + offset_z),
                BLACK if index % 2 == 0 else WHITE,
            )
            for index in range(num_segments)
        ]

    def _segment_world(self, x: float, y: float, z: float) -> Matrix:
        return Matrix.scale(SEGMENT_WIDTH, SEGMENT_HEIGHT, self.thickness) * Matrix.translation(x, y, z)

    def update(self, delta: float) -> None:
        """Recycle the farthest segment if it passed the end, then move all segments."""
        current = self.segments[self.curr_one]
        if current.world.row_3.z > self.max_dist:
            prev = self.segments[(self.curr_one + 1) % self.num_segments].world
            current.world = self._segment_world(prev.row_3.x, prev.row_3.y, self.offset_z)
            self.curr_one = (self.curr_one - 1) % self.num_segments

        step = self.speed * delta
        for segment in self.segments:
            row_3 = segment.world.row_3
            segment.world = replace(segment.world, row_3=replace(row_3, z=row_3.z + step))