"""Vertex and triangle meshes and the engine's built-in prefab shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Sequence

from tunnelgfx.mathlib import Rand, Vector

ColorSource = Callable[[], Vector]

_FaceCorner = tuple[float, float, float, float, float]


@dataclass(frozen=True)
class Vertex:
    """A vertex with a position, texture coordinates and a colour."""

    pos: Vector
    u: float
    v: float
    col: Vector


@dataclass(frozen=True)
class Triangle:
    """Three vertex indices."""

    p0: int
    p1: int
    p2: int

    def __iter__(self):
        yield self.p0
        yield self.p1
        yield self.p2


@dataclass(frozen=True)
class Mesh:
    """An indexed triangle list."""

    vertices: tuple[Vertex, ...]
    triangles: tuple[Triangle, ...]

    def index_count(self) -> int:
        """Number of indices drawn for this mesh."""
        return len(self.triangles) * 3


class PrefabType(Enum):
    """The built-in meshes."""

    UNIT_CUBE = "unit_cube"
    UNIT_FLOOR = "unit_floor"
    RECT = "rect"
    SEGMENT = "segment"


_FRONT = ((0.5, 0.5, 0.5, 1.0, 0.0), (-0.5, 0.5, 0.5, 0.0, 0.0),
          (-0.5, -0.5, 0.5, 0.0, 1.0), (0.5, -0.5, 0.5, 1.0, 1.0))
_BACK = ((0.5, 0.5, -0.5, 0.0, 0.0), (-0.5, 0.5, -0.5, 1.0, 0.0),
         (-0.5, -0.5, -0.5, 1.0, 1.0), (0.5, -0.5, -0.5, 0.0, 1.0))
_LEFT = ((0.5, 0.5, -0.5, 1.0, 0.0), (0.5, 0.5, 0.5, 0.0, 0.0),
         (0.5, -0.5, 0.5, 0.0, 1.0), (0.5, -0.5, -0.5, 1.0, 1.0))
_RIGHT = ((-0.5, 0.5, 0.5, 1.0, 0.0), (-0.5, 0.5, -0.5, 0.0, 0.0),
          (-0.5, -0.5, -0.5, 0.0, 1.0), (-0.5, -0.5, 0.5, 1.0, 1.0))
_TOP = ((0.5, 0.5, -0.5, 1.0, 0.0), (-0.5, 0.5, -0.5, 0.0, 0.0),
        (-0.5, 0.5, 0.5, 0.0, 1.0), (0.5, 0.5, 0.5, 1.0, 1.0))
_BOTTOM = ((0.5, -0.5, 0.5, 1.0, 0.0), (-0.5, -0.5, 0.5, 0.0, 0.0),
           (-0.5, -0.5, -0.5, 0.0, 1.0), (0.5, -0.5, -0.5, 1.0, 1.0))

_QUAD = ((0, 1, 2), (0, 2, 3))
_QUAD_REVERSED = ((2, 1, 0), (3, 2, 0))
_QUAD_TWO_SIDED = ((0, 1, 2), (0, 2, 3), (0, 2, 1), (0, 3, 2))

_FLOOR = ((1.0, 0.0, -1.0, 0.0, 1.0), (-1.0, 0.0, -1.0, 1.0, 1.0),
          (-1.0, 0.0, 1.0, 1.0, 0.0), (1.0, 0.0, 1.0, 0.0, 0.0))
_FLOOR_TRIS = ((0, 1, 2), (0, 2, 3), (0, 2, 1), (0, 3, 2))

_RECT = ((0.5, 0.5, 0.0, 0.0, 0.0), (-0.5, 0.5, 0.0, 1.0, 0.0),
         (0.5, -0.5, 0.0, 0.0, 1.0), (-0.5, -0.5, 0.0, 1.0, 1.0))
_RECT_TRIS = ((0, 2, 3), (0, 3, 1), (0, 3, 2), (0, 1, 3))

_LAYOUTS: dict[PrefabType, tuple[tuple[Sequence[_FaceCorner], Sequence[tuple[int, int, int]]], ...]] = {
    PrefabType.UNIT_CUBE: (
        (_FRONT, _QUAD),
        (_BACK, _QUAD_REVERSED),
        (_LEFT, _QUAD),
        (_RIGHT, _QUAD),
        (_TOP, _QUAD),
        (_BOTTOM, _QUAD),
    ),
    PrefabType.UNIT_FLOOR: ((_FLOOR, _FLOOR_TRIS),),
    PrefabType.RECT: ((_RECT, _RECT_TRIS),),
    PrefabType.SEGMENT: (
        (_LEFT, _QUAD_TWO_SIDED),
        (_RIGHT, _QUAD_TWO_SIDED),
        (_TOP, _QUAD_TWO_SIDED),
        (_BOTTOM, _QUAD_TWO_SIDED),
    ),
}


def _assemble(
    faces: Iterable[tuple[Sequence[_FaceCorner], Sequence[tuple[int, int, int]]]],
    color_source: ColorSource,
) -> Mesh:
    vertices: list[Vertex] = []
    triangles: list[Triangle] = []
    for corners, tris in faces:
        base = len(vertices)
        vertices.extend(
            Vertex(Vector(x, y, z), u, v, color_source()) for x, y, z, u, v in corners
        )
        triangles.extend(Triangle(base + a, base + b, base + c) for a, b, c in tris)
    return Mesh(tuple(vertices), tuple(triangles))


def build_prefab(prefab_type: PrefabType, color_source: ColorSource | None = None) -> Mesh:
    """Build one of the built-in meshes, colouring each vertex from ``color_source``."""
    if not isinstance(prefab_type, PrefabType):
        raise ValueError(f"unknown prefab type: {prefab_type!r}")
    if color_source is None:
        color_source = Rand().random_color
    return _assemble(_LAYOUTS[prefab_type], color_source)


class PrefabLibrary:
    """Builds every prefab once and hands out the shared meshes."""

    def __init__(self, color_source: ColorSource | None = None) -> None:
        if color_source is None:
            color_source = Rand().random_color
        self._meshes = {kind: build_prefab(kind, color_source) for kind in PrefabType}

    def get(self, prefab_type: PrefabType) -> Mesh:
        if not isinstance(prefab_type, PrefabType):
            raise ValueError(f"unknown prefab type: {prefab_type!r}")
        return self._meshes[prefab_type]