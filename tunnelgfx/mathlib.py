"""Vectors, row-major 4x4 matrices, scalar helpers and a random source."""

from __future__ import annotations

import functools
import math
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Union

PI = math.pi

Number = Union[int, float]


@dataclass(frozen=True)
class Vector:
    """A four-component vector; ``w`` defaults to 1 (a point)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def with_w(self, w: float) -> "Vector":
        """Return a copy with a different ``w`` component."""
        return replace(self, w=w)

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> "Vector":
        """Return the vector scaled to unit length; ``w`` is kept."""
        size = self.length()
        if size == 0.0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return Vector(self.x / size, self.y / size, self.z / size, self.w)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z, self.w)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return _transform(self, other)
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x / other, self.y / other, self.z / other)
        return NotImplemented


class Rotation(Enum):
    """Principal axis for :meth:`Matrix.rotation`."""

    X = "x"
    Y = "y"
    Z = "z"


_UP = Vector(0.0, 1.0, 0.0, 0.0)


@dataclass(frozen=True)
class Matrix:
    """A row-major 4x4 matrix; vectors multiply from the left."""

    row_0: Vector = Vector()
    row_1: Vector = Vector()
    row_2: Vector = Vector()
    row_3: Vector = Vector()

    @property
    def rows(self) -> tuple[Vector, Vector, Vector, Vector]:
        return (self.row_0, self.row_1, self.row_2, self.row_3)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self.rows)

    @classmethod
    def zero(cls) -> "Matrix":
        row = Vector(0.0, 0.0, 0.0, 0.0)
        return cls(row, row, row, row)

    @classmethod
    def identity(cls) -> "Matrix":
        return cls(
            Vector(1.0, 0.0, 0.0, 0.0),
            Vector(0.0, 1.0, 0.0, 0.0),
            Vector(0.0, 0.0, 1.0, 0.0),
            Vector(0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def translation(cls, x, y=None, z=None) -> "Matrix":
        """Translation by ``(x, y, z)`` or by the xyz of a single vector."""
        if isinstance(x, Vector):
            if y is not None or z is not None:
                raise TypeError("give either a vector or three components")
            x, y, z = x.x, x.y, x.z
        elif y is None or z is None:
            raise TypeError("translation needs three components")
        ident = cls.identity()
        return cls(ident.row_0, ident.row_1, ident.row_2, Vector(x, y, z, 1.0))

    @classmethod
    def rotation(cls, axis: Rotation, angle: float) -> "Matrix":
        """Rotation about a principal axis."""
        c = math.cos(angle)
        s = math.sin(angle)
        if axis is Rotation.X:
            rows = (
                Vector(1.0, 0.0, 0.0, 0.0),
                Vector(0.0, c, -s, 0.0),
                Vector(0.0, s, c, 0.0),
            )
        elif axis is Rotation.Y:
            rows = (
                Vector(c, 0.0, s, 0.0),
                Vector(0.0, 1.0, 0.0, 0.0),
                Vector(-s, 0.0, c, 0.0),
            )
        elif axis is Rotation.Z:
            rows = (
                Vector(c, -s, 0.0, 0.0),
                Vector(s, c, 0.0, 0.0),
                Vector(0.0, 0.0, 1.0, 0.0),
            )
        else:
            raise ValueError(f"unknown rotation axis: {axis!r}")
        return cls(*rows, Vector(0.0, 0.0, 0.0, 1.0))

    @classmethod
    def axis_rotation(cls, axis: Vector, angle: float) -> "Matrix":
        """Rotation by ``angle`` about an arbitrary axis."""
        k = axis.normalized()
        c = math.cos(angle)
        s = math.sin(angle)
        c_inv = 1.0 - c

        k_xx, k_yy, k_zz = k.x * k.x, k.y * k.y, k.z * k.z
        k_xy, k_yz, k_xz = k.x * k.y, k.y * k.z, k.x * k.z
        s_x, s_y, s_z = s * k.x, s * k.y, s * k.z

        return cls(
            Vector(c + k_xx * c_inv, s_z + k_xy * c_inv, -s_y + k_xz * c_inv, 0.0),
            Vector(-s_z + k_xy * c_inv, c + k_yy * c_inv, s_x + k_yz * c_inv, 0.0),
            Vector(s_y + k_xz * c_inv, -s_x + k_yz * c_inv, c + k_zz * c_inv, 0.0),
            Vector(0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def orientation(cls, direction: Vector, up: Vector = _UP) -> "Matrix":
        """Basis whose third row looks along ``direction``."""
        row_2 = direction.normalized()
        row_0 = cross(up, row_2).normalized()
        row_1 = cross(row_2, row_0).normalized()
        return cls(row_0, row_1, row_2, Vector(0.0, 0.0, 0.0, 1.0))

    @classmethod
    def scale(cls, sx: float, sy: float | None = None, sz: float | None = None) -> "Matrix":
        """Scaling matrix; a single factor scales uniformly."""
        if sy is None and sz is None:
            sy = sz = sx
        elif sy is None or sz is None:
            raise TypeError("scale needs one or three factors")
        return cls(
            Vector(sx, 0.0, 0.0, 0.0),
            Vector(0.0, sy, 0.0, 0.0),
            Vector(0.0, 0.0, sz, 0.0),
            Vector(0.0, 0.0, 0.0, 1.0),
        )

    def transposed(self) -> "Matrix":
        return Matrix(*(Vector(*column) for column in zip(*self.rows)))

    def quick_inverse(self) -> "Matrix":
        """Transpose the 3x3 rotation part and negate the translation row."""
        r0, r1, r2, r3 = self.rows
        return Matrix(
            Vector(r0.x, r1.x, r2.x, r0.w),
            Vector(r0.y, r1.y, r2.y, r1.w),
            Vector(r0.z, r1.z, r2.z, r2.w),
            Vector(-r3.x, -r3.y, -r3.z, r3.w),
        )

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return _matmul(self, other)


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b.rows))
    return Matrix(
        *(
            Vector(*(sum(p * q for p, q in zip(row, column)) for column in columns))
            for row in a.rows
        )
    )


def _transform(v: Vector, m: Matrix) -> Vector:
    return Vector(*(sum(p * q for p, q in zip(v, column)) for column in zip(*m.rows)))


def mult(*args):
    """Multiply a vector by a matrix, or chain two or more matrices left to right."""
    if len(args) == 2 and isinstance(args[0], Vector) and isinstance(args[1], Matrix):
        return _transform(args[0], args[1])
    if len(args) >= 2 and all(isinstance(arg, Matrix) for arg in args):
        return functools.reduce(_matmul, args)
    raise TypeError("mult takes (Vector, Matrix) or two or more matrices")


def clamp(c: Number, a: Number, b: Number) -> Number:
    """Limit ``c`` to the closed range ``[a, b]``."""
    if a > b:
        raise ValueError(f"empty range: {a} > {b}")
    if c < a:
        return a
    if c > b:
        return b
    return c


def clamp_unit(c: float) -> float:
    """Limit ``c`` to ``[0, 1]``."""
    if c < 0.0:
        return 0.0
    if c > 1.0:
        return 1.0
    return c


def lerp(a, b, t: float):
    """Linear interpolation between two scalars or two vectors."""
    return a + (b - a) * t


def dot(a: Vector, b: Vector) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - b.x * a.y,
        0.0,
    )


def proj(a: Vector, b: Vector) -> float:
    """Length of ``a`` projected onto the direction of ``b``."""
    return dot(a, b.normalized())


def dist_sq(a: Vector, b: Vector) -> float:
    dx = b.x - a.x
    dy = b.y - a.y
    dz = b.z - a.z
    return dx * dx + dy * dy + dz * dz


def dist(a: Vector, b: Vector) -> float:
    return math.sqrt(dist_sq(a, b))


class Rand:
    """Uniform random numbers over inclusive ranges."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def within_range_inc(self, begin: Number, end: Number) -> Number:
        """An integer in ``[begin, end]`` for integer bounds, otherwise a float."""
        if begin > end:
            raise ValueError(f"empty range: {begin} > {end}")
        if isinstance(begin, int) and isinstance(end, int):
            return self._rng.randint(begin, end)
        return self._rng.uniform(begin, end)

    def random_color(self) -> Vector:
        """An opaque colour with random red, green and blue."""
        r = self.within_range_inc(0.0, 1.0)
        g = self.within_range_inc(0.0, 1.0)
        b = self.within_range_inc(0.0, 1.0)
        return Vector(r, g, b, 1.0)