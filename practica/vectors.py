"""Small 2D/3D float vectors and ray-intersection helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Scalar = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """A pair of floats with component-wise arithmetic."""

    x: float
    y: float

    @classmethod
    def splat(cls, value: Scalar) -> "Vec2":
        """Build a vector with both components set to ``value``."""
        return cls(value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Union["Vec2", Scalar]) -> "Vec2":
        o = _as_vec2(other)
        return Vec2(self.x + o.x, self.y + o.y)

    def __sub__(self, other: Union["Vec2", Scalar]) -> "Vec2":
        o = _as_vec2(other)
        return Vec2(self.x - o.x, self.y - o.y)

    def __mul__(self, other: Union["Vec2", Scalar]) -> "Vec2":
        o = _as_vec2(other)
        return Vec2(self.x * o.x, self.y * o.y)

    def __truediv__(self, other: Union["Vec2", Scalar]) -> "Vec2":
        o = _as_vec2(other)
        return Vec2(self.x / o.x, self.y / o.y)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)


@dataclass(frozen=True)
class Vec3:
    """A triple of floats with component-wise arithmetic."""

    x: float
    y: float
    z: float

    @classmethod
    def splat(cls, value: Scalar) -> "Vec3":
        """Build a vector with all three components set to ``value``."""
        return cls(value, value, value)

    @classmethod
    def from_vec2(cls, x: Scalar, v: Vec2) -> "Vec3":
        """Build ``(x, v.x, v.y)``."""
        return cls(x, v.x, v.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec3(other)
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec3(other)
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec3(other)
        return Vec3(self.x * o.x, self.y * o.y, self.z * o.z)

    def __truediv__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec3(other)
        return Vec3(self.x / o.x, self.y / o.y, self.z / o.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __abs__(self) -> "Vec3":
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vec3":
        return self / self.length()

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z


def _as_vec2(value: Union[Vec2, Scalar]) -> Vec2:
    return value if isinstance(value, Vec2) else Vec2.splat(value)


def _as_vec3(value: Union[Vec3, Scalar]) -> Vec3:
    return value if isinstance(value, Vec3) else Vec3.splat(value)


def clamp(value: Scalar, low: Scalar, high: Scalar) -> Scalar:
    """Limit ``value`` to the range ``[low, high]``."""
    return max(min(value, high), low)


def sign(a):
    """Return -1, 0 or 1 for a number, or component-wise for a Vec3."""
    if isinstance(a, Vec3):
        return Vec3(sign(a.x), sign(a.y), sign(a.z))
    return float((0 < a) - (a < 0))


def step(edge, x):
    """Return 1.0 where ``x > edge`` and 0.0 elsewhere; component-wise for Vec3."""
    if isinstance(edge, Vec3) or isinstance(x, Vec3):
        e, v = _as_vec3(edge), _as_vec3(x)
        return Vec3(step(e.x, v.x), step(e.y, v.y), step(e.z, v.z))
    return float(x > edge)


def reflect(rd: Vec3, n: Vec3) -> Vec3:
    """Reflect direction ``rd`` about the normal ``n``."""
    return rd - n * (2 * n.dot(rd))


def rotate_x(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x, v.z * s + v.y * c, v.z * c - v.y * s)


def rotate_y(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c - v.z * s, v.y, v.x * s + v.z * c)


def rotate_z(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c - v.y * s, v.x * s + v.y * c, v.z)


def sphere(ro: Vec3, rd: Vec3, r: float) -> Vec2:
    """Intersect a ray with a sphere at the origin; ``(-1, -1)`` on a miss."""
    b = ro.dot(rd)
    c = ro.dot(ro) - r * r
    h = b * b - c
    if h < 0.0:
        return Vec2.splat(-1.0)
    h = math.sqrt(h)
    return Vec2(-b - h, -b + h)


def _recip(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def box(ro: Vec3, rd: Vec3, box_size) -> Tuple[Vec2, Optional[Vec3]]:
    """Intersect a ray with an axis-aligned box at the origin.

    Returns the near and far distances and the surface normal at the near
    hit, or ``(Vec2(-1, -1), None)`` on a miss.
    """
    size = _as_vec3(box_size)
    m = Vec3(_recip(rd.x), _recip(rd.y), _recip(rd.z))
    n = m * ro
    k = abs(m) * size
    t1 = -n - k
    t2 = -n + k
    t_near = _fmax(_fmax(t1.x, t1.y), t1.z)
    t_far = _fmin(_fmin(t2.x, t2.y), t2.z)
    if t_near > t_far or t_far < 0.0:
        return Vec2.splat(-1.0), None
    yzx = Vec3(t1.y, t1.z, t1.x)
    zxy = Vec3(t1.z, t1.x, t1.y)
    normal = -sign(rd) * step(yzx, t1) * step(zxy, t1)
    return Vec2(t_near, t_far), normal


def plane(ro: Vec3, rd: Vec3, p: Vec3, w: float) -> float:
    """Distance along the ray to the plane ``dot(x, p) + w == 0``."""
    num = -(ro.dot(p) + w)
    den = rd.dot(p)
    if den == 0:
        if num == 0:
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den