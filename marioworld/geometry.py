"""Vectors, rectangles, ray casting and the records exchanged by the collision system."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any

DEBUG_COLLISION_TTL = 2.0


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An integer edge rectangle: left/top inclusive, right/bottom exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def intersection(self, other: Rect) -> Rect | None:
        """The overlapping area of both rectangles, or None if they do not overlap."""
        result = Rect(
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )
        return None if result.is_empty() else result


@dataclass(frozen=True)
class Rectangle:
    """An integer rectangle given by its top-left corner and its size."""

    x: int
    y: int
    width: int
    height: int

    def intersects(self, other: Rectangle) -> bool:
        """True if the interiors of both rectangles overlap."""
        return (
            other.x < self.x + self.width
            and self.x < other.x + other.width
            and other.y < self.y + self.height
            and self.y < other.y + other.height
        )

    @classmethod
    def from_rect(cls, rect: Rect) -> Rectangle:
        return cls(rect.left, rect.top, rect.width, rect.height)

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.x + self.width, self.y + self.height)


class Axis(enum.Enum):
    X = enum.auto()
    Y = enum.auto()


class InteractionPointType(enum.Enum):
    TOP_HEAD = enum.auto()
    LEFT_UPPER = enum.auto()
    LEFT_LOWER = enum.auto()
    RIGHT_UPPER = enum.auto()
    RIGHT_LOWER = enum.auto()
    LEFT_FOOT = enum.auto()
    RIGHT_FOOT = enum.auto()
    NONE = enum.auto()


@dataclass(frozen=True)
class RayHit:
    """Where and when a ray segment first meets a rectangle."""

    contact_point: Vector2
    contact_normal: Vector2
    contact_time: float


@dataclass
class CollisionResult:
    collided: bool = False
    contact_time: float = 1.0
    contact_normal: Vector2 = field(default_factory=Vector2)
    contact_point: Vector2 = field(default_factory=Vector2)
    collided_with: Any = None
    point_type: InteractionPointType = InteractionPointType.NONE


@dataclass
class DebugCollisionInfo:
    position: Vector2 = field(default_factory=Vector2)
    normal: Vector2 = field(default_factory=Vector2)
    time_to_live: float = DEBUG_COLLISION_TTL


@dataclass
class RaycastHit:
    entity: Any = None
    distance: float = 0.0
    point: Vector2 = field(default_factory=Vector2)
    normal: Vector2 = field(default_factory=Vector2)


@dataclass
class RaycastResult:
    has_hit: bool = False
    closest_hit: RaycastHit = field(default_factory=RaycastHit)
    hits: list[RaycastHit] = field(default_factory=list)


def _inverse(component: float) -> float:
    return 1.0 / component if component != 0 else math.inf


def ray_vs_rect(origin: Vector2, end: Vector2, rect: Rectangle) -> RayHit | None:
    """Cast the segment from ``origin`` to ``end`` against ``rect``.

    Returns None when the ray misses or points away. The contact time is the
    fraction of the segment at first contact; it may lie outside [0, 1], so
    callers decide which range counts. A hit exactly on a corner carries a
    zero normal.
    """
    ray_dir = end - origin
    inv_x = _inverse(ray_dir.x)
    inv_y = _inverse(ray_dir.y)

    near_x = (rect.x - origin.x) * inv_x
    near_y = (rect.y - origin.y) * inv_y
    far_x = (rect.x + rect.width - origin.x) * inv_x
    far_y = (rect.y + rect.height - origin.y) * inv_y

    if any(math.isnan(t) for t in (near_x, near_y, far_x, far_y)):
        return None

    if near_x > far_x:
        near_x, far_x = far_x, near_x
    if near_y > far_y:
        near_y, far_y = far_y, near_y

    if near_x > far_y or near_y > far_x:
        return None

    contact_time = max(near_x, near_y)
    if min(far_x, far_y) < 0:
        return None

    contact_point = origin + ray_dir * contact_time

    if near_x > near_y:
        normal = Vector2(1, 0) if inv_x < 0 else Vector2(-1, 0)
    elif near_x < near_y:
        normal = Vector2(0, 1) if inv_y < 0 else Vector2(0, -1)
    else:
        normal = Vector2(0, 0)

    return RayHit(contact_point, normal, contact_time)