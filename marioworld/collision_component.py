"""Axis-aligned collision box attached to an entity, with timed pushes."""

from __future__ import annotations

from typing import Any, Protocol

from .debug_overlay import CYAN, RED, YELLOW, Color, DebugOverlay
from .geometry import InteractionPointType, Rect, Rectangle, Vector2

InteractionPoint = tuple[InteractionPointType, Vector2]


class Owner(Protocol):
    """What the component reads from the entity it belongs to."""

    position: Vector2

    def interaction_points(self) -> list[InteractionPoint]: ...


class CollisionComponent:
    """A box centred on ``position`` with the given ``size``.

    A push moves the box by a fixed distance spread over a span of time,
    one ``update`` step at a time.
    """

    def __init__(self, owner: Owner) -> None:
        self.owner = owner
        self.size = Vector2(0.0, 0.0)
        self.position = Vector2(0.0, 0.0)
        self.velocity = Vector2(0.0, 0.0)
        self._pushing = False
        self._push_vector = Vector2(0.0, 0.0)
        self._push_velocity = Vector2(0.0, 0.0)
        self._pushed_distance = 0.0

    @property
    def rect(self) -> Rect:
        """The box edges, truncated towards zero to whole pixels."""
        half_w = self.size.x / 2.0
        half_h = self.size.y / 2.0
        return Rect(
            int(self.position.x - half_w),
            int(self.position.y - half_h),
            int(self.position.x + half_w),
            int(self.position.y + half_h),
        )

    @property
    def rectangle(self) -> Rectangle:
        return Rectangle.from_rect(self.rect)

    @property
    def is_pushed(self) -> bool:
        return self._pushing

    def update(self, dt: float) -> None:
        """Advance an ongoing push by ``dt`` seconds."""
        if not self._pushing:
            return
        delta = self._push_velocity * dt
        self.position = self.position + delta
        self._pushed_distance += delta.length()
        if self._push_vector.length() - self._pushed_distance <= 0:
            self._pushing = False
            self._push_vector = Vector2(0.0, 0.0)
            self._push_velocity = Vector2(0.0, 0.0)
            self._pushed_distance = 0.0

    def push(self, distance: Vector2, span: float) -> bool:
        """Start moving the box by ``distance`` over ``span`` seconds.

        A zero distance or a negative span is ignored and returns False.
        """
        if distance.length() == 0 or span < 0:
            return False
        if span == 0:
            raise ValueError("push span must not be zero")
        self._push_vector = distance
        self._pushed_distance = 0.0
        self._push_velocity = distance / span
        self._pushing = True
        return True

    def interaction_points(self) -> list[InteractionPoint]:
        """Points defined by the component itself: none."""
        return []

    def render_debug(
        self,
        primitive_batch: Any,
        overlay: DebugOverlay,
        bounding_box_color: Color = YELLOW,
        points_color: Color = RED,
    ) -> bool:
        """Outline the box, mark its top edge and the owner's interaction points."""
        if primitive_batch is None:
            return False
        overlay.draw_rect_outline(primitive_batch, self.rect, bounding_box_color)
        top = self.position.y - self.size.y / 2.0
        overlay.draw_line(
            primitive_batch,
            Vector2(self.position.x, top),
            Vector2(self.position.x + self.size.x, top),
            CYAN,
        )
        for _, point in self.owner.interaction_points():
            overlay.draw_quad(
                primitive_batch, point + self.owner.position, Vector2(1, 1), points_color
            )
        return True