"""On-screen debug overlay: FPS, input state, player state and primitive outlines."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from .geometry import Rect, Vector2

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0, 1.0)
RED: Color = (1.0, 0.0, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0, 1.0)
CYAN: Color = (0.0, 1.0, 1.0, 1.0)

TRACKED_KEYS = ("w", "a", "s", "d", "j", "k", "i")

_TEXT_SCALE = 2.0


class PlayerState(Protocol):
    """What the overlay reads from the player."""

    current_state_name: str
    grounded: bool


class DebugOverlay:
    """Draws debug text through a font and debug geometry through a primitive batch.

    Fonts need ``draw_string(batch, text, position, color, rotation, origin, scale)``;
    primitive batches need ``draw_line(v1, v2)`` and ``draw_quad(v1, v2, v3, v4)``,
    where each vertex is a ``(position, color)`` pair.
    """

    def __init__(self) -> None:
        self.show_fps = True
        self.show_collision_boxes = True
        self.key_state: dict[str, bool] = dict.fromkeys(TRACKED_KEYS, False)
        self.mario_state_name = ""
        self.mario_grounded = False

    def _draw_text(self, sprite_batch: Any, font: Any, text: str, position: Vector2) -> None:
        font.draw_string(sprite_batch, text, position, WHITE, 0.0, Vector2(0, 0), _TEXT_SCALE)

    def draw_fps_counter(self, sprite_batch: Any, font: Any, fps: int) -> bool:
        if not self.show_fps:
            return False
        self._draw_text(sprite_batch, font, f"fps {fps}", Vector2(10, 10))
        return True

    def input_text(self) -> str:
        """One ``<key> down`` or ``<key> up`` line per tracked key."""
        return "".join(
            f"{key} {'down' if self.key_state.get(key, False) else 'up'}\n"
            for key in TRACKED_KEYS
        )

    def draw_input(self, sprite_batch: Any, font: Any) -> bool:
        if not self.show_fps:
            return False
        self._draw_text(sprite_batch, font, self.input_text(), Vector2(10, 30))
        return True

    def mario_state_text(self) -> str:
        grounded = "yes" if self.mario_grounded else "no"
        return f"grounded {grounded}\nstate {self.mario_state_name}"

    def draw_mario_state(self, sprite_batch: Any, font: Any) -> bool:
        if not self.show_fps:
            return False
        self._draw_text(sprite_batch, font, self.mario_state_text(), Vector2(10, 150))
        return True

    def update_input(self, keyboard_state: Mapping[str, bool]) -> None:
        """Record which tracked keys are held, from a mapping of key letter to state."""
        self.key_state = {key: bool(keyboard_state.get(key, False)) for key in TRACKED_KEYS}

    def update_mario_state(self, mario: PlayerState | None) -> None:
        if mario is None:
            return
        self.mario_state_name = mario.current_state_name
        self.mario_grounded = mario.grounded

    def draw_line(
        self, primitive_batch: Any, start: Vector2, end: Vector2, color: Color = WHITE
    ) -> bool:
        if not self.show_collision_boxes:
            return False
        primitive_batch.draw_line((start, color), (end, color))
        return True

    def _outline(self, primitive_batch: Any, corners: tuple[Vector2, ...], color: Color) -> None:
        top_left, top_right, bottom_right, bottom_left = ((c, color) for c in corners)
        primitive_batch.draw_line(top_left, top_right)
        primitive_batch.draw_line(top_right, bottom_right)
        primitive_batch.draw_line(bottom_right, bottom_left)
        primitive_batch.draw_line(bottom_left, top_left)

    @staticmethod
    def _centered_corners(position: Vector2, size: Vector2) -> tuple[Vector2, ...]:
        half_w, half_h = size.x / 2, size.y / 2
        return (
            position + Vector2(-half_w, -half_h),
            position + Vector2(half_w, -half_h),
            position + Vector2(half_w, half_h),
            position + Vector2(-half_w, half_h),
        )

    @staticmethod
    def _rect_corners(rect: Rect) -> tuple[Vector2, ...]:
        left, top = float(rect.left), float(rect.top)
        right, bottom = float(rect.right), float(rect.bottom)
        return (
            Vector2(left, top),
            Vector2(right, top),
            Vector2(right, bottom),
            Vector2(left, bottom),
        )

    def draw_bounding_box(
        self, primitive_batch: Any, position: Vector2, size: Vector2, color: Color = WHITE
    ) -> bool:
        """Outline a box centred on ``position``."""
        if not self.show_collision_boxes:
            return False
        self._outline(primitive_batch, self._centered_corners(position, size), color)
        return True

    def draw_rect_outline(self, primitive_batch: Any, rect: Rect, color: Color = WHITE) -> bool:
        if not self.show_collision_boxes:
            return False
        self._outline(primitive_batch, self._rect_corners(rect), color)
        return True

    def draw_quad(
        self, primitive_batch: Any, position: Vector2, size: Vector2, color: Color = WHITE
    ) -> bool:
        """Fill a box centred on ``position``."""
        if not self.show_collision_boxes:
            return False
        primitive_batch.draw_quad(*((c, color) for c in self._centered_corners(position, size)))
        return True

    def draw_rect_quad(self, primitive_batch: Any, rect: Rect, color: Color = WHITE) -> bool:
        if not self.show_collision_boxes:
            return False
        primitive_batch.draw_quad(*((c, color) for c in self._rect_corners(rect)))
        return True

    def toggle_fps_counter(self) -> None:
        self.show_fps = not self.show_fps

    def toggle_collision_box(self) -> None:
        self.show_collision_boxes = not self.show_collision_boxes