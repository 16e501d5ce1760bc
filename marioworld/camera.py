"""A 2D camera that scrolls the world and letterboxes the game view into the window."""

from __future__ import annotations

from dataclasses import dataclass

from .debug_log import log
from .geometry import Rect, Vector2

_Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Matrix:
    """A 4x4 row-major matrix used with row vectors (``v @ A @ B`` applies A, then B)."""

    rows: tuple[_Row, _Row, _Row, _Row]

    @classmethod
    def identity(cls) -> Matrix:
        return cls.scale(1.0, 1.0, 1.0)

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> Matrix:
        return cls((
            (x, 0.0, 0.0, 0.0),
            (0.0, y, 0.0, 0.0),
            (0.0, 0.0, z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix:
        return cls((
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (x, y, z, 1.0),
        ))

    @classmethod
    def orthographic_off_center(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Matrix:
        """Right-handed orthographic projection of the given box onto clip space."""
        if left == right or bottom == top or near == far:
            raise ValueError("orthographic volume must have non-zero extent")
        depth = 1.0 / (near - far)
        return cls((
            (2.0 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2.0 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, depth, 0.0),
            ((left + right) / (left - right), (top + bottom) / (bottom - top), near * depth, 1.0),
        ))

    def __matmul__(self, other: Matrix) -> Matrix:
        columns = list(zip(*other.rows))
        return Matrix(tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.rows
        ))

    def transform_point(self, point: Vector2) -> Vector2:
        """Transform a 2D point (z = 0, w = 1) and divide by the resulting w."""
        vector = (point.x, point.y, 0.0, 1.0)
        x, y, _, w = (sum(v * m for v, m in zip(vector, column)) for column in zip(*self.rows))
        if w != 1.0 and w != 0.0:
            x, y = x / w, y / w
        return Vector2(x, y)


class Camera:
    """Tracks the scroll position and the matrices that map the world to the screen.

    ``game_view_matrix`` maps world coordinates to game-view coordinates,
    ``screen_transform_matrix`` scales and centres the game view inside the
    window, ``debug_view_matrix`` is their product and
    ``debug_projection_matrix`` maps window pixels to clip space.
    """

    def __init__(self, game_width: int, game_height: int) -> None:
        if game_width <= 0 or game_height <= 0:
            raise ValueError("game dimensions must be positive")
        self.game_width = game_width
        self.game_height = game_height
        self.window_width = game_width
        self.window_height = game_height
        self.world_width = game_width
        self.world_height = game_height
        self.position = Vector2(0.0, 0.0)
        self.game_view_matrix = Matrix.identity()
        self.screen_transform_matrix = Matrix.identity()
        self.debug_view_matrix = Matrix.identity()
        self.debug_projection_matrix = Matrix.identity()
        self.game_view_rect = Rect(0, 0, game_width, game_height)

        self.update_view_matrix()
        self.update_window_size_dependent_matrices(self.window_width, self.window_height)

    def update_window_size_dependent_matrices(self, window_width: int, window_height: int) -> None:
        """Fit the game view into the window, keeping its aspect ratio."""
        if window_width <= 0 or window_height <= 0:
            raise ValueError("window dimensions must be positive")
        self.window_width = window_width
        self.window_height = window_height

        width = float(window_width)
        height = float(window_height)
        game_aspect = self.game_width / self.game_height
        window_aspect = width / height

        if window_aspect > game_aspect:
            view_height = height
            view_width = view_height * game_aspect
            view_x, view_y = (width - view_width) / 2.0, 0.0
        else:
            view_width = width
            view_height = view_width / game_aspect
            view_x, view_y = 0.0, (height - view_height) / 2.0

        self.game_view_rect = Rect(
            int(view_x), int(view_y), int(view_x + view_width), int(view_y + view_height)
        )

        scale = view_width / self.game_width
        self.screen_transform_matrix = (
            Matrix.scale(scale, scale, 1.0) @ Matrix.translation(view_x, view_y, 0.0)
        )
        self.debug_projection_matrix = Matrix.orthographic_off_center(
            0.0, width, height, 0.0, 0.0, 1.0
        )
        self._update_debug_matrix()

        log("Camera", f"Scale: {scale:.6f}, Translation X: {view_x:.6f}, Translation Y: {view_y:.6f}")

    def update_view_matrix(self) -> None:
        """Rebuild the world-to-game-view matrix from the camera position."""
        self.game_view_matrix = Matrix.translation(-self.position.x, -self.position.y, 0.0)
        self._update_debug_matrix()

    def _update_debug_matrix(self) -> None:
        self.debug_view_matrix = self.game_view_matrix @ self.screen_transform_matrix

    def set_world_size(self, width: int, height: int) -> None:
        self.world_width = width
        self.world_height = height

    def _clamp_x(self, x: float) -> float:
        return max(0.0, min(x, float(self.world_width - self.game_width)))

    def _clamp_y(self, y: float) -> float:
        return max(0.0, min(y, float(self.world_height - self.game_height)))

    def set_position(self, position: Vector2, one_axis: bool = False) -> None:
        """Move the camera, keeping it inside the world.

        With ``one_axis`` only one coordinate is clamped: y when ``position.x``
        is zero, otherwise x.
        """
        x, y = position.x, position.y
        if one_axis:
            if position.x == 0:
                y = self._clamp_y(y)
            else:
                x = self._clamp_x(x)
        else:
            x = self._clamp_x(x)
            y = self._clamp_y(y)
        self.position = Vector2(x, y)
        self.update_view_matrix()

    def move(self, delta: Vector2) -> None:
        """Shift the camera by ``delta`` without clamping."""
        self.position = self.position + delta
        self.update_view_matrix()