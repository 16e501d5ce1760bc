"""Spatial-grid broad phase and swept narrow phase collision handling."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, ClassVar, Iterable, Protocol

from .collision_component import CollisionComponent, InteractionPoint
from .debug_log import log
from .debug_overlay import RED, DebugOverlay
from .geometry import (
    DEBUG_COLLISION_TTL,
    Axis,
    CollisionResult,
    DebugCollisionInfo,
    InteractionPointType,
    Rect,
    Rectangle,
    RayHit,
    Vector2,
    ray_vs_rect,
)

Cell = tuple[int, int]

_GRID_COLOR = (0.0, 0.0, 0.0, 0.8)

_POINT_HANDLERS = {
    InteractionPointType.TOP_HEAD: "on_top_head_collision",
    InteractionPointType.LEFT_FOOT: "on_foot_collision",
    InteractionPointType.RIGHT_FOOT: "on_foot_collision",
    InteractionPointType.LEFT_UPPER: "on_left_side_collision",
    InteractionPointType.LEFT_LOWER: "on_left_side_collision",
    InteractionPointType.RIGHT_UPPER: "on_right_side_collision",
    InteractionPointType.RIGHT_LOWER: "on_right_side_collision",
}


class Collidable(Protocol):
    """What the collision system needs from an entity.

    ``resolves_overlaps`` marks the entity whose overlaps with solid things are
    pushed apart (the player); ``blocks_overlaps`` is False for things that
    never push it out (enemies and non-solid blocks).
    """

    position: Vector2
    size: Vector2
    velocity: Vector2
    collision_component: CollisionComponent | None
    is_static: bool
    is_active: bool
    is_collidable: bool
    uses_interaction_points: bool
    resolves_overlaps: bool
    blocks_overlaps: bool

    def interaction_points(self) -> list[InteractionPoint]: ...
    def on_collision(self, result: CollisionResult) -> None: ...
    def on_top_head_collision(self, result: CollisionResult) -> None: ...
    def on_foot_collision(self, result: CollisionResult) -> None: ...
    def on_left_side_collision(self, result: CollisionResult) -> None: ...
    def on_right_side_collision(self, result: CollisionResult) -> None: ...
    def on_no_collision(self, dt: float, axis: Axis) -> None: ...


def _along(vector: Vector2, axis: Axis) -> Vector2:
    return Vector2(vector.x, 0.0) if axis is Axis.X else Vector2(0.0, vector.y)


def _center(rect: Rect) -> Vector2:
    return Vector2((rect.left + rect.right) / 2.0, (rect.top + rect.bottom) / 2.0)


class Collision:
    """Buckets entities into grid cells and resolves collisions between them."""

    _instance: ClassVar[Collision | None] = None

    def __init__(self, world_width: int, world_height: int, cell_size: int = 313) -> None:
        if cell_size <= 0:
            raise ValueError("cell size must be positive")
        if world_width <= 0 or world_height <= 0:
            raise ValueError("world dimensions must be positive")
        self.world_width = world_width
        self.world_height = world_height
        self.cell_size = cell_size
        self.grid_width = (world_width + cell_size - 1) // cell_size
        self.grid_height = (world_height + cell_size - 1) // cell_size
        self.grid: list[list[list[Any]]] = [
            [[] for _ in range(self.grid_height)] for _ in range(self.grid_width)
        ]
        self._entity_cells: dict[Any, list[Cell]] = {}
        self.debug_collisions: list[DebugCollisionInfo] = []
        Collision._instance = self
        log(
            "Collision",
            f"Collision system initialized with grid size: {self.grid_width}x{self.grid_height}",
        )

    @classmethod
    def instance(cls) -> Collision | None:
        """The most recently created collision system."""
        return cls._instance

    def cell_coords(self, position: Vector2) -> Cell:
        """The grid cell holding ``position``, clamped to the grid."""
        cell_x = int(position.x) // self.cell_size
        cell_y = int(position.y) // self.cell_size
        return (
            max(0, min(cell_x, self.grid_width - 1)),
            max(0, min(cell_y, self.grid_height - 1)),
        )

    def entity_cells(self, entity: Collidable, dt: float) -> list[Cell]:
        """Cells covered by the entity's box swept over its movement in ``dt``."""
        box = entity.collision_component.rect
        step = entity.velocity * dt
        dx, dy = int(step.x), int(step.y)
        left = min(box.left, box.left + dx)
        right = max(box.right, box.right + dx)
        top = min(box.top, box.top + dy)
        bottom = max(box.bottom, box.bottom + dy)
        first_x, first_y = self.cell_coords(Vector2(float(left), float(top)))
        last_x, last_y = self.cell_coords(Vector2(float(right), float(bottom)))
        return [
            (x, y)
            for x in range(first_x, last_x + 1)
            for y in range(first_y, last_y + 1)
        ]

    def add_entity(self, entity: Collidable | None, dt: float) -> None:
        if entity is None:
            return
        cells = self.entity_cells(entity, dt)
        for x, y in cells:
            self.grid[x][y].append(entity)
        self._entity_cells[entity] = cells

    def remove_entity(self, entity: Collidable | None) -> None:
        if entity is None or entity not in self._entity_cells:
            return
        for x, y in self._entity_cells.pop(entity):
            self.grid[x][y] = [other for other in self.grid[x][y] if other is not entity]

    def update_entity(self, entity: Collidable, dt: float) -> None:
        """Re-file the entity under the cells of its current position."""
        self.remove_entity(entity)
        self.add_entity(entity, dt)

    def clear(self) -> None:
        for column in self.grid:
            for cell in column:
                cell.clear()
        self._entity_cells.clear()

    def potential_collisions(self, entity: Collidable) -> list[Collidable]:
        """Other entities sharing a cell with ``entity``, each listed once."""
        cells = self._entity_cells.get(entity)
        if cells is None:
            return []
        seen: set[int] = set()
        found: list[Collidable] = []
        for x, y in cells:
            for other in self.grid[x][y]:
                if other is not entity and id(other) not in seen:
                    seen.add(id(other))
                    found.append(other)
        return found

    def check_collision(
        self, moving_entity: Collidable, other: Collidable, dt: float, axis: Axis
    ) -> CollisionResult:
        """Narrow phase test of ``moving_entity`` against ``other`` along one axis."""
        if moving_entity.uses_interaction_points:
            return self._interaction_point_collision(moving_entity, other, dt, axis)
        result = CollisionResult()
        hit = self._ray_entity_vs_entity(moving_entity, other, dt, axis)
        if hit is not None:
            result.collided = True
            result.collided_with = other
            result.contact_point = hit.contact_point
            result.contact_normal = hit.contact_normal
            result.contact_time = hit.contact_time
        return result

    @staticmethod
    def _ray_entity_vs_entity(
        moving: Collidable, target: Collidable, dt: float, axis: Axis
    ) -> RayHit | None:
        velocity = moving.velocity
        if velocity.x == 0 and velocity.y == 0:
            return None
        velocity = _along(velocity, axis)
        size, target_size, target_pos = moving.size, target.size, target.position
        expanded = Rectangle(
            int(target_pos.x - math.floor(size.x / 2) - math.floor(target_size.x / 2)),
            int(target_pos.y - math.floor(size.y / 2) - math.floor(target_size.y / 2)),
            int(target_size.x + size.x),
            int(target_size.y + size.y),
        )
        origin = moving.position
        hit = ray_vs_rect(origin, origin + velocity * dt, expanded)
        if hit is not None and 0.0 <= hit.contact_time < 1.0:
            return hit
        return None

    @staticmethod
    def _interaction_point_collision(
        entity: Collidable, other: Collidable, dt: float, axis: Axis
    ) -> CollisionResult:
        result = CollisionResult()
        relative = entity.velocity * dt
        if not other.is_static:
            relative = relative - other.velocity * dt
        relative = _along(relative, axis)
        if relative.x == 0 and relative.y == 0:
            return result
        points = entity.interaction_points()
        if not points:
            return result
        target = Rectangle.from_rect(other.collision_component.rect)
        for point_type, local_point in points:
            start = local_point + entity.position
            hit = ray_vs_rect(start, start + relative, target)
            if hit is not None and 0.0 <= hit.contact_time < 1.0:
                result.collided = True
                result.collided_with = other
                result.point_type = point_type
                result.contact_normal = hit.contact_normal
                result.contact_point = hit.contact_point
                result.contact_time = hit.contact_time
        return result

    def _resolve_collision(
        self, entity: Collidable, result: CollisionResult, dt: float, axis: Axis
    ) -> None:
        if not result.collided:
            return
        self.debug_collisions.append(
            DebugCollisionInfo(result.contact_point, result.contact_normal, DEBUG_COLLISION_TTL)
        )
        if entity.uses_interaction_points:
            handler = _POINT_HANDLERS.get(result.point_type)
            if handler is not None:
                getattr(entity, handler)(result)
            entity.position = entity.position + _along(entity.velocity * dt, axis)
        else:
            entity.on_collision(result)

        other = result.collided_with
        if other.is_active:
            other.on_collision(
                replace(result, collided_with=entity, contact_normal=-result.contact_normal)
            )

    def _earliest(
        self, entity: Collidable, candidates: Iterable[Collidable], dt: float, axis: Axis
    ) -> CollisionResult:
        earliest = CollisionResult()
        for other in candidates:
            if not other.is_active or not other.is_collidable:
                continue
            result = self.check_collision(entity, other, dt, axis)
            if result.collided and result.contact_time < earliest.contact_time:
                earliest = result
        return earliest

    def process_collisions(self, dt: float) -> None:
        """Resolve one frame of collisions for every moving, active, collidable entity."""
        self.update_debug_info(dt)
        for entity in list(self._entity_cells):
            if entity.is_static or not entity.is_active or not entity.is_collidable:
                continue
            candidates = self.potential_collisions(entity)
            self.resolve_overlaps(entity, candidates)
            for axis in (Axis.X, Axis.Y):
                earliest = self._earliest(entity, candidates, dt, axis)
                if earliest.collided:
                    self._resolve_collision(entity, earliest, dt, axis)
                else:
                    entity.on_no_collision(dt, axis)

    def resolve_overlaps(
        self, entity: Collidable, potential_collisions: Iterable[Collidable | None]
    ) -> None:
        """Push an overlap-resolving entity out of solid things overlapping its lower half."""
        if entity.is_static or not entity.is_active or not entity.is_collidable:
            return
        if not entity.resolves_overlaps:
            return
        for other in potential_collisions:
            if other is None or not other.is_active or not other.is_collidable:
                continue
            if not other.blocks_overlaps:
                continue
            own_box, other_box = entity.collision_component, other.collision_component
            if own_box is None or other_box is None:
                continue
            entity_rect, other_rect = own_box.rect, other_box.rect
            overlap = entity_rect.intersection(other_rect)
            if overlap is None:
                continue
            midpoint_y = (entity_rect.top + entity_rect.bottom) / 2.0
            if not (overlap.top > midpoint_y or overlap.bottom > midpoint_y):
                continue
            if overlap.width > 1 and overlap.height > 1:
                self._push_apart(entity, other, entity_rect, other_rect, overlap)

    def _push_apart(
        self,
        entity: Collidable,
        other: Collidable,
        entity_rect: Rect,
        other_rect: Rect,
        overlap: Rect,
    ) -> None:
        velocity = entity.velocity
        entity_center, other_center = _center(entity_rect), _center(other_rect)
        if overlap.width <= overlap.height:
            normal = Vector2(-1, 0) if entity_center.x < other_center.x else Vector2(1, 0)
            amount = float(overlap.width)
            stopped = Vector2(0.0, velocity.y)
        else:
            normal = Vector2(0, -1) if entity_center.y < other_center.y else Vector2(0, 1)
            amount = float(overlap.height)
            stopped = Vector2(velocity.x, 0.0)

        if other.is_static:
            entity.position = entity.position + normal * amount
            entity.velocity = stopped
        else:
            entity.position = entity.position + normal * (amount / 2.0)
            entity.velocity = stopped
            other.position = other.position - normal * (amount / 2.0)
            other.velocity = stopped

        self.debug_collisions.append(
            DebugCollisionInfo(
                Vector2(overlap.left + overlap.width / 2.0, overlap.top + overlap.height / 2.0),
                normal,
                DEBUG_COLLISION_TTL,
            )
        )

    def update_debug_info(self, dt: float) -> None:
        """Age the recorded contacts and drop the expired ones."""
        for info in self.debug_collisions:
            info.time_to_live -= dt
        self.debug_collisions = [info for info in self.debug_collisions if info.time_to_live > 0]

    def ground_check(self, entity: Collidable, dt: float = 0.0) -> bool:
        """True if a static, active, collidable entity lies just below ``entity``."""
        position = entity.position
        ray_length = max(abs(entity.velocity.y * dt), entity.size.y / 2 + 1.0)
        ray_end = position + Vector2(0.0, ray_length)
        for x, y in self.entity_cells(entity, dt):
            for other in self.grid[x][y]:
                if other is entity or not other.is_static:
                    continue
                if not other.is_active or not other.is_collidable:
                    continue
                target = other.collision_component.rectangle
                if position.y > target.y:
                    continue
                hit = ray_vs_rect(position, ray_end, target)
                if hit is not None and hit.contact_time < 1.0:
                    return True
        return False

    def render_debug(self, primitive_batch: Any, overlay: DebugOverlay) -> bool:
        """Outline the cells of moving entities and draw recent contact normals."""
        if primitive_batch is None:
            return False
        size = self.cell_size
        for entity, cells in self._entity_cells.items():
            if entity.is_active and entity.is_collidable and not entity.is_static:
                for x, y in cells:
                    cell_rect = Rect(x * size, y * size, x * size + size, y * size + size)
                    overlay.draw_rect_outline(primitive_batch, cell_rect, _GRID_COLOR)
        for info in self.debug_collisions:
            overlay.draw_line(
                primitive_batch, info.position, info.position + info.normal * 10.0, RED
            )
            overlay.draw_quad(primitive_batch, info.position, Vector2(2.0, 2.0), RED)
        return True