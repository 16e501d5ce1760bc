import pytest

from marioworld.collision import Collision
from marioworld.collision_component import CollisionComponent
from marioworld.debug_overlay import DebugOverlay
from marioworld.geometry import (
    DEBUG_COLLISION_TTL,
    Axis,
    InteractionPointType,
    Vector2,
)


class FakeEntity:
    def __init__(
        self,
        position,
        size,
        velocity=Vector2(0, 0),
        *,
        static=False,
        active=True,
        collidable=True,
        points=(),
        resolves_overlaps=False,
        blocks_overlaps=True,
    ):
        self.collision_component = CollisionComponent(self)
        self.collision_component.position = position
        self.collision_component.size = size
        self.velocity = velocity
        self.is_static = static
        self.is_active = active
        self.is_collidable = collidable
        self.points = list(points)
        self.resolves_overlaps = resolves_overlaps
        self.blocks_overlaps = blocks_overlaps
        self.events = []

    @property
    def position(self):
        return self.collision_component.position

    @position.setter
    def position(self, value):
        self.collision_component.position = value

    @property
    def size(self):
        return self.collision_component.size

    @property
    def uses_interaction_points(self):
        return bool(self.points)

    def interaction_points(self):
        return list(self.points)

    def on_collision(self, result):
        self.events.append(("collision", result))

    def on_top_head_collision(self, result):
        self.events.append(("head", result))

    def on_foot_collision(self, result):
        self.events.append(("foot", result))

    def on_left_side_collision(self, result):
        self.events.append(("left", result))

    def on_right_side_collision(self, result):
        self.events.append(("right", result))

    def on_no_collision(self, dt, axis):
        self.events.append(("none", axis))


class RecordingBatch:
    def __init__(self):
        self.lines = []
        self.quads = []

    def draw_line(self, v1, v2):
        self.lines.append((v1, v2))

    def draw_quad(self, v1, v2, v3, v4):
        self.quads.append((v1, v2, v3, v4))


@pytest.fixture
def collision():
    return Collision(1000, 1000, 100)


def runner_and_wall():
    runner = FakeEntity(Vector2(50, 50), Vector2(10, 10), Vector2(100, 0))
    wall = FakeEntity(Vector2(80, 50), Vector2(10, 10), static=True)
    return runner, wall


def test_grid_dimensions(collision):
    assert len(collision.grid) == 10
    assert all(len(column) == 10 for column in collision.grid)


def test_invalid_cell_size_raises():
    with pytest.raises(ValueError):
        Collision(100, 100, 0)


def test_instance_is_latest(collision):
    assert Collision.instance() is collision
    newer = Collision(200, 200)
    assert Collision.instance() is newer


def test_cell_coords_clamped(collision):
    assert collision.cell_coords(Vector2(-500, -500)) == (0, 0)
    far = collision.cell_coords(Vector2(1e6, 1e6))
    assert far == (len(collision.grid) - 1, len(collision.grid[0]) - 1)


def test_added_entity_is_in_every_covered_cell(collision):
    entity = FakeEntity(Vector2(100, 100), Vector2(20, 20))
    collision.add_entity(entity, 0.0)
    cells = collision.entity_cells(entity, 0.0)
    assert len(cells) > 1
    for x, y in cells:
        assert entity in collision.grid[x][y]
    occupied = {
        (x, y)
        for x, column in enumerate(collision.grid)
        for y, cell in enumerate(column)
        if entity in cell
    }
    assert occupied == set(cells)


def test_potential_collisions_and_removal(collision):
    a = FakeEntity(Vector2(50, 50), Vector2(10, 10))
    b = FakeEntity(Vector2(60, 50), Vector2(10, 10))
    far = FakeEntity(Vector2(950, 950), Vector2(10, 10))
    for entity in (a, b, far):
        collision.add_entity(entity, 0.0)
    assert collision.potential_collisions(a) == [b]
    collision.remove_entity(b)
    assert collision.potential_collisions(a) == []
    assert all(b not in cell for column in collision.grid for cell in column)


def test_unregistered_entity_has_no_candidates(collision):
    assert collision.potential_collisions(FakeEntity(Vector2(5, 5), Vector2(2, 2))) == []


def test_potential_collisions_lists_each_once(collision):
    big = FakeEntity(Vector2(100, 100), Vector2(40, 40))
    other = FakeEntity(Vector2(100, 100), Vector2(40, 40))
    collision.add_entity(big, 0.0)
    collision.add_entity(other, 0.0)
    assert collision.potential_collisions(big) == [other]


def test_update_entity_moves_to_new_cells(collision):
    entity = FakeEntity(Vector2(50, 50), Vector2(10, 10))
    collision.add_entity(entity, 0.0)
    entity.position = Vector2(950, 950)
    collision.update_entity(entity, 0.0)
    assert entity not in collision.grid[0][0]
    x, y = collision.cell_coords(entity.position)
    assert entity in collision.grid[x][y]


def test_clear_empties_grid(collision):
    entity = FakeEntity(Vector2(50, 50), Vector2(10, 10))
    collision.add_entity(entity, 0.0)
    collision.clear()
    assert all(not cell for column in collision.grid for cell in column)
    assert collision.potential_collisions(entity) == []


def test_swept_collision_along_x(collision):
    runner, wall = runner_and_wall()
    result = collision.check_collision(runner, wall, 1.0, Axis.X)
    assert result.collided is True
    assert result.collided_with is wall
    assert result.contact_normal == Vector2(-1, 0)
    assert result.contact_time == pytest.approx(0.2)


def test_swept_collision_ignores_other_axis(collision):
    runner, wall = runner_and_wall()
    assert collision.check_collision(runner, wall, 1.0, Axis.Y).collided is False


def test_resting_entity_does_not_collide(collision):
    resting = FakeEntity(Vector2(50, 50), Vector2(10, 10))
    _, wall = runner_and_wall()
    assert collision.check_collision(resting, wall, 1.0, Axis.X).collided is False


def walker_and_floor():
    walker = FakeEntity(
        Vector2(50, 40),
        Vector2(10, 10),
        Vector2(0, 100),
        points=[(InteractionPointType.RIGHT_FOOT, Vector2(3, 5))],
    )
    floor = FakeEntity(Vector2(50, 60), Vector2(40, 10), static=True)
    return walker, floor


def test_interaction_point_collision(collision):
    walker, floor = walker_and_floor()
    result = collision.check_collision(walker, floor, 0.2, Axis.Y)
    assert result.collided is True
    assert result.point_type is InteractionPointType.RIGHT_FOOT
    assert result.contact_normal == Vector2(0, -1)
    assert collision.check_collision(walker, floor, 0.2, Axis.X).collided is False


def test_process_collisions_notifies_both_sides(collision):
    runner, wall = runner_and_wall()
    collision.add_entity(runner, 1.0)
    collision.add_entity(wall, 1.0)
    collision.process_collisions(1.0)

    kinds = [kind for kind, _ in runner.events]
    assert kinds == ["collision", "none"]
    assert runner.events[1][1] is Axis.Y
    hit = runner.events[0][1]
    assert hit.collided_with is wall

    assert len(wall.events) == 1
    echo = wall.events[0][1]
    assert echo.collided_with is runner
    assert echo.contact_normal == -hit.contact_normal
    assert len(collision.debug_collisions) == 1


def test_process_collisions_skips_inactive_targets(collision):
    runner, wall = runner_and_wall()
    wall.is_active = False
    collision.add_entity(runner, 1.0)
    collision.add_entity(wall, 1.0)
    collision.process_collisions(1.0)
    assert runner.events == [("none", Axis.X), ("none", Axis.Y)]
    assert wall.events == []


def test_process_collisions_with_interaction_points(collision):
    walker, floor = walker_and_floor()
    dt = 0.2
    collision.add_entity(walker, dt)
    collision.add_entity(floor, dt)
    start = walker.position
    collision.process_collisions(dt)

    assert [kind for kind, _ in walker.events] == ["none", "foot"]
    assert walker.position.x == start.x
    assert walker.position.y == pytest.approx(start.y + walker.velocity.y * dt)
    assert floor.events[0][1].collided_with is walker


def test_resolve_overlaps_pushes_out_sideways(collision):
    player = FakeEntity(Vector2(10, 10), Vector2(10, 10), Vector2(3, 4), resolves_overlaps=True)
    block = FakeEntity(Vector2(18, 12), Vector2(10, 10), static=True)
    collision.resolve_overlaps(player, [block])
    assert player.position.x < 10
    assert player.position.y == 10
    assert player.velocity == Vector2(0, 4)
    assert player.collision_component.rect.intersection(block.collision_component.rect) is None
    assert len(collision.debug_collisions) == 1


def test_resolve_overlaps_pushes_up(collision):
    player = FakeEntity(Vector2(10, 10), Vector2(10, 10), Vector2(3, 4), resolves_overlaps=True)
    floor = FakeEntity(Vector2(10, 18), Vector2(20, 10), static=True)
    collision.resolve_overlaps(player, [floor])
    assert player.position.y < 10
    assert player.velocity == Vector2(3, 0)
    assert player.collision_component.rect.intersection(floor.collision_component.rect) is None


def test_resolve_overlaps_splits_between_moving_entities(collision):
    player = FakeEntity(Vector2(10, 10), Vector2(10, 10), Vector2(3, 4), resolves_overlaps=True)
    crate = FakeEntity(Vector2(18, 12), Vector2(10, 10), Vector2(7, 7))
    total = player.position.x + crate.position.x
    collision.resolve_overlaps(player, [crate])
    assert player.position.x < 10
    assert crate.position.x > 18
    assert player.position.x + crate.position.x == pytest.approx(total)
    assert crate.velocity == Vector2(0, 4)


@pytest.mark.parametrize(
    "player_kwargs, block_kwargs, block_position",
    [
        ({"resolves_overlaps": False}, {}, Vector2(18, 12)),
        ({"resolves_overlaps": True}, {"blocks_overlaps": False}, Vector2(18, 12)),
        ({"resolves_overlaps": True}, {"collidable": False}, Vector2(18, 12)),
        ({"resolves_overlaps": True}, {}, Vector2(10, 2)),
    ],
)
def test_resolve_overlaps_leaves_entity_alone(collision, player_kwargs, block_kwargs, block_position):
    player = FakeEntity(Vector2(10, 10), Vector2(10, 10), Vector2(3, 4), **player_kwargs)
    block = FakeEntity(block_position, Vector2(20, 10), static=True, **block_kwargs)
    collision.resolve_overlaps(player, [block])
    assert player.position == Vector2(10, 10)
    assert player.velocity == Vector2(3, 4)
    assert collision.debug_collisions == []


def test_update_debug_info_expires_entries(collision):
    player = FakeEntity(Vector2(10, 10), Vector2(10, 10), resolves_overlaps=True)
    block = FakeEntity(Vector2(18, 12), Vector2(10, 10), static=True)
    collision.resolve_overlaps(player, [block])
    collision.update_debug_info(DEBUG_COLLISION_TTL / 2)
    assert len(collision.debug_collisions) == 1
    assert collision.debug_collisions[0].time_to_live == pytest.approx(DEBUG_COLLISION_TTL / 2)
    collision.update_debug_info(DEBUG_COLLISION_TTL / 2)
    assert collision.debug_collisions == []


def test_ground_check_finds_floor_below(collision):
    walker = FakeEntity(Vector2(50, 40), Vector2(10, 10))
    floor = FakeEntity(Vector2(50, 50), Vector2(100, 10), static=True)
    collision.add_entity(walker, 0.0)
    collision.add_entity(floor, 0.0)
    assert collision.ground_check(walker) is True


def test_ground_check_ignores_distant_and_moving_things(collision):
    walker = FakeEntity(Vector2(50, 40), Vector2(10, 10))
    distant = FakeEntity(Vector2(50, 80), Vector2(100, 10), static=True)
    moving = FakeEntity(Vector2(50, 50), Vector2(100, 10))
    above = FakeEntity(Vector2(50, 20), Vector2(100, 10), static=True)
    for entity in (walker, distant, moving, above):
        collision.add_entity(entity, 0.0)
    assert collision.ground_check(walker) is False


def test_render_debug_draws_cells_and_contacts(collision):
    runner, wall = runner_and_wall()
    collision.add_entity(runner, 1.0)
    collision.add_entity(wall, 1.0)
    collision.process_collisions(1.0)
    batch = RecordingBatch()
    assert collision.render_debug(batch, DebugOverlay()) is True
    cells = collision.entity_cells(runner, 1.0)
    assert len(batch.lines) == 4 * len(cells) + len(collision.debug_collisions)
    assert len(batch.quads) == len(collision.debug_collisions)


def test_render_debug_without_batch(collision):
    assert collision.render_debug(None, DebugOverlay()) is False