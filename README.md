# marioworld

The engine core of a 2D side-scrolling platformer in plain Python, with no
third-party dependencies. Rendering is left abstract: anything that draws
takes batch or font objects from the caller.

## Modules

- `marioworld.geometry`: the immutable `Vector2` (with `length()`), the edge
  rectangle `Rect` (`width`, `height`, `intersection()`), the corner-and-size
  `Rectangle` (`intersects()`, `from_rect()`, `to_rect()`), the enums `Axis`
  and `InteractionPointType`, the records `RayHit`, `CollisionResult`,
  `DebugCollisionInfo`, `RaycastHit` and `RaycastResult`, and
  `ray_vs_rect(origin, end, rect)`. That function returns a `RayHit` holding the
  contact point, the normal and the contact time, or `None` when the ray misses.
- `marioworld.camera`: a row-vector 4x4 `Matrix` (`identity`, `scale`,
  `translation`, `orthographic_off_center`, composition with `a @ b`,
  `transform_point`) and a `Camera`. The camera fits the game view into any
  window size with letterboxing or pillarboxing (`game_view_rect`,
  `screen_transform_matrix`). It keeps its position inside the world bounds
  through `set_position`, while `move` shifts it without clamping. It also
  keeps `game_view_matrix`, `debug_view_matrix` and `debug_projection_matrix`
  up to date.
- `marioworld.animator`: `AnimationSequence`, `SpriteEffects` and `Animator`.
  An animator takes frames from a sprite sheet by name, using the sheet's
  `find(name)` and `draw(...)`. It plays one animation at a time, looping or
  running once. The frame time can scale with velocity, clamped between a
  minimum and a maximum. The animator also offers mirroring through
  `flip_horizontal`, `flip_vertical` and `set_direction`, the controls `play`,
  `pause`, `stop` and `reset`, and the checks `is_finished` and `anim_id in
  animator`.
- `marioworld.collision_component`: `CollisionComponent`, a box centred on its
  owner's position. It exposes `rect` and `rectangle` and can carry out a timed
  `push(distance, span)`, which advances on each `update(dt)`.
- `marioworld.collision`: `Collision`, a uniform spatial grid used for the broad
  phase. It offers `add_entity`, `update_entity`, `remove_entity` and
  `potential_collisions`. For the narrow phase it uses swept AABB or
  interaction-point ray casts (`check_collision`), one axis at a time. It also
  provides `process_collisions`, `resolve_overlaps`, `ground_check` and
  `render_debug`. Entities are duck-typed: they need `position`, `size`,
  `velocity`, `collision_component`, the flags `is_static`, `is_active`,
  `is_collidable`, `uses_interaction_points`, `resolves_overlaps` and
  `blocks_overlaps`, the method `interaction_points()`, and the callbacks
  `on_collision`, `on_top_head_collision`, `on_foot_collision`,
  `on_left_side_collision`, `on_right_side_collision` and `on_no_collision`.
- `marioworld.debug_overlay`: `DebugOverlay`, which draws the FPS counter, the
  state of the keys w a s d j k i, the player's state, and lines, outlines and
  quads. Text drawing is switched on and off with `toggle_fps_counter`, and
  geometry drawing with `toggle_collision_box`.
- `marioworld.asset_ids`: numeric ids for entities, animations and sprites.
- `marioworld.debug_log`: `log(label, value)`. It writes `[label] value` to
  the `marioworld` logger at debug level and returns that line. An integer
  label is read as a severity code: `LOG_INFO`, `LOG_WARN` or `LOG_ERROR`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from marioworld.camera import Camera
from marioworld.geometry import Rectangle, Vector2, ray_vs_rect

camera = Camera(256, 240)
camera.set_world_size(2048, 480)
camera.set_position(Vector2(5000, -20), False)
print(camera.position)           # Vector2(x=1792.0, y=0.0)

hit = ray_vs_rect(Vector2(0, 5), Vector2(20, 5), Rectangle(10, 0, 10, 10))
print(hit.contact_time, hit.contact_normal)   # 0.5 Vector2(x=-1, y=0)
```

## What it does not include

This package is a set of engine parts, not a playable game. It has no player,
enemy or block entities, no level loading, no sprite sheet or texture loading,
no window, renderer or input handling, no game loop, and no command to run.
You supply the entities, the sprite sheet and the drawing backend.