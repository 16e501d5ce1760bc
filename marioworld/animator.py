"""Frame-based sprite animation driven by elapsed time and, optionally, velocity."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Protocol

from .geometry import Vector2

_WHITE = (1.0, 1.0, 1.0, 1.0)
_DEFAULT_DEPTH = 0.5


class SpriteEffects(enum.IntFlag):
    """Mirroring applied when a sprite is drawn."""

    NONE = 0
    FLIP_HORIZONTALLY = 1
    FLIP_VERTICALLY = 2


class SpriteSheet(Protocol):
    """What the animator needs from a sprite sheet."""

    def find(self, name: str) -> Any | None: ...

    def draw(
        self,
        batch: Any,
        frame: Any,
        position: Vector2,
        color: tuple[float, float, float, float],
        rotation: float,
        scale: Any,
        effects: SpriteEffects,
        depth: float,
    ) -> None: ...


@dataclass
class AnimationSequence:
    """The frames of one animation and how fast they play."""

    frames: list[Any] = field(default_factory=list)
    loop: bool = True
    base_time_per_frame: float = 0.1
    min_time_per_frame: float = 0.05
    max_time_per_frame: float = 0.2
    use_velocity_scaling: bool = False
    velocity_scale_factor: float = 1.0

    def time_per_frame(self, velocity: float) -> float:
        """Seconds each frame is shown at the given velocity."""
        if not self.use_velocity_scaling or velocity == 0.0:
            return self.base_time_per_frame
        denominator = abs(velocity) * self.velocity_scale_factor
        scaled = self.base_time_per_frame / denominator if denominator else math.inf
        return max(self.min_time_per_frame, min(scaled, self.max_time_per_frame))


class Animator:
    """Holds named animations for one sprite sheet and plays one of them at a time."""

    def __init__(self, sprite_sheet: SpriteSheet | None = None) -> None:
        self.sprite_sheet = sprite_sheet
        self._animations: dict[int, AnimationSequence] = {}
        self.current_animation: int | None = None
        self.current_frame = 0
        self._elapsed = 0.0
        self.paused = False
        self.sprite_effects = SpriteEffects.NONE
        self.scale = Vector2(1.0, 1.0)
        self.rotation = 0.0
        self.depth = _DEFAULT_DEPTH
        self._original_depth = _DEFAULT_DEPTH

    @property
    def animations(self) -> Mapping[int, AnimationSequence]:
        """Read-only view of the defined animations by id."""
        return MappingProxyType(self._animations)

    def __contains__(self, anim_id: object) -> bool:
        return anim_id in self._animations

    def define_animation(
        self,
        anim_id: int,
        frame_names: Iterable[str],
        loop: bool = True,
        base_time_per_frame: float = 0.1,
        use_velocity_scaling: bool = False,
        min_time_per_frame: float = 0.05,
        max_time_per_frame: float = 0.2,
        velocity_scale_factor: float = 1.0,
    ) -> AnimationSequence:
        """Define (or replace) an animation; frames missing from the sheet are skipped."""
        if self.sprite_sheet is None:
            raise ValueError("a sprite sheet must be set before defining animations")
        frames = [
            frame
            for frame in (self.sprite_sheet.find(name) for name in frame_names)
            if frame is not None
        ]
        sequence = AnimationSequence(
            frames=frames,
            loop=loop,
            base_time_per_frame=base_time_per_frame,
            min_time_per_frame=min_time_per_frame,
            max_time_per_frame=max_time_per_frame,
            use_velocity_scaling=use_velocity_scaling,
            velocity_scale_factor=velocity_scale_factor,
        )
        self._animations[anim_id] = sequence
        return sequence

    def set_animation(self, anim_id: int, reset: bool = False) -> None:
        """Switch to an animation; switching to the current one only matters with ``reset``."""
        if self.current_animation == anim_id and not reset:
            return
        self.current_animation = anim_id
        if reset:
            self.current_frame = 0
            self._elapsed = 0.0
            self.paused = False

    def _current_sequence(self) -> AnimationSequence | None:
        if self.current_animation is None or self.current_animation < 0:
            return None
        return self._animations.get(self.current_animation)

    def update(self, elapsed: float, velocity: float = 0.0) -> None:
        """Advance the animation by ``elapsed`` seconds, at most one frame per call."""
        if self.paused:
            return
        sequence = self._current_sequence()
        if sequence is None or not sequence.frames:
            return

        time_per_frame = sequence.time_per_frame(velocity)
        self._elapsed += elapsed
        if self._elapsed < time_per_frame:
            return

        self.current_frame += 1
        self._elapsed -= time_per_frame
        if self.current_frame >= len(sequence.frames):
            if sequence.loop:
                self.current_frame = 0
            else:
                self.current_frame = len(sequence.frames) - 1
                self.paused = True

    def draw(self, batch: Any, position: Vector2, depth: float = _DEFAULT_DEPTH) -> bool:
        """Draw the current frame; the default depth means the animator's own depth.

        Returns True if something was drawn.
        """
        if self.sprite_sheet is None:
            return False
        sequence = self._current_sequence()
        if sequence is None or not sequence.frames:
            return False
        if not 0 <= self.current_frame < len(sequence.frames):
            return False
        frame = sequence.frames[self.current_frame]
        self.sprite_sheet.draw(
            batch,
            frame,
            position,
            _WHITE,
            self.rotation,
            self.scale,
            self.sprite_effects,
            self.depth if depth == _DEFAULT_DEPTH else depth,
        )
        return True

    def draw_first_frame(
        self,
        batch: Any,
        anim_id: int,
        position: Vector2,
        depth: float = _DEFAULT_DEPTH,
        scale: float = 1.0,
    ) -> bool:
        """Draw the first frame of any defined animation. Returns True if drawn."""
        if self.sprite_sheet is None:
            return False
        sequence = self._animations.get(anim_id)
        if sequence is None or not sequence.frames:
            return False
        self.sprite_sheet.draw(
            batch,
            sequence.frames[0],
            position,
            _WHITE,
            self.rotation,
            scale,
            self.sprite_effects,
            depth,
        )
        return True

    def _set_effect(self, effect: SpriteEffects, enabled: bool) -> None:
        if enabled:
            self.sprite_effects |= effect
        else:
            self.sprite_effects &= ~effect

    @property
    def flip_horizontal(self) -> bool:
        return bool(self.sprite_effects & SpriteEffects.FLIP_HORIZONTALLY)

    @flip_horizontal.setter
    def flip_horizontal(self, flip: bool) -> None:
        self._set_effect(SpriteEffects.FLIP_HORIZONTALLY, flip)

    @property
    def flip_vertical(self) -> bool:
        return bool(self.sprite_effects & SpriteEffects.FLIP_VERTICALLY)

    @flip_vertical.setter
    def flip_vertical(self, flip: bool) -> None:
        self._set_effect(SpriteEffects.FLIP_VERTICALLY, flip)

    def set_direction(self, direction: int) -> None:
        """Face left (mirrored) for a negative direction, right otherwise."""
        self.flip_horizontal = direction < 0

    def reset(self) -> None:
        self.current_frame = 0
        self._elapsed = 0.0

    def stop(self) -> None:
        self.paused = True
        self.current_frame = 0
        self._elapsed = 0.0

    def play(self) -> None:
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    def set_scale(self, scale_x: float, scale_y: float | None = None) -> None:
        """Set the draw scale; a single value scales both axes."""
        self.scale = Vector2(scale_x, scale_x if scale_y is None else scale_y)

    def reset_depth(self) -> None:
        self.depth = self._original_depth

    @property
    def is_finished(self) -> bool:
        """True with no valid animation, or when a non-looping one shows its last frame."""
        sequence = self._current_sequence()
        if sequence is None:
            return True
        return not sequence.loop and self.current_frame == len(sequence.frames) - 1