"""Actor components: scene hierarchy, primitives and billboards."""

from __future__ import annotations

from enum import Enum
from typing import Any

from editorcore.objects import UObject


class EndPlayReason(Enum):
    """Why a component stops playing."""

    DESTROYED = "destroyed"
    LEVEL_TRANSITION = "level_transition"
    END_PLAY_IN_EDITOR = "end_play_in_editor"
    REMOVED_FROM_WORLD = "removed_from_world"
    QUIT = "quit"


class PrimitiveType(Enum):
    """Shape a primitive component draws."""

    NONE = "none"
    CUBE = "cube"
    SPHERE = "sphere"
    TRIANGLE = "triangle"
    LINE = "line"
    CYLINDER = "cylinder"
    CONE = "cone"


def _compose(outer: Any, inner: Any) -> Any:
    """Combine two transforms; None stands for identity."""
    if outer is None:
        return inner
    if inner is None:
        return outer
    return outer * inner


class ActorComponent(UObject):
    """A component that can be owned by an actor and ticked."""

    def __init__(self) -> None:
        super().__init__()
        self.can_ever_tick = True
        self.owner: Any = None
        self.has_begun_play = False
        self.end_play_reason: EndPlayReason | None = None
        self.last_delta_time = 0.0

    def begin_play(self) -> None:
        """Mark the component as playing."""
        self.has_begun_play = True
        self.end_play_reason = None

    def tick(self, delta_time: float) -> None:
        """Record the time step of the latest frame."""
        self.last_delta_time = delta_time

    def end_play(self, reason: EndPlayReason) -> None:
        """Mark the component as no longer playing and keep the reason."""
        self.has_begun_play = False
        self.end_play_reason = reason

    def _owner_world(self) -> Any:
        if self.owner is None:
            raise RuntimeError(f"{type(self).__name__} has no owner")
        return self.owner.world


class SceneComponent(ActorComponent):
    """A component with a transform that can be attached to a parent."""

    def __init__(self) -> None:
        super().__init__()
        self.parent: SceneComponent | None = None
        self.children: list[SceneComponent] = []
        self.relative_transform: Any = None
        self.is_picked = False

    @property
    def world_transform(self) -> Any:
        """The parent's world transform combined with the relative one."""
        if self.parent is not None:
            return _compose(self.parent.world_transform, self.relative_transform)
        return self.relative_transform

    def setup_attachment(self, parent: SceneComponent | None) -> None:
        """Attach to ``parent`` and fold its world transform into ours."""
        if parent is None:
            raise ValueError("parent is None")
        self.parent = parent
        if self not in parent.children:
            parent.children.append(self)
        self.relative_transform = _compose(parent.world_transform, self.relative_transform)

    def pick(self, picked: bool) -> None:
        """Mark this component and all its descendants as picked or not."""
        self.is_picked = picked
        for child in self.children:
            child.pick(picked)


class PrimitiveComponent(SceneComponent):
    """A scene component that draws a basic shape."""

    def __init__(self, primitive_type: PrimitiveType = PrimitiveType.NONE) -> None:
        super().__init__()
        self.primitive_type = primitive_type
        self.can_be_rendered = primitive_type is not PrimitiveType.NONE
        self.use_vertex_color = True
        self.is_orthographic = False
        self.custom_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)

    def set_custom_color(self, color: tuple[float, float, float, float]) -> None:
        """Use a fixed colour instead of the vertex colours."""
        self.custom_color = tuple(color)
        self.use_vertex_color = False

    def set_use_vertex_color(self, use: bool) -> None:
        self.use_vertex_color = use

    def register_with_world(self, world: Any) -> None:
        world.add_render_component(self)


class BillboardComponent(PrimitiveComponent):
    """A camera-facing textured quad that shows one cell of a sprite sheet."""

    def __init__(self) -> None:
        super().__init__()
        self.texture: Any = None
        self.can_be_rendered = False
        self.total_cols = 1.0
        self.total_rows = 1.0
        self.render_col = 1.0
        self.render_row = 1.0

    def begin_play(self) -> None:
        super().begin_play()
        self._owner_world().add_billboard_component(self)

    def end_play(self, reason: EndPlayReason) -> None:
        self._owner_world().remove_billboard_component(self)
        super().end_play(reason)

    def set_texture(self, texture: Any, cols: float = 1.0, rows: float = 1.0) -> None:
        self.texture = texture
        self.total_cols = cols
        self.total_rows = rows

    def set_render_uv(self, col: float, row: float) -> None:
        self.render_col = col
        self.render_row = row

    @property
    def uv_offset(self) -> tuple[float, float]:
        """Offset of the shown cell in texture space."""
        return self.render_col / self.total_cols, self.render_row / self.total_rows


class AnimatedBillboardComponent(BillboardComponent):
    """A billboard that steps through its sprite sheet at a fixed rate."""

    def __init__(self) -> None:
        super().__init__()
        self.play_rate = 1
        self.remaining_frame_time = 1.0 / self.play_rate
        self.uv_index = 0
        self.can_be_rendered = True

    def set_play_rate(self, play_rate: int) -> None:
        """Set the frames shown per second."""
        self.play_rate = int(play_rate)

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.remaining_frame_time -= delta_time
        if self.remaining_frame_time > 0:
            return
        self.remaining_frame_time = 1.0 / self.play_rate
        frame_count = int(self.total_cols) * int(self.total_rows)
        self.uv_index = (self.uv_index + 1) % frame_count
        self.render_row = int(self.uv_index / self.total_cols)
        self.render_col = self.uv_index % int(self.total_cols)