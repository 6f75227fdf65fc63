"""The world: the set of live actors, their lifecycle and scene snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Iterable, Mapping, TypeVar

from editorcore.actor_tree import ActorTreeNode
from editorcore.components import ActorComponent, EndPlayReason
from editorcore.objects import ObjectRegistry, UObject

logger = logging.getLogger(__name__)

A = TypeVar("A", bound="Actor")

Vector = tuple[float, float, float]

WORLD_INFO_VERSION = 1


class Actor(UObject):
    """An object placed in a world, owning a list of components."""

    type_name = "Actor"

    def __init__(self) -> None:
        super().__init__()
        self.world: World | None = None
        self.components: list[ActorComponent] = []
        self.can_ever_tick = True
        self.is_gizmo_actor = False
        self.location: Vector = (0.0, 0.0, 0.0)
        self.rotation: Vector = (0.0, 0.0, 0.0)
        self.scale: Vector = (1.0, 1.0, 1.0)

    def add_component(self, component: ActorComponent) -> ActorComponent:
        """Take ownership of ``component`` and return it."""
        component.owner = self
        self.components.append(component)
        return component

    def begin_play(self) -> None:
        """Called once the actor is placed in its world."""
        for component in list(self.components):
            component.begin_play()

    def tick(self, delta_time: float) -> None:
        """Called once per frame."""
        for component in list(self.components):
            if component.can_ever_tick:
                component.tick(delta_time)

    def late_tick(self, delta_time: float) -> None:
        """Called once per frame after every actor has ticked."""

    def destroyed(self) -> None:
        """Called when the world destroys the actor."""
        for component in list(self.components):
            component.end_play(EndPlayReason.DESTROYED)


@dataclass
class ObjectInfo:
    """Saved state of one actor."""

    uuid: int
    object_type: str
    location: Vector = (0.0, 0.0, 0.0)
    rotation: Vector = (0.0, 0.0, 0.0)
    scale: Vector = (1.0, 1.0, 1.0)
    asset_name: str = ""


@dataclass
class WorldInfo:
    """Saved state of a whole scene."""

    scene_name: str = ""
    version: int = WORLD_INFO_VERSION
    objects: list[ObjectInfo] = field(default_factory=list)

    @property
    def actor_count(self) -> int:
        return len(self.objects)


class World(UObject):
    """Holds the actors of one scene and drives their lifecycle."""

    def __init__(self, registry: ObjectRegistry | None = None) -> None:
        super().__init__()
        self.registry = registry if registry is not None else ObjectRegistry()
        self.scene_name = ""
        self.version = WORLD_INFO_VERSION
        self.debug_raycast = False
        self._actors: list[Actor] = []
        self._actors_to_spawn: list[Actor] = []
        self._pending_destroy: list[Actor] = []
        self._render_components: dict[Any, None] = {}
        self._billboard_components: list[Any] = []
        self._actor_names: set[str] = set()
        self.actor_tree_nodes: list[ActorTreeNode] = []
        self.world_node = ActorTreeNode("World", type(self).__name__, None, self.uuid, None)

    @property
    def actors(self) -> list[Actor]:
        """A copy of the live actors, in spawn order."""
        return list(self._actors)

    @property
    def pending_destroy(self) -> list[Actor]:
        return list(self._pending_destroy)

    @property
    def render_components(self) -> list[Any]:
        return list(self._render_components)

    @property
    def billboard_components(self) -> list[Any]:
        return list(self._billboard_components)

    def _unique_name(self, base: str) -> str:
        if base not in self._actor_names:
            return base
        return next(
            candidate
            for candidate in (f"{base}_{n}" for n in count())
            if candidate not in self._actor_names
        )

    def spawn_actor(self, cls: type[A]) -> A:
        """Create an actor of ``cls``, name it uniquely and start it."""
        if not (isinstance(cls, type) and issubclass(cls, Actor)):
            raise TypeError(f"{cls!r} is not an Actor subclass")
        actor = self.registry.construct(cls)
        actor.world = self
        self._actors.append(actor)

        name = self._unique_name(actor.type_name)
        actor.set_name(name)
        self._actor_names.add(name)

        actor.begin_play()

        node = ActorTreeNode(actor.name, type(actor).__name__, self.world_node, actor.uuid, actor)
        self.actor_tree_nodes.append(node)
        return actor

    def destroy_actor(self, actor: Actor) -> bool:
        """Take ``actor`` out of the world; it leaves the registry at the next late tick."""
        if actor is None:
            raise ValueError("actor is None")
        if actor in self._pending_destroy:
            return True

        actor.destroyed()

        node = next((n for n in self.actor_tree_nodes if n.actor is actor), None)
        if node is not None:
            if node.parent is not None:
                node.parent.remove_child(node)
            for child in node.children:
                child.parent = node.parent
            self.actor_tree_nodes.remove(node)

        if actor in self._actors:
            self._actors.remove(actor)
        self._pending_destroy.append(actor)
        return True

    def begin_play(self) -> None:
        for actor in list(self._actors):
            actor.begin_play()

    def tick(self, delta_time: float) -> None:
        for actor in self._actors_to_spawn:
            actor.begin_play()
        self._actors_to_spawn.clear()

        for actor in list(self._actors):
            if actor.can_ever_tick:
                actor.tick(delta_time)

    def late_tick(self, delta_time: float) -> None:
        for actor in list(self._actors):
            if actor.can_ever_tick:
                actor.late_tick(delta_time)

        for actor in self._pending_destroy:
            self.registry.remove(actor.uuid)
        self._pending_destroy.clear()

    def clear_world(self) -> None:
        """Destroy every actor that is not part of the editor gizmo."""
        for actor in list(self._actors):
            if not actor.is_gizmo_actor:
                self.destroy_actor(actor)
        logger.info("Clear World")

    def world_info(self) -> WorldInfo:
        """Snapshot the scene, leaving out gizmo actors."""
        objects = [
            ObjectInfo(
                uuid=actor.uuid,
                object_type=actor.type_name,
                location=tuple(actor.location),
                rotation=tuple(actor.rotation),
                scale=tuple(actor.scale),
                asset_name=getattr(actor, "asset_name", "") or "",
            )
            for actor in self._actors
            if not actor.is_gizmo_actor
        ]
        return WorldInfo(scene_name=self.scene_name, version=WORLD_INFO_VERSION, objects=objects)

    def load_world_info(
        self,
        info: WorldInfo | None,
        actor_types: Mapping[str, type[Actor]] | None = None,
    ) -> list[Actor]:
        """Replace the scene with the actors described by ``info``.

        ``actor_types`` maps saved type names to actor classes; entries of an
        unknown type are skipped. Returns the spawned actors.
        """
        if info is None:
            return []
        types: Mapping[str, type[Actor]] = (
            actor_types if actor_types is not None else {Actor.type_name: Actor}
        )

        self.clear_world()
        self.version = info.version
        self.scene_name = info.scene_name

        spawned: list[Actor] = []
        for object_info in info.objects:
            cls = types.get(object_info.object_type)
            if cls is None:
                continue
            actor = self.spawn_actor(cls)
            if object_info.asset_name:
                actor.asset_name = object_info.asset_name
            actor.location = tuple(object_info.location)
            actor.rotation = tuple(object_info.rotation)
            actor.scale = tuple(object_info.scale)
            spawned.append(actor)
        return spawned

    def add_render_component(self, component: Any) -> None:
        self._render_components[component] = None

    def remove_render_component(self, component: Any) -> None:
        self._render_components.pop(component, None)

    def add_billboard_component(self, component: Any) -> None:
        self._billboard_components.append(component)

    def remove_billboard_component(self, component: Any) -> None:
        if component in self._billboard_components:
            self._billboard_components.remove(component)

    def iter_actors(self, cls: type[A]) -> Iterable[A]:
        """Yield the live actors that are instances of ``cls``."""
        return (actor for actor in self._actors if isinstance(actor, cls))