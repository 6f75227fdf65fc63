import pytest

from editorcore.components import BillboardComponent, PrimitiveComponent
from editorcore.objects import ObjectRegistry
from editorcore.world import Actor, ObjectInfo, World, WorldInfo


class Recorder(Actor):
    type_name = "Recorder"

    def __init__(self):
        super().__init__()
        self.calls = []

    def begin_play(self):
        super().begin_play()
        self.calls.append("begin")

    def tick(self, delta_time):
        self.calls.append(("tick", delta_time))

    def late_tick(self, delta_time):
        self.calls.append(("late", delta_time))

    def destroyed(self):
        super().destroyed()
        self.calls.append("destroyed")


class Sphere(Actor):
    type_name = "Sphere"


class Gizmo(Actor):
    type_name = "Gizmo"

    def __init__(self):
        super().__init__()
        self.is_gizmo_actor = True


@pytest.fixture
def world():
    return World(ObjectRegistry())


def test_spawn_names_are_unique(world):
    names = [world.spawn_actor(Actor).name for _ in range(3)]
    assert names == ["Actor", "Actor_0", "Actor_1"]


def test_spawn_registers_and_begins_play(world):
    actor = world.spawn_actor(Recorder)
    assert actor.world is world
    assert world.registry.get(actor.uuid) is actor
    assert actor.calls == ["begin"]
    assert world.actors == [actor]


def test_spawn_rejects_non_actor(world):
    with pytest.raises(TypeError):
        world.spawn_actor(int)


def test_spawn_adds_tree_node(world):
    actor = world.spawn_actor(Sphere)
    [node] = world.actor_tree_nodes
    assert node.actor is actor
    assert node.label == actor.name
    assert node.type_name == "Sphere"
    assert node.parent is world.world_node
    assert world.world_node.children == [node]


def test_destroy_defers_registry_removal(world):
    actor = world.spawn_actor(Recorder)
    assert world.destroy_actor(actor) is True
    assert actor not in world.actors
    assert actor.uuid in world.registry
    assert world.pending_destroy == [actor]
    world.late_tick(0.1)
    assert actor.uuid not in world.registry
    assert world.pending_destroy == []


def test_destroy_twice_calls_destroyed_once(world):
    actor = world.spawn_actor(Recorder)
    world.destroy_actor(actor)
    assert world.destroy_actor(actor) is True
    assert actor.calls.count("destroyed") == 1


def test_destroy_removes_tree_node(world):
    actor = world.spawn_actor(Actor)
    world.destroy_actor(actor)
    assert world.actor_tree_nodes == []
    assert world.world_node.children == []


def test_destroy_none_raises(world):
    with pytest.raises(ValueError):
        world.destroy_actor(None)


def test_tick_respects_can_ever_tick(world):
    ticking = world.spawn_actor(Recorder)
    idle = world.spawn_actor(Recorder)
    idle.can_ever_tick = False
    world.tick(0.5)
    world.late_tick(0.25)
    assert ticking.calls == ["begin", ("tick", 0.5), ("late", 0.25)]
    assert idle.calls == ["begin"]


def test_begin_play_reaches_all_actors(world):
    first = world.spawn_actor(Recorder)
    second = world.spawn_actor(Recorder)
    world.begin_play()
    assert first.calls == ["begin", "begin"]
    assert second.calls == ["begin", "begin"]


def test_clear_world_keeps_gizmos(world):
    world.spawn_actor(Actor)
    world.spawn_actor(Sphere)
    gizmo = world.spawn_actor(Gizmo)
    world.clear_world()
    assert world.actors == [gizmo]


def test_world_info_skips_gizmos(world):
    actor = world.spawn_actor(Sphere)
    actor.location = (1.0, 2.0, 3.0)
    world.spawn_actor(Gizmo)
    world.scene_name = "Level"
    info = world.world_info()
    assert info.actor_count == 1
    assert info.version == 1
    assert info.scene_name == "Level"
    assert info.objects[0].object_type == "Sphere"
    assert info.objects[0].location == (1.0, 2.0, 3.0)
    assert info.objects[0].uuid == actor.uuid


def test_world_info_round_trip(world):
    sphere = world.spawn_actor(Sphere)
    sphere.location = (4.0, 5.0, 6.0)
    sphere.rotation = (0.0, 90.0, 0.0)
    sphere.scale = (2.0, 2.0, 2.0)
    world.spawn_actor(Actor)
    world.scene_name = "Saved"
    saved = world.world_info()

    other = World(ObjectRegistry())
    spawned = other.load_world_info(saved, {"Actor": Actor, "Sphere": Sphere})
    assert [a.type_name for a in spawned] == ["Sphere", "Actor"]
    assert other.scene_name == "Saved"
    reloaded = other.world_info()
    for before, after in zip(saved.objects, reloaded.objects):
        assert (before.object_type, before.location, before.rotation, before.scale) == (
            after.object_type,
            after.location,
            after.rotation,
            after.scale,
        )


def test_load_replaces_existing_actors(world):
    old = world.spawn_actor(Actor)
    info = WorldInfo(scene_name="New", objects=[ObjectInfo(uuid=7, object_type="Actor")])
    spawned = world.load_world_info(info)
    assert old not in world.actors
    assert world.actors == spawned
    assert len(spawned) == 1


def test_load_skips_unknown_types(world):
    info = WorldInfo(objects=[ObjectInfo(uuid=1, object_type="Teapot")])
    assert world.load_world_info(info, {"Actor": Actor}) == []
    assert world.actors == []


def test_load_sets_asset_name(world):
    info = WorldInfo(objects=[ObjectInfo(uuid=1, object_type="Actor", asset_name="cube.obj")])
    [actor] = world.load_world_info(info)
    assert actor.asset_name == "cube.obj"
    assert world.world_info().objects[0].asset_name == "cube.obj"


def test_load_none_does_nothing(world):
    actor = world.spawn_actor(Actor)
    assert world.load_world_info(None) == []
    assert world.actors == [actor]


def test_render_components_add_remove(world):
    component = PrimitiveComponent()
    world.add_render_component(component)
    world.add_render_component(component)
    assert world.render_components == [component]
    world.remove_render_component(component)
    world.remove_render_component(component)
    assert world.render_components == []


def test_billboard_registers_on_begin_play(world):
    class BillboardActor(Actor):
        def __init__(self):
            super().__init__()
            self.billboard = self.add_component(BillboardComponent())

    actor = world.spawn_actor(BillboardActor)
    assert world.billboard_components == [actor.billboard]
    world.destroy_actor(actor)
    assert world.billboard_components == []


def test_remove_missing_billboard_is_ignored(world):
    component = BillboardComponent()
    world.remove_billboard_component(component)
    world.add_billboard_component(component)
    assert world.billboard_components == [component]