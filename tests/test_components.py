import pytest

from editorcore.components import (
    ActorComponent,
    AnimatedBillboardComponent,
    BillboardComponent,
    EndPlayReason,
    PrimitiveComponent,
    PrimitiveType,
    SceneComponent,
)


class FakeWorld:
    def __init__(self):
        self.billboards = []
        self.render_components = []

    def add_billboard_component(self, component):
        self.billboards.append(component)

    def remove_billboard_component(self, component):
        self.billboards.remove(component)

    def add_render_component(self, component):
        self.render_components.append(component)


class FakeActor:
    def __init__(self, world):
        self.world = world


def test_actor_component_defaults():
    component = ActorComponent()
    assert component.can_ever_tick is True
    assert component.owner is None


def test_pick_propagates_to_descendants():
    root, child, grandchild = SceneComponent(), SceneComponent(), SceneComponent()
    child.setup_attachment(root)
    grandchild.setup_attachment(child)
    root.pick(True)
    assert all(c.is_picked for c in (root, child, grandchild))
    root.pick(False)
    assert not any(c.is_picked for c in (root, child, grandchild))


def test_setup_attachment_links_parent_and_child_once():
    parent, child = SceneComponent(), SceneComponent()
    child.setup_attachment(parent)
    child.setup_attachment(parent)
    assert child.parent is parent
    assert parent.children == [child]


def test_setup_attachment_none_raises():
    with pytest.raises(ValueError):
        SceneComponent().setup_attachment(None)


def test_world_transform_without_parent_is_relative():
    component = SceneComponent()
    component.relative_transform = 7
    assert component.world_transform == 7


def test_attachment_folds_parent_transform_into_relative():
    parent, child = SceneComponent(), SceneComponent()
    parent.relative_transform = 2
    child.relative_transform = 3
    child.setup_attachment(parent)
    assert child.relative_transform == 2 * 3
    assert child.world_transform == 2 * child.relative_transform


def test_primitive_type_controls_renderability():
    assert PrimitiveComponent().can_be_rendered is False
    cube = PrimitiveComponent(PrimitiveType.CUBE)
    assert cube.can_be_rendered is True
    assert cube.primitive_type is PrimitiveType.CUBE


def test_custom_color_disables_vertex_color():
    component = PrimitiveComponent()
    assert component.use_vertex_color is True
    component.set_custom_color((0.5, 0.25, 0.0, 1.0))
    assert component.custom_color == (0.5, 0.25, 0.0, 1.0)
    assert component.use_vertex_color is False
    component.set_use_vertex_color(True)
    assert component.use_vertex_color is True


def test_register_with_world_adds_render_component():
    world = FakeWorld()
    component = PrimitiveComponent(PrimitiveType.SPHERE)
    component.register_with_world(world)
    assert world.render_components == [component]


def test_billboard_registers_and_unregisters_with_world():
    world = FakeWorld()
    billboard = BillboardComponent()
    billboard.owner = FakeActor(world)
    billboard.begin_play()
    assert world.billboards == [billboard]
    billboard.end_play(EndPlayReason.DESTROYED)
    assert world.billboards == []


def test_billboard_without_owner_raises():
    with pytest.raises(RuntimeError):
        BillboardComponent().begin_play()


def test_billboard_texture_and_uv():
    billboard = BillboardComponent()
    assert billboard.can_be_rendered is False
    billboard.set_texture("atlas", 4.0, 2.0)
    billboard.set_render_uv(2.0, 1.0)
    assert billboard.texture == "atlas"
    assert billboard.uv_offset == (2.0 / 4.0, 1.0 / 2.0)


def test_animated_billboard_steps_through_sheet():
    anim = AnimatedBillboardComponent()
    anim.set_texture("sheet", 2.0, 2.0)
    assert anim.can_be_rendered is True
    anim.tick(1.0)
    assert (anim.uv_index, anim.render_row, anim.render_col) == (1, 0, 1)
    anim.tick(1.0)
    assert (anim.uv_index, anim.render_row, anim.render_col) == (2, 1, 0)


def test_animated_billboard_wraps_after_all_frames():
    anim = AnimatedBillboardComponent()
    anim.set_texture("sheet", 3.0, 2.0)
    for _ in range(6):
        anim.tick(1.0)
    assert anim.uv_index == 0
    assert (anim.render_row, anim.render_col) == (0, 0)


def test_animated_billboard_waits_for_frame_time():
    anim = AnimatedBillboardComponent()
    anim.set_texture("sheet", 2.0, 2.0)
    anim.tick(0.4)
    assert anim.uv_index == 0
    anim.tick(0.6)
    assert anim.uv_index == 1
    assert anim.remaining_frame_time == 1.0 / anim.play_rate


def test_play_rate_shortens_frame_time():
    anim = AnimatedBillboardComponent()
    anim.set_texture("sheet", 4.0, 1.0)
    anim.set_play_rate(4)
    anim.tick(1.0)
    anim.tick(0.25)
    assert anim.uv_index == 2
    assert anim.remaining_frame_time == 1.0 / 4
    anim.tick(0.1)
    assert anim.uv_index == 2