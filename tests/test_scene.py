import pytest

from enginekit.scene import Component, Entity, Scene


class Recorder(Component):
    def __init__(self, log):
        super().__init__()
        self.log = log

    def update(self, delta_time):
        self.log.append(("update", self, delta_time))

    def render(self):
        self.log.append(("render", self))


class SpecialRecorder(Recorder):
    pass


def test_default_entity_name():
    assert Entity().name == "Entity"


def test_add_component_sets_owner():
    entity = Entity("Player")
    component = entity.add_component(Component())
    assert component.entity is entity
    assert entity.components == (component,)


def test_add_non_component_raises():
    with pytest.raises(TypeError):
        Entity().add_component(object())


def test_get_component_returns_first_match():
    log = []
    entity = Entity()
    first = entity.add_component(Recorder(log))
    special = entity.add_component(SpecialRecorder(log))
    assert entity.get_component(Recorder) is first
    assert entity.get_component(SpecialRecorder) is special


def test_get_component_missing_returns_none():
    entity = Entity()
    entity.add_component(Component())
    assert entity.get_component(Recorder) is None


def test_entity_update_runs_components_in_order():
    log = []
    entity = Entity()
    a = entity.add_component(Recorder(log))
    b = entity.add_component(Recorder(log))
    entity.update(0.5)
    assert log == [("update", a, 0.5), ("update", b, 0.5)]


def test_scene_create_and_destroy():
    scene = Scene()
    one = scene.create_entity("One")
    two = scene.create_entity()
    assert scene.entities == (one, two)
    assert two.name == "Entity"
    scene.destroy_entity(one)
    assert scene.entities == (two,)


def test_destroy_unknown_entity_is_ignored():
    scene = Scene()
    kept = scene.create_entity()
    scene.destroy_entity(Entity())
    assert scene.entities == (kept,)


def test_scene_update_and_render():
    log = []
    scene = Scene()
    component = scene.create_entity().add_component(Recorder(log))
    scene.update(0.25)
    scene.render()
    assert log == [("update", component, 0.25), ("render", component)]