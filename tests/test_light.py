import numpy as np

from enginekit.light import Light, LightType
from enginekit.scene import Entity
from enginekit.transform import Transform


def test_defaults_from_source():
    light = Light()
    assert light.light_type is LightType.DIRECTIONAL
    assert np.array_equal(light.color, np.ones(3))
    assert light.intensity == 1.0
    assert light.range == 10.0
    assert light.spot_angle == 45.0


def test_type_argument():
    assert Light(LightType.POINT).light_type is LightType.POINT


def test_defaults_without_transform():
    light = Light()
    assert np.allclose(light.direction(), [0.0, -1.0, 0.0])
    assert np.allclose(light.position(), [0.0, 0.0, 0.0])


def test_position_follows_transform():
    entity = Entity("FillLight")
    transform = entity.add_component(Transform())
    transform.position = (-3.0, 2.0, 2.0)
    light = entity.add_component(Light(LightType.POINT))
    assert np.allclose(light.position(), [-3.0, 2.0, 2.0])


def test_direction_is_negated_forward():
    entity = Entity("MainLight")
    transform = entity.add_component(Transform())
    transform.rotation_euler = (-45.0, 45.0, 0.0)
    light = entity.add_component(Light())
    direction = light.direction()
    assert np.isclose(np.linalg.norm(direction), 1.0)
    assert np.allclose(direction, -transform.forward)


def test_identity_transform_points_back():
    entity = Entity()
    entity.add_component(Transform())
    light = entity.add_component(Light())
    assert np.allclose(light.direction(), [0.0, 0.0, -1.0])