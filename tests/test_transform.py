import numpy as np

from enginekit.glmath import quat_from_euler
from enginekit.transform import Transform


def test_defaults():
    t = Transform()
    assert np.array_equal(t.position, np.zeros(3))
    assert np.array_equal(t.scale, np.ones(3))
    assert t.parent is None
    assert np.allclose(t.local_matrix(), np.eye(4))


def test_world_matrix_only_changes_on_update():
    t = Transform()
    t.position = (1.0, 2.0, 3.0)
    assert np.allclose(t.world_matrix(), np.eye(4))
    t.update(0.0)
    origin = t.world_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(origin, [1.0, 2.0, 3.0, 1.0])


def test_translate_accumulates():
    t = Transform()
    t.translate((1.0, 0.0, 0.0))
    t.translate((0.0, 2.0, -1.0))
    assert np.allclose(t.position, [1.0, 2.0, -1.0])


def test_position_copy_does_not_alias():
    t = Transform()
    pos = t.position
    pos[0] = 9.0
    assert t.position[0] == 0.0


def test_local_matrix_applies_scale_then_translation():
    t = Transform()
    t.position = (4.0, 0.0, 0.0)
    t.scale = (2.0, 2.0, 2.0)
    point = t.local_matrix() @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [6.0, 0.0, 0.0, 1.0])


def test_rotation_euler_round_trip():
    t = Transform()
    t.rotation_euler = (10.0, 20.0, 30.0)
    assert np.allclose(t.rotation_euler, [10.0, 20.0, 30.0])


def test_rotate_matches_euler_quaternion():
    t = Transform()
    t.rotate((0.0, 90.0, 0.0))
    expected = quat_from_euler(np.radians([0.0, 90.0, 0.0]))
    assert np.allclose(t.rotation.to_matrix(), expected.to_matrix())


def test_rotate_twice_composes():
    once = Transform()
    once.rotate((0.0, 90.0, 0.0))
    twice = Transform()
    twice.rotate((0.0, 45.0, 0.0))
    twice.rotate((0.0, 45.0, 0.0))
    assert np.allclose(once.rotation.to_matrix(), twice.rotation.to_matrix())


def test_axes_follow_rotation():
    t = Transform()
    assert np.allclose(t.up, [0.0, 1.0, 0.0])
    assert np.allclose(t.forward, [0.0, 0.0, 1.0])
    t.rotation_euler = (30.0, 40.0, 50.0)
    assert np.isclose(np.dot(t.up, t.forward), 0.0)


def test_parent_world_matrix_is_composed():
    parent = Transform()
    parent.position = (1.0, 0.0, 0.0)
    parent.rotation_euler = (0.0, 90.0, 0.0)
    child = Transform()
    child.position = (0.0, 0.0, 2.0)
    child.parent = parent
    parent.update(0.0)
    child.update(0.0)
    assert np.allclose(
        child.world_matrix(), parent.world_matrix() @ child.local_matrix()
    )