import math

import numpy as np
import pytest

from enginekit.glmath import (
    Quat,
    normalize,
    ortho,
    perspective,
    quat_from_axis_angle,
    quat_from_euler,
    scale_matrix,
    translation_matrix,
    vec3,
)


def test_vec3_components():
    assert np.array_equal(vec3(1, 2, 3), np.array([1.0, 2.0, 3.0]))


def test_normalize_gives_unit_length():
    v = normalize(vec3(3.0, -4.0, 12.0))
    assert math.isclose(np.linalg.norm(v), 1.0)


def test_normalize_zero_vector_is_nan():
    result = normalize(vec3(0, 0, 0))
    assert np.isnan(result).tolist() == [True, True, True]


def test_euler_round_trip():
    angles = np.array([0.3, -0.5, 1.2])
    q = quat_from_euler(angles)
    assert np.allclose(q.euler_angles(), angles)


def test_identity_quaternion_has_identity_matrix():
    assert np.allclose(Quat().to_matrix(), np.eye(4))


def test_matrix_is_orthonormal():
    m = quat_from_euler((0.4, 1.1, -0.7)).to_matrix()[:3, :3]
    assert np.allclose(m @ m.T, np.eye(3))
    assert math.isclose(np.linalg.det(m), 1.0)


def test_rotate_vector_matches_matrix():
    q = quat_from_euler((0.2, -0.9, 0.6))
    v = vec3(1.0, 2.0, -3.0)
    assert np.allclose(q.rotate_vector(v), q.to_matrix()[:3, :3] @ v)
    assert np.allclose(q * v, q.rotate_vector(v))


def test_product_matches_matrix_product():
    p = quat_from_euler((0.1, 0.2, 0.3))
    q = quat_from_euler((-0.5, 0.7, 1.0))
    assert np.allclose((p * q).to_matrix(), p.to_matrix() @ q.to_matrix())


def test_axis_angle_quarter_turn():
    q = quat_from_axis_angle(math.pi / 2, (0.0, 0.0, 2.0))
    assert np.allclose(q.rotate_vector((1.0, 0.0, 0.0)), [0.0, 1.0, 0.0])


def test_normalized_unit_and_zero():
    assert math.isclose(Quat(2.0, 1.0, 0.0, 3.0).normalized().length, 1.0)
    assert Quat(0.0, 0.0, 0.0, 0.0).normalized() == Quat()


def test_multiply_by_unsupported_type():
    with pytest.raises(TypeError):
        Quat() * "abc"


def test_translation_and_scale():
    point = np.array([1.0, 1.0, 1.0, 1.0])
    moved = translation_matrix((4.0, 5.0, 6.0)) @ point
    assert np.allclose(moved, [5.0, 6.0, 7.0, 1.0])
    scaled = scale_matrix((2.0, 3.0, 4.0)) @ point
    assert np.allclose(scaled, [2.0, 3.0, 4.0, 1.0])


def _ndc(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_perspective_maps_planes_to_unit_depth():
    near, far = 0.1, 1000.0
    m = perspective(math.radians(45.0), 16.0 / 9.0, near, far)
    assert math.isclose(_ndc(m, (0.0, 0.0, -near))[2], -1.0)
    assert math.isclose(_ndc(m, (0.0, 0.0, -far))[2], 1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_ortho_maps_box_corners():
    m = ortho(-10.0, 10.0, -10.0, 10.0, 0.1, 1000.0)
    assert np.allclose(_ndc(m, (-10.0, -10.0, -0.1)), [-1.0, -1.0, -1.0])
    assert np.allclose(_ndc(m, (10.0, 10.0, -1000.0)), [1.0, 1.0, 1.0])


def test_ortho_rejects_degenerate_box():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, -1.0, 1.0, 0.1, 10.0)