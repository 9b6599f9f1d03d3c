from collections import Counter

import numpy as np
import pytest

from enginekit.convex_hull import ConvexHull

TETRA = [(0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)]


def edge_counts(faces):
    counts = Counter()
    for x, y, z in faces:
        for u, v in ((x, y), (y, z), (z, x)):
            counts[(min(u, v), max(u, v))] += 1
    return counts


def test_too_few_vertices_builds_nothing():
    hull = ConvexHull(TETRA[:3])
    hull.build()
    assert hull.faces == []
    assert hull.normals == []


def test_tetrahedron_faces():
    hull = ConvexHull(TETRA)
    hull.build()
    assert hull.faces == [(0, 1, 2), (0, 2, 3), (0, 3, 1), (1, 3, 2)]
    assert len(hull.normals) == 4


def test_normals_are_unit_length():
    hull = ConvexHull(TETRA + [(1.0, 1.0, 1.0)])
    hull.build()
    assert len(hull.normals) == len(hull.faces)
    for normal in hull.normals:
        assert np.linalg.norm(normal) == pytest.approx(1.0)


def test_interior_point_leaves_hull_unchanged():
    hull = ConvexHull(TETRA + [(0.1, 0.1, 0.1)])
    hull.build()
    assert len(hull.faces) == 4
    assert len(hull.vertices) == 5


def test_exterior_point_keeps_hull_closed():
    point = (1.0, 1.0, 1.0)
    hull = ConvexHull(TETRA + [point])
    hull.build()
    counts = edge_counts(hull.faces)
    assert set(counts.values()) == {2}
    used = {i for face in hull.faces for i in face}
    assert len(hull.faces) == 2 * len(used) - 4
    assert np.allclose(hull.vertices[-1], point)


def test_add_point_appends_visible_point():
    hull = ConvexHull(TETRA)
    hull.build()
    before = len(hull.vertices)
    hull.add_point((2.0, 2.0, 2.0))
    assert len(hull.vertices) == before + 1
    assert all(len(set(face)) == 3 for face in hull.faces)
    assert any(before in face for face in hull.faces)


def test_add_point_without_faces_is_ignored():
    hull = ConvexHull(TETRA)
    hull.add_point((5.0, 5.0, 5.0))
    assert len(hull.vertices) == len(TETRA)
    assert hull.faces == []