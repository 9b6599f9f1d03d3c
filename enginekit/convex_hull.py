"""Incremental convex hull of a point set."""

from __future__ import annotations

from collections import Counter

import numpy as np

from .glmath import normalize

_VISIBILITY_EPSILON = 0.0001

Face = tuple[int, int, int]


class ConvexHull:
    """Triangle faces and face normals built incrementally from vertices."""

    def __init__(self, vertices=()) -> None:
        self._vertices = [np.asarray(v, dtype=float).reshape(3) for v in vertices]
        self._faces: list[Face] = []
        self._normals: list[np.ndarray] = []

    @property
    def vertices(self) -> list[np.ndarray]:
        return [v.copy() for v in self._vertices]

    @property
    def faces(self) -> list[Face]:
        return list(self._faces)

    @property
    def normals(self) -> list[np.ndarray]:
        return [n.copy() for n in self._normals]

    def _face_normal(self, face: Face) -> np.ndarray:
        a, b, c = (self._vertices[i] for i in face)
        return normalize(np.cross(b - a, c - a))

    def build(self) -> None:
        """Start from a tetrahedron on the first four vertices and add the rest."""
        if len(self._vertices) < 4:
            return
        self._faces.extend([(0, 1, 2), (0, 2, 3), (0, 3, 1), (1, 3, 2)])
        for point in self._vertices[4:]:
            self.add_point(point)
        self.update_normals()

    def add_point(self, point) -> None:
        """Grow the hull to include ``point`` if any face can see it."""
        point = np.asarray(point, dtype=float).reshape(3)
        visible = [
            index
            for index, face in enumerate(self._faces)
            if np.dot(point - self._vertices[face[0]], self._face_normal(face))
            > _VISIBILITY_EPSILON
        ]
        if not visible:
            return

        horizon = self._horizon_edges(visible)

        for index in reversed(visible):
            self._faces[index] = self._faces[-1]
            self._faces.pop()

        point_index = len(self._vertices)
        self._vertices.append(point.copy())
        self._faces.extend((first, second, point_index) for first, second in horizon)

    def _horizon_edges(self, visible: list[int]) -> list[tuple[int, int]]:
        counts: Counter[tuple[int, int]] = Counter()
        for index in visible:
            x, y, z = self._faces[index]
            for u, v in ((x, y), (y, z), (z, x)):
                counts[(min(u, v), max(u, v))] += 1
        return sorted(edge for edge, count in counts.items() if count == 1)

    def update_normals(self) -> None:
        self._normals = [self._face_normal(face) for face in self._faces]