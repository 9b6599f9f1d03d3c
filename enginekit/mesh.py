"""Vertex data, sub-meshes and triangle meshes with normal generation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import numpy as np

from .glmath import normalize

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_ZERO3: Vec3 = (0.0, 0.0, 0.0)
_FIELD_SIZES = (
    ("position", 3),
    ("normal", 3),
    ("tex_coords", 2),
    ("tangent", 3),
    ("bitangent", 3),
)


def _float_tuple(values, size: int) -> tuple[float, ...]:
    return tuple(float(v) for v in np.asarray(values, dtype=float).reshape(size))


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex; every attribute is stored as a tuple of floats."""

    position: Vec3 = _ZERO3
    normal: Vec3 = _ZERO3
    tex_coords: Vec2 = (0.0, 0.0)
    tangent: Vec3 = _ZERO3
    bitangent: Vec3 = _ZERO3

    def __post_init__(self) -> None:
        for name, size in _FIELD_SIZES:
            object.__setattr__(self, name, _float_tuple(getattr(self, name), size))


@dataclass(frozen=True)
class SubMesh:
    """A range of indices drawn with one material."""

    base_vertex: int
    base_index: int
    num_indices: int
    material_index: int = 0


def _triangles(indices):
    flat = list(indices)
    return zip(flat[0::3], flat[1::3], flat[2::3])


def compute_normals(positions, indices) -> np.ndarray:
    """Return per-vertex normals averaged from the unit normals of adjacent faces.

    A trailing group of fewer than three indices is ignored. Vertices used by
    no triangle get NaN normals.
    """
    points = np.asarray(positions, dtype=float).reshape(-1, 3)
    normals = np.zeros_like(points)
    for i0, i1, i2 in _triangles(indices):
        face = normalize(np.cross(points[i1] - points[i0], points[i2] - points[i0]))
        normals[i0] += face
        normals[i1] += face
        normals[i2] += face
    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    with np.errstate(invalid="ignore", divide="ignore"):
        return normals / lengths


class Mesh:
    """Indexed triangle mesh data with optional sub-mesh ranges."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []
        self._sub_meshes: list[SubMesh] = []

    def initialize(self, vertices, indices) -> None:
        """Replace the mesh contents with copies of ``vertices`` and ``indices``."""
        self.vertices = list(vertices)
        self.indices = [int(i) for i in indices]

    @property
    def sub_meshes(self) -> tuple[SubMesh, ...]:
        return tuple(self._sub_meshes)

    def add_sub_mesh(self, sub_mesh: SubMesh) -> None:
        self._sub_meshes.append(sub_mesh)

    def recalculate_normals(self) -> None:
        """Recompute every vertex normal from the mesh triangles."""
        normals = compute_normals([v.position for v in self.vertices], self.indices)
        self.vertices = [
            dataclasses.replace(vertex, normal=normal)
            for vertex, normal in zip(self.vertices, normals)
        ]