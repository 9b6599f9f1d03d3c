"""Loading of Wavefront OBJ geometry into meshes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .mesh import Mesh, Vec2, Vec3, Vertex, compute_normals

_DEFAULT_NORMAL: Vec3 = (0.0, 1.0, 0.0)
_DEFAULT_TEX: Vec2 = (0.0, 0.0)


@dataclass
class ObjData:
    """Raw attribute lists read from an OBJ file; indices are zero-based."""

    positions: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    tex_coords: list[Vec2] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def _floats(tokens, count: int) -> tuple[float, ...]:
    values = [float(token) for token in tokens[:count]]
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def parse_obj(lines) -> ObjData:
    """Parse OBJ text lines into positions, normals, texture coordinates and indices.

    Only the position index of each face corner is kept.
    """
    data = ObjData()
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        kind, args = tokens[0], tokens[1:]
        if kind == "v":
            data.positions.append(_floats(args, 3))
        elif kind == "vt":
            data.tex_coords.append(_floats(args, 2))
        elif kind == "vn":
            data.normals.append(_floats(args, 3))
        elif kind == "f":
            for corner in args:
                index = corner.split("/", 1)[0]
                if index:
                    data.indices.append(int(index) - 1)
    return data


def _at(items, index, default):
    return items[index] if index < len(items) else default


def load_obj(path) -> list[Mesh]:
    """Load an OBJ file as a list of meshes; normals are generated if absent."""
    with open(path, encoding="utf-8") as handle:
        data = parse_obj(handle)
    if not data.positions:
        raise ValueError(f"no vertex positions in OBJ file: {path}")

    normals = data.normals
    if not normals:
        normals = [tuple(n) for n in compute_normals(data.positions, data.indices)]

    vertices = [
        Vertex(
            position=position,
            normal=_at(normals, i, _DEFAULT_NORMAL),
            tex_coords=_at(data.tex_coords, i, _DEFAULT_TEX),
        )
        for i, position in enumerate(data.positions)
    ]
    mesh = Mesh()
    mesh.initialize(vertices, data.indices)
    return [mesh]