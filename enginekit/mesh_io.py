"""Saving and loading meshes as OBJ text and as a compact binary format."""

from __future__ import annotations

import struct

from .mesh import Mesh, Vertex

_OBJ_BANNER = "# enginekit sculpt mesh\n"
_MAGIC = b"SMSH"
_VERSION = 1
_HEADER = struct.Struct("<4sIII")
_VERTEX = struct.Struct("<14f")
_INDEX_SIZE = struct.calcsize("<I")


def _triangles(indices):
    return zip(indices[0::3], indices[1::3], indices[2::3])


def save_obj(mesh: Mesh, path) -> None:
    """Write ``mesh`` as OBJ text with positions, texture coordinates and normals."""
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        out.write(_OBJ_BANNER)
        out.write(f"# Vertices: {len(mesh.vertices)}\n")
        out.write(f"# Faces: {len(mesh.indices) // 3}\n\n")
        for vertex in mesh.vertices:
            out.write("v {:.6f} {:.6f} {:.6f}\n".format(*vertex.position))
        for vertex in mesh.vertices:
            out.write("vt {:.6f} {:.6f}\n".format(*vertex.tex_coords))
        for vertex in mesh.vertices:
            out.write("vn {:.6f} {:.6f} {:.6f}\n".format(*vertex.normal))
        for face in _triangles(mesh.indices):
            corners = "".join(f"{i + 1}/{i + 1}/{i + 1} " for i in face)
            out.write(f"f {corners}\n")


def _floats(tokens, count: int) -> tuple[float, ...]:
    values = [float(token) for token in tokens[:count]]
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def load_obj(path) -> Mesh:
    """Read an OBJ file written in ``v/vt/vn`` form; normals are recomputed."""
    positions, tex_coords, normals, indices = [], [], [], []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            tokens = line.split()
            if not tokens:
                continue
            kind, args = tokens[0], tokens[1:]
            if kind == "v":
                positions.append(_floats(args, 3))
            elif kind == "vt":
                tex_coords.append(_floats(args, 2))
            elif kind == "vn":
                normals.append(_floats(args, 3))
            elif kind == "f":
                for corner in args[:3]:
                    head, slash, _ = corner.partition("/")
                    if slash:
                        indices.append(int(head) - 1)

    vertices = [
        Vertex(
            position=position,
            tex_coords=tex_coords[i] if i < len(tex_coords) else (0.0, 0.0),
            normal=normals[i] if i < len(normals) else (0.0, 1.0, 0.0),
        )
        for i, position in enumerate(positions)
    ]
    mesh = Mesh()
    mesh.initialize(vertices, indices)
    mesh.recalculate_normals()
    return mesh


def save_binary(mesh: Mesh, path) -> None:
    """Write ``mesh`` in the little-endian SMSH binary format."""
    with open(path, "wb") as out:
        out.write(_HEADER.pack(_MAGIC, _VERSION, len(mesh.vertices), len(mesh.indices)))
        for vertex in mesh.vertices:
            out.write(
                _VERTEX.pack(
                    *vertex.position,
                    *vertex.normal,
                    *vertex.tex_coords,
                    *vertex.tangent,
                    *vertex.bitangent,
                )
            )
        out.write(struct.pack(f"<{len(mesh.indices)}I", *mesh.indices))


def load_binary(path) -> Mesh:
    """Read a mesh in the SMSH binary format; normals are recomputed."""
    with open(path, "rb") as handle:
        payload = handle.read()
    if len(payload) < _HEADER.size:
        raise ValueError("file too short for a mesh header")
    magic, _version, vertex_count, index_count = _HEADER.unpack_from(payload)
    if magic != _MAGIC:
        raise ValueError("invalid file format")

    vertex_end = _HEADER.size + vertex_count * _VERTEX.size
    index_end = vertex_end + index_count * _INDEX_SIZE
    if len(payload) < index_end:
        raise ValueError("mesh data is truncated")

    vertices = [
        Vertex(
            position=values[0:3],
            normal=values[3:6],
            tex_coords=values[6:8],
            tangent=values[8:11],
            bitangent=values[11:14],
        )
        for values in _VERTEX.iter_unpack(payload[_HEADER.size:vertex_end])
    ]
    indices = struct.unpack_from(f"<{index_count}I", payload, vertex_end)

    mesh = Mesh()
    mesh.initialize(vertices, indices)
    mesh.recalculate_normals()
    return mesh