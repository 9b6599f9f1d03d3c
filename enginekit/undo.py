"""Bounded undo and redo history of mesh states."""

from __future__ import annotations

from dataclasses import dataclass

from .mesh import Mesh, Vertex


@dataclass(frozen=True)
class _MeshState:
    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...]

    @classmethod
    def of(cls, mesh: Mesh) -> _MeshState:
        return cls(tuple(mesh.vertices), tuple(mesh.indices))

    def apply_to(self, mesh: Mesh) -> None:
        mesh.initialize(self.vertices, self.indices)
        mesh.recalculate_normals()


class UndoHistory:
    """Snapshots of a mesh that can be stepped backwards and forwards."""

    def __init__(self, max_states: int = 50) -> None:
        if max_states < 0:
            raise ValueError("max_states must not be negative")
        self.max_states = max_states
        self._undo: list[_MeshState] = []
        self._redo: list[_MeshState] = []

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def save_state(self, mesh: Mesh) -> None:
        """Record the current state of ``mesh``; this discards any redo states."""
        self._redo.clear()
        self._undo.append(_MeshState.of(mesh))
        if len(self._undo) > self.max_states:
            del self._undo[0]

    def undo(self, mesh: Mesh) -> bool:
        """Restore the previous state into ``mesh``; False if there is none."""
        if not self.can_undo():
            return False
        self._redo.append(_MeshState.of(mesh))
        self._undo.pop().apply_to(mesh)
        return True

    def redo(self, mesh: Mesh) -> bool:
        """Reapply the last undone state into ``mesh``; False if there is none."""
        if not self.can_redo():
            return False
        self._undo.append(_MeshState.of(mesh))
        self._redo.pop().apply_to(mesh)
        return True

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)