"""Material: a shader plus named uniform values and textures."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class ShaderLike(Protocol):
    def use(self) -> None: ...
    def set_float(self, name: str, value: float) -> None: ...
    def set_int(self, name: str, value: int) -> None: ...
    def set_vec2(self, name: str, value) -> None: ...
    def set_vec3(self, name: str, value) -> None: ...
    def set_vec4(self, name: str, value) -> None: ...
    def set_mat4(self, name: str, value) -> None: ...


class TextureLike(Protocol):
    def bind(self, unit: int = 0) -> None: ...
    def unbind(self) -> None: ...


def _array(value, shape) -> np.ndarray:
    return np.array(value, dtype=float).reshape(shape)


class Material:
    """Holds uniform values and textures and uploads them when bound."""

    def __init__(self, shader: ShaderLike | None = None) -> None:
        self.shader = shader
        self._textures: dict[str, TextureLike | None] = {}
        self._floats: dict[str, float] = {}
        self._ints: dict[str, int] = {}
        self._vector2: dict[str, np.ndarray] = {}
        self._vector3: dict[str, np.ndarray] = {}
        self._vector4: dict[str, np.ndarray] = {}
        self._matrix4: dict[str, np.ndarray] = {}

    def bind(self) -> None:
        """Activate the shader, upload properties and bind textures to successive units."""
        if self.shader is None:
            return
        self.shader.use()
        self._apply_properties()
        unit = 0
        for name, texture in self._textures.items():
            if texture is not None:
                texture.bind(unit)
                self.shader.set_int(name, unit)
                unit += 1

    def unbind(self) -> None:
        for texture in self._textures.values():
            if texture is not None:
                texture.unbind()

    def set_model_matrix(self, matrix) -> None:
        if self.shader is not None:
            self.shader.set_mat4("model", matrix)

    def set_view_matrix(self, matrix) -> None:
        if self.shader is not None:
            self.shader.set_mat4("view", matrix)

    def set_projection_matrix(self, matrix) -> None:
        if self.shader is not None:
            self.shader.set_mat4("projection", matrix)

    def set_float(self, name: str, value: float) -> None:
        self._floats[name] = float(value)

    def set_int(self, name: str, value: int) -> None:
        self._ints[name] = int(value)

    def set_vector2(self, name: str, value) -> None:
        self._vector2[name] = _array(value, 2)

    def set_vector3(self, name: str, value) -> None:
        self._vector3[name] = _array(value, 3)

    def set_vector4(self, name: str, value) -> None:
        self._vector4[name] = _array(value, 4)

    def set_matrix4(self, name: str, value) -> None:
        self._matrix4[name] = _array(value, (4, 4))

    def set_texture(self, name: str, texture: TextureLike | None) -> None:
        self._textures[name] = texture

    def _apply_properties(self) -> None:
        shader = self.shader
        for name, value in self._floats.items():
            shader.set_float(name, value)
        for name, value in self._ints.items():
            shader.set_int(name, value)
        for name, value in self._vector2.items():
            shader.set_vec2(name, value.copy())
        for name, value in self._vector3.items():
            shader.set_vec3(name, value.copy())
        for name, value in self._vector4.items():
            shader.set_vec4(name, value.copy())
        for name, value in self._matrix4.items():
            shader.set_mat4(name, value.copy())