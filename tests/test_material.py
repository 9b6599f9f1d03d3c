import numpy as np
import pytest

from enginekit.material import Material


class RecordingShader:
    def __init__(self):
        self.calls = []

    def use(self):
        self.calls.append(("use",))

    def set_float(self, name, value):
        self.calls.append(("float", name, value))

    def set_int(self, name, value):
        self.calls.append(("int", name, value))

    def set_vec2(self, name, value):
        self.calls.append(("vec2", name, tuple(value)))

    def set_vec3(self, name, value):
        self.calls.append(("vec3", name, tuple(value)))

    def set_vec4(self, name, value):
        self.calls.append(("vec4", name, tuple(value)))

    def set_mat4(self, name, value):
        self.calls.append(("mat4", name, np.asarray(value)))


class RecordingTexture:
    def __init__(self):
        self.bound_units = []
        self.unbinds = 0

    def bind(self, unit=0):
        self.bound_units.append(unit)

    def unbind(self):
        self.unbinds += 1


def test_bind_without_shader_does_nothing_to_textures():
    material = Material()
    texture = RecordingTexture()
    material.set_texture("albedoMap", texture)
    material.bind()
    assert texture.bound_units == []


def test_bind_uses_shader_then_uploads_properties_in_kind_order():
    shader = RecordingShader()
    material = Material(shader)
    material.set_vector3("material.albedo", (0.7, 0.7, 0.7))
    material.set_int("mode", 2)
    material.set_float("material.roughness", 0.5)
    material.bind()
    assert shader.calls == [
        ("use",),
        ("float", "material.roughness", 0.5),
        ("int", "mode", 2),
        ("vec3", "material.albedo", (0.7, 0.7, 0.7)),
    ]


def test_textures_bound_to_successive_units_skipping_missing():
    shader = RecordingShader()
    material = Material(shader)
    first, second = RecordingTexture(), RecordingTexture()
    material.set_texture("albedoMap", first)
    material.set_texture("unused", None)
    material.set_texture("normalMap", second)
    material.bind()
    assert first.bound_units == [0]
    assert second.bound_units == [1]
    assert ("int", "albedoMap", 0) in shader.calls
    assert ("int", "normalMap", 1) in shader.calls
    assert not any(call[1:2] == ("unused",) for call in shader.calls)


def test_unbind_releases_every_texture():
    material = Material(RecordingShader())
    textures = [RecordingTexture(), RecordingTexture()]
    material.set_texture("a", textures[0])
    material.set_texture("b", textures[1])
    material.unbind()
    assert [t.unbinds for t in textures] == [1, 1]


@pytest.mark.parametrize(
    "method, uniform",
    [
        ("set_model_matrix", "model"),
        ("set_view_matrix", "view"),
        ("set_projection_matrix", "projection"),
    ],
)
def test_matrix_setters_upload_named_uniform(method, uniform):
    shader = RecordingShader()
    material = Material(shader)
    getattr(material, method)(np.eye(4) * 2.0)
    kind, name, value = shader.calls[-1]
    assert (kind, name) == ("mat4", uniform)
    np.testing.assert_array_equal(value, np.eye(4) * 2.0)


def test_matrix_setter_without_shader_is_ignored():
    material = Material()
    material.set_model_matrix(np.eye(4))
    material.shader = RecordingShader()
    material.bind()
    assert material.shader.calls == [("use",)]


def test_later_value_replaces_earlier_one():
    shader = RecordingShader()
    material = Material(shader)
    material.set_float("material.metallic", 0.0)
    material.set_float("material.metallic", 1.0)
    material.set_matrix4("extra", np.eye(4))
    material.set_vector2("offset", (1.0, 2.0))
    material.set_vector4("tint", (1.0, 0.5, 0.25, 1.0))
    material.bind()
    floats = [c for c in shader.calls if c[0] == "float"]
    assert floats == [("float", "material.metallic", 1.0)]
    assert ("vec2", "offset", (1.0, 2.0)) in shader.calls
    assert ("vec4", "tint", (1.0, 0.5, 0.25, 1.0)) in shader.calls


def test_bad_vector_shape_rejected():
    material = Material()
    with pytest.raises(ValueError):
        material.set_vector3("bad", (1.0, 2.0))