"""Small vector, quaternion and matrix helpers built on numpy.

Matrices are 4x4 row-major arrays that act on column vectors
(``matrix @ point``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


def vec3(x, y, z) -> np.ndarray:
    """Return a three-component float vector."""
    return np.array([x, y, z], dtype=float)


def _as_vec3(vector) -> np.ndarray:
    arr = np.asarray(vector, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def normalize(vector) -> np.ndarray:
    """Return the vector scaled to unit length (NaN components for a zero vector)."""
    arr = np.asarray(vector, dtype=float)
    length = np.linalg.norm(arr)
    with np.errstate(invalid="ignore", divide="ignore"):
        return arr / length


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion with scalar part ``w``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __mul__(self, other):
        if isinstance(other, Quat):
            p, q = self, other
            return Quat(
                p.w * q.w - p.x * q.x - p.y * q.y - p.z * q.z,
                p.w * q.x + p.x * q.w + p.y * q.z - p.z * q.y,
                p.w * q.y + p.y * q.w + p.z * q.x - p.x * q.z,
                p.w * q.z + p.z * q.w + p.x * q.y - p.y * q.x,
            )
        try:
            vector = _as_vec3(other)
        except (TypeError, ValueError):
            return NotImplemented
        return self.rotate_vector(vector)

    @property
    def length(self) -> float:
        return math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Quat:
        """Return the unit quaternion; a zero quaternion becomes the identity."""
        length = self.length
        if length <= 0.0:
            return Quat()
        return Quat(self.w / length, self.x / length, self.y / length, self.z / length)

    def to_matrix(self) -> np.ndarray:
        """Return the 4x4 rotation matrix of this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        m = np.eye(4)
        m[0, 0] = 1.0 - 2.0 * (yy + zz)
        m[1, 0] = 2.0 * (xy + wz)
        m[2, 0] = 2.0 * (xz - wy)
        m[0, 1] = 2.0 * (xy - wz)
        m[1, 1] = 1.0 - 2.0 * (xx + zz)
        m[2, 1] = 2.0 * (yz + wx)
        m[0, 2] = 2.0 * (xz + wy)
        m[1, 2] = 2.0 * (yz - wx)
        m[2, 2] = 1.0 - 2.0 * (xx + yy)
        return m

    def euler_angles(self) -> np.ndarray:
        """Return (pitch, yaw, roll) in radians."""
        w, x, y, z = self.w, self.x, self.y, self.z
        py = 2.0 * (y * z + w * x)
        px = w * w - x * x - y * y + z * z
        if py == 0.0 and px == 0.0:
            pitch = 2.0 * math.atan2(x, w)
        else:
            pitch = math.atan2(py, px)
        yaw = math.asin(max(-1.0, min(1.0, -2.0 * (x * z - w * y))))
        roll = math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)
        return np.array([pitch, yaw, roll])

    def rotate_vector(self, vector) -> np.ndarray:
        """Rotate a 3-vector by this quaternion."""
        v = _as_vec3(vector)
        qv = np.array([self.x, self.y, self.z])
        uv = np.cross(qv, v)
        uuv = np.cross(qv, uv)
        return v + (uv * self.w + uuv) * 2.0


def quat_from_euler(angles) -> Quat:
    """Build a quaternion from (pitch, yaw, roll) in radians."""
    a = _as_vec3(angles)
    c = np.cos(a * 0.5)
    s = np.sin(a * 0.5)
    return Quat(
        float(c[0] * c[1] * c[2] + s[0] * s[1] * s[2]),
        float(s[0] * c[1] * c[2] - c[0] * s[1] * s[2]),
        float(c[0] * s[1] * c[2] + s[0] * c[1] * s[2]),
        float(c[0] * c[1] * s[2] - s[0] * s[1] * c[2]),
    )


def quat_from_axis_angle(angle: float, axis) -> Quat:
    """Build a quaternion rotating ``angle`` radians about ``axis``."""
    unit = normalize(_as_vec3(axis))
    s = math.sin(angle * 0.5)
    return Quat(math.cos(angle * 0.5), *(float(c) * s for c in unit))


def translation_matrix(offset) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = _as_vec3(offset)
    return m


def scale_matrix(factors) -> np.ndarray:
    f = _as_vec3(factors)
    return np.diag([f[0], f[1], f[2], 1.0])


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    """Right-handed orthographic projection mapping depth to [-1, 1]."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic bounds must not be degenerate")
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m