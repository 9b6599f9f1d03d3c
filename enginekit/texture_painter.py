"""Layered RGBA texture painting with a soft round brush."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable

import numpy as np


class BlendMode(enum.IntEnum):
    NORMAL = 0
    MULTIPLY = 1
    ADD = 2


@dataclass
class PaintLayer:
    """One paintable RGBA layer stored as a (height, width, 4) uint8 array."""

    pixels: np.ndarray
    visible: bool = True
    opacity: float = 1.0
    blend_mode: int = BlendMode.NORMAL


def blend_colors(src, dst, blend_mode) -> np.ndarray:
    """Blend RGBA colours in [0, 1]; works on single colours or arrays of them.

    Unknown blend modes return ``src`` unchanged.
    """
    src = np.asarray(src, dtype=float)
    dst = np.asarray(dst, dtype=float)
    try:
        mode = BlendMode(blend_mode)
    except ValueError:
        return src.copy()

    src_rgb, src_a = src[..., :3], src[..., 3:]
    dst_rgb, dst_a = dst[..., :3], dst[..., 3:]
    if mode is BlendMode.NORMAL:
        rgb = src_rgb * src_a + dst_rgb * (1.0 - src_a)
        alpha = src_a + dst_a * (1.0 - src_a)
    elif mode is BlendMode.MULTIPLY:
        rgb = src_rgb * dst_rgb
        alpha = src_a * dst_a
    else:
        rgb = np.minimum(src_rgb + dst_rgb, 1.0)
        alpha = np.minimum(src_a + dst_a, 1.0)
    return np.concatenate([rgb, alpha], axis=-1)


def _to_bytes(colors: np.ndarray) -> np.ndarray:
    return np.clip(np.trunc(colors * 255.0), 0, 255).astype(np.uint8)


@dataclass
class TexturePainter:
    """Paints into layers of a fixed-size texture and composites them."""

    width: int
    height: int
    brush_radius: float = 10.0
    brush_hardness: float = 0.5
    layers: list[PaintLayer] = field(default_factory=list)
    final: np.ndarray | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")

    def add_layer(
        self,
        visible: bool = True,
        opacity: float = 1.0,
        blend_mode: int = BlendMode.NORMAL,
    ) -> PaintLayer:
        """Append a transparent black layer and return it."""
        layer = PaintLayer(
            np.zeros((self.height, self.width, 4), dtype=np.uint8),
            visible,
            opacity,
            blend_mode,
        )
        self.layers.append(layer)
        return layer

    def brush_strength(self, distance: float) -> float:
        """Brush falloff at ``distance`` pixels from the brush centre."""
        if distance >= self.brush_radius:
            return 0.0
        normalized = distance / self.brush_radius
        if self.brush_hardness > 0.99:
            falloff = 1.0 if normalized < 0.99 else 0.0
        else:
            falloff = 1.0 - normalized ** (1.0 / (1.0 - self.brush_hardness))
        return min(max(falloff, 0.0), 1.0)

    def apply_brush(self, uv, operation: Callable[[int, int, float], None]) -> None:
        """Call ``operation(x, y, strength)`` for every pixel the brush touches at ``uv``."""
        center_x = int(uv[0] * self.width)
        center_y = int(uv[1] * self.height)
        reach = int(self.brush_radius)
        min_x = max(0, center_x - reach)
        max_x = min(self.width - 1, center_x + reach)
        min_y = max(0, center_y - reach)
        max_y = min(self.height - 1, center_y + reach)

        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                strength = self.brush_strength(math.hypot(x - center_x, y - center_y))
                if strength > 0.0:
                    operation(x, y, strength)

    def _layer(self, layer_index: int) -> PaintLayer | None:
        if 0 <= layer_index < len(self.layers):
            return self.layers[layer_index]
        return None

    def _check_pixel(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the texture")

    def get_pixel(self, layer_index: int, x: int, y: int) -> np.ndarray:
        """RGBA colour in [0, 1]; zeros for an unknown layer."""
        layer = self._layer(layer_index)
        if layer is None:
            return np.zeros(4)
        self._check_pixel(x, y)
        return layer.pixels[y, x].astype(float) / 255.0

    def set_pixel(self, layer_index: int, x: int, y: int, color) -> None:
        """Store an RGBA colour in [0, 1]; unknown layers are ignored."""
        layer = self._layer(layer_index)
        if layer is None:
            return
        self._check_pixel(x, y)
        layer.pixels[y, x] = _to_bytes(np.asarray(color, dtype=float).reshape(4))

    def composite(self) -> np.ndarray:
        """Blend all visible layers in order into ``final`` and return it."""
        result = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        for layer in self.layers:
            if not layer.visible:
                continue
            src = layer.pixels.astype(float) / 255.0
            src[..., 3] *= layer.opacity
            dst = result.astype(float) / 255.0
            result = _to_bytes(blend_colors(src, dst, layer.blend_mode))
        self.final = result
        return result