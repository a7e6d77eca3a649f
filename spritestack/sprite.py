"""Palette-indexed sprites stored in the width/height/pixels layout."""

from __future__ import annotations

import math
from dataclasses import dataclass

FULL_TURN = 256
MAX_DIMENSION = 255


def _angle_vector(angle: int) -> tuple[float, float]:
    """Return (cos, sin) for an angle measured in 1/256ths of a turn."""
    theta = (angle % FULL_TURN) * 2 * math.pi / FULL_TURN
    return round(math.cos(theta), 12), round(math.sin(theta), 12)


@dataclass(frozen=True)
class Sprite:
    """An immutable sprite: one palette index per pixel, row by row."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if not (0 <= self.width <= MAX_DIMENSION and 0 <= self.height <= MAX_DIMENSION):
            raise ValueError(
                f"sprite dimensions {self.width}x{self.height} must be within 0..{MAX_DIMENSION}"
            )
        data = bytes(self.data)
        if len(data) != self.width * self.height:
            raise ValueError(
                f"sprite of {self.width}x{self.height} needs {self.width * self.height} "
                f"pixels, got {len(data)}"
            )
        object.__setattr__(self, "data", data)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Sprite:
        """Read a sprite from its width byte, height byte and pixel bytes."""
        if len(raw) < 2:
            raise ValueError("sprite data is missing its width and height")
        width, height = raw[0], raw[1]
        size = width * height
        pixels = raw[2 : 2 + size]
        if len(pixels) < size:
            raise ValueError(f"sprite data holds {len(pixels)} of {size} pixels")
        return cls(width, height, pixels)

    def to_bytes(self) -> bytes:
        """Serialise as width byte, height byte and pixel bytes."""
        return bytes((self.width, self.height)) + self.data

    @classmethod
    def filled(cls, width: int, height: int, color: int) -> Sprite:
        """A sprite with every pixel set to one color."""
        return cls(width, height, bytes([color]) * (width * height))

    def pixel(self, x: int, y: int) -> int:
        """The palette index at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} sprite")
        return self.data[y * self.width + x]

    def padded(self, amount: int, color: int) -> Sprite:
        """A copy centred in a border of ``amount`` pixels of ``color`` on every side."""
        if amount < 0:
            raise ValueError("padding amount must not be negative")
        padded_width = self.width + 2 * amount
        padded_height = self.height + 2 * amount
        pixels = bytearray([color]) * (padded_width * padded_height)
        for y in range(self.height):
            start = (y + amount) * padded_width + amount
            pixels[start : start + self.width] = self.data[y * self.width : (y + 1) * self.width]
        return Sprite(padded_width, padded_height, bytes(pixels))

    def rotated(self, angle: int) -> Sprite:
        """A copy rotated clockwise by ``angle``/256 of a turn, two pixels larger each way."""
        cos_a, sin_a = _angle_vector(angle)
        out_width, out_height = self.width + 2, self.height + 2
        pixels = bytearray(out_width * out_height)
        half_w, half_h = self.width / 2, self.height / 2
        for dy in range(out_height):
            py = dy + 0.5 - out_height / 2
            for dx in range(out_width):
                px = dx + 0.5 - out_width / 2
                sx = math.floor(px * cos_a + py * sin_a + half_w)
                sy = math.floor(-px * sin_a + py * cos_a + half_h)
                if 0 <= sx < self.width and 0 <= sy < self.height:
                    pixels[dy * out_width + dx] = self.data[sy * self.width + sx]
        return Sprite(out_width, out_height, bytes(pixels))