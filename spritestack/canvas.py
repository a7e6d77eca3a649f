"""An in-memory palette-indexed screen that sprites are drawn onto."""

from __future__ import annotations

import math

from spritestack.palette import Palette
from spritestack.sprite import Sprite, _angle_vector

LCD_WIDTH = 320
LCD_HEIGHT = 240
NORMAL_SCALE = 64


class Canvas:
    """A width x height grid of palette indices."""

    def __init__(self, width: int = LCD_WIDTH, height: int = LCD_HEIGHT, color: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = bytearray([color]) * (width * height)

    def fill(self, color: int) -> None:
        """Set every pixel to one color."""
        self._pixels[:] = bytes([color]) * len(self._pixels)

    def pixel(self, x: int, y: int) -> int:
        """The palette index at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self._pixels[y * self.width + x]

    def draw_sprite(self, sprite: Sprite, x: int, y: int) -> None:
        """Copy a sprite with its top-left corner at (x, y), clipped to the canvas."""
        for sy in range(sprite.height):
            dy = y + sy
            if not 0 <= dy < self.height:
                continue
            for sx in range(sprite.width):
                dx = x + sx
                if 0 <= dx < self.width:
                    self._pixels[dy * self.width + dx] = sprite.data[sy * sprite.width + sx]

    def draw_rotated_scaled(
        self,
        sprite: Sprite,
        x: int,
        y: int,
        angle: int,
        scale: int,
        transparent_color: int | None = None,
    ) -> None:
        """Draw a sprite rotated clockwise by angle/256 turns and scaled by scale/64.

        (x, y) is the top-left corner of the scaled, unrotated sprite; rotation is
        about its centre. Pixels equal to ``transparent_color`` are skipped.
        """
        if scale <= 0 or sprite.width == 0 or sprite.height == 0:
            return
        factor = scale / NORMAL_SCALE
        cos_a, sin_a = _angle_vector(angle)
        cx = x + sprite.width * factor / 2
        cy = y + sprite.height * factor / 2
        radius = math.hypot(sprite.width, sprite.height) * factor / 2
        half_w, half_h = sprite.width / 2, sprite.height / 2
        x_range = range(max(0, math.floor(cx - radius)), min(self.width, math.ceil(cx + radius) + 1))
        for dy in range(max(0, math.floor(cy - radius)), min(self.height, math.ceil(cy + radius) + 1)):
            py = dy + 0.5 - cy
            for dx in x_range:
                px = dx + 0.5 - cx
                sx = math.floor((px * cos_a + py * sin_a) / factor + half_w)
                sy = math.floor((-px * sin_a + py * cos_a) / factor + half_h)
                if not (0 <= sx < sprite.width and 0 <= sy < sprite.height):
                    continue
                color = sprite.data[sy * sprite.width + sx]
                if color != transparent_color:
                    self._pixels[dy * self.width + dx] = color

    def to_ppm(self, palette: Palette) -> bytes:
        """Render the canvas as a binary PPM image using the palette's colors."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        lookup = {index: bytes(palette.rgb(index)) for index in set(self._pixels)}
        return header + b"".join(lookup[index] for index in self._pixels)