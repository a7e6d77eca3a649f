"""The earlier stacking model: no padding or size tracking, offsets as bit shifts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from spritestack.canvas import Canvas
from spritestack.sprite import Sprite
from spritestack.zx0 import decompress

DEFAULT_SCALE = 64
DEFAULT_ANGLE = 255
DEFAULT_OFFSET = 0


def _u8(value: int) -> int:
    return value & 0xFF


def _u16(value: int) -> int:
    return value & 0xFFFF


def _u24(value: int) -> int:
    return value & 0xFFFFFF


class LegacyStackedObject:
    """A stack of layers where layer ``i`` is shifted by ``i << offset`` pixels.

    The object is drawn with its first layer at the given position and each
    further layer moved up and to the left. Layers are either plain sprites or
    ZX0-compressed sprites of one size, one kind at a time.
    """

    def __init__(self) -> None:
        self.layers: list[Sprite] | None = None
        self.compressed_layers: list[bytes] | None = None
        self.compressed = False
        self.width = 0
        self.height = 0
        self.x_offset = DEFAULT_OFFSET
        self.y_offset = DEFAULT_OFFSET
        self.scale = DEFAULT_SCALE
        self.angle = DEFAULT_ANGLE

    # Setting layers

    def set_sprites(self, sprites: Iterable[Sprite]) -> None:
        """Use plain sprites as layers and reset scale, offset and angle."""
        self.compressed = False
        self.layers = list(sprites)
        self.compressed_layers = None
        self.set_scale(DEFAULT_SCALE)
        self.set_offset(DEFAULT_OFFSET, DEFAULT_OFFSET)
        self.set_angle(DEFAULT_ANGLE)

    def set_compressed_sprites(self, sprites: Iterable[bytes], width: int, height: int) -> None:
        """Use ZX0-compressed sprites of one size as layers and reset the display options."""
        self.compressed = True
        self.layers = None
        self.compressed_layers = [bytes(layer) for layer in sprites]
        self.set_compressed_size(width, height)
        self.set_scale(DEFAULT_SCALE)
        self.set_offset(DEFAULT_OFFSET, DEFAULT_OFFSET)
        self.set_angle(DEFAULT_ANGLE)

    # Display options

    def set_scale(self, scale: int) -> None:
        """Set the drawing scale, where 64 is the natural size."""
        self.scale = _u8(scale)

    def set_offset(self, x_offset: int, y_offset: int) -> None:
        """Set the shift exponents used to space the layers apart."""
        self.x_offset = _u8(x_offset)
        self.y_offset = _u8(y_offset)

    def set_angle(self, angle: int) -> None:
        """Set the rotation angle in 1/256ths of a turn."""
        self.angle = _u8(angle)

    def set_compressed_size(self, width: int, height: int) -> None:
        """Set the size of the sprites held in the compressed layers."""
        self.width = _u16(width)
        self.height = _u8(height)

    def length(self) -> int:
        """The number of active layers."""
        active = self.compressed_layers if self.compressed else self.layers
        return len(active) if active is not None else 0

    # Flipping and rotating

    def flip(self) -> None:
        """Reverse the order of the active layers."""
        if self.compressed:
            if self.compressed_layers is None:
                raise ValueError("the object has no compressed layers")
            self.compressed_layers = self.compressed_layers[::-1]
        else:
            if self.layers is None:
                raise ValueError("the object has no layers")
            self.layers = self.layers[::-1]

    def rotate_layer(self, angle: int, z_index: int) -> None:
        """Replace one plain layer with a copy rotated by ``angle``."""
        if self.layers is None:
            raise ValueError("only plain sprite layers can be rotated individually")
        if z_index < 0:
            raise IndexError(f"layer index {z_index} is negative")
        if z_index >= len(self.layers):
            return
        self.layers[z_index] = self.layers[z_index].rotated(_u8(angle))

    def rotate(self, angle: int) -> None:
        """Turn the whole object further by ``angle``."""
        self.angle = _u8(self.angle + angle)

    # Drawing

    def layer_positions(self, x: int, y: int) -> list[tuple[int, int]]:
        """The top-left corner of every active layer when drawn at (x, y)."""
        origin_x, origin_y = _u24(x), _u8(y)
        return [
            (origin_x - (index << self.x_offset), origin_y - (index << self.y_offset))
            for index in range(self.length())
        ]

    def _draw_layers(
        self, canvas: Canvas, layers: Iterable[Sprite], x: int, y: int, transparent_color: int | None
    ) -> None:
        for layer, (layer_x, layer_y) in zip(layers, self.layer_positions(x, y)):
            canvas.draw_rotated_scaled(layer, layer_x, layer_y, self.angle, self.scale, transparent_color)

    def _decompressed_layers(self) -> Iterator[Sprite]:
        for layer in self.compressed_layers or ():
            yield Sprite.from_bytes(decompress(layer))

    def draw(self, canvas: Canvas, x: int, y: int) -> None:
        """Draw the plain layers starting at (x, y)."""
        if self.compressed or self.layers is None:
            return
        self._draw_layers(canvas, self.layers, x, y, None)

    def draw_transparent(self, canvas: Canvas, x: int, y: int, transparent_color: int = 0) -> None:
        """Draw the plain layers, skipping pixels of ``transparent_color``."""
        if self.compressed or self.layers is None:
            return
        self._draw_layers(canvas, self.layers, x, y, transparent_color)

    def draw_compressed(self, canvas: Canvas, x: int, y: int) -> None:
        """Decompress and draw each compressed layer."""
        if not self.compressed:
            return
        self._draw_layers(canvas, self._decompressed_layers(), x, y, None)

    def draw_compressed_transparent(self, canvas: Canvas, x: int, y: int, transparent_color: int = 0) -> None:
        """Decompress and draw each compressed layer, skipping ``transparent_color``."""
        if not self.compressed:
            return
        self._draw_layers(canvas, self._decompressed_layers(), x, y, transparent_color)