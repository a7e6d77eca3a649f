"""Sprite stacking: drawing a pile of layers as one pseudo-3D object."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from spritestack.canvas import Canvas
from spritestack.sprite import Sprite
from spritestack.zx0 import decompress

DEFAULT_SCALE = 64
DEFAULT_ANGLE = 255
DEFAULT_OFFSET = 1
MAX_PADDED_SIDE = 255


def _u8(value: int) -> int:
    return value & 0xFF


def _u16(value: int) -> int:
    return value & 0xFFFF


def _u24(value: int) -> int:
    return value & 0xFFFFFF


class StackedObject:
    """A stack of equally sized layers drawn bottom first, each shifted by an offset.

    The layers are either plain sprites or ZX0-compressed sprites; only one kind
    is active at a time.
    """

    def __init__(self) -> None:
        self.layers: list[Sprite] | None = None
        self.compressed_layers: list[bytes] | None = None
        self.compressed = False
        self.compressed_width = 0
        self.compressed_height = 0
        self.padding = 0
        self.width = 0
        self.height = 0
        self.x_offset = 0
        self.y_offset = 0
        self.scale = DEFAULT_SCALE
        self.angle = DEFAULT_ANGLE

    # Setting layers

    def set_sprites(self, sprites: Iterable[Sprite]) -> None:
        """Use plain sprites as layers and reset scale, offset, angle and padding."""
        self.compressed = False
        self.layers = list(sprites)
        self.compressed_layers = None
        self.padding = 0
        self.set_scale(DEFAULT_SCALE)
        self.set_offset(DEFAULT_OFFSET, DEFAULT_OFFSET)
        self.set_angle(DEFAULT_ANGLE)
        self.update_size()

    def set_compressed_sprites(self, sprites: Iterable[bytes], width: int, height: int) -> None:
        """Use ZX0-compressed sprites of one size as layers and reset the display options."""
        self.compressed = True
        self.layers = None
        self.compressed_layers = [bytes(layer) for layer in sprites]
        self.padding = 0
        self.set_compressed_size(width, height)
        self.set_scale(DEFAULT_SCALE)
        self.set_offset(DEFAULT_OFFSET, DEFAULT_OFFSET)
        self.set_angle(DEFAULT_ANGLE)
        self.update_size()

    # Display options

    def set_padding(self, padding: int) -> None:
        """Record padding that the layers already carry."""
        self.padding = _u8(padding)

    def add_padding(self, amount: int, color: int) -> None:
        """Surround every layer with ``amount`` pixels of ``color`` for cleaner rotation.

        Nothing happens when no layers are set, when ``amount`` is zero, or when a
        layer side plus ``amount`` would exceed 255.
        """
        if self.layers is None and self.compressed_layers is None:
            return
        if self.layers is None:
            raise ValueError("compressed layers cannot be padded")
        if not self.layers:
            raise ValueError("the object has no layers")
        first = self.layers[0]
        if first.width + amount > MAX_PADDED_SIDE or first.height + amount > MAX_PADDED_SIDE or amount == 0:
            return
        self.padding = _u8(amount)
        self.layers = [layer.padded(amount, color) for layer in self.layers]
        self.update_size()

    def update_size(self) -> None:
        """Recompute the object's overall width and height from its layers."""
        count = self.length()
        if count == 0:
            raise ValueError("the object has no layers")
        if self.compressed:
            layer_width, layer_height = self.compressed_width, self.compressed_height
        else:
            layer_width, layer_height = self.layers[0].width, self.layers[0].height
        self.width = _u16(layer_width - self.padding + count * self.x_offset)
        self.height = _u8(layer_height - self.padding + count * self.y_offset)

    def set_scale(self, scale: int) -> None:
        """Set the drawing scale, where 64 is the natural size."""
        self.scale = _u8(scale)

    def set_offset(self, x_offset: int, y_offset: int) -> None:
        """Set how far each layer is shifted from the one below it."""
        self.x_offset = _u8(x_offset)
        self.y_offset = _u8(y_offset)

    def set_angle(self, angle: int) -> None:
        """Set the rotation angle in 1/256ths of a turn."""
        self.angle = _u8(angle)

    def set_compressed_size(self, width: int, height: int) -> None:
        """Set the size of the sprites held in the compressed layers."""
        self.compressed_width = _u16(width)
        self.compressed_height = _u8(height)

    def length(self) -> int:
        """The number of active layers."""
        active = self.compressed_layers if self.compressed else self.layers
        return len(active) if active is not None else 0

    # Flipping and rotating

    def flip(self) -> None:
        """Reverse the order of the active layers."""
        if self.layers is None and self.compressed_layers is None:
            return
        if self.compressed:
            self.compressed_layers = self.compressed_layers[::-1]
        else:
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

    def _positions(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        count = self.length()
        origin_x = _u24(x + count * self.x_offset - self.padding)
        origin_y = _u8(y + count * self.y_offset - self.padding)
        for index in range(count):
            yield origin_x - index * self.x_offset, origin_y - index * self.y_offset

    def _draw_layers(self, canvas: Canvas, layers: Iterable[Sprite], x: int, y: int, transparent_color: int | None) -> None:
        for layer, (layer_x, layer_y) in zip(layers, self._positions(x, y)):
            canvas.draw_rotated_scaled(layer, layer_x, layer_y, self.angle, self.scale, transparent_color)

    def _decompressed_layers(self) -> Iterator[Sprite]:
        for layer in self.compressed_layers:
            yield Sprite.from_bytes(decompress(layer))

    def draw(self, canvas: Canvas, x: int, y: int) -> None:
        """Draw the plain layers with the object's top-left corner at (x, y)."""
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
        if not self.compressed or self.compressed_layers is None:
            return
        self._draw_layers(canvas, self._decompressed_layers(), x, y, None)

    def draw_compressed_transparent(self, canvas: Canvas, x: int, y: int, transparent_color: int = 0) -> None:
        """Decompress and draw each compressed layer, skipping ``transparent_color``."""
        if not self.compressed or self.compressed_layers is None:
            return
        self._draw_layers(canvas, self._decompressed_layers(), x, y, transparent_color)