"""16-bit 1555 palettes as used by the sprite data."""

from __future__ import annotations

from dataclasses import dataclass


def _scale(value: int, source_max: int, target_max: int) -> int:
    return int(value * target_max / source_max + 0.5)


def decode_color(value: int) -> tuple[int, int, int]:
    """Convert a 16-bit palette entry to an (r, g, b) triple of 0..255."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"palette entry {value} is not a 16-bit value")
    red = (value >> 10) & 0x1F
    green = (((value >> 5) & 0x1F) << 1) | (value >> 15)
    blue = value & 0x1F
    return _scale(red, 31, 255), _scale(green, 63, 255), _scale(blue, 31, 255)


def encode_color(red: int, green: int, blue: int) -> int:
    """Convert an (r, g, b) triple of 0..255 to the nearest 16-bit palette entry."""
    for channel in (red, green, blue):
        if not 0 <= channel <= 255:
            raise ValueError(f"color channel {channel} is outside 0..255")
    r5 = _scale(red, 255, 31)
    g6 = _scale(green, 255, 63)
    b5 = _scale(blue, 255, 31)
    return (r5 << 10) | ((g6 >> 1) << 5) | ((g6 & 1) << 15) | b5


@dataclass(frozen=True)
class Palette:
    """An ordered set of 16-bit colors addressed by palette index."""

    colors: tuple[int, ...]

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        for value in colors:
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"palette entry {value} is not a 16-bit value")
        object.__setattr__(self, "colors", colors)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Palette:
        """Read little-endian 16-bit entries."""
        if len(raw) % 2:
            raise ValueError("palette data must hold an even number of bytes")
        return cls(tuple(int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)))

    def to_bytes(self) -> bytes:
        """Write the entries as little-endian 16-bit values."""
        return b"".join(value.to_bytes(2, "little") for value in self.colors)

    def rgb(self, index: int) -> tuple[int, int, int]:
        """The (r, g, b) color at a palette index."""
        if not 0 <= index < len(self.colors):
            raise IndexError(f"palette index {index} outside 0..{len(self.colors) - 1}")
        return decode_color(self.colors[index])

    def __len__(self) -> int:
        return len(self.colors)