"""Decompressor for ZX0 (version 2) compressed data."""

from __future__ import annotations


class ZX0Error(ValueError):
    """Raised when a ZX0 stream is malformed or truncated."""


_END_MARKER = 256


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._index = 0
        self._last_byte = 0
        self._bit_mask = 0
        self._bit_value = 0
        self.backtrack = False

    def byte(self) -> int:
        if self._index >= len(self._data):
            raise ZX0Error("compressed data ended unexpectedly")
        self._last_byte = self._data[self._index]
        self._index += 1
        return self._last_byte

    def bit(self) -> int:
        if self.backtrack:
            self.backtrack = False
            return self._last_byte & 1
        self._bit_mask >>= 1
        if self._bit_mask == 0:
            self._bit_mask = 0x80
            self._bit_value = self.byte()
        return 1 if self._bit_value & self._bit_mask else 0

    def elias_gamma(self, inverted: bool = False) -> int:
        value = 1
        flip = 1 if inverted else 0
        while not self.bit():
            value = (value << 1) | (self.bit() ^ flip)
        return value


def _copy_match(output: bytearray, offset: int, length: int) -> None:
    if offset < 1 or offset > len(output):
        raise ZX0Error(f"match offset {offset} reaches before the start of the output")
    for _ in range(length):
        output.append(output[-offset])


def decompress(data: bytes) -> bytes:
    """Decompress a ZX0 stream and return the original bytes."""
    reader = _Reader(bytes(data))
    output = bytearray()
    last_offset = 1
    state = "literals"
    while True:
        if state == "literals":
            for _ in range(reader.elias_gamma()):
                output.append(reader.byte())
            state = "new_offset" if reader.bit() else "last_offset"
        elif state == "last_offset":
            _copy_match(output, last_offset, reader.elias_gamma())
            state = "new_offset" if reader.bit() else "literals"
        else:
            msb = reader.elias_gamma(inverted=True)
            if msb == _END_MARKER:
                return bytes(output)
            last_offset = msb * 128 - (reader.byte() >> 1)
            reader.backtrack = True
            _copy_match(output, last_offset, reader.elias_gamma() + 1)
            state = "new_offset" if reader.bit() else "literals"