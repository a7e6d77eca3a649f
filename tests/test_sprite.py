import pytest

from spritestack.sprite import Sprite


def _gradient(width, height):
    return Sprite(width, height, bytes(i % 256 for i in range(width * height)))


def test_from_bytes_reads_header_and_pixels():
    sprite = Sprite.from_bytes(bytes([2, 3]) + bytes(range(6)))
    assert (sprite.width, sprite.height) == (2, 3)
    assert sprite.pixel(1, 2) == 5
    assert sprite.pixel(0, 1) == 2


def test_round_trip_bytes():
    sprite = _gradient(20, 20)
    raw = sprite.to_bytes()
    assert len(raw) == 402
    assert raw[:2] == bytes([0x14, 0x14])
    assert Sprite.from_bytes(raw) == sprite


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        Sprite.from_bytes(bytes([4, 4, 1, 2, 3]))
    with pytest.raises(ValueError):
        Sprite.from_bytes(b"\x01")


def test_wrong_pixel_count_rejected():
    with pytest.raises(ValueError):
        Sprite(2, 2, b"abc")


def test_oversized_dimensions_rejected():
    with pytest.raises(ValueError):
        Sprite.filled(256, 1, 0)


def test_filled():
    sprite = Sprite.filled(4, 3, 7)
    assert len(sprite.data) == 12
    assert set(sprite.data) == {7}


def test_pixel_out_of_range():
    sprite = _gradient(3, 3)
    with pytest.raises(IndexError):
        sprite.pixel(3, 0)
    with pytest.raises(IndexError):
        sprite.pixel(0, -1)


def test_padding_house_sized_layer():
    # A 20x20 layer padded by 5 with color 2, as the library's own test does.
    sprite = _gradient(20, 20)
    padded = sprite.padded(5, 2)
    assert (padded.width, padded.height) == (30, 30)
    for y in range(20):
        for x in range(20):
            assert padded.pixel(x + 5, y + 5) == sprite.pixel(x, y)
    border = [padded.pixel(x, y) for y in range(30) for x in range(30)
              if not (5 <= x < 25 and 5 <= y < 25)]
    assert set(border) == {2}


def test_padding_zero_is_identity():
    sprite = _gradient(5, 4)
    assert sprite.padded(0, 9) == sprite


def test_padding_negative_rejected():
    with pytest.raises(ValueError):
        _gradient(2, 2).padded(-1, 0)


def test_padding_beyond_limit_rejected():
    with pytest.raises(ValueError):
        Sprite.filled(250, 1, 0).padded(5, 0)


def test_rotate_zero_keeps_pixels_in_larger_frame():
    sprite = _gradient(4, 3)
    rotated = sprite.rotated(0)
    assert (rotated.width, rotated.height) == (6, 5)
    for y in range(3):
        for x in range(4):
            assert rotated.pixel(x + 1, y + 1) == sprite.pixel(x, y)
    ring = [rotated.pixel(x, y) for y in range(5) for x in range(6)
            if not (1 <= x <= 4 and 1 <= y <= 3)]
    assert set(ring) == {0}


def test_rotate_half_turn_mirrors_both_axes():
    sprite = Sprite(3, 2, bytes([1, 2, 3, 4, 5, 6]))
    rotated = sprite.rotated(128)
    for y in range(2):
        for x in range(3):
            assert rotated.pixel(3 - x, 2 - y) == sprite.pixel(x, y)


def test_rotate_quarter_turn_is_clockwise():
    sprite = Sprite(3, 3, bytes(range(1, 10)))
    rotated = sprite.rotated(64)
    assert rotated.pixel(3, 1) == sprite.pixel(0, 0)
    for y in range(3):
        for x in range(3):
            assert rotated.pixel(3 - y, x + 1) == sprite.pixel(x, y)


def test_rotate_full_turn_wraps():
    sprite = _gradient(5, 4)
    assert sprite.rotated(256) == sprite.rotated(0)