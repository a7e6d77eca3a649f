import pytest

from spritestack.canvas import Canvas
from spritestack.legacy import LegacyStackedObject
from spritestack.sprite import Sprite
from spritestack.zx0 import ZX0Error

# ZX0 stream holding the 1x1 sprite bytes 01 01 07.
ONE_PIXEL_ZX0 = bytes([0x75, 0x01, 0x01, 0x07, 0x55, 0x58])


def _layers(count, size=4):
    return [Sprite.filled(size, size, color + 1) for color in range(count)]


def _plain(count=3):
    obj = LegacyStackedObject()
    obj.set_sprites(_layers(count))
    return obj


def test_set_sprites_defaults():
    obj = _plain()
    assert obj.compressed is False
    assert obj.compressed_layers is None
    assert obj.scale == 64
    assert obj.angle == 255
    assert (obj.x_offset, obj.y_offset) == (0, 0)
    assert obj.length() == 3


def test_set_sprites_resets_options():
    obj = _plain()
    obj.set_scale(70)
    obj.set_offset(2, 3)
    obj.set_angle(9)
    obj.set_sprites(_layers(2))
    assert (obj.scale, obj.angle, obj.x_offset, obj.y_offset) == (64, 255, 0, 0)


def test_set_compressed_sprites():
    obj = LegacyStackedObject()
    obj.set_compressed_sprites([ONE_PIXEL_ZX0, ONE_PIXEL_ZX0], 1, 1)
    assert obj.compressed is True
    assert obj.layers is None
    assert obj.length() == 2
    assert (obj.width, obj.height) == (1, 1)
    assert obj.scale == 64


def test_compressed_size_wraps_height_to_byte():
    obj = LegacyStackedObject()
    obj.set_compressed_size(300, 256 + 7)
    assert obj.width == 300
    assert obj.height == 7


def test_length_without_layers_is_zero():
    assert LegacyStackedObject().length() == 0


def test_flip_reverses_and_round_trips():
    layers = _layers(4)
    obj = LegacyStackedObject()
    obj.set_sprites(layers)
    obj.flip()
    assert obj.layers == layers[::-1]
    obj.flip()
    assert obj.layers == layers


def test_flip_compressed():
    obj = LegacyStackedObject()
    obj.set_compressed_sprites([b"a", b"b", b"c"], 1, 1)
    obj.flip()
    assert obj.compressed_layers == [b"c", b"b", b"a"]


def test_flip_without_layers_raises():
    with pytest.raises(ValueError):
        LegacyStackedObject().flip()


def test_rotate_wraps():
    obj = _plain()
    obj.rotate(1)
    assert obj.angle == 0
    obj.set_angle(40)
    obj.rotate(256)
    assert obj.angle == 40


def test_rotate_layer_grows_layer():
    obj = _plain()
    original = obj.layers[1]
    obj.rotate_layer(0, 1)
    assert obj.layers[1].width == original.width + 2
    assert obj.layers[1].height == original.height + 2
    assert obj.layers[0] == _layers(3)[0]


def test_rotate_layer_out_of_range_is_ignored():
    obj = _plain()
    before = list(obj.layers)
    obj.rotate_layer(10, 5)
    assert obj.layers == before


def test_rotate_layer_errors():
    obj = _plain()
    with pytest.raises(IndexError):
        obj.rotate_layer(0, -1)
    compressed = LegacyStackedObject()
    compressed.set_compressed_sprites([ONE_PIXEL_ZX0], 1, 1)
    with pytest.raises(ValueError):
        compressed.rotate_layer(0, 0)


def test_positions_use_shift():
    obj = _plain(3)
    obj.set_offset(1, 2)
    assert obj.layer_positions(10, 20) == [(10, 20), (8, 16), (6, 12)]


def test_positions_wrap_y_to_byte():
    obj = _plain(1)
    assert obj.layer_positions(5, 256 + 3) == [(5, 3)]


def test_draw_matches_single_rotated_sprite():
    obj = _plain(1)
    obj.set_angle(0)
    canvas = Canvas(40, 40)
    obj.draw(canvas, 10, 10)
    expected = Canvas(40, 40)
    expected.draw_rotated_scaled(obj.layers[0], 10, 10, 0, 64)
    assert canvas.to_ppm(_gray_palette()) == expected.to_ppm(_gray_palette())
    assert canvas.pixel(11, 11) == 1


def test_draw_transparent_skips_color():
    obj = LegacyStackedObject()
    obj.set_sprites([Sprite.filled(4, 4, 2)])
    obj.set_angle(0)
    canvas = Canvas(20, 20, color=5)
    obj.draw_transparent(canvas, 4, 4, transparent_color=2)
    assert canvas.pixel(5, 5) == 5


def test_plain_draw_ignored_when_compressed():
    obj = LegacyStackedObject()
    obj.set_compressed_sprites([ONE_PIXEL_ZX0], 1, 1)
    canvas = Canvas(10, 10)
    obj.draw(canvas, 2, 2)
    obj.draw_transparent(canvas, 2, 2)
    assert all(canvas.pixel(x, y) == 0 for x in range(10) for y in range(10))


def test_draw_compressed():
    obj = LegacyStackedObject()
    obj.set_compressed_sprites([ONE_PIXEL_ZX0], 1, 1)
    obj.set_angle(0)
    canvas = Canvas(10, 10)
    obj.draw_compressed(canvas, 5, 5)
    expected = Canvas(10, 10)
    expected.draw_rotated_scaled(Sprite(1, 1, b"\x07"), 5, 5, 0, 64)
    assert canvas.pixel(5, 5) == expected.pixel(5, 5) == 7


def test_draw_compressed_transparent_skips_color():
    obj = LegacyStackedObject()
    obj.set_compressed_sprites([ONE_PIXEL_ZX0], 1, 1)
    obj.set_angle(0)
    canvas = Canvas(10, 10, color=3)
    obj.draw_compressed_transparent(canvas, 5, 5, transparent_color=7)
    assert canvas.pixel(5, 5) == 3


def test_compressed_draw_ignored_for_plain():
    obj = _plain(1)
    obj.set_angle(0)
    canvas = Canvas(10, 10)
    obj.draw_compressed(canvas, 2, 2)
    obj.draw_compressed_transparent(canvas, 2, 2)
    assert all(canvas.pixel(x, y) == 0 for x in range(10) for y in range(10))


def test_draw_compressed_bad_stream_raises():
    obj = LegacyStackedObject()
    obj.set_compressed_sprites([b"\x00"], 1, 1)
    with pytest.raises(ZX0Error):
        obj.draw_compressed(Canvas(10, 10), 0, 0)


def _gray_palette():
    from spritestack.palette import Palette

    return Palette(tuple(range(8)))