# spritestack

Sprite stacking for small paletted sprites. A stacked object is a list of
same-sized 8-bit sprite layers drawn on top of each other, each shifted by a
fixed offset, so that turning every layer together gives a pseudo-3D look.

Everything happens in memory: sprites are width × height arrays of palette
indices, drawing happens on a `Canvas`, and a `Palette` of 16-bit colours
turns a canvas into a PPM image. The package has no dependencies outside the
standard library.

## Installation

```
pip install spritestack
```

For running the tests:

```
pip install "spritestack[test]"
pytest
```

## Building blocks

- `spritestack.sprite.Sprite`: an immutable 8-bit paletted sprite, at most
  255 × 255. `Sprite.from_bytes` reads the layout width byte, height byte,
  then pixel rows, and `to_bytes` writes it back. `Sprite.filled` makes a
  solid sprite, `pixel(x, y)` reads one pixel, `padded(amount, color)`
  returns a copy centred inside a border of one colour, and `rotated(angle)`
  returns a copy turned clockwise by `angle`/256 of a turn and two pixels
  larger each way.
- `spritestack.zx0.decompress`: unpacks ZX0-compressed data; malformed or
  truncated input raises `ZX0Error` (a `ValueError`).
- `spritestack.palette`: `decode_color` and `encode_color` convert between
  16-bit 1555 entries and `(r, g, b)` triples; `Palette.from_bytes` reads
  little-endian entries, `to_bytes` writes them, and `rgb(index)` looks one
  up.
- `spritestack.canvas.Canvas`: a grid of palette indices (320 × 240 by
  default) with `fill`, `pixel`, `draw_sprite` (plain copy, clipped),
  `draw_rotated_scaled` (angle in 1/256ths of a turn, scale where 64 is
  actual size, optional transparent colour) and `to_ppm(palette)`.
- `spritestack.assets`: `star_sprite()` returns the bundled 48 × 48 star and
  `global_palette()` the palette its indices refer to.

## Stacked objects

```python
from spritestack.assets import global_palette, star_sprite
from spritestack.canvas import Canvas
from spritestack.stack import StackedObject

obj = StackedObject()
obj.set_sprites([star_sprite()] * 9)
obj.set_scale(70)
obj.set_offset(2, 2)
obj.add_padding(5, 2)        # border of colour 2 around each layer

canvas = Canvas(320, 240)
canvas.fill(1)
obj.set_angle(32)
obj.draw_transparent(canvas, 100, 60, 2)

with open("star.ppm", "wb") as out:
    out.write(canvas.to_ppm(global_palette()))
```

After `set_sprites` an object has a scale of 64, an offset of one pixel per
layer, an angle of 255 and no padding. `width` and `height` give the area the
whole stack covers; `add_padding` updates them, and `update_size` recomputes
them after the offset or padding has been changed by hand (`set_padding`
records padding the layers already carry). `add_padding` does nothing when
the amount is zero or a padded side would pass 255.

Other operations:

- `length()`: number of active layers.
- `flip()`: reverse the layer order.
- `rotate(angle)`: add to the drawing angle (wraps at 256).
- `rotate_layer(angle, z_index)`: replace one plain layer with a rotated copy.
- `set_compressed_sprites(layers, width, height)` with `draw_compressed` and
  `draw_compressed_transparent`: keep the layers ZX0-compressed (each one
  holding a sprite in the `Sprite.from_bytes` layout) and unpack each only
  while it is drawn. Compressed layers cannot be padded or rotated one by one.

`spritestack.legacy.LegacyStackedObject` keeps the older stacking rule: no
padding or size tracking, a default offset of 0, and layer *i* shifted up
and left by `i << offset` pixels from the given point.
`layer_positions(x, y)` lists where each layer lands.

## Demo

The `spritestack-demo` command renders nine stacked star layers at scale 70,
turning one step per frame, on a 320 × 240 canvas filled with colour 1 and
with colour 2 transparent:

```
spritestack-demo --frames 16 --directory out --prefix star
```

It writes `star000.ppm`, `star001.ppm`, … into `out`. The defaults are one
frame, the current directory and the prefix `frame`. In code,
`spritestack.demo.render_frames(count, width, height)` yields the canvases
and `build_star_object(layers, scale)` builds the object.

## What it does not do

The package does not open a window or drive a display, and it has no
interactive loop or key handling: frames are only written as PPM files. It
can unpack ZX0 data but cannot compress it.