"""The spinning star demo: a stack of identical layers turned frame by frame."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

from spritestack.assets import global_palette, star_sprite
from spritestack.canvas import LCD_HEIGHT, LCD_WIDTH, Canvas
from spritestack.legacy import LegacyStackedObject

STAR_LAYERS = 9
DEMO_SCALE = 70
BACKGROUND_COLOR = 1
TRANSPARENT_COLOR = 2


def build_star_object(layers: int = STAR_LAYERS, scale: int = DEMO_SCALE) -> LegacyStackedObject:
    """A stacked object made of ``layers`` copies of the star sprite."""
    if layers < 0:
        raise ValueError("the number of layers must not be negative")
    stacked = LegacyStackedObject()
    stacked.set_sprites([star_sprite()] * layers)
    stacked.set_scale(scale)
    return stacked


def render_frames(count: int, width: int = LCD_WIDTH, height: int = LCD_HEIGHT) -> Iterator[Canvas]:
    """Yield ``count`` frames of the star turning one step per frame."""
    if count < 0:
        raise ValueError("the number of frames must not be negative")
    if width < 0 or height < 0:
        raise ValueError("frame dimensions must not be negative")
    return _frames(count, width, height)


def _frames(count: int, width: int, height: int) -> Iterator[Canvas]:
    stacked = build_star_object()
    for frame in range(count):
        canvas = Canvas(width, height, BACKGROUND_COLOR)
        stacked.set_angle(frame)
        stacked.draw_transparent(canvas, width // 2, height // 2, TRANSPARENT_COLOR)
        yield canvas


def main(argv: list[str] | None = None) -> int:
    """Render demo frames to PPM files."""
    parser = argparse.ArgumentParser(description="Render the spinning star demo to PPM images.")
    parser.add_argument("--frames", type=int, default=1, help="number of frames to render")
    parser.add_argument("--directory", type=Path, default=Path("."), help="where to write the images")
    parser.add_argument("--prefix", default="frame", help="file name prefix")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    palette = global_palette()
    args.directory.mkdir(parents=True, exist_ok=True)
    for index, canvas in enumerate(render_frames(args.frames)):
        (args.directory / f"{args.prefix}{index:03d}.ppm").write_bytes(canvas.to_ppm(palette))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())