"""A simple software pixel surface with the game's blitting and drawing routines."""

from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
TRANSPARENT: Color = (0, 255, 0)
"""Pure green marks pixels that are never drawn by the blending routines."""

FIXED_SHIFT = 16
FIXED_ONE = 1 << FIXED_SHIFT
"""Line coordinates are 16.16 fixed-point values."""


def _wrap_int32(value: int) -> int:
    value %= 1 << 32
    return value - (1 << 32) if value >= (1 << 31) else value


class Surface:
    """A width x height grid of RGB pixels with an optional colour key."""

    def __init__(self, width: int, height: int, fill: Color = BLACK) -> None:
        if width < 0 or height < 0:
            raise ValueError("surface size must not be negative")
        self.width = int(width)
        self.height = int(height)
        self.color_key: Color | None = None
        self._rows = [[tuple(fill)] * self.width for _ in range(self.height)]

    def contains(self, x: int, y: int) -> bool:
        """Return whether ``(x, y)`` lies on the surface."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside surface")
        return self._rows[y][x]

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside surface")
        self._rows[y][x] = tuple(color)

    def fill(self, color: Color) -> None:
        """Paint every pixel with ``color``."""
        color = tuple(color)
        self._rows = [[color] * self.width for _ in range(self.height)]

    def blit_rect(
        self,
        source: "Surface",
        dst_x: int,
        dst_y: int,
        src_x: int,
        src_y: int,
        width: int,
        height: int,
    ) -> None:
        """Copy a rectangle of ``source`` onto this surface.

        Pixels falling outside either surface are clipped, and pixels
        matching the source's colour key are left out.
        """
        key = source.color_key
        for i in range(height):
            sy, dy = src_y + i, dst_y + i
            if not (0 <= sy < source.height and 0 <= dy < self.height):
                continue
            src_row, dst_row = source._rows[sy], self._rows[dy]
            for j in range(width):
                sx, dx = src_x + j, dst_x + j
                if not (0 <= sx < source.width and 0 <= dx < self.width):
                    continue
                color = src_row[sx]
                if key is not None and color == key:
                    continue
                dst_row[dx] = color


def _blend_area(source: Surface, dest: Surface, dest_x, dest_y, src_x, src_y, width, height):
    """Yield ``(j, i)`` offsets where both source and destination are in range."""
    for i in range(height):
        if not (0 <= i + src_y < source.height and 0 <= i + dest_y < dest.height):
            continue
        for j in range(width):
            if not (0 <= j + src_x < source.width and 0 <= j + dest_x < dest.width):
                continue
            yield j, i


def rgb_blend(
    source: Surface,
    dest: Surface,
    dest_x: int,
    dest_y: int,
    src_x: int,
    src_y: int,
    width: int,
    height: int,
    red: float,
    green: float,
    blue: float,
    alpha: float,
) -> None:
    """Tint a rectangle of ``source`` and mix it onto ``dest``.

    Each channel is scaled by its factor; with ``alpha`` below 1 the
    result is mixed with the destination pixel. Channels are clamped to
    255 and transparent-green source pixels are skipped.
    """
    for j, i in _blend_area(source, dest, dest_x, dest_y, src_x, src_y, width, height):
        r1, g1, b1 = source.get_pixel(j + src_x, i + src_y)
        if (r1, g1, b1) == TRANSPARENT:
            continue
        if alpha < 1.0:
            r2, g2, b2 = dest.get_pixel(j + dest_x, i + dest_y)
            r = int(red * r1 * alpha + r2 * (1 - alpha))
            g = int(green * g1 * alpha + g2 * (1 - alpha))
            b = int(blue * b1 * alpha + b2 * (1 - alpha))
        else:
            r, g, b = int(red * r1), int(green * g1), int(blue * b1)
        dest.put_pixel(j + dest_x, i + dest_y, (min(r, 255), min(g, 255), min(b, 255)))


def mosaic_blit(
    source: Surface,
    dest: Surface,
    dest_x: int,
    dest_y: int,
    src_x: int,
    src_y: int,
    width: int,
    height: int,
    size: int,
) -> None:
    """Copy a rectangle as blocks of ``size`` pixels sharing one sampled colour.

    The block at offset 0 samples offset 1. Transparent-green samples and
    samples outside the source are skipped.
    """
    if size < 1:
        raise ValueError("mosaic size must be positive")
    for j, i in _blend_area(source, dest, dest_x, dest_y, src_x, src_y, width, height):
        tj = (j // size) * size or 1
        ti = (i // size) * size or 1
        if not source.contains(tj + src_x, ti + src_y):
            continue
        color = source.get_pixel(tj + src_x, ti + src_y)
        if color == TRANSPARENT:
            continue
        dest.put_pixel(j + dest_x, i + dest_y, color)


def _plot(surface: Surface, px: int, py: int, color: Color) -> None:
    limit_x = surface.width << FIXED_SHIFT
    limit_y = surface.height << FIXED_SHIFT
    if px < 0 or px >= limit_x or py < 0 or py >= limit_y:
        return
    surface.put_pixel(px >> FIXED_SHIFT, py >> FIXED_SHIFT, color)


def _plot_block(surface: Surface, px: int, py: int, color: Color) -> None:
    for ox in (FIXED_ONE, 0, -FIXED_ONE):
        for oy in (0, FIXED_ONE, -FIXED_ONE):
            _plot(surface, px + ox, py + oy, color)


def draw_line(surface: Surface, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
    """Draw a three-pixel-thick line between two 16.16 fixed-point points.

    Points off the surface are ignored.
    """
    wp = FIXED_ONE
    dx = abs((x2 >> FIXED_SHIFT) - (x1 >> FIXED_SHIFT)) * wp
    dy = abs((y2 >> FIXED_SHIFT) - (y1 >> FIXED_SHIFT)) * wp
    start_x, start_y = x1, y1

    # The error term is kept in 32-bit wraparound arithmetic.
    if dx > dy:
        if x1 > x2:
            step = wp if y1 > y2 else -wp
            x1, x2 = x2, x1
            y1 = y2
        else:
            step = wp if y1 < y2 else -wp
        _plot(surface, start_x, start_y, color)
        s = _wrap_int32((dx // 2) * wp)
        for _ in range((x1 >> FIXED_SHIFT) + 1, (x2 >> FIXED_SHIFT) + 1):
            x1 += wp
            s = _wrap_int32(s - dy)
            if s < 0:
                s = _wrap_int32(s + dx)
                y1 += step
            _plot_block(surface, x1, y1, color)
    else:
        if y1 > y2:
            step = wp if x1 > x2 else -wp
            y1, y2 = y2, y1
            x1 = x2
        else:
            step = wp if x1 < x2 else -wp
        _plot(surface, start_x, start_y, color)
        s = _wrap_int32((dy // 2) * wp)
        for _ in range((y1 >> FIXED_SHIFT) + 1, (y2 >> FIXED_SHIFT) + 1):
            y1 += wp
            s = _wrap_int32(s - dx)
            if s < 0:
                s = _wrap_int32(s + dy)
                x1 += step
            _plot_block(surface, x1, y1, color)