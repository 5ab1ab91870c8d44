"""Drawing of loaded bitmaps onto the screen surface."""

from __future__ import annotations

from typing import Iterable, Iterator

from .surface import BLACK, Surface, mosaic_blit, rgb_blend
from .text import GlyphBlit

OPAQUE_WHITE = 0x00FFFFFF


def _flip_strips(
    x: int, y: int, tex_x: int, tex_y: int, width: int, height: int, flip: int
) -> Iterator[tuple[int, int, int, int, int, int]]:
    """Split a copy into pieces that mirror the texture as ``flip`` asks.

    ``flip`` 1 mirrors left to right, 2 top to bottom, 3 both; any other
    value copies the rectangle unchanged.
    """
    if flip == 1:
        for col in range(width):
            yield x + col, y, tex_x + (width - 1 - col), tex_y, 1, height
    elif flip == 2:
        for row in range(height):
            yield x, y + row, tex_x, tex_y + (height - 1 - row), width, 1
    elif flip == 3:
        for col in range(width):
            for row in range(height):
                yield (
                    x + col,
                    y + row,
                    tex_x + (width - 1 - col),
                    tex_y + (height - 1 - row),
                    1,
                    1,
                )
    else:
        yield x, y, tex_x, tex_y, width, height


class Renderer:
    """Holds the bitmap slots and draws them onto ``screen``."""

    def __init__(self, screen: Surface) -> None:
        self.screen = screen
        self.offset_x = 0
        self.offset_y = 0
        self.mosaic = 0
        self._bitmaps: dict[int, Surface] = {}

    def __contains__(self, index: int) -> bool:
        return index in self._bitmaps

    def set_bitmap(self, index: int, surface: Surface) -> None:
        """Place ``surface`` in slot ``index``, replacing what was there."""
        self._bitmaps[index] = surface

    def release(self, index: int) -> None:
        """Empty slot ``index``; an empty slot is left as it is."""
        self._bitmaps.pop(index, None)

    def set_offset(self, x: int, y: int) -> None:
        """Shift every following draw by ``(x, y)``."""
        self.offset_x = x
        self.offset_y = y

    def set_mosaic(self, size: int) -> None:
        """Draw through a mosaic of ``size``-pixel blocks; 0 or 1 turns it off."""
        self.mosaic = size

    def clear(self) -> None:
        """Paint the screen black."""
        self.screen.fill(BLACK)

    def blt(self, index: int, x: int, y: int) -> None:
        """Draw the whole bitmap in slot ``index`` at ``(x, y)``."""
        source = self._bitmaps.get(index)
        if source is None:
            return
        self.screen.blit_rect(
            source, x + self.offset_x, y + self.offset_y, 0, 0, source.width, source.height
        )

    def blt_rect(
        self,
        index: int,
        dst_x: int,
        dst_y: int,
        src_x: int,
        src_y: int,
        width: int,
        height: int,
    ) -> None:
        """Draw a rectangle of the bitmap in slot ``index`` at ``(dst_x, dst_y)``."""
        source = self._bitmaps.get(index)
        if source is None:
            return
        self.screen.blit_rect(
            source,
            dst_x + self.offset_x,
            dst_y + self.offset_y,
            src_x,
            src_y,
            width,
            height,
        )

    def blt_function(
        self,
        index: int,
        dst_x: int,
        dst_y: int,
        src_x: int,
        src_y: int,
        width: int,
        height: int,
        red: int = 255,
        green: int = 255,
        blue: int = 255,
        alpha: int = 255,
        flip: int = 0,
    ) -> None:
        """Draw a rectangle with tint, translucency, mirroring and mosaic.

        Colour components of 255 with full alpha copy the pixels as they
        are; otherwise each channel is scaled by ``component / 255`` and
        mixed by ``alpha / 255``.
        """
        source = self._bitmaps.get(index)
        if source is None:
            return
        ox, oy = self.offset_x, self.offset_y

        if self.mosaic > 1:
            mosaic_blit(
                source, self.screen, dst_x + ox, dst_y + oy, src_x, src_y, width, height,
                self.mosaic,
            )
            return

        bgr = (blue << 16) + (green << 8) + red
        pieces = _flip_strips(dst_x, dst_y, src_x, src_y, width, height, flip)
        if bgr != OPAQUE_WHITE or alpha < 255:
            factors = (
                (bgr & 0xFF) / 255.0,
                ((bgr >> 8) & 0xFF) / 255.0,
                ((bgr >> 16) & 0xFF) / 255.0,
                alpha / 255.0,
            )
            for x, y, tx, ty, w, h in pieces:
                rgb_blend(source, self.screen, x + ox, y + oy, tx, ty, w, h, *factors)
            return

        # Unmirrored and fully mirrored opaque copies apply the offset twice.
        extra_x, extra_y = (0, 0) if flip in (1, 2) else (ox, oy)
        for x, y, tx, ty, w, h in pieces:
            self.blt_rect(index, x + extra_x, y + extra_y, tx, ty, w, h)

    def blt_glyphs(self, index: int, glyphs: Iterable[GlyphBlit]) -> None:
        """Draw laid-out glyphs from the font sheet in slot ``index``."""
        for glyph in glyphs:
            self.blt_rect(
                index,
                glyph.dst_x,
                glyph.dst_y,
                glyph.src_x,
                glyph.src_y,
                glyph.width,
                glyph.height,
            )