"""Layout of glyphs taken from a font sheet for numbers and text."""

from __future__ import annotations

from dataclasses import dataclass

GLYPH_ORDER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ.()[]#$%'\"!?+-*/=:oxst0123456789"


@dataclass(frozen=True)
class GlyphBlit:
    """One rectangle copied from the font sheet to the screen."""

    dst_x: int
    dst_y: int
    src_x: int
    src_y: int
    width: int
    height: int


def numeric_glyphs(
    value: int,
    length: int,
    x: int,
    y: int,
    origin_x: int,
    origin_y: int,
    glyph_width: int,
    glyph_height: int,
    spacing: int,
    zero: bool,
) -> list[GlyphBlit]:
    """Lay out the last ``length`` decimal digits of ``value``.

    The sign is dropped. Leading zeros are skipped unless ``zero`` is
    true; the units digit is always shown. Digits are read from the
    sheet row at ``origin_y``, ten glyphs side by side.
    """
    value = abs(int(value))
    show = bool(zero)
    blits: list[GlyphBlit] = []
    divisor = 10 ** (length - 1) if length > 0 else 1
    for _ in range(max(length, 0)):
        digit = value // divisor
        value -= digit * divisor
        digit %= 10
        if digit != 0 or divisor == 1:
            show = True
        if show:
            blits.append(
                GlyphBlit(
                    x, y, origin_x + glyph_width * digit, origin_y, glyph_width, glyph_height
                )
            )
            x += spacing
        divisor //= 10
    return blits


def text_glyphs(
    text: str,
    per_row: int,
    x: int,
    y: int,
    origin_x: int,
    origin_y: int,
    glyph_width: int,
    glyph_height: int,
    spacing: int,
    scale: int,
) -> list[GlyphBlit]:
    """Lay out ``text`` using the glyph order of the font sheet.

    The sheet holds ``per_row`` glyphs in each row. Characters missing
    from the sheet are skipped but still take up their place.
    """
    if per_row <= 0:
        raise ValueError("per_row must be positive")
    blits: list[GlyphBlit] = []
    for position, char in enumerate(text):
        index = GLYPH_ORDER.find(char)
        if index < 0:
            continue
        column, row = index % per_row, index // per_row
        blits.append(
            GlyphBlit(
                x + spacing * scale * position,
                y,
                origin_x + glyph_width * column,
                origin_y + glyph_height * row,
                glyph_width,
                glyph_height,
            )
        )
    return blits