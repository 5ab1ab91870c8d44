import pytest

from flaggame.render import Renderer
from flaggame.surface import BLACK, TRANSPARENT, Surface, mosaic_blit
from flaggame.text import text_glyphs

A = (10, 20, 30)
B = (40, 50, 60)
C = (70, 80, 90)
D = (100, 110, 120)


def strip():
    surf = Surface(3, 1)
    for x, color in enumerate((A, B, C)):
        surf.put_pixel(x, 0, color)
    return surf


def square():
    surf = Surface(2, 2)
    surf.put_pixel(0, 0, A)
    surf.put_pixel(1, 0, B)
    surf.put_pixel(0, 1, C)
    surf.put_pixel(1, 1, D)
    return surf


@pytest.fixture
def renderer():
    return Renderer(Surface(8, 8))


def test_blt_rect_copies_with_offset(renderer):
    renderer.set_bitmap(0, strip())
    renderer.set_offset(2, 3)
    renderer.blt_rect(0, 1, 1, 1, 0, 2, 1)
    assert renderer.screen.get_pixel(3, 4) == B
    assert renderer.screen.get_pixel(4, 4) == C
    assert renderer.screen.get_pixel(1, 1) == BLACK


def test_blt_draws_whole_bitmap(renderer):
    renderer.set_bitmap(5, square())
    renderer.blt(5, 4, 4)
    assert [renderer.screen.get_pixel(x, y) for y in (4, 5) for x in (4, 5)] == [A, B, C, D]


def test_missing_and_released_slots_draw_nothing(renderer):
    renderer.set_bitmap(1, square())
    renderer.release(1)
    renderer.release(1)
    renderer.blt(1, 0, 0)
    renderer.blt_function(1, 0, 0, 0, 0, 2, 2)
    assert 1 not in renderer
    assert renderer.screen.get_pixel(0, 0) == BLACK


def test_clear_paints_black(renderer):
    renderer.screen.fill(A)
    renderer.clear()
    assert renderer.screen.get_pixel(7, 7) == BLACK


def test_color_key_is_respected(renderer):
    surf = strip()
    surf.color_key = B
    renderer.screen.fill(D)
    renderer.set_bitmap(0, surf)
    renderer.blt(0, 0, 0)
    assert [renderer.screen.get_pixel(x, 0) for x in range(3)] == [A, D, C]


def test_blt_function_plain_copy(renderer):
    renderer.set_bitmap(0, square())
    renderer.blt_function(0, 3, 3, 0, 0, 2, 2)
    assert renderer.screen.get_pixel(3, 3) == A
    assert renderer.screen.get_pixel(4, 4) == D


def test_blt_function_horizontal_flip(renderer):
    renderer.set_bitmap(0, strip())
    renderer.blt_function(0, 0, 0, 0, 0, 3, 1, flip=1)
    assert [renderer.screen.get_pixel(x, 0) for x in range(3)] == [C, B, A]


def test_blt_function_vertical_flip(renderer):
    renderer.set_bitmap(0, square())
    renderer.blt_function(0, 0, 0, 0, 0, 2, 2, flip=2)
    assert [renderer.screen.get_pixel(x, y) for y in (0, 1) for x in (0, 1)] == [C, D, A, B]


def test_blt_function_both_flips(renderer):
    renderer.set_bitmap(0, square())
    renderer.blt_function(0, 0, 0, 0, 0, 2, 2, flip=3)
    assert [renderer.screen.get_pixel(x, y) for y in (0, 1) for x in (0, 1)] == [D, C, B, A]


def test_tint_scales_channels(renderer):
    surf = Surface(1, 1, (100, 100, 100))
    renderer.set_bitmap(0, surf)
    renderer.blt_function(0, 2, 2, 0, 0, 1, 1, red=255, green=0, blue=255)
    assert renderer.screen.get_pixel(2, 2) == (100, 0, 100)


def test_zero_alpha_keeps_destination(renderer):
    renderer.screen.fill(B)
    renderer.set_bitmap(0, Surface(2, 2, A))
    renderer.blt_function(0, 0, 0, 0, 0, 2, 2, alpha=0)
    assert renderer.screen.get_pixel(1, 1) == B


def test_tinted_draw_skips_transparent_green(renderer):
    renderer.screen.fill(C)
    renderer.set_bitmap(0, Surface(1, 1, TRANSPARENT))
    renderer.blt_function(0, 0, 0, 0, 0, 1, 1, red=128)
    assert renderer.screen.get_pixel(0, 0) == C


def test_tinted_flip_mirrors(renderer):
    renderer.set_bitmap(0, strip())
    renderer.blt_function(0, 0, 0, 0, 0, 3, 1, alpha=254, flip=1)
    plain = Renderer(Surface(8, 8))
    plain.set_bitmap(0, strip())
    plain.blt_function(0, 0, 0, 0, 0, 3, 1, alpha=254)
    assert renderer.screen.get_pixel(0, 0) == plain.screen.get_pixel(2, 0)
    assert renderer.screen.get_pixel(2, 0) == plain.screen.get_pixel(0, 0)


def test_mosaic_matches_mosaic_blit(renderer):
    source = Surface(6, 6)
    for y in range(6):
        for x in range(6):
            source.put_pixel(x, y, (x * 10, y * 10, 5))
    renderer.set_bitmap(0, source)
    renderer.set_mosaic(2)
    renderer.blt_function(0, 1, 1, 0, 0, 6, 6)
    expected = Surface(8, 8)
    mosaic_blit(source, expected, 1, 1, 0, 0, 6, 6, 2)
    assert [renderer.screen.get_pixel(x, y) for y in range(8) for x in range(8)] == [
        expected.get_pixel(x, y) for y in range(8) for x in range(8)
    ]


def test_blt_glyphs_draws_each_glyph(renderer):
    sheet = Surface(4, 1)
    sheet.put_pixel(0, 0, A)
    sheet.put_pixel(1, 0, B)
    renderer.set_bitmap(3, sheet)
    glyphs = text_glyphs("BA", 4, 0, 0, 0, 0, 1, 1, 2, 1)
    renderer.blt_glyphs(3, glyphs)
    assert renderer.screen.get_pixel(0, 0) == B
    assert renderer.screen.get_pixel(2, 0) == A