# flaggame

The engine side of a small 2D action game, written in pure Python with no
dependencies outside the standard library. It is a library: you import its
modules and drive them from your own loop.

## What it provides

- **`flaggame.config`**
  - `get_config(path, name)` finds the first line of a text file that mentions
    `name`. It returns the decimal digits after the `=` on that line as an
    integer.
  - It returns 0 in these cases: the file is missing, no line matches, the line
    has no `=`, or the value does not start with a digit or `-`.
  - A value starting with `-` also yields 0.
  - `append_log(path, text)` appends text to a file and ignores failures to
    open it.
- **`flaggame.mathutil`**
  - `rand_below(limit, rng=None)` returns a random integer in
    `[0, abs(limit))`, or 0 for a limit of 0.
  - `two_digits(value, step)` takes two decimal digits of `value` starting at
    unit `step`. Division truncates toward zero.
  - `distance(a, b)` is the integer square root of `a*a + b*b`.
- **`flaggame.text`**
  - `numeric_glyphs(...)` lays out the digits of a number as `GlyphBlit`
    rectangles taken from a font sheet.
  - `text_glyphs(...)` does the same for a string, using the glyph order in
    `GLYPH_ORDER`.
- **`flaggame.surface`**
  - `Surface` is a grid of RGB tuples with an optional `color_key`. It has
    `get_pixel`, `put_pixel`, `fill` and a clipped `blit_rect`.
  - `rgb_blend` tints a rectangle and blends it with the destination.
  - `mosaic_blit` pixelates a rectangle.
  - `draw_line` draws a three-pixel-thick line between 16.16 fixed-point
    points.
  - Pure green `(0, 255, 0)` (`TRANSPARENT`) is never drawn by the blending
    and mosaic routines.
- **`flaggame.keys`**
  - `Pad` holds the raw controller bit masks and `Button` lists the logical
    buttons.
  - `pad_to_buttons(pad)` maps a bit mask to a set of buttons.
  - `KeyState.update(pressed)` records the buttons held each frame. It
    supports `is_pressed` (held) and `is_pushed` (newly down this frame).
  - `adjust_volume(volume, delta, maximum)` changes a volume and keeps it
    between 0 and `maximum`.
- **`flaggame.render`**
  - `Renderer` keeps numbered bitmap slots and draws them onto a screen
    `Surface`.
  - It has `blt`, `blt_rect` and `blt_glyphs`.
  - `blt_function` draws with tint, alpha, mirroring (`flip` 1, 2 or 3) and a
    mosaic set by `set_mosaic`.
  - `set_offset` shifts every following draw.
- **`flaggame.scenes`**
  - `SceneManager` runs `Scene` objects through `leave`/`enter`/`update`/`draw`.
  - `step(debug_mode, frame_count)` runs one frame and returns False once the
    current scene name is not one it knows.
  - `DebugMode` controls the speed:
    - `PAUSE` skips updates.
    - `SLOW` updates on even frames only.
    - `FAST1` runs eight updates a frame.
- **`flaggame.menus`**
  - `LogoScene` is the opening logo and scrolling story screen. The first two
    buttons skip it to the `"title"` scene.
  - `OptionScene` pages through instructions. OK goes forward, cancel goes
    back, and leaving either end requests `"title"`.

## Example

```python
from flaggame.surface import Surface
from flaggame.render import Renderer
from flaggame.text import numeric_glyphs

screen = Surface(640, 360)
renderer = Renderer(screen)
renderer.set_bitmap(18, Surface(320, 32, fill=(255, 255, 255)))

# "42" in three digits; the leading zero is suppressed because zero=False.
glyphs = numeric_glyphs(42, 3, 100, 20, 0, 0, 32, 32, 18, False)
renderer.blt_glyphs(18, glyphs)
```

```python
from flaggame.keys import KeyState
from flaggame.scenes import SceneManager
from flaggame.menus import OptionScene

keys = KeyState()
manager = SceneManager({}, "option")
manager.scenes["option"] = OptionScene(keys, manager)
while manager.step():
    keys.update(set())  # feed the buttons held this frame
    break
```

## What it does not do

- There is no command or window. Nothing here opens a display, reads a real
  keyboard or joystick, or plays sound. Your code supplies the pixels, the
  button state and the loop.
- There is no save-data storage. No table of game flags or play-time counter
  is kept on disk.
- There is no stage-select screen and no game-play scene. The only screens
  provided are `LogoScene` and `OptionScene`.

## Installing and testing

```
pip install .[test]
pytest
```