# frames

`frames` builds 2D geometry for a renderer. You describe what to draw
(rectangles, quads, lines) and it collects the result as flat lists of
vertices and indices, grouped into draw commands by primitive type. Any
backend that draws indexed triangles or lines can consume the output.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Drawing

```python
from frames.context import Context
from frames.vector import Vec2

ctx = Context()
ctx.clear()

ctx.begin_triangles()
ctx.draw_rect(Vec2(0, 0), Vec2(1, 1))
ctx.draw_rect(Vec2(-1, -1), Vec2(0, 0))
ctx.end_triangles()

ctx.begin_lines()
ctx.draw_line(Vec2(-0.5, 0.5), Vec2(0, 0))
ctx.end_lines()

for command in ctx.commands:
    print(command.primitive, command.indices, command.vertices)
```

`begin(primitive)` (or `begin_points`, `begin_lines`, `begin_triangles`)
opens a `DrawCommand` whose index and vertex `Range`s start at the current
ends of the buffers; `end()` (or the matching `end_*` call) closes the most
recent command at the current ends. Calling `end()` with no command raises
`RuntimeError`. `clear()` empties all buffers and resets the counters.

What each call appends:

- `draw_rect(tl, br)` / `construct_rect(bl, tr)`: an axis-aligned rectangle
  spanned by two opposite corners, as a quad.
- `draw_quad(tl, tr, br, bl)` / `construct_quad(p0, p1, p2, p3)`: four
  vertices and six indices, `0 1 3` and `1 2 3` relative to the quad's first
  vertex.
- `draw_line(p1, p2)` / `construct_line(p1, p2, thickness)`: two vertices and
  two indices. The `thickness` argument is accepted but does not change the
  geometry.
- `draw_polyline(points)`: one line segment between each pair of consecutive
  points; raises `ValueError` for fewer than two points.

Every generated `Vertex` has a white colour `Vec4(1, 1, 1, 1)` and texture
coordinates `Vec2(0, 0)`.

## Text metrics

A `Context` can be given a `FontDescriptor`:

```python
from frames.context import Context
from frames.font import TextureFontDescriptor
from frames.vector import Vec2

ctx = Context(TextureFontDescriptor())
rect = ctx.draw_character(Vec2(10, 20), "A")   # Rectangle 8 x 8 at (10, 20)
rects = ctx.draw_string(Vec2(0, 0), "hi")      # one Rectangle per character
```

`draw_character` returns the rectangle a glyph would occupy and
`draw_string` returns one such rectangle per character, all placed at the
given position; neither adds vertices or indices. Both raise `RuntimeError`
when the context has no font descriptor. `TextureFontDescriptor` gives every
glyph a width and height of 8 and raises `IndexError` for characters outside
codes 0–254. `FontDescriptor` is the abstract base: subclasses supply
`character_width(c)` and `character_height()`; `character_uv()` returns the
unit rectangle by default.

## Building blocks

- `frames.vector`: immutable `Vec2`, `Vec3` (with `Vec3.from_vec2`) and `Vec4`.
- `frames.color`: `Color`, with `Color.from_hex` reading red from the lowest
  byte, then green, then blue. Alpha is read through the blue mask, so it is
  always `0.0`.
- `frames.vertex`: `Vertex` (position, colour, texture coordinates).
- `frames.primitives`: `PrimitiveType` (`NONE`, `POINTS`, `LINES`,
  `TRIANGLES`), `Rectangle` with `topleft`, `topright`, `bottomright`,
  `bottomleft`, `left`, `right`, `top`, `bottom` and `center`, plus `Circle`,
  `Line` and `Point`.
- `frames.drawlist`: `DrawList`, `DrawCommand` and `Range` (a half-open
  range whose `len()` is `end - begin`). `Context` extends `DrawList`.
- `frames.font`: `FontDescriptor` and `TextureFontDescriptor`.
- `frames.texture`: `Texture` (width, height, name; `handle()` is the
  Python `hash` of the name, so it is only stable within one process) and
  `Sprite` (a UV `Rectangle`).

## What it does not do

`frames` only builds buffers. It opens no window, compiles no shaders,
uploads nothing to a GPU and draws nothing on screen; feeding `vertices`,
`indices` and `commands` to a graphics API is left to the caller. It also
does not generate geometry for text, textures, circles, outlines or rounded
rectangles.