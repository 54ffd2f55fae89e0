# chartcraft

chartcraft holds the building blocks for drawing charts: colours and
shape styles, relative sizes, font and text descriptions, drawable
elements, and data series that turn data into elements. It has no
dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Colours and styles (`chartcraft.style`)

```python
from chartcraft.style import RGBColor, HSLColor, PALETTE99

red = RGBColor(255, 0, 0)
half_red = red.mix(0.5)          # RGBAColor(255, 0, 0, 0.5)
fill = red.filled()              # a filled ShapeStyle
thick = red.stroke_width(5)      # a ShapeStyle with a 5-pixel stroke

HSLColor(0.0, 1.0, 0.5).rgb()    # (255, 0, 0)
PALETTE99.pick(21).rgb()         # indices wrap: same as pick(0)
```

The module defines `WHITE`, `BLACK`, `RED`, `GREEN`, `BLUE`, `YELLOW`,
`CYAN`, `MAGENTA` and `TRANSPARENT`, and the palettes `PALETTE99`,
`PALETTE9999` and `PALETTE100`. `into_shape_style` turns a colour or a
`ShapeStyle` into a `ShapeStyle`.

## Relative sizes (`chartcraft.size`)

A size is either a plain integer number of pixels or a size measured
against a parent's `(width, height)`:

```python
from chartcraft.size import percent, percent_width, percent_height

percent_height(10).in_pixels((100, 200))         # 20
percent_width(10).min(30).in_pixels((100, 200))  # 30
percent(10).in_pixels((400, 200))                # 20
```

`in_pixels(size, parent)` resolves either kind. A parent may be a pair,
or an object with a `dim`, `dim_in_pixel` or `get_size` method.

## Fonts and text styles

`chartcraft.font` describes fonts with `FontDesc`, `FontFamily`,
`FontStyle` and `FontTransform`. `into_font` accepts a `FontDesc`, a
family, a name, or a `(family, size[, style])` tuple.
`chartcraft.text_style` pairs a font with a colour in `TextStyle`.

## Elements

Each element reports its key points in guest coordinates through
`points()`. It draws itself with `draw(points, backend, parent_dim)`,
where `points` are those key points already mapped to pixels. The
elements are:

- `chartcraft.shapes`: `Pixel`, `Path`, `Rectangle`, `Circle`, `Polygon`
- `chartcraft.markers`: `Cross`, `TriangleMarker`
- `chartcraft.bars`: `CandleStick`, `ErrorBar`, `error_bar_vertical`,
  `error_bar_horizontal`
- `chartcraft.text`: `Text`, `MultiLineText`, `multiline_from_str`
- `chartcraft.bitmap`: `BitMapElement`, which holds an RGB bitmap with
  three bytes per pixel

`chartcraft.element.into_dyn` wraps any element in a `DynElement`, so
that elements of different kinds can sit in one series.

### The backend

You supply the backend. It is any object with the methods that the
elements you draw call on it:

- `draw_pixel(point, color)`
- `draw_line(start, end, color)`
- `draw_path(points, style)`
- `draw_rect(upper_left, lower_right, style_or_color, filled)`
- `draw_circle(center, radius, style_or_color, filled)`
- `fill_polygon(points, color)`
- `draw_text(text, font, pos, color)`
- `blit_bitmap(pos, size, data)`

### Composition

`chartcraft.composable` groups elements around an anchor. Start from an
`EmptyElement` and add parts with `+`. The parts are placed at pixel
offsets from the anchor:

```python
from chartcraft.composable import EmptyElement
from chartcraft.shapes import Circle
from chartcraft.style import BLACK
from chartcraft.text import Text

class Recorder:
    def __init__(self):
        self.calls = []

    def draw_circle(self, center, radius, style, filled):
        self.calls.append(("circle", center, radius, filled))

    def draw_text(self, text, font, pos, color):
        self.calls.append(("text", text, pos))

marker = (
    EmptyElement((100, 100))
    + Circle((0, 0), 3, BLACK.filled())
    + Text("label", (10, 0), ("sans-serif", 15))
)
backend = Recorder()
marker.draw(marker.points(), backend, (640, 480))
# [("circle", (100, 100), 3, True), ("text", "label", (110, 100))]
```

## Series (`chartcraft.series`)

- `LineSeries(data, style)` yields one `Path` through all of its points.
- `PointSeries(data, size, style, marker=Circle)` yields one marker for
  each point. `PointSeries.of_element(data, size, style, make_point)`
  builds each marker with `make_point(coord, size, style)`.
- `AreaSeries(data, baseline, area_style)` yields a filled `Polygon`
  that closes down to the baseline, then its border `Path`. The border
  is transparent unless you set it with `border_style`.
- `Histogram(data, margin=5, style=None, horizontal=False, next_value=...)`
  adds up the values that share a key and yields one `Rectangle` bar per
  key. The default style is filled green, and the default baseline is 0.
  You can change them with `style`, `baseline`, `margin` and `data`.

## Notebooks (`chartcraft.notebook`)

`SVGWrapper(content, css="")` wraps SVG output. Its `repr` is an HTML
`<div>` between the `EVCXR_BEGIN_CONTENT text/html` and
`EVCXR_END_CONTENT` markers, and `evcxr_display()` prints that text.
`_repr_html_` returns the bare `<div>`. `style(css)` returns a copy with
another container style.

## What the package does not do

- It does not render anything. There is no bitmap, SVG or other backend
  included, so the SVG that `SVGWrapper` shows has to come from
  elsewhere.
- There is no chart builder, axis, mesh or coordinate mapping. You map
  guest coordinates to pixels yourself before you call `draw`.
- Fonts are not loaded from the system. `FontData` estimates text boxes
  from the font size and fixed width ratios: monospace is wider, and
  bold is widened. It does not rasterise glyphs.