# fractview

Escape-time rendering of the Mandelbrot set, a Julia set and the Tricorn
into in-memory pixel buffers, together with the view state that pans and
zooms them in response to keys and the mouse, and a small image layer that
can load XPM pixmaps.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Rendering a fractal

```python
from fractview.config import parse_args
from fractview.mlx.image import Image
from fractview.view import ViewState

config = parse_args(["tricorn", "-zoom", "2", "-offset", "-0.5", "0.0", "-iter", "200"])
state = ViewState.from_config(config)

image = Image(800, 600)
state.render(image)
print(hex(image.get_pixel(400, 300)))
```

`parse_args` takes the arguments that follow a program name. The first one
names the fractal (`mandelbrot`, `julia` or `tricorn`; any word that begins
with one of these names is accepted). Options may follow in any order:

| Option        | Meaning                                    | Default |
|---------------|--------------------------------------------|---------|
| `-zoom Z`     | initial zoom factor                        | `1.0`   |
| `-offset X Y` | initial centre offset in the complex plane | `0 0`   |
| `-iter N`     | iteration limit used for Tricorn colouring | `100`   |

An empty argument list, an unknown fractal name or an unrecognised option
raises `fractview.config.ArgumentError`. The result is a `ViewConfig`
holding a `FractalType` and the starting view.

## Navigating

`fractview.view.ViewState` holds the fractal type, zoom, offsets and drag
state, and reacts to input given as X11 key symbols and button numbers:

- `key_press(keycode)`: arrow keys pan by 0.1 / zoom, keypad `+` / `-` zoom
  by 1.2; returns `True` for Esc, meaning "quit".
- `mouse_press(button, x, y)`: button 1 starts a drag; wheel buttons 4 and 5
  zoom by 1.1 about the pointer.
- `mouse_wheel(button, x, y)`: wheel zoom by 1.2 keeping the point under the
  pointer fixed; returns whether the button was a wheel button.
- `mouse_move(x, y)` and `mouse_release(button, x, y)`: drag the view.
- `render(image)`: draw the current fractal and clear `need_redraw`.

## Library pieces

- `fractview.fractals`: `mandelbrot_iterations`, `julia_iterations`,
  `tricorn_iterations`, `screen_to_complex`, and `render_mandelbrot`,
  `render_julia`, `render_tricorn`, which draw into an `Image` using an
  800 × 600 screen mapping and a limit of 100 iterations.
- `fractview.colors`: palettes `get_color`, `get_shifted_color`,
  `get_psychedelic_color`, and the linear helpers `scale` and `map_range`.
- `fractview.mlx.image`: `Image`, a pixel buffer with 32-bit padded rows,
  `put_pixel`, `get_pixel`, `rows` and `data_addr`.
- `fractview.mlx.xpm`: `xpm_file_to_image` and `xpm_to_image` build an
  `Image` from XPM data (transparent pixels become `0xFF000000`); malformed
  data raises `XpmError`.
- `fractview.mlx.colornames.find_color`: look up X11 colour names,
  ignoring case.
- `fractview.mlx.color.VisualFormat`: convert `0xRRGGBB` colours to pixel
  values for visuals shallower than 24 bits.

## What it does not do

The package opens no window, runs no event loop and installs no command:
it computes images and view changes only. Showing an `Image` on screen and
feeding key and mouse events to a `ViewState` is left to the calling code.