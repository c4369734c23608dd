# particlebox

A small 2D particle sandbox built on pygame. Bodies are scattered at random
across a window. They fall under a constant downward acceleration of 500
pixels/s² and bounce off the bottom edge. The simulation advances in fixed
steps of 0.01 s. You can pause it, step it forwards or backwards, and scatter
the bodies again.

## Installing

```
pip install .
```

This installs the `particlebox` command and its one dependency, `pygame`.

## Running

```
particlebox [COUNT [WIDTH HEIGHT]]
```

- `COUNT` is the number of bodies. The default is 10.
- `WIDTH HEIGHT` set the window size in pixels. If either is missing, the
  window opens full screen at the display's resolution.

Arguments are read leniently, as integers taken from their leading digits.
Text with no leading number counts as 0.

Examples:

```
particlebox
particlebox 200
particlebox 50 800 1000
```

The top-right corner of the window shows the body count and a frame-rate
figure. The figure is refreshed only every 50 frames, so it does not flicker.

Text is drawn with `assets/slkscr.ttf` if that file exists relative to the
current directory. Otherwise pygame's default font is used.

## Controls

| Key         | Action                                                        |
|-------------|---------------------------------------------------------------|
| `q`         | quit                                                          |
| `Esc`       | pause or resume                                               |
| `→` (right) | while paused, advance one time step                           |
| `←` (left)  | run one time step backwards (negative `dt`), also when paused |
| `r`         | scatter all bodies again at random                            |
| `g`         | toggle the `debug` flag on `App`                              |

Closing the window also quits.

## Using it as a library

The package has these modules:

- `particlebox.vec`: the immutable vectors `Vec2` and `Vec3`.
- `particlebox.model`: `Body`, `App`, `Timer`, `TimerKind` and `rng_range`.
- `particlebox.sim`: `update`.
- `particlebox.render`: `Renderer`, `Align` and `text_offsets`.
- `particlebox.app`: `main`, `parse_args`, `Options`, `init_bodies` and
  `handle_key`.

### Vectors

```python
from particlebox.vec import Vec2, Vec3

a = Vec2(3.0, 4.0)
b = Vec2(1.0, 0.0)
a + b          # Vec2(x=4.0, y=4.0)
2 * a          # Vec2(x=6.0, y=8.0)
a.dot(b)       # 3.0
a.mag()        # 25.0 (the squared length)
a.proj(b)      # Vec2(x=3.0, y=0.0)

Vec3(1, 0, 0).cross(Vec3(0, 1, 0))   # Vec3(x=0, y=0, z=1)
```

Projecting onto a zero vector raises `ZeroDivisionError`.

### Stepping bodies without a window

Create the bodies with `init_bodies`. Then call `update` once per step. It
moves the first `app.obj_count` bodies in place.

```python
import random

from particlebox.app import init_bodies
from particlebox.model import App
from particlebox.sim import update

app = App(obj_count=5)
bodies = init_bodies(app.obj_count, 800, 600, random.Random(1))
for _ in range(100):
    update(app, bodies, 0.01, 600)
```

`rng_range(low, high, rng)` returns a random integer in the inclusive range
`[low, high]`. It raises `ValueError` when the range is empty.

### Command-line parsing and keys

`parse_args(["50", "800", "1000"])` returns
`Options(obj_count=50, width=800, height=1000)`. Its `fullscreen` property is
true when no size was given.

`handle_key(app, key)` applies a pygame key code to an `App`. It returns `True`
when the bodies should be scattered again.

### Drawing

`Renderer(surface, font_path=None)` draws onto any pygame surface:

- `render(app, bodies, fps)` clears the surface and draws the overlay and the
  bodies.
- `render_text(text, x, y, align, offset_y)` draws text, shifted by `offset_y`
  lines. It returns the rectangle of each glyph. Characters outside code points
  1–149 raise `ValueError`.

## What it does not do

- There is no collision handling between bodies. Only the floor is a boundary.
- The mouse button state and position are recorded on `App`, but nothing uses
  them.
- The `debug` flag can be toggled, but nothing draws differently because of it.
- There is no saving or loading of a scene.

## Tests

```
pip install .[test]
pytest
```