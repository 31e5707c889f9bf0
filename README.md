# sketchbook

This package shows three small animated drawing sketches in a pygame window.

- **boxes**: 5500 boxes, each 20×20, in random colours on a black background. Both coordinates of each box are drawn from the range 0 to the window width. The boxes do not move.
- **spiral**: a filled red spiral on a white background, drawn as a closed polygon of 200 points. The winding of the spiral slowly changes over time.
- **limit**: an animation of the sequence 1/n approaching 0 on a number line that runs from -2 to 2. First the axis fades in and then the tick marks. Next, up to 20 points of the sequence appear, one every 0.3 seconds. Once five points are showing, a blue ε-band of width 0.2 appears around 0, and the points inside it turn green. Formula images fade in at the top left as the animation goes on.

## Installation

```
pip install .
```

This also installs `pygame`, which the package uses to open windows and draw.

## Running a sketch

```
sketchbook boxes
sketchbook spiral
sketchbook limit
```

Options:

- `--width`, `--height`: window size. The default is 1024×768.
- `--seed`: random seed for the boxes sketch.
- `--images`: directory that holds the image files. The default is the current directory.
- `--frames`: stop after this many frames.

The window closes when you close it, when you press Escape, or after `--frames` frames have been shown.

The limit sketch looks for `formula_part1.png`, `formula_part2.png` and `formula_full.png` in the image directory. Any image that cannot be loaded is left out.

## Using it from Python

Each sketch is a plain object. It has `width`, `height`, `frame_rate` and `background` attributes, and two methods:

- `update(dt)` advances the sketch by `dt` seconds.
- `draw()` returns a list of shapes from `sketchbook.scene`: `Line`, `Circle`, `Rectangle`, `Polygon` or `Picture`. Each shape carries a `Color`, which is RGBA with 8 bits per channel.

Because `draw()` only returns data, you can inspect a sketch without opening a window:

```python
import random
from sketchbook.boxes import BoxesSketch
from sketchbook.limit import LimitSketch
from sketchbook.spiral import spiral_vertices

boxes = BoxesSketch(1024, 768, 100, random.Random(1))
rectangles = boxes.draw()

limit = LimitSketch(1024, 768)
limit.update(7.0)
print(limit.visible_points())        # 6
print(limit.math_to_screen_x(0.0))   # 512.0

points = spiral_vertices(0.0, 200)   # centred on the origin
```

Other entry points:

- `sketchbook.render.Renderer(surface, image_dir)` draws shapes onto any pygame surface with `render(background, shapes)`. The surface can be an off-screen one.
- `sketchbook.render.run(sketch, image_dir, max_frames)` opens a window, animates the sketch, and returns the number of frames shown.
- `sketchbook.cli.build_sketch(name, width, height, seed)` builds a sketch by the names `"boxes"`, `"limit"` or `"spiral"`.

## What it does not do

The sketches do not respond to the mouse or keyboard. The only key they handle is Escape, which quits. The package has no way to save frames or export the animation to a file.