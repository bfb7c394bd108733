# vectorplay

vectorplay is a small interactive sandbox for learning 2D vector maths. You
draw vectors on the screen and select two of them to compare. You can also
launch a ball that bounces off the window edges and off every vector you have
drawn.

## Installation

```
pip install .
```

This also installs `pygame`, which draws the window.

## Running

```
vectorplay
```

This opens a 1080×720 window that runs at up to 60 frames per second. The
command takes no options apart from `--help`. Close the window or press
**Escape** to quit.

## Controls

- **Create Vector** button: click the button, then click twice in the window.
  The first click sets the start point and the second sets the end point.
- **Backspace**: cancels a vector you are still drawing. If you are not drawing
  one, it deletes the selected vector.
- **Click a vector**: selects it. A click counts if it lands within about 30
  pixels of the line, and the selected vector turns red. Click a different
  vector to make it the second selection. The two vectors are then compared and
  the result is printed to the console: their coordinates, their components,
  their dot product and their sum.
- **Click empty space**: clears both selections.
- **W / A / S / D**: while held, moves the selected vector up, left, down or
  right by 3 pixels per frame.
- **Drag with the left mouse button**: launches the ball when you release. The
  ball flies opposite to the drag, like a slingshot. Its velocity is 1.5 times
  the drag vector, in pixels per second.

Each frame the ball bounces off the window edges. It also bounces off the first
drawn vector it overlaps, with its velocity mirrored about that vector's
normal.

## Using the pieces in code

The geometry helpers in `vectorplay.geometry` do not depend on a window:

```python
from vectorplay.geometry import Vec2, wall_normal, reflect, distance

normal = wall_normal(Vec2(0, 0), Vec2(10, 0))   # unit normal, (0, 1) up to sign
bounced = reflect(Vec2(3, 4), normal)          # Vec2(3, -4)
gap = distance(Vec2(0, 0), Vec2(3, 4))         # 5.0
```

`Vec2` is an immutable point or vector. It supports `+`, `-`, multiplication by
a scalar, `dot()` and `length()`. `wall_normal` and `projected_amount` raise
`ValueError` for segments of zero length.

The other modules are:

- `vectorplay.controls`: `FrameInput` holds one frame's mouse position, its
  left-button press and release, its held and newly pressed keys (`Key`), and
  its frame time.
- `vectorplay.vectors`: `VectorSegment` is a movable directed segment.
  `VectorList` holds segments in the order they were created and draws them
  with arrow heads.
- `vectorplay.button`: `Button` is a labelled rectangle that reports left
  clicks inside it.
- `vectorplay.ball`: `Ball` moves the ball, launches it from a `DragState` and
  handles its collisions with the window and with segments.
- `vectorplay.manager`: `VectorManager` turns each frame's input into creating,
  selecting, deleting, moving and comparing vectors. `check_selection` returns
  a `VectorComparison` when a second vector is picked, and
  `VectorComparison.describe()` gives the printed report.
- `vectorplay.app`: `read_frame` builds a `FrameInput` from pygame events, and
  `main` runs the window.

## What it does not do

Vectors exist only while the window is open. They cannot be saved or loaded,
and the window size is fixed.

## Tests

```
pip install .[test]
pytest
```