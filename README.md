# candyquest

Building blocks for a small 2D side-scrolling platformer, written on top of
pygame.

## What is in the package

- `candyquest.defs`: the `Rect` dataclass (`x`, `y`, `w`, `h`), plus the
  helpers `in_range(value, minimum, maximum)` and `join_path(folder, file)`.
  `join_path` raises `ValueError` if the joined path is 255 characters or
  longer.
- `candyquest.point.Point`: an immutable integer or float 2D point. It supports
  `+`, `-` and unary `-`, and has `is_zero()`, `negated()`, `distance_to()`,
  `distance_no_sqrt()` and `distance_manhattan()`. Between two integer points,
  `distance_to` is truncated to an `int`.
- `candyquest.dynarray.DynArray`: a growable array that reports its
  `capacity`. Its methods are `append`, `pop`, `insert`, `insert_all`, `at`
  (returns `None` when the index is out of range) and `flip`. It also has
  `bubble_sort`, `bubble_sort_optimized` and `comb_sort`, each of which
  returns the number of comparisons it made.
- `candyquest.linkedlist.LinkedList`: a doubly linked list built from
  `ListItem` nodes, with `start` and `end` attributes. Its methods are `add`,
  `remove`, `clear`, `at`, `find` (returns -1 when the value is absent),
  `bubble_sort` and `insert_after`.
- `candyquest.sstring.SString`: a mutable string. It is built with
  printf-style formatting through `create(fmt, *args)`, and has `cut`, `trim`,
  `substitute`, `find` (counts occurrences) and `substring`.
- `candyquest.timer`: `Timer` reads whole seconds (`read_sec`) and
  milliseconds (`read_msec`). `PerfTimer` reads raw ticks (`read_ticks`) and
  milliseconds (`read_ms`). Either timer can take its own clock function.
- `candyquest.animation.Animation`: a list of sprite-sheet frames, at most
  60. It can loop, play once, or ping-pong. `load(config_path, owner, name)`
  reads frames from
  `<config><scene><owner><animations><name>` in an XML file. Each `<anim>`
  element has `x`, `y`, `width` and `height` attributes, and the group element
  carries `loop` and `speed` attributes.
- `candyquest.pathfinding`: `PathFinding` runs an A* search over a byte
  walkability grid. `PathNode` is a single node of that search.
- `candyquest.entity`: `Entity` is the base class for scene objects, and
  `EntityType` lists the kinds of object. An entity reads its settings from
  `parameters`, which can be any object with a `get(name)` method, such as an
  XML element or a dict. It has lifecycle hooks (`awake`, `start`, `update`,
  `clean_up`, `enable`, `disable`) and collision callbacks that record
  contacts. `save_state` and `load_state` write and read the entity's position
  as `x` and `y` attributes of a node.
- `candyquest.moving_platform.MovingPlatform`: an entity that moves one pixel
  per update, horizontally or vertically. It turns around once it is
  `distance` pixels from where it started. The texture, physics and render
  collaborators it uses are all optional.
- `candyquest.gui_control`: `GuiControl` is the base class for UI controls,
  with the enums `GuiControlType` and `GuiControlState`. `notify_observer()`
  calls `on_gui_mouse_click_event(control)` on the observer that was set with
  `set_observer`.
- `candyquest.render.Render`: draws onto a pygame surface through a
  scrolling camera, and everything it draws is multiplied by an integer
  `scale`. Its drawing methods are `draw_texture` (which accepts a section,
  parallax speed, `Flip` mirroring and rotation about a pivot),
  `draw_rectangle`, `draw_line` and `draw_circle`. It also manages viewports
  and a background colour. It saves the camera position as a `<camera>`
  child of an XML node and loads it back from that child.
- `candyquest.textures.Textures`: loads image files into surfaces and keeps
  track of them. `load` raises `TextureError` if a file cannot be read.
  `unload` returns `False` for a texture that was not loaded through it.
- `candyquest.window.Window`: creates the display window from an XML config
  node. It reads the `fullscreen`, `bordeless`, `resizable` and
  `fullscreen_window` elements, each with a `value` attribute, and
  `resolution`, with `width`, `height` and `scale` attributes. It can switch
  fullscreen on and off and change the window title. It raises `WindowError`
  on failure. The display backend is `pygame.display` unless another is
  passed in.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Example: finding a path

```python
from candyquest.pathfinding import PathFinding
from candyquest.point import Point

grid = [
    1, 1, 1, 1,
    0, 0, 1, 0,
    1, 1, 1, 1,
]
finder = PathFinding()
finder.set_navigation_map(4, 3, grid)

steps = finder.create_path(Point(0, 0), Point(0, 2))
print(steps, list(finder.last_path))
```

A tile is walkable when its value is neither 0 nor 255. `create_path` returns
the number of tiles in the path it found, counting both the origin and the
destination. It returns -1 when either end cannot be walked on or when no
path exists.

`move(current_pos)` returns the next tile on the last path and advances along
it. It returns `None` in three cases:

- there is no path;
- `current_pos` is not the tile at the head of the path;
- the end of the path has been reached.

## Example: animations

```python
from candyquest.animation import Animation
from candyquest.defs import Rect

walk = Animation(speed=0.5)
for x in range(0, 128, 32):
    walk.push_back(Rect(x, 0, 32, 32))

walk.update()
frame = walk.current_frame()
```

An animation created with `loop=False` stops on its last frame. After that,
`has_finished()` returns `True` until `reset()` is called.

## What this package does not do

This is a library of parts, not a playable game. It has no command to run, no
game loop and no level or scene manager. It has no player or enemy
characters, no physics simulation, no audio and no save-file handling beyond
the per-object `save_state` and `load_state` methods. An application has to
build those from the pieces above.