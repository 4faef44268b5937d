# startkit

A small toolkit for writing 2D games on top of pygame. It gathers the pieces
most small games need: a window with a drawing surface, textures and rendered
text, a frame clock, a camera that follows a point, sprite-sheet animations,
a base class for game states, keyboard and mouse input, and a base class for
clickable widgets.

Failures are reported by raising `startkit.errors.StartError`, which carries
an `ErrorCode` in its `code` attribute.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `startkit.errors`: `ErrorCode` (with a `description` property) and the
  `StartError` exception.
- `startkit.terminal`: `AnsiColor`, terminal colour escape sequences, with
  `wrap(text)` to colour a string and reset afterwards.
- `startkit.geometry`: `Rect`, `point_in_rect(x, y, rect)` (strictly inside),
  and `Vector2` with `+`, `-`, `*`, `/`, unary `-`, `magnitude()`,
  `normalized()` and the in-place `normalize()`. Dividing by zero raises
  `StartError` with `ErrorCode.DIVIDE_ZERO`.
- `startkit.core`: `start()` and `stop()` initialise and shut down pygame's
  display and font subsystems; `lookup_table_find(table, flag)` looks a name
  up in a mapping or a list of `(name, value)` pairs; `file_exists()`,
  `directory_exists()` and `directory_new()` (returns True if it created the
  directory, False if it was already there); and `print_message()` with the
  shorthands `error()`, `warning()` and `success()`, which write a
  `printf`-style message with a coloured `[ERROR]`, `[INFO]` or `[SUCCESS]`
  prefix (to standard output when the stream is None).
- `startkit.manager`: `ResourceManager`, a 256-slot double-hashing table that
  keeps resources by name (`insert`, `lookup`, `remove`, `len()`, `in`), the
  hash functions `pjw_hash()` and `multiplicative_hash()`, and a shared
  instance `default_manager`. `insert` returns False if the key is already
  present and raises `StartError` when the table is full or the data is None.
- `startkit.linked_list`: `LinkedList` and `Node`, a doubly linked list with
  insertion at either end or next to a node, removal from either end, `find`
  through a match function, iteration both ways, and `print` /
  `print_backward` through an optional printer callback.
- `startkit.clock`: `Clock`, which measures time between `update()` calls
  scaled by a speed modifier, with a timer (`set_timer`, `is_ready`,
  `reset`). A custom time source can be passed in.
- `startkit.camera`: `Camera`, which binds to a `Vector2`, centres on it and
  turns world coordinates into camera-relative ones.
- `startkit.animation`: `Animation` and `AnimationAxis`, stepping through
  frames laid out along one axis of a sprite sheet; `frame` holds the current
  source rectangle.
- `startkit.state`: `State`, a base class whose `handle()` and `update()` call
  the subclass's `on_handle()` and `on_update()`; it is a context manager and
  calls an optional `on_close()` once when closed.
- `startkit.texture`: `Texture` (load an image with `Texture.load`, draw it
  with `draw` or, rotated and flipped, with `draw_ex`) and `Flip`.
- `startkit.text`: `Text`, a string rendered with a pygame font and colour,
  cut to 62 characters.
- `startkit.window`: `Window`, a titled pygame window; `context()` returns its
  drawing surface.
- `startkit.input`: `Input` and `MouseButton`. `poll()` reads pygame's
  keyboard and mouse state, `update()` records a state given directly, and the
  `is_*`/`was_*` methods tell held keys and buttons from ones just pressed.
- `startkit.application`: `Application`, which owns the main window, limits
  the frame rate (1 to 60 FPS), reports the frame delta and achieved FPS,
  holds a `state` attribute and saves screenshots into a `screenshots`
  directory.
- `startkit.widget`: `Widget`, a positioned element with an optional `Text`
  label, focus, hover testing and a click callback that runs only while the
  widget has focus.

## Example

```python
from startkit.geometry import Vector2
from startkit.manager import ResourceManager

velocity = Vector2(3.0, 4.0)
print(velocity.magnitude())        # 5.0
print(velocity.normalized())       # Vector2(x=0.6, y=0.8)

resources = ResourceManager()
resources.insert("player", {"hp": 10})
print(resources.lookup("player"))  # {'hp': 10}
print(len(resources))              # 1
```

A game loop:

```python
import pygame

from startkit.application import Application
from startkit.input import Input

controls = Input()
with Application("Demo", 800, 600, 60) as app:
    while app.is_running():
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                app.stop()
        controls.poll()
        app.context().fill((0, 0, 0))
        app.render()
```

## What it does not do

- There are no ready-made widgets: no buttons, menus, text input fields or
  option selectors. `Widget` is the base to build them on.
- There is no configuration-file reading.
- There is no command-line program; the package is a library only.