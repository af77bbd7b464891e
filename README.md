# novakit

novakit is a small 2D game toolkit built on pygame. It gives you a window with
a 2D camera, immediate-mode drawing helpers, keyboard and mouse input with
named bindings, simple UI widgets, sprites and animations, sound and music,
plus a collection of everyday helpers: vectors, colours, timers, a typewriter
text effect, a JSON document wrapper, file watching and logging.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Demo

The package installs a command that opens a 640x480 window titled "Game". It
clears the window to white at up to 60 frames per second until you close the
window or press Escape:

```
novakit-demo
```

`--frames N` stops it after N frames.

## A minimal game loop

```python
from novakit import render
from novakit.color import WHITE
from novakit.window import Window

with Window(640, 480, "Game") as window:
    render.framerate_limit(60)
    while window.is_open():
        window.start()
        render.fill(WHITE)
        window.end()
```

`Window.is_open()` processes the pending pygame events and feeds them to the
input state. It returns `False` after the window is closed, a quit event
arrives, or Escape is pressed. `end()` shows the frame and waits for the
frame-rate cap. Afterwards `render.delta_time()` gives the frame's duration in
seconds.

## What is in the package

- `novakit.window`: `Window` and its `Camera` (`target`, `offset`, `zoom`,
  `rotation`). `start()` and `end()` wrap a frame, and `ui_mode()` switches
  the rest of the frame to screen coordinates. `center_camera(x, y)` moves the
  camera, `axis()` returns an `Axis` for bounds checks, and `close()` shuts
  the display. The window is also a context manager.
- `novakit.render`: `fill`, `rect`, `draw_rect`, `circle`, `draw_circle`,
  `line`, `point`, `poly`, `text`, `grid_lines` and `grid_boxes` draw onto the
  target surface. `set_target`, `set_camera` and `clear_camera` choose where
  and how drawing happens. It also holds the frame clock: `framerate_limit`,
  `tick` and `delta_time`.
- `novakit.input`: the `Key` and `Mouse` codes, and `InputState`, which is
  built from pygame events. Module-level `key_hit`, `key_held`, `key_up`,
  `mouse_button_hit`, `mouse_button_held`, `mouse_button_up`,
  `mouse_position`, `mouse_hover`, `mouse_click`, `get_scroll` and
  `get_scroll_ex` read the window's state through `current_state()`. `Event`
  takes a snapshot of the mouse and the next pressed key. Use `InputManager`
  to give bindings names; names that were never bound report no input:

  ```python
  from novakit.input import InputManager, Key, Mouse

  controls = InputManager()
  controls.bind_key("jump", Key.Space)
  controls.bind_mouse("fire", Mouse.Left)
  if controls.hit("jump"):
      ...
  ```

- `novakit.ui`: `ui_button` returns a `UIEvent` (`CLICK`, `HOVER` or `NONE`).
  `ui_text_input` takes the current text and returns it with this frame's
  typing applied. There are also `ui_label`, `Popup` (whose `show()` returns a
  `PopupEvent`) and `Menu` (whose `show()` returns a `MenuResult`). You can
  adjust the look with `set_padding`, `set_spacing`, `set_font` and
  `unload_font`. `text_pixel_size` and `widget_size` measure text.
- `novakit.objects`: `Object4`, `Rectangle` and `Circle`, with the movement
  helpers `move`, `shift`, `roam`, `move_to` and `roam_to`, and `cache`/`grab`
  to hide or show an object. `check_collision` tests rectangle against
  rectangle (only on the same `z_index`) or rectangle against circle.
  `ObjectChain` moves children and sub-chains along with a parent, and
  `Generator` fills a list from an index function.
- `novakit.sprites`: `RenderImage`, `RawTexture`, `Spritesheet` and
  `Animation`, plus `draw_image`, `draw_texture` and `image_loaded`. An image
  that fails to load is logged as a warning and drawn as nothing.
  `image_loaded` returns `True` when the image holds no texture.
- `novakit.audio`: `Sound` and `Music`. `set_volume` takes an `int` as a
  percentage or a `float` as a fraction. For `Sound`, a float outside
  0.0..1.0 raises `ValueError`.
- `novakit.vehicle`: `Vehicle` and `VehicleConfig` for simple top-down driving
  from held keys.
- `novakit.geometry`: `Vec2`, `Vec3`, `Vec4`, `Axis` and `Grid`. Note that the
  binary vector operators compute `other <op> self`, so `a - b` gives `b - a`
  and `a / b` gives `b / a`. The in-place forms (`-=`, `/=`) work in the
  usual direction.
- `novakit.color`: `Color` with clamped `brighten` and `darken`, plus the
  constants `WHITE`, `BLACK`, `RED` and the `MODAL_WINDOW_COLOR_*` colours.
- `novakit.randomness`: `RandomDevice` (optionally seeded) with `random_int`,
  `random_float`, `random_index`, `random_item` and `shuffle`.
- `novakit.timing`: `Timer`, `Stopwatch` and the time scales `Seconds`,
  `Milliseconds` and `Minutes`. Timers are advanced by the frame time you pass
  in.
- `novakit.text`: `TypeWriter`, `CommandBuilder`, and the string helpers
  `has_prefix`, `has_suffix`, `split` and `replace_first`.
- `novakit.files`: `TextFile` (a context manager), `LogFile`, `FileWatcher`
  and `fetch_contents`. It also has the shell helpers `mkdir`, `touch`, `rm`,
  `cp`, `mv`, `win32_rmdir`, `win32_copy`, `win32_move` and `win32_xcopy`,
  which run the command through the shell and return its exit status.
- `novakit.jsondoc`: `JsonDocument` with `load_file`, `write_file`,
  `prettify`, `set` and a typed `get`. A missing key raises `NullValueError`
  and a value of the wrong type raises `TypeMismatchError`.
- `novakit.logger` and `novakit.signal`: timestamped console logging
  (`[time]::level::> text`) and `Signal`, a callback that can be bound to a
  condition.

### Timers

```python
from novakit.timing import Milliseconds, Stopwatch, Timer

timer = Timer(2.0)
timer.update(0.5)
timer.elapsed()  # 0.5
timer.done()     # False

watch = Stopwatch()
watch.tick(1.5)
watch.get(Milliseconds).value  # 1500
```

### JSON documents

```python
from novakit.jsondoc import JsonDocument

doc = JsonDocument()
doc.set("score", 10)
doc.get("score", int)  # 10
doc.write_file("save.json", 4)
```