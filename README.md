# minigin

A small 2D game engine built on pygame. It opens a window, runs a main loop
capped at 60 frames a second, and updates and draws scenes of game objects.
Textures and fonts are loaded from a data directory and cached, text is
rendered into textures, and an on-screen counter shows the frame rate.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
minigin
```

The command calls `minigin.main.main()`. It picks its data directory with
`find_data_path()`: `./Data` if that exists, otherwise `../Data`. The directory
must hold `background.png`, `logo.png` and the font `Lingua.otf`. A 1024×576
window titled "Programming 4 assignment" opens and shows the background, the
logo at (358, 180), the yellow line "Programming 4 Assignment" at (292, 20) and
a frame counter in the top-left corner. Close the window to quit.

## Using the engine

```python
from minigin.engine import Minigin
from minigin.fps_display import FpsDisplay
from minigin.game_object import GameObject
from minigin.resource_manager import ResourceManager
from minigin.scene_manager import SceneManager
from minigin.text_object import TextObject


def load():
    scene = SceneManager.instance().create_scene()

    background = GameObject()
    background.set_texture("background.png")
    scene.add(background)

    font = ResourceManager.instance().load_font("Lingua.otf", 36)
    title = TextObject("Hello", font, (255, 255, 0, 255))
    title.set_position(292, 20)
    scene.add(title)

    scene.add(FpsDisplay())


with Minigin("./Data/") as engine:
    engine.run(load)
```

### Modules

- `minigin.engine` — `Minigin(data_path)` prints the SDL versions, opens the
  window, and initialises the `Renderer` and the `ResourceManager`. `run(load)`
  calls `load` once and then calls `run_one_frame()` until a quit is seen,
  sleeping so that no more than 60 frames run each second. `run_one_frame()`
  processes input, updates every scene and renders. `close()` (also called on
  leaving a `with` block) releases the window and shuts pygame down.
  `quit_requested` and `window` are read-only properties.
- `minigin.scene_manager` — `SceneManager.create_scene()` makes and registers a
  new `Scene`; `update()` and `render()` go through the scenes in creation
  order; `scenes` lists them.
- `minigin.scene` — `Scene` holds objects in order: `add` (refuses `None` with
  `ValueError`), `remove` (every occurrence of that very object), `remove_all`,
  `update`, `render`. It supports `len`, iteration and `in`.
- `minigin.game_object` — `GameObject` has a `transform` and an optional
  `texture`. `set_texture(filename)` loads through the resource manager,
  `set_position(x, y)` moves it, `render()` draws the texture at its position
  (and raises `RuntimeError` if there is none), `update()` does nothing.
  Subclass it for your own behaviour. Game objects cannot be copied.
- `minigin.text_object` — `TextObject(text, font, color)` draws text; the
  colour defaults to opaque white. `set_text` and `set_color` mark the texture
  out of date, and the next `update()` renders it again. `render()` draws
  nothing until a texture has been built.
- `minigin.fps_display` — `FpsDisplay(font=None, timer=None)` shows
  `"<fps> FPS"` with one decimal. It measures the frame rate from
  `Timer.elapsed` at most once per second of `total_elapsed`. Without a font it
  loads `Lingua.otf` at size 36.
- `minigin.resource_manager` — `ResourceManager.init(data_path)` sets the data
  directory and starts font support. `load_texture(file)` caches by file name;
  `load_font(file, size)` caches by file name and size, which must be 0–255.
  `unload_unused_resources()` drops cached entries that nothing else refers
  to. `loaded_textures` and `loaded_fonts` give the cached keys.
- `minigin.renderer` — `Renderer.init(window)` sets the target surface.
  `render()` fills it with `background_color`, renders all scenes and flips the
  display. `render_texture(texture, x, y, width=None, height=None)` draws a
  texture, stretched when width and height are both given. `destroy()` drops
  the target.
- `minigin.texture` — `Texture2D(surface)` wraps a pygame surface;
  `Texture2D.from_file(path)` loads an image; `size` gives width and height as a
  `Vec2`.
- `minigin.font` — `Font(path, size)` loads a font (`None` picks pygame's
  default font); `render_text(text, color)` returns a `Texture2D`.
- `minigin.timer` — `Timer.lap()` ends a frame, `elapsed` is the time between
  the last two laps, `total_elapsed` the time since start or `reset()`.
- `minigin.input_manager` — `InputManager.process_input()` drains the pygame
  event queue and returns `False` when a quit event is found.
- `minigin.transform` — `Transform` holds a `Vec3` `position`;
  `set_position(x, y, z=0.0)` moves it.
- `minigin.singleton` — `Singleton.instance()` returns a class's shared
  instance, made on first use; `reset_instance()` forgets it. The managers, the
  renderer and the timer are singletons, and singletons cannot be copied.
- `minigin.main` — `load()`, `find_data_path(base=None)` and `main()` for the
  demo.

## What it does not do

Key presses and mouse clicks are read from the event queue but not acted on:
the only input handled is the request to close the window. There is no sound,
no collision or physics, and no way to save or load scenes.