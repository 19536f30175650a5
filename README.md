# bgui

bgui is a small GUI toolkit. You describe an interface as a tree of layouts
and elements: text, buttons and text inputs. On each frame bgui lays the tree
out, routes mouse input to it, and collects a queue of quad draw requests.
Each request carries a material, which holds a shader tag and the shader
properties. bgui also holds the GLSL shaders for these quads.

## Installing

```
pip install .
```

Pillow rasterises the fonts into glyph atlases. pyglet provides the window,
the mouse events and shader compilation.

## Modules

- `bgui.vec` and `bgui.mat`: small vector and matrix types (`Vec`, `vec2`,
  `vec3`, `vec4`, `filled`, `Mat`, `orthographic`, `translate`, `scale`).
- `bgui.properties`: typed shader values (`Property`, `PropertyType`),
  textures (`Texture`) and materials (`Material`, set with `Material.set`).
- `bgui.theme`: the `Theme` colour set, `LIGHT_THEME` and `DARK_THEME`, and
  the `Mode`, `Orientation` and `Alignment` enums.
- `bgui.draw`: `DrawRequest` and the first-in, first-out `DrawData` queue
  (`push`, `pop`, `clear`, `len()`).
- `bgui.window`: the shared window state (`window_io()`), plus
  `get_window_size()`, `get_mouse_position()`, `get_pressed(key)`,
  `get_projection()` (a pixel-space orthographic matrix with the origin at the
  top left) and `read_file(path)`.
- `bgui.font`: `Character`, `Font` and the shared `FontManager` registry.
- `bgui.fontloader`: `search_system_fonts(folder)` maps `"<family>-<style>"`
  to font files. `load_font(name, path, resolution)` builds an atlas for the
  codes 32 to 255 and registers it. `set_up()` loads the default font,
  `"Noto Sans-Condensed"`, from the system fonts.
- `bgui.element`: the `Element` base class, which holds geometry, spacing,
  material and input hooks.
- `bgui.text`, `bgui.button`, `bgui.text_input`: the `Text`, `Button` and
  `TextInput` widgets.
- `bgui.layout`, `bgui.linear`, `bgui.relative`: the containers. `Layout`
  places children at absolute positions and shows one modal at a time.
  `Linear` stacks children along one axis. `Relative` leaves its children
  where they are.
- `bgui.gui`: the `Gui` singleton. It holds the theme, the main layout and
  the queued calls, and it dispatches input.
- `bgui.window_backend`: a pyglet window with an OpenGL 3.3 context
  (`set_up_window`, `update_window`, `on_mouse_button`, `shutdown_window`).
- `bgui.shader`: the embedded quad and text shaders. `Shader` compiles them
  and shares one program per name pair. Use `Shader.bind`, `Shader.set` and
  `Shader.unbind` on it. `shader_from_tag(tag)` picks the shader for a
  material's tag.

## Usage

```python
from bgui import fontloader, window_backend
from bgui.button import Button
from bgui.gui import Gui
from bgui.linear import Linear
from bgui.theme import Alignment, Orientation

window = window_backend.set_up_window(800, 600, "demo")
fontloader.set_up()          # or fontloader.load_font("Noto Sans-Condensed", "/path/to/font.ttf")

gui = Gui.instance()
gui.set_up()                 # must come before layouts and widgets are created

column = Linear(Orientation.VERTICAL)
column.alignment = Alignment.CENTER
column.cross_alignment = Alignment.CENTER
column.add(Button("Hello", 0.5, lambda: print("clicked")))
gui.set_layout(column)

while not window.has_exit:
    window_backend.update_window(window)
    gui.update()
    requests = gui.draw_data   # DrawData: pop() each DrawRequest and draw it
    window.flip()

window_backend.shutdown_window(window)
```

Every `Gui` method raises `NotInitializedError` until `set_up()` has been
called. The only exceptions are `set_up`, `set_layout` and `shutdown`.
Widgets read the theme from `Gui.instance()`, so create them after
`set_up()`. Text widgets need their font registered in `FontManager`
first. If it is not, they raise `KeyError`.

## What bgui does not do

bgui does not draw anything on screen. `Gui.update()` fills `gui.draw_data`
with `DrawRequest`s, and `bgui.shader` can compile and bind the matching
programs. The package has no vertex buffer for the quad, no texture upload
and no render loop that issues the draw calls. Your application has to
provide these. It also has no command-line program.

## Tests

```
pip install .[test]
pytest
```