# blocks

A small 3D game engine. A game is made of **scenes**. Each scene holds
**layers**, and each layer holds **entities**. An entity can move, rotate and
scale, react to keyboard and mouse input, and draw a coloured mesh. A
first-person **player** carries a camera through the world. Frames are drawn
onto a pygame window by a small software renderer.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the game

```
blocks
```

This sets up the window, input, renderer, shaders and scenes, then enters the
event loop. Two scenes are registered. The test scene is added last, so it is
the current one. It holds the player, two cubes and a floor plane scaled ten
times, and it hides and grabs the mouse cursor. The other scene holds the
player and one cube that spins about all three axes. The command takes no
options. Close the window to quit.

Controls:

| Key        | Action                                    |
|------------|-------------------------------------------|
| W / S      | move forward / back (horizontal only)     |
| A / D      | strafe left / right                       |
| Space      | move up                                   |
| Left Shift | move down                                 |
| Mouse      | look around; pitch is held within ±89°    |
| Esc        | show or hide the cursor (test scene)      |
| 2          | switch to the spinning-cube scene         |
| 1          | switch back to the test scene             |

The speed is 5 units per second. Mouse sensitivity is 0.1 degrees per pixel of
motion.

## Modules

- `blocks.color`: `Color`, a normalised RGBA colour with the packing methods
  `abgr`, `argb` and `rgba`, and `Color.from_ints` for 0..255 channels.
  `VertexColor` is a position with a packed ABGR colour, grey by default.
- `blocks.timer`: `Timer`. Its `update()` returns the seconds since the previous
  call and stores them in `delta_time`.
- `blocks.movable`: `Movable`, which holds a position, an Euler rotation in
  degrees and a scale. It provides `move*`, `rotate*`, the directions `forward`,
  `back`, `left` and `right`, `rotation_matrix` (Rz·Ry·Rx), `transform_matrix`,
  and `transform_array`, which returns 16 floats in column-major order.
- `blocks.camera`: the `View` ids, `perspective`, `look_at`, and `Camera`
  (`set_view`, `update_view`, `apply_view`).
- `blocks.shader`: `RendererType`, `shader_type_for`, `VertexLayout`,
  `ShaderLoader`, `ShaderProgram`, the abstract `Shader`, and `ColorShader`.
- `blocks.shader_manager`: `ShaderManager`, which holds one shader per shader
  class.
- `blocks.application`: `Application`, a registry of the subsystems, and
  `get_application()` / `reset_application()` for the shared instance.
- `blocks.inputs`: `Keyboard` and `Mouse`. Both forward events to the
  registered scene manager.
- `blocks.entity`: `Updatable`, `Inputable`, the abstract `Renderable`, and
  `Entity`.
- `blocks.mesh`: `Mesh`, `DrawCall`, and the primitives `Cube` (blue front,
  red back) and `Plane` (a grey unit square in the XZ plane).
- `blocks.entity_manager`: `EntityManager`, an ordered collection with
  identity-based `exists`, `count_of` and `remove`.
- `blocks.layer`: `Layer`, and its subclasses `MeshLayer` (scene view) and
  `UILayer` (UI view).
- `blocks.layer_manager`: `LayerManager`, which holds one layer per class and
  sends frames and events only to visible layers.
- `blocks.scene` and `blocks.scene_manager`: the abstract `Scene` and the
  `SceneManager` that switches between scenes.
- `blocks.scenes`: the two demo scenes, `TestScene` and `AnotherScene`.
- `blocks.player`: `Player`.
- `blocks.renderer`: `Renderer`.
- `blocks.window`: `Window`, a pygame window that runs the event loop.
- `blocks.game`: `Game`, `GameStatus` and `main`.

## Writing a scene

Subclass `Scene` and fill its layers in `init`. Primitives take their shader
from the registered shader manager, so register one before you create them:

```python
from blocks.application import get_application
from blocks.layer import MeshLayer
from blocks.mesh import Cube
from blocks.scene import Scene
from blocks.scene_manager import SceneManager
from blocks.shader_manager import ShaderManager


class MyScene(Scene):
    def init(self):
        self.layers.create(MeshLayer)
        cube = Cube()
        cube.move_y(0.5)
        self.layers.use(MeshLayer).entities.add(cube)


app = get_application()
app.shader_manager = ShaderManager()
app.shader_manager.initialize()

scenes = SceneManager()
scenes.add_scene(MyScene)   # the newest scene added becomes current
```

`SceneManager.set_current_scene(SceneType)` switches to a registered scene. If
that scene is not loaded yet, it is built first. If no scene of that type is
registered, the manager is left with no current scene.

## What it does not do

- **No GPU shaders.** `ShaderLoader` only reads compiled shader binaries from
  `assets/shaders/bin/osx/<name>.<type>.bin`, relative to the working directory
  or to a given `base_dir`. A mesh is drawn only if both the vertex and the
  fragment binary of its shader were found and are not empty. Without them the
  window shows just the sky colour. The binaries are never run; drawing is done
  by the software renderer.
- **Simple rasterising.** The renderer fills flat-shaded triangles, coloured by
  the average of their vertex colours. It sorts them far to near and does not
  use a depth buffer. There is no lighting and no texturing. A triangle with any
  vertex behind the camera is skipped rather than clipped.
- **No UI drawing.** `UILayer` draws its entities like any other layer. There
  is no text or widget support.
- **No saving.** There is no world storage and no way to add or remove blocks.