# tunnelgfx

This package holds the parts of a small real-time 3D scene that do not need
a graphics card: the linear algebra, the cameras and their input-driven
controls, the prefab meshes and an endless striped tunnel. It has no
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `tunnelgfx.mathlib`
  - `Vector` is a frozen four-component vector. `w` defaults to 1.
  - `Matrix` is a frozen row-major 4x4 matrix, and vectors multiply from the left. It has the constructors `zero`, `identity`, `translation`, `rotation`, `axis_rotation`, `orientation` and `scale`, and the methods `transposed` and `quick_inverse`.
  - `Rotation` names the principal axes.
  - The helpers are `clamp`, `clamp_unit`, `lerp`, `dot`, `cross`, `proj`, `dist`, `dist_sq` and `mult`.
  - `Rand` draws uniform values in an inclusive range. Integer bounds give an integer and any other bounds give a float. `Rand.random_color` returns an opaque random colour.
- `tunnelgfx.util`
  - `HashTable` is a fixed-capacity open-addressing table keyed by `string_hash`. It stores only the hash of each key.
  - The list removal helpers are `remove_item_linear`, `remove_item_fast`, `remove_at_linear` and `remove_at_fast`.
  - `read_text_file` reads a whole text file.
  - `file_size` gives the size of a seekable stream and leaves its position unchanged.
- `tunnelgfx.inputs`
  - `Key` lists the keys, and `virtual_key_code` maps a key to its platform virtual-key code.
  - `Keyboard` is a set of held keys.
  - `Mouse` holds the cursor position, and `Mouse.update` computes the movement since the last update.
  - `Gamepad` polls up to four controllers through a callable you supply. Each controller's state is a `GamepadState`, and `GamepadButton` gives the button bits.
- `tunnelgfx.clock`
  - `Clock` measures frame time. If a frame is shorter than the 60 FPS budget, the clock sleeps to fill it.
  - The timer and sleep function default to `time.perf_counter` and `time.sleep`, and either can be replaced.
- `tunnelgfx.camera`
  - `Camera2D` is an orthographic camera and `Camera3D` is a perspective camera. Each keeps its view and projection matrices in a `ViewProj`.
  - The controls are `GodCamera`, `FirstPersonCamera`, `MouseCamera` and `UICamera`.
  - `CameraRig` holds one control of each `CameraType` and switches to the next on a fresh press of G.
- `tunnelgfx.mesh`
  - `Vertex`, `Triangle` and `Mesh` describe indexed triangle lists.
  - `build_prefab` builds one of the `PrefabType` shapes: unit cube, floor, rect or tunnel segment.
  - `PrefabLibrary` builds each of them once and shares the results.
- `tunnelgfx.assets`
  - `Rect` is a region of a texture.
  - `Texture` records a path and a pixel size. `Texture.load` reads the width and height from a TGA header.
  - `Image` pairs a texture with a rect.
  - `AssetRegistry` stores assets under string keys.
- `tunnelgfx.tube`
  - The scene entities are `ColorEntity`, `SingleColorEntity` and `UIEntity`. `UIEntity.world` builds a scale, rotate and translate matrix.
  - `Tube` is a ring of alternating black and white segments moving along +Z. When the farthest segment passes the end, it is moved back to the front.

## Example

```python
from tunnelgfx.mathlib import Matrix, Vector, Rotation
from tunnelgfx.camera import CameraRig
from tunnelgfx.inputs import Keyboard, Mouse, Key
from tunnelgfx.tube import Tube

world = Matrix.scale(4.0, 4.0, 4.0) * Matrix.translation(0.0, 4.0, 0.0)
point = Vector(1.0, 0.0, 0.0) * Matrix.rotation(Rotation.Y, 0.5)

rig = CameraRig(1280, 720)
keyboard = Keyboard()
keyboard.press(Key.W)
mouse = Mouse()
rig.update(keyboard, mouse, delta=1 / 60, active=True)

tube = Tube()
tube.update(delta=1 / 60)
```

## What it does not do

The package draws nothing and has no command to run:

- It opens no window.
- It compiles no shaders.
- It makes no draw calls.
- It reads no real input devices. Keyboard, mouse and gamepad state are fed in by the caller.
- It decodes no texture pixels. `Texture.load` reads only the TGA header.

Putting the scene on screen is left to the renderer you connect it to.