# rigidscene

Rigid-body mathematics and scene logic for a small interactive 3D viewer.
The package computes what a renderer needs: transforms, projection matrices,
light positions, meshes, and the changes that mouse and keyboard input make
to the scene. It uses only the standard library.

## What is inside

- `rigidscene.cvec`: the immutable vector `Vec`, which has `+`, `-`, scalar
  `*` and `/`, indexing and `resized(n, fill)`. The module also provides
  `dot`, `cross`, `norm`, `norm2` and `normalize`.
- `rigidscene.matrix4`: the immutable 4x4 matrix `Matrix4`, indexed as
  `m[row, col]`. Its constructors are `identity`, `filled`,
  `from_column_major`, `make_x/y/z_rotation` (degrees),
  `make_x/y/z_rotation_cs` (cosine and sine), `make_translation`,
  `make_scale`, `make_frustum` and `make_projection`. The module also has
  `inv` (for affine matrices), `transpose`, `normal_matrix`, `is_affine` and
  `norm2`.
- `rigidscene.quat`: the quaternion `Quat(w, x, y, z)`, with
  `make_x/y/z_rotation`. The module also has `dot`, `norm2`, `inv`,
  `normalize` and `quat_to_matrix`. Multiplying a `Quat` by a 4-vector
  rotates its first three components.
- `rigidscene.rigtform`: `RigTForm(translation, rotation)`, a rigid
  transform that rotates first and then translates. The module also has
  `inv`, `trans_fact`, `lin_fact` and `rig_tform_to_matrix`.
- `rigidscene.geometry`: `make_plane`, `make_cube` and `make_sphere`. Each
  returns a list of `GenericVertex` (position, normal, texture coordinates,
  tangent and binormal) and a triangle index list. `plane_buffer_sizes`,
  `cube_buffer_sizes` and `sphere_buffer_sizes` give the lengths of those
  lists.
- `rigidscene.ppm`: `read_ppm`, `parse_ppm` and `write_ppm` read and write
  PPM images. Malformed input raises `PpmError`.
- `rigidscene.scene`: `Scene` holds the window size, the sky camera, the two
  cubes and their colours, the active shader index and the cube being edited.
  It produces the `DrawItem`s for one frame.
- `rigidscene.controls`: `Controller` turns mouse and keyboard events into
  changes to a `Scene`.

Invalid arguments raise `ValueError`. Examples are normalizing a near-zero
vector, inverting a non-affine or singular matrix, and a sphere with too few
slices or stacks.

## A short tour

```python
from rigidscene.cvec import Vec, cross
from rigidscene.matrix4 import Matrix4, inv
from rigidscene.quat import Quat, quat_to_matrix
from rigidscene.rigtform import RigTForm, rig_tform_to_matrix

x = Vec(1.0, 0.0, 0.0)
y = Vec(0.0, 1.0, 0.0)
z = cross(x, y)                      # Vec(0.0, 0.0, 1.0)

m = Matrix4.make_translation(Vec(1.0, 2.0, 3.0)) * Matrix4.make_y_rotation(90)
back = inv(m) * m                    # the identity, up to rounding

q = Quat.make_x_rotation(30) * Quat.make_y_rotation(45)
r = quat_to_matrix(q)                # the same rotation as a Matrix4

t = RigTForm(Vec(0.0, 0.25, 4.0), q)
point = t * Vec(1.0, 0.0, 0.0, 1.0)  # transform a point (w = 1)
```

Angles are given in degrees throughout.

## Driving a scene

```python
from rigidscene.scene import Scene
from rigidscene.controls import Controller, MouseButton, ButtonState, help_text

scene = Scene()
scene.reshape(800, 600)              # window size; updates scene.fov_y
projection = scene.projection_matrix()
light1, light2 = scene.eye_lights()  # light positions in eye coordinates
for item in scene.draw_items():      # ground, then the two cubes
    item.geometry, item.model_view, item.normal, item.color

controller = Controller(scene)
controller.mouse(MouseButton.LEFT, ButtonState.DOWN, 100, 100)
controller.motion(110, 100)          # True: the edited cube was rotated
controller.keyboard("o")             # switch which cube is being edited
print(help_text())
```

Mouse positions are in window coordinates, with y counted from the top.
While any button is held, `motion` moves the cube that is being edited:

- a left drag rotates it;
- a right drag moves it in the view plane;
- a middle drag, or a left and right drag together, moves it towards or away
  from the eye.

The motion is applied in a frame centred on the first cube and oriented like
the sky camera. This is the case whichever cube is being edited.

`keyboard` accepts a character or its code and returns `True`:

- `h` prints the help text to `controller.output`, which is standard output
  by default;
- `f` toggles `scene.active_shader` between 0 and 1;
- `o` toggles `scene.edit_cube1`;
- `s` calls `controller.screenshot_handler(width, height, "out.ppm")`, and
  raises `RuntimeError` if no handler is set;
- Escape raises `SystemExit(0)`.

## Images

```python
from rigidscene.ppm import read_ppm, write_ppm

image = read_ppm("picture.ppm")      # a PpmImage; pixels run bottom row first
pixel = image.pixel(0, 0)            # PackedPixel(r, g, b) at the bottom left
```

Both the ASCII (`P3`) and binary (`P6`) variants are read, and `#` comments
in the header are skipped. A maximum colour value other than 255 triggers a
warning. `write_ppm(filename, width, height, rgb_bottom_up)` writes a binary
`P6` file from RGB bytes that are stored bottom row first.

## What this package does not do

It opens no window and draws nothing. There is no OpenGL context, no shader
compilation and no reading of the frame buffer. `scene.SHADER_FILES` only
names the shader pairs, and a screenshot is taken only through a handler you
supply. There is no command-line program. You connect `Scene` and
`Controller` to your own windowing and rendering code.