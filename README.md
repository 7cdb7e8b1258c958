# fogl

Building blocks for a small 3D viewer, in pure Python with no dependencies:

- **Math**
  - `fogl.quat`: `Quat`, a quaternion `w + xi + yj + zk` with arithmetic,
    conjugate (`~q`), `inverse()`, `norm()`, `norm_squared()` and
    `apply(other)` (`q * other * ~q`). It also has `near(u, v, e=-6)`, a
    coarse closeness test.
  - `fogl.dual`: `Dual`, a dual quaternion `u + v*E` with `E*E == 0`. It has
    the same operations and a readable `str()`, for example `1 + iE`.
  - `fogl.affine`: `Point`, `Unit`, `Ray`, `Rotor` and `Pivot`, each with
    `to_dual()`. `Rotor` also has `to_quat()`. `transpose(src, width, height)`
    transposes a flat matrix.
- **Models**
  - `fogl.mesh`: `Model`, flat lists of bools, ints, floats and strings.
    `Mesh(width, height, fn)` samples `fn(s, t)` over a grid and joins the
    samples into triangles. `to_obj()` renders the mesh as OBJ text.
    `sphere_vertex` maps the grid onto the unit sphere.
  - `fogl.obj`: `load(path)` reads a Wavefront OBJ file into an `ObjModel`.
    The result's `status` field is an `ObjStatus`, and `index_ranges()` gives
    the runs of vertex and face data. `parse_type(line)` classifies one line
    as an `Element`. Faces with both texture and normal indices (`f 1/2/3`)
    are recognised, but their indices are not stored.
  - `fogl.mtl`: `MaterialType`, `parse_type(word)`, `Material.parse(line, delim)`
    and `load_material(path)` for material files. Only `d`, `Ka`, `Kd` and
    `Ks` are read as numbers. Every other statement is kept as text.
- **Printing**
  - `fogl.printer`: `align(value, width, direction, filler, precision)` pads a
    value to a width. `uni_strlen` and `display_len` measure text; the second
    ignores ANSI colour codes. `Printer(height)` is a text canvas with
    `insert`, `insert_printer`, `push_chars`, `push_labels`, `push_table`,
    `level`, `clear` and `min_max`.
- **Utilities**
  - `fogl.packs`: `Pack`, an ordered pack with merge (`+`), remove (`-`),
    xor (`^`) and and (`&`) operators. `Graph` holds vertices and edges.
    `Counted` gives each instance an id, counted separately for each class.
  - `fogl.functional`: `size_product`, `for_seq`, `for_all`, `map_for_all`
    and `for_zip` apply a function over the cartesian product or over the
    zip of sequences.
  - `fogl.control`: `deadzone(x, y, r_dead=0.125)` shapes joystick input.
    `Task` is an abstract interface with `init`, `poll` and `run`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Quaternion products:

```python
from fogl.quat import Quat

i, j, k = Quat(0, 1, 0, 0), Quat(0, 0, 1, 0), Quat(0, 0, 0, 1)
assert i * j == k
assert j * i == -k
```

Dual quaternions:

```python
from fogl.dual import Dual
from fogl.quat import Quat

E = Dual(Quat(0), Quat(1))
assert E * E == 0
print(Dual(Quat(1), Quat(0, 1)))  # 1 + iE
```

Build a sphere mesh and write it as OBJ text:

```python
from fogl.mesh import Mesh, sphere_vertex

mesh = Mesh(25, 25, sphere_vertex)
with open("sphere.obj", "w") as out:
    out.write(mesh.to_obj())
```

Load an OBJ file:

```python
from fogl.obj import load

model = load("cube.obj")
print(model.status, model.index_ranges())
```

Align text and draw a table:

```python
from fogl.printer import Alignment, Printer, align

print(align("Centered", 25, Alignment.CENTER, "_"))

table = Printer(4).push_table([0, 1, 2, 3, 4, 5, 6, 7], 2, 4,
                              ["Col 1", "Col 2", "Col 3", "Col 4"])
print(table)
```

## What this package does not do

There is no window, no OpenGL rendering, no shader handling and no viewer
command. Joystick support stops at `deadzone`: the package reads no input
devices. `Task` is only an interface, and no class in the package implements
it. There is no networking.