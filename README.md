# enginekit

Building blocks for small 3D games and tools, in pure Python on top of numpy.

| Module | What it holds |
| --- | --- |
| `enginekit.glmath` | `vec3`, `normalize`, the `Quat` quaternion, `quat_from_euler`, `quat_from_axis_angle`, `translation_matrix`, `scale_matrix`, `perspective`, `ortho` |
| `enginekit.scene` | `Component`, `Entity`, `Scene` |
| `enginekit.transform` | `Transform`: position, rotation, scale, parent, cached world matrix |
| `enginekit.camera` | `Camera` and `ProjectionType` |
| `enginekit.light` | `Light` and `LightType` |
| `enginekit.collider` | `BoxCollider`, `SphereCollider`, `Contact`, `ColliderType` |
| `enginekit.capsule` | `CapsuleCollider` |
| `enginekit.physics_system` | `PhysicsSystem`, `RaycastHit`, `default_physics_system` |
| `enginekit.rigidbody` | `RigidBody` |
| `enginekit.convex_hull` | `ConvexHull`, an incremental hull of a point set |
| `enginekit.health` | `HealthSystem` with damage, heal and death callbacks |
| `enginekit.weapons` | `WeaponData` and `WeaponSystem`: fire rate, magazines, reloading, recoil |
| `enginekit.mesh` | `Vertex`, `SubMesh`, `Mesh`, `compute_normals` |
| `enginekit.model_loader` | `parse_obj`, `load_obj` (returns a list of meshes), `ObjData` |
| `enginekit.mesh_io` | `save_obj`, `load_obj`, `save_binary`, `load_binary` |
| `enginekit.undo` | `UndoHistory`, bounded undo/redo of mesh states |
| `enginekit.texture_painter` | `TexturePainter`, `PaintLayer`, `BlendMode`, `blend_colors` |
| `enginekit.material` | `Material`: uniform values and textures uploaded to a shader |
| `enginekit.input` | `Input`, a frame-based keyboard and mouse state tracker |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

Entities own components; `Scene.update` updates every component in order.
A `Transform` recomputes its world matrix and a `Camera` its projection
matrix on `update`.

```python
from enginekit.scene import Scene
from enginekit.transform import Transform
from enginekit.camera import Camera
from enginekit.glmath import vec3

scene = Scene()
camera_entity = scene.create_entity("MainCamera")
transform = camera_entity.add_component(Transform())
transform.translate(vec3(0.0, 2.0, -5.0))

camera = camera_entity.add_component(Camera())
camera.set_perspective(45.0, 1280.0 / 720.0, 0.1, 1000.0)

scene.update(1.0 / 60.0)
view = camera.view_matrix()
projection = camera.projection_matrix
```

### Physics

A `RigidBody` registers itself with the `PhysicsSystem` it is given, or with
the shared one from `default_physics_system()` when none is given. Colliders
are registered by hand with `add_collider`. `PhysicsSystem.update` integrates
the non-kinematic bodies, then tests every pair of registered colliders and
applies impulses and a positional correction. `raycast` tests sphere
colliders only and returns a `RaycastHit` or `None`.

```python
from enginekit.physics_system import PhysicsSystem
from enginekit.rigidbody import RigidBody
from enginekit.collider import SphereCollider

physics = PhysicsSystem()

ball = scene.create_entity("Ball")
ball.add_component(Transform())
collider = ball.add_component(SphereCollider())
physics.add_collider(collider)
body = ball.add_component(RigidBody(physics))

physics.update(1.0 / 60.0)
hit = physics.raycast((0.0, 10.0, 0.0), (0.0, -1.0, 0.0))
```

Box colliders collide only with boxes and sphere colliders only with spheres;
a `CapsuleCollider` collides with capsules, spheres and boxes.

### Gameplay

```python
from enginekit.health import HealthSystem
from enginekit.weapons import WeaponData, WeaponSystem

health = ball.add_component(HealthSystem())
health.on_death(lambda killer: print("down"))
health.take_damage(150.0, None)

weapons = ball.add_component(WeaponSystem(physics=physics))
weapons.add_weapon(WeaponData(name="Rifle", fire_rate=10.0, magazine_size=30,
                              automatic=True, reload_time=2.0))
weapons.start_firing()
weapons.update(1.0 / 60.0)
```

The first weapon added fills the magazine and sets the reserve to three
magazines. Firing casts a ray through the physics system and stores the
result in `last_hit`; it needs a `Transform` on the same entity.

### Meshes

```python
from enginekit import mesh_io
from enginekit.undo import UndoHistory

mesh = mesh_io.load_obj("cube.obj")
history = UndoHistory(max_states=50)
history.save_state(mesh)
mesh_io.save_binary(mesh, "cube.smsh")
history.undo(mesh)
```

The binary format is little-endian: the magic `SMSH`, a version, the vertex
and index counts, then 14 floats per vertex and 32-bit indices. Both loaders
in `mesh_io` recompute normals.

### Input

`Input` holds no window of its own. Pass it events with `handle_key`,
`handle_mouse_button`, `handle_cursor` and `handle_scroll`, call `update()`
once per frame, and query with `is_key_pressed`, `is_key_just_pressed`,
`is_key_released` and the mouse equivalents, or read `mouse_position`,
`mouse_delta` and `scroll_delta`.

## What the package does not do

- It opens no window and draws nothing. There is no renderer, no GPU upload
  and no user interface; `Component.render` and `Scene.render` only report
  what components say they drew.
- `Material` does not compile shaders or load textures: it calls methods on
  shader and texture objects you supply (`use`, `set_float`, `set_mat4`,
  `bind`, `unbind` and so on).
- There is no resource cache, no game loop and no command to run; the caller
  drives `update` each frame.
- `TexturePainter` paints into in-memory arrays; it does not read or write
  image files.