# sacrifice

A small top-down arcade game. You steer a cat around the arena while a rotund
specimen chases you. Touching it costs health, and after each hit you get a
short spell of invincibility. Walls block your way, and nothing that is bound
to the map can leave it.

The game is built on a small entity-component-system core, which can also be
used on its own.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
sacrifice
```

Move with `W`, `A`, `S` and `D`. Close the window or press `Escape` to quit.
The bar in the top-left corner shows the player's health.

Options:

- `--assets DIR`: the directory to load sprites from. Sprites are read from
  `DIR/sprites/` (`cat.png`, `wall.png`, `rotund_specimen.png`). The default
  is `assets`, relative to the directory you start the game from. If a
  texture cannot be loaded, the error is logged and a magenta-and-black
  checkerboard is drawn in its place.
- `--debug`: log at debug level and show a text overlay with the frame rate,
  the next entity id and whether collision bounds are drawn. In this mode `F1`
  toggles drawing of collision bounds: each collider is outlined in orange,
  and filled while it touches something.

## Using the engine

Entities are plain integers handed out by `sacrifice.ecs.ECS`, starting at 1;
id 0 is never issued. At most 1023 entities can be created, after which
`new_entity` raises `OverflowError`. Components are attached by
`ComponentType`:

```python
from sacrifice.ecs import ECS, ComponentType
from sacrifice.components import Position, Velocity
from sacrifice.physics import update_movement

ecs = ECS()
player = ecs.new_entity()
ecs.attach(player, Position(10.0, 20.0), ComponentType.POSITION)
ecs.attach(player, Velocity(5.0, -3.0), ComponentType.VELOCITY)

update_movement(
    ecs.components(ComponentType.POSITION),
    ecs.components(ComponentType.VELOCITY),
)
print(ecs.get(player, ComponentType.POSITION))  # Position(x=15.0, y=17.0)
```

`attach` and `get` raise `KeyError` for an entity that is not active.
`get` returns `None` when the entity has no component of that type.
`remove_entity` deactivates an entity but leaves its components in the
tables; `active_entities` lists the active ids in ascending order.

The components live in `sacrifice.components`: `Tag` (with `EntityTag` and
`tag_name`), `Position`, `Velocity`, `Collider` (built with
`Collider.rectangle` or `Collider.circle`, holding up to 32 collisions),
`Health`, `Harm`, `ChaseBehaviour` and `Sprite`.

The systems work on the per-type component tables returned by
`ECS.components`:

- `sacrifice.physics`: `update_movement`, `update_colliders` (collision
  detection, and pushing a player out of walls), `update_map_bounds`, plus
  the shape tests `check_collision_recs`, `check_collision_circle_rec`,
  `check_collision_circles` and `get_collision_rec` on `Rectangle`
- `sacrifice.ai`: `update_chase_behaviours`, which points each chaser at its
  target at a fixed speed
- `sacrifice.combat`: `update_combat`, which applies `Harm` to `Health` on
  contact and counts down invincibility frames by the frame time given

`sacrifice.world.build_world` sets up the default scene from a mapping of
`"cat"`, `"wall"` and `"rotund"` to images with a `get_size()` method, and
`World.step` advances it by one frame for a movement vector (see
`movement_input`) and a frame time in seconds.

Drawing helpers in `sacrifice.app` (`load_texture`, `render_sprites`,
`draw_collision_bounds`, `draw_health_bar`) work on pygame surfaces.

## What it does not do

There is no interactive debug interface: no entity table, no entity
inspector and no in-game editing of positions. `sacrifice.world.DebugData`
only holds the visibility flags and selected entity such windows would use;
nothing in the game reads them. There are no levels beyond the one scene
built by `build_world`, no game-over screen, and nothing is saved.