# rocketsim

A rocket you fly in your terminal. It lifts off from the ground and climbs
through the troposphere, the stratosphere and the mesosphere into space. The
sky colour changes with each layer. Gravity weakens with altitude by the
inverse-square law. A landing that is too hard makes the rocket explode, and
it then respawns on the launch pad.

## Installation

```
pip install .
```

## Playing

```
rocketsim
```

The command takes no options apart from `--help`. The game fills the whole
terminal, and the view stays centred on the rocket.

### Controls

| Key                      | Action                                      |
|--------------------------|---------------------------------------------|
| Up / `w` / `W`           | Increase vertical thrust by 0.5             |
| Down / `s` / `S`         | Decrease vertical thrust by 0.5             |
| Left / `a` / `A`         | Push horizontal thrust 0.5 to the left      |
| Right / `d` / `D`        | Push horizontal thrust 0.5 to the right     |
| Space                    | Switch to the next engine stage             |
| `q` / `Q` / Esc / Ctrl-C | Quit                                        |

Vertical and horizontal thrust are capped at the active stage's maximum.
Thrust stays where you left it when you release a key.

### Stages

The rocket has three stages. Space cycles through them in turn. The name of
the active stage appears in the top-left corner.

- **Основная**: the balanced main engine. Vertical thrust up to 15, horizontal up to 2, fuel rate 1.0×.
- **Ускоритель**: the booster. Vertical thrust up to 25, horizontal up to 1, fuel rate 2.0×.
- **Маневровый**: the manoeuvring stage. Vertical thrust up to 10, horizontal up to 3.5, fuel rate 0.7×.

The rocket burns fuel only while its vertical thrust is above local gravity.
When the fuel runs out, the vertical thrust drops to zero.

### On screen

The panel near the top-right corner shows:

- altitude
- vertical and horizontal speed, each with a direction arrow
- current thrust
- local gravity
- fuel and the stage's consumption rate

Above the Kármán line the panel adds `*** SPACE ***`. A `COSMIC SPEED!` box
appears while the rocket is falling faster than 100.

Engine flames are drawn beside and below the rocket while it applies thrust.
If the rocket reaches the ground falling faster than 20, it explodes. After a
two-second pause it is back on the launch pad with 100 fuel.

### What it does not do

There are no scores, no saved games and no settings: each run starts from a
freshly generated world with a fully fuelled rocket.

## Using the pieces

The simulation runs without a terminal:

```python
from rocketsim.objects import World, launch_rocket
from rocketsim.physics import calculate_gravity, update_rocket

world = World.generate()
rocket = launch_rocket(9.80665)
rocket.thrust_y = 15.0
update_rocket(rocket, 0.1, 1, 9.80665)
print(rocket.y, rocket.vy, calculate_gravity(100.0))
```

| Module                | What it holds |
|-----------------------|---------------|
| `rocketsim.objects`   | `Rocket`, `Stage`, the scenery (`Cloud`, `Star`, `Tree`, `World`) and `launch_rocket` |
| `rocketsim.physics`   | `calculate_gravity` and `update_rocket` |
| `rocketsim.render`    | `Canvas`, an in-memory grid of styled characters, with `Color`, `Style` and the `draw_*` functions that write into a canvas |
| `rocketsim.terminal`  | `Terminal`, which reads keys and puts a canvas on the screen |
| `rocketsim.game`      | `process_input`, `update_game`, `handle_collisions`, `render_frame` and `main` |

For example, `render_frame(canvas, rocket, world)` draws a whole frame into a
`Canvas`. You can then read it back with `canvas.row_text(y)` or
`canvas.cell(x, y)`.

## Running the tests

```
pip install .[test]
pytest
```