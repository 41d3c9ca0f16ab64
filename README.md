# gravroom

A small single-room platformer. The player stands in a rectangular room and
can walk along whichever face gravity currently pulls toward, jump away from
it, and turn gravity onto another face in mid-air or by a double press.

## Install

```
pip install .
```

## Play

```
gravroom
gravroom --sprites path/to/images
```

This opens an 800×600 window. Images are loaded from the directory given by
`--sprites` (default: `sprite` in the working directory): `MapSquare_0.png`
… `MapSquare_5.png` and `Player.png`. If one of them cannot be loaded, the
command prints `Error loading textures: ...` to standard error and exits
with status 1; otherwise it prints `Textures loaded successfully` and starts
the game.

## Controls

- **Arrow keys along the current floor**: walk one pixel per frame.
- **Arrow key away from the floor**: jump.
- **While in the air**: press an arrow key at right angles to the jump to turn
  gravity onto that side.
- **Press the jump key, let go, press it again**: turn gravity onto the
  opposite face.
- **Escape** or closing the window: quit.

## Using the pieces

The physics in `gravroom.physics` has no dependency on a display and can be
driven directly. `GravityController.step` advances one frame and moves the
body `Rect` in place:

```python
from gravroom.physics import Gravity, GravityController, Keys, Rect

room = Rect(0, 0, 800, 600)
player = Rect(100, 100, 64, 64)
controller = GravityController(body=player, room=room)
controller.step(Keys(up=True))
print(controller.state is Gravity.DOWN, controller.jumping, player)
```

The collision helpers `collide_floor`, `collide_ceiling`,
`collide_right_wall` and `collide_left_wall` clamp a body into the room and
return `False` when they had to move it.

Other modules:

- `gravroom.events`: `InputEvent`, `EventType`, `Key` and `handle_event`,
  which returns `True` on a quit event or Escape and scrolls a ground `Rect`
  by 10 pixels on Left/Right.
- `gravroom.layout`: `start_button_rect()` and `exit_button_rect()`, the
  positions of the menu buttons on an 800×600 screen.
- `gravroom.assets`: `load_texture(path)` and `create_button(normal_path,
  hover_path, rect)`, raising `AssetError` when an image cannot be loaded.
- `gravroom.app`: `Game` (with `load_world`, `game_frame`, `pause_frame`,
  `run`), `GameState` and `main`.

## What it does not do

- There is no menu screen: the game starts straight in play, and the menu
  state only clears the window. The button helpers are not drawn anywhere.
- Nothing switches into the pause state; pausing only keeps the last picture.
- Only the first room image is drawn; the ground scrolled by the arrow keys is
  not drawn.
- There is no sound or music.

## Tests

```
pip install .[test]
pytest
```