# pixelrealm

A small top-down 2D game built on pygame. It opens on a menu screen with a
background picture and two buttons, **Play** and **Exit**. Playing takes you
to a tile-map level where a character walks around with an animated sprite,
followed by the camera.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Assets

The game loads its pictures and font from a `textures` directory one level
above the working directory (`../textures/`). It expects:

- `tileset_1bit.png`: the 16×16 tile set used for the level
- `char_a_p1_0bas_humn_v00.png`: the player's sprite sheet, in 64×64 frames
- `pixel_art_bg.jpg`: the menu background, drawn at 0.3 of its size
- `apercumovistarbold.ttf`: the font for the menu buttons

A missing file raises `RuntimeError` when the screen that needs it is created.

## Running

```
pixelrealm
```

This opens a resizable 1920×1080 window titled "My window", shows the menu
and runs at up to 60 frames a second until the window is closed.

## Controls

Menu:

- Click **Play** or press **Enter** to start the level.
- Click **Exit** or press **Escape** to quit.

Level:

- **W A S D** move the player; the camera follows, centred a little to the
  right of the player.
- **Enter** returns to the menu, **Escape** quits.

A control panel in the top-left corner has four buttons:

- **playerMode**: the keys move the player and the camera follows.
- **cameraMode**: the keys pan the camera freely; **E** widens the visible
  area by 1% a frame and **Q** narrows it by 1% a frame.
- **menu state** / **level state**: jump straight to either screen.

Closing the window quits from either screen.

## Using the pieces

The game objects can be used on their own:

- `pixelrealm.tilemap.TileMap` loads a tileset and builds the level's
  triangles from a list of tile numbers; `build_tile_vertices` does the same
  from a tileset width alone, without an image file. Each tile gives six
  `Vertex` values, placed at twice the tile size.
- `pixelrealm.mesh.Mesh` and `quad_vertices` lay out a scaled textured quad.
- `pixelrealm.entity.Entity` is the base for sprites with a world position;
  `Control`, `pressed_controls` and `movement_vector` turn held keys into a
  unit direction.
- `pixelrealm.player.Player` walks at 6 units a frame and steps through its
  walk-cycle frames.
- `pixelrealm.camera.View` maps between world and screen coordinates;
  `Camera` and `MenuCamera` wrap one.
- `pixelrealm.button.Button` is a labelled rectangle with idle, hover and
  active colours; `ButtonState` names the three states.
- `pixelrealm.state.State` is the interface of a screen; `MenuState` and
  `LevelState` implement it.
- `pixelrealm.engine.Engine` opens the window, runs the frame loop, draws the
  control panel and switches between states.
- `pixelrealm.app.main` is the `pixelrealm` command.

## What it does not do

The level is a fixed 28×16 map. There is no collision: the player and the
camera can move past the map's edges. There are no other characters, no
sound and no saving of progress.