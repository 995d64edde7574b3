# fatecommander

A small engine for a two-sided, grid-based tactics game. It needs nothing
beyond the standard library.

## Modules

### `fatecommander.tile`

- `TileType` is one of `EMPTY`, `MOUNTAIN`, `TREE1` or `TREE2`. Its
  `is_obstacle` property is true for every type except `EMPTY`.
- `Tile` holds grid coordinates `x` and `y`, a `tile_type`, a world
  `location` and a highlight state. `is_empty()` tells whether the tile holds
  no obstacle. `highlight(enabled, color)` turns the movement highlight on or
  off. The `material` property gives the material path the tile is drawn
  with: the highlight material while highlighted, otherwise the one for its
  type.

### `fatecommander.unit`

- `Team` is `RED` or `GREEN`, and `UnitType` is `SNIPER` or `BRAWLER`.
- `Unit(team, unit_type, x, y, location)` is a piece on the grid.
  `initialize(team, unit_type)` sets its team and type and resets its stats:

  | type    | HP | movement | attack range |
  |---------|----|----------|--------------|
  | sniper  | 20 | 3        | 10           |
  | brawler | 40 | 6        | 1            |

- `select()` and `deselect()` set the selection. Deselecting also forgets the
  reachable tiles.
- `find_reachable_tiles(tiles, units)` runs a breadth-first search up to the
  movement range. Missing tiles, obstacles and tiles held by other units block
  the path. It returns the reachable coordinates, without the start tile, and
  keeps them in `reachable_tiles`.
- `take_damage(amount)` lowers the hit points, never below zero, and returns
  the damage actually taken. A negative amount raises `ValueError`.
  `is_alive` is true while the unit has hit points left.
- `SniperUnit(team, x, y, location)` and `BrawlerUnit(team, x, y, location)`
  create units of a fixed type. Their team defaults to `RED`.

### `fatecommander.battlefield`

`Battlefield(grid_size=25, tile_spacing=110.0, obstacle_percentage=0.2, rng=None)`
is a square grid centred on the world origin. A `grid_size` below 1 raises
`ValueError`.

- `spawn_grid()` creates every tile and replaces any tiles that were there
  before.
- `spawn_obstacles()` aims for `grid_size² × obstacle_percentage` obstacles,
  rounded. It splits them evenly between mountains and the two tree types,
  with any remainder left unplaced. Obstacles go only on empty tiles inside
  the band between 15% and 85% of the grid size (`obstacle_bounds`). The
  number of failed random picks is capped. It returns the count placed of
  each type.
- `tile_at(x, y)` returns the tile at those coordinates, or `None`.
- `empty_tiles()` lists the tiles that hold no obstacle.
- `world_location(x, y)` gives the world position of a grid cell.

`PlayerTurn` (`HUMAN`, `AI`) names the two sides.

### `fatecommander.commander`

`Commander(battlefield, rng=None, human_first=None)` runs a game. The human
plays green and the AI plays red. If `human_first` is not given, a coin toss
from `rng` decides who places first.

- **Placement.** Call `start_placement_phase()` to open it. If the AI won the
  toss, it places at once. The sides then alternate: a sniper each, then a
  brawler each, four placements in all.
  - The human places through `handle_placement(coord)`, or by clicking with
    `handle_tile_clicked(coord)`.
  - The AI places on a random empty tile as soon as its turn comes.
  - A placement succeeds only on an existing tile without an obstacle. Units
    already standing there are not checked.
  - `is_current_turn_human()` and `is_placement_phase_complete()` report the
    progress. Placed units are kept in `units`.
- **Selection and movement.** `set_selected_unit(unit)` selects a unit, or
  none. It also computes the unit's reachable tiles and highlights its movement
  tiles.
  - `highlight_movement_tiles()` highlights every empty tile within the unit's
    movement range of Manhattan distance. This includes the unit's own tile.
    It does not check whether the path is blocked.
  - Once placement is over, clicking a highlighted tile with
    `handle_tile_clicked(coord)` moves the selected unit there and clears the
    selection.
  - `clear_highlighted_tiles()` removes the highlights.
- **AI turn.** `execute_ai_turn()` handles each red unit in turn:
  1. It picks the nearest green unit by Manhattan distance.
  2. It moves to the reachable tile that gets closest to that unit, if any
     tile is closer than where it stands.
  3. If the target is then in range (10 for a sniper, 1 for a brawler), it
     attacks. A sniper deals 4–8 damage and a brawler 1–6.

  The method returns the attacks made as a list of `Attack(attacker, target,
  damage)`.
- `unit_grid_coord(unit)` derives a unit's grid coordinates from its world
  location.

## Example

```python
import random

from fatecommander.battlefield import Battlefield
from fatecommander.commander import Commander

rng = random.Random(7)
field = Battlefield(grid_size=25, tile_spacing=110.0, obstacle_percentage=0.2, rng=rng)
field.spawn_grid()
field.spawn_obstacles()

commander = Commander(field, rng=rng, human_first=True)
commander.start_placement_phase()

# The human places a sniper by clicking an empty tile; the AI answers at once.
tile = field.empty_tiles()[0]
commander.handle_tile_clicked((tile.x, tile.y))

print(len(commander.units))                     # 2
print(commander.is_placement_phase_complete())  # False
```

Pass a seeded `random.Random` to `Battlefield` and `Commander` to make the
obstacle layout, the toss, the AI's placements and its damage rolls
repeatable.

## What it does not do

This is a game engine without a front end.

- It has no command, window or rendering. Material paths are only reported
  through the `material` properties.
- Nothing reads input. Clicks have to be passed in by calling
  `handle_tile_clicked`.
- After placement there is no loop that alternates human and AI turns.
- The human side has no attack action.
- Units left with no hit points are not removed from the board.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```