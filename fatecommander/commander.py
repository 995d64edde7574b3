"""Turn orchestration: the placement toss, unit selection, movement and the AI turn."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from fatecommander.battlefield import Battlefield
from fatecommander.tile import Tile, Vector3
from fatecommander.unit import BrawlerUnit, SniperUnit, Team, Unit, UnitType

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

UNIT_HEIGHT = 10.0
PLACEMENT_STEPS = 4
SNIPER_DAMAGE = (4, 8)
BRAWLER_DAMAGE = (1, 6)
HIGHLIGHT_COLOR = "green"


@dataclass(frozen=True)
class Attack:
    """One attack made during an AI turn."""

    attacker: Unit
    target: Unit
    damage: int


def _manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _above(location: Vector3) -> Vector3:
    return (location[0], location[1], location[2] + UNIT_HEIGHT)


class Commander:
    """Runs the game on a battlefield: alternate placement, then movement and attacks.

    The human plays the green team, the AI the red team. Who places first is
    decided by a coin toss unless ``human_first`` is given.
    """

    def __init__(
        self,
        battlefield: Battlefield,
        rng: Optional[random.Random] = None,
        human_first: Optional[bool] = None,
    ) -> None:
        self.battlefield = battlefield
        self.rng = rng if rng is not None else battlefield.rng
        self.human_first = (
            self.rng.random() < 0.5 if human_first is None else bool(human_first)
        )
        self.placement_active = False
        self.placement_step = 0
        self.selected_unit: Optional[Unit] = None
        self.reachable_tiles_for_movement: List[Tile] = []
        self.units: List[Unit] = []
        logger.info(
            "%s starts placing first!", "Human" if self.human_first else "AI"
        )

    # -- placement -----------------------------------------------------------

    def start_placement_phase(self) -> None:
        """Open the placement phase; the AI places at once if it won the toss."""
        self.placement_active = True
        self.placement_step = 0
        if not self.is_current_turn_human():
            self.handle_placement(None)

    def handle_placement(self, coord: Optional[Coord]) -> bool:
        """Place the next unit; the coordinate is used only on the human's turn.

        Returns whether a unit was placed by this call.
        """
        if not self.placement_active:
            return False

        unit_type = self._unit_type_for_current_placement()
        if self.is_current_turn_human():
            if coord is None or not self._try_place_unit_at(coord, True, unit_type):
                return False
        else:
            tile = self._find_random_empty_tile()
            if tile is None or not self._try_place_unit_at(
                tile.coordinates, False, unit_type
            ):
                return False

        self.placement_step += 1
        if self.is_placement_phase_complete():
            self._end_placement_phase()
        elif not self.is_current_turn_human():
            self.handle_placement(None)
        return True

    def is_current_turn_human(self) -> bool:
        return (self.placement_step % 2 == 0) == self.human_first

    def is_placement_phase_complete(self) -> bool:
        return self.placement_step >= PLACEMENT_STEPS

    def _unit_type_for_current_placement(self) -> UnitType:
        return UnitType.SNIPER if self.placement_step in (0, 1) else UnitType.BRAWLER

    def _try_place_unit_at(self, coord: Coord, is_human: bool, unit_type: UnitType) -> bool:
        tile = self.battlefield.tile_at(*coord)
        if tile is None or not tile.is_empty():
            return False
        team = Team.GREEN if is_human else Team.RED
        unit_class = SniperUnit if unit_type is UnitType.SNIPER else BrawlerUnit
        unit = unit_class(team, tile.x, tile.y, _above(tile.location))
        self.units.append(unit)
        return True

    def _find_random_empty_tile(self) -> Optional[Tile]:
        empty = self.battlefield.empty_tiles()
        return self.rng.choice(empty) if empty else None

    def _end_placement_phase(self) -> None:
        self.placement_active = False
        logger.warning("All units placed! Starting normal gameplay turns...")

    # -- selection and movement ----------------------------------------------

    def handle_tile_clicked(self, coord: Coord) -> None:
        """React to a click on the tile at ``coord``."""
        if self.placement_active:
            self.handle_placement(coord)
        elif self.selected_unit is not None:
            if any(t.coordinates == tuple(coord) for t in self.reachable_tiles_for_movement):
                self._move_selected_unit_to(tuple(coord))

    def set_selected_unit(self, unit: Optional[Unit]) -> None:
        """Select a unit (or none), dropping the previous selection."""
        if self.selected_unit is not None:
            self.selected_unit.deselect()
            self.clear_highlighted_tiles()

        self.selected_unit = unit

        if unit is not None:
            unit.select()
            unit.find_reachable_tiles(self.battlefield.tiles, self.units)
            self.highlight_movement_tiles()

    def highlight_movement_tiles(self) -> None:
        """Highlight every empty tile within the selected unit's movement range."""
        unit = self.selected_unit
        if unit is None:
            return
        self.clear_highlighted_tiles()
        reach = unit.movement_range
        for tile in self.battlefield.tiles:
            if not tile.is_empty():
                continue
            dx = abs(tile.x - unit.x)
            dy = abs(tile.y - unit.y)
            if dx <= abs(reach - dy) and dy <= abs(reach - dx):
                tile.highlight(True, HIGHLIGHT_COLOR)
                self.reachable_tiles_for_movement.append(tile)

    def clear_highlighted_tiles(self) -> None:
        for tile in self.reachable_tiles_for_movement:
            tile.highlight(False)
        self.reachable_tiles_for_movement = []

    def _move_selected_unit_to(self, coord: Coord) -> None:
        unit = self.selected_unit
        if unit is None:
            return
        tile = self.battlefield.tile_at(*coord)
        if tile is None or not tile.is_empty():
            return
        unit.location = _above(tile.location)
        unit.x, unit.y = tile.x, tile.y
        unit.deselect()
        self.selected_unit = None
        self.clear_highlighted_tiles()

    def unit_grid_coord(self, unit: Unit) -> Coord:
        """Grid coordinates of a unit, derived from its world location."""
        spacing = self.battlefield.tile_spacing
        half = (self.battlefield.grid_size - 1) / 2.0
        x, y, _ = unit.location
        return (math.floor(x / spacing + half + 0.5), math.floor(y / spacing + half + 0.5))

    # -- AI turn -------------------------------------------------------------

    def execute_ai_turn(self) -> List[Attack]:
        """Move each red unit toward its nearest green unit and attack if in range."""
        ai_units = [u for u in self.units if u.team is Team.RED]
        human_units = [u for u in self.units if u.team is not Team.RED]
        attacks: List[Attack] = []

        for ai_unit in ai_units:
            self.selected_unit = ai_unit
            reachable = ai_unit.find_reachable_tiles(self.battlefield.tiles, self.units)

            position = self.unit_grid_coord(ai_unit)
            target: Optional[Unit] = None
            min_distance: Optional[int] = None
            for human in human_units:
                distance = _manhattan(self.unit_grid_coord(human), position)
                if min_distance is None or distance < min_distance:
                    min_distance = distance
                    target = human

            if target is not None and min_distance is not None and reachable:
                target_coord = self.unit_grid_coord(target)
                best_move = position
                best_distance = min_distance
                for move in reachable:
                    distance = _manhattan(target_coord, move)
                    if distance < best_distance:
                        best_distance = distance
                        best_move = move

                if best_move != position:
                    self._move_selected_unit_to(best_move)
                    position = best_move

                is_sniper = ai_unit.unit_type is UnitType.SNIPER
                attack_range = 10 if is_sniper else 1
                if _manhattan(target_coord, position) <= attack_range:
                    low, high = SNIPER_DAMAGE if is_sniper else BRAWLER_DAMAGE
                    damage = self.rng.randint(low, high)
                    target.take_damage(damage)
                    attacks.append(Attack(ai_unit, target, damage))
                    logger.warning(
                        "AI attacked: %s dealt %d damage", ai_unit.unit_type.name, damage
                    )

            if self.selected_unit is not None:
                self.selected_unit.deselect()
            self.selected_unit = None
            self.clear_highlighted_tiles()

        return attacks