"""Combat units and their movement rules."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from fatecommander.tile import Tile, Vector3

Coord = Tuple[int, int]


class Team(enum.Enum):
    RED = "red"
    GREEN = "green"


class UnitType(enum.Enum):
    SNIPER = "sniper"
    BRAWLER = "brawler"


@dataclass(frozen=True)
class UnitStats:
    max_hp: int
    movement_range: int
    attack_range: int


UNIT_STATS = {
    UnitType.SNIPER: UnitStats(max_hp=20, movement_range=3, attack_range=10),
    UnitType.BRAWLER: UnitStats(max_hp=40, movement_range=6, attack_range=1),
}

UNIT_MATERIALS = {
    (UnitType.SNIPER, Team.GREEN): "/Game/Textures/M_Sniper_Green",
    (UnitType.SNIPER, Team.RED): "/Game/Textures/M_Sniper_Red",
    (UnitType.BRAWLER, Team.GREEN): "/Game/Textures/M_Brawler_Green",
    (UnitType.BRAWLER, Team.RED): "/Game/Textures/M_Brawler_Red",
}

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Unit:
    """A unit standing on a grid tile."""

    def __init__(
        self,
        team: Team,
        unit_type: UnitType,
        x: int = 0,
        y: int = 0,
        location: Vector3 = (0.0, 0.0, 0.0),
    ) -> None:
        self.x = x
        self.y = y
        self.location = location
        self.selected = False
        self.reachable_tiles: List[Coord] = []
        self.initialize(team, unit_type)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(team={self.team.name}, type={self.unit_type.name}, "
            f"x={self.x}, y={self.y}, hp={self.current_hp}/{self.max_hp})"
        )

    def initialize(self, team: Team, unit_type: UnitType) -> None:
        """Set team and type, and reset stats and hit points for that type."""
        self.team = team
        self.unit_type = unit_type
        stats = UNIT_STATS[unit_type]
        self.max_hp = stats.max_hp
        self.movement_range = stats.movement_range
        self.attack_range = stats.attack_range
        self.current_hp = self.max_hp

    @property
    def coordinates(self) -> Coord:
        return (self.x, self.y)

    @property
    def material(self) -> str:
        return UNIT_MATERIALS[(self.unit_type, self.team)]

    @property
    def is_alive(self) -> bool:
        return self.current_hp > 0

    def select(self) -> None:
        self.selected = True

    def deselect(self) -> None:
        """Clear the selection and forget the reachable tiles."""
        if self.selected:
            self.selected = False
            self.reachable_tiles = []

    def find_reachable_tiles(
        self, tiles: Iterable[Tile], units: Iterable["Unit"] = ()
    ) -> List[Coord]:
        """Breadth-first search of tiles within movement range.

        Obstacles, missing tiles and tiles held by other units block the path.
        The start tile is not included. The result is also kept on the unit.
        """
        tile_map = {tile.coordinates: tile for tile in tiles}
        occupied = {unit.coordinates for unit in units if unit is not self}

        start = self.coordinates
        reachable: List[Coord] = []
        queue = deque([(start, 0)])
        visited = {start}

        while queue:
            coord, distance = queue.popleft()
            if distance > 0:
                reachable.append(coord)
            if distance >= self.movement_range:
                continue
            for dx, dy in _DIRECTIONS:
                neighbor = (coord[0] + dx, coord[1] + dy)
                if neighbor in visited:
                    continue
                tile = tile_map.get(neighbor)
                if tile is None or not tile.is_empty() or neighbor in occupied:
                    continue
                visited.add(neighbor)
                queue.append((neighbor, distance + 1))

        self.reachable_tiles = reachable
        return list(reachable)

    def take_damage(self, amount: int) -> int:
        """Lose hit points, never below zero; return the damage actually taken."""
        if amount < 0:
            raise ValueError("damage cannot be negative")
        applied = min(amount, self.current_hp)
        self.current_hp -= applied
        return applied


class SniperUnit(Unit):
    """A long-range unit with few hit points."""

    def __init__(
        self,
        team: Team = Team.RED,
        x: int = 0,
        y: int = 0,
        location: Vector3 = (0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(team, UnitType.SNIPER, x, y, location)


class BrawlerUnit(Unit):
    """A close-combat unit with many hit points."""

    def __init__(
        self,
        team: Team = Team.RED,
        x: int = 0,
        y: int = 0,
        location: Vector3 = (0.0, 0.0, 0.0),
    ) -> None:
        super().__init__(team, UnitType.BRAWLER, x, y, location)