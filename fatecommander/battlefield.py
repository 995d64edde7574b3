"""The square battlefield grid and its randomly placed obstacles."""

from __future__ import annotations

import enum
import logging
import math
import random
from typing import Dict, List, Optional, Tuple

from fatecommander.tile import Tile, TileType, Vector3

logger = logging.getLogger(__name__)

OBSTACLE_TYPES = (TileType.MOUNTAIN, TileType.TREE1, TileType.TREE2)

DEFAULT_GRID_SIZE = 25
DEFAULT_TILE_SPACING = 110.0
DEFAULT_OBSTACLE_PERCENTAGE = 0.20

_BORDER_LOW = 0.15
_BORDER_HIGH = 0.85


class PlayerTurn(enum.Enum):
    HUMAN = "human"
    AI = "ai"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class Battlefield:
    """A square grid of tiles centred on the world origin."""

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        tile_spacing: float = DEFAULT_TILE_SPACING,
        obstacle_percentage: float = DEFAULT_OBSTACLE_PERCENTAGE,
        rng: Optional[random.Random] = None,
    ) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1")
        self.grid_size = grid_size
        self.tile_spacing = tile_spacing
        self.obstacle_percentage = obstacle_percentage
        self.rng = rng if rng is not None else random.Random()
        self._tiles: List[Tile] = []
        self._by_coord: Dict[Tuple[int, int], Tile] = {}

    @property
    def tiles(self) -> List[Tile]:
        return list(self._tiles)

    @property
    def obstacle_bounds(self) -> Tuple[int, int]:
        """Lowest and highest grid index on which obstacles may be placed."""
        return int(self.grid_size * _BORDER_LOW), int(self.grid_size * _BORDER_HIGH)

    def world_location(self, x: int, y: int) -> Vector3:
        """World position of the tile at grid coordinates (x, y)."""
        offset = (self.grid_size - 1) * self.tile_spacing / 2.0
        return (x * self.tile_spacing - offset, y * self.tile_spacing - offset, 0.0)

    def spawn_grid(self) -> None:
        """Create every tile of the grid, replacing any existing ones."""
        self._tiles = []
        self._by_coord = {}
        for x in range(self.grid_size):
            for y in range(self.grid_size):
                tile = Tile(x, y, location=self.world_location(x, y))
                self._tiles.append(tile)
                self._by_coord[tile.coordinates] = tile

    def spawn_obstacles(self) -> Dict[TileType, int]:
        """Scatter obstacles evenly by type over the inner part of the grid.

        Returns how many tiles of each obstacle type were placed.
        """
        counts = dict.fromkeys(OBSTACLE_TYPES, 0)
        if not self._tiles:
            return counts

        total = self.grid_size * self.grid_size
        wanted = min(max(_round_half_up(total * self.obstacle_percentage), 0), total)
        per_type = wanted // len(OBSTACLE_TYPES)
        low, high = self.obstacle_bounds

        placed = 0
        attempts = 0
        while placed < wanted and attempts < wanted * 10:
            if all(count >= per_type for count in counts.values()):
                break
            tile = self.rng.choice(self._tiles)
            if not tile.is_empty() or not (low <= tile.x <= high and low <= tile.y <= high):
                attempts += 1
                continue
            kind = next(t for t in OBSTACLE_TYPES if counts[t] < per_type)
            tile.tile_type = kind
            counts[kind] += 1
            placed += 1

        logger.warning(
            "Obstacles: Mountain=%d, Tree1=%d, Tree2=%d",
            counts[TileType.MOUNTAIN],
            counts[TileType.TREE1],
            counts[TileType.TREE2],
        )
        return counts

    def tile_at(self, x: int, y: int) -> Optional[Tile]:
        """The tile at (x, y), or None if the grid has none there."""
        return self._by_coord.get((x, y))

    def empty_tiles(self) -> List[Tile]:
        return [tile for tile in self._tiles if tile.is_empty()]