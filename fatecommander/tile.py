"""Grid tiles of the battlefield."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

Vector3 = Tuple[float, float, float]


class TileType(enum.Enum):
    """What occupies a tile of terrain."""

    EMPTY = "empty"
    MOUNTAIN = "mountain"
    TREE1 = "tree1"
    TREE2 = "tree2"

    @property
    def is_obstacle(self) -> bool:
        return self is not TileType.EMPTY


TILE_MATERIALS = {
    TileType.EMPTY: "/Game/Materials/Tile_Material.Tile_Material",
    TileType.MOUNTAIN: "/Game/Obstacles/M_Mountain",
    TileType.TREE1: "/Game/Obstacles/M_Tree1",
    TileType.TREE2: "/Game/Obstacles/M_Tree2",
}

HIGHLIGHT_MATERIAL = "/Game/Materials/M_TileHighlight.M_TileHighlight"

DEFAULT_HIGHLIGHT_COLOR = "green"


@dataclass(eq=False)
class Tile:
    """A single square of the grid, addressed by its (x, y) grid coordinates."""

    x: int
    y: int
    tile_type: TileType = TileType.EMPTY
    location: Vector3 = (0.0, 0.0, 0.0)
    highlighted: bool = False
    highlight_color: Optional[str] = None

    @property
    def coordinates(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def material(self) -> str:
        """The material the tile is currently drawn with."""
        if self.highlighted:
            return HIGHLIGHT_MATERIAL
        return TILE_MATERIALS[self.tile_type]

    def is_empty(self) -> bool:
        return self.tile_type is TileType.EMPTY

    def highlight(self, enabled: bool, color: str = DEFAULT_HIGHLIGHT_COLOR) -> None:
        """Turn the movement highlight on or off; off restores the normal look."""
        self.highlighted = enabled
        self.highlight_color = color if enabled else None