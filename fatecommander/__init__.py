"""Grid-based tactics engine: tiles, units, a battlefield with obstacles and a commander that runs placement, movement and the AI turn."""

__version__ = "0.1.0"
__all__ = ["tile", "unit", "battlefield", "commander"]