"""A terminal tower defense game: road generation, towers, enemies and the game loop."""

__version__ = "0.1.0"
__all__ = ["canvas", "road", "placement", "tower", "enemy", "game"]