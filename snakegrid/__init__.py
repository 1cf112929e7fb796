"""Grid model, grid visual layout, camera fitting and colour themes for a snake game."""

__version__ = "0.1.0"
__all__ = ["types", "grid", "game", "world_types", "world_grid", "pawn", "game_mode"]