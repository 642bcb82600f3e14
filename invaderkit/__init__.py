"""Engine-independent game logic for a Space Invaders style arcade game."""

__version__ = "0.1.0"
__all__ = ["config", "game_manager", "game_state", "interfaces", "invader", "level"]