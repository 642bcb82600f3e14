"""Screen dimensions, colours, sprite sheet layout and player settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Any, Mapping

SCREEN_WIDTH = 900
PLAYGROUND_OFFSET = 60
SCREEN_HEIGHT = 900
SPRITE_SHEET_PADDING = 10


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def lerp(self, other: "Color", t: float) -> "Color":
        """Blend towards ``other`` by ``t``, truncating each channel."""
        return Color(
            _channel(self.r + (other.r - self.r) * t),
            _channel(self.g + (other.g - self.g) * t),
            _channel(self.b + (other.b - self.b) * t),
            _channel(self.a + (other.a - self.a) * t),
        )


GREEN = Color(0, 228, 48, 255)


class AnimatedSpriteID(Enum):
    """Animated sprites found in the sprite sheets."""

    ALIEN_SMALL = auto()
    ALIEN_MEDIUM = auto()
    ALIEN_LARGE = auto()
    STAR = auto()
    START_BUTTON = auto()
    LEFT_SELECTION_BUTTON = auto()
    RIGHT_SELECTION_BUTTON = auto()


@dataclass(frozen=True)
class SpriteProperties:
    """Frame size, frame count and horizontal offset of a sprite in its sheet."""

    width: float
    height: float
    max_frame_index: int
    sprite_offset: float = 0.0


SPRITE_PROPERTIES: Mapping[AnimatedSpriteID, SpriteProperties] = MappingProxyType(
    {
        AnimatedSpriteID.ALIEN_SMALL: SpriteProperties(81.0, 84.0, 1, 244.0),
        AnimatedSpriteID.ALIEN_MEDIUM: SpriteProperties(112.0, 84.0, 1, 0.0),
        AnimatedSpriteID.ALIEN_LARGE: SpriteProperties(122.0, 84.0, 1, 426.0),
        AnimatedSpriteID.STAR: SpriteProperties(76.0, 76.0, 3),
        AnimatedSpriteID.START_BUTTON: SpriteProperties(220.0, 120.0, 2),
        AnimatedSpriteID.LEFT_SELECTION_BUTTON: SpriteProperties(28.0, 42.0, 2),
        AnimatedSpriteID.RIGHT_SELECTION_BUTTON: SpriteProperties(28.0, 42.0, 2, 114.0),
    }
)


@dataclass
class PlayerData:
    """Settings of the player's ship chosen in the start menu."""

    player_color: Color = GREEN
    base_texture: Any = None
    canon_texture: Any = None
    canon_laser_offset: int = 0
    lives: int = 3
    max_lasers: int = 1
    laser_per_shot: int = 1
    laser_speed: int = 800
    shoot_cooldown: float = 1.0
    movement_speed: int = 200