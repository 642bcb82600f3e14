"""Layout of a Space Invaders level: player, shields, aliens and difficulty."""

from __future__ import annotations

import math
import weakref
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from invaderkit.config import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPRITE_PROPERTIES,
    AnimatedSpriteID,
    Color,
    PlayerData,
)
from invaderkit.invader import Invader


class AlienGridConfig:
    """Geometry of the alien grid."""

    ALIEN_SIZE = (45.0, 33.0)
    SPACE_BETWEEN_ROWS = 30
    SPACE_BETWEEN_COLS = 18
    COLUMN_NUMBER = 11
    ROW_NUMBER = 5
    TOP_OFFSET = 150


@dataclass(frozen=True)
class LevelConfig:
    """Difficulty settings of a level."""

    alien_movement_delay: float = 0.014
    alien_shoot_probability: int = 70
    alien_projectile_speed: int = 350


LEVEL_CONFIG: Mapping[int, LevelConfig] = MappingProxyType(
    {
        1: LevelConfig(),
        2: LevelConfig(0.010, 80, 450),
        3: LevelConfig(0.005, 90, 600),
    }
)

LEVEL_PALETTES: tuple[tuple[Color, Color], ...] = (
    (Color(255, 192, 64), Color(255, 0, 0)),
    (Color(255, 128, 128), Color(128, 64, 192)),
    (Color(255, 255, 128), Color(192, 64, 64)),
    (Color(255, 96, 96), Color(128, 0, 0)),
    (Color(192, 128, 255), Color(64, 0, 128)),
    (Color(128, 255, 224), Color(0, 128, 128)),
    (Color(255, 224, 128), Color(128, 64, 0)),
    (Color(255, 160, 192), Color(128, 0, 64)),
)

SHIELD_NUMBER = 4
SHIELD_SIZE = (120.0, 80.0)
SHIELD_BOTTOM_OFFSET = 175


@dataclass(frozen=True)
class AlienInfo:
    """Sprite and score of an alien type."""

    sprite: AnimatedSpriteID
    score: int


@dataclass(frozen=True)
class AlienSpec:
    """Everything needed to build one alien of the grid."""

    position: tuple[float, float]
    size: tuple[float, float]
    col: int
    row: int
    sprite: AnimatedSpriteID
    color: Color
    score: int
    laser_speed: int


@dataclass(frozen=True)
class ShieldSpec:
    """Position, size and colour of one shield."""

    position: tuple[float, float]
    size: tuple[float, float]
    color: Color


def alien_info_for_row(row: int) -> AlienInfo:
    """Alien type and score for a grid row."""
    if row == 0:
        return AlienInfo(AnimatedSpriteID.ALIEN_SMALL, 10)
    if row in (1, 2):
        return AlienInfo(AnimatedSpriteID.ALIEN_MEDIUM, 20)
    if row in (3, 4):
        return AlienInfo(AnimatedSpriteID.ALIEN_LARGE, 10)
    raise ValueError(f"no alien type for row {row}")


def level_config_for(level_index: int) -> LevelConfig:
    """Difficulty of a level; levels beyond the last configured one reuse it."""
    clamped = min(level_index, len(LEVEL_CONFIG))
    try:
        return LEVEL_CONFIG[clamped]
    except KeyError:
        raise KeyError(f"no level configuration for level {level_index}") from None


def palette_for(level_index: int) -> tuple[Color, Color]:
    """Centre and edge colours of the alien gradient for a level (1-based, cycling)."""
    if level_index < 1:
        raise ValueError(f"level index must be at least 1, got {level_index}")
    return LEVEL_PALETTES[(level_index - 1) % len(LEVEL_PALETTES)]


def _alive(ref: Optional[Callable[[], Any]]) -> bool:
    if ref is None:
        return False
    obj = ref()
    if obj is None:
        return False
    marked = getattr(obj, "is_marked_for_deletion", None)
    return not (marked is not None and marked())


class SpaceInvadersLevel:
    """Spawns the player, the shields, the alien grid and its controlling invader.

    ``player_factory(player_data)``, ``alien_factory(alien_spec)`` and
    ``shield_factory(shield_spec)`` build the actors; ``invader_factory()``
    builds the formation controller.
    """

    def __init__(
        self,
        player_factory: Callable[[PlayerData], Any],
        alien_factory: Callable[[AlienSpec], Any],
        shield_factory: Callable[[ShieldSpec], Any],
        invader_factory: Callable[[], Invader] = Invader,
    ) -> None:
        self._player_factory = player_factory
        self._alien_factory = alien_factory
        self._shield_factory = shield_factory
        self._invader_factory = invader_factory
        self._player_data = PlayerData()
        self._player_ref: Optional[Callable[[], Any]] = None
        self._invader_ref: Optional[Callable[[], Any]] = None
        self._shield_refs: list[Callable[[], Any]] = []
        self._current_level = 1

    @property
    def current_level(self) -> int:
        """Index of the level last initialised."""
        return self._current_level

    def initialize_level(self, game_manager: Any, game_state: Any, level_index: int = 1) -> None:
        """Set up level ``level_index``: player, invader, shields (levels 1 and 2) and aliens."""
        self._current_level = level_index

        self.spawn_player(game_manager)
        self.spawn_invader(game_manager, game_state)

        if self._current_level < 3:
            for ref in self._shield_refs:
                shield = ref()
                if shield is not None:
                    shield.set_for_deletion()
            self._shield_refs.clear()
            self._initialize_shields(game_manager)

        invader = self._invader_ref() if self._invader_ref is not None else None
        if invader is None:
            raise RuntimeError("the invader is gone")
        self._initialize_aliens_grid(game_manager, invader)

    def spawn_player(self, game_manager: Any) -> None:
        """Create the player unless one is still alive."""
        if _alive(self._player_ref):
            return
        player = self._player_factory(self._player_data)
        self._player_ref = weakref.ref(player)
        game_manager.add_actor(player)

    def spawn_invader(self, game_manager: Any, game_state: Any) -> None:
        """Create the invader if needed and apply this level's difficulty to it."""
        config = level_config_for(self._current_level)
        if _alive(self._invader_ref):
            invader = self._invader_ref()
            invader.set_invader_settings(config.alien_movement_delay, config.alien_shoot_probability)
            return
        invader = self._invader_factory()
        invader.set_invader_settings(config.alien_movement_delay, config.alien_shoot_probability)
        self._invader_ref = weakref.ref(invader)
        game_manager.add_object(invader)
        game_state.add_observer(invader)

    def set_player_data(self, player_data: PlayerData) -> None:
        """Use ``player_data`` for the next player spawned."""
        self._player_data = player_data

    def create_alien(self, row: int, col: int, horizontal_margin: int = 0) -> Any:
        """Build the alien at ``(row, col)`` of the grid."""
        info = alien_info_for_row(row)
        alien_w, alien_h = AlienGridConfig.ALIEN_SIZE
        x = horizontal_margin + col * (alien_w + AlienGridConfig.SPACE_BETWEEN_COLS)
        y = AlienGridConfig.TOP_OFFSET + row * (alien_h + AlienGridConfig.SPACE_BETWEEN_ROWS)
        props = SPRITE_PROPERTIES[info.sprite]
        size = (props.width / 2.7, props.height / 2.7)

        if info.sprite is AnimatedSpriteID.ALIEN_SMALL:
            # The small alien's frame is a few pixels short in the sheet.
            x += 3.0

        spec = AlienSpec(
            position=(float(x), float(y)),
            size=size,
            col=col,
            row=row,
            sprite=info.sprite,
            color=self.compute_alien_radial_color(float(row), float(col)),
            score=info.score,
            laser_speed=level_config_for(self._current_level).alien_projectile_speed,
        )
        return self._alien_factory(spec)

    def compute_alien_radial_color(self, row: float, col: float) -> Color:
        """Colour of an alien, blending from the palette centre to its edge by distance from the grid centre."""
        last_col = AlienGridConfig.COLUMN_NUMBER - 1
        col = min(max(col, 0.0), float(last_col))

        normalize_x = col / last_col
        normalize_y = row / (AlienGridConfig.ROW_NUMBER - 1)
        max_distance = math.sqrt(0.5)
        dx = normalize_x - 0.5
        dy = normalize_y - 0.5
        distance = math.sqrt(dx * dx + dy * dy) / max_distance

        center, edge = palette_for(self._current_level)
        return center.lerp(edge, distance)

    def shield_specs(self) -> list[ShieldSpec]:
        """Evenly spaced shields near the bottom of the screen."""
        width, _ = SHIELD_SIZE
        spacing = SCREEN_WIDTH // (SHIELD_NUMBER + 1)
        y = float(SCREEN_HEIGHT - SHIELD_BOTTOM_OFFSET)
        return [
            ShieldSpec(
                position=(float(index * spacing - width / 2), y),
                size=SHIELD_SIZE,
                color=self._player_data.player_color,
            )
            for index in range(1, SHIELD_NUMBER + 1)
        ]

    def _initialize_shields(self, game_manager: Any) -> None:
        for spec in self.shield_specs():
            shield = self._shield_factory(spec)
            game_manager.add_actor(shield)
            self._shield_refs.append(weakref.ref(shield))

    def _initialize_aliens_grid(self, game_manager: Any, invader: Invader) -> None:
        columns = AlienGridConfig.COLUMN_NUMBER
        total_width = columns * int(AlienGridConfig.ALIEN_SIZE[0]) + (columns - 1) * AlienGridConfig.SPACE_BETWEEN_COLS
        margin = (SCREEN_WIDTH - total_width) // 2

        for row in range(AlienGridConfig.ROW_NUMBER):
            # Right to left, so the bottom-left alien is created last.
            for col in reversed(range(columns)):
                alien = self.create_alien(row, col, margin)
                game_manager.add_actor(alien)
                invader.add_alien(alien)