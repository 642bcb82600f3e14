"""Score, lives, level progression and game-over flow, with their observers."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from invaderkit.config import SCREEN_HEIGHT, SCREEN_WIDTH, PlayerData
from invaderkit.interfaces import GameStateObserver, Updatable

MESSAGE_FONT_SIZE = 60
FREEZE_MOVEMENT_DURATION = 1.75


class Key(Enum):
    """Keys the game state reacts to after a game over."""

    SPACE = "space"
    X = "x"


@dataclass(frozen=True)
class PlayerCanonConfig:
    """Textures of the player's base and canon."""

    base_texture: Any = None
    canon_texture: Any = None


def _make_ref(obj: Any) -> Callable[[], Any]:
    try:
        return weakref.ref(obj)
    except TypeError:
        return lambda: obj


class UIManager:
    """Creates the in-game HUD and message widgets and wires them to the game.

    ``hud_factory()`` builds the HUD; ``message_factory(position, font_size)``
    builds the centred message widget.
    """

    def __init__(
        self,
        game_manager: Any,
        game_state: "GameState",
        hud_factory: Callable[[], Any],
        message_factory: Callable[[tuple[float, float], int], Any],
    ) -> None:
        message = message_factory((SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 1.8), MESSAGE_FONT_SIZE)
        hud = hud_factory()

        self._hud_ref = _make_ref(hud)
        self._message_ref = _make_ref(message)

        game_state.add_observer(hud)
        game_state.add_observer(message)
        game_manager.add_widget(hud)
        game_manager.add_widget(message)

    @property
    def hud(self) -> Any:
        """The HUD widget, or None once it is gone."""
        return self._hud_ref()

    @property
    def message_widget(self) -> Any:
        """The message widget, or None once it is gone."""
        return self._message_ref()


class GameState(Updatable):
    """Tracks score, lives and the current level and tells observers about changes.

    ``level_factory()`` builds the level, which provides ``set_player_data``,
    ``initialize_level(game_manager, game_state, level_index)`` and
    ``spawn_player(game_manager)``. ``start_menu_factory()`` builds the start
    menu widget; ``ui_factory(game_manager, game_state)`` sets up the in-game UI.
    ``key_pressed(key)`` reports whether a :class:`Key` was pressed this frame and
    ``play_sound(sound)`` plays a loaded sound. Observers are held weakly.
    """

    def __init__(
        self,
        game_manager: Any,
        level_factory: Callable[[], Any],
        start_menu_factory: Optional[Callable[[], Any]] = None,
        ui_factory: Optional[Callable[[Any, "GameState"], Any]] = None,
        key_pressed: Optional[Callable[[Key], bool]] = None,
        play_sound: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self._game_manager = game_manager
        self._level_factory = level_factory
        self._start_menu_factory = start_menu_factory
        self._ui_factory = ui_factory
        self._key_pressed = key_pressed if key_pressed is not None else (lambda key: False)
        self._play_sound = play_sound if play_sound is not None else (lambda sound: None)

        self._observers: list[Callable[[], Any]] = []
        self._current_level: Any = None
        self._ui_manager: Any = None
        self._player_canon_config = PlayerCanonConfig()

        self._level_index = 1
        self._score = 0
        self._high_score = 0
        self._max_lives = 3
        self._lives = 3
        self._is_game_over = False
        self._freeze_movement = False
        self._freeze_duration = FREEZE_MOVEMENT_DURATION
        self._freeze_timer = 0.0

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def high_score(self) -> int:
        """Best score reached in a finished game."""
        return self._high_score

    @property
    def lives(self) -> int:
        """Lives left."""
        return self._lives

    @property
    def max_lives(self) -> int:
        """Lives at the start of a game."""
        return self._max_lives

    @property
    def level_index(self) -> int:
        """Number of the current level, from 1."""
        return self._level_index

    @property
    def is_game_over(self) -> bool:
        """True between a game over and the next restart."""
        return self._is_game_over

    @property
    def is_movement_frozen(self) -> bool:
        """True during the pause after a death."""
        return self._freeze_movement

    @property
    def player_canon_config(self) -> PlayerCanonConfig:
        """Textures chosen for the player's ship."""
        return self._player_canon_config

    def update(self, delta_sec: float) -> None:
        """Advance the post-death transition, if one is running."""
        if self._freeze_movement:
            self.handle_transition_timer(delta_sec)

    def handle_transition_timer(self, delta_sec: float) -> None:
        """Respawn the player after the pause, or wait for a restart or quit after a game over."""
        self._freeze_timer += delta_sec
        if self._freeze_timer < self._freeze_duration:
            return

        if self._is_game_over:
            self._game_manager.clear_level()
            if self._key_pressed(Key.SPACE):
                self.reset_level()
                self._is_game_over = False
                self._freeze_movement = False
                self._freeze_timer = 0.0
            if self._key_pressed(Key.X):
                self.return_to_main_menu()
        else:
            self._freeze_movement = False
            self._freeze_timer = 0.0
            self.on_player_respawned()

    def return_to_main_menu(self) -> None:
        """Tear the level and its widgets down and show the start menu."""
        self._game_manager.clear_level()
        self._game_manager.clear_all_widgets()
        self._is_game_over = False
        self._freeze_movement = False
        self._freeze_timer = 0.0
        self.load_start_menu()

    def load_start_menu(self) -> None:
        """Add the start menu widget."""
        if self._start_menu_factory is None:
            return
        self._game_manager.add_widget(self._start_menu_factory())

    def start_level(self, player_data: PlayerData) -> None:
        """Start a new game at level 1 with ``player_data``."""
        self._game_manager.clear_all_widgets()

        self._max_lives = player_data.lives
        self._lives = self._max_lives
        self._player_canon_config = PlayerCanonConfig(player_data.base_texture, player_data.canon_texture)

        self._level_index = 1
        self._score = 0

        self._current_level = self._level_factory()
        self._current_level.set_player_data(player_data)
        self._current_level.initialize_level(self._game_manager, self, 1)

        if self._ui_factory is not None:
            self._ui_manager = self._ui_factory(self._game_manager, self)

        # Paused until the countdown finishes.
        self._game_manager.set_pause_game(True)

        for observer in self._live_observers():
            observer.notify_level_start(self._level_index)
            observer.notify_high_score_update(self._high_score)
            observer.notify_player_life_update(self._lives)

    def next_level(self) -> None:
        """Move on to the next, harder level."""
        level = self._require_level()
        self._game_manager.clear_all_projectiles()
        self._game_manager.set_pause_game(True)

        self._level_index += 1
        level.initialize_level(self._game_manager, self, self._level_index)

        for observer in self._live_observers():
            observer.notify_level_start(self._level_index)

    def reset_level(self) -> None:
        """Restart from level 1 with full lives and no score."""
        level = self._require_level()
        level.initialize_level(self._game_manager, self, 1)
        self._game_manager.set_pause_game(True)

        self._lives = self._max_lives
        self._score = 0
        self._level_index = 1

        for observer in self._live_observers():
            observer.notify_level_start(self._level_index)
            observer.notify_player_life_update(self._lives)
            observer.notify_score_update(self._score)

    def on_player_died(self) -> None:
        """Take a life; end the game if none is left."""
        self._lives -= 1
        self._freeze_movement = True

        for observer in self._live_observers():
            observer.notify_player_life_update(self._lives)

        if self._lives <= 0:
            self.on_game_over()
            return

        for observer in self._live_observers():
            observer.notify_player_died()

    def on_player_respawned(self) -> None:
        """Bring the player back and tell observers."""
        self._require_level().spawn_player(self._game_manager)
        for observer in self._live_observers():
            observer.notify_player_respawn()

    def on_game_over(self) -> None:
        """Freeze the game, play the game-over sound and record the high score."""
        self._freeze_movement = True
        self._is_game_over = True

        self._play_sound(self._game_manager.get_sound("gameOver"))
        self._game_manager.set_pause_game(True)

        self._high_score = max(self._score, self._high_score)

        for observer in self._live_observers():
            observer.notify_game_over()
            observer.notify_high_score_update(self._high_score)

    def on_countdown_finished(self) -> None:
        """Unpause the game once the start countdown is over."""
        self._game_manager.set_pause_game(False)

    def add_score(self, score: int) -> None:
        """Add ``score`` points."""
        self._score += score
        for observer in self._live_observers():
            observer.notify_score_update(self._score)

    def add_observer(self, observer: GameStateObserver) -> None:
        """Start telling ``observer`` about changes; it is held weakly."""
        self._observers.append(_make_ref(observer))

    def remove_observer(self, observer: GameStateObserver) -> None:
        """Stop telling ``observer`` about changes."""
        self._observers = [ref for ref in self._observers if ref() is not observer]

    def _live_observers(self) -> Iterator[Any]:
        self._observers = [ref for ref in self._observers if ref() is not None]
        for ref in list(self._observers):
            observer = ref()
            if observer is not None:
                yield observer

    def _require_level(self) -> Any:
        if self._current_level is None:
            raise RuntimeError("no level has been started")
        return self._current_level