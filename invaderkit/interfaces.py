"""Abstract roles shared by the game's actors, objects, widgets and observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class Updatable(ABC):
    """Something that advances every frame."""

    @abstractmethod
    def update(self, delta_sec: float) -> None:
        """Advance by ``delta_sec`` seconds."""


class Drawable(ABC):
    """Something that renders itself every frame."""

    @abstractmethod
    def draw(self) -> None:
        """Render the current state."""


class GameObject(Updatable):
    """A game element that is updated but has no visual representation."""


class AlienObserver(ABC):
    """Receives events raised by aliens."""

    @abstractmethod
    def notify_alien_died(self, alien: Any) -> None:
        """Called when ``alien`` has been destroyed."""


class ButtonObserver(ABC):
    """Receives button presses from menu widgets."""

    @abstractmethod
    def on_button_pressed(self, action: Any) -> None:
        """Called when a button bound to ``action`` is pressed."""


class GameStateObserver:
    """Receives game state changes.

    The default hooks keep a snapshot of the last values reported; subclasses
    override the hooks they care about and may call ``super()`` to keep it.
    """

    observed_level: Optional[int] = None
    observed_score: Optional[int] = None
    observed_high_score: Optional[int] = None
    observed_lives: Optional[int] = None
    observed_game_over: bool = False
    observed_player_alive: bool = True

    def notify_level_start(self, level_index: int) -> None:
        """A level numbered ``level_index`` has started."""
        self.observed_level = level_index
        self.observed_game_over = False

    def notify_game_over(self) -> None:
        """The game is over."""
        self.observed_game_over = True

    def notify_score_update(self, score: int) -> None:
        """The current score changed to ``score``."""
        self.observed_score = score

    def notify_high_score_update(self, high_score: int) -> None:
        """The high score changed to ``high_score``."""
        self.observed_high_score = high_score

    def notify_player_life_update(self, lives: int) -> None:
        """The player now has ``lives`` lives."""
        self.observed_lives = lives

    def notify_player_died(self) -> None:
        """The player lost a life but the game goes on."""
        self.observed_player_alive = False

    def notify_player_respawn(self) -> None:
        """The player has respawned."""
        self.observed_player_alive = True