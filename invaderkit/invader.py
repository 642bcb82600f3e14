"""The alien formation: staggered movement, shooting and saucer spawning."""

from __future__ import annotations

import random
import weakref
from typing import Any, Callable, Optional

from invaderkit.config import PLAYGROUND_OFFSET, SCREEN_WIDTH
from invaderkit.interfaces import AlienObserver, GameObject, GameStateObserver


class Invader(GameObject, AlienObserver, GameStateObserver):
    """Moves the aliens one at a time, makes bottom aliens shoot and spawns saucers.

    Aliens provide a settable ``position`` ``(x, y)``, a ``size`` ``(w, h)``,
    ``col`` and ``row`` grid coordinates and the methods ``add_observer``,
    ``is_marked_for_deletion``, ``is_laser_available``, ``shoot_laser`` and
    ``on_alien_moved``.
    """

    DISTANCE_PER_STEP = 5
    VERTICAL_STEP = 35.0
    SHOOT_COOLDOWN = 0.5
    OVNI_SPAWN_COOLDOWN = 20.0
    OVNI_PROBABILITY = 25

    def __init__(
        self,
        space_between_rows: int = 30,
        rng: Optional[random.Random] = None,
        on_all_aliens_dead: Optional[Callable[[], Any]] = None,
        spawn_ovni: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.space_between_rows = space_between_rows
        self._rng = rng if rng is not None else random.Random()
        self._on_all_aliens_dead = on_all_aliens_dead
        self._spawn_ovni = spawn_ovni

        self._aliens: list[Any] = []
        self._ovni_ref: Optional[Callable[[], Any]] = None
        self._alien_to_move_index = 0

        self._direction = 1
        self._should_change_direction = False

        self._movement_delay = 0.014
        self._delay_movement_timer = 0.0
        self._freeze_movement = False

        self._shoot_probability = 70
        self._shoot_timer = 0.0
        self._bottom_aliens_count = 11

        self._ovni_spawn_timer = 0.0

    def set_invader_settings(self, movement_delay: float, shoot_probability: int) -> None:
        """Set the delay between two alien steps and the base shooting chance in percent."""
        self._movement_delay = movement_delay
        self._shoot_probability = shoot_probability

    def update(self, delta_sec: float) -> None:
        """Possibly spawn a saucer, then move and fire aliens."""
        if not self._aliens or self._freeze_movement:
            return

        self._ovni_spawn_timer += delta_sec
        if self._ovni_spawn_timer >= self.OVNI_SPAWN_COOLDOWN:
            self._ovni_spawn_timer = 0.0
            roll = self._rng.randrange(100)
            if roll < self.OVNI_PROBABILITY and not self._ovni_alive():
                self._launch_ovni()

        self._update_alien_position(delta_sec)
        self._update_shoot_probability(delta_sec)

    def notify_alien_died(self, alien: Any) -> None:
        """Forget dead aliens when one of them dies."""
        self._cleanup_aliens()

    def notify_player_died(self) -> None:
        """Stop the formation while the player is dead."""
        self._freeze_movement = True

    def notify_player_respawn(self) -> None:
        """Resume the formation once the player is back."""
        self._freeze_movement = False

    def add_alien(self, alien: Any) -> None:
        """Track ``alien`` and observe its death; it becomes the next to move."""
        alien.add_observer(self)
        self._aliens.append(alien)
        self._alien_to_move_index = len(self._aliens) - 1

    def remove_all_aliens(self) -> None:
        """Forget every alien marked for deletion."""
        self._cleanup_aliens()

    def random_bottom_alien(self) -> Any:
        """Return a random bottommost alien of some column that can shoot, or None."""
        if not self._aliens:
            return None
        if len(self._aliens) == 1:
            only = self._aliens[0]
            return only if only.is_laser_available() else None

        bottoms: dict[int, Any] = {}
        for alien in self._aliens:
            current = bottoms.get(alien.col)
            if current is None or alien.row >= current.row:
                bottoms[alien.col] = alien

        shooters = [alien for alien in bottoms.values() if alien.is_laser_available()]
        if not shooters:
            return None

        self._bottom_aliens_count = len(shooters)
        return shooters[self._rng.randrange(len(shooters))]

    def should_change_direction(self) -> bool:
        """True if any alien would leave the playground on its next step."""
        right_limit = SCREEN_WIDTH - PLAYGROUND_OFFSET // 2
        left_limit = PLAYGROUND_OFFSET // 2
        step = self.DISTANCE_PER_STEP * self._direction
        return any(
            alien.position[0] + step > right_limit - alien.size[0]
            or alien.position[0] + step < left_limit
            for alien in self._aliens
        )

    def _ovni_alive(self) -> bool:
        if self._ovni_ref is None:
            return False
        ovni = self._ovni_ref()
        if ovni is None:
            return False
        marked = getattr(ovni, "is_marked_for_deletion", None)
        return not (marked is not None and marked())

    def _launch_ovni(self) -> None:
        if self._spawn_ovni is None:
            return
        ovni = self._spawn_ovni()
        if ovni is None:
            self._ovni_ref = None
            return
        try:
            self._ovni_ref = weakref.ref(ovni)
        except TypeError:
            self._ovni_ref = lambda: ovni

    def _update_alien_position(self, delta_sec: float) -> None:
        self._delay_movement_timer += delta_sec

        while self._delay_movement_timer >= self._movement_delay:
            alien = self._aliens[self._alien_to_move_index]
            self._delay_movement_timer -= self._movement_delay

            x, y = alien.position
            if self._should_change_direction:
                y += self.VERTICAL_STEP
            else:
                x += self.DISTANCE_PER_STEP * self._direction

            alien.on_alien_moved()
            alien.position = (x, y)
            self._alien_to_move_index -= 1

            if self._alien_to_move_index < 0:
                self._alien_to_move_index = len(self._aliens) - 1
                self._should_change_direction = self.should_change_direction()
                if self._should_change_direction:
                    self._direction = -self._direction

    def _update_shoot_probability(self, delta_sec: float) -> None:
        self._shoot_timer += delta_sec
        if self._shoot_timer < self.SHOOT_COOLDOWN:
            return
        self._shoot_timer = 0.0

        # Fewer bottom aliens left means a higher chance to shoot.
        roll = self._rng.randrange(100)
        if roll <= self._shoot_probability + (11 - self._bottom_aliens_count):
            alien = self.random_bottom_alien()
            if alien is not None:
                alien.shoot_laser()

    def _cleanup_aliens(self) -> None:
        survivors = []
        index = self._alien_to_move_index
        for position, alien in enumerate(self._aliens):
            if alien.is_marked_for_deletion():
                if position <= self._alien_to_move_index:
                    index -= 1
            else:
                survivors.append(alien)
        self._aliens = survivors
        self._alien_to_move_index = index

        if self._alien_to_move_index < 0 and self._aliens:
            self._alien_to_move_index = len(self._aliens) - 1

        if not self._aliens and self._on_all_aliens_dead is not None:
            self._on_all_aliens_dead()