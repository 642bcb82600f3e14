"""Owner of every actor, object and widget, plus the loaded textures and sounds."""

from __future__ import annotations

from itertools import combinations
from types import MappingProxyType
from typing import Any, Callable, Mapping

TEXTURE_FILES: Mapping[str, tuple[str, float]] = MappingProxyType(
    {
        "alienSheet": ("Resources/Textures/invadersSpriteSheet.png", 1.0),
        "startButtonSheet": ("Resources/Textures/startButtonSpriteSheet.png", 1.0),
        "selectionButtonSheet": ("Resources/Textures/selectionButtonSpriteSheet.png", 1.0),
        "starSheet": ("Resources/Textures/starSpriteSheet.png", 1.0),
        "ovni": ("Resources/Textures/ovni.png", 0.5),
        "title": ("Resources/Textures/spaceInvadersTitle.png", 1.0),
        "baseA": ("Resources/Textures/Base_A.png", 1.0),
        "baseB": ("Resources/Textures/Base_B.png", 1.0),
        "baseC": ("Resources/Textures/Base_C.png", 1.0),
        "baseD": ("Resources/Textures/Base_D.png", 1.0),
        "canonA": ("Resources/Textures/Canon_A.png", 1.0),
        "canonB": ("Resources/Textures/Canon_B.png", 1.0),
        "canonC": ("Resources/Textures/Canon_C.png", 1.0),
        "explosionA": ("Resources/Textures/explosion_A.png", 1.0),
        "explosionB": ("Resources/Textures/explosion_B.png", 1.0),
    }
)

SOUND_FILES: Mapping[str, str] = MappingProxyType(
    {
        "gameOver": "Resources/Sounds/gameOverSoundB.wav",
        "playerDeath": "Resources/Sounds/playerDeathSound.wav",
        "alienDeath": "Resources/Sounds/alienDeathSound.wav",
        "laserShoot": "Resources/Sounds/laserShootSound.wav",
        "buttonClick": "Resources/Sounds/buttonClickSound.wav",
        "ovni": "Resources/Sounds/ovniSound.wav",
    }
)


class GameManager:
    """Updates, draws, collides and tracks the lifetime of all game elements.

    Actors provide ``update``, ``draw``, ``collides_with``, ``on_collision_event``,
    ``is_marked_for_deletion`` and ``set_for_deletion``; actors whose
    ``is_projectile`` attribute is true (lasers, particle effects) are removed by
    :meth:`clear_all_projectiles`. Widgets provide ``update``, ``draw`` and an
    ``is_update_enabled`` flag. Objects provide ``update``.

    Elements added during a frame are held back until :meth:`flush_pending_lists`.
    """

    def __init__(self) -> None:
        self._objects: list[Any] = []
        self._pending_objects: list[Any] = []
        self._widgets: list[Any] = []
        self._pending_widgets: list[Any] = []
        self._actors: list[Any] = []
        self._pending_actors: list[Any] = []
        self._textures: dict[str, Any] = {}
        self._sounds: dict[str, Any] = {}
        self._paused = False

    def load_resources(
        self,
        texture_loader: Callable[[str, float], Any],
        sound_loader: Callable[[str], Any],
    ) -> None:
        """Load every texture with ``texture_loader(path, scale)`` and every sound with ``sound_loader(path)``."""
        for name, (path, scale) in TEXTURE_FILES.items():
            self._textures[name] = texture_loader(path, scale)
        for name, path in SOUND_FILES.items():
            self._sounds[name] = sound_loader(path)

    def unload_resources(
        self,
        texture_unloader: Callable[[Any], Any],
        sound_unloader: Callable[[Any], Any],
    ) -> None:
        """Release every loaded texture and sound and forget them."""
        for texture in self._textures.values():
            texture_unloader(texture)
        for sound in self._sounds.values():
            sound_unloader(sound)
        self._textures.clear()
        self._sounds.clear()

    def update(self, delta_sec: float) -> None:
        """Update enabled widgets, then actors and objects unless the game is paused."""
        for widget in self._widgets:
            if widget.is_update_enabled:
                widget.update(delta_sec)

        if self._paused:
            return

        for actor in self._actors:
            if actor is not None:
                actor.update(delta_sec)
        for obj in self._objects:
            if obj is not None:
                obj.update(delta_sec)

    def draw(self) -> None:
        """Draw all widgets, then all actors."""
        for widget in self._widgets:
            widget.draw()
        for actor in self._actors:
            actor.draw()

    def collision_check(self) -> None:
        """Send a collision event to both sides of every colliding pair of live actors."""
        if self._paused:
            return
        for first, second in combinations(list(self._actors), 2):
            if first.is_marked_for_deletion() or second.is_marked_for_deletion():
                continue
            if first.collides_with(second):
                first.on_collision_event(second)
                second.on_collision_event(first)

    def cleanup_actors(self) -> None:
        """Drop every actor marked for deletion."""
        self._actors = [a for a in self._actors if not a.is_marked_for_deletion()]

    def flush_pending_lists(self) -> None:
        """Move actors, objects and widgets added this frame into the live lists."""
        self._actors.extend(self._pending_actors)
        self._pending_actors.clear()
        self._objects.extend(self._pending_objects)
        self._pending_objects.clear()
        self._widgets.extend(self._pending_widgets)
        self._pending_widgets.clear()

    def set_pause_game(self, paused: bool) -> None:
        """Pause or resume actor and object updates and collision checks."""
        self._paused = paused

    def clear_level(self) -> None:
        """Drop all objects and mark every actor for deletion."""
        self._objects.clear()
        for actor in self._actors:
            if actor is not None:
                actor.set_for_deletion()

    def clear_all_projectiles(self) -> None:
        """Mark projectiles for deletion and discard every actor not yet flushed."""
        for actor in self._actors:
            if actor is not None and getattr(actor, "is_projectile", False):
                actor.set_for_deletion()
        self._pending_actors.clear()

    def clear_all_widgets(self) -> None:
        """Remove every live widget."""
        self._widgets.clear()

    def add_actor(self, actor: Any) -> None:
        """Queue an actor to join at the next flush."""
        self._pending_actors.append(actor)

    def add_object(self, obj: Any) -> None:
        """Queue an object to join at the next flush."""
        self._pending_objects.append(obj)

    def add_widget(self, widget: Any) -> None:
        """Queue a widget to join at the next flush."""
        self._pending_widgets.append(widget)

    def get_texture(self, name: str) -> Any:
        """Return the loaded texture called ``name``, or None if there is none."""
        return self._textures.get(name)

    def get_sound(self, name: str) -> Any:
        """Return the loaded sound called ``name``, or None if there is none."""
        return self._sounds.get(name)

    @property
    def actor_count(self) -> int:
        """Number of live actors."""
        return len(self._actors)