# invaderkit

Game logic for a Space Invaders style arcade game, independent of any
rendering, audio or input engine. Textures, sounds, key presses and the
concrete game pieces (player, aliens, shields, saucer, widgets) are supplied
by the caller as callables and factories. The rules can therefore run under
any frontend, or in tests with no window at all.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `invaderkit.interfaces`

These are the roles that game pieces take on:

- `Updatable`, with `update(delta_sec)`.
- `Drawable`, with `draw()`.
- `GameObject`, an `Updatable` that has no visual representation.
- `AlienObserver`, with `notify_alien_died(alien)`.
- `ButtonObserver`, with `on_button_pressed(action)`.
- `GameStateObserver`, whose hooks are `notify_level_start`,
  `notify_game_over`, `notify_score_update`, `notify_high_score_update`,
  `notify_player_life_update`, `notify_player_died` and
  `notify_player_respawn`.

The default hooks of `GameStateObserver` record the last reported values in
`observed_level`, `observed_score`, `observed_high_score`, `observed_lives`,
`observed_game_over` and `observed_player_alive`. A subclass can override any
hook and call `super()` to keep that record.

### `invaderkit.config`

- Screen constants: `SCREEN_WIDTH` and `SCREEN_HEIGHT` (both 900),
  `PLAYGROUND_OFFSET` and `SPRITE_SHEET_PADDING`.
- `Color`, a frozen RGBA value. `Color.lerp(other, t)` blends towards `other`
  and truncates each channel to 0–255.
- `GREEN`, a `Color` constant.
- `AnimatedSpriteID`, together with the read-only `SPRITE_PROPERTIES` mapping.
  It gives the frame size, the last frame index and the horizontal offset of
  each sprite in its sheet, as `SpriteProperties` values.
- `PlayerData`, the ship settings: colour, textures, lives, laser count and
  speed, shoot cooldown and movement speed.

### `invaderkit.game_manager`

`GameManager` owns the actors, objects and widgets.

- `add_actor`, `add_object` and `add_widget` put new elements in a queue.
  Queued elements become live only after `flush_pending_lists()`.
- `update(delta_sec)` updates every widget whose `is_update_enabled` is true.
  Unless the game is paused with `set_pause_game(True)`, it then updates
  actors and objects.
- `draw()` draws widgets first, then actors.
- `collision_check()` finds every colliding pair of actors not marked for
  deletion and calls `on_collision_event` on both sides.
- `cleanup_actors()` drops the actors that are marked for deletion.
- `clear_level()` drops all objects and marks every actor for deletion.
- `clear_all_projectiles()` marks the actors whose `is_projectile` is true and
  throws away the queued actors.
- `clear_all_widgets()` removes the live widgets.
- `load_resources(texture_loader, sound_loader)` calls
  `texture_loader(path, scale)` and `sound_loader(path)` once for each file in
  `TEXTURE_FILES` and `SOUND_FILES`. The saucer texture is requested at scale
  0.5.
- `get_texture(name)` and `get_sound(name)` return the loaded resource, or
  `None`.
- `unload_resources(texture_unloader, sound_unloader)` releases everything.
- `actor_count` is the number of live actors.

### `invaderkit.invader`

`Invader` is the formation controller and a `GameObject`.

- Each update moves a single alien, which makes the formation travel as a
  wave. When a whole pass ends and any alien would leave the playground on
  its next step, the formation drops by `VERTICAL_STEP` and turns around.
- Every `SHOOT_COOLDOWN` seconds it rolls against the shoot probability, and
  on success a random bottom-most alien that can shoot fires. The fewer
  bottom aliens remain, the higher the chance.
- Every `OVNI_SPAWN_COOLDOWN` seconds, if no saucer is alive, it may call
  `spawn_ovni()`.
- When the last alien is cleaned up it calls `on_all_aliens_dead()`.
- It stops moving on `notify_player_died` and starts again on
  `notify_player_respawn`.
- Randomness comes from the `rng` argument, a `random.Random`.

### `invaderkit.level`

`SpaceInvadersLevel(player_factory, alien_factory, shield_factory, invader_factory=Invader)`
sets up a level when `initialize_level(game_manager, game_state, level_index)`
is called:

- It spawns the player if none is alive.
- It creates or reuses the invader and applies the difficulty from
  `level_config_for(level_index)`. Levels past the last configured one reuse
  the hardest setting.
- On levels 1 and 2 it replaces the four shields.
- It builds the 11 × 5 alien grid.

The factories receive `PlayerData`, `AlienSpec` and `ShieldSpec` values.
Alien colours follow a radial gradient, `compute_alien_radial_color`, taken
from `palette_for(level_index)`. The palette cycles every eight levels. Also
in this module are `AlienGridConfig`, `LevelConfig`, `LEVEL_CONFIG`,
`AlienInfo` and `alien_info_for_row(row)`. For rows outside 0–4,
`alien_info_for_row` raises `ValueError`.

### `invaderkit.game_state`

`GameState(game_manager, level_factory, start_menu_factory=None, ui_factory=None, key_pressed=None, play_sound=None)`
keeps track of score, high score, lives and level number.

- `start_level(player_data)` begins a game.
- `add_score`, `on_player_died`, `next_level`, `reset_level`, `on_game_over`
  and `on_countdown_finished` drive play.
- After a death, `update(delta_sec)` waits 1.75 seconds and then respawns the
  player. After a game over it waits for `key_pressed(Key.SPACE)`, which
  restarts, or `key_pressed(Key.X)`, which returns to the start menu.
- Observers registered with `add_observer` are held weakly.

`UIManager(game_manager, game_state, hud_factory, message_factory)` creates
the HUD and message widgets. It registers each of them as an observer and as
a widget, and can be used as the `ui_factory` via a small lambda.

## A frame loop

```python
from invaderkit.game_manager import GameManager
from invaderkit.game_state import GameState
from invaderkit.level import SpaceInvadersLevel

manager = GameManager()
state = GameState(
    manager,
    level_factory=lambda: SpaceInvadersLevel(make_player, make_alien, make_shield),
    key_pressed=my_key_check,
    play_sound=my_sound_player,
)

def frame(delta_sec):
    state.update(delta_sec)
    manager.update(delta_sec)
    manager.collision_check()
    manager.cleanup_actors()
    manager.draw()
    manager.flush_pending_lists()
```

`make_player`, `make_alien`, `make_shield`, `my_key_check` and
`my_sound_player` are supplied by your frontend.

## What is not included

The package provides no window, no rendering, no audio playback, no input
handling and no command to launch a game. It also has no concrete player,
alien, shield, laser, saucer or widget classes. All of these come from the
caller, through the factories and callables described above. Actors must
provide `update`, `draw`, `collides_with`, `on_collision_event`,
`is_marked_for_deletion` and `set_for_deletion`. Aliens also need `position`,
`size`, `col`, `row`, `add_observer`, `is_laser_available`, `shoot_laser` and
`on_alien_moved`.