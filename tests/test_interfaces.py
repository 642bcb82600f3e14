import pytest

from invaderkit.interfaces import (
    AlienObserver,
    ButtonObserver,
    Drawable,
    GameObject,
    GameStateObserver,
    Updatable,
)


@pytest.mark.parametrize(
    "cls", [Updatable, Drawable, GameObject, AlienObserver, ButtonObserver]
)
def test_abstract_roles_cannot_be_instantiated(cls):
    with pytest.raises(TypeError):
        cls()


def test_game_object_without_update_is_abstract():
    class Incomplete(GameObject):
        pass

    with pytest.raises(TypeError):
        GameObject()
    with pytest.raises(TypeError):
        Incomplete()


def test_concrete_game_object_is_updated():
    class Clock(GameObject):
        def __init__(self):
            self.elapsed = 0.0

        def update(self, delta_sec):
            self.elapsed += delta_sec

    with pytest.raises(TypeError):
        GameObject()
    clock = Clock()
    clock.update(0.25)
    clock.update(0.5)
    assert clock.elapsed == pytest.approx(0.75)
    assert isinstance(clock, Updatable)


def test_alien_observer_receives_alien():
    class Recorder(AlienObserver):
        def __init__(self):
            self.dead = []

        def notify_alien_died(self, alien):
            self.dead.append(alien)

    with pytest.raises(TypeError):
        AlienObserver()
    recorder = Recorder()
    recorder.notify_alien_died("alien-1")
    assert recorder.dead == ["alien-1"]


def test_button_observer_receives_action():
    class Recorder(ButtonObserver):
        def __init__(self):
            self.actions = []

        def on_button_pressed(self, action):
            self.actions.append(action)

    with pytest.raises(TypeError):
        ButtonObserver()
    recorder = Recorder()
    recorder.on_button_pressed("start")
    assert recorder.actions == ["start"]


def test_game_state_observer_defaults_ignore_events():
    observer = GameStateObserver()
    results = [
        observer.notify_level_start(1),
        observer.notify_game_over(),
        observer.notify_score_update(10),
        observer.notify_high_score_update(20),
        observer.notify_player_life_update(2),
        observer.notify_player_died(),
        observer.notify_player_respawn(),
    ]
    assert results == [None] * 7


def test_game_state_observer_partial_override():
    class ScoreOnly(GameStateObserver):
        def __init__(self):
            self.events = []

        def notify_score_update(self, score):
            self.events.append(("score", score))

    observer = ScoreOnly()
    observer.notify_level_start(2)
    observer.notify_score_update(5)
    observer.notify_game_over()
    assert GameStateObserver.notify_score_update(observer, 7) is None
    assert observer.events == [("score", 5)]