import pytest

from invaderkit.game_manager import SOUND_FILES, TEXTURE_FILES, GameManager


class FakeActor:
    def __init__(self, name, hits=(), log=None, is_projectile=False):
        self.name = name
        self.hits = set(hits)
        self.marked = False
        self.updates = []
        self.collisions = []
        self.log = log if log is not None else []
        self.is_projectile = is_projectile

    def is_marked_for_deletion(self):
        return self.marked

    def set_for_deletion(self, marked=True):
        self.marked = marked

    def collides_with(self, other):
        return other.name in self.hits or self.name in other.hits

    def on_collision_event(self, other):
        self.collisions.append(other.name)

    def update(self, delta_sec):
        self.updates.append(delta_sec)

    def draw(self):
        self.log.append(self.name)


class FakeWidget:
    def __init__(self, name, enabled=True, log=None):
        self.name = name
        self.is_update_enabled = enabled
        self.updates = []
        self.log = log if log is not None else []

    def update(self, delta_sec):
        self.updates.append(delta_sec)

    def draw(self):
        self.log.append(self.name)


class FakeObject:
    def __init__(self):
        self.updates = []

    def update(self, delta_sec):
        self.updates.append(delta_sec)


def manager_with(*actors):
    manager = GameManager()
    for actor in actors:
        manager.add_actor(actor)
    manager.flush_pending_lists()
    return manager


def test_actors_join_only_after_flush():
    manager = GameManager()
    manager.add_actor(FakeActor("a"))
    assert manager.actor_count == 0
    manager.flush_pending_lists()
    assert manager.actor_count == 1


def test_update_reaches_actors_objects_and_widgets():
    manager = GameManager()
    actor, obj, widget = FakeActor("a"), FakeObject(), FakeWidget("w")
    manager.add_actor(actor)
    manager.add_object(obj)
    manager.add_widget(widget)
    manager.update(0.1)
    assert actor.updates == [] and obj.updates == [] and widget.updates == []
    manager.flush_pending_lists()
    manager.update(0.1)
    assert actor.updates == [0.1]
    assert obj.updates == [0.1]
    assert widget.updates == [0.1]


def test_pause_only_affects_actors_and_objects():
    manager = GameManager()
    actor, obj = FakeActor("a"), FakeObject()
    enabled, disabled = FakeWidget("on"), FakeWidget("off", enabled=False)
    for item in (actor,):
        manager.add_actor(item)
    manager.add_object(obj)
    manager.add_widget(enabled)
    manager.add_widget(disabled)
    manager.flush_pending_lists()
    manager.set_pause_game(True)
    manager.update(0.2)
    assert enabled.updates == [0.2]
    assert disabled.updates == []
    assert actor.updates == [] and obj.updates == []
    manager.set_pause_game(False)
    manager.update(0.3)
    assert actor.updates == [0.3] and obj.updates == [0.3]


def test_draw_widgets_before_actors():
    log = []
    manager = GameManager()
    manager.add_actor(FakeActor("actor", log=log))
    manager.add_widget(FakeWidget("widget", log=log))
    manager.flush_pending_lists()
    manager.draw()
    assert log == ["widget", "actor"]


def test_collision_notifies_both_sides():
    a = FakeActor("a", hits={"b"})
    b = FakeActor("b")
    c = FakeActor("c")
    manager = manager_with(a, b, c)
    manager.collision_check()
    assert a.collisions == ["b"]
    assert b.collisions == ["a"]
    assert c.collisions == []


def test_collision_skips_marked_actors_and_pause():
    a = FakeActor("a", hits={"b"})
    b = FakeActor("b")
    manager = manager_with(a, b)
    manager.set_pause_game(True)
    manager.collision_check()
    assert a.collisions == []
    manager.set_pause_game(False)
    b.set_for_deletion()
    manager.collision_check()
    assert a.collisions == [] and b.collisions == []


def test_cleanup_removes_marked_actors():
    a, b, c = FakeActor("a"), FakeActor("b"), FakeActor("c")
    manager = manager_with(a, b, c)
    b.set_for_deletion()
    manager.cleanup_actors()
    assert manager.actor_count == 2
    log = []
    a.log = c.log = log
    manager.draw()
    assert sorted(log) == ["a", "c"]


def test_clear_level_marks_actors_and_drops_objects():
    a = FakeActor("a")
    obj = FakeObject()
    manager = manager_with(a)
    manager.add_object(obj)
    manager.flush_pending_lists()
    manager.clear_level()
    assert a.marked is True
    manager.update(0.1)
    assert obj.updates == []


def test_clear_all_projectiles():
    laser = FakeActor("laser", is_projectile=True)
    ship = FakeActor("ship")
    manager = manager_with(laser, ship)
    manager.add_actor(FakeActor("pending"))
    manager.clear_all_projectiles()
    assert laser.marked is True
    assert ship.marked is False
    manager.flush_pending_lists()
    assert manager.actor_count == 2


def test_clear_all_widgets():
    log = []
    manager = GameManager()
    manager.add_widget(FakeWidget("w", log=log))
    manager.flush_pending_lists()
    manager.clear_all_widgets()
    manager.draw()
    assert log == []


def test_load_resources_uses_loaders():
    calls = []

    def texture_loader(path, scale):
        calls.append((path, scale))
        return ("texture", path)

    manager = GameManager()
    manager.load_resources(texture_loader, lambda path: ("sound", path))
    assert len(calls) == len(TEXTURE_FILES)
    assert ("Resources/Textures/ovni.png", 0.5) in calls
    assert manager.get_texture("title") == (
        "texture",
        "Resources/Textures/spaceInvadersTitle.png",
    )
    assert manager.get_sound("gameOver") == ("sound", "Resources/Sounds/gameOverSoundB.wav")
    assert manager.get_texture("missing") is None
    assert manager.get_sound("missing") is None


def test_unload_resources_releases_everything():
    manager = GameManager()
    manager.load_resources(lambda path, scale: path, lambda path: path)
    textures, sounds = [], []
    manager.unload_resources(textures.append, sounds.append)
    assert sorted(textures) == sorted(path for path, _ in TEXTURE_FILES.values())
    assert sorted(sounds) == sorted(SOUND_FILES.values())
    assert manager.get_texture("title") is None


def test_get_texture_without_loading_is_none():
    with pytest.raises(AttributeError):
        GameManager().get_texture("title").width