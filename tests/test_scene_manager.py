import pytest

from minigin.scene import Scene
from minigin.scene_manager import SceneManager


class Recorder:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def update(self):
        self.log.append(("update", self.name))

    def render(self):
        self.log.append(("render", self.name))


@pytest.fixture(autouse=True)
def _fresh():
    SceneManager.reset_instance()
    yield
    SceneManager.reset_instance()


def test_create_scene_returns_empty_registered_scene():
    manager = SceneManager.instance()
    scene = manager.create_scene()
    assert isinstance(scene, Scene)
    assert len(scene) == 0
    assert manager.scenes == (scene,)


def test_each_create_gives_a_new_scene():
    manager = SceneManager.instance()
    first = manager.create_scene()
    second = manager.create_scene()
    assert first is not second
    assert manager.scenes == (first, second)


def test_update_runs_scenes_in_creation_order():
    log = []
    manager = SceneManager.instance()
    manager.create_scene().add(Recorder("first", log))
    manager.create_scene().add(Recorder("second", log))
    manager.update()
    assert log == [("update", "first"), ("update", "second")]


def test_render_runs_scenes_in_creation_order():
    log = []
    manager = SceneManager.instance()
    manager.create_scene().add(Recorder("first", log))
    manager.create_scene().add(Recorder("second", log))
    manager.render()
    assert log == [("render", "first"), ("render", "second")]


def test_instance_keeps_scenes_between_lookups():
    scene = SceneManager.instance().create_scene()
    assert SceneManager.instance().scenes == (scene,)