import copy

import pytest

from minigin.scene_manager import SceneManager
from minigin.timer import Timer


@pytest.fixture(autouse=True)
def _fresh():
    SceneManager.reset_instance()
    Timer.reset_instance()
    yield
    SceneManager.reset_instance()
    Timer.reset_instance()


def test_instance_is_shared():
    first = SceneManager.instance()
    scene = first.create_scene()
    assert SceneManager.instance() is first
    assert scene in SceneManager.instance().scenes


def test_each_subclass_has_its_own_instance():
    manager = SceneManager.instance()
    timer = Timer.instance()
    assert isinstance(manager, SceneManager)
    assert isinstance(timer, Timer)
    assert manager is not timer


def test_reset_instance_builds_a_new_one():
    first = SceneManager.instance()
    first.create_scene()
    SceneManager.reset_instance()
    second = SceneManager.instance()
    assert second is not first
    assert list(second.scenes) == []


def test_reset_of_one_class_keeps_the_other():
    timer = Timer.instance()
    SceneManager.instance()
    SceneManager.reset_instance()
    assert Timer.instance() is timer


def test_copy_is_refused():
    with pytest.raises(TypeError):
        copy.copy(SceneManager.instance())


def test_deepcopy_is_refused():
    with pytest.raises(TypeError):
        copy.deepcopy(SceneManager.instance())