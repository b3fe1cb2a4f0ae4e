import copy

import pygame
import pytest

from minigin.game_object import GameObject
from minigin.renderer import Renderer
from minigin.resource_manager import ResourceManager
from minigin.transform import Vec3

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def world(tmp_path):
    ResourceManager.reset_instance()
    Renderer.reset_instance()
    surface = pygame.Surface((4, 4))
    surface.fill(RED)
    pygame.image.save(surface, str(tmp_path / "red.png"))
    ResourceManager.instance().init(tmp_path)
    window = pygame.Surface((20, 20))
    Renderer.instance().init(window)
    yield window
    ResourceManager.reset_instance()
    Renderer.reset_instance()


def test_starts_at_origin_without_texture():
    obj = GameObject()
    assert obj.transform.position == Vec3(0.0, 0.0, 0.0)
    assert obj.texture is None


def test_set_position():
    obj = GameObject()
    obj.set_position(358, 180)
    assert obj.transform.position == Vec3(358.0, 180.0, 0.0)


def test_render_without_texture_raises(world):
    with pytest.raises(RuntimeError):
        GameObject().render()


def test_set_texture_uses_shared_cache(world):
    a = GameObject()
    b = GameObject()
    a.set_texture("red.png")
    b.set_texture("red.png")
    assert a.texture is b.texture
    assert a.texture.size == (4.0, 4.0)


def test_set_texture_missing_file(world):
    with pytest.raises(RuntimeError):
        GameObject().set_texture("absent.png")


def test_render_draws_at_position(world):
    obj = GameObject()
    obj.set_texture("red.png")
    obj.set_position(5, 6)
    obj.render()
    assert world.get_at((5, 6)) == RED
    assert world.get_at((8, 9)) == RED
    assert world.get_at((4, 6)) == BLACK
    assert world.get_at((9, 10)) == BLACK


def test_update_leaves_state_alone(world):
    obj = GameObject()
    obj.set_texture("red.png")
    obj.set_position(1, 2)
    texture = obj.texture
    obj.update()
    assert obj.transform.position == Vec3(1.0, 2.0, 0.0)
    assert obj.texture is texture


def test_cannot_copy():
    with pytest.raises(TypeError):
        copy.copy(GameObject())