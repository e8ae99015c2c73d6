import pygame
import pytest

from core.camera import Camera


def test_scale_keeps_minimum_world_visible():
    camera = Camera(screen_size=(1280, 800), min_world_size=(1600, 1000))
    assert camera.scale == pytest.approx(0.8)

    wide = Camera(screen_size=(1600, 800), min_world_size=(1600, 1000))
    assert wide.scale == pytest.approx(0.8)
    assert wide.screen_size.x / wide.scale >= 1600


def test_viewport_to_world_centre_and_corner():
    camera = Camera(screen_size=(1280, 800), min_world_size=(1600, 1000))
    assert camera.viewport_to_world((640, 400)) == pygame.Vector2(0, 0)
    corner = camera.viewport_to_world((0, 0))
    assert corner.x == pytest.approx(-800)
    assert corner.y == pytest.approx(500)


def test_missing_cursor_maps_to_none():
    assert Camera().viewport_to_world(None) is None


def test_world_to_screen_inverts_viewport_to_world():
    camera = Camera(screen_size=(1280, 800), min_world_size=(1600, 1000))
    camera.position = pygame.Vector2(100, -50)
    world = camera.viewport_to_world((200, 700))
    screen = camera.world_to_screen(world)
    assert screen.x == pytest.approx(200)
    assert screen.y == pytest.approx(700)


def test_follow_centres_on_target():
    class Target:
        pos = pygame.Vector2(30, 40)

    camera = Camera()
    camera.follow(Target())
    camera.update(1 / 60)
    assert camera.position == pygame.Vector2(30, 40)
