import pygame
import pytest

from core.camera import Camera
from core.frame_driver import FrameDriver
from core.light_renderer import LightRenderer
from core.obstacle import ObstacleSet
from core.rays import RaySource
from maps import ObstacleMap

WHITE = pygame.Color(255, 255, 255)


@pytest.fixture
def screen():
    surface = pygame.Surface((200, 200))
    surface.fill(WHITE)
    return surface


@pytest.fixture
def renderer():
    # One pixel per world unit, origin at the surface centre
    return LightRenderer(Camera(screen_size=(200, 200), min_world_size=(200, 200)),
                         light_color="#ffb327")


def test_light_fills_the_open_room(screen, renderer):
    room = ObstacleMap.from_dict({"width": 160, "height": 160, "obstacles": []})
    driver = FrameDriver(RaySource((0, 0)), room.obstacles)
    driver.step()

    renderer.draw_frame(screen, driver, room.obstacles, show_obstacles=False)

    assert screen.get_at((100, 100)) == pygame.Color("#ffb327")
    assert screen.get_at((40, 150)) == pygame.Color("#ffb327")
    assert screen.get_at((5, 5)) == WHITE


def test_obstacles_drawn_over_light(screen, renderer):
    obstacles = ObstacleSet()
    obstacles.add_segment((-50, 0), (50, 0))

    renderer.draw_obstacles(screen, obstacles)

    assert screen.get_at((100, 100)) == pygame.Color(128, 128, 128)


def test_unknown_kind_draws_as_wall(screen, renderer, caplog):
    obstacles = ObstacleSet()
    obstacles.add_segment((-50, 0), (50, 0), kind="hedge")
    renderer.draw_obstacles(screen, obstacles)
    renderer.draw_obstacles(screen, obstacles)
    assert caplog.text.count("hedge") == 1


def test_debug_overlays_only_when_enabled(screen, renderer):
    room = ObstacleMap.from_dict({"width": 160, "height": 160, "obstacles": []})
    driver = FrameDriver(RaySource((0, 0)), room.obstacles)
    driver.step()

    renderer.draw_hits(screen, [pygame.Vector2(0, 0)])
    assert screen.get_at((100, 100)) != WHITE

    blank = pygame.Surface((200, 200))
    blank.fill(WHITE)
    renderer.draw_rays(blank, driver.resolved_rays())
    assert blank.get_at((100, 100)) != WHITE
