import math

import pygame
import pytest

from core.geometry import Segment, angle_between
from core.rays import RaySource, endpoint_fan, uniform_fan


def test_uniform_fan_is_evenly_spaced_and_far():
    rays = uniform_fan((0, 0), count=18, length=100000)
    assert len(rays) == 18
    assert rays[0].end.x == pytest.approx(100000)
    assert rays[0].end.y == pytest.approx(0, abs=1e-6)
    step = 2 * math.pi / 18
    for i, ray in enumerate(rays[1:10], start=1):
        assert ray.angle() == pytest.approx(step * i)
        assert ray.direction().length() == pytest.approx(100000)


def test_endpoint_fan_casts_six_rays_per_segment_in_order():
    source = pygame.Vector2(0, 0)
    segments = [Segment((10, 0), (10, 10)), Segment((-5, 5), (-5, -5))]
    rays = endpoint_fan(source, segments, angle_offset=0.005)

    assert len(rays) == 6 * len(segments)
    assert all(ray.start == source for ray in rays)

    p_angle = angle_between(source, segments[0].a)
    q_angle = angle_between(source, segments[0].b)
    assert rays[0].end == segments[0].a
    assert rays[1].angle() == pytest.approx(p_angle + 0.005)
    assert rays[2].angle() == pytest.approx(p_angle - 0.005)
    assert rays[3].end == segments[0].b
    assert rays[4].angle() == pytest.approx(q_angle + 0.005)
    assert rays[5].angle() == pytest.approx(q_angle - 0.005)
    assert rays[6].end == segments[1].a


def test_ray_source_starts_with_uniform_fan():
    source = RaySource((5, 5), num_rays=18)
    assert len(source.rays) == 18
    assert all(ray.start == pygame.Vector2(5, 5) for ray in source.rays)


def test_set_position_none_keeps_previous_position():
    source = RaySource((5, 5))
    source.set_position(None)
    assert source.position == pygame.Vector2(5, 5)
    source.set_position((1, 2))
    assert source.position == pygame.Vector2(1, 2)


def test_regenerate_replaces_rays_instead_of_appending():
    source = RaySource((0, 0))
    segments = [Segment((10, 0), (10, 10))]
    source.regenerate(segments)
    source.regenerate(segments)
    assert len(source.rays) == 6

    source.regenerate(segments, strategy="uniform")
    assert len(source.rays) == source.num_rays


def test_regenerate_rejects_unknown_strategy():
    with pytest.raises(ValueError):
        RaySource().regenerate([], strategy="spiral")
