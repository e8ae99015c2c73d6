import math

import pygame
import pytest

from core.visibility import (
    VisibilityPolygon,
    build_triangles,
    close_loop,
    sort_by_angle,
)


def _at(degrees, radius=100):
    rad = math.radians(degrees)
    return pygame.Vector2(math.cos(rad) * radius, math.sin(rad) * radius)


def _degrees(point):
    return round(math.degrees(math.atan2(point.y, point.x))) % 360


def test_sort_by_angle_orders_counter_clockwise():
    points = [_at(10), _at(350), _at(170)]
    ordered = sort_by_angle(pygame.Vector2(0, 0), points)
    assert [_degrees(p) for p in ordered] == [350, 10, 170]


def test_close_loop_repeats_first_point():
    ring = close_loop([_at(10), _at(170)])
    assert len(ring) == 3
    assert ring[-1] == ring[0]
    assert close_loop([]) == []


def test_triangle_fan_wraps_around_source():
    source = pygame.Vector2(0, 0)
    triangles = build_triangles(source, [_at(10), _at(350), _at(170)])

    assert len(triangles) == 3
    assert all(tri.c == source for tri in triangles)
    edges = {(_degrees(tri.a), _degrees(tri.b)) for tri in triangles}
    assert edges == {(10, 170), (170, 350), (350, 10)}


def test_too_few_hits_emit_nothing():
    assert build_triangles((0, 0), []) == []
    assert build_triangles((0, 0), [_at(45)]) == []


def test_polygon_from_hits_square():
    source = pygame.Vector2(0, 0)
    corners = [(10, 10), (-10, 10), (-10, -10), (10, -10)]
    polygon = VisibilityPolygon.from_hits(source, [pygame.Vector2(c) for c in corners])

    assert len(polygon) == 4
    assert polygon.area() == pytest.approx(400.0)
    assert len(polygon.outline()) == 4


def test_empty_polygon_has_no_area():
    polygon = VisibilityPolygon.from_hits((0, 0), [])
    assert len(polygon) == 0
    assert polygon.area() == 0

