"""Small 2D primitives shared by the light-casting pipeline.

Points are plain ``pygame.Vector2`` values. Segments and rays never mutate
their endpoints; every helper returns a new object.
"""

import math
from collections import namedtuple

import pygame

Point = pygame.Vector2


def angle_between(a, b):
    """Angle of the direction a -> b, in radians, range (-pi, pi]."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def from_angle(angle, length=1.0):
    """Vector of the given length pointing along ``angle``."""
    return pygame.Vector2(math.cos(angle), math.sin(angle)) * length


ResolvedRay = namedtuple("ResolvedRay", ["start", "hit", "t"])

Triangle = namedtuple("Triangle", ["a", "b", "c"])


def triangle_area(tri):
    a, b, c = tri
    return abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2


class Segment:
    """An opaque wall from ``a`` to ``b`` in world space."""

    __slots__ = ("a", "b")

    def __init__(self, a, b):
        a = pygame.Vector2(a)
        b = pygame.Vector2(b)
        if a == b:
            raise ValueError(f"Degenerate segment: both endpoints at {tuple(a)}")
        self.a = a
        self.b = b

    def __iter__(self):
        yield pygame.Vector2(self.a)
        yield pygame.Vector2(self.b)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __hash__(self):
        return hash((self.a.x, self.a.y, self.b.x, self.b.y))

    def __repr__(self):
        return f"Segment(({self.a.x}, {self.a.y}), ({self.b.x}, {self.b.y}))"

    def length(self):
        return self.a.distance_to(self.b)

    def midpoint(self):
        return (self.a + self.b) / 2

    def translated(self, offset):
        offset = pygame.Vector2(offset)
        return Segment(self.a + offset, self.b + offset)


class Ray:
    """A directed probe from ``start`` towards ``end``.

    Only the direction matters for intersection; ``end`` just fixes the
    parameter scale so that ``point_at(1)`` is ``end``.
    """

    __slots__ = ("start", "end")

    def __init__(self, start, end):
        self.start = pygame.Vector2(start)
        self.end = pygame.Vector2(end)

    def __repr__(self):
        return f"Ray(({self.start.x}, {self.start.y}) -> ({self.end.x}, {self.end.y}))"

    def direction(self):
        return self.end - self.start

    def angle(self):
        return angle_between(self.start, self.end)

    def point_at(self, t):
        return self.start + (self.end - self.start) * t

    def with_end(self, point):
        return Ray(self.start, point)

    def translated(self, offset):
        offset = pygame.Vector2(offset)
        return Ray(self.start + offset, self.end + offset)

    def translated_to(self, point):
        return self.translated(pygame.Vector2(point) - self.start)

    def scaled(self, factor):
        return Ray(self.start, self.start + self.direction() * factor)
