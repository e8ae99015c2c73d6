import pygame

from core.geometry import Triangle, angle_between, triangle_area


def sort_by_angle(source, points):
    """Points ordered counter-clockwise by their angle around ``source``."""
    return sorted(points, key=lambda p: angle_between(source, p))


def close_loop(points):
    """Repeat the first point at the end so the fan wraps around."""
    points = list(points)
    if points:
        points.append(pygame.Vector2(points[0]))
    return points


def build_triangles(source, hits):
    """Triangle fan (h_i, h_i+1, source) covering the lit region.

    Fewer than two hits cannot enclose any area, so nothing is emitted.
    """
    if len(hits) < 2:
        return []
    source = pygame.Vector2(source)
    ring = close_loop(sort_by_angle(source, hits))
    return [Triangle(pygame.Vector2(a), pygame.Vector2(b), pygame.Vector2(source))
            for a, b in zip(ring, ring[1:])]


class VisibilityPolygon:
    """The lit region of one frame, as seen from ``source``."""

    def __init__(self, source, hits, triangles):
        self.source = pygame.Vector2(source)
        self.hits = list(hits)
        self.triangles = list(triangles)

    @classmethod
    def from_hits(cls, source, hits):
        source = pygame.Vector2(source)
        ordered = sort_by_angle(source, hits)
        return cls(source, ordered, build_triangles(source, ordered))

    def __len__(self):
        return len(self.triangles)

    def outline(self):
        return [pygame.Vector2(p) for p in self.hits]

    def area(self):
        return sum(triangle_area(tri) for tri in self.triangles)
