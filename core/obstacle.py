import pygame

from core.geometry import Segment


class Obstacle:
    """A wall defined by two local offsets around a movable anchor.

    World endpoints are ``anchor + start_offset`` and ``anchor + end_offset``,
    so translating the anchor moves both ends together.
    """

    def __init__(self, start_offset, end_offset, anchor=(0, 0), kind="wall"):
        self.start_offset = pygame.Vector2(start_offset)
        self.end_offset = pygame.Vector2(end_offset)
        if self.start_offset == self.end_offset:
            raise ValueError(
                f"Zero-length obstacle at offset {tuple(self.start_offset)}"
            )
        self.anchor = pygame.Vector2(anchor)
        self.kind = kind

    def __repr__(self):
        return f"Obstacle({self.segment!r}, kind={self.kind!r})"

    @property
    def segment(self):
        return Segment(self.anchor + self.start_offset,
                       self.anchor + self.end_offset)

    def translate(self, delta):
        self.anchor += pygame.Vector2(delta)

    def move_to(self, point):
        self.anchor = pygame.Vector2(point)


class ObstacleSet:
    def __init__(self, obstacles=()):
        self._obstacles = []
        for obstacle in obstacles:
            self.add(obstacle)

    def __iter__(self):
        return iter(self._obstacles)

    def __len__(self):
        return len(self._obstacles)

    def add(self, obstacle):
        if not isinstance(obstacle, Obstacle):
            raise TypeError(f"Expected Obstacle, got {type(obstacle).__name__}")
        self._obstacles.append(obstacle)
        return obstacle

    def add_segment(self, a, b, anchor=(0, 0), kind="wall"):
        return self.add(Obstacle(a, b, anchor=anchor, kind=kind))

    def segments(self):
        """Snapshot of every obstacle as a world-space Segment.

        The tuple is detached from the obstacles, so anchors moved after the
        call do not leak into a frame already in progress.
        """
        return tuple(obstacle.segment for obstacle in self._obstacles)

    def bounds(self):
        """(min_x, min_y, max_x, max_y) over all endpoints, or None if empty."""
        if not self._obstacles:
            return None
        xs = []
        ys = []
        for seg in self.segments():
            xs.extend((seg.a.x, seg.b.x))
            ys.extend((seg.a.y, seg.b.y))
        return min(xs), min(ys), max(xs), max(ys)

    def encloses(self, point):
        """True if ``point`` lies strictly inside the bounding box of all walls."""
        box = self.bounds()
        if box is None:
            return False
        min_x, min_y, max_x, max_y = box
        return min_x < point[0] < max_x and min_y < point[1] < max_y
