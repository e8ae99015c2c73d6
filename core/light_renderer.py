import logging

import pygame

from data.obstacle_stats import OBSTACLE_STATS
from settings import (
    HIT_MARKER_COLOR,
    HIT_MARKER_RADIUS,
    LIGHT_COLOR,
    RAY_COLOR,
)

logger = logging.getLogger(__name__)


class LightRenderer:
    """Draws the light fan, walls and debug overlays through a Camera."""

    def __init__(self, camera, light_color=LIGHT_COLOR,
                 obstacle_stats=OBSTACLE_STATS):
        self.camera = camera
        self.light_color = pygame.Color(light_color)
        self.obstacle_stats = obstacle_stats
        self._warned_kinds = set()

    def _stats_for(self, kind):
        stats = self.obstacle_stats.get(kind)
        if stats is None:
            if kind not in self._warned_kinds:
                logger.warning("No stats for obstacle kind '%s'; drawing as wall.", kind)
                self._warned_kinds.add(kind)
            stats = self.obstacle_stats["wall"]
        return stats

    def draw_triangles(self, screen, triangles):
        for tri in triangles:
            pygame.draw.polygon(screen, self.light_color, self.camera.apply(tri))

    def draw_obstacles(self, screen, obstacles):
        for obstacle in obstacles:
            stats = self._stats_for(obstacle.kind)
            a, b = self.camera.apply(obstacle.segment)
            pygame.draw.line(screen, stats["color"], a, b, stats["line_width"])

    def draw_hits(self, screen, points):
        for point in points:
            pygame.draw.circle(screen, HIT_MARKER_COLOR,
                               self.camera.world_to_screen(point),
                               HIT_MARKER_RADIUS)

    def draw_rays(self, screen, resolved_rays):
        for ray in resolved_rays:
            a, b = self.camera.apply((ray.start, ray.hit))
            pygame.draw.line(screen, RAY_COLOR, a, b, 1)

    def draw_frame(self, screen, driver, obstacles, show_obstacles=True):
        """Light first, walls over it, debug layers on top."""
        self.draw_triangles(screen, driver.triangles())
        if show_obstacles:
            self.draw_obstacles(screen, obstacles)
        if driver.show_rays:
            self.draw_rays(screen, driver.resolved_rays())
        if driver.show_hits:
            self.draw_hits(screen, driver.hit_points())
