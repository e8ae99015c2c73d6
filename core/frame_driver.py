import logging
from collections import namedtuple

import pygame

from core.intersection import resolve_all
from core.rays import STRATEGIES, RaySource
from core.visibility import VisibilityPolygon
from settings import ANGLE_OFFSET, INTERSECT_EPS, UNIFORM_RAY_COUNT

logger = logging.getLogger(__name__)

LightFrame = namedtuple("LightFrame", ["polygon", "resolved_rays"])


def cast_light(ray_source, segments, strategy="endpoints", eps=INTERSECT_EPS):
    """Rays -> nearest hits -> triangle fan for the source's current position.

    Rebuilds ``ray_source.rays`` as a side effect; the returned LightFrame
    depends only on the position and ``segments``.
    """
    segments = tuple(segments)
    source = pygame.Vector2(ray_source.position)
    rays = ray_source.regenerate(segments, strategy)
    resolved = resolve_all(rays, segments, eps)
    polygon = VisibilityPolygon.from_hits(source, [r.hit for r in resolved])

    if len(resolved) < len(rays):
        logger.debug("%d of %d rays escaped the obstacle set",
                     len(rays) - len(resolved), len(rays))
    logger.debug(
        "Light at (%.1f, %.1f): %d rays, %d resolved, %d triangles",
        source.x, source.y, len(rays), len(resolved), len(polygon),
    )
    return LightFrame(polygon, resolved)


def compute_visibility(source, segments, strategy="endpoints",
                       angle_offset=ANGLE_OFFSET, eps=INTERSECT_EPS,
                       num_rays=UNIFORM_RAY_COUNT):
    """One-off light computation with a throwaway RaySource."""
    caster = RaySource(source, num_rays=num_rays, angle_offset=angle_offset)
    return cast_light(caster, segments, strategy, eps)


class FrameDriver:
    """Rebuilds the light once per frame and holds the result for drawing."""

    def __init__(self, ray_source, obstacles, strategy="endpoints",
                 show_hits=False, show_rays=False, eps=INTERSECT_EPS):
        if strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown ray strategy '{strategy}', expected one of {STRATEGIES}"
            )
        self.ray_source = ray_source
        self.obstacles = obstacles
        self.strategy = strategy
        self.show_hits = show_hits
        self.show_rays = show_rays
        self.eps = eps
        self.current = None

    # =====================================================
    # UPDATE (call once per frame)
    # =====================================================

    def step(self, cursor_world=None):
        self.ray_source.set_position(cursor_world)

        # Walls are snapshotted right after the position update, so the frame
        # sees one instant
        segments = self.obstacles.segments()
        if not self.obstacles.encloses(self.ray_source.position):
            logger.debug("Light at (%.1f, %.1f) is outside the walls",
                         self.ray_source.position.x, self.ray_source.position.y)

        frame = cast_light(self.ray_source, segments, self.strategy, self.eps)

        # Previous frame stays current until this one is complete
        self.current = frame
        return self.current

    # =====================================================
    # TOGGLES
    # =====================================================

    def toggle_strategy(self):
        index = STRATEGIES.index(self.strategy)
        self.strategy = STRATEGIES[(index + 1) % len(STRATEGIES)]
        logger.info("Ray strategy: %s", self.strategy)
        return self.strategy

    def toggle_hits(self):
        self.show_hits = not self.show_hits
        logger.info("Hit markers %s", "on" if self.show_hits else "off")
        return self.show_hits

    def toggle_rays(self):
        self.show_rays = not self.show_rays
        logger.info("Ray overlay %s", "on" if self.show_rays else "off")
        return self.show_rays

    # =====================================================
    # RESULTS
    # =====================================================

    def triangles(self):
        if self.current is None:
            return []
        return self.current.polygon.triangles

    def hit_points(self):
        if self.current is None:
            return []
        return [r.hit for r in self.current.resolved_rays]

    def resolved_rays(self):
        if self.current is None:
            return []
        return self.current.resolved_rays
