"""Probe ray generation around a point light."""

import math

import pygame

from core.geometry import Ray, angle_between, from_angle
from settings import ANGLE_OFFSET, FAR_RAY_LENGTH, UNIFORM_RAY_COUNT

STRATEGIES = ("endpoints", "uniform")


def uniform_fan(source, count=UNIFORM_RAY_COUNT, length=FAR_RAY_LENGTH):
    """``count`` evenly spaced rays reaching ``length`` units out."""
    source = pygame.Vector2(source)
    step = 2 * math.pi / count
    return [Ray(source, source + from_angle(step * i, length))
            for i in range(count)]


def endpoint_fan(source, segments, angle_offset=ANGLE_OFFSET):
    """Six rays per segment: at each corner, and just either side of it.

    Order per segment is p, p+eps, p-eps, q, q+eps, q-eps.
    """
    source = pygame.Vector2(source)
    rays = []
    for seg in segments:
        for corner in (seg.a, seg.b):
            angle = angle_between(source, corner)
            rays.append(Ray(source, corner))
            rays.append(Ray(source, source + from_angle(angle + angle_offset)))
            rays.append(Ray(source, source + from_angle(angle - angle_offset)))
    return rays


class RaySource:
    """The light: a position plus the probe rays of the current frame."""

    def __init__(self, position=(0, 0), num_rays=UNIFORM_RAY_COUNT,
                 angle_offset=ANGLE_OFFSET):
        self.position = pygame.Vector2(position)
        self.num_rays = num_rays
        self.angle_offset = angle_offset
        self.rays = uniform_fan(self.position, num_rays)

    def set_position(self, point):
        """Move the light. ``None`` (no cursor this frame) keeps the old spot."""
        if point is None:
            return
        self.position = pygame.Vector2(point)

    def regenerate(self, segments, strategy="endpoints"):
        """Discard last frame's rays and cast a fresh bundle."""
        if strategy == "endpoints":
            rays = endpoint_fan(self.position, segments, self.angle_offset)
        elif strategy == "uniform":
            rays = uniform_fan(self.position, self.num_rays)
        else:
            raise ValueError(
                f"Unknown ray strategy '{strategy}', expected one of {STRATEGIES}"
            )
        self.rays = rays
        return rays
