import pygame

from settings import WIDTH, HEIGHT, MIN_WORLD_WIDTH, MIN_WORLD_HEIGHT


class Camera:
    """World <-> screen mapping with the world origin at screen centre.

    World y points up, screen y points down. The zoom is chosen so at least
    ``min_world_size`` world units stay visible on both axes.
    """

    def __init__(self, screen_size=(WIDTH, HEIGHT),
                 min_world_size=(MIN_WORLD_WIDTH, MIN_WORLD_HEIGHT)):
        self.screen_size = pygame.Vector2(screen_size)
        self.min_world_size = pygame.Vector2(min_world_size)
        self.position = pygame.Vector2(0, 0)  # world point at screen centre
        self.target = None

    # -------------------------
    # Public API
    # -------------------------

    @property
    def scale(self):
        """Screen pixels per world unit."""
        return min(self.screen_size.x / self.min_world_size.x,
                   self.screen_size.y / self.min_world_size.y)

    def follow(self, target):
        """Set the target to follow. Target must have a .pos attribute."""
        self.target = target

    def update(self, dt):
        if self.target:
            self.position = pygame.Vector2(self.target.pos)

    def viewport_to_world(self, screen_pos):
        """Map a screen pixel to world space. None in, None out."""
        if screen_pos is None:
            return None
        half = self.screen_size / 2
        s = self.scale
        return pygame.Vector2(
            (screen_pos[0] - half.x) / s + self.position.x,
            -(screen_pos[1] - half.y) / s + self.position.y,
        )

    def world_to_screen(self, world_pos):
        half = self.screen_size / 2
        s = self.scale
        return pygame.Vector2(
            (world_pos[0] - self.position.x) * s + half.x,
            -(world_pos[1] - self.position.y) * s + half.y,
        )

    def apply(self, points):
        """World points -> list of screen (x, y) tuples for pygame.draw."""
        return [tuple(self.world_to_screen(p)) for p in points]
