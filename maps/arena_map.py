from maps.map_base import ObstacleMap


class ArenaMap(ObstacleMap):
    """1600 x 1000 box with four corner brackets around a central pillar."""

    def __init__(self):
        super().__init__(width=1600, height=1000)

        self.add_boundary()
        self._build_brackets()
        self._build_pillar()

    def _build_brackets(self):
        # Top right
        self.add_wall((100, 400), (400, 400))
        self.add_wall((400, 100), (400, 400))
        # Bottom left
        self.add_wall((-100, -400), (-400, -400))
        self.add_wall((-400, -100), (-400, -400))
        # Top left
        self.add_wall((-100, 400), (-400, 400))
        self.add_wall((-400, 100), (-400, 400))
        # Bottom right
        self.add_wall((100, -400), (400, -400))
        self.add_wall((400, -100), (400, -400))

    def _build_pillar(self):
        self.add_wall((100, 100), (100, -100))
        self.add_wall((-100, -100), (100, -100))
        self.add_wall((-100, -100), (-100, 100))
        self.add_wall((-100, 100), (100, 100))
