import json
import logging

from core.obstacle import Obstacle, ObstacleSet
from data.obstacle_stats import OBSTACLE_STATS

logger = logging.getLogger(__name__)


class ObstacleMap:
    """A rectangular world of walls, centred on the origin."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.obstacles = ObstacleSet()

    @classmethod
    def from_json(cls, path):
        """Construct an ObstacleMap from a JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        map_obj = cls.from_dict(data)
        logger.info("Loaded %d obstacles from %s", len(map_obj.obstacles), path)
        return map_obj

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError(f"Map data must be an object, got {type(data).__name__}")
        try:
            width = data["width"]
            height = data["height"]
            entries = data["obstacles"]
        except KeyError as exc:
            raise ValueError(f"Map data is missing required key {exc}") from exc
        if not isinstance(entries, list):
            raise ValueError("Map 'obstacles' must be a list")

        map_obj = cls(width=width, height=height)
        if data.get("enclose", True):
            map_obj.add_boundary()

        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"Obstacle {index} must be an object, got {entry!r}")
            a = _read_point(entry, "a", index)
            b = _read_point(entry, "b", index)
            anchor = _read_point(entry, "anchor", index, default=(0, 0))
            kind = entry.get("kind", "wall")
            if kind not in OBSTACLE_STATS:
                logger.warning("Obstacle %d has unknown kind '%s'; using wall.", index, kind)
                kind = "wall"
            try:
                map_obj.add_wall(a, b, anchor=anchor, kind=kind)
            except ValueError:
                logger.warning("Skipping zero-length obstacle %d at %s", index, a)

        return map_obj

    def add_boundary(self):
        """Four walls around the whole map: top, bottom, left, right."""
        hw = self.width / 2
        hh = self.height / 2
        self.add_wall((-hw, hh), (hw, hh))
        self.add_wall((-hw, -hh), (hw, -hh))
        self.add_wall((-hw, -hh), (-hw, hh))
        self.add_wall((hw, hh), (hw, -hh))

    def add_wall(self, a, b, anchor=None, kind="wall"):
        return self.obstacles.add(Obstacle(a, b, anchor=anchor or (0, 0), kind=kind))


def _read_point(entry, key, index, default=None):
    value = entry.get(key, default)
    if value is None:
        raise ValueError(f"Obstacle {index} is missing '{key}'")
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"Obstacle {index} '{key}' must be [x, y], got {value!r}")
    try:
        return float(value[0]), float(value[1])
    except TypeError as exc:
        raise ValueError(f"Obstacle {index} '{key}' has non-numeric coordinates {value!r}") from exc
