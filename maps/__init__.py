import logging

from maps.arena_map import ArenaMap
from maps.map_base import ObstacleMap

logger = logging.getLogger(__name__)

MAPS = {
    "arena": ArenaMap,
}


def get_map(name):
    """Build a map by registry name, or load it when given a .json path."""
    if name and name.endswith(".json"):
        return ObstacleMap.from_json(name)
    map_cls = MAPS.get(name)
    if map_cls is None:
        logger.warning("Map '%s' not found; using arena.", name)
        map_cls = ArenaMap
    return map_cls()


__all__ = ["ArenaMap", "ObstacleMap", "MAPS", "get_map"]
