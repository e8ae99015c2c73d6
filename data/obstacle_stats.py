from settings import OBSTACLE_COLOR, OBSTACLE_LINE_WIDTH

OBSTACLE_STATS = {
    "wall": {
        "color": OBSTACLE_COLOR,
        "line_width": OBSTACLE_LINE_WIDTH,
    },
    "crate": {
        "color": (140, 100, 60),
        "line_width": 3,
    },
}
