from settings import ANGLE_OFFSET, LIGHT_COLOR, UNIFORM_RAY_COUNT

LIGHT_STATS = {
    "default": {
        "color": LIGHT_COLOR,
        "angle_offset": ANGLE_OFFSET,
        "num_rays": UNIFORM_RAY_COUNT,
    },
    "lantern": {
        "color": "#fff1c1",
        "angle_offset": 0.001,
        "num_rays": 36,
    },
}
