# -----------------------------
# Window
# -----------------------------
WIDTH = 1280
HEIGHT = 800
FPS = 60
BACKGROUND_COLOR = (255, 255, 255)

# Camera always shows at least this much of the world (world units)
MIN_WORLD_WIDTH = 1600
MIN_WORLD_HEIGHT = 1000

# -----------------------------
# Light casting
# -----------------------------
ANGLE_OFFSET = 0.005        # radians cast either side of every obstacle corner
INTERSECT_EPS = 1e-5        # tolerance on the segment parameter u
UNIFORM_RAY_COUNT = 18
FAR_RAY_LENGTH = 100000

# -----------------------------
# Rendering
# -----------------------------
LIGHT_COLOR = "#ffb327"
OBSTACLE_COLOR = (128, 128, 128)
OBSTACLE_LINE_WIDTH = 5
HIT_MARKER_RADIUS = 5
HIT_MARKER_COLOR = (160, 32, 240)
RAY_COLOR = (200, 60, 20)

LOG_LEVEL = "INFO"
