import argparse
import logging
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, LOG_LEVEL

from core.camera import Camera
from core.frame_driver import FrameDriver
from core.input_manager import InputManager
from core.light_renderer import LightRenderer
from core.rays import STRATEGIES, RaySource

from data.light_stats import LIGHT_STATS
from maps import get_map

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2D point-light visibility demo")
    parser.add_argument("--map", type=str, default="arena",
                        help="Map name (e.g. 'arena') or path to a .json map file")
    parser.add_argument("--light", type=str, default="default",
                        choices=sorted(LIGHT_STATS),
                        help="Light preset from data/light_stats.py")
    parser.add_argument("--strategy", type=str, default="endpoints",
                        choices=STRATEGIES,
                        help="How probe rays are generated each frame")
    parser.add_argument("--show-hits", action="store_true",
                        help="Draw a marker at every resolved ray hit")
    parser.add_argument("--show-rays", action="store_true",
                        help="Draw every resolved probe ray")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s: %(message)s",
        stream=sys.stdout,
    )

    try:
        current_map = get_map(args.map)
    except (OSError, ValueError):
        logger.fatal("Error loading map '%s'", args.map, exc_info=True)
        sys.exit(1)

    light = LIGHT_STATS[args.light]

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error:
        logger.fatal("Error initialising the display", exc_info=True)
        pygame.quit()
        sys.exit(1)
    pygame.display.set_caption("Light Caster")
    clock = pygame.time.Clock()

    camera = Camera()
    input_manager = InputManager()
    renderer = LightRenderer(camera, light_color=light["color"])

    # -----------------------------
    # Light
    # -----------------------------
    ray_source = RaySource(
        position=(0, 0),
        num_rays=light["num_rays"],
        angle_offset=light["angle_offset"],
    )
    driver = FrameDriver(
        ray_source,
        current_map.obstacles,
        strategy=args.strategy,
        show_hits=args.show_hits,
        show_rays=args.show_rays,
    )
    show_obstacles = True

    logger.info("Running with %d obstacles", len(current_map.obstacles))

    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()

        if input_manager.is_pressed("quit"):
            running = False
        if input_manager.is_pressed("toggle_hits"):
            driver.toggle_hits()
        if input_manager.is_pressed("toggle_rays"):
            driver.toggle_rays()
        if input_manager.is_pressed("toggle_strategy"):
            driver.toggle_strategy()
        if input_manager.is_pressed("toggle_obstacles"):
            show_obstacles = not show_obstacles

        # -----------------------------
        # Update
        # -----------------------------
        camera.update(dt)
        cursor_world = camera.viewport_to_world(input_manager.get_cursor_pos())
        driver.step(cursor_world)

        # -----------------------------
        # Draw
        # -----------------------------
        screen.fill(BACKGROUND_COLOR)
        renderer.draw_frame(screen, driver, current_map.obstacles, show_obstacles)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
