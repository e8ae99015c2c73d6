import pygame


class InputManager:
    def __init__(self):
        # -------------------------
        # Action → Key bindings
        # -------------------------
        self.keymap = {
            "quit": pygame.K_ESCAPE,
            "toggle_hits": pygame.K_h,
            "toggle_rays": pygame.K_r,
            "toggle_strategy": pygame.K_f,
            "toggle_obstacles": pygame.K_o,
        }

        # Initialize key states safely
        self.keys = pygame.key.get_pressed()
        self.prev_keys = self.keys

        self.cursor_pos = self._read_cursor()

    # =====================================================
    # UPDATE (call once per frame BEFORE the light step)
    # =====================================================

    def update(self):
        self.prev_keys = self.keys
        self.keys = pygame.key.get_pressed()
        self.cursor_pos = self._read_cursor()

    @staticmethod
    def _read_cursor():
        # Outside the window there is no meaningful cursor position
        if not pygame.mouse.get_focused():
            return None
        return pygame.Vector2(pygame.mouse.get_pos())

    # =====================================================
    # PRESSED THIS FRAME (edge detection)
    # =====================================================

    def is_pressed(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False

        return self.keys[key] and not self.prev_keys[key]

    # =====================================================
    # CURSOR
    # =====================================================

    def get_cursor_pos(self):
        if self.cursor_pos is None:
            return None
        return pygame.Vector2(self.cursor_pos)
