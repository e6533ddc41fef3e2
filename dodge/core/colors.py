"""Color palette (RGB tuples)."""

Color = tuple[int, int, int]


class Colors:
    # Scene
    BACKGROUND = (0, 0, 0)
    SPAWN_AREA = (80, 80, 80)     # Dark gray

    # Entities
    VIRUS = (230, 41, 55)         # Red
    PLAYER = (0, 121, 241)        # Blue

    # UI
    TEXT = (200, 200, 200)        # Light gray
