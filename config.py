# === Global configuration & tuning ===
WIDTH, HEIGHT = 1260, 850
FPS = 60
WINDOW_TITLE = "Isoghost"

# Colors
BG = (255, 255, 255)
TEXT_COL = (0, 0, 0)
WHITE = (240, 240, 240)

# Everything in the world is drawn at half size
SCALE = 0.5

# === Level ===
SIDE_LENGTH = 10  # tiles per side, grid is SIDE_LENGTH x SIDE_LENGTH
GHOST_START = (0, 0)

# === Isometric geometry ===
# Sprite size of a single tile on the sheet
TILE_WIDTH = 130
TILE_HEIGHT = 65
# Extra spacing between neighbouring tiles
DX = 70
DY = 10

# === Camera ===
SCROLL_SPEED = 10    # world units drained per frame (1, 5, 10, 25, 50)
SCROLL_BORDER = 0.2  # fraction of the viewport that triggers a scroll
SHIFT = 50           # world units queued per scroll

# === Assets ===
SPRITE_SHEET_PATH = "assets/isometric.png"
FONT_PATH = "assets/fonts/Lobster-Regular.ttf"
FONT_SIZE = 100  # world size, scaled by SCALE on screen

# Placeholder colours used when the sprite sheet cannot be loaded
PLACEHOLDER_COLORS = {
    "grass": (96, 178, 72),
    "green": (64, 150, 60),
    "dirt": (150, 110, 70),
    "stone": (140, 140, 150),
    "water": (70, 130, 210),
    "bridge": (170, 120, 60),
    "decoration": (240, 200, 60),
    "ghost": (255, 150, 40),
}

# === Runtime config ===
RUNTIME_CONFIG_PATH = "config/game_config.json"
DEFAULT_SEED = 12345
