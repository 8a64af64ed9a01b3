"""
HUD drawing for Isoghost: the points readout in the top-left corner.
"""
from config import SCALE, FONT_SIZE

# Readout position in world units; the renderer scales it like everything else
POINTS_POS = (50, 50)


def draw_hud(points: int, renderer) -> None:
    """Draw the points readout through `renderer`."""
    x, y = POINTS_POS
    renderer.draw_text(f"Points: {points}", x * SCALE, y * SCALE, FONT_SIZE, align="topleft")
