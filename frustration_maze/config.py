"""
Application settings for the pygame host
"""

GAME_TITLE = "Frustration Maze"
GAME_VERSION = "1.0.0"

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 680
MIN_WINDOW_WIDTH = 320
MIN_WINDOW_HEIGHT = 240
PANEL_H = 80  # HUD panel below the play area

FPS = 60
