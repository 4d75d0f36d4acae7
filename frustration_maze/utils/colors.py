"""
Color palette for Frustration Maze
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_MAZE_BG = (16, 18, 24)      # Play area background
COLOR_PANEL_BG = (12, 14, 18)     # HUD panel background

# UI colors
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text
COLOR_GAME_OVER = (255, 100, 100)

# Entity colors
COLOR_WALL = (255, 82, 82)        # Walls and obstacles share the danger color
COLOR_OBSTACLE = (255, 82, 82)
COLOR_PLAYER = (66, 133, 244)     # Player
COLOR_GOAL = (76, 175, 80)        # Goal
COLOR_FAKE_CURSOR = (255, 255, 255, 180)  # Decoy cursor (with alpha)

# Menu colors
COLOR_MENU_OVERLAY = (10, 12, 16, 200)     # Overlay (with alpha)

# Inversion base (frame is subtracted from it)
COLOR_INVERT_BASE = (255, 255, 255)
