"""
Helper utility functions for Frustration Maze
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def lerp(a, b, t):
    """Linear interpolation between a and b by factor t (0-1)"""
    return a + (b - a) * t


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def format_time(seconds):
    """Format seconds to MM:SS string"""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"


def circles_collide(x1, y1, r1, x2, y2, r2):
    """Check if two circles collide"""
    return distance(x1, y1, x2, y2) < (r1 + r2)


def square_overlaps_rect(cx, cy, half, rect_x, rect_y, rect_w, rect_h):
    """
    Check if an axis-aligned square centred on (cx, cy) overlaps a rectangle

    Touching edges do not count as an overlap.
    """
    return (cx + half > rect_x and
            cx - half < rect_x + rect_w and
            cy + half > rect_y and
            cy - half < rect_y + rect_h)
