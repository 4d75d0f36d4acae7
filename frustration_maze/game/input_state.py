"""
Input state fed by the host's keyboard and pointer events
"""

from collections import deque

from frustration_maze.utils.constants import DIRECTIONS, KEY_BINDINGS, POINTER_TRAIL_LENGTH


class InputIntent:
    """
    Four directional flags, set and cleared by key events
    """
    def __init__(self):
        self.pressed = {direction: False for direction in DIRECTIONS}

    def set_direction(self, direction, down):
        if direction not in self.pressed:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.pressed[direction] = bool(down)

    def handle_key(self, key_name, down):
        """
        Apply a key event by name (arrow names or w/a/s/d, any case)

        Returns:
            The direction the key maps to, or None for unbound keys
        """
        direction = KEY_BINDINGS.get(key_name.lower())
        if direction is not None:
            self.pressed[direction] = down
        return direction

    def active_directions(self):
        """Pressed directions in application order"""
        return [d for d in DIRECTIONS if self.pressed[d]]

    def any_pressed(self):
        return any(self.pressed.values())

    def release_all(self):
        for direction in self.pressed:
            self.pressed[direction] = False

    def __repr__(self):
        return f"InputIntent(pressed={self.active_directions()})"


class PointerTrail:
    """
    Ring buffer of the most recent pointer positions
    """
    def __init__(self, capacity=POINTER_TRAIL_LENGTH):
        self.points = deque(maxlen=capacity)

    def push(self, x, y):
        self.points.append((x, y))

    def sample(self, rng):
        """Random recent point, or None when the trail is empty"""
        if not self.points:
            return None
        return rng.choice(self.points)

    def clear(self):
        self.points.clear()

    def __len__(self):
        return len(self.points)

    def __repr__(self):
        return f"PointerTrail(points={len(self.points)})"
