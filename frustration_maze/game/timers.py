"""
Expire-at timers checked against the engine clock every tick
"""

from frustration_maze.utils.constants import TIMER_INTERVAL_MS


class Deadline:
    """
    A flag that stays raised until a timestamp passes

    Arming it again replaces the previous expiry, so the last arm wins.
    """
    def __init__(self):
        self.expires_at = None

    def arm(self, now, duration):
        self.expires_at = now + duration

    def clear(self):
        self.expires_at = None

    def is_active(self, now):
        """True while now is before the expiry"""
        return self.expires_at is not None and now < self.expires_at

    def expire(self, now):
        """Drop the expiry once it has passed"""
        if self.expires_at is not None and now >= self.expires_at:
            self.expires_at = None

    def __repr__(self):
        return f"Deadline(expires_at={self.expires_at})"


class ElapsedTimer:
    """
    Whole seconds since start, refreshed once per interval while running

    The displayed value only moves when poll() sees the next refresh time has
    passed; stop() freezes it.
    """
    def __init__(self, interval=TIMER_INTERVAL_MS):
        self.interval = interval
        self.started_at = None
        self.next_update_at = None
        self.seconds = 0

    @property
    def running(self):
        return self.next_update_at is not None

    def start(self, now):
        self.started_at = now
        self.next_update_at = now + self.interval

    def stop(self):
        self.next_update_at = None

    def reset(self):
        self.stop()
        self.started_at = None
        self.seconds = 0

    def poll(self, now):
        """Refresh the displayed seconds if an update is due"""
        if not self.running:
            return self.seconds

        if now >= self.next_update_at:
            self.seconds = int((now - self.started_at) // 1000)
            # Catch up on frames longer than the interval
            while self.next_update_at <= now:
                self.next_update_at += self.interval
        return self.seconds

    def __repr__(self):
        return f"ElapsedTimer(seconds={self.seconds}, running={self.running})"
