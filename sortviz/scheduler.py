"""
Step pacing for the sorting engines.

Every visible step is followed by a wait. ``begin_wait`` starts it and the
host loop keeps calling ``poll`` until it returns True; only then is the
engine resumed. Each check reads the playback state:

    IDLE     -> AnimationStopped
    PAUSED   -> check again in POLL_INTERVAL_MS, nothing advances
    PLAYING  -> arm the step delay, resolve once it has elapsed

The state is checked again when the delay runs out, so a pause issued in the
middle of a delay holds the next step back.
"""
import logging

from .config import (
    DEFAULT_SPEED, MIN_STEP_DELAY_MS, POLL_INTERVAL_MS,
    SPEED_CEILING, STEP_DELAY_UNIT_MS,
)
from .model import PlaybackState

logger = logging.getLogger(__name__)


class AnimationStopped(Exception):
    """Raised at a step boundary once playback has been reset."""

    def __init__(self, message="Animation stopped"):
        super().__init__(message)


def step_delay_ms(speed) -> int:
    return max(MIN_STEP_DELAY_MS, (SPEED_CEILING - speed) * STEP_DELAY_UNIT_MS)


class StepScheduler:
    """
    Attributes
    ----------
    speed      : int    - 1 (slowest) .. 10 (fastest)
    get_state  : callable returning the current PlaybackState
    """

    def __init__(self, get_state, speed=DEFAULT_SPEED, poll_interval=POLL_INTERVAL_MS):
        self.get_state     = get_state
        self.speed         = speed
        self.poll_interval = poll_interval
        self._wake_at      = None       # None while no wait is in flight
        self._delay        = 0
        self._armed        = False      # step delay running (vs. state check due)

    @property
    def delay_ms(self) -> int:
        return step_delay_ms(self.speed)

    @property
    def pending(self) -> bool:
        return self._wake_at is not None

    def begin_wait(self, now, delay=None):
        """Start the wait after one visible step; the first state check is due at once."""
        self._delay    = self.delay_ms if delay is None else delay
        self._wake_at  = now
        self._armed    = False

    def interrupt(self):
        """Drop the running delay so the next poll re-checks the playback state."""
        self._wake_at = float("-inf")
        self._armed   = False

    def clear(self):
        self._wake_at = None
        self._armed   = False

    def poll(self, now) -> bool:
        if self._wake_at is None:
            return True
        if now < self._wake_at:
            return False

        state = self.get_state()
        if state is PlaybackState.IDLE:
            self.clear()
            raise AnimationStopped()
        if state is PlaybackState.PAUSED:
            self._armed   = False
            self._wake_at = now + self.poll_interval
            return False

        if not self._armed:
            self._armed   = True
            self._wake_at = now + self._delay
            if self._delay > 0:
                return False

        self.clear()
        return True
