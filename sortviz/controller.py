"""
Playback controller.

Owns the array, the statistics and the playback state, and drives the
selected engine one step at a time. The host loop (pygame frame loop or the
headless runner) calls ``tick()`` as often as it likes; a step only runs when
the scheduler has released it.

State machine:
    IDLE    ->  play()   ->  PLAYING
    PLAYING ->  pause()  ->  PAUSED
    PAUSED  ->  play()   ->  PLAYING
    PLAYING ->  (sweep finished)  ->  IDLE
    any     ->  reset()  ->  IDLE
"""
import logging
import time

from .algorithms import ALGORITHMS, Step, StepKind, get_generator
from .config import (
    DEFAULT_ALGORITHM, DEFAULT_ARRAY_SIZE, DEFAULT_SPEED,
    MAX_ARRAY_SIZE, MAX_SPEED, MIN_ARRAY_SIZE, MIN_SPEED, SWEEP_DELAY_MS,
)
from .model import ArrayModel, BarState, PlaybackState, Statistics
from .presenter import Presenter
from .scheduler import AnimationStopped, StepScheduler

logger = logging.getLogger(__name__)

_HIGHLIGHT = {
    StepKind.COMPARE: BarState.COMPARING,
    StepKind.SWAP:    BarState.SWAPPING,
    StepKind.WRITE:   BarState.SWAPPING,
    StepKind.PIVOT:   BarState.PIVOT,
}

# (play, pause, reset) button availability per state
_CONTROLS = {
    PlaybackState.IDLE:    (True,  False, True),
    PlaybackState.PLAYING: (False, True,  True),
    PlaybackState.PAUSED:  (True,  False, True),
}


def _monotonic_ms():
    return time.monotonic() * 1000.0


def _clamp(value, lo, hi):
    return max(lo, min(hi, int(value)))


class PlaybackController:
    def __init__(self, presenter=None, array=None, clock=None,
                 algorithm=DEFAULT_ALGORITHM, size=DEFAULT_ARRAY_SIZE,
                 speed=DEFAULT_SPEED, seed=None, scheduler=None):
        self.presenter  = presenter if presenter is not None else Presenter()
        self._clock     = clock if clock is not None else _monotonic_ms
        self._array     = ArrayModel(array, seed=seed)
        self._stats     = Statistics()
        self._state     = PlaybackState.IDLE
        self._algorithm = ALGORITHMS[algorithm]
        self._size      = _clamp(size, MIN_ARRAY_SIZE, MAX_ARRAY_SIZE)
        self._progress  = 0.0
        self._run       = None
        self._highlighted = ()
        if scheduler is None:
            scheduler = StepScheduler(None)
        # The scheduler always reads this controller's state.
        scheduler.get_state = lambda: self._state
        scheduler.speed = _clamp(speed, MIN_SPEED, MAX_SPEED)
        self.scheduler  = scheduler

        self.presenter.set_algorithm_info(self._algorithm)
        if array is not None:
            self._size = len(self._array)
            self._refresh_array()
        else:
            self.generate_array()
        self._push_controls()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is not PlaybackState.IDLE

    @property
    def array(self) -> list:
        return self._array.snapshot()

    @property
    def statistics(self) -> dict:
        return self._stats.as_dict(self._clock())

    @property
    def algorithm(self):
        return self._algorithm

    @property
    def speed(self) -> int:
        return self.scheduler.speed

    @property
    def size(self) -> int:
        return self._size

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def is_sorted(self) -> bool:
        return self._array.is_sorted()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select_algorithm(self, key) -> bool:
        if self.is_active:
            logger.debug("Ignoring algorithm change to %r while sorting", key)
            return False
        self._algorithm = ALGORITHMS[key]
        self.presenter.set_algorithm_info(self._algorithm)
        self.reset()
        return True

    def generate_array(self, size=None) -> bool:
        if self.is_active:
            return False
        if size is not None:
            self._size = _clamp(size, MIN_ARRAY_SIZE, MAX_ARRAY_SIZE)
        self._array.generate(self._size)
        self._refresh_array()
        return True

    def load_array(self, values) -> bool:
        """Sort the given values instead of a random array."""
        if self.is_active:
            return False
        self._array.load(values)
        self._size = len(self._array)
        self._refresh_array()
        return True

    def set_array_size(self, size) -> bool:
        if self.is_active:
            return False
        return self.generate_array(size)

    def set_speed(self, speed):
        self.scheduler.speed = _clamp(speed, MIN_SPEED, MAX_SPEED)

    def play(self):
        if self._state is PlaybackState.PAUSED:
            self._set_state(PlaybackState.PLAYING)
            logger.info("Resumed %s", self._algorithm.name)
            return
        if self._state is PlaybackState.PLAYING:
            return

        now = self._clock()
        self._set_state(PlaybackState.PLAYING)
        self._stats.start(now)
        self._set_progress(0.0)
        # Drop the previous run's sorted marks before the first step.
        self._clear_all_states()
        self._run = self._sequence()
        self.scheduler.clear()
        logger.info("Playing %s on %d values", self._algorithm.name, len(self._array))
        self._pump(now)

    def pause(self):
        if self._state is PlaybackState.PLAYING:
            self._set_state(PlaybackState.PAUSED)
            logger.info("Paused %s", self._algorithm.name)

    def reset(self):
        self._set_state(PlaybackState.IDLE)
        if self._run is not None:
            # The pending wait sees IDLE right away and stops the engine.
            self.scheduler.interrupt()
            self._pump(self._clock())
        self.scheduler.clear()

        self._clear_all_states()
        self._stats.reset()
        self._set_progress(0.0)
        self._push_statistics(self._clock())
        logger.debug("Reset")

    def tick(self, now=None):
        if self._run is None:
            return
        now = self._clock() if now is None else now
        self._pump(now)
        self._push_statistics(now)

    def run_until_idle(self, sleep=time.sleep, interval=0.005):
        """Block until the current run finishes. Meant for headless use."""
        while self._run is not None:
            self.tick()
            sleep(interval)

    # ------------------------------------------------------------------
    # Driving the engine
    # ------------------------------------------------------------------
    def _sequence(self):
        yield from get_generator(self._algorithm.key, self._array.values)
        for i in range(len(self._array)):
            yield Step(StepKind.SORTED, (i,))

    def _pump(self, now):
        while self._run is not None:
            try:
                if not self.scheduler.poll(now):
                    return
            except AnimationStopped as exc:
                self._stop_run(exc)
                return

            try:
                step = next(self._run)
            except StopIteration:
                self._complete(now)
                return
            except Exception:
                logger.exception("%s failed", self._algorithm.name)
                self._teardown()
                raise

            self._apply(step)
            if step.paced:
                delay = SWEEP_DELAY_MS if step.kind is StepKind.SORTED else None
                self.scheduler.begin_wait(now, delay)

    def _apply(self, step):
        kind, indices = step.kind, step.indices
        values = self._array.values

        if kind is StepKind.PROGRESS:
            self._set_progress(step.progress)
            return
        if kind is StepKind.COPY:
            for i in indices:
                self.presenter.render_bar(i, values[i])
            return

        self._clear_highlight()
        if kind is StepKind.SORTED:
            for i in indices:
                self.presenter.set_bar_state(i, BarState.SORTED)
            return

        if kind in (StepKind.SWAP, StepKind.WRITE):
            for i in indices:
                self.presenter.render_bar(i, values[i])
        state = _HIGHLIGHT[kind]
        for i in indices:
            self.presenter.set_bar_state(i, state)
        self._highlighted = indices

        if kind is StepKind.COMPARE:
            self._stats.comparisons += 1
        elif kind is StepKind.SWAP:
            self._stats.swaps += 1
        self._stats.array_accesses += len(indices)

    def _stop_run(self, exc):
        run, self._run = self._run, None
        try:
            run.throw(exc)
        except AnimationStopped:
            logger.debug("%s stopped: %s", self._algorithm.name, exc)
        finally:
            run.close()

    def _complete(self, now):
        self._run = None
        self.scheduler.clear()
        self._highlighted = ()
        self._stats.finish(now)
        self._set_progress(1.0)
        self._set_state(PlaybackState.IDLE)
        self._push_statistics(now)
        s = self._stats
        logger.info("%s finished: %d comparisons, %d swaps, %d accesses in %d ms",
                    self._algorithm.name, s.comparisons, s.swaps,
                    s.array_accesses, s.elapsed_ms(now))
        if not self._array.is_sorted():
            logger.warning("%s finished but the array is out of order: %s",
                           self._algorithm.name, self._array.snapshot())

    def _teardown(self):
        self._run = None
        self.scheduler.clear()
        self._set_state(PlaybackState.IDLE)

    # ------------------------------------------------------------------
    # Presenter updates
    # ------------------------------------------------------------------
    def _refresh_array(self):
        self.presenter.render_all_bars(self._array.snapshot())
        self._highlighted = ()
        self._stats.reset()
        self._set_progress(0.0)
        self._push_statistics(self._clock())

    def _clear_all_states(self):
        for i in range(len(self._array)):
            self.presenter.set_bar_state(i, BarState.NONE)
        self._highlighted = ()

    def _clear_highlight(self):
        for i in self._highlighted:
            self.presenter.set_bar_state(i, BarState.NONE)
        self._highlighted = ()

    def _set_progress(self, fraction):
        self._progress = fraction
        self.presenter.set_progress(fraction)

    def _set_state(self, state):
        self._state = state
        self._push_controls()

    def _push_controls(self):
        self.presenter.set_controls_enabled(*_CONTROLS[self._state])

    def _push_statistics(self, now):
        s = self._stats
        self.presenter.set_statistics(s.comparisons, s.swaps, s.array_accesses,
                                      s.elapsed_ms(now))
