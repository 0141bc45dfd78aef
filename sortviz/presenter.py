"""
Presentation interface.

The controller only ever addresses bars by index through these methods.
``Presenter`` ignores everything, so a front end overrides just what it shows.
"""
import logging

from .model import BarState

logger = logging.getLogger(__name__)


class Presenter:
    def render_bar(self, index: int, value: int):
        pass

    def render_all_bars(self, values):
        pass

    def set_bar_state(self, index: int, state: BarState):
        pass

    def set_progress(self, fraction: float):
        pass

    def set_statistics(self, comparisons: int, swaps: int, array_accesses: int, elapsed_ms: int):
        pass

    def set_controls_enabled(self, play: bool, pause: bool, reset: bool):
        pass

    def set_algorithm_info(self, descriptor):
        pass


class LogPresenter(Presenter):
    """Headless presenter: reports through the logger instead of drawing."""

    def __init__(self):
        self._last_decile = -1

    def render_all_bars(self, values):
        logger.info("Array (%d): %s", len(values), values)

    def set_progress(self, fraction):
        decile = int(fraction * 10)
        if decile != self._last_decile:
            self._last_decile = decile
            logger.info("Progress %3d%%", int(fraction * 100))

    def set_statistics(self, comparisons, swaps, array_accesses, elapsed_ms):
        logger.debug("comparisons=%d swaps=%d accesses=%d elapsed=%dms",
                     comparisons, swaps, array_accesses, elapsed_ms)

    def set_algorithm_info(self, descriptor):
        logger.info("%s  best %s / avg %s / worst %s, space %s",
                    descriptor.name, descriptor.best, descriptor.average,
                    descriptor.worst, descriptor.space)


class RecordingPresenter(Presenter):
    """Keeps the last value pushed for every display element, plus an event log."""

    def __init__(self):
        self.values      = []
        self.bar_states  = {}
        self.progress    = 0.0
        self.statistics  = (0, 0, 0, 0)
        self.controls    = (True, False, True)
        self.algorithm   = None
        self.events      = []

    def render_bar(self, index, value):
        self.values[index] = value
        self.events.append(("bar", index, value))

    def render_all_bars(self, values):
        self.values = list(values)
        self.bar_states = {}
        self.events.append(("bars", tuple(values)))

    def set_bar_state(self, index, state):
        if state is BarState.NONE:
            self.bar_states.pop(index, None)
        else:
            self.bar_states[index] = state
        self.events.append(("state", index, state))

    def set_progress(self, fraction):
        self.progress = fraction
        self.events.append(("progress", fraction))

    def set_statistics(self, comparisons, swaps, array_accesses, elapsed_ms):
        self.statistics = (comparisons, swaps, array_accesses, elapsed_ms)

    def set_controls_enabled(self, play, pause, reset):
        self.controls = (play, pause, reset)

    def set_algorithm_info(self, descriptor):
        self.algorithm = descriptor

    def of_kind(self, kind):
        return [e for e in self.events if e[0] == kind]
