from enum import Enum

import numpy as np

from .config import DEFAULT_ARRAY_SIZE, VALUE_MIN, VALUE_MAX


class PlaybackState(Enum):
    IDLE    = "idle"
    PLAYING = "playing"
    PAUSED  = "paused"


class BarState(Enum):
    NONE      = "none"
    COMPARING = "comparing"
    SWAPPING  = "swapping"
    PIVOT     = "pivot"
    SORTED    = "sorted"


class ArrayModel:
    """
    The values being sorted, one per bar.

    Engines receive ``values`` (the live list) and mutate it in place;
    everything else should go through ``snapshot()``.
    """

    def __init__(self, values=None, seed=None):
        self._rng = np.random.default_rng(seed)
        self.values: list = list(values) if values is not None else []

    def __len__(self):
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def generate(self, size: int = DEFAULT_ARRAY_SIZE) -> list:
        """Refill with ``size`` independent uniform draws in [VALUE_MIN, VALUE_MAX]."""
        drawn = self._rng.integers(VALUE_MIN, VALUE_MAX + 1, size=size)
        self.values[:] = drawn.tolist()
        return self.values

    def load(self, values):
        self.values[:] = [int(v) for v in values]
        return self.values

    def snapshot(self) -> list:
        return list(self.values)

    def is_sorted(self) -> bool:
        return all(a <= b for a, b in zip(self.values, self.values[1:]))


class Statistics:
    """Run counters plus the start/finish timestamps (milliseconds)."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.comparisons    = 0
        self.swaps          = 0
        self.array_accesses = 0
        self.start_time     = None
        self.finish_time    = None

    def start(self, now: float):
        self.start_time  = now
        self.finish_time = None

    def finish(self, now: float):
        if self.start_time is not None:
            self.finish_time = now

    def elapsed_ms(self, now: float) -> int:
        if self.start_time is None:
            return 0
        end = self.finish_time if self.finish_time is not None else now
        return int(max(0.0, end - self.start_time))

    def as_dict(self, now: float) -> dict:
        return dict(
            comparisons=self.comparisons,
            swaps=self.swaps,
            array_accesses=self.array_accesses,
            elapsed_ms=self.elapsed_ms(now),
        )
