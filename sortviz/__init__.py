"""Animated sorting algorithm visualizer."""

__version__ = "0.1.0"

from .algorithms import ALGORITHMS, AlgorithmDescriptor, Step, StepKind, get_generator
from .controller import PlaybackController
from .model import ArrayModel, BarState, PlaybackState, Statistics
from .presenter import LogPresenter, Presenter, RecordingPresenter
from .scheduler import AnimationStopped, StepScheduler
