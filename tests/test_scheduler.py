"""Tests for step pacing."""

import pytest

from sortviz.model import PlaybackState
from sortviz.scheduler import AnimationStopped, StepScheduler, step_delay_ms


class StateBox:
    def __init__(self, state=PlaybackState.PLAYING):
        self.state = state

    def __call__(self):
        return self.state


@pytest.fixture
def box():
    return StateBox()


class TestDelay:

    @pytest.mark.parametrize("speed, expected", [(1, 150), (5, 90), (10, 15), (11, 10), (20, 10)])
    def test_delay_formula(self, speed, expected):
        assert step_delay_ms(speed) == expected

    def test_speed_change_applies_to_next_wait(self, box):
        sched = StepScheduler(box, speed=1)
        sched.begin_wait(0)
        sched.speed = 10
        assert not sched.poll(0)
        assert not sched.poll(100)
        assert sched.poll(150)

        sched.begin_wait(150)
        assert not sched.poll(150)
        assert sched.poll(165)


class TestPolling:

    def test_no_wait_means_continue(self, box):
        sched = StepScheduler(box)
        assert not sched.pending
        assert sched.poll(0)

    def test_resolves_after_delay(self, box):
        sched = StepScheduler(box, speed=10)
        sched.begin_wait(0)
        assert sched.pending
        assert not sched.poll(0)
        assert not sched.poll(14)
        assert sched.poll(15)
        assert not sched.pending

    def test_explicit_delay_overrides_speed(self, box):
        sched = StepScheduler(box, speed=1)
        sched.begin_wait(0, delay=30)
        assert not sched.poll(0)
        assert sched.poll(30)

    def test_paused_polls_without_advancing(self, box):
        box.state = PlaybackState.PAUSED
        sched = StepScheduler(box, speed=10)
        sched.begin_wait(0)

        assert not sched.poll(0)
        assert not sched.poll(49)
        assert not sched.poll(500)      # re-checked at 50, next check at 550

        box.state = PlaybackState.PLAYING
        assert not sched.poll(550)      # arms the step delay
        assert not sched.poll(564)
        assert sched.poll(565)

    def test_pause_during_delay_holds_the_step(self, box):
        sched = StepScheduler(box, speed=10)
        sched.begin_wait(0)
        assert not sched.poll(0)

        box.state = PlaybackState.PAUSED
        assert not sched.poll(15)
        assert not sched.poll(65)

        box.state = PlaybackState.PLAYING
        assert not sched.poll(115)
        assert sched.poll(130)


class TestCancellation:

    def test_idle_raises(self, box):
        sched = StepScheduler(box)
        sched.begin_wait(0)
        box.state = PlaybackState.IDLE
        with pytest.raises(AnimationStopped):
            sched.poll(0)
        assert not sched.pending

    def test_paused_then_idle_raises_within_one_poll(self, box):
        box.state = PlaybackState.PAUSED
        sched = StepScheduler(box)
        sched.begin_wait(0)
        assert not sched.poll(0)

        box.state = PlaybackState.IDLE
        with pytest.raises(AnimationStopped):
            sched.poll(50)

    def test_interrupt_checks_immediately(self, box):
        sched = StepScheduler(box, speed=1)
        sched.begin_wait(0)
        assert not sched.poll(0)        # 150 ms delay armed

        box.state = PlaybackState.IDLE
        sched.interrupt()
        with pytest.raises(AnimationStopped):
            sched.poll(1)

    def test_message(self):
        assert str(AnimationStopped()) == "Animation stopped"
