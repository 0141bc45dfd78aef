import pytest


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms

    def sleep(self, seconds):
        self.now += seconds * 1000.0

    def run(self, controller, ms, step=5):
        """Tick the controller every ``step`` ms for ``ms`` ms."""
        end = self.now + ms
        while self.now < end:
            self.advance(step)
            controller.tick()


@pytest.fixture
def clock():
    return FakeClock()
