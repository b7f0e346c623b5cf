from twisted.internet.task import Clock
from twisted.trial.unittest import SynchronousTestCase as TC

from ..clock import ReactorClock
from ..countdown import ReactorTimerService


class ReactorClockTests(TC):
    def test_arithmetic(self) -> None:
        reactor = Clock()
        reactor.advance(1000)
        clock = ReactorClock(reactor)
        self.assertEqual(clock.now(), 1000.0)
        self.assertEqual(clock.difference(1010.0, 1000.0), 10.0)
        self.assertEqual(clock.difference(1000.0, 1010.0), -10.0)
        self.assertTrue(clock.isBefore(1.0, 2.0))
        self.assertFalse(clock.isBefore(2.0, 2.0))


class ReactorTimerServiceTests(TC):
    def setUp(self) -> None:
        self.reactor = Clock()
        self.timers = ReactorTimerService(self.reactor)
        self.fired: list[float] = []

    def onFire(self) -> None:
        self.fired.append(self.reactor.seconds())

    def test_firesOnce(self) -> None:
        handle = self.timers.schedule(10, self.onFire)
        self.reactor.advance(9)
        self.assertEqual(self.fired, [])
        self.reactor.advance(1)
        self.assertEqual(self.fired, [10.0])
        self.reactor.advance(100)
        self.assertEqual(self.fired, [10.0])
        self.assertEqual(self.timers.remaining(handle), 0.0)

    def test_remaining(self) -> None:
        handle = self.timers.schedule(90, self.onFire)
        self.assertEqual(self.timers.remaining(handle), 90.0)
        self.reactor.advance(30.5)
        self.assertEqual(self.timers.remaining(handle), 59.5)

    def test_remainingWithoutHandle(self) -> None:
        self.assertEqual(self.timers.remaining(None), 0.0)

    def test_cancel(self) -> None:
        handle = self.timers.schedule(10, self.onFire)
        self.timers.cancel(handle)
        self.reactor.advance(20)
        self.assertEqual(self.fired, [])
        self.assertEqual(self.timers.remaining(handle), 0.0)

    def test_cancelIsIdempotent(self) -> None:
        """
        Cancelling an already-cancelled, already-fired, or absent handle does
        nothing.
        """
        cancelled = self.timers.schedule(10, self.onFire)
        self.timers.cancel(cancelled)
        self.timers.cancel(cancelled)
        fired = self.timers.schedule(1, self.onFire)
        self.reactor.advance(1)
        self.timers.cancel(fired)
        self.timers.cancel(None)
        self.assertEqual(self.fired, [1.0])

    def test_negativeDuration(self) -> None:
        with self.assertRaises(ValueError):
            self.timers.schedule(-1, self.onFire)
