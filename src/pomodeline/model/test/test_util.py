from twisted.trial.unittest import SynchronousTestCase as TC

from ..util import intervalSummary, showFailures


class IntervalSummaryTests(TC):
    def test_summaries(self) -> None:
        self.assertEqual(intervalSummary(0), "0 seconds")
        self.assertEqual(intervalSummary(1), "1 second")
        self.assertEqual(intervalSummary(60), "1 minute")
        self.assertEqual(intervalSummary(185), "3 minutes and 5 seconds")
        self.assertEqual(intervalSummary(3725), "1 hour, 2 minutes and 5 seconds")


class ShowFailuresTests(TC):
    def test_logsAndReraises(self) -> None:
        with self.assertRaises(KeyError):
            with showFailures():
                raise KeyError("x")
        self.assertEqual(len(self.flushLoggedErrors(KeyError)), 1)

    def test_success(self) -> None:
        with showFailures():
            pass
        self.assertEqual(self.flushLoggedErrors(), [])
