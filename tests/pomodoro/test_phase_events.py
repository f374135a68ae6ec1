import unittest
from queue import Queue

from pomodoro import (
    PhaseChangeEvent,
    PhaseKind,
    PhaseTimer,
    QueueEventPublisher,
    TimerConfig,
    saturating_since,
)


class SaturatingSinceTests(unittest.TestCase):
    def test_positive_difference(self) -> None:
        self.assertEqual(2.5, saturating_since(12.5, 10.0))

    def test_negative_difference_saturates(self) -> None:
        self.assertEqual(0.0, saturating_since(10.0, 12.5))


class QueueEventPublisherTests(unittest.TestCase):
    def test_timer_events_land_on_queue(self) -> None:
        queue: Queue[PhaseChangeEvent] = Queue()
        timer = PhaseTimer(
            TimerConfig(long_every=1),
            clock=lambda: 0.0,
            publisher=QueueEventPublisher(queue),
        )

        timer.advance_phase()

        event = queue.get_nowait()
        self.assertIs(PhaseKind.LONG_BREAK, event.kind)
        self.assertIs(PhaseKind.FOCUS, event.previous_kind)
        self.assertEqual("Long Break", event.title)
        self.assertTrue(queue.empty())


if __name__ == "__main__":
    unittest.main()
