import unittest

from pomodoro import PhaseKind, PhaseTimer, TimerConfig
from runtime import KEY_BINDINGS, TimerCommand, apply_command, command_for_key
from tui import KEY_ESCAPE


class CommandMappingTests(unittest.TestCase):
    def test_bound_keys(self) -> None:
        self.assertEqual(TimerCommand.TOGGLE_PAUSE, command_for_key(" "))
        self.assertEqual(TimerCommand.SKIP, command_for_key("n"))
        self.assertEqual(TimerCommand.RESET, command_for_key("r"))
        self.assertEqual(TimerCommand.QUIT, command_for_key("q"))
        self.assertEqual(TimerCommand.QUIT, command_for_key(KEY_ESCAPE))

    def test_unbound_keys_are_ignored(self) -> None:
        for key in (None, "x", "N", "\n", "1"):
            with self.subTest(key=key):
                self.assertIsNone(command_for_key(key))

    def test_every_command_has_a_binding(self) -> None:
        self.assertEqual(set(TimerCommand), set(KEY_BINDINGS.values()))


class ApplyCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.now = 0.0
        self.timer = PhaseTimer(TimerConfig(), clock=lambda: self.now)

    def test_toggle_pause(self) -> None:
        self.assertTrue(apply_command(self.timer, TimerCommand.TOGGLE_PAUSE))
        self.assertTrue(self.timer.paused)
        self.assertTrue(apply_command(self.timer, TimerCommand.TOGGLE_PAUSE))
        self.assertFalse(self.timer.paused)

    def test_skip(self) -> None:
        self.assertTrue(apply_command(self.timer, TimerCommand.SKIP))
        self.assertEqual(PhaseKind.SHORT_BREAK, self.timer.current_phase.kind)

    def test_reset(self) -> None:
        self.now = 40.0
        self.assertTrue(apply_command(self.timer, TimerCommand.RESET))
        self.assertEqual(40.0, self.timer.phase_started_at)
        self.assertEqual(PhaseKind.FOCUS, self.timer.current_phase.kind)

    def test_quit_stops_loop_without_touching_timer(self) -> None:
        self.assertFalse(apply_command(self.timer, TimerCommand.QUIT))
        self.assertEqual(PhaseKind.FOCUS, self.timer.current_phase.kind)
        self.assertFalse(self.timer.paused)


if __name__ == "__main__":
    unittest.main()
