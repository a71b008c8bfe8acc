import re
import unittest

from pomo.colors import RGB
from pomo.pomodoro import BAR_LENGTH, CountdownSnapshot, countdown_text, render_frame

WHITE = RGB.from_hex("#FFFFFF")
CYAN = RGB.from_hex("#00CCFF")
_ESCAPES = re.compile(r"\033\[[0-9;?]*[A-Za-z]")


def _strip(text: str) -> str:
    return _ESCAPES.sub("", text)


def _snapshot(remaining: int, *, minutes: int = 25, mode: str = "pomodoro") -> CountdownSnapshot:
    return CountdownSnapshot(
        phase="running",
        mode=mode,
        duration_minutes=minutes,
        remaining_seconds=remaining,
        start_label="09:00",
        end_label="09:25",
    )


class FrameRenderingTests(unittest.TestCase):
    def test_countdown_text_matches_display_format(self) -> None:
        self.assertEqual("25 minute(s) - 24m5s", countdown_text(_snapshot(24 * 60 + 5)))

    def test_header_shows_label_and_clock_range(self) -> None:
        frame = render_frame(_snapshot(1500), color1=WHITE, color2=CYAN)
        self.assertEqual("Pomodoro: 09:00 - 09:25", _strip(frame.header))

        break_frame = render_frame(_snapshot(300, minutes=5, mode="break"), color1=WHITE, color2=CYAN)
        self.assertTrue(_strip(break_frame.header).startswith("Break: "))

    def test_digits_use_accent_color_and_letters_text_color(self) -> None:
        frame = render_frame(_snapshot(61, minutes=1), color1=WHITE, color2=CYAN)
        self.assertIn(f"{CYAN.ansi_fg()}1{WHITE.ansi_fg()} minute(s) - {CYAN.ansi_fg()}1", frame.countdown)
        self.assertEqual("1 minute(s) - 1m1s", _strip(frame.countdown))

    def test_bar_has_fixed_width(self) -> None:
        frame = render_frame(_snapshot(750), color1=WHITE, color2=CYAN)
        bar = _strip(frame.bar)

        self.assertEqual(BAR_LENGTH, len(bar))
        self.assertEqual(20, bar.count("█"))
        self.assertEqual(20, bar.count("░"))

    def test_frame_text_is_three_complete_lines(self) -> None:
        frame = render_frame(_snapshot(0), color1=WHITE, color2=CYAN)
        lines = frame.text.splitlines()

        self.assertEqual(3, len(lines))
        self.assertTrue(frame.text.endswith("\033[0m\n"))
        self.assertEqual("█" * BAR_LENGTH, _strip(lines[2]))


if __name__ == "__main__":
    unittest.main()
