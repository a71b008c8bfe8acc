import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pomo.cli import parse_args, resolve_command
from pomo.main import main


class CliParsingTests(unittest.TestCase):
    def test_no_arguments_starts_pomodoro(self) -> None:
        self.assertEqual("start", resolve_command(parse_args([])))

    def test_overrides_and_track_still_start(self) -> None:
        args = parse_args(["-p", "1", "-track"])
        self.assertEqual("start", resolve_command(args))
        self.assertEqual(1, args.pomodoro_override)
        self.assertTrue(args.track)

    def test_management_flags_alone_do_not_start(self) -> None:
        for argv in (["-listc"], ["-setp", "30"], ["-c1", "#112233"], ["-savec", "x"]):
            with self.subTest(argv=argv):
                self.assertIsNone(resolve_command(parse_args(argv)))

    def test_explicit_command_with_management_flag(self) -> None:
        self.assertEqual("break", resolve_command(parse_args(["break", "-setb", "10"])))

    def test_usage_errors_exit_with_status_one(self) -> None:
        for argv in (
            ["bogus"],
            ["-x"],
            ["-p"],
            ["-p", "abc"],
            ["-p", "0"],
            ["-c1", "#12345"],
            ["-savec", "../escape"],
            ["-set"],
        ):
            with self.subTest(argv=argv):
                with patch("sys.stderr", new_callable=io.StringIO):
                    with self.assertRaises(SystemExit) as context:
                        parse_args(argv)
                self.assertEqual(1, context.exception.code)

    def test_help_exits_zero(self) -> None:
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            with self.assertRaises(SystemExit) as context:
                parse_args(["--help"])
        self.assertEqual(0, context.exception.code)
        self.assertIn("usage: pomo", stdout.getvalue())


class MainFlowTests(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self._temp_dir.name) / "pomo"
        self.environ = {"POMO_CONFIG_DIR": str(self.root)}
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def tearDown(self) -> None:
        self._temp_dir.cleanup()

    def _main(self, *argv: str) -> int:
        return main(list(argv), environ=self.environ, stdout=self.stdout, stderr=self.stderr)

    def test_savec_then_loadc_activates_palette(self) -> None:
        self.assertEqual(0, self._main("-c1", "#112233", "-c2", "#445566", "-savec", "work"))
        self.assertEqual(0, self._main("-c1", "#FFFFFF", "-c2", "#000000"))
        self.assertEqual(0, self._main("-loadc", "work"))

        config_text = (self.root / "config").read_text(encoding="utf-8")
        self.assertIn("COLOR1=#112233", config_text)
        self.assertIn("COLOR2=#445566", config_text)

    def test_deletec_missing_palette_fails(self) -> None:
        self.assertEqual(1, self._main("-deletec", "ghost"))

    def test_end_without_session_fails_and_leaves_no_files(self) -> None:
        self.assertEqual(1, self._main("end"))
        self.assertFalse(self.root.exists())

    def test_status_without_timer_fails(self) -> None:
        self.assertEqual(1, self._main("-status"))

    def test_listc_prints_saved_palettes(self) -> None:
        self._main("-savec", "default")
        self.assertEqual(0, self._main("-listc"))
        self.assertIn("default", self.stdout.getvalue())
        self.assertIn("#00CCFF", self.stdout.getvalue())

    def test_tracked_one_minute_run_cleans_up(self) -> None:
        with patch("pomo.runtime.loop.time.sleep") as sleep, patch(
            "pomo.main.CompletionAlertService"
        ) as alert_service:
            exit_code = self._main("start", "-p", "1", "-track")

        self.assertEqual(0, exit_code)
        self.assertEqual(60, sleep.call_count)
        self.assertFalse((self.root / "status").exists())
        self.assertFalse((self.root / "pid").exists())
        alert_service.return_value.announce.assert_called_once_with("Pomodoro")
        self.assertIn("minute(s) - ", self.stdout.getvalue())

    def test_override_does_not_persist(self) -> None:
        with patch("pomo.runtime.loop.time.sleep"), patch("pomo.main.CompletionAlertService"):
            self._main("break", "-b", "1")

        self.assertFalse((self.root / "config").exists())

    def test_setp_persists_and_applies(self) -> None:
        self.assertEqual(0, self._main("-setp", "40", "-setb", "8"))
        config_text = (self.root / "config").read_text(encoding="utf-8")
        self.assertIn("POMO_MIN=40", config_text)
        self.assertIn("BREAK_MIN=8", config_text)


if __name__ == "__main__":
    unittest.main()
