import os
import subprocess
import sys
import tempfile
import time
import unittest
from pathlib import Path

import pomo

SOURCE_ROOT = Path(pomo.__file__).resolve().parents[1]
STARTUP_TIMEOUT_SECONDS = 15.0


@unittest.skipIf(os.name == "nt", "POSIX signals required")
class CrossProcessSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self._temp_dir.name) / "pomo"
        self.env = dict(os.environ)
        self.env["POMO_CONFIG_DIR"] = str(self.root)
        self.env.pop("POMO_LOG_LEVEL", None)
        python_path = self.env.get("PYTHONPATH")
        self.env["PYTHONPATH"] = (
            f"{SOURCE_ROOT}{os.pathsep}{python_path}" if python_path else str(SOURCE_ROOT)
        )
        self.timer: subprocess.Popen | None = None

    def tearDown(self) -> None:
        if self.timer is not None and self.timer.poll() is None:
            self.timer.kill()
            self.timer.wait(timeout=10)
        self._temp_dir.cleanup()

    def _pomo(self, *args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", "pomo", *args],
            env=self.env,
            capture_output=True,
            text=True,
            timeout=30,
        )

    def _wait_for_snapshot(self) -> None:
        deadline = time.monotonic() + STARTUP_TIMEOUT_SECONDS
        status_path = self.root / "status"
        while time.monotonic() < deadline:
            if status_path.exists() and (self.root / "pid").exists():
                return
            if self.timer.poll() is not None:
                self.fail(f"timer exited early with {self.timer.returncode}")
            time.sleep(0.05)
        self.fail("timer never published a status snapshot")

    def test_second_process_reads_frame_then_ends_session(self) -> None:
        self.timer = subprocess.Popen(
            [sys.executable, "-m", "pomo", "start", "-p", "1", "-track"],
            env=self.env,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        self._wait_for_snapshot()

        status = self._pomo("-status")
        self.assertEqual(0, status.returncode, status.stderr)
        lines = status.stdout.splitlines()
        self.assertEqual(3, len(lines))
        self.assertIn("Pomodoro: ", lines[0])
        self.assertIn("minute(s) - ", lines[1])

        ended = self._pomo("end")
        self.assertEqual(0, ended.returncode, ended.stderr)
        self.assertIn(f"pid {self.timer.pid}", ended.stdout)
        self.assertEqual(0, self.timer.wait(timeout=10))
        self.assertFalse((self.root / "pid").exists())
        self.assertFalse((self.root / "status").exists())

        again = self._pomo("end")
        self.assertEqual(1, again.returncode)
        self.assertIn("No active pomodoro session.", again.stderr)

        no_timer = self._pomo("-status")
        self.assertEqual(1, no_timer.returncode)
        self.assertIn("No active timer.", no_timer.stderr)


if __name__ == "__main__":
    unittest.main()
