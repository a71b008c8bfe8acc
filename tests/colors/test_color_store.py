import tempfile
import unittest
from pathlib import Path

from pomo.colors import (
    RGB,
    ColorStore,
    InvalidColorFormatError,
    InvalidPaletteNameError,
    PaletteNotFoundError,
)

WORK_FG1 = RGB.from_hex("#112233")
WORK_FG2 = RGB.from_hex("#445566")


class ColorStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self._temp_dir.name) / "pomo"
        self.store = ColorStore(self.root)

    def tearDown(self) -> None:
        self._temp_dir.cleanup()

    def test_save_creates_directory_and_two_token_record(self) -> None:
        self.store.save("work", WORK_FG1, WORK_FG2)

        record = (self.root / "colors" / "work").read_text(encoding="utf-8")
        self.assertEqual(["#112233", "#445566"], record.split())

    def test_save_then_load_returns_saved_pair(self) -> None:
        self.store.save("work", WORK_FG1, WORK_FG2)
        self.assertEqual((WORK_FG1, WORK_FG2), self.store.load("work"))

    def test_save_overwrites_existing_palette(self) -> None:
        self.store.save("work", WORK_FG1, WORK_FG2)
        self.store.save("work", WORK_FG2, WORK_FG1)
        self.assertEqual((WORK_FG2, WORK_FG1), self.store.load("work"))

    def test_delete_then_load_raises_not_found(self) -> None:
        self.store.save("work", WORK_FG1, WORK_FG2)
        self.store.delete("work")
        with self.assertRaises(PaletteNotFoundError):
            self.store.load("work")

    def test_delete_missing_palette_raises_not_found(self) -> None:
        with self.assertRaises(PaletteNotFoundError):
            self.store.delete("missing")

    def test_load_accepts_hand_written_lowercase_record(self) -> None:
        colors_dir = self.root / "colors"
        colors_dir.mkdir(parents=True)
        (colors_dir / "ocean").write_text("00ccff\n#ffffff\n", encoding="utf-8")

        self.assertEqual(
            (RGB(0x00, 0xCC, 0xFF), RGB(0xFF, 0xFF, 0xFF)),
            self.store.load("ocean"),
        )

    def test_load_malformed_record_raises_invalid_format(self) -> None:
        colors_dir = self.root / "colors"
        colors_dir.mkdir(parents=True)
        (colors_dir / "broken").write_text("#112233\n", encoding="utf-8")

        with self.assertRaises(InvalidColorFormatError):
            self.store.load("broken")

    def test_list_skips_hidden_and_malformed_entries(self) -> None:
        self.store.save("work", WORK_FG1, WORK_FG2)
        self.store.save("rest", WORK_FG2, WORK_FG1)
        (self.root / "colors" / ".DS_Store").write_text("junk", encoding="utf-8")
        (self.root / "colors" / "broken").write_text("nothing", encoding="utf-8")
        (self.root / "colors" / "subdir").mkdir()

        palettes = {palette.name: palette for palette in self.store.list()}

        self.assertEqual({"work", "rest"}, set(palettes))
        self.assertEqual(WORK_FG1, palettes["work"].fg1)
        self.assertEqual(WORK_FG1, palettes["rest"].fg2)

    def test_list_is_restartable(self) -> None:
        self.store.save("work", WORK_FG1, WORK_FG2)
        listing = self.store.list()

        first = [palette.name for palette in listing]
        second = [palette.name for palette in listing]

        self.assertEqual(["work"], first)
        self.assertEqual(first, second)

    def test_list_without_directory_is_empty(self) -> None:
        self.assertEqual([], list(self.store.list()))

    def test_rejects_names_that_escape_the_colors_dir(self) -> None:
        for name in ("", ".hidden", "..", "a/b"):
            with self.subTest(name=name):
                with self.assertRaises(InvalidPaletteNameError):
                    self.store.save(name, WORK_FG1, WORK_FG2)


if __name__ == "__main__":
    unittest.main()
