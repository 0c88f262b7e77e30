from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rats.browser import DirectoryBrowser
from rats.file_tree_model import Entry
from rats.preview import (
    PREVIEW_MAX_BYTES,
    UNREADABLE_PLACEHOLDER,
    PreviewState,
    load_preview,
    load_preview_text,
    scroll_down,
    scroll_up,
    truncation_marker,
)


def _file_entry(path: Path) -> Entry:
    return Entry(path=path, is_dir=False)


class PreviewTextTests(unittest.TestCase):
    def test_directories_and_parent_entry_have_no_preview(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self.assertIsNone(load_preview_text(Entry(path=root, is_dir=True)))
            self.assertIsNone(load_preview_text(Entry(path=root / "..", is_dir=True, is_parent=True)))
            self.assertIsNone(load_preview_text(None))

    def test_small_text_file_is_returned_verbatim(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "notes.txt"
            target.write_text("line one\nline two\n", encoding="utf-8")

            self.assertEqual(load_preview_text(_file_entry(target)), "line one\nline two\n")

    def test_binary_extension_is_not_read(self) -> None:
        entry = _file_entry(Path("/nonexistent/photo.PNG"))

        with mock.patch.object(Path, "read_bytes") as read_bytes:
            text = load_preview_text(entry)

        self.assertEqual(text, "Binary file: photo.PNG")
        read_bytes.assert_not_called()

    def test_nul_byte_marks_file_as_binary(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "blob.dat"
            target.write_bytes(b"abc\x00def")

            self.assertEqual(load_preview_text(_file_entry(target)), "Binary file: blob.dat")

    def test_invalid_utf8_is_unreadable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "latin1.txt"
            target.write_bytes(b"caf\xe9\n")

            self.assertEqual(load_preview_text(_file_entry(target)), UNREADABLE_PLACEHOLDER)

    @unittest.skipUnless(hasattr(os, "mkfifo"), "named pipes unavailable")
    def test_named_pipe_is_not_opened(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            pipe = Path(tmp) / "pipe"
            os.mkfifo(pipe)

            with mock.patch.object(Path, "read_bytes") as read_bytes:
                text = load_preview_text(_file_entry(pipe))

        self.assertEqual(text, "Not a regular file: pipe")
        read_bytes.assert_not_called()

    @unittest.skipUnless(hasattr(os, "mkfifo"), "named pipes unavailable")
    def test_browsing_onto_a_named_pipe_returns_promptly(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            os.mkfifo(Path(tmp) / "pipe")
            browser = DirectoryBrowser.open(tmp)

            self.assertTrue(browser.move_last())

        self.assertEqual(browser.state.preview.text, "Not a regular file: pipe")

    def test_missing_file_is_unreadable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            entry = _file_entry(Path(tmp) / "gone.txt")

            self.assertEqual(load_preview_text(entry), UNREADABLE_PLACEHOLDER)

    def test_large_file_keeps_exactly_the_byte_limit_plus_marker(self) -> None:
        total = PREVIEW_MAX_BYTES + 1234
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "big.log"
            target.write_bytes(b"x" * total)

            text = load_preview_text(_file_entry(target))

        assert text is not None
        marker = truncation_marker(total)
        self.assertTrue(text.endswith(marker))
        self.assertEqual(text[: -len(marker)], "x" * PREVIEW_MAX_BYTES)
        self.assertIn(f"[File truncated - {total} bytes total]", text)

    def test_file_at_exact_limit_is_not_truncated(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "edge.txt"
            target.write_bytes(b"y" * PREVIEW_MAX_BYTES)

            self.assertEqual(load_preview_text(_file_entry(target)), "y" * PREVIEW_MAX_BYTES)

    def test_truncation_backs_off_to_character_boundary(self) -> None:
        payload = ("a" * (PREVIEW_MAX_BYTES - 1) + "é" * 10).encode("utf-8")
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "accents.txt"
            target.write_bytes(payload)

            text = load_preview_text(_file_entry(target))

        assert text is not None
        self.assertTrue(text.startswith("a" * (PREVIEW_MAX_BYTES - 1) + "..."))


class PreviewScrollTests(unittest.TestCase):
    def test_load_preview_resets_scroll(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a.txt"
            target.write_text("a\n", encoding="utf-8")

            preview = load_preview(_file_entry(target))

        self.assertEqual(preview, PreviewState(text="a\n", scroll=0))

    def test_scroll_moves_by_five_and_clamps_at_zero(self) -> None:
        preview = PreviewState(text="content", scroll=3)

        self.assertTrue(scroll_up(preview))
        self.assertEqual(preview.scroll, 0)
        self.assertFalse(scroll_up(preview))
        self.assertTrue(scroll_down(preview))
        self.assertTrue(scroll_down(preview))
        self.assertEqual(preview.scroll, 10)

    def test_scroll_without_text_is_a_no_op(self) -> None:
        preview = PreviewState()

        self.assertFalse(scroll_down(preview))
        self.assertFalse(scroll_up(preview))
        self.assertEqual(preview.scroll, 0)


if __name__ == "__main__":
    unittest.main()
