from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from rats.file_tree_model import normalize_directory
from rats.headless import SearchResult, collect_search_results, format_search_results


class HeadlessSearchTests(unittest.TestCase):
    def test_collects_ranked_results_with_absolute_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = normalize_directory(tmp)
            (root / "go_to_top.txt").write_text("", encoding="utf-8")
            (root / "other.md").write_text("", encoding="utf-8")

            results = collect_search_results(root, "gto")

        self.assertEqual(
            results,
            [SearchResult(path=str(root / "go_to_top.txt"), score=47, name="go_to_top.txt", is_dir=False)],
        )

    def test_empty_query_lists_parent_first_and_respects_limit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for idx in range(5):
                (root / f"file{idx}.txt").write_text("", encoding="utf-8")

            results = collect_search_results(root, "", limit=3)

        self.assertEqual([result.name for result in results], ["..", "file0.txt", "file1.txt"])
        self.assertTrue(results[0].is_dir)
        self.assertEqual({result.score for result in results}, {0})

    def test_missing_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                collect_search_results(Path(tmp) / "missing", "")

    def test_json_output_uses_documented_field_names(self) -> None:
        payload = format_search_results(
            [SearchResult(path="/data/café.txt", score=12, name="café.txt", is_dir=False)]
        )

        self.assertIn("café", payload)
        self.assertEqual(
            json.loads(payload),
            [{"path": "/data/café.txt", "score": 12, "name": "café.txt", "is_dir": False}],
        )

    def test_no_results_formats_as_empty_array(self) -> None:
        self.assertEqual(json.loads(format_search_results([])), [])


if __name__ == "__main__":
    unittest.main()
