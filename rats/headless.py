"""Batch mode: rank one directory against a query and emit JSON.

Editor integrations call ``rats --json --query <q>`` and parse the array this
module prints, so field names are part of the external contract.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from .browser import rank_directory
from .file_tree_model import safe_path_text

DEFAULT_RESULT_LIMIT = 100


@dataclass(frozen=True)
class SearchResult:
    path: str
    score: int
    name: str
    is_dir: bool


def collect_search_results(
    directory: Path | str,
    query: str,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> list[SearchResult]:
    """Return at most ``limit`` ranked results for ``directory``."""
    ranked = rank_directory(directory, query)
    return [
        SearchResult(path=safe_path_text(entry.path), score=score, name=entry.name, is_dir=entry.is_dir)
        for entry, score in ranked[: max(0, limit)]
    ]


def format_search_results(results: list[SearchResult]) -> str:
    return json.dumps([asdict(result) for result in results], ensure_ascii=False, indent=2)
