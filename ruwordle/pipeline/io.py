"""
Output utilities for suggestion runs.

Responsibilities:
- format_table:   boxed two-column console table (lemma, score).
- write_csv:      one row per candidate.
- write_manifest: JSON dump of the run (query, rejects, candidates, timing).
- timestamp_id:   compact UTC run ID string.

Scores are shown as integers in the table, matching how the frequency
product reads at a glance; CSV and JSON keep the full float.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
from pathlib import Path
from typing import Dict, List, Sequence

from ..engine import Candidate
from .core import SuggestionResult

HEADER = ("lemma", "score")


def format_table(candidates: Sequence[Candidate]) -> str:
    """
    Example:
        +-------+-------+
        | lemma | score |
        +-------+-------+
        | носок | 52114 |
        +-------+-------+
    """
    rows = [HEADER] + [(c.word, str(int(c.score))) for c in candidates]
    widths = [max(len(r[i]) for r in rows) for i in range(len(HEADER))]
    sep = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(r) -> str:
        return "| " + " | ".join(cell.ljust(w) for cell, w in zip(r, widths)) + " |"

    out: List[str] = [sep, line(rows[0]), sep]
    out += [line(r) for r in rows[1:]]
    if len(rows) > 1:
        out.append(sep)
    return "\n".join(out)


def write_csv(candidates: Sequence[Candidate], path: str) -> str:
    """
    Serialize ranked candidates to CSV with columns: rank, lemma, score.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["rank", "lemma", "score"])
        w.writeheader()
        for i, c in enumerate(candidates, start=1):
            w.writerow({"rank": i, "lemma": c.word, "score": c.score})
    return str(p)


def result_to_dict(result: SuggestionResult, patterns: Sequence[str]) -> Dict:
    return {
        "patterns": list(patterns),
        "ok": result.ok,
        "error": result.error,
        "rejects": result.rejects,
        "patterns_evaluated": result.patterns_evaluated,
        "short_circuited": result.short_circuited,
        "elapsed_ms": round(result.elapsed_ms, 3),
        "num_candidates": len(result.candidates),
        "candidates": [{"lemma": c.word, "score": c.score} for c in result.candidates],
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest of one run. Cyrillic is kept readable
    (ensure_ascii=False). Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
