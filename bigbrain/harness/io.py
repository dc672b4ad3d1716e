"""
Output files for benchmark runs: a per-game CSV and a JSON manifest.

CSV columns are fixed so runs with different openers line up:
  opener, answer, success, guesses, failure, time_ms,
  guess_1, patt_1, ..., guess_6, patt_6
Rows that ended early leave the remaining turn columns blank.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import datetime as dt
import json

from bigbrain.config import MAX_TURNS

TURN_FIELDS = [f"{kind}_{i}" for i in range(1, MAX_TURNS + 1) for kind in ("guess", "patt")]
CSV_FIELDS = ["opener", "answer", "success", "guesses", "failure", "time_ms"] + TURN_FIELDS


def _turn_cells(history) -> Dict[str, str]:
    cells = dict.fromkeys(TURN_FIELDS, "")
    for i, (guess, patt) in enumerate(history, start=1):
        cells[f"guess_{i}"] = guess
        cells[f"patt_{i}"] = patt
    return cells


def write_csv(results: List[Dict], path: str, opener: str | None = None) -> str:
    """One row per game, stamped with the opener the brain was configured with."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "opener": opener or "",
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "failure": r["failure"] or "",
                "time_ms": round(r["time_ms"], 3),
                **_turn_cells(r["history"]),
            })
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
