"""
Dataset validator for bigbrain word lists.

What this module does:
- Validate a dictionary file (candidate answers) and, optionally, an extra
  allowed-guesses file that widens the guess universe.
- Enforce formatting rules (lowercase, a–z only, exactly 5 letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Count answers repeated in the allowed file (harmless: the universe is deduped).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Unlike load_words(), which refuses to start on the first bad entry, this
module reports every problem it finds and never raises on bad content.

Typical use:
    from bigbrain.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("words.txt", "allowed.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from bigbrain.config import WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, allowed) pair."""
    answers: FileReport
    allowed: Optional[FileReport]
    overlap: int         # answers also listed as allowed guesses
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exactly WORD_LENGTH letters
      - blank lines are skipped (load_words skips them too)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            # require already-lowercase & alphabetic & exact length
            if w == w.lower() and w.isalpha() and len(w) == WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path) -> Tuple[FileReport, List[str]]:
    if not path.exists():
        return FileReport(str(path), False, 0, "", 0, 0), []
    words, invalid = _load_and_check(path)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )
    return rep, words


def _file_issues(label: str, rep: FileReport) -> List[str]:
    if not rep.exists:
        return [f"{label} file not found: {rep.path}"]
    issues: List[str] = []
    # Empty-file guardrail (useful to catch bad paths or preprocessing bugs)
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return issues


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(answers_path: str, allowed_path: str | None = None) -> Dict:
    """
    Validate the dictionary (and optional allowed-guesses list).

    Parameters
    ----------
    answers_path : str
        Path to the dictionary file (one word per line).
    allowed_path : str, optional
        Path to extra allowed guesses; these widen the guess universe and are
        never answers, so they need not contain the dictionary.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - `overlap`: answers repeated in the allowed file (0 without one)
          - `passed` boolean (strict: files exist, non-empty, no invalids)
          - `issues` (list of strings) to surface any problems
    """
    ans_report, answers = _file_report(Path(answers_path))
    issues = _file_issues("answers", ans_report)

    all_report: Optional[FileReport] = None
    overlap = 0
    if allowed_path is not None:
        all_report, allowed = _file_report(Path(allowed_path))
        issues += _file_issues("allowed", all_report)
        overlap = len(set(answers) & set(allowed))

    passed = (
            ans_report.exists
            and ans_report.count > 0
            and ans_report.invalid_lines == 0
            and (all_report is None
                 or (all_report.exists and all_report.count > 0
                     and all_report.invalid_lines == 0))
    )

    rep = ValidationReport(
        answers=ans_report,
        allowed=all_report,
        overlap=overlap,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        answers=2315 (uniq=2315, sha=abc123...) | allowed=10657 (uniq=10657, sha=def456...) | overlap=0 | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    parts = [f"answers={a['count']} (uniq={a['unique_count']}, sha={(a.get('sha256') or '')[:12]})"]
    if b is not None:
        parts.append(f"allowed={b['count']} (uniq={b['unique_count']}, sha={(b.get('sha256') or '')[:12]})")
        parts.append(f"overlap={report['overlap']}")
    parts.append(status)
    return " | ".join(parts)
