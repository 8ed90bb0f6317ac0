"""
Dataset validator for wordlesolver.

What this module does:
- Validate a pair of word lists: answers_5.txt (possible hidden answers) and
  guesses_5.txt (extra words accepted as guesses, never answers).
- Enforce formatting rules (lowercase, a-z only, exactly 5 letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that the two lists are disjoint (a word in both is harmless for the
  solver, which de-duplicates, but usually means a preprocessing slip).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Loading for the solver (datasets.load_wordlists) does NONE of this; it only
drops blank lines. Run the validator when the lists change.

Typical use:
    from wordlesolver.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordlesolver/datasets/data/answers_5.txt",
                             "wordlesolver/datasets/data/guesses_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlesolver.engine import WORD_LENGTH


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
    invalid_lines: int   # number of invalid (non-blank) lines encountered
    blank_lines: int     # blank lines (dropped by the loader, not an error)


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, guesses) pair."""
    N: int
    answers: FileReport
    guesses: FileReport
    overlap: int         # words present in both lists
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


def _load_and_check(path: Path) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a-z
      - must have exact length WORD_LENGTH
      - blank lines are counted separately

    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) == WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


def _file_report(path: Path) -> Tuple[FileReport, List[str]]:
    words, invalid, blank = _load_and_check(path)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        blank_lines=blank,
    )
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(answers_path: str, guesses_path: str) -> Dict:
    """
    Validate the answers/guesses word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - overlap count between the lists
          - `passed` boolean (strict: non-empty answers, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    ans_p = Path(answers_path)
    gue_p = Path(guesses_path)

    # Early return if either file is missing
    if not ans_p.exists() or not gue_p.exists():
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        if not gue_p.exists():
            issues.append(f"guesses file not found: {guesses_path}")
        rep = ValidationReport(
            N=WORD_LENGTH,
            answers=FileReport(str(answers_path), ans_p.exists(), 0, "", 0, 0, 0),
            guesses=FileReport(str(guesses_path), gue_p.exists(), 0, "", 0, 0, 0),
            overlap=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    ans_report, answers = _file_report(ans_p)
    gue_report, guesses = _file_report(gue_p)

    overlap = set(answers) & set(guesses)
    if overlap:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        issues.append(f"{len(overlap)} word(s) in both lists (e.g., {sorted(overlap)[:5]})")

    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")

    if ans_report.invalid_lines:
        issues.append(f"answers has {ans_report.invalid_lines} invalid line(s)")
    if gue_report.invalid_lines:
        issues.append(f"guesses has {gue_report.invalid_lines} invalid line(s)")

    if ans_report.count != ans_report.unique_count:
        issues.append("answers contains duplicate lines")
    if gue_report.count != gue_report.unique_count:
        issues.append("guesses contains duplicate lines")

    passed = (
            ans_report.count > 0
            and ans_report.invalid_lines == 0
            and gue_report.invalid_lines == 0
            and ans_report.count == ans_report.unique_count
            and gue_report.count == gue_report.unique_count
    )

    rep = ValidationReport(
        N=WORD_LENGTH,
        answers=ans_report,
        guesses=gue_report,
        overlap=len(overlap),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | guesses=10657 (uniq=10657, sha=def456...) | overlap=0 | OK
    """
    a = report["answers"]
    b = report["guesses"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| guesses={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| overlap={report['overlap']} | {status}"
    )
