"""
Benchmark report files.

A run produces, per strategy:
  - a games CSV: one row per game, the turns spread across fixed columns
    (guess_i, code_i, left_i) so a spreadsheet can sort and filter them;
  - a turns CSV: one row per guess played, for plotting how fast the
    candidate set collapses (left -> next left);
  - a JSON manifest tying the files to the solver config, the word-list
    report and the git commit.

`left` is the number of candidates still possible when a guess was played:
left_1 is always the size of the answer list.

Feedback codes are written with a leading apostrophe, or spreadsheet apps
read "00102" as the number 102.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Iterator, List

GAME_FIELDS = ("strategy", "answer", "success", "guesses", "time_ms")
TURN_FIELDS = ("strategy", "answer", "turn", "guess", "code", "left", "eliminated")


def _as_text(code: str) -> str:
    return f"'{code}" if code else ""


def _open_for_write(path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def game_fields(max_turns: int) -> List[str]:
    fields = list(GAME_FIELDS)
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"code_{i}", f"left_{i}"]
    return fields


def game_row(result: Dict, max_turns: int) -> Dict:
    """Flatten one play_game() result; turns past the end of the game stay blank."""
    row = {
        "strategy": result.get("strategy", "?"),
        "answer": result["answer"],
        "success": result["success"],
        "guesses": result["guesses"],
        "time_ms": round(float(result["time_ms"]), 3),
    }
    turns = list(zip(result.get("history", []), result.get("left", [])))
    for i in range(1, max_turns + 1):
        (guess, code), left = turns[i - 1] if i <= len(turns) else (("", ""), "")
        row[f"guess_{i}"] = guess
        row[f"code_{i}"] = _as_text(code)
        row[f"left_{i}"] = left
    return row


def turn_rows(result: Dict) -> Iterator[Dict]:
    """
    One dict per guess played. `eliminated` is how many candidates that
    guess's feedback ruled out (left minus the next turn's left). The
    winning guess eliminates everything but the answer; the last guess of
    an unsolved game is left blank.
    """
    history = result.get("history", [])
    left = result.get("left", [])
    for turn, ((guess, code), n) in enumerate(zip(history, left), start=1):
        if turn < len(left):
            after = left[turn]
        else:
            after = 1 if result["success"] else None
        yield {
            "strategy": result.get("strategy", "?"),
            "answer": result["answer"],
            "turn": turn,
            "guess": guess,
            "code": _as_text(code),
            "left": n,
            "eliminated": "" if after is None else n - after,
        }


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """Games CSV: one row per game, `max_turns` groups of turn columns."""
    p = _open_for_write(path)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=game_fields(max_turns))
        w.writeheader()
        w.writerows(game_row(r, max_turns) for r in results)
    return str(p)


def write_turns_csv(results: List[Dict], path: str) -> str:
    """Turns CSV: one row per guess across every game in `results`."""
    p = _open_for_write(path)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=TURN_FIELDS)
        w.writeheader()
        for r in results:
            w.writerows(turn_rows(r))
    return str(p)


def build_manifest(run_id: str, config: Dict, wordlists: Dict, summary: Dict) -> Dict:
    return {
        "run_id": run_id,
        "git_commit": git_commit(),
        "config": config,
        "wordlists": wordlists,
        "summary": summary,
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """JSON manifest; non-JSON values (paths, enums) are written as strings."""
    p = _open_for_write(path)
    p.write_text(json.dumps(manifest, indent=2, sort_keys=True, default=str) + "\n", encoding="utf-8")
    return str(p)


def new_run_id() -> str:
    """UTC timestamp usable in file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout."""
    try:
        proc = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                              capture_output=True, text=True, check=False)
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"
