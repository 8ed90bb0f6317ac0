from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_word_list(p: Path | str) -> List[str]:
    """
    Newline-separated word list, lowercased, blanks dropped. No other checks:
    use validate_wordlists() for diagnostics.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    """Drop repeats, keeping the first occurrence of each word in place."""
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


@dataclass(frozen=True)
class WordLists:
    """
    The vocabulary a solver works over.

    answers : words that may be the hidden answer (initial candidate set)
    guesses : additional words accepted as guesses but never answers
    allowed : answers then guesses, de-duplicated, order preserved
    """
    answers: Tuple[str, ...]
    guesses: Tuple[str, ...] = ()
    allowed: Tuple[str, ...] = field(init=False, repr=False, compare=False)
    fingerprint: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # frozen: assign through object.__setattr__
        object.__setattr__(self, "answers", tuple(self.answers))
        object.__setattr__(self, "guesses", tuple(self.guesses))
        object.__setattr__(self, "allowed", tuple(unique_preserve_order(self.answers + self.guesses)))

        h = hashlib.sha256()
        h.update("\n".join(self.answers).encode("utf-8"))
        h.update(b"\0")
        h.update("\n".join(self.guesses).encode("utf-8"))
        object.__setattr__(self, "fingerprint", h.hexdigest())


def load_wordlists(answers_path: Path | str, guesses_path: Path | str | None = None) -> WordLists:
    """Load the answers file and (optionally) the extra-guesses file."""
    answers = load_word_list(answers_path)
    guesses = load_word_list(guesses_path) if guesses_path else []
    return WordLists(answers=tuple(answers), guesses=tuple(guesses))
