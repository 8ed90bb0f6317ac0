"""
Scrape past Wordle answers and write a clean answers list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates while preserving calendar order, and writes to file.
- Optionally drops those words from a guesses list so the two stay disjoint.

Usage:
    python -m script.fetch_answers --out wordlesolver/datasets/data/answers_5.txt
    python -m script.fetch_answers --sort --prune-guesses wordlesolver/datasets/data/guesses_5.txt
"""

import re
import argparse
import logging

import requests
from bs4 import BeautifulSoup

from wordlesolver.config import DEFAULT_ANSWERS_PATH
from wordlesolver.datasets import load_word_list, unique_preserve_order, write_lines
from wordlesolver.logs import configure_logging

log = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    answers = [m.group(2).lower() for m in ROW_RE.finditer(text)]
    return unique_preserve_order(answers)


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def prune_guesses(guesses: list[str], answers: list[str]) -> list[str]:
    """Guesses minus anything that is an answer, order kept."""
    answer_set = set(answers)
    return [w for w in guesses if w not in answer_set]


def main():
    ap = argparse.ArgumentParser(description="Extract unique Wordle answers")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(DEFAULT_ANSWERS_PATH))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    ap.add_argument("--prune-guesses", metavar="PATH",
                    help="remove the fetched answers from this guesses file (in place)")
    args = ap.parse_args()
    configure_logging()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(set(answers))

    write_lines(answers, args.out)
    log.info(f"Wrote {len(answers)} unique answers -> {args.out}")

    if args.prune_guesses:
        guesses = load_word_list(args.prune_guesses)
        kept = prune_guesses(guesses, answers)
        write_lines(kept, args.prune_guesses)
        log.info(f"Pruned {len(guesses) - len(kept)} answers from {args.prune_guesses}")


if __name__ == "__main__":
    main()
