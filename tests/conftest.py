import pytest

from wordlesolver.datasets import WordLists
from wordlesolver.solvers.opening import clear_opening_book

# Small closed vocabulary: anagram clusters and repeated letters on purpose
ANSWERS = [
    "crane", "route", "adieu", "stare", "raise", "trace", "cared", "alone",
    "slate", "crate", "react", "caret", "later", "alter", "irate", "arise",
    "aisle", "least", "steal", "tease", "eerie", "level", "belle", "lemon",
    "scoop", "cools", "mamma", "llama", "geese", "abbey",
]
GUESSES = ["soare", "roate", "salet", "tares", "lares", "nymph", "fjord", "bumpy", "gawky", "whizz"]


@pytest.fixture
def words():
    return WordLists(answers=tuple(ANSWERS), guesses=tuple(GUESSES))


@pytest.fixture
def tiny_words():
    return WordLists(answers=("adieu", "route", "crane"), guesses=("nymph", "fjord"))


@pytest.fixture(autouse=True)
def _fresh_opening_book():
    clear_opening_book()
    yield
    clear_opening_book()
