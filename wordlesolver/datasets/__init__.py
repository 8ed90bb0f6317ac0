from .validator import validate_wordlists, pretty_summary
from .io import (
    WordLists, load_word_list, load_wordlists, read_lines, unique_preserve_order, write_lines,
)

__all__ = [
    "validate_wordlists", "pretty_summary",
    "WordLists", "load_word_list", "load_wordlists", "read_lines", "unique_preserve_order",
    "write_lines",
]
