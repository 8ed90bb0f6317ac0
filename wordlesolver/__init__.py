"""Next-guess decision engine for five-letter word-guessing games."""

__version__ = "1.0.0"
