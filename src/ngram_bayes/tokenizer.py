"""Whitespace tokenization and contiguous word n-gram extraction."""

from __future__ import annotations

from .models import NGram


def split_tokens(text: str) -> list[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return text.split()


def to_ngrams(text: str, n: int) -> list[NGram]:
    """Generate overlapping n-grams from text, left to right.

    Args:
        text: Raw input text.
        n: Window length in tokens.

    Returns:
        One NGram per start position in ``[0, len(tokens) - n]``. Empty
        when the text has fewer than ``n`` tokens.

    Raises:
        ValueError: If ``n`` is not positive.
    """
    if n <= 0:
        raise ValueError(f"n-gram size must be positive, got {n}")
    tokens = split_tokens(text)
    return [NGram(tuple(tokens[i : i + n])) for i in range(len(tokens) - n + 1)]


class NGramTokenizer:
    """Tokenizer bound to a fixed n-gram size.

    Example::

        tokenizer = NGramTokenizer(2)
        tokenizer.keys("a b c")  # ["a b", "b c"]
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError(f"n-gram size must be positive, got {n}")
        self.n = n

    def tokenize(self, text: str) -> list[NGram]:
        return to_ngrams(text, self.n)

    def keys(self, text: str) -> list[str]:
        """Feature keys for every n-gram in text."""
        return [ngram.key for ngram in self.tokenize(text)]
