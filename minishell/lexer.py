"""Splitting an input line into words, pipes and redirection symbols."""

from __future__ import annotations

from minishell.errors import UnclosedQuotesError

_SPECIAL = frozenset("|<>")
_BLANKS = frozenset(" \t")
_QUOTES = frozenset("'\"")


def has_unclosed_quotes(text: str) -> bool:
    """Tell whether a quote opened in the text is left open at its end."""
    quote: str | None = None
    for ch in text:
        if quote is None and ch in _QUOTES:
            quote = ch
        elif quote is not None and ch == quote:
            quote = None
    return quote is not None


def _token_length(text: str, start: int) -> int:
    """Length of the token that begins at start."""
    if text[start] in _SPECIAL:
        return 1
    quote: str | None = None
    word_start = True
    length = 0
    for ch in text[start:]:
        if word_start and ch in _QUOTES:
            quote = ch
            word_start = False
        elif quote is not None and ch == quote:
            quote = None
            word_start = True
        elif quote is None and (ch in _SPECIAL or ch in _BLANKS):
            break
        else:
            word_start = False
        length += 1
    return length


def tokenize(text: str) -> list[str]:
    """Split a line into tokens; each of | < > is a token of its own."""
    if has_unclosed_quotes(text):
        raise UnclosedQuotesError("unclosed quotes")
    tokens: list[str] = []
    i = 0
    size = len(text)
    while i < size:
        while i < size and text[i] in _BLANKS:
            i += 1
        if i >= size:
            break
        length = _token_length(text, i)
        tokens.append(text[i:i + length])
        i += length
    return tokens