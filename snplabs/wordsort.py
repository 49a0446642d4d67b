"""Read distinct words, upper-case them and print them sorted."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterator
from typing import TextIO

MAX_WORDS = 10
MAX_WORD_LENGTH = 20
STOP_WORD = "ZZZ"

PROMPT = "Geben Sie ein Wort ein oder 'ZZZ' um zu beenden: "
DUPLICATE_MESSAGE = "Word bereits eingegeben, bitte ein anderes Wort eingeben.\n"

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_words(stream: TextIO, out: TextIO) -> list[str]:
    """Read up to MAX_WORDS distinct words, stopping at the stop word."""
    tokens = _tokens(stream)
    words: list[str] = []
    while len(words) < MAX_WORDS:
        out.write(PROMPT)
        word = next(tokens, None)
        if word is None or word == STOP_WORD:
            break
        if len(word) >= MAX_WORD_LENGTH:
            raise ValueError(
                f"word longer than {MAX_WORD_LENGTH - 1} characters: {word!r}"
            )
        if word in words:
            out.write(DUPLICATE_MESSAGE)
            continue
        words.append(word)
    return words


def sort_words(words: list[str]) -> list[str]:
    """Upper-case the ASCII letters of every word and sort the result."""
    return sorted(word.translate(_UPPER) for word in words)


def main(argv: list[str] | None = None) -> int:
    """Read words from stdin and print them sorted."""
    try:
        words = read_words(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    for word in sort_words(words):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())