"""Split names into lower-cased word tokens and distinct word sets."""

import re

# Characters that separate words in a name.
DELIMITERS = (" ", "-", "/", "(", ")", ",", ".", "&")

_SPLIT_RE = re.compile("[" + re.escape("".join(DELIMITERS)) + "]")


def tokenize(s: str) -> list[str]:
    """
    Lower-case s and split it on DELIMITERS.
    Adjacent delimiters yield empty tokens ("a  b" -> ["a", "", "b"]).
    """
    return _SPLIT_RE.split(s.lower())


def get_word_set(s: str, ignore: set[str] | frozenset[str] = frozenset()) -> frozenset[str]:
    """Distinct tokens of s, minus any token in ignore."""
    return frozenset(w for w in tokenize(s) if w not in ignore)
