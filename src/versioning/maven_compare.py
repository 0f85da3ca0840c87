"""Maven-style version ordering.

Versions are split into tokens on ``.`` and ``-`` and on every digit/letter
transition (``1.0rc1`` reads as ``1.0-rc-1``). Each token remembers the
separator that preceded it. Numeric tokens compare as integers, qualifiers
by a fixed rank::

    alpha < beta < milestone < rc < snapshot < (release) < sp < other

where ``ga``, ``final`` and ``release`` all mean the release itself and
unknown qualifiers sort after ``sp``, lexically among themselves. Trailing
null tokens (``0`` or a release qualifier) are ignored, so ``1``, ``1.0``
and ``1.0-final`` are equal.
"""

import functools
import string
from typing import List, NamedTuple, Union

_RELEASE = ""

_QUALIFIER_ALIASES = {
    "cr": "rc",
    "preview": "rc",
    "ga": _RELEASE,
    "final": _RELEASE,
    "release": _RELEASE,
}

# Single-letter shorthands, only honoured when directly followed by a number (1.0a1)
_LETTER_ALIASES = {"a": "alpha", "b": "beta", "m": "milestone"}

_QUALIFIER_RANK = {
    "alpha": 1,
    "beta": 2,
    "milestone": 3,
    "rc": 4,
    "snapshot": 5,
    _RELEASE: 6,
    "sp": 7,
}
_UNKNOWN_RANK = 8


class _Token(NamedTuple):
    prefix: str
    is_number: bool
    value: Union[int, str]


def _is_digit(char: str) -> bool:
    return char in string.digits


def _make_token(prefix: str, text: str) -> _Token:
    if text and all(_is_digit(c) for c in text):
        return _Token(prefix, True, int(text))
    return _Token(prefix, False, _QUALIFIER_ALIASES.get(text, text))


def _is_null(token: _Token) -> bool:
    return token.value == (0 if token.is_number else _RELEASE)


def _tokenize(version: str) -> List[_Token]:
    tokens: List[_Token] = []
    prefix = "."
    current = ""
    for char in version.strip().lower():
        if char in ".-":
            tokens.append(_make_token(prefix, current))
            prefix = char
            current = ""
            continue
        if current and _is_digit(current[-1]) != _is_digit(char):
            tokens.append(_make_token(prefix, current))
            prefix = "-"
            current = ""
        current += char
    tokens.append(_make_token(prefix, current))

    for idx, token in enumerate(tokens[:-1]):
        if not token.is_number and token.value in _LETTER_ALIASES and tokens[idx + 1].is_number:
            tokens[idx] = token._replace(value=_LETTER_ALIASES[token.value])

    while len(tokens) > 1 and _is_null(tokens[-1]):
        tokens.pop()
    return tokens


def _null_like(token: _Token) -> _Token:
    return _Token(token.prefix, token.is_number, 0 if token.is_number else _RELEASE)


def _common_order(token: _Token) -> int:
    if token.prefix == "." and not token.is_number:
        return 1
    if token.prefix == "-" and not token.is_number:
        return 2
    if token.prefix == "-":
        return 3
    return 4


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _qualifier_cmp(left: str, right: str) -> int:
    left_rank = _QUALIFIER_RANK.get(left, _UNKNOWN_RANK)
    right_rank = _QUALIFIER_RANK.get(right, _UNKNOWN_RANK)
    if left_rank != right_rank:
        return _sign(left_rank - right_rank)
    if left_rank == _UNKNOWN_RANK:
        return (left > right) - (left < right)
    return 0


def _token_cmp(left: _Token, right: _Token) -> int:
    if left.prefix == right.prefix and left.is_number == right.is_number:
        if left.is_number:
            return _sign(left.value - right.value)
        return _qualifier_cmp(left.value, right.value)
    return _sign(_common_order(left) - _common_order(right))


def compare(left: str, right: str) -> int:
    """Return -1, 0 or 1 as ``left`` sorts before, equal to or after ``right``."""
    left_tokens = _tokenize(left)
    right_tokens = _tokenize(right)
    for idx in range(max(len(left_tokens), len(right_tokens))):
        if idx < len(left_tokens):
            left_token = left_tokens[idx]
            right_token = right_tokens[idx] if idx < len(right_tokens) else _null_like(left_token)
        else:
            right_token = right_tokens[idx]
            left_token = _null_like(right_token)
        result = _token_cmp(left_token, right_token)
        if result:
            return result
    return 0


sort_key = functools.cmp_to_key(compare)
