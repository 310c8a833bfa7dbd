"""
Indonesian number vocabulary used by every extraction strategy.

Two fixed tables:
    NUMBER_WORDS  "lima" → 5, "dua belas" → 12, "seribu" → 1000
    MULTIPLIERS   "puluh" → 10, "ribu" → 1000, "rb"/"k" → 1000

Tables are built from (word, value) pairs through _build_table(), which
refuses a repeated key. A plain dict literal would silently keep the last
duplicate, hiding a conflicting entry.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType


def _build_table(name: str, pairs: Iterable[tuple[str, int]]) -> Mapping[str, int]:
    """Build a read-only lookup table, rejecting duplicate keys.

    Raises:
        ValueError: If a key appears more than once.
    """
    table: dict[str, int] = {}
    for word, value in pairs:
        if word in table:
            raise ValueError(
                f"Duplicate key {word!r} in {name} "
                f"(values {table[word]} and {value})"
            )
        table[word] = value
    return MappingProxyType(table)


# ─── Word Lookup Tables ──────────────────────────────────────────────

_DIGITS: tuple[tuple[str, int], ...] = (
    ("nol", 0),
    ("satu", 1),
    ("dua", 2),
    ("tiga", 3),
    ("empat", 4),
    ("lima", 5),
    ("enam", 6),
    ("tujuh", 7),
    ("delapan", 8),
    ("sembilan", 9),
)

NUMBER_WORDS: Mapping[str, int] = _build_table(
    "NUMBER_WORDS",
    (
        *_DIGITS,
        ("sepuluh", 10),
        ("sebelas", 11),
        *((f"{word} belas", 10 + value) for word, value in _DIGITS if value >= 2),
        # "se-" prefixed forms: "seratus" is one hundred, not "se" + "ratus"
        ("se", 1),
        ("seratus", 100),
        ("seribu", 1_000),
        ("sejuta", 1_000_000),
    ),
)

MULTIPLIERS: Mapping[str, int] = _build_table(
    "MULTIPLIERS",
    (
        ("puluh", 10),
        ("ratus", 100),
        ("ribu", 1_000),
        ("rb", 1_000),  # chat abbreviation of "ribu"
        ("k", 1_000),  # "80k"
        ("juta", 1_000_000),
    ),
)

# Quantity words accepted directly before a unit ("lima ribu", "satu juta")
UNIT_QUANTITY_WORDS: tuple[str, ...] = tuple(word for word, value in _DIGITS if value >= 1)

# Units accepted by the number-plus-unit pattern ("80 ribu", "2 juta")
UNIT_WORDS: tuple[str, ...] = ("ribu", "rb", "k", "juta", "ratus")

# Presence of any of these means the speaker stated the scale explicitly
SCALE_WORDS: frozenset[str] = frozenset({"ribu", "juta", "ratus", "puluh", "rb", "k"})

CURRENCY_SYMBOL = "rp"

# Longest digit run still read as a price; anything longer is noise, not money
MAX_PRICE_DIGITS = 18

_DIGIT_TOKEN = re.compile(r"\d+")
_GROUPING = re.compile(r"[.,]")


# ─── Token Classifiers ───────────────────────────────────────────────


def is_digit_token(token: str) -> bool:
    """True for a bare run of ASCII digits such as "75000"."""
    return _DIGIT_TOKEN.fullmatch(token) is not None


def is_numeric_token(token: str) -> bool:
    """True if the token can start or continue a spoken price."""
    return (
        is_digit_token(token)
        or token in NUMBER_WORDS
        or token in MULTIPLIERS
        or token == "se"
    )


def parse_digits(digits: str) -> int | None:
    """"75.000" → 75000, or None if the run is longer than MAX_PRICE_DIGITS.

    Separators are always thousand groups, never decimals.
    """
    bare = _GROUPING.sub("", digits)
    if not bare or len(bare) > MAX_PRICE_DIGITS:
        return None
    return int(bare)
