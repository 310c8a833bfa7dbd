"""
The four surface-pattern recognizers tried by the extractor.

Each recognizer takes a NORMALIZED transcript and either returns a complete
ParseResult or None. None of them raise on unrecognized speech.

Philosophy: It's better to return None than a wrong price.
            Every recognizer checks its own preconditions (non-empty name,
            positive price) before building a result.

Recognizers are registered against the closed Strategy enum, and CASCADE
fixes the order in which the extractor tries them: explicit currency marker,
explicit unit word, the word grammar, then bare digits as the last resort.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Optional

from .formatting import capitalize_item_name
from .lexicon import (
    CURRENCY_SYMBOL,
    MULTIPLIERS,
    NUMBER_WORDS,
    UNIT_QUANTITY_WORDS,
    UNIT_WORDS,
    is_numeric_token,
    parse_digits,
)
from .models import ParseResult, Strategy
from .numerals import evaluate

Recognizer = Callable[[str], Optional[ParseResult]]

# ─── Patterns ────────────────────────────────────────────────────────

_GROUPED_DIGITS = r"\d+(?:[.,]\d+)*"

# "pizza hut rp 75000", "pizza hut rp 75.000"
_RUPIAH_PREFIX = re.compile(rf"^(.+?)\s+{CURRENCY_SYMBOL}\s*({_GROUPED_DIGITS})$")
# "pizza hut 75000 rupiah", "pizza hut 75.000 rupiahs"
_RUPIAH_SUFFIX = re.compile(rf"^(.+?)\s+({_GROUPED_DIGITS})\s*rupiah?s?$")

# "nabati dan oreo 80 ribu", "nabati dan oreo 80ribu", "mangga satu juta"
_NUMBER_UNIT = re.compile(
    r"^(.+?)\s+(\d+|{quantity})\s*({unit})$".format(
        quantity="|".join(UNIT_QUANTITY_WORDS),
        unit="|".join(UNIT_WORDS),
    )
)

# "indomie 5000" (three digits or more)
_DIRECT_NUMBER = re.compile(r"^(.+?)\s+(\d{3,})$")


# ─── Helpers ─────────────────────────────────────────────────────────


def _build_result(item_name: str, price: int) -> ParseResult | None:
    """Return a ParseResult only if both fields are usable."""
    item_name = item_name.strip()
    if not item_name or price <= 0:
        return None
    return ParseResult(item_name=capitalize_item_name(item_name), price=price)


def tokenize(text: str) -> list[str]:
    """Split on spaces, keeping two-word number phrases ("dua belas") together."""
    words = text.split()
    tokens: list[str] = []
    index = 0
    while index < len(words):
        pair = " ".join(words[index : index + 2])
        if index + 1 < len(words) and pair in NUMBER_WORDS:
            tokens.append(pair)
            index += 2
        else:
            tokens.append(words[index])
            index += 1
    return tokens


# ─── Individual Recognizers ──────────────────────────────────────────


def extract_currency_format(text: str) -> ParseResult | None:
    """Match an explicit Rupiah amount at the end: 'rp 75000' or '75000 rupiah'."""
    for pattern in (_RUPIAH_PREFIX, _RUPIAH_SUFFIX):
        match = pattern.match(text)
        if match:
            price = parse_digits(match.group(2))
            if price is None:
                continue
            result = _build_result(match.group(1), price)
            if result is not None:
                return result
    return None


def extract_number_unit(text: str) -> ParseResult | None:
    """Match '<name> <quantity> <unit>', e.g. '80 ribu' or 'satu juta'.

    The quantity is a digit run or a single digit word (satu..sembilan); the
    price is quantity times the unit's scale.
    """
    match = _NUMBER_UNIT.match(text)
    if not match:
        return None

    quantity_text, unit = match.group(2), match.group(3)
    if quantity_text.isdigit():
        quantity = parse_digits(quantity_text)
        if quantity is None:
            return None
    else:
        quantity = NUMBER_WORDS[quantity_text]

    return _build_result(match.group(1), quantity * MULTIPLIERS[unit])


def extract_indonesian_words(text: str) -> ParseResult | None:
    """Match '<name> <spoken numerals>', e.g. 'mangga lima puluh ribu'.

    The name is everything before the first numeric token; the remaining
    tokens go to the numeral evaluator.
    """
    tokens = tokenize(text)
    start = next(
        (index for index, token in enumerate(tokens) if is_numeric_token(token)),
        None,
    )
    # No number at all, or nothing in front of it to call the item
    if not start:
        return None

    item_name = " ".join(tokens[:start])
    return _build_result(item_name, evaluate(tokens[start:]))


def extract_direct_number(text: str) -> ParseResult | None:
    """Match '<name> <digits>' with at least three digits.

    A three-digit amount (100-999) is shorthand for thousands: "aqua 500"
    is Rp500.000.
    """
    match = _DIRECT_NUMBER.match(text)
    if not match:
        return None

    price = parse_digits(match.group(2))
    if price is None:
        return None
    if 100 <= price <= 999:
        price *= 1000
    return _build_result(match.group(1), price)


# ─── Registry ────────────────────────────────────────────────────────

RECOGNIZERS: Mapping[Strategy, Recognizer] = MappingProxyType(
    {
        Strategy.CURRENCY_FORMAT: extract_currency_format,
        Strategy.NUMBER_UNIT: extract_number_unit,
        Strategy.INDONESIAN_WORDS: extract_indonesian_words,
        Strategy.DIRECT_NUMBER: extract_direct_number,
    }
)

# Tried in this order; the first non-None result wins
CASCADE: tuple[Strategy, ...] = (
    Strategy.CURRENCY_FORMAT,
    Strategy.NUMBER_UNIT,
    Strategy.INDONESIAN_WORDS,
    Strategy.DIRECT_NUMBER,
)

assert set(CASCADE) == set(Strategy) == set(RECOGNIZERS), "every Strategy needs a recognizer"
