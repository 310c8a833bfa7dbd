"""
Fold spoken Indonesian numerals into an integer price.

Supported patterns:
    "lima puluh ribu"            → 50,000
    "satu juta"                  → 1,000,000
    "dua ratus lima puluh ribu"  → 250,000
    "dua ratus"                  → 200
    "tujuh"                      → 7,000   (bare small number, see below)

The evaluator never fails: unknown tokens are skipped and a degenerate
sequence yields 0. Deciding that 0 means "no price" is the caller's job.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, replace

from .lexicon import MULTIPLIERS, NUMBER_WORDS, SCALE_WORDS, parse_digits

# Digit token, tolerating grouping punctuation: "75000", "75.000", "1,250,000"
_DIGIT_GROUPS = re.compile(r"\d+(?:[.,]\d+)*")

# Multipliers that fold into the sub-total vs. those that close a group
_GROUP_SCALES: dict[str, int] = {word: MULTIPLIERS[word] for word in ("puluh", "ratus")}
_CLOSING_SCALES: dict[str, int] = {word: MULTIPLIERS[word] for word in ("ribu", "juta")}


# ─── Accumulator ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GrammarState:
    """Running totals for one evaluation.

    - ``result``: thousands/millions already folded in
    - ``temp_value``: sub-total below the next ribu/juta boundary
    - ``current_number``: the last bare number read, not yet combined
    """

    result: int = 0
    temp_value: int = 0
    current_number: int = 0

    @property
    def total(self) -> int:
        return self.result + self.temp_value + self.current_number


def step(state: GrammarState, token: str, next_token: str | None = None) -> GrammarState:
    """Apply one token and return the next state."""
    if _DIGIT_GROUPS.fullmatch(token):
        value = parse_digits(token)
        # Too long to be a price; left for evaluate() to reject
        if value is None:
            return state
        return replace(state, current_number=value)

    if token in NUMBER_WORDS:
        value = NUMBER_WORDS[token]
        # "satu juta" starts a fresh million instead of adding to a pending number
        if token == "satu" and next_token == "juta":
            return replace(state, current_number=1)
        # "sepuluh lima" → 15: a digit word after a small pending number adds
        if value < 10 and 0 < state.current_number < 20:
            return replace(state, current_number=state.current_number + value)
        return replace(state, current_number=value)

    if token in _GROUP_SCALES:
        # Bare "ratus" means one hundred
        effective = state.current_number or 1
        return replace(
            state,
            temp_value=state.temp_value + effective * _GROUP_SCALES[token],
            current_number=0,
        )

    if token in _CLOSING_SCALES:
        # Bare "ribu" means one thousand
        carry = (state.temp_value + state.current_number) or 1
        return GrammarState(result=state.result + carry * _CLOSING_SCALES[token])

    # "rb"/"k" are units for the number-plus-unit pattern, not grammar words
    return state


# ─── Main Evaluator ──────────────────────────────────────────────────


def evaluate(tokens: Sequence[str]) -> int:
    """Convert a sequence of numeral tokens to an integer.

    Args:
        tokens: e.g. ["lima", "puluh", "ribu"]

    Returns:
        50000

    Algorithm:
        Three accumulators (see GrammarState) are threaded through the
        tokens; each step returns a new state and never mutates the old one.

        - digits / number words → set (or extend) ``current_number``
        - "puluh" / "ratus"     → add ``current_number * scale`` to ``temp_value``
        - "ribu" / "juta"       → flush ``(temp_value + current_number) * scale``
                                  into ``result``

        The final value is the sum of all three. A final value below 1000
        with no scale word anywhere in the input is taken to be stated in
        thousands ("aqua lima" is Rp5.000, not Rp5).

        A digit run longer than MAX_PRICE_DIGITS makes the whole sequence
        evaluate to 0.
    """
    if any(_DIGIT_GROUPS.fullmatch(token) and parse_digits(token) is None for token in tokens):
        return 0

    state = GrammarState()
    for index, token in enumerate(tokens):
        next_token = tokens[index + 1] if index + 1 < len(tokens) else None
        state = step(state, token, next_token)

    final_value = state.total
    if 0 < final_value < 1000 and not any(token in SCALE_WORDS for token in tokens):
        final_value *= 1000
    return final_value
