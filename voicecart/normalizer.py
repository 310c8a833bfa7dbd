"""
Transcript normalization, the only place raw speech text is touched.

Speech engines deliver text like "Pizza Hut Rp.75.000!" or "RP 75000".
After normalization every strategy sees the same canonical shape:

    "pizza hut rp 75000"
"""

from __future__ import annotations

import re

from .lexicon import CURRENCY_SYMBOL

_PUNCTUATION = re.compile(r"[.,!?]")
_WHITESPACE = re.compile(r"\s+")
# Runs after the punctuation strip: "rp  " and "rp75000" become "rp "; "rpm" is left alone
_CURRENCY = re.compile(rf"\b{CURRENCY_SYMBOL}(?![^\W\d_])\s*", re.IGNORECASE)


def normalize(transcript: str) -> str:
    """Return the canonical form of a transcript.

    Lowercases, drops ``. , ! ?``, collapses whitespace, and makes the
    currency symbol followed by exactly one space. Never raises; anything
    that is not a string normalizes to "".
    """
    if not isinstance(transcript, str):
        return ""

    text = transcript.strip().lower()
    text = _PUNCTUATION.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    text = _CURRENCY.sub(f"{CURRENCY_SYMBOL} ", text)
    return text.strip()
