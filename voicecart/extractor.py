"""
Transcript → (item name, price) extraction through the strategy cascade.

Flow:
  ┌────────────┐
  │ Transcript │
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Normalize  │   ← lowercase, strip punctuation, "rp75000" → "rp 75000"
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Currency  │   "pizza hut rp 75000"
  │ Number+Unit│   "nabati dan oreo 80 ribu"     ← first match wins
  │   Words    │   "mangga lima puluh ribu"
  │   Digits   │   "indomie 3000"
  └─────┬──────┘
        │
  ParseResult or None

Design principles:
  - Exactly one failure mode: None. Nothing here raises on odd speech.
  - Pure and stateless: the only shared data are the constant lexicons,
    so concurrent callers need no locking.
"""

from __future__ import annotations

import logging

from .models import ExtractionMatch, ParseResult
from .normalizer import normalize
from .strategies import CASCADE, RECOGNIZERS

logger = logging.getLogger(__name__)


def match_transcript(transcript: str) -> ExtractionMatch | None:
    """Run the cascade and report which strategy matched.

    Args:
        transcript: Raw speech-to-text output, e.g. "Pizza Hut Rp.75.000".

    Returns:
        ExtractionMatch with the strategy, the normalized text and the
        result, or None if no strategy recognized the transcript.
    """
    normalized = normalize(transcript)
    if not normalized:
        logger.debug("Empty transcript after normalization: %r", transcript)
        return None

    for strategy in CASCADE:
        logger.debug("Trying %s on %r", strategy.value, normalized)
        result = RECOGNIZERS[strategy](normalized)
        if result is not None:
            logger.info(
                "Extracted %r at %d with %s", result.item_name, result.price, strategy.value
            )
            return ExtractionMatch(strategy=strategy, normalized=normalized, result=result)

    logger.info("No strategy recognized %r", normalized)
    return None


def extract(transcript: str) -> ParseResult | None:
    """Extract an item name and price from a spoken transcript.

    Usage:
        result = extract("mangga lima puluh ribu")
        # ParseResult(item_name="Mangga", price=50000)
    """
    match = match_transcript(transcript)
    return match.result if match is not None else None
