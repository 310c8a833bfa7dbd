"""
VoiceCart — Track a shopping budget by speaking product names and prices.

Architecture: Normalize → Strategy cascade (Rupiah / Unit / Words / Digits) → Cart
Philosophy:  Recognize conservatively. A wrong price is worse than a retry.
"""

from __future__ import annotations

from .extractor import extract, match_transcript
from .formatting import format_rupiah
from .models import ParseResult

__version__ = "1.0.0"

__all__ = ["ParseResult", "extract", "format_rupiah", "match_transcript"]
