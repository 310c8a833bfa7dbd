"""
Pydantic models for parse results and cart state.

A ParseResult only exists when BOTH fields are valid. Strategies check their
own preconditions and return None instead of building a half-filled record,
so a ValidationError here means a programming error, not bad speech.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ─── Strategy Kinds ─────────────────────────────────────────────────


class Strategy(str, Enum):
    """The closed set of recognizers, named by the surface pattern they match."""

    CURRENCY_FORMAT = "CURRENCY_FORMAT"  # "pizza hut rp 75000"
    NUMBER_UNIT = "NUMBER_UNIT"  # "nabati dan oreo 80 ribu"
    INDONESIAN_WORDS = "INDONESIAN_WORDS"  # "mangga lima puluh ribu"
    DIRECT_NUMBER = "DIRECT_NUMBER"  # "indomie 3000"


# ─── Extraction Models ──────────────────────────────────────────────


class ParseResult(BaseModel):
    """A product name and its price in whole Rupiah."""

    model_config = ConfigDict(frozen=True)

    item_name: str = Field(min_length=1)
    price: int = Field(gt=0)


class ExtractionMatch(BaseModel):
    """A ParseResult together with the strategy that produced it."""

    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    normalized: str  # The normalized transcript the strategy saw
    result: ParseResult


# ─── Cart Models ────────────────────────────────────────────────────


class CartItem(BaseModel):
    """One line of the shopping list."""

    id: int
    name: str = Field(min_length=1)
    price: int = Field(gt=0)
    source: Literal["voice", "manual"] = "voice"


class CartSummary(BaseModel):
    """Snapshot of the cart: items in insertion order plus the running total."""

    items: list[CartItem] = Field(default_factory=list)
    item_count: int = 0
    total_price: int = 0
    total_formatted: str = ""
