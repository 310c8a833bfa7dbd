"""
Custom exception hierarchy for the shopping cart.

The extractor itself never raises on bad input (it returns None). These
exceptions cover the cart surface, where a caller explicitly asked for an
item to be added or removed and deserves to know why it was refused.
"""

from __future__ import annotations


class VoiceCartError(Exception):
    """Base exception for all cart failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidItemError(VoiceCartError):
    """The item has an empty name or a price that is not a positive integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_ITEM", message, details)


class ItemNotFoundError(VoiceCartError):
    """No cart item carries the requested id."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("ITEM_NOT_FOUND", message, details)
