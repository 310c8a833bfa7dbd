"""
The shopping list that parsed items land in.

Items come from two places:
  - voice: a transcript run through extract(); a failed parse adds nothing
  - manual: a typed name and price, validated strictly

The cart is the only mutable state in the package, so every mutation holds
a lock (the API shares one cart between requests).
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Literal, Union

from .exceptions import InvalidItemError, ItemNotFoundError
from .extractor import extract
from .formatting import format_rupiah
from .lexicon import MAX_PRICE_DIGITS, parse_digits
from .models import CartItem, CartSummary

logger = logging.getLogger(__name__)

# "75000", "75.000", "Rp 75.000", "rp75,000"
_MANUAL_PRICE = re.compile(r"(?:rp\.?\s*)?(\d{1,3}(?:[.,]\d{3})+|\d+)", re.IGNORECASE)


def parse_manual_price(price_text: Union[str, int]) -> int:
    """Parse a typed price into whole Rupiah.

    Raises:
        InvalidItemError: If the text is not a positive whole amount.
    """
    if isinstance(price_text, bool) or not isinstance(price_text, (int, str)):
        raise InvalidItemError("Price must be a number", {"price": price_text})
    if isinstance(price_text, int):
        if price_text >= 10**MAX_PRICE_DIGITS:
            raise InvalidItemError("Price is too long", {"max_digits": MAX_PRICE_DIGITS})
        price = price_text
    else:
        match = _MANUAL_PRICE.fullmatch(price_text.strip())
        if not match:
            raise InvalidItemError(
                f"Could not read a price from {price_text!r}", {"price": price_text}
            )
        parsed = parse_digits(match.group(1))
        if parsed is None:
            raise InvalidItemError("Price is too long", {"max_digits": MAX_PRICE_DIGITS})
        price = parsed

    if price <= 0:
        raise InvalidItemError("Price must be greater than zero", {"price": price})
    return price


class ShoppingCart:
    """Ordered list of cart items with a running total.

    Usage:
        cart = ShoppingCart()
        cart.add_from_transcript("mangga lima puluh ribu")
        cart.add_manual("Roti", "12.500")
        cart.total_price  # 62500
    """

    def __init__(self) -> None:
        self._items: list[CartItem] = []
        self._next_id = 1
        self._lock = threading.Lock()

    # ─── Adding ─────────────────────────────────────────────────────

    def add_item(
        self, name: str, price: int, source: Literal["voice", "manual"] = "voice"
    ) -> CartItem:
        """Append an item and return it.

        Raises:
            InvalidItemError: If the name is blank or the price is not a positive int.
        """
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise InvalidItemError("Item name must not be empty", {"name": name})
        if isinstance(price, bool) or not isinstance(price, int) or price <= 0:
            raise InvalidItemError(
                "Price must be a positive whole number", {"price": price}
            )

        with self._lock:
            item = CartItem(id=self._next_id, name=name, price=price, source=source)
            self._next_id += 1
            self._items.append(item)

        logger.info("Added item #%d %r (%d, %s)", item.id, item.name, item.price, source)
        return item

    def add_from_transcript(self, transcript: str) -> CartItem | None:
        """Parse a transcript and add the result; None if it was not understood."""
        result = extract(transcript)
        if result is None:
            return None
        return self.add_item(result.item_name, result.price, source="voice")

    def add_manual(self, name: str, price_text: Union[str, int]) -> CartItem:
        """Add a typed item. The name is kept as typed (trimmed, not title-cased)."""
        return self.add_item(name, parse_manual_price(price_text), source="manual")

    # ─── Removing ───────────────────────────────────────────────────

    def remove_item(self, item_id: int) -> CartItem:
        """Remove an item by id and return it.

        Raises:
            ItemNotFoundError: If no item has that id.
        """
        with self._lock:
            for index, item in enumerate(self._items):
                if item.id == item_id:
                    del self._items[index]
                    break
            else:
                raise ItemNotFoundError(
                    f"No item with id {item_id}", {"item_id": item_id}
                )

        logger.info("Removed item #%d %r", item.id, item.name)
        return item

    def clear(self) -> int:
        """Empty the cart; returns how many items were removed."""
        with self._lock:
            removed = len(self._items)
            self._items.clear()
        logger.info("Cleared cart (%d items)", removed)
        return removed

    # ─── Reading ────────────────────────────────────────────────────

    @property
    def items(self) -> list[CartItem]:
        with self._lock:
            return list(self._items)

    @property
    def item_count(self) -> int:
        with self._lock:
            return len(self._items)

    @property
    def total_price(self) -> int:
        with self._lock:
            return sum(item.price for item in self._items)

    def summary(self) -> CartSummary:
        """Consistent snapshot of items and totals."""
        items = self.items
        total = sum(item.price for item in items)
        return CartSummary(
            items=items,
            item_count=len(items),
            total_price=total,
            total_formatted=format_rupiah(total),
        )
