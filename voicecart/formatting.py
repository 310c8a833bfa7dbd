"""Display helpers: item-name capitalization and Rupiah formatting."""

from __future__ import annotations

# Indonesian locale groups thousands with "." and separates "Rp" with a no-break space
_THOUSANDS_SEPARATOR = "."
_NBSP = "\u00a0"


def capitalize_item_name(item_name: str) -> str:
    """Title-case each space-separated word: "pizza HUT" → "Pizza Hut"."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in item_name.split(" "))


def format_rupiah(price: int) -> str:
    """Render a whole-Rupiah amount for display.

    >>> format_rupiah(75000)
    'Rp\\xa075.000'
    """
    grouped = f"{price:,}".replace(",", _THOUSANDS_SEPARATOR)
    return f"Rp{_NBSP}{grouped}"
