"""User-facing status messages in Indonesian and English."""

from __future__ import annotations

DEFAULT_LANGUAGE = "id"

MESSAGES: dict[str, dict[str, str]] = {
    "id": {
        "retry": "Maaf, bisa diulangi lebih jelas?",
        "recognized": "Dikenali: {name} {price}",
        "item_added": "Ditambahkan: {name} {price}",
        "item_removed": "Dihapus: {name}",
        "cart_cleared": "Daftar belanja dikosongkan",
        "listening_hint": 'Ucapkan nama produk dan harga (contoh: "mangga lima puluh ribu")',
    },
    "en": {
        "retry": "Sorry, could you please repeat more clearly?",
        "recognized": "Recognized: {name} {price}",
        "item_added": "Added: {name} {price}",
        "item_removed": "Removed: {name}",
        "cart_cleared": "Shopping list cleared",
        "listening_hint": 'Say the product name and price (e.g. "mangga lima puluh ribu")',
    },
}

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(MESSAGES)


def get_message(key: str, language: str = DEFAULT_LANGUAGE, **params: object) -> str:
    """Look up a message, falling back to Indonesian for unknown languages.

    Raises:
        KeyError: If ``key`` is not a known message.
    """
    catalog = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    template = catalog[key]
    return template.format(**params) if params else template
