#!/usr/bin/env python3
"""
VoiceCart — Entry Point
========================

Runs the transcript extractor over sample (or given) transcripts, adds every
recognized item to a cart and prints the shopping list.

Usage:
    python main.py                                    # Built-in sample transcripts
    python main.py "mangga lima puluh ribu" "aqua 500"
    VOICECART_LANGUAGE=en python main.py              # English status messages
"""

from __future__ import annotations

import sys

from voicecart.cart import ShoppingCart
from voicecart.config import configure_logging, load_settings
from voicecart.extractor import match_transcript
from voicecart.formatting import format_rupiah
from voicecart.messages import get_message

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Sample Transcripts, as a speech engine delivers them ───────────

SAMPLE_TRANSCRIPTS = [
    "mangga lima puluh ribu",
    "Mangga satu juta",
    "Pizza Hut Rp.75.000",
    "nabati dan oreo 80 ribu",
    "indomie 3000",
    "aqua 500",
    "halo dunia",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def process_transcripts(transcripts: list[str], cart: ShoppingCart, language: str) -> int:
    """Parse each transcript, add matches to the cart and print one line each.

    Returns:
        Number of transcripts that could not be understood.
    """
    failures = 0
    for transcript in transcripts:
        match = match_transcript(transcript)
        if match is None:
            failures += 1
            print(f"  {_RED}✗{_RESET} {transcript!r}")
            print(f"    {_DIM}{get_message('retry', language)}{_RESET}")
            continue

        item = cart.add_item(match.result.item_name, match.result.price)
        print(f"  {_GREEN}✓{_RESET} {transcript!r}")
        print(
            f"    {_BOLD}{item.name}{_RESET}  {format_rupiah(item.price)}  "
            f"{_DIM}[{match.strategy.value}]{_RESET}"
        )
    return failures


def print_cart(cart: ShoppingCart) -> None:
    """Print the shopping list and its total."""
    summary = cart.summary()
    print(f"{'─' * _WIDTH}")
    for item in summary.items:
        print(f"  {item.id:>3}. {item.name:<40} {format_rupiah(item.price):>20}")
    print(f"{'─' * _WIDTH}")
    print(f"  {_BOLD}Total ({summary.item_count}){_RESET}{summary.total_formatted:>56}")
    print(f"{'=' * _WIDTH}\n")


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Parse transcripts from argv (or the samples) and print the cart.

    Returns:
        0 if every transcript was understood, 1 otherwise.
    """
    settings = load_settings()
    configure_logging(settings)

    transcripts = argv if argv else SAMPLE_TRANSCRIPTS
    cart = ShoppingCart()

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  VOICECART{_RESET}")
    print(f"{'=' * _WIDTH}")
    failures = process_transcripts(transcripts, cart, settings.language)
    print_cart(cart)

    return 0 if failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
