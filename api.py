"""
VoiceCart — FastAPI Server
===========================

RESTful API over the transcript extractor and a shared shopping cart.

Endpoints:
    POST   /extract           Parse a transcript without touching the cart
    GET    /cart              Items, count and total
    POST   /cart/voice        Parse a transcript and add it to the cart
    POST   /cart/manual       Add a typed name and price
    DELETE /cart/items/{id}   Remove one item
    DELETE /cart              Remove every item
    GET    /health            Health check and readiness

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Annotated, Literal, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from voicecart import __version__
from voicecart.cart import ShoppingCart
from voicecart.config import Settings, configure_logging, load_settings
from voicecart.exceptions import InvalidItemError, ItemNotFoundError
from voicecart.extractor import match_transcript
from voicecart.formatting import format_rupiah
from voicecart.messages import get_message
from voicecart.models import CartItem, CartSummary, Strategy

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Application Lifespan (settings + cart) ─────────────────────────

_settings: Settings | None = None
_cart: ShoppingCart | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and create the shared cart on startup."""
    global _settings, _cart  # noqa: PLW0603
    _settings = load_settings()
    configure_logging(_settings)
    _cart = ShoppingCart()
    yield
    _cart = None
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="VoiceCart API",
    description=(
        "Track a shopping budget by voice. Turns Indonesian speech transcripts "
        "such as 'mangga lima puluh ribu' into an item name and a Rupiah price."
    ),
    version=__version__,
    lifespan=lifespan,
)

Language = Literal["id", "en"]


# ─── Request / Response Schemas ─────────────────────────────────────


class TranscriptRequest(BaseModel):
    """Request body carrying one speech transcript."""

    transcript: str = Field(
        ...,
        max_length=500,
        description="Raw speech-to-text output.",
        json_schema_extra={"example": "mangga lima puluh ribu"},
    )
    language: Optional[Language] = Field(
        default=None, description="Language of status messages (defaults to server setting)."
    )


class ManualItemRequest(BaseModel):
    """Request body for a typed item."""

    name: str = Field(..., max_length=200, json_schema_extra={"example": "Roti Tawar"})
    price: Union[int, Annotated[str, Field(max_length=40)]] = Field(
        ..., json_schema_extra={"example": "12.500"}
    )
    language: Optional[Language] = None


class ExtractResponse(BaseModel):
    """Outcome of parsing a transcript."""

    matched: bool
    strategy: Optional[Strategy] = None
    normalized: str = ""
    item_name: Optional[str] = None
    price: Optional[int] = None
    price_formatted: Optional[str] = None
    message: str

    model_config = {"json_schema_extra": {"example": {
        "matched": True,
        "strategy": "INDONESIAN_WORDS",
        "normalized": "mangga lima puluh ribu",
        "item_name": "Mangga",
        "price": 50000,
        "price_formatted": "Rp 50.000",
        "message": "Ditambahkan: Mangga Rp 50.000",
    }}}


class CartItemResponse(BaseModel):
    """An item that was just added or removed, plus a status message."""

    item: CartItem
    price_formatted: str
    message: str


class ClearResponse(BaseModel):
    removed: int
    message: str


class HealthResponse(BaseModel):
    status: str
    version: str
    language: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_cart() -> ShoppingCart:
    if _cart is None:
        raise HTTPException(status_code=503, detail="Cart not initialised")
    return _cart


def _language(requested: Optional[str]) -> str:
    if requested:
        return requested
    return _settings.language if _settings is not None else "id"


def _item_response(item: CartItem, key: str, language: str) -> CartItemResponse:
    price_formatted = format_rupiah(item.price)
    return CartItemResponse(
        item=item,
        price_formatted=price_formatted,
        message=get_message(key, language, name=item.name, price=price_formatted),
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/extract",
    summary="Parse a transcript into an item name and price",
    tags=["Extraction"],
)
def extract_transcript(request: TranscriptRequest) -> ExtractResponse:
    """Run the extraction cascade without modifying the cart.

    An unrecognized transcript is not an HTTP error: the response has
    **matched** = `false` and the retry message.
    """
    language = _language(request.language)
    match = match_transcript(request.transcript)
    if match is None:
        return ExtractResponse(matched=False, message=get_message("retry", language))

    price_formatted = format_rupiah(match.result.price)
    return ExtractResponse(
        matched=True,
        strategy=match.strategy,
        normalized=match.normalized,
        item_name=match.result.item_name,
        price=match.result.price,
        price_formatted=price_formatted,
        message=get_message(
            "recognized", language, name=match.result.item_name, price=price_formatted
        ),
    )


@app.get("/cart", summary="Show the shopping list", tags=["Cart"])
def get_cart() -> CartSummary:
    """Items in insertion order with the running total."""
    return _get_cart().summary()


@app.post(
    "/cart/voice",
    status_code=201,
    summary="Add an item from a transcript",
    tags=["Cart"],
    responses={422: {"description": "Transcript not understood"}},
)
def add_voice_item(request: TranscriptRequest) -> CartItemResponse:
    """Parse the transcript and append the result to the cart."""
    cart = _get_cart()
    language = _language(request.language)
    item = cart.add_from_transcript(request.transcript)
    if item is None:
        raise HTTPException(status_code=422, detail=get_message("retry", language))
    return _item_response(item, "item_added", language)


@app.post(
    "/cart/manual",
    status_code=201,
    summary="Add a typed item",
    tags=["Cart"],
    responses={422: {"description": "Empty name or invalid price"}},
)
def add_manual_item(request: ManualItemRequest) -> CartItemResponse:
    """Append a typed name and price (e.g. `"12.500"` or `12500`)."""
    cart = _get_cart()
    try:
        item = cart.add_manual(request.name, request.price)
    except InvalidItemError as exc:
        raise HTTPException(status_code=422, detail={"code": exc.code, "message": str(exc)})
    return _item_response(item, "item_added", _language(request.language))


@app.delete(
    "/cart/items/{item_id}",
    summary="Remove one item",
    tags=["Cart"],
    responses={404: {"description": "No item with that id"}},
)
def delete_item(item_id: int, language: Optional[Language] = None) -> CartItemResponse:
    cart = _get_cart()
    try:
        item = cart.remove_item(item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"code": exc.code, "message": str(exc)})
    return _item_response(item, "item_removed", _language(language))


@app.delete("/cart", summary="Remove every item", tags=["Cart"])
def clear_cart(language: Optional[Language] = None) -> ClearResponse:
    removed = _get_cart().clear()
    return ClearResponse(removed=removed, message=get_message("cart_cleared", _language(language)))


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Cart not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _get_cart()
    return HealthResponse(status="healthy", version=__version__, language=_language(None))
