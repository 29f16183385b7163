"""Classification of raw Cart API responses."""
from enum import Enum
from typing import Any

from .errors import (
    STATUS_INVENTORY,
    STATUS_VARIANT_NOT_FOUND,
    InventoryError,
    VariantError,
)


class ResponseKind(str, Enum):
    """What a parsed storefront response represents."""
    CART = "cart"  # Full cart state, carries a token
    INVENTORY_FAILURE = "inventory_failure"  # status 422
    VARIANT_FAILURE = "variant_failure"  # status 404
    OTHER = "other"  # Line item, item list, etc.


def classify_response(data: Any) -> ResponseKind:
    """
    Decide what a parsed JSON body is.

    Failure shapes are checked before the token so an error body never
    counts as cart state.
    """
    if not isinstance(data, dict):
        return ResponseKind.OTHER

    status = data.get("status")
    if status == STATUS_VARIANT_NOT_FOUND:
        return ResponseKind.VARIANT_FAILURE
    if status == STATUS_INVENTORY:
        return ResponseKind.INVENTORY_FAILURE
    if data.get("token"):
        return ResponseKind.CART
    return ResponseKind.OTHER


def raise_for_cart_error(data: Any) -> ResponseKind:
    """Raise the typed error for a failure response, otherwise return its kind."""
    kind = classify_response(data)
    if kind is ResponseKind.VARIANT_FAILURE:
        raise VariantError()
    if kind is ResponseKind.INVENTORY_FAILURE:
        raise InventoryError(data.get("description"))
    return kind


__all__ = ["ResponseKind", "classify_response", "raise_for_cart_error"]
