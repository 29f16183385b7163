"""
Cart Errors

Typed errors for the failure shapes the storefront Cart API reports.
Transport failures (httpx.HTTPError, invalid JSON) are not wrapped and reach
the caller unchanged.
"""

from typing import Optional

ERROR_CART = "Cart Error"
ERROR_VARIANT_NOT_FOUND = "Cannot find variant"
ERROR_FORM_MISSING_ID = "Cart form missing required property ID"

STATUS_VARIANT_NOT_FOUND = 404
STATUS_INVENTORY = 422


class CartError(Exception):
    """Base class for every error raised by the cart client."""


class CartResponseError(CartError):
    """A storefront response that describes a failed cart operation."""

    status: int = 0

    def __init__(self, description: Optional[str] = None):
        self.message = ERROR_CART
        self.description = description
        super().__init__(f"{self.message}: {description}" if description else self.message)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "message": self.message,
            "description": self.description,
        }


class InventoryError(CartResponseError):
    """Requested quantity is not available (HTTP 422)."""

    status = STATUS_INVENTORY


class VariantError(CartResponseError):
    """Referenced variant or line item does not exist (HTTP 404)."""

    status = STATUS_VARIANT_NOT_FOUND

    def __init__(self):
        super().__init__(ERROR_VARIANT_NOT_FOUND)


class CartFormError(CartError, ValueError):
    """Product form cannot be submitted; raised before any request is sent."""

    def __init__(self, description: str = ERROR_FORM_MISSING_ID):
        self.description = description
        super().__init__(description)


__all__ = [
    "ERROR_CART",
    "ERROR_VARIANT_NOT_FOUND",
    "ERROR_FORM_MISSING_ID",
    "STATUS_VARIANT_NOT_FOUND",
    "STATUS_INVENTORY",
    "CartError",
    "CartResponseError",
    "InventoryError",
    "VariantError",
    "CartFormError",
]
