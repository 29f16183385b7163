"""
Async client for the Shopify AJAX Cart API.

Modules:
- client: ShopifyCart, one method per cart endpoint
- config: settings and request defaults
- errors: typed cart errors
- events: lifecycle event bus
- forms: product form serialization
- responses: response classification
"""
from .client import ShopifyCart
from .config import CartSettings, PostConfig, merge_settings, settings_from_env
from .errors import (
    CartError,
    CartFormError,
    CartResponseError,
    InventoryError,
    VariantError,
)
from .events import CartEvent, CartEventBus, CartEventName
from .forms import serialize_form
from .responses import ResponseKind, classify_response

__all__ = [
    "ShopifyCart",
    "CartSettings",
    "PostConfig",
    "merge_settings",
    "settings_from_env",
    "CartError",
    "CartFormError",
    "CartResponseError",
    "InventoryError",
    "VariantError",
    "CartEvent",
    "CartEventBus",
    "CartEventName",
    "serialize_form",
    "ResponseKind",
    "classify_response",
]
