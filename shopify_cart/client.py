"""Shopify AJAX Cart API client.

Every method maps onto one storefront endpoint:
    GET  /cart.js          - read the cart
    POST /cart/add.js      - add line items
    POST /cart/update.js   - note and attributes
    POST /cart/change.js   - change or remove one line item
    POST /cart/clear.js    - remove all line items

See https://shopify.dev/docs/api/ajax/reference/cart
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from .config import CartSettings, SettingsInput, merge_settings
from .errors import CartResponseError
from .events import CartEvent, CartEventBus, CartEventName
from .forms import FormInput, serialize_form
from .logging import get_logger, sanitize_string_for_logging
from .responses import ResponseKind, classify_response, raise_for_cart_error

logger = get_logger(__name__)

ROUTE_CART = "/cart.js"
ROUTE_ADD = "/cart/add.js"
ROUTE_UPDATE = "/cart/update.js"
ROUTE_CHANGE = "/cart/change.js"
ROUTE_CLEAR = "/cart/clear.js"

ItemsInput = Union[Mapping[str, Any], List[Mapping[str, Any]]]


def _dumps(data: Any) -> str:
    """Compact JSON body, no whitespace between tokens."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _clear_props(target: Mapping[str, Any]) -> Dict[str, str]:
    return {key: "" for key in target}


class ShopifyCart:
    """
    Client for a storefront's cart.

    Holds the settings and the last cart state seen. Calls are not
    serialized against each other: with concurrent mutations the response
    that completes last wins the cached state.
    """

    def __init__(
        self,
        settings: SettingsInput = None,
        *,
        event_bus: Optional[CartEventBus] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            settings: Overrides for url, postConfig and updateState
            event_bus: Bus to broadcast lifecycle events on; subscribe before
                constructing to receive cart:ready
            http_client: Shared httpx client; the cart never closes an injected one
        """
        self._settings: CartSettings = merge_settings(settings)
        self._state: Optional[Dict[str, Any]] = None
        self.events = event_bus if event_bus is not None else CartEventBus()

        self._http_client = http_client
        self._owns_http_client = http_client is None

        self.dispatch_event(CartEventName.READY)

    @property
    def state(self) -> Optional[Dict[str, Any]]:
        return self._state

    @property
    def settings(self) -> CartSettings:
        return self._settings

    # ==================== HTTP CLIENT ====================

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of the httpx client. No timeout, matching browser fetch."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=None)
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "ShopifyCart":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def _url(self, route: str) -> str:
        return f"{self._settings.url}{route}"

    # ==================== MAIN API ====================

    async def get_state(self) -> Dict[str, Any]:
        """Read the cart via GET /cart.js and cache it."""
        self.dispatch_event(CartEventName.REQUEST_STARTED, ROUTE_CART)
        client = await self._get_http_client()
        logger.debug(f"GET {ROUTE_CART}")
        response = await client.get(self._url(ROUTE_CART))
        data = response.json()
        self._store_state(data)
        self.dispatch_event(CartEventName.REQUEST_COMPLETE, ROUTE_CART)
        return data

    async def add_item(self, items: ItemsInput) -> Any:
        """
        Add one item or a list of items via POST /cart/add.js.

        Each item is a mapping such as {"id": variant_id, "quantity": 2}.
        """
        data = list(items) if isinstance(items, (list, tuple)) else [items]
        response = await self.post(ROUTE_ADD, {"items": data})
        if self._settings.update_state:
            await self.get_state()
        return response

    async def add_item_from_form(self, product_form: FormInput) -> Any:
        """
        Add an item from product form fields via POST /cart/add.js.

        The form must contain an "id" field. If the quantity is more than is
        available the call raises InventoryError and the cached state stays
        unchanged.

        Raises:
            CartFormError: Before any request, if "id" is missing
        """
        form_data = serialize_form(product_form)
        response = await self.post(ROUTE_ADD, form_data)
        if self._settings.update_state:
            await self.get_state()
        return response

    async def clear_attributes(self) -> Any:
        """Blank every cart attribute currently set."""
        state = await self.get_state()
        attributes = state.get("attributes") or {}
        return await self.post(ROUTE_UPDATE, {"attributes": _clear_props(attributes)})

    async def clear_items(self) -> Any:
        """Set the quantity of every line item to zero."""
        return await self.post(ROUTE_CLEAR)

    async def clear_note(self) -> Any:
        return await self.post(ROUTE_UPDATE, {"note": ""})

    async def remove_item(self, item: Mapping[str, Any]) -> Any:
        """
        Remove a line item identified by key, id or line.

        A "quantity" inside item overrides the zero default.
        """
        return await self.post(ROUTE_CHANGE, {"quantity": 0, **item})

    async def update_attributes(self, attributes: Mapping[str, Any]) -> Any:
        return await self.post(ROUTE_UPDATE, {"attributes": dict(attributes)})

    async def update_item(self, item: Mapping[str, Any]) -> Any:
        """
        Change quantity/properties of a single line item already in the cart.
        """
        return await self.post(ROUTE_CHANGE, item)

    async def update_note(self, note: str) -> Any:
        return await self.post(ROUTE_UPDATE, {"note": note})

    # ==================== REQUEST PIPELINE ====================

    async def post(self, route: str, data: Any = None) -> Any:
        """
        Send a mutating request and return the parsed JSON response.

        With credentials="omit" the Cookie header is stripped from the
        request, but a Set-Cookie on the response still lands in the httpx
        client's jar. Inject a separate client to keep that jar untouched.

        Raises:
            VariantError: Storefront answered with status 404
            InventoryError: Storefront answered with status 422
            httpx.HTTPError: Transport failure
        """
        url = self._url(route)
        options = self._settings.post_config.request_options(
            _dumps(data) if data is not None else None
        )

        self.dispatch_event(CartEventName.REQUEST_STARTED, route)
        client = await self._get_http_client()
        request = client.build_request(
            options["method"],
            url,
            headers=options["headers"],
            content=options.get("body"),
        )
        if options["credentials"] == "omit":
            request.headers.pop("Cookie", None)

        logger.debug(f"{options['method']} {route}")
        response = await client.send(request)
        payload = response.json()

        try:
            kind = raise_for_cart_error(payload)
        except CartResponseError as e:
            logger.warning(
                f"{route} failed with {e.status}: "
                f"{sanitize_string_for_logging(e.description)}"
            )
            raise

        if kind is ResponseKind.CART:
            self._state = payload
        self.dispatch_event(CartEventName.REQUEST_COMPLETE, route)
        return payload

    def _store_state(self, data: Any) -> None:
        if classify_response(data) is ResponseKind.CART:
            self._state = data

    def dispatch_event(self, name: CartEventName, route: Optional[str] = None) -> bool:
        event = CartEvent(name=name.value, cart=self, route=route)
        return self.events.dispatch(event)


__all__ = [
    "ROUTE_CART",
    "ROUTE_ADD",
    "ROUTE_UPDATE",
    "ROUTE_CHANGE",
    "ROUTE_CLEAR",
    "ShopifyCart",
]
