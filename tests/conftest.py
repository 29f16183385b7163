"""Pytest configuration and fixtures"""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from shopify_cart import CartEventBus, ShopifyCart

STORE_URL = "https://shop.test"


class FakeStorefront:
    """Answers cart routes with canned JSON and records every request."""

    def __init__(self):
        self.responses: Dict[str, Any] = {}
        self.requests: List[httpx.Request] = []

    def respond(self, route: str, payload: Any) -> None:
        self.responses[route] = payload

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        payload = self.responses.get(request.url.path, {})
        return httpx.Response(200, json=payload)

    def requests_to(self, route: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == route]

    def body(self, request: httpx.Request) -> Optional[Any]:
        if not request.content:
            return None
        return json.loads(request.content)


@pytest.fixture
def sample_cart():
    """Sample /cart.js payload"""
    return {
        "token": "c1-abc123",
        "note": "Leave at the door",
        "attributes": {"gift": "yes", "color": "red"},
        "item_count": 2,
        "total_price": 5000,
        "currency": "USD",
        "items": [
            {
                "id": 39897499729985,
                "key": "39897499729985:abc",
                "quantity": 2,
                "variant_id": 39897499729985,
                "price": 2500,
            }
        ],
    }


@pytest.fixture
def storefront(sample_cart):
    """Fake storefront with a readable cart"""
    fake = FakeStorefront()
    fake.respond("/cart.js", sample_cart)
    return fake


@pytest.fixture
def event_bus():
    return CartEventBus()


@pytest.fixture
def make_cart(storefront, event_bus):
    """Build a ShopifyCart wired to the fake storefront"""
    def _make(settings: Optional[Dict[str, Any]] = None) -> ShopifyCart:
        merged = {"url": STORE_URL}
        merged.update(settings or {})
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(storefront.handler))
        return ShopifyCart(merged, event_bus=event_bus, http_client=http_client)

    return _make
