"""
Tests for cart errors and response classification
"""

import pytest

from shopify_cart import (
    CartError,
    CartFormError,
    CartResponseError,
    InventoryError,
    ResponseKind,
    VariantError,
    classify_response,
)
from shopify_cart.responses import raise_for_cart_error


class TestErrors:
    """Error taxonomy."""

    def test_inventory_error(self):
        error = InventoryError("Not enough in stock")

        assert error.status == 422
        assert error.message == "Cart Error"
        assert error.description == "Not enough in stock"
        assert isinstance(error, CartResponseError)

    def test_variant_error(self):
        error = VariantError()

        assert error.to_dict() == {
            "status": 404,
            "message": "Cart Error",
            "description": "Cannot find variant",
        }

    def test_form_error_is_value_error(self):
        error = CartFormError()

        assert isinstance(error, CartError)
        assert isinstance(error, ValueError)
        assert "ID" in str(error)


class TestClassifyResponse:
    """Tagging raw responses."""

    @pytest.mark.parametrize(
        "data, kind",
        [
            ({"token": "abc", "items": []}, ResponseKind.CART),
            ({"status": 422, "description": "Sold out"}, ResponseKind.INVENTORY_FAILURE),
            ({"status": 404}, ResponseKind.VARIANT_FAILURE),
            ({"status": 404, "token": "abc"}, ResponseKind.VARIANT_FAILURE),
            ({"items": [{"id": 1}]}, ResponseKind.OTHER),
            ({"token": ""}, ResponseKind.OTHER),
            ([{"id": 1}], ResponseKind.OTHER),
        ],
    )
    def test_kinds(self, data, kind):
        assert classify_response(data) is kind

    def test_raise_for_inventory(self):
        with pytest.raises(InventoryError) as exc_info:
            raise_for_cart_error({"status": 422, "description": "Only 2 left"})

        assert exc_info.value.description == "Only 2 left"

    def test_raise_for_variant(self):
        with pytest.raises(VariantError):
            raise_for_cart_error({"status": 404, "description": "ignored"})

    def test_success_returns_kind(self):
        assert raise_for_cart_error({"token": "abc"}) is ResponseKind.CART


def test_response_error_without_description():
    error = InventoryError(None)

    assert error.description is None
    assert str(error) == "Cart Error"
