"""
Tests for product form serialization
"""

import pytest

from shopify_cart import CartFormError, serialize_form


def test_mapping_form():
    assert serialize_form({"id": "123", "quantity": "2"}) == {"id": "123", "quantity": "2"}


def test_repeated_field_keeps_last_value():
    form = [("id", "123"), ("properties[Color]", "Red"), ("properties[Color]", "Blue")]

    assert serialize_form(form)["properties[Color]"] == "Blue"


def test_id_check_uses_first_value():
    with pytest.raises(CartFormError):
        serialize_form([("id", ""), ("id", "123")])


@pytest.mark.parametrize("form", [{}, {"quantity": "1"}, {"id": ""}, {"id": None}])
def test_missing_id(form):
    with pytest.raises(CartFormError) as exc_info:
        serialize_form(form)

    assert exc_info.value.description == "Cart form missing required property ID"
