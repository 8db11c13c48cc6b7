"""Request schema parsing and the status vocabulary."""

import math

import pytest
from pydantic import ValidationError

from orderdesk.catalog.schemas import ItemInput, ItemView
from orderdesk.orders.schemas import LineItemInput, NewOrder, OrderSummary, StatusChange
from orderdesk.orders.status import INITIAL_STATUS, OrderStatus


def test_vocabulary_is_fixed():
    assert [s.value for s in OrderStatus] == ["Pending", "InPreparation", "Ready"]
    assert INITIAL_STATUS is OrderStatus.PENDING


@pytest.mark.parametrize("value", ["Pending", "InPreparation", "Ready"])
def test_status_change_accepts_members(value):
    assert StatusChange.model_validate({"estado": value}).status.value == value


@pytest.mark.parametrize("value", ["ready", "READY", "In Preparation", "entregado", "", None, 2])
def test_status_change_is_case_sensitive_and_strict(value):
    with pytest.raises(ValidationError):
        StatusChange.model_validate({"estado": value})


def test_new_order_from_api_fields():
    order = NewOrder.model_validate(
        {"cliente": " Ana ", "productos": [{"nombre": "Coffee", "precio": 3.5}, {"nombre": "Muffin", "precio": 2}]}
    )

    assert order == NewOrder(
        customer_name="Ana",
        items=[LineItemInput(name="Coffee", price=3.5), LineItemInput(name="Muffin", price=2.0)],
    )


def test_line_item_name_is_kept_as_submitted():
    order = NewOrder.model_validate({"cliente": "Ana", "productos": [{"nombre": "  Coffee ", "precio": 3.5}]})

    assert order.items[0].name == "  Coffee "


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_line_item_name_must_not_be_blank(name):
    with pytest.raises(ValidationError):
        LineItemInput.model_validate({"nombre": name, "precio": 1})


@pytest.mark.parametrize("price", [math.nan, math.inf, -math.inf, -0.01, "3.5", True, None])
def test_price_must_be_a_finite_non_negative_number(price):
    with pytest.raises(ValidationError):
        LineItemInput.model_validate({"nombre": "Coffee", "precio": price})
    with pytest.raises(ValidationError):
        ItemInput.model_validate({"nombre": "Coffee", "precio": price})


def test_new_order_needs_at_least_one_product():
    with pytest.raises(ValidationError):
        NewOrder.model_validate({"cliente": "Ana", "productos": []})


def test_new_order_ignores_unknown_product_fields():
    order = NewOrder.model_validate({"cliente": "Ana", "productos": [{"nombre": "Tea", "precio": 1, "id": 4}]})

    assert order.items == [LineItemInput(name="Tea", price=1.0)]


def test_item_input_requires_name_and_price():
    assert ItemInput.model_validate({"nombre": "Coffee", "precio": 0}) == ItemInput(name="Coffee", price=0.0)
    with pytest.raises(ValidationError):
        ItemInput.model_validate({"nombre": "Coffee"})


def test_response_schemas_dump_api_field_names():
    summary = OrderSummary(id=3, customer_name="Ana", status="Ready", items=[LineItemInput(name="Tea", price=2.0)])

    assert summary.model_dump(by_alias=True) == {
        "id": 3,
        "cliente": "Ana",
        "estado": "Ready",
        "productos": [{"nombre": "Tea", "precio": 2.0}],
    }
    assert ItemView(id=1, name="Tea", price=2.0).model_dump(by_alias=True) == {"id": 1, "nombre": "Tea", "precio": 2.0}
