"""Tests for the ShippingServiceTool."""

import pytest

from agent_toolbox.abstractions.dto.tools import ErrorMessage
from agent_toolbox.infrastructure.tools.shipping_service import SHIPPING_PROVIDERS


def test_operations_are_annotated(shipping_tool):
    assert shipping_tool.name == "shipping_service"
    assert [op.name for op in shipping_tool.list_operations()] == ["create_shipping_label", "create_return_label"]


@pytest.mark.parametrize("provider", SHIPPING_PROVIDERS)
def test_labels_for_supported_providers(shipping_tool, provider):
    assert shipping_tool.create_shipping_label(customer_name="Ada", address="1 Main St", provider=provider) is True
    assert shipping_tool.create_return_label(customer_name="Ada", address="1 Main St", provider=provider) is True


@pytest.mark.parametrize("provider", ["royal_mail", "UPS", ""])
def test_unknown_provider_returns_message(shipping_tool, provider):
    result = shipping_tool.create_shipping_label(customer_name="Ada", address="1 Main St", provider=provider)
    assert result == "Invalid provider"
    assert isinstance(result, ErrorMessage)
    assert result.kind == "invalid_provider"


def test_blank_address_returns_message(shipping_tool):
    result = shipping_tool.create_return_label(customer_name="Ada", address="  ", provider="dhl")
    assert result == "Invalid address"
    assert result.kind == "invalid_address"


def test_invoke(shipping_tool):
    ok = shipping_tool.invoke(
        "create_shipping_label", {"customer_name": "Ada", "address": "1 Main St", "provider": "fedex"}
    )
    assert ok.ok and ok.observation == "true"

    bad = shipping_tool.invoke(
        "create_return_label", {"customer_name": "Ada", "address": "1 Main St", "provider": "pigeon"}
    )
    assert not bad.ok
    assert bad.error_kind == "invalid_provider"
    assert bad.observation == "Invalid provider"

    missing = shipping_tool.invoke("create_return_label", {"customer_name": "Ada", "provider": "ups"})
    assert missing.error_kind == "invalid_arguments"
