# agent_toolbox/infrastructure/tools/shipping_service/shipping_service.py

import logging
from typing import Union

from agent_toolbox.abstractions.dto.tools import ErrorMessage
from ..tool_base import Tool

logger = logging.getLogger(__name__)

SHIPPING_PROVIDERS = ("ups", "fedex", "usps", "dhl")


class ShippingServiceTool(Tool):
    """
    Simulated label service for outbound shipments and customer returns.

    Only the carrier is checked. Addresses must be non-blank; they are not
    verified against a postal database.
    """

    @property
    def name(self) -> str:
        return "shipping_service"

    @property
    def description(self) -> str:
        return (
            "Creates shipping labels for orders and return labels for customers "
            f"with one of the supported carriers ({', '.join(SHIPPING_PROVIDERS)})."
        )

    def create_shipping_label(self, *, customer_name: str, address: str, provider: str) -> Union[bool, ErrorMessage]:
        return self._create_label("shipping", customer_name, address, provider)

    def create_return_label(self, *, customer_name: str, address: str, provider: str) -> Union[bool, ErrorMessage]:
        return self._create_label("return", customer_name, address, provider)

    def _create_label(self, label_type: str, customer_name: str, address: str, provider: str) -> Union[bool, ErrorMessage]:
        if not address.strip():
            return self.failure("invalid_address", "Invalid address")
        if provider not in SHIPPING_PROVIDERS:
            logger.warning(f"Rejected {label_type} label for {customer_name}: unknown provider {provider!r}")
            return self.failure("invalid_provider", "Invalid provider")
        logger.info(f"Created {label_type} label for {customer_name} via {provider}")
        return True
