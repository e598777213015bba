from .shipping_service import ShippingServiceTool, SHIPPING_PROVIDERS

__all__ = ["ShippingServiceTool", "SHIPPING_PROVIDERS"]
