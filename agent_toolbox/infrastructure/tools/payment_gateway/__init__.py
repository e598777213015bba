from .payment_gateway import PaymentGatewayTool

__all__ = ["PaymentGatewayTool"]
