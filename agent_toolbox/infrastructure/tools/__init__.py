"""
Tools package: the tool base class, the bundled tools and their registry.
"""

from .errors import ToolError, ToolDefinitionError
from .tool_base import Tool
from .file_system import FileSystemTool
from .inventory_management import InventoryManagementTool
from .payment_gateway import PaymentGatewayTool
from .shipping_service import ShippingServiceTool
from .tool_manager import ToolManager
