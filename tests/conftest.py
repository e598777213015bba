"""
Shared test fixtures for tool testing.

Tools are built with explicit arguments so a developer's .env (for example a
FILE_SYSTEM_ROOT) never changes what the tests see.
"""

import os
import sys

import pytest
from dotenv import load_dotenv

# Ensure project root is on sys.path so 'agent_toolbox' imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

# Load environment variables
load_dotenv()

from agent_toolbox.infrastructure.tools.file_system import FileSystemTool
from agent_toolbox.infrastructure.tools.inventory_management import InventoryManagementTool
from agent_toolbox.infrastructure.tools.payment_gateway import PaymentGatewayTool
from agent_toolbox.infrastructure.tools.shipping_service import ShippingServiceTool
from agent_toolbox.infrastructure.tools.tool_manager import ToolManager


@pytest.fixture
def file_tool():
    """FileSystemTool without a sandbox root."""
    return FileSystemTool(root_dir="", encoding="utf-8")


@pytest.fixture
def sandboxed_file_tool(tmp_path):
    """FileSystemTool confined to a temporary directory."""
    return FileSystemTool(root_dir=str(tmp_path), encoding="utf-8")


@pytest.fixture
def inventory_tool():
    """InventoryManagementTool seeded with the default catalog."""
    return InventoryManagementTool()


@pytest.fixture
def payment_tool():
    """PaymentGatewayTool with a fixed key and currency."""
    return PaymentGatewayTool(api_key="test-key", currency="USD")


@pytest.fixture
def shipping_tool():
    """ShippingServiceTool."""
    return ShippingServiceTool()


@pytest.fixture
def manager(file_tool, inventory_tool, payment_tool, shipping_tool):
    """ToolManager holding the fixture tools, in a known order."""
    return ToolManager(tools=[file_tool, inventory_tool, payment_tool, shipping_tool], register_defaults=False)
