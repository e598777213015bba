from .inventory_management import InventoryManagementTool, DEFAULT_INVENTORY

__all__ = ["InventoryManagementTool", "DEFAULT_INVENTORY"]
