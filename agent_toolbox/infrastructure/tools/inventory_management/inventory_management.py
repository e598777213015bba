# agent_toolbox/infrastructure/tools/inventory_management/inventory_management.py

import logging
import threading
from typing import Dict, Mapping, Optional, Union

from agent_toolbox.abstractions.dto.tools import ErrorMessage
from ..tool_base import Tool

logger = logging.getLogger(__name__)

DEFAULT_INVENTORY: Dict[str, int] = {
    "A3045809": 10,
    "B9384509": 5,
    "Z0394853": 2,
    "X3048509": 3,
    "Y3048509": 1,
    "L3048509": 0,
}


class InventoryManagementTool(Tool):
    """
    In-memory stock levels keyed by SKU.

    Unknown SKUs count as zero stock. The map lives as long as the instance
    and is guarded by a lock, so one instance can serve several sessions.
    """

    def __init__(self, inventory: Optional[Mapping[str, int]] = None):
        super().__init__()
        seed = DEFAULT_INVENTORY if inventory is None else inventory
        for sku, quantity in seed.items():
            if not _is_stock_level(quantity):
                raise ValueError(f"Inventory quantity for '{sku}' must be a non-negative integer, got {quantity!r}")
        self._inventory: Dict[str, int] = dict(seed)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "inventory_management"

    @property
    def description(self) -> str:
        return (
            "Checks whether enough stock of a product (by SKU) is available "
            "and sets the stock level of a product."
        )

    @property
    def inventory(self) -> Dict[str, int]:
        """Snapshot of current stock levels."""
        with self._lock:
            return dict(self._inventory)

    def check_inventory(self, *, sku: str, quantity: int) -> bool:
        with self._lock:
            available = self._inventory.get(sku, 0)
        logger.debug(f"Stock check {sku}: {available} available, {quantity} requested")
        return available >= quantity

    def update_inventory(self, *, sku: str, quantity: int) -> Union[int, ErrorMessage]:
        """Set the stock of ``sku`` to exactly ``quantity``; returns the new level."""
        if not _is_stock_level(quantity):
            logger.warning(f"Rejected inventory update for {sku}: invalid quantity {quantity!r}")
            return self.failure("invalid_quantity", f"Invalid quantity: {quantity}")
        with self._lock:
            previous = self._inventory.get(sku)
            self._inventory[sku] = quantity
        logger.info(f"Inventory for {sku} set to {quantity} (was {previous})")
        return quantity


def _is_stock_level(quantity: object) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity >= 0
