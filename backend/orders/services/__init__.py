"""
Orders services package - the order placement pipeline.

- OrderService: Order lifecycle (create, edit, checkout, cancel, delete)
- OrderItemService: Item reconciliation and persistence
- OrderValidationService: Payload consistency checks (items, taxes, totals)
"""

from .order_service import OrderService
from .item_service import OrderItemService, ItemReconciliation
from .validation_service import OrderValidationService

__all__ = [
    'OrderService',
    'OrderItemService',
    'ItemReconciliation',
    'OrderValidationService',
]
