"""
Orders serializers package - modular serializer layer.
"""

# Order item serializers
from .order_item_serializers import (
    OrderItemSerializer,
    OrderItemInputSerializer,
)

# Order serializers
from .order_serializers import (
    OrderSerializer,
    OrderWriteSerializer,
)

__all__ = [
    'OrderItemSerializer',
    'OrderItemInputSerializer',
    'OrderSerializer',
    'OrderWriteSerializer',
]
