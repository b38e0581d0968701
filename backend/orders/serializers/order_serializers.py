from rest_framework import serializers
from orders.models import Order
from core_backend.base import BaseModelSerializer

from .order_item_serializers import OrderItemSerializer, OrderItemInputSerializer


class OrderSerializer(BaseModelSerializer):
    table_name = serializers.CharField(source="table.name", read_only=True)
    tax_ids = serializers.PrimaryKeyRelatedField(source="taxes", many=True, read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    created_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "table",
            "table_name",
            "status",
            "order_type",
            "payment_method",
            "tax_ids",
            "subtotal",
            "rounding",
            "total_price",
            "description",
            "items",
            "created_by",
            "created_at",
            "updated_at",
            "completed_at",
        ]
        read_only_fields = fields
        select_related_fields = ["table", "created_by"]
        prefetch_related_fields = ["items__product", "taxes"]


# --- Service-driven Serializers ---

class OrderWriteSerializer(serializers.Serializer):
    """
    Shape check for create and edit payloads.

    Only types and ranges are checked here; table occupancy, item prices,
    tax ids and totals are verified by OrderService inside its transaction.
    """

    table_id = serializers.IntegerField(min_value=1)
    order_type = serializers.ChoiceField(choices=Order.OrderType.choices)
    payment_method = serializers.ChoiceField(choices=Order.PaymentMethod.choices)
    status = serializers.ChoiceField(choices=Order.OrderStatus.choices, required=False)
    tax_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False, default=list
    )
    subtotal = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    rounding = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, default=0
    )
    total_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    order_items = OrderItemInputSerializer(many=True, allow_empty=False)
