from rest_framework import serializers
from orders.models import OrderItem
from core_backend.base import BaseModelSerializer


class OrderItemSerializer(BaseModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "product", "product_name", "quantity", "price", "total_price"]
        read_only_fields = fields
        select_related_fields = ["product"]


class OrderItemInputSerializer(serializers.Serializer):
    """One requested line of an order: product, quantity and unit price."""

    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
