from rest_framework import serializers

from core_backend.base.serializers import BaseModelSerializer
from tenant.serializers import TenantSerializerMixin
from .models import Category, Tax, Product, BundleItem
from .services import ProductService


class CategorySerializer(TenantSerializerMixin, BaseModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "description", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]


class TaxSerializer(TenantSerializerMixin, BaseModelSerializer):
    class Meta:
        model = Tax
        fields = [
            "id",
            "name",
            "rate",
            "is_fixed",
            "is_inclusive",
            "description",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]


class TaxCalculationSerializer(serializers.Serializer):
    """Input for the tax preview endpoint."""

    total_item_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    tax_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=True)

    def validate_tax_ids(self, value):
        if len(set(value)) != len(value):
            raise serializers.ValidationError("tax_ids should not contain duplicate values")
        return value


class BundleItemSerializer(serializers.ModelSerializer):
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = BundleItem
        fields = ["product_id", "product_name", "quantity"]


class ProductSerializer(TenantSerializerMixin, BaseModelSerializer):
    """
    Product with its bundle composition.

    ``bundle_items`` is write-only input (a list of {"product_id", "quantity"});
    the stored composition is returned as ``components``.
    """

    category = serializers.PrimaryKeyRelatedField(queryset=Category.all_objects.all())
    bundle_items = serializers.ListField(
        child=serializers.DictField(), write_only=True, required=False
    )
    components = BundleItemSerializer(source="bundle_items", many=True, read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "category",
            "name",
            "unit",
            "price",
            "track_stock",
            "stock",
            "product_type",
            "bundle_items",
            "components",
            "description",
            "image_link",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]
        select_related_fields = ["category"]
        prefetch_related_fields = ["bundle_items__product"]

    def create(self, validated_data):
        return ProductService.create_product(
            tenant=self.context["request"].tenant, **validated_data
        )

    def update(self, instance, validated_data):
        return ProductService.update_product(instance, **validated_data)
