import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from core_backend.base.viewsets import BaseViewSet
from users.permissions import ReadOnlyForCashiers
from orders.calculators import TaxCalculator
from .models import Category, Product, Tax
from .serializers import (
    CategorySerializer,
    ProductSerializer,
    TaxSerializer,
    TaxCalculationSerializer,
)

logger = logging.getLogger(__name__)


class CategoryViewSet(BaseViewSet):
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = BaseViewSet.permission_classes + [ReadOnlyForCashiers]
    search_fields = ["name"]
    ordering = ["name"]


class ProductViewSet(BaseViewSet):
    """
    Catalog products. Writing a BUNDLE requires its component list; the
    composition is validated and stored by ProductService.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = BaseViewSet.permission_classes + [ReadOnlyForCashiers]
    filterset_fields = ["category", "product_type"]
    search_fields = ["name"]
    ordering = ["name"]

    def get_queryset(self):
        return (
            super()
            .get_queryset()
            .select_related("category")
            .prefetch_related("bundle_items__product")
        )


class TaxViewSet(BaseViewSet):
    queryset = Tax.objects.all()
    serializer_class = TaxSerializer
    permission_classes = BaseViewSet.permission_classes + [ReadOnlyForCashiers]
    ordering = ["name"]

    def get_permissions(self):
        # Previewing a total is a read, even though it is a POST
        if self.action == "calculate":
            return [permission() for permission in BaseViewSet.permission_classes]
        return super().get_permissions()

    @action(detail=False, methods=["post"], url_path="calculate")
    def calculate(self, request):
        """
        Preview the after-tax total and cash rounding for an item total.
        """
        serializer = TaxCalculationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        breakdown = TaxCalculator.calculate(
            request.tenant,
            serializer.validated_data["total_item_price"],
            serializer.validated_data["tax_ids"],
        )
        return Response(breakdown.as_dict(), status=status.HTTP_200_OK)
