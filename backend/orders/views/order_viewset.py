from rest_framework import status
from rest_framework.response import Response
from rest_framework.request import Request
import logging

from core_backend.base import BaseViewSet
from orders.models import Order
from orders.serializers import OrderSerializer, OrderWriteSerializer
from orders.services import OrderService

logger = logging.getLogger(__name__)


# Import action mixins
from .status_actions import StatusActionsMixin


class OrderViewSet(StatusActionsMixin, BaseViewSet):
    """
    ViewSet for placing and managing table orders.

    Writes go through OrderService so that table occupancy, item prices,
    taxes and totals are checked in the same transaction as the write:
    - POST /orders/                  place an order on a table
    - PUT|PATCH /orders/{id}/        replace a PENDING order (full payload)
    - POST /orders/{id}/checkout/    complete a PENDING order
    - POST /orders/{id}/cancel/      cancel a PENDING order
    - DELETE /orders/{id}/           remove an order
    """
    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    lookup_value_regex = "[0-9a-fA-F-]{36}"
    filterset_fields = ["status", "table", "order_type", "payment_method"]
    ordering_fields = ["created_at", "updated_at", "total_price"]
    ordering = ["-created_at"]

    def get_queryset(self):
        return OrderService.list_orders(self.request.tenant)

    def create(self, request: Request, *args, **kwargs) -> Response:
        write_serializer = OrderWriteSerializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        order = OrderService.create_order(
            request.tenant, write_serializer.validated_data, created_by=request.user
        )
        return Response(self.get_serializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, *args, **kwargs) -> Response:
        # PATCH is accepted but, like PUT, must carry the whole order
        write_serializer = OrderWriteSerializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        order = OrderService.edit_order(
            request.tenant, kwargs[self.lookup_field], write_serializer.validated_data
        )
        return Response(self.get_serializer(order).data)

    def destroy(self, request: Request, *args, **kwargs) -> Response:
        OrderService.delete_order(request.tenant, kwargs[self.lookup_field])
        return Response(status=status.HTTP_204_NO_CONTENT)
