from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.request import Request

from orders.services import OrderService


class StatusActionsMixin:
    """
    Mixin for order status transition actions

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=True, methods=["post"], url_path="checkout")
    def checkout(self, request: Request, pk=None) -> Response:
        """Completes a PENDING order and frees its table."""
        order = OrderService.checkout_order(request.tenant, pk)
        return Response(self.get_serializer(order).data)

    @action(detail=True, methods=["post"], url_path="cancel")
    def cancel(self, request: Request, pk=None) -> Response:
        """Cancels a PENDING order and frees its table."""
        order = OrderService.cancel_order(request.tenant, pk)
        return Response(self.get_serializer(order).data)
