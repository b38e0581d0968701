from typing import Dict, Optional
from django.db import transaction
from django.utils import timezone
import logging

from orders.exceptions import OrderRejectedError, ResourceNotFoundError
from orders.models import Order, OrderItem
from tables.models import Table
from tables.services import TableAvailabilityService, TableOperation
from .item_service import OrderItemService
from .validation_service import OrderValidationService

logger = logging.getLogger(__name__)


class OrderService:
    """Core service for order lifecycle management - placing, editing, closing orders."""

    NOT_PENDING_MESSAGE = "Invalid data: Order is already COMPLETED or CANCELED"
    CREATE_STATUS_MESSAGE = "Invalid data: status should be PENDING"
    NOT_FOUND_MESSAGE = "Order not found."

    # Header fields copied straight from a validated payload onto the order
    HEADER_FIELDS = (
        "order_type",
        "payment_method",
        "subtotal",
        "rounding",
        "total_price",
        "description",
    )

    @staticmethod
    def is_mutable(order: Order) -> bool:
        """Only PENDING orders may be edited, checked out or canceled."""
        return order.status == Order.OrderStatus.PENDING

    @staticmethod
    def list_orders(tenant):
        return (
            Order.all_objects.filter(tenant=tenant)
            .select_related("table", "created_by")
            .prefetch_related("items__product", "taxes")
        )

    @staticmethod
    def get_order(tenant, order_id, lock: bool = False) -> Optional[Order]:
        queryset = Order.all_objects.filter(tenant=tenant, pk=order_id)
        if lock:
            queryset = queryset.select_for_update()
        return queryset.first()

    @staticmethod
    def _require_order(tenant, order_id, lock: bool = False) -> Order:
        order = OrderService.get_order(tenant, order_id, lock=lock)
        if order is None:
            raise ResourceNotFoundError(OrderService.NOT_FOUND_MESSAGE)
        return order

    @staticmethod
    def _ensure_mutable(order: Order) -> None:
        if not OrderService.is_mutable(order):
            logger.info(f"Rejected change to order {order.id} in status {order.status}")
            raise OrderRejectedError(OrderService.NOT_PENDING_MESSAGE)

    @staticmethod
    def _replace_taxes(order: Order, tax_ids) -> None:
        # Through rows are written directly; the related manager is tenant-filtered
        through = Order.taxes.through
        through.objects.filter(order=order).delete()
        through.objects.bulk_create(
            [through(order=order, tax_id=tax_id) for tax_id in dict.fromkeys(tax_ids)]
        )

    @staticmethod
    @transaction.atomic
    def create_order(tenant, payload: Dict, created_by=None) -> Order:
        """
        Places a new PENDING order on a table and marks the table OCCUPIED.

        Args:
            tenant: Tenant placing the order
            payload: Validated order data (table_id, order_type, payment_method,
                tax_ids, subtotal, rounding, total_price, description, order_items)
            created_by: Optional user placing the order

        Raises:
            ResourceNotFoundError: table does not exist
            TableConflictError: table is occupied
            OrderRejectedError: payload failed a consistency check
        """
        requested_status = payload.get("status")
        if requested_status and requested_status != Order.OrderStatus.PENDING:
            raise OrderRejectedError(OrderService.CREATE_STATUS_MESSAGE)

        transition = TableAvailabilityService.check_availability(
            tenant, payload["table_id"], TableOperation.CREATE
        )
        OrderValidationService.validate(tenant, payload)

        order = Order.all_objects.create(
            tenant=tenant,
            table=transition.table,
            created_by=created_by,
            status=Order.OrderStatus.PENDING,
            **{name: payload[name] for name in OrderService.HEADER_FIELDS if name in payload},
        )
        OrderService._replace_taxes(order, payload.get("tax_ids") or [])
        OrderItemService.create_items(order, payload["order_items"])
        TableAvailabilityService.set_status(transition.table, Table.TableStatus.OCCUPIED)

        logger.info(
            f"Order {order.id} placed on table {transition.table.name} "
            f"with {len(payload['order_items'])} items, total {order.total_price}"
        )
        return order

    @staticmethod
    @transaction.atomic
    def edit_order(tenant, order_id, payload: Dict) -> Order:
        """
        Replaces a PENDING order's header and items, optionally moving it to
        another table. Items are reconciled by product: new products are
        created, known ones updated in place, missing ones deleted.
        """
        order = OrderService._require_order(tenant, order_id, lock=True)
        OrderService._ensure_mutable(order)

        transition = TableAvailabilityService.check_availability(
            tenant, payload["table_id"], TableOperation.EDIT, order=order
        )
        OrderValidationService.validate(tenant, payload)

        reconciliation = OrderItemService.categorize_items(
            payload["order_items"], list(OrderItem.all_objects.filter(order=order))
        )

        order.table = transition.table
        for name in OrderService.HEADER_FIELDS:
            if name in payload:
                setattr(order, name, payload[name])
        order.save()
        OrderService._replace_taxes(order, payload.get("tax_ids") or [])
        OrderItemService.apply_reconciliation(order, reconciliation)

        if transition.is_move:
            TableAvailabilityService.release(transition.previous_table, exclude_order=order)
            logger.info(
                f"Order {order.id} moved from table {transition.previous_table.name} "
                f"to {transition.table.name}"
            )
        TableAvailabilityService.set_status(transition.table, Table.TableStatus.OCCUPIED)

        logger.info(f"Order {order.id} edited, total {order.total_price}")
        return order

    @staticmethod
    def _close_order(tenant, order_id, new_status: str) -> Order:
        order = OrderService._require_order(tenant, order_id, lock=True)
        OrderService._ensure_mutable(order)

        order.status = new_status
        order.completed_at = timezone.now()
        order.save(update_fields=["status", "completed_at", "updated_at"])

        table = TableAvailabilityService.get_table(tenant, order.table_id, lock=True)
        TableAvailabilityService.release(table, exclude_order=order)

        logger.info(f"Order {order.id} on table {table.name} is now {new_status}")
        return order

    @staticmethod
    @transaction.atomic
    def checkout_order(tenant, order_id) -> Order:
        """Marks a PENDING order COMPLETED and frees its table."""
        return OrderService._close_order(tenant, order_id, Order.OrderStatus.COMPLETED)

    @staticmethod
    @transaction.atomic
    def cancel_order(tenant, order_id) -> Order:
        """Marks a PENDING order CANCELED and frees its table."""
        return OrderService._close_order(tenant, order_id, Order.OrderStatus.CANCELED)

    @staticmethod
    @transaction.atomic
    def delete_order(tenant, order_id) -> None:
        """
        Removes an order and its items regardless of status.

        The table status is left untouched.
        """
        order = OrderService._require_order(tenant, order_id, lock=True)
        if order.is_pending and order.table.is_occupied:
            logger.warning(
                f"Deleting PENDING order {order.id}; table {order.table.name} stays OCCUPIED"
            )
        order.delete()
        logger.info(f"Order {order_id} deleted")
