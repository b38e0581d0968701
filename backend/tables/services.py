import enum
import logging
from dataclasses import dataclass
from typing import Optional

from orders.exceptions import ResourceNotFoundError, TableConflictError
from .models import Table

logger = logging.getLogger(__name__)


class TableOperation(enum.Enum):
    CREATE = "CREATE"
    EDIT = "EDIT"


@dataclass(frozen=True)
class TableTransition:
    """Outcome of an availability check: where the order goes, and where it leaves."""

    table: Table
    previous_table: Optional[Table] = None

    @property
    def is_move(self) -> bool:
        return self.previous_table is not None


class TableAvailabilityService:
    """
    Guards table occupancy for order creation and edits.

    The check locks the table rows it reads (SELECT ... FOR UPDATE), so it must
    run inside the caller's ``transaction.atomic`` block. Two concurrent
    requests claiming the same AVAILABLE table then serialize on the row lock,
    and the second one sees the table as OCCUPIED.
    """

    @staticmethod
    def get_table(tenant, table_id, lock: bool = False) -> Optional[Table]:
        queryset = Table.all_objects.filter(tenant=tenant, pk=table_id)
        if lock:
            queryset = queryset.select_for_update()
        return queryset.first()

    @staticmethod
    def check_availability(tenant, table_id, operation: TableOperation, order=None) -> TableTransition:
        """
        Check that the requested table can take the order.

        Args:
            tenant: Tenant owning the table and order
            table_id: Requested table id
            operation: TableOperation.CREATE or TableOperation.EDIT
            order: The order being edited (EDIT only)

        Returns:
            TableTransition: the locked target table and, for a move, the
            table the order is leaving

        Raises:
            ResourceNotFoundError: table missing, or no order has used the table (EDIT)
            TableConflictError: table is occupied by another order
        """
        table = TableAvailabilityService.get_table(tenant, table_id, lock=True)
        if table is None:
            raise ResourceNotFoundError("Table does not exist.")

        if operation == TableOperation.CREATE:
            if table.is_occupied:
                raise TableConflictError(f"{table.name} is already occupied.", table=table)
            return TableTransition(table=table)

        from orders.models import Order

        last_order = (
            Order.all_objects.filter(tenant=tenant, table=table)
            .order_by("-updated_at")
            .first()
        )
        if last_order is None:
            raise ResourceNotFoundError("No previous order found.")

        current_table_id = order.table_id if order is not None else last_order.table_id
        if current_table_id == table.pk:
            # Staying on the same table is always allowed
            return TableTransition(table=table)

        if table.is_occupied:
            raise TableConflictError(
                f"Cannot move to {table.name}, it is already occupied.", table=table
            )

        previous_table = TableAvailabilityService.get_table(tenant, current_table_id, lock=True)
        return TableTransition(table=table, previous_table=previous_table)

    @staticmethod
    def set_status(table: Table, status: str) -> Table:
        if table.status != status:
            logger.info(f"Table {table.pk} ({table.name}): {table.status} -> {status}")
            table.status = status
            table.save(update_fields=["status", "updated_at"])
        return table

    @staticmethod
    def release(table: Table, exclude_order=None) -> Table:
        """
        Mark a table AVAILABLE unless another PENDING order still sits on it.
        """
        from orders.models import Order

        still_used = Order.all_objects.filter(
            tenant_id=table.tenant_id, table=table, status=Order.OrderStatus.PENDING
        )
        if exclude_order is not None:
            still_used = still_used.exclude(pk=exclude_order.pk)

        if still_used.exists():
            return table
        return TableAvailabilityService.set_status(table, Table.TableStatus.AVAILABLE)
