from dataclasses import dataclass, field
from typing import Dict, List, Sequence
import logging

from orders.calculators import to_decimal
from orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


@dataclass
class ItemReconciliation:
    """
    Result of diffing a requested item list against the persisted one.

    - to_create: requested items whose product is not on the order yet
    - to_update: {"id", "product_id", "quantity", "price"} for known products
      whose quantity or price changed, keyed by the persisted row id and
      carrying the requested values
    - to_delete: persisted rows whose product is no longer requested
    """

    to_create: List[Dict] = field(default_factory=list)
    to_update: List[Dict] = field(default_factory=list)
    to_delete: List[OrderItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.to_create or self.to_update or self.to_delete)


class OrderItemService:
    """Service for reconciling and persisting the items of an order."""

    @staticmethod
    def categorize_items(
        requested_items: Sequence[Dict], persisted_items: Sequence[OrderItem]
    ) -> ItemReconciliation:
        """
        Split requested items into create/update/delete buckets by product.

        Pure function: nothing is read from or written to the database.
        Requested items are mappings with product_id, quantity and price;
        persisted items are OrderItem rows (or anything with id, product_id,
        quantity and price attributes).
        """
        persisted_by_product = {item.product_id: item for item in persisted_items}
        requested_product_ids = set()
        result = ItemReconciliation()

        for requested in requested_items:
            product_id = requested["product_id"]
            requested_product_ids.add(product_id)
            persisted = persisted_by_product.get(product_id)
            if persisted is None:
                result.to_create.append(dict(requested))
            elif (
                persisted.quantity != requested["quantity"]
                or persisted.price != to_decimal(requested["price"])
            ):
                result.to_update.append(
                    {
                        "id": persisted.id,
                        "product_id": product_id,
                        "quantity": requested["quantity"],
                        "price": requested["price"],
                    }
                )

        result.to_delete = [
            item for item in persisted_items if item.product_id not in requested_product_ids
        ]
        return result

    @staticmethod
    def create_items(order: Order, items: Sequence[Dict]) -> List[OrderItem]:
        """Bulk-create order items. Caller owns the transaction."""
        return OrderItem.all_objects.bulk_create(
            [
                OrderItem(
                    tenant_id=order.tenant_id,
                    order=order,
                    product_id=item["product_id"],
                    quantity=item["quantity"],
                    price=item["price"],
                )
                for item in items
            ]
        )

    @staticmethod
    def apply_reconciliation(order: Order, reconciliation: ItemReconciliation) -> None:
        """Persist a reconciliation result. Caller owns the transaction."""
        if reconciliation.to_delete:
            OrderItem.all_objects.filter(
                order=order, pk__in=[item.pk for item in reconciliation.to_delete]
            ).delete()

        for item in reconciliation.to_update:
            OrderItem.all_objects.filter(order=order, pk=item["id"]).update(
                quantity=item["quantity"], price=item["price"]
            )

        if reconciliation.to_create:
            OrderItemService.create_items(order, reconciliation.to_create)

        logger.debug(
            f"Order {order.id} items reconciled: "
            f"{len(reconciliation.to_create)} created, "
            f"{len(reconciliation.to_update)} updated, "
            f"{len(reconciliation.to_delete)} deleted"
        )
