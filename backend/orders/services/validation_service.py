from decimal import Decimal
from typing import Dict, List, Sequence
import logging

from orders.calculators import TaxCalculator, to_decimal
from orders.exceptions import OrderRejectedError
from products.models import Product, Tax

logger = logging.getLogger(__name__)


class OrderValidationService:
    """
    Consistency checks run on an order payload before anything is written.

    Checks run in a fixed order and stop at the first failure:
    duplicate items, item authenticity, tax ids, then subtotal and total.
    All amount comparisons are exact Decimal equality.
    """

    DUPLICATE_ITEMS = "Duplicate order items found"
    INVALID_ITEM = "Invalid order item found"
    INVALID_TAX = "Invalid tax found"
    SUBTOTAL_MISMATCH = "Subtotal price does not match"
    TOTAL_MISMATCH = "Total price does not match"

    @staticmethod
    def find_duplicate_product_ids(order_items: Sequence[Dict]) -> List[int]:
        seen = set()
        duplicates = []
        for item in order_items:
            product_id = item["product_id"]
            if product_id in seen and product_id not in duplicates:
                duplicates.append(product_id)
            seen.add(product_id)
        return duplicates

    @staticmethod
    def compute_subtotal(order_items: Sequence[Dict]) -> Decimal:
        return sum(
            (to_decimal(item["price"]) * item["quantity"] for item in order_items),
            Decimal('0'),
        )

    @staticmethod
    def check_duplicate_items(order_items: Sequence[Dict]) -> None:
        duplicates = OrderValidationService.find_duplicate_product_ids(order_items)
        if duplicates:
            logger.info(f"Rejected order payload with duplicate products {duplicates}")
            raise OrderRejectedError(OrderValidationService.DUPLICATE_ITEMS)

    @staticmethod
    def check_item_authenticity(tenant, order_items: Sequence[Dict]) -> None:
        """Every item must reference a tenant product at its current price."""
        product_ids = {item["product_id"] for item in order_items}
        products = Product.all_objects.filter(tenant=tenant, pk__in=product_ids).in_bulk()

        for item in order_items:
            product = products.get(item["product_id"])
            if product is None or product.price != to_decimal(item["price"]):
                logger.info(
                    f"Rejected order item for product {item['product_id']}: "
                    f"unknown product or stale price {item['price']}"
                )
                raise OrderRejectedError(OrderValidationService.INVALID_ITEM)

    @staticmethod
    def check_tax_ids(tenant, tax_ids: Sequence[int]) -> None:
        """Every id must resolve; a repeated id also fails the count."""
        tax_ids = list(tax_ids or [])
        if not tax_ids:
            return
        found = Tax.all_objects.filter(tenant=tenant, pk__in=tax_ids).count()
        if found != len(tax_ids):
            logger.info(f"Rejected tax ids {tax_ids}: only {found} resolved")
            raise OrderRejectedError(OrderValidationService.INVALID_TAX)

    @staticmethod
    def check_totals(tenant, payload: Dict) -> None:
        order_items = payload["order_items"]
        subtotal = OrderValidationService.compute_subtotal(order_items)
        if to_decimal(payload["subtotal"]) != subtotal:
            raise OrderRejectedError(OrderValidationService.SUBTOTAL_MISMATCH)

        breakdown = TaxCalculator.calculate(tenant, subtotal, payload.get("tax_ids") or [])
        expected_total = breakdown.before_rounding_tax + to_decimal(payload.get("rounding", 0))
        if to_decimal(payload["total_price"]) != expected_total:
            logger.info(
                f"Total mismatch: submitted {payload['total_price']}, expected {expected_total}"
            )
            raise OrderRejectedError(OrderValidationService.TOTAL_MISMATCH)

    @staticmethod
    def validate(tenant, payload: Dict) -> None:
        order_items = payload["order_items"]
        OrderValidationService.check_duplicate_items(order_items)
        OrderValidationService.check_item_authenticity(tenant, order_items)
        OrderValidationService.check_tax_ids(tenant, payload.get("tax_ids") or [])
        OrderValidationService.check_totals(tenant, payload)
