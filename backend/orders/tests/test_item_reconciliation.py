"""
Order Item Reconciliation Tests

Requested items are matched to persisted rows by product id only.
"""
import random
from decimal import Decimal
from types import SimpleNamespace

import pytest

from orders.services import OrderItemService


def persisted(row_id, product_id, quantity=1, price='10.00'):
    return SimpleNamespace(id=row_id, product_id=product_id, quantity=quantity, price=Decimal(price))


def requested(product_id, quantity=1, price='10.00'):
    return {'product_id': product_id, 'quantity': quantity, 'price': Decimal(price)}


class TestCategorizeItems:

    def test_split_into_create_update_delete(self):
        rows = [persisted(11, 1), persisted(12, 2), persisted(13, 3)]

        result = OrderItemService.categorize_items(
            [requested(2, quantity=4), requested(3), requested(4)], rows
        )

        assert [item['product_id'] for item in result.to_create] == [4]
        assert [item['product_id'] for item in result.to_update] == [2], "Unchanged product 3 is left alone"
        assert [item.id for item in result.to_delete] == [11]

    def test_update_carries_persisted_id_and_requested_values(self):
        rows = [persisted(42, 7, quantity=1, price='3.00')]

        result = OrderItemService.categorize_items([requested(7, quantity=5, price='3.50')], rows)

        assert result.to_update == [
            {'id': 42, 'product_id': 7, 'quantity': 5, 'price': Decimal('3.50')}
        ]

    def test_empty_request_deletes_everything(self):
        rows = [persisted(1, 1), persisted(2, 2)]

        result = OrderItemService.categorize_items([], rows)

        assert result.to_create == []
        assert result.to_update == []
        assert len(result.to_delete) == 2

    def test_nothing_persisted_creates_everything(self):
        result = OrderItemService.categorize_items([requested(1), requested(2)], [])

        assert len(result.to_create) == 2
        assert not result.to_update
        assert not result.to_delete

    def test_identical_lists_change_nothing(self):
        rows = [persisted(1, 1), persisted(2, 2)]

        result = OrderItemService.categorize_items([requested(1), requested(2)], rows)

        assert result.is_empty

    def test_price_change_alone_is_an_update(self):
        rows = [persisted(9, 1, quantity=2, price='10.00')]

        result = OrderItemService.categorize_items([requested(1, quantity=2, price='12.00')], rows)

        assert [item['id'] for item in result.to_update] == [9]


def random_item_lists(seed, count):
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        product_ids = list(range(1, 13))
        rows = [
            persisted(100 + product_id, product_id, rng.randint(1, 3), rng.choice(['5.00', '10.00']))
            for product_id in rng.sample(product_ids, rng.randint(0, 8))
        ]
        items = [
            requested(product_id, rng.randint(1, 3), rng.choice(['5.00', '10.00']))
            for product_id in rng.sample(product_ids, rng.randint(0, 8))
        ]
        cases.append((items, rows))
    return cases


class TestCategorizeItemsPartition:
    """Every product lands in at most one bucket, decided by the two lists alone"""

    @pytest.mark.parametrize("items,rows", random_item_lists(seed=11, count=200))
    def test_buckets_partition_products(self, items, rows):
        result = OrderItemService.categorize_items(items, rows)

        requested_ids = {item['product_id'] for item in items}
        persisted_by_product = {row.product_id: row for row in rows}
        changed_ids = {
            item['product_id'] for item in items
            if item['product_id'] in persisted_by_product
            and (
                persisted_by_product[item['product_id']].quantity != item['quantity']
                or persisted_by_product[item['product_id']].price != item['price']
            )
        }

        assert {item['product_id'] for item in result.to_create} == requested_ids - set(persisted_by_product)
        assert {row.product_id for row in result.to_delete} == set(persisted_by_product) - requested_ids
        assert {item['product_id'] for item in result.to_update} == changed_ids
        assert all(
            item['id'] == persisted_by_product[item['product_id']].id for item in result.to_update
        )
