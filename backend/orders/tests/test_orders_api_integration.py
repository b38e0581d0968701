"""
Orders API Integration Tests

End-to-end checks through the REST layer: status codes, error bodies,
tenant isolation and the checkout/cancel actions.
"""
import pytest
from decimal import Decimal

from orders.models import Order
from tables.models import Table


def as_json(payload):
    """Decimals go over the wire as strings."""
    data = dict(payload)
    for key in ('subtotal', 'rounding', 'total_price'):
        data[key] = str(data[key])
    data['order_items'] = [
        dict(item, price=str(item['price'])) for item in payload['order_items']
    ]
    return data


@pytest.mark.django_db
class TestOrderEndpoints:

    def test_place_order(self, authenticated_client_tenant_a, order_payload, table_tenant_a):
        response = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        )

        assert response.status_code == 201, response.data
        assert response.data['status'] == 'PENDING'
        assert response.data['table'] == table_tenant_a.id
        assert response.data['total_price'] == '22.00'
        assert len(response.data['items']) == 1
        table_tenant_a.refresh_from_db()
        assert table_tenant_a.status == Table.TableStatus.OCCUPIED

    def test_cashier_can_place_order(self, cashier_client_tenant_a, order_payload):
        response = cashier_client_tenant_a.post('/api/orders/', as_json(order_payload), format='json')

        assert response.status_code == 201

    def test_occupied_table_is_conflict(self, authenticated_client_tenant_a, order_payload):
        authenticated_client_tenant_a.post('/api/orders/', as_json(order_payload), format='json')

        response = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        )

        assert response.status_code == 409
        assert response.data == {"error": "Table 1 is already occupied.", "code": "table_conflict"}

    def test_missing_table_is_not_found(self, authenticated_client_tenant_a, order_payload):
        order_payload['table_id'] = 999999

        response = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        )

        assert response.status_code == 404
        assert response.data['error'] == "Table does not exist."

    def test_inconsistent_payload_is_rejected(self, authenticated_client_tenant_a, order_payload):
        order_payload['order_items'][0]['price'] = Decimal('8.00')

        response = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        )

        assert response.status_code == 403
        assert response.data['error'] == "Invalid order item found"

    def test_malformed_payload_is_bad_request(self, authenticated_client_tenant_a, order_payload):
        payload = as_json(order_payload)
        del payload['order_items']

        response = authenticated_client_tenant_a.post('/api/orders/', payload, format='json')

        assert response.status_code == 400
        assert 'order_items' in response.data

    def test_edit_order(self, authenticated_client_tenant_a, order_payload, second_product_tenant_a):
        created = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        ).data

        order_payload['order_items'] = [
            {'product_id': second_product_tenant_a.id, 'quantity': 4, 'price': Decimal('5.00')},
        ]
        response = authenticated_client_tenant_a.patch(
            f"/api/orders/{created['id']}/", as_json(order_payload), format='json'
        )

        assert response.status_code == 200, response.data
        assert [item['product'] for item in response.data['items']] == [second_product_tenant_a.id]

    def test_checkout_then_edit_is_rejected(self, authenticated_client_tenant_a, order_payload):
        created = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        ).data

        checkout = authenticated_client_tenant_a.post(f"/api/orders/{created['id']}/checkout/")
        assert checkout.status_code == 200
        assert checkout.data['status'] == 'COMPLETED'

        response = authenticated_client_tenant_a.put(
            f"/api/orders/{created['id']}/", as_json(order_payload), format='json'
        )
        assert response.status_code == 403
        assert response.data['error'] == "Invalid data: Order is already COMPLETED or CANCELED"

    def test_cancel_order(self, authenticated_client_tenant_a, order_payload, table_tenant_a):
        created = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        ).data

        response = authenticated_client_tenant_a.post(f"/api/orders/{created['id']}/cancel/")

        assert response.status_code == 200
        assert response.data['status'] == 'CANCELED'
        table_tenant_a.refresh_from_db()
        assert table_tenant_a.status == Table.TableStatus.AVAILABLE

    def test_delete_order(self, authenticated_client_tenant_a, order_payload):
        created = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        ).data

        response = authenticated_client_tenant_a.delete(f"/api/orders/{created['id']}/")

        assert response.status_code == 204
        assert not Order.all_objects.exists()

    def test_list_and_retrieve(self, authenticated_client_tenant_a, order_payload):
        created = authenticated_client_tenant_a.post(
            '/api/orders/', as_json(order_payload), format='json'
        ).data

        listing = authenticated_client_tenant_a.get('/api/orders/')
        detail = authenticated_client_tenant_a.get(f"/api/orders/{created['id']}/")

        assert listing.status_code == 200
        assert listing.data['count'] == 1
        assert detail.status_code == 200
        assert detail.data['tax_ids'] == order_payload['tax_ids']


@pytest.mark.django_db
class TestOrderTenantIsolation:

    def test_other_tenant_sees_nothing(self, api_client, admin_user_tenant_a, admin_user_tenant_b, order_payload):
        api_client.force_authenticate(user=admin_user_tenant_a)
        created = api_client.post('/api/orders/', as_json(order_payload), format='json').data

        api_client.force_authenticate(user=admin_user_tenant_b)
        listing = api_client.get('/api/orders/')
        detail = api_client.get(f"/api/orders/{created['id']}/")
        checkout = api_client.post(f"/api/orders/{created['id']}/checkout/")

        assert listing.data['count'] == 0
        assert detail.status_code == 404
        assert checkout.status_code == 404
        assert checkout.data['error'] == "Order not found."

    def test_unauthenticated_request_denied(self, api_client, order_payload):
        response = api_client.post('/api/orders/', as_json(order_payload), format='json')

        assert response.status_code in (401, 403)
        assert not Order.all_objects.exists()
