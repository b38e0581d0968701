"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like tenants, users, tables, products and taxes.
"""
import pytest
from decimal import Decimal

from tenant.models import Tenant
from users.models import User
from products.models import Product, Category, Tax
from tables.models import Table


# ============================================================================
# TENANT FIXTURES
# ============================================================================

@pytest.fixture
def tenant_a(db):
    """Create test tenant A (Pizza Place)"""
    return Tenant.objects.create(
        name='Pizza Place',
        slug='pizza-place',
        is_active=True
    )


@pytest.fixture
def tenant_b(db):
    """Create test tenant B (Burger Joint)"""
    return Tenant.objects.create(
        name='Burger Joint',
        slug='burger-joint',
        is_active=True
    )


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def admin_user_tenant_a(tenant_a):
    """Create owner user for tenant A"""
    return User.objects.create_user(
        email='admin@pizza.com',
        password='password123',
        tenant=tenant_a,
        role=User.Role.OWNER,
    )


@pytest.fixture
def admin_user_tenant_b(tenant_b):
    """Create owner user for tenant B"""
    return User.objects.create_user(
        email='admin@burger.com',
        password='password123',
        tenant=tenant_b,
        role=User.Role.OWNER,
    )


@pytest.fixture
def cashier_user_tenant_a(tenant_a):
    """Create cashier user for tenant A"""
    return User.objects.create_user(
        email='cashier@pizza.com',
        password='password123',
        tenant=tenant_a,
        role=User.Role.CASHIER,
    )


# ============================================================================
# TABLE FIXTURES
# ============================================================================

@pytest.fixture
def table_tenant_a(tenant_a):
    """Create an AVAILABLE table for tenant A"""
    return Table.all_objects.create(name='Table 1', tenant=tenant_a)


@pytest.fixture
def second_table_tenant_a(tenant_a):
    """Create a second AVAILABLE table for tenant A"""
    return Table.all_objects.create(name='Table 2', tenant=tenant_a)


@pytest.fixture
def table_tenant_b(tenant_b):
    """Create an AVAILABLE table for tenant B"""
    return Table.all_objects.create(name='Table 1', tenant=tenant_b)


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def vat_tenant_a(tenant_a):
    """Create a 7% percentage tax for tenant A"""
    return Tax.all_objects.create(name='VAT', rate=Decimal('7'), tenant=tenant_a)


@pytest.fixture
def service_fee_tenant_a(tenant_a):
    """Create a fixed 5.00 tax for tenant A"""
    return Tax.all_objects.create(
        name='Service Fee', rate=Decimal('5.00'), is_fixed=True, tenant=tenant_a
    )


@pytest.fixture
def tax_tenant_b(tenant_b):
    """Create a 10% percentage tax for tenant B"""
    return Tax.all_objects.create(name='Sales Tax', rate=Decimal('10'), tenant=tenant_b)


@pytest.fixture
def category_tenant_a(tenant_a):
    """Create category for tenant A"""
    return Category.all_objects.create(name='Pizzas', tenant=tenant_a)


@pytest.fixture
def category_tenant_b(tenant_b):
    """Create category for tenant B"""
    return Category.all_objects.create(name='Burgers', tenant=tenant_b)


@pytest.fixture
def product_tenant_a(tenant_a, category_tenant_a):
    """Create sample product for tenant A (Pepperoni Pizza, 10.00)"""
    return Product.all_objects.create(
        name='Pepperoni Pizza',
        price=Decimal('10.00'),
        tenant=tenant_a,
        category=category_tenant_a,
    )


@pytest.fixture
def second_product_tenant_a(tenant_a, category_tenant_a):
    """Create a second product for tenant A (Margherita, 5.00)"""
    return Product.all_objects.create(
        name='Margherita',
        price=Decimal('5.00'),
        tenant=tenant_a,
        category=category_tenant_a,
    )


@pytest.fixture
def product_tenant_b(tenant_b, category_tenant_b):
    """Create sample product for tenant B (Cheeseburger)"""
    return Product.all_objects.create(
        name='Cheeseburger',
        price=Decimal('8.99'),
        tenant=tenant_b,
        category=category_tenant_b,
    )


# ============================================================================
# ORDER PAYLOAD FIXTURES
# ============================================================================

@pytest.fixture
def order_payload(table_tenant_a, product_tenant_a, vat_tenant_a):
    """
    A consistent create payload for tenant A:
    2 x 10.00 = 20.00, +7% = 21.40, rounded up by 0.60 to 22.00.
    """
    return {
        'table_id': table_tenant_a.id,
        'order_type': 'POSTPAID',
        'payment_method': 'CASH',
        'tax_ids': [vat_tenant_a.id],
        'subtotal': Decimal('20.00'),
        'rounding': Decimal('0.60'),
        'total_price': Decimal('22.00'),
        'description': '',
        'order_items': [
            {'product_id': product_tenant_a.id, 'quantity': 2, 'price': Decimal('10.00')},
        ],
    }
