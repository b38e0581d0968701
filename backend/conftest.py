"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from tenant.managers import set_current_tenant


# ============================================================================
# AUTO-USE FIXTURES (Run automatically for every test)
# ============================================================================

@pytest.fixture(autouse=True)
def reset_tenant_context():
    """
    Reset tenant context after each test.

    CRITICAL: This prevents tenant context from leaking between tests.
    If tenant context leaks, tests may pass when they should fail.
    """
    yield  # Run the test

    # After test: ALWAYS reset to None
    set_current_tenant(None)


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/health/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client_tenant_a(api_client, admin_user_tenant_a):
    """
    Provide an API client authenticated as tenant A's owner.

    The viewsets bind request.tenant from the authenticated user.
    """
    api_client.force_authenticate(user=admin_user_tenant_a)
    return api_client


@pytest.fixture
def authenticated_client_tenant_b(api_client, admin_user_tenant_b):
    """
    Provide an API client authenticated as tenant B's owner.

    Usage:
        def test_tenant_isolation(authenticated_client_tenant_b, product_tenant_a):
            # Tenant B tries to access Tenant A's product
            response = authenticated_client_tenant_b.get(f'/api/products/{product_tenant_a.id}/')
            assert response.status_code == 404  # Should not see other tenant's data
    """
    api_client.force_authenticate(user=admin_user_tenant_b)
    return api_client


@pytest.fixture
def cashier_client_tenant_a(api_client, cashier_user_tenant_a):
    """Provide an API client authenticated as tenant A's cashier."""
    api_client.force_authenticate(user=cashier_user_tenant_a)
    return api_client


# Import all shared fixtures
from core_backend.tests.fixtures import *  # noqa
