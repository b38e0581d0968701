from rest_framework import viewsets, filters
from rest_framework.permissions import IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend

from tenant.managers import set_current_tenant
from users.permissions import IsTenantMember
from ..pagination import StandardPagination


class TenantContextMixin:
    """
    Binds the request to the authenticated user's tenant.

    DRF authenticates inside the view, so the tenant is resolved here rather
    than in middleware: once authentication has run, ``request.tenant`` is set
    and the thread-local context used by ``TenantManager`` is established.
    The context is always cleared when the response is finalized.
    """

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        request.tenant = getattr(request.user, "tenant", None)
        set_current_tenant(request.tenant)

    def finalize_response(self, request, response, *args, **kwargs):
        set_current_tenant(None)
        return super().finalize_response(request, response, *args, **kwargs)


class BaseViewSet(TenantContextMixin, viewsets.ModelViewSet):
    """
    Base ViewSet that provides standard configuration for all ModelViewSets.

    Features:
    - Tenant context bound from the authenticated user
    - Standard pagination, filtering, and search

    Usage:
        class TableViewSet(BaseViewSet):
            queryset = Table.objects.all()
            serializer_class = TableSerializer
    """

    permission_classes = [IsAuthenticated, IsTenantMember]

    # Standard pagination for all ViewSets
    pagination_class = StandardPagination

    # Standard filter backends
    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    # Default ordering (can be overridden)
    ordering = ['-id']

    def get_queryset(self):
        """
        Re-evaluate the queryset at request time.

        The class-level queryset attribute is evaluated at import time (before tenant
        context exists), so Model.objects is called again here to get a fresh queryset
        with tenant filtering.
        """
        if getattr(self, 'queryset', None) is not None:
            return self.queryset.model.objects.all()
        return super().get_queryset()
