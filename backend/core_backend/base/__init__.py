"""
Core backend base components.

This package provides foundational classes that should be used throughout
the Django application for consistency and maintainability.
"""

from .viewsets import BaseViewSet, TenantContextMixin
from .serializers import BaseModelSerializer

__all__ = [
    # ViewSets
    'BaseViewSet',
    'TenantContextMixin',

    # Serializers
    'BaseModelSerializer',
]
