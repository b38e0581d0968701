from rest_framework import permissions
from .models import User


class IsTenantMember(permissions.BasePermission):
    """Authenticated staff bound to a tenant. Every tenant-scoped API requires this."""

    message = "A tenant account is required."

    def has_permission(self, request, view):
        return bool(
            request.user
            and request.user.is_authenticated
            and getattr(request.user, "tenant_id", None)
        )


class IsManagerOrHigher(permissions.BasePermission):
    def has_permission(self, request, view):
        return request.user.role in [
            User.Role.OWNER,
            User.Role.ADMIN,
            User.Role.MANAGER,
        ]


class ReadOnlyForCashiers(permissions.BasePermission):
    """
    Custom permission to allow all tenant staff to read,
    but only managers and above to create/update/delete.
    """

    def has_permission(self, request, view):
        # All authenticated users can read
        if request.method in permissions.SAFE_METHODS:
            return request.user.is_authenticated

        # Only managers and above can create/update/delete
        return request.user.role in [
            User.Role.OWNER,
            User.Role.ADMIN,
            User.Role.MANAGER,
        ]
