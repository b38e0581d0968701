"""
URL configuration for core_backend project.

Every app registers its own resource prefix, so apps are included at "api/":
/api/orders/, /api/tables/, /api/products/, /api/categories/, /api/taxes/.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/", include("products.urls")),
    path("api/", include("tables.urls")),
    path("api/", include("orders.urls")),
]
