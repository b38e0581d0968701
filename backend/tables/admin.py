from django.contrib import admin
from .models import Table


@admin.register(Table)
class TableAdmin(admin.ModelAdmin):
    list_display = ("name", "tenant", "status", "updated_at")
    list_filter = ("tenant", "status")
    search_fields = ("name",)

    def get_queryset(self, request):
        """Use all_objects manager to bypass TenantManager in admin"""
        return Table.all_objects.select_related("tenant")
