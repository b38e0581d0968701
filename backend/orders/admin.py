from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("get_line_item_total",)
    fields = ("product", "quantity", "price", "get_line_item_total")

    def get_line_item_total(self, obj):
        return f"{obj.total_price:,.2f}"

    get_line_item_total.short_description = "Line Item Total"

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Order model.
    """

    list_display = ("id", "tenant", "table", "status", "order_type", "total_price", "created_at")
    list_filter = ("status", "order_type", "payment_method", "tenant")
    search_fields = ("id", "table__name", "description")
    readonly_fields = ("subtotal", "rounding", "total_price", "created_at", "updated_at", "completed_at")
    inlines = [OrderItemInline]

    def get_queryset(self, request):
        return Order.all_objects.select_related("tenant", "table")
