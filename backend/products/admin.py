from django.contrib import admin
from .models import Category, Tax, Product, BundleItem


class BundleItemInline(admin.TabularInline):
    model = BundleItem
    fk_name = "bundle"
    extra = 1

    def get_queryset(self, request):
        """Use all_objects manager to bypass TenantManager in admin"""
        return BundleItem.all_objects.all()


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "tenant", "created_at")
    list_filter = ("tenant",)
    search_fields = ("name",)

    def get_queryset(self, request):
        return Category.all_objects.select_related("tenant")


@admin.register(Tax)
class TaxAdmin(admin.ModelAdmin):
    list_display = ("name", "tenant", "rate", "is_fixed", "is_inclusive")
    list_filter = ("tenant", "is_fixed", "is_inclusive")
    search_fields = ("name",)

    def get_queryset(self, request):
        return Tax.all_objects.select_related("tenant")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "tenant", "category", "product_type", "price", "track_stock", "stock")
    list_filter = ("tenant", "product_type", "unit", "track_stock")
    search_fields = ("name",)
    inlines = [BundleItemInline]

    def get_queryset(self, request):
        return Product.all_objects.select_related("tenant", "category")
