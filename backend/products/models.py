from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from tenant.managers import TenantManager


class Category(models.Model):
    tenant = models.ForeignKey(
        'tenant.Tenant',
        on_delete=models.CASCADE,
        related_name='categories'
    )
    name = models.CharField(
        max_length=100, help_text=_("Name of the product category.")
    )
    description = models.TextField(
        blank=True, help_text=_("Description of the category.")
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TenantManager()
    all_objects = models.Manager()

    class Meta:
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=['tenant', 'name'], name='unique_category_name_per_tenant'
            ),
        ]

    def __str__(self):
        return self.name


class Tax(models.Model):
    tenant = models.ForeignKey(
        'tenant.Tenant',
        on_delete=models.CASCADE,
        related_name='taxes'
    )
    name = models.CharField(
        max_length=50,
        help_text=_("Name of the tax, e.g., 'VAT' or 'Service Charge'."),
    )
    rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text=_(
            "Percentage (e.g. 7 for 7%), or a currency amount when the tax is fixed."
        ),
    )
    is_fixed = models.BooleanField(
        default=False,
        help_text=_("Whether the rate is an absolute amount rather than a percentage."),
    )
    is_inclusive = models.BooleanField(
        default=False,
        help_text=_("Whether the tax is already included in product prices."),
    )
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TenantManager()
    all_objects = models.Manager()

    class Meta:
        verbose_name = _("Tax")
        verbose_name_plural = _("Taxes")
        ordering = ["name"]

    def __str__(self):
        if self.is_fixed:
            return f"{self.name} ({self.rate})"
        return f"{self.name} ({self.rate}%)"


class Product(models.Model):
    class UnitType(models.TextChoices):
        PIECE = "PIECE", _("Piece")
        CUP = "CUP", _("Cup")
        PLATE = "PLATE", _("Plate")
        BOWL = "BOWL", _("Bowl")
        GLASS = "GLASS", _("Glass")
        BOTTLE = "BOTTLE", _("Bottle")

    class ProductType(models.TextChoices):
        STANDALONE = "STANDALONE", _("Standalone")
        BUNDLE = "BUNDLE", _("Bundle")
        BUNDLE_ITEM = "BUNDLE_ITEM", _("Bundle Item")

    tenant = models.ForeignKey(
        'tenant.Tenant',
        on_delete=models.CASCADE,
        related_name='products'
    )
    category = models.ForeignKey(
        Category,
        related_name="products",
        on_delete=models.PROTECT,
        help_text=_("Product category."),
    )
    name = models.CharField(max_length=200, help_text=_("Name of the product."))
    unit = models.CharField(
        max_length=10, choices=UnitType.choices, default=UnitType.PIECE
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text=_("The selling price of the product."),
    )
    track_stock = models.BooleanField(
        default=False,
        help_text=_("Whether stock levels are tracked for this product."),
    )
    stock = models.PositiveIntegerField(default=0)
    product_type = models.CharField(
        max_length=12,
        choices=ProductType.choices,
        default=ProductType.STANDALONE,
    )
    description = models.TextField(
        blank=True, help_text=_("Detailed description of the product.")
    )
    image_link = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TenantManager()
    all_objects = models.Manager()

    class Meta:
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        ordering = ["name"]
        indexes = [
            models.Index(fields=['tenant', 'category'], name='product_tenant_category_idx'),
            models.Index(fields=['tenant', 'product_type'], name='product_tenant_type_idx'),
        ]

    def __str__(self):
        return self.name

    @property
    def is_bundle(self):
        return self.product_type == self.ProductType.BUNDLE


class BundleItem(models.Model):
    """A component product, with its quantity, inside a BUNDLE product."""

    tenant = models.ForeignKey(
        'tenant.Tenant',
        on_delete=models.CASCADE,
        related_name='bundle_items'
    )
    bundle = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="bundle_items"
    )
    product = models.ForeignKey(
        Product, on_delete=models.PROTECT, related_name="included_in_bundles"
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    objects = TenantManager()
    all_objects = models.Manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['bundle', 'product'], name='unique_component_per_bundle'
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product.name} in {self.bundle.name}"
