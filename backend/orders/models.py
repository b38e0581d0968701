import uuid
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from tenant.managers import TenantManager


class Order(models.Model):
    # --- Status Fields ---
    class OrderStatus(models.TextChoices):
        PENDING = "PENDING", _("Pending")  # Open on a table, still editable
        COMPLETED = "COMPLETED", _("Completed")  # Checked out
        CANCELED = "CANCELED", _("Canceled")  # Abandoned before checkout

    class OrderType(models.TextChoices):
        PREPAID = "PREPAID", _("Prepaid")
        POSTPAID = "POSTPAID", _("Postpaid")

    class PaymentMethod(models.TextChoices):
        CASH = "CASH", _("Cash")
        CARD = "CARD", _("Card")
        BANK_TRANSFER = "BANK_TRANSFER", _("Bank Transfer")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    tenant = models.ForeignKey(
        'tenant.Tenant',
        on_delete=models.CASCADE,
        related_name='orders'
    )
    table = models.ForeignKey(
        'tables.Table',
        on_delete=models.PROTECT,
        related_name='orders',
    )
    created_by = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders_created',
    )
    status = models.CharField(
        max_length=10, choices=OrderStatus.choices, default=OrderStatus.PENDING
    )
    order_type = models.CharField(
        max_length=10, choices=OrderType.choices, default=OrderType.POSTPAID
    )
    payment_method = models.CharField(
        max_length=20, choices=PaymentMethod.choices, default=PaymentMethod.CASH
    )
    taxes = models.ManyToManyField(
        'products.Tax',
        blank=True,
        related_name='orders',
        help_text=_("Taxes applied to this order."),
    )

    # --- Financial Fields ---
    subtotal = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    rounding = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        help_text=_("Cash rounding added to the after-tax total."),
    )
    total_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    description = models.TextField(blank=True)

    # --- Timestamps ---
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    completed_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_("When the order was checked out or canceled."),
    )

    objects = TenantManager()
    all_objects = models.Manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=['tenant', 'status'], name='order_tenant_status_idx'),
            models.Index(fields=['tenant', 'table', 'updated_at'], name='order_table_updated_idx'),
        ]

    def __str__(self):
        return f"Order {self.pk} on {self.table.name} ({self.status})"

    @property
    def is_pending(self):
        return self.status == self.OrderStatus.PENDING


class OrderItem(models.Model):
    tenant = models.ForeignKey(
        'tenant.Tenant',
        on_delete=models.CASCADE,
        related_name='order_items'
    )
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(
        'products.Product', on_delete=models.PROTECT, related_name="order_items"
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Unit price of the product when it was ordered."),
    )

    objects = TenantManager()
    all_objects = models.Manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['order', 'product'], name='unique_product_per_order'
            ),
        ]
        indexes = [
            models.Index(fields=['tenant', 'order'], name='orderitem_tenant_order_idx'),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product.name} in Order {self.order_id}"

    @property
    def total_price(self):
        return self.price * self.quantity
