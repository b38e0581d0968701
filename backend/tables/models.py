from django.db import models
from django.utils.translation import gettext_lazy as _

from tenant.managers import TenantManager


class Table(models.Model):
    """
    A seating/service unit.

    Occupancy is not a foreign key to an order: ``status`` is kept in step with
    the PENDING order placed on the table by OrderService, inside the same
    transaction as the order write.
    """

    class TableStatus(models.TextChoices):
        AVAILABLE = "AVAILABLE", _("Available")
        OCCUPIED = "OCCUPIED", _("Occupied")
        RESERVED = "RESERVED", _("Reserved")

    tenant = models.ForeignKey(
        'tenant.Tenant',
        on_delete=models.CASCADE,
        related_name='tables'
    )
    name = models.CharField(max_length=100, help_text=_("Display name, e.g. 'Table 4'."))
    status = models.CharField(
        max_length=10,
        choices=TableStatus.choices,
        default=TableStatus.AVAILABLE,
    )
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TenantManager()
    all_objects = models.Manager()

    class Meta:
        verbose_name = _("Table")
        verbose_name_plural = _("Tables")
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=['tenant', 'name'], name='unique_table_name_per_tenant'
            ),
        ]
        indexes = [
            models.Index(fields=['tenant', 'status'], name='table_tenant_status_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.status})"

    @property
    def is_occupied(self):
        return self.status == self.TableStatus.OCCUPIED
