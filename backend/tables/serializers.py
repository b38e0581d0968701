from rest_framework import serializers

from core_backend.base.serializers import BaseModelSerializer
from tenant.serializers import TenantSerializerMixin
from .models import Table


class TableSerializer(TenantSerializerMixin, BaseModelSerializer):
    class Meta:
        model = Table
        fields = ["id", "name", "status", "description", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]

    def validate_name(self, value):
        existing = Table.all_objects.filter(tenant=self.context["request"].tenant, name=value)
        if self.instance is not None:
            existing = existing.exclude(pk=self.instance.pk)
        if existing.exists():
            raise serializers.ValidationError("A table with this name already exists.")
        return value
