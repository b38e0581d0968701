from rest_framework import serializers


def is_tenant_owned(model) -> bool:
    return any(field.name == 'tenant' for field in model._meta.concrete_fields)


class TenantSerializerMixin:
    """
    Binds a serializer to the tenant of the current request.

    - Writable related fields (a product's category) only resolve rows of the
      request tenant, so another tenant's id is rejected as an invalid pk
      instead of being attached and checked afterwards
    - New rows are stamped with the request tenant on create

    Without a request tenant the related querysets are empty.
    """

    def get_request_tenant(self):
        request = self.context.get('request')
        return getattr(request, 'tenant', None)

    def get_fields(self):
        fields = super().get_fields()
        tenant = self.get_request_tenant()

        for field in fields.values():
            if not isinstance(field, serializers.PrimaryKeyRelatedField) or field.read_only:
                continue
            if field.queryset is not None and is_tenant_owned(field.queryset.model):
                field.queryset = field.queryset.filter(tenant=tenant)

        return fields

    def create(self, validated_data):
        validated_data['tenant'] = self.get_request_tenant()
        return super().create(validated_data)
