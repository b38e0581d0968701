from core_backend.base.viewsets import BaseViewSet
from users.permissions import ReadOnlyForCashiers
from .models import Table
from .serializers import TableSerializer


class TableViewSet(BaseViewSet):
    """
    Table management. ``status`` is normally driven by order placement, but
    managers may set it directly (e.g. to mark a table RESERVED).
    """

    queryset = Table.objects.all()
    serializer_class = TableSerializer
    permission_classes = BaseViewSet.permission_classes + [ReadOnlyForCashiers]
    filterset_fields = ["status"]
    search_fields = ["name"]
    ordering = ["name"]
