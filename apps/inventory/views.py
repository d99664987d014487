"""
Inventory views.
"""
from django_filters import rest_framework as filters
from rest_framework.decorators import action

from apps.core.mixins import StandardResponseMixin
from apps.core.permissions import IsShiftLeadOrAbove
from apps.core.utils import parse_date_range, range_filter
from apps.core.views import ReadOnlyViewSet
from .models import StockMovement
from .serializers import StockAdjustmentSerializer, StockMovementSerializer
from .services import InventoryService


class StockMovementFilter(filters.FilterSet):
    """StockMovement filter set."""
    variant = filters.NumberFilter(field_name='variant_id')
    product = filters.NumberFilter(field_name='variant__product_id')
    movement_type = filters.ChoiceFilter(choices=StockMovement.TYPE_CHOICES)

    class Meta:
        model = StockMovement
        fields = ['variant', 'product', 'movement_type']


class StockMovementViewSet(StandardResponseMixin, ReadOnlyViewSet):
    """Stock movement history and manual adjustments."""
    queryset = StockMovement.objects.select_related(
        'variant', 'variant__product', 'created_by'
    ).all()
    serializer_class = StockMovementSerializer
    permission_classes = [IsShiftLeadOrAbove]
    filterset_class = StockMovementFilter
    search_fields = ['variant__product__name', 'note']
    ordering_fields = ['created_at']

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            gte, lt = parse_date_range(self.request.query_params)
            queryset = queryset.filter(**range_filter('created_at', gte, lt))
        return queryset

    @action(detail=False, methods=['post'])
    def adjust(self, request):
        """Manually adjust the stock of a variant."""
        serializer = StockAdjustmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        quantity = data['quantity']
        movement = InventoryService.adjust_stock(
            variant_id=data['variant'],
            quantity=quantity,
            movement_type='ADJUST_IN' if quantity > 0 else 'ADJUST_OUT',
            reference_type='MANUAL',
            note=data.get('note', ''),
            user=request.user
        )

        return self.created_response(
            data=StockMovementSerializer(movement).data,
            message='Stock ajustado'
        )
