"""
Inventory serializers.
"""
from rest_framework import serializers
from .models import StockMovement


class StockMovementSerializer(serializers.ModelSerializer):
    """StockMovement serializer."""
    product = serializers.IntegerField(source='variant.product_id', read_only=True)
    product_name = serializers.CharField(source='variant.product.name', read_only=True)
    variant_name = serializers.CharField(source='variant.name', read_only=True)
    type_display = serializers.CharField(source='get_movement_type_display', read_only=True)
    created_by_name = serializers.CharField(source='created_by.full_name', read_only=True, default=None)

    class Meta:
        model = StockMovement
        fields = [
            'id', 'variant', 'variant_name',
            'product', 'product_name',
            'movement_type', 'type_display',
            'quantity', 'balance',
            'reference_type', 'reference_id', 'note',
            'created_by', 'created_by_name', 'created_at'
        ]


class StockAdjustmentSerializer(serializers.Serializer):
    """Manual stock adjustment request; the sign of quantity gives the direction."""
    variant = serializers.IntegerField()
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3)
    note = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')

    def validate_quantity(self, value):
        if value == 0:
            raise serializers.ValidationError('La cantidad debe ser distinta de cero')
        return value
