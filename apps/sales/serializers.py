"""
Sales serializers.
"""
from rest_framework import serializers
from .models import Order, OrderItem, Payment


class PaymentSerializer(serializers.ModelSerializer):
    """Payment serializer."""
    method_display = serializers.CharField(source='get_method_display', read_only=True)

    class Meta:
        model = Payment
        fields = ['id', 'order', 'method', 'method_display', 'amount', 'created_at']
        read_only_fields = ['order']


class OrderItemSerializer(serializers.ModelSerializer):
    """OrderItem serializer."""
    product = serializers.IntegerField(source='variant.product_id', read_only=True)
    product_name = serializers.CharField(source='variant.product.name', read_only=True)
    variant_name = serializers.CharField(source='variant.name', read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            'id', 'variant', 'variant_name', 'product', 'product_name',
            'description', 'qty', 'unit_price', 'total'
        ]


class OrderSerializer(serializers.ModelSerializer):
    """Order serializer with items and payments."""
    channel_display = serializers.CharField(source='get_channel_display', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    user_name = serializers.CharField(source='user.full_name', read_only=True, default=None)
    items = OrderItemSerializer(many=True, read_only=True)
    payments = PaymentSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'order_number',
            'channel', 'channel_display', 'status', 'status_display',
            'subtotal', 'tax', 'tip', 'discount', 'total',
            'user', 'user_name', 'opened_at', 'closed_at',
            'items', 'payments'
        ]


class OrderItemInputSerializer(serializers.Serializer):
    """Order line as sent by the POS."""
    variant = serializers.IntegerField()
    description = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    qty = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=1)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class OrderCreateSerializer(serializers.Serializer):
    """Order creation payload."""
    items = OrderItemInputSerializer(many=True, allow_empty=False)
    tip = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)


class PaymentCreateSerializer(serializers.Serializer):
    """Payment registration payload."""
    method = serializers.ChoiceField(choices=Payment.METHOD_CHOICES)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
