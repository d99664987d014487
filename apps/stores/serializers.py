"""
Store serializers.
"""
from django.conf import settings
from rest_framework import serializers
from .models import StoreSettings


class StoreSettingsSerializer(serializers.ModelSerializer):
    """Store settings; the logo is exposed only as `has_logo`."""
    has_logo = serializers.BooleanField(read_only=True)
    tax_rate = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=0,
        required=False,
        error_messages={'min_value': 'Tasa de impuesto inválida'}
    )
    logo = serializers.ImageField(write_only=True, required=False)

    class Meta:
        model = StoreSettings
        fields = [
            'id', 'company_name', 'rut', 'address', 'phone', 'email',
            'receipt_message', 'currency', 'date_time_format',
            'tax_name', 'tax_rate', 'document_type', 'auto_copies',
            'logo', 'has_logo', 'updated_at'
        ]
        read_only_fields = ['id', 'updated_at']

    def validate_logo(self, value):
        content_type = getattr(value, 'content_type', '') or ''
        if not content_type.startswith('image/'):
            raise serializers.ValidationError('El logo debe ser una imagen')
        if value.size > settings.PRODUCT_IMAGE_MAX_SIZE:
            raise serializers.ValidationError('El logo supera el tamaño máximo de 5 MB')
        return value

    def update(self, instance, validated_data):
        logo = validated_data.get('logo')
        if logo is not None:
            validated_data['logo_type'] = logo.content_type
        return super().update(instance, validated_data)
