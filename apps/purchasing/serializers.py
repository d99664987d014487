"""
Purchasing serializers.
"""
from django.conf import settings
from rest_framework import serializers
from .models import Expense, PurchaseInvoice

FILE_REQUIRED = 'Debe adjuntar un archivo'
UNSUPPORTED_FORMAT = 'Formato no soportado. Use imágenes o PDF.'


def is_supported_invoice_type(content_type):
    return content_type.startswith('image/') or content_type == 'application/pdf'


class PurchaseInvoiceSerializer(serializers.ModelSerializer):
    """Invoice metadata; file bytes are served separately."""
    created_by_name = serializers.CharField(source='created_by.full_name', read_only=True, default=None)

    class Meta:
        model = PurchaseInvoice
        fields = [
            'id', 'invoice_number', 'company_name',
            'invoice_date', 'uploaded_at', 'total',
            'file_type', 'file_name',
            'created_by', 'created_by_name'
        ]


class PurchaseInvoiceUploadSerializer(serializers.ModelSerializer):
    """Multipart invoice upload."""
    file = serializers.FileField(
        error_messages={
            'required': FILE_REQUIRED,
            'empty': FILE_REQUIRED,
            'invalid': FILE_REQUIRED,
        }
    )
    total = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)

    class Meta:
        model = PurchaseInvoice
        fields = ['file', 'invoice_number', 'company_name', 'invoice_date', 'total']
        extra_kwargs = {
            'invoice_date': {'required': False},
        }

    def validate_file(self, value):
        content_type = getattr(value, 'content_type', '') or ''
        if not is_supported_invoice_type(content_type):
            raise serializers.ValidationError(UNSUPPORTED_FORMAT)
        if value.size > settings.PURCHASE_INVOICE_MAX_SIZE:
            raise serializers.ValidationError('El archivo supera el tamaño máximo de 15 MB')
        return value

    def create(self, validated_data):
        upload = validated_data['file']
        validated_data['file_type'] = upload.content_type
        validated_data['file_name'] = upload.name
        return super().create(validated_data)


class ExpenseSerializer(serializers.ModelSerializer):
    """Expense serializer."""
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)

    class Meta:
        model = Expense
        fields = [
            'id', 'description', 'category', 'amount', 'occurred_at',
            'created_by', 'created_at', 'updated_at'
        ]
        read_only_fields = ['created_by', 'created_at', 'updated_at']
