"""
Product serializers.
"""
from django.conf import settings
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from apps.core.utils import parse_bool
from .models import Category, Product, ProductType, ProductVariant


class FormBooleanField(serializers.Field):
    """Boolean as sent by forms: only true/1 count as true."""

    def to_internal_value(self, data):
        return parse_bool(data)

    def to_representation(self, value):
        return bool(value)


def validate_image(image):
    content_type = getattr(image, 'content_type', '') or ''
    if not content_type.startswith('image/'):
        raise serializers.ValidationError('El archivo debe ser una imagen')
    if image.size > settings.PRODUCT_IMAGE_MAX_SIZE:
        raise serializers.ValidationError('La imagen supera el tamaño máximo de 5 MB')
    return image


class ProductTypeSerializer(serializers.ModelSerializer):
    """ProductType serializer."""
    name = serializers.CharField(
        max_length=100,
        validators=[UniqueValidator(
            queryset=ProductType.objects.all(),
            message='Ya existe un tipo de producto con ese nombre'
        )]
    )

    class Meta:
        model = ProductType
        fields = ['id', 'name', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']


class CategorySerializer(serializers.ModelSerializer):
    """Category serializer."""
    name = serializers.CharField(
        max_length=100,
        validators=[UniqueValidator(
            queryset=Category.objects.all(),
            message='Ya existe una categoría con ese nombre'
        )]
    )

    class Meta:
        model = Category
        fields = ['id', 'name', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']


class ProductVariantSerializer(serializers.ModelSerializer):
    """ProductVariant serializer."""

    class Meta:
        model = ProductVariant
        fields = ['id', 'name', 'price', 'cost', 'quantity', 'active']


class ProductSerializer(serializers.ModelSerializer):
    """Product read serializer with its variants, category and type."""
    category = CategorySerializer(read_only=True)
    type = ProductTypeSerializer(read_only=True)
    variants = ProductVariantSerializer(many=True, read_only=True)
    has_image = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description',
            'category', 'type',
            'is_sellable', 'is_stock_item',
            'image_url', 'has_image',
            'variants',
            'created_at', 'updated_at'
        ]


class ProductWriteSerializer(serializers.Serializer):
    """
    Product create/update payload (JSON or multipart).
    Variant fields (size, price, quantity, cost, active) describe the main variant.
    """
    name = serializers.CharField(max_length=200)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    category = serializers.CharField(max_length=100)
    size = serializers.CharField(max_length=100, required=False, allow_blank=True)
    type = serializers.CharField(max_length=100, required=False, allow_blank=True)
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=0, required=False)
    cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    image_url = serializers.CharField(max_length=500, required=False, allow_blank=True)
    image = serializers.ImageField(required=False, validators=[validate_image])
    description = serializers.CharField(required=False, allow_blank=True)
    is_sellable = FormBooleanField(required=False)
    is_stock_item = FormBooleanField(required=False)
    active = FormBooleanField(required=False)

    def validate_category(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('La categoría es obligatoria')
        return value

    def validate_type(self, value):
        return value.strip()
