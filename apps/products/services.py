"""
Product services.
"""
import logging

from django.db import transaction
from django.db.models import ProtectedError

from apps.core.exceptions import ValidationError
from apps.inventory.services import InventoryService
from .models import DEFAULT_VARIANT_NAME, Category, Product, ProductType, ProductVariant

logger = logging.getLogger(__name__)

INVALID_CATEGORY = 'Categoría inválida: debe coincidir con un Tipo de producto existente'

VARIANT_FIELDS = ('price', 'cost', 'active')


class ProductService:
    """Catalog business logic service."""

    @staticmethod
    def resolve_category(name, user=None):
        """
        Return (category, matching product type) for a category name.
        The name must belong to an existing product type; the category row is created on demand.
        """
        product_type = ProductType.objects.filter(name=name).first()
        if product_type is None:
            raise ValidationError(INVALID_CATEGORY, field='category')
        category, _ = Category.objects.get_or_create(name=name, defaults={'created_by': user})
        return category, product_type

    @staticmethod
    def resolve_type(name, user=None):
        product_type, _ = ProductType.objects.get_or_create(name=name, defaults={'created_by': user})
        return product_type

    @staticmethod
    def _apply_image(product, data):
        image = data.get('image')
        if image is not None:
            product.image = image
            product.image_type = image.content_type

    @staticmethod
    @transaction.atomic
    def create_product(data, user=None):
        """Create a product together with its main variant."""
        category, matching_type = ProductService.resolve_category(data['category'], user)
        product_type = ProductService.resolve_type(data['type'], user) if data.get('type') else matching_type

        product = Product(
            name=data['name'],
            description=data.get('description', ''),
            category=category,
            type=product_type,
            is_sellable=data.get('is_sellable', True),
            is_stock_item=data.get('is_stock_item', False),
            image_url=data.get('image_url', ''),
            created_by=user,
        )
        ProductService._apply_image(product, data)
        product.save()

        variant = ProductVariant.objects.create(
            product=product,
            name=data.get('size') or DEFAULT_VARIANT_NAME,
            price=data['price'],
            cost=data.get('cost'),
            active=data.get('active', True),
            created_by=user,
        )

        quantity = data.get('quantity')
        if quantity:
            InventoryService.set_stock(variant.id, quantity, note='Stock inicial', user=user)

        logger.info(f"Product {product.id} '{product.name}' created")
        return product

    @staticmethod
    @transaction.atomic
    def update_product(product, data, user=None):
        """
        Update a product. Variant fields apply to every currently active variant.
        """
        if data.get('category'):
            product.category, _ = ProductService.resolve_category(data['category'], user)
        if data.get('type'):
            product.type = ProductService.resolve_type(data['type'], user)

        for field in ('name', 'description', 'is_sellable', 'is_stock_item', 'image_url'):
            if field in data:
                setattr(product, field, data[field])
        ProductService._apply_image(product, data)
        product.updated_by = user
        product.save()

        variant_updates = {field: data[field] for field in VARIANT_FIELDS if field in data}
        if 'size' in data:
            variant_updates['name'] = data['size']

        active_variants = list(product.variants.filter(active=True))
        if variant_updates:
            for variant in active_variants:
                for field, value in variant_updates.items():
                    setattr(variant, field, value)
                variant.updated_by = user
                variant.save()

        if 'quantity' in data:
            for variant in active_variants:
                InventoryService.set_stock(
                    variant.id, data['quantity'], note='Actualización de producto', user=user
                )

        logger.info(f"Product {product.id} updated")
        return product

    @staticmethod
    def delete_product(product, user=None):
        """
        Delete a product and its variants.
        Products already referenced by sales are deactivated instead.
        Returns True on hard delete, False on soft delete.
        """
        try:
            with transaction.atomic():
                product.variants.all().delete()
                product.delete()
        except ProtectedError:
            with transaction.atomic():
                product.is_sellable = False
                product.updated_by = user
                product.save(update_fields=['is_sellable', 'updated_by', 'updated_at'])
                product.variants.update(active=False)
            logger.info(f"Product {product.id} has sales; deactivated instead of deleted")
            return False

        logger.info(f"Product '{product.name}' deleted")
        return True
