"""
Inventory services.
"""
import logging
from decimal import Decimal

from django.db import transaction

from apps.core.exceptions import InsufficientStockError, ValidationError
from apps.products.models import ProductVariant
from .models import StockMovement

logger = logging.getLogger(__name__)


def _format_quantity(value):
    """Render a stock quantity without trailing decimal zeros."""
    value = Decimal(value)
    if value == value.to_integral_value():
        return str(value.quantize(Decimal('1')))
    return str(value.normalize())


class InventoryService:
    """Inventory business logic service."""

    @staticmethod
    @transaction.atomic
    def adjust_stock(
        variant_id,
        quantity,
        movement_type,
        reference_type='',
        reference_id=None,
        note='',
        user=None
    ):
        """
        Adjust variant stock and create a movement log.
        Positive quantity = increase, negative = decrease.
        """
        quantity = Decimal(str(quantity))
        try:
            variant = ProductVariant.objects.select_for_update().select_related('product').get(pk=variant_id)
        except ProductVariant.DoesNotExist:
            raise ValidationError(f'Variante inexistente: {variant_id}', field='variant')

        if quantity < 0 and variant.quantity < abs(quantity):
            raise InsufficientStockError(
                product_name=variant.product.name,
                variant_name=variant.name,
                available=_format_quantity(variant.quantity)
            )

        variant.quantity += quantity
        variant.updated_by = user
        variant.save(update_fields=['quantity', 'updated_by', 'updated_at'])

        movement = StockMovement.objects.create(
            variant=variant,
            movement_type=movement_type,
            quantity=quantity,
            balance=variant.quantity,
            reference_type=reference_type,
            reference_id=reference_id,
            note=note,
            created_by=user
        )

        logger.info(
            f"Stock {movement_type} for variant {variant.id}: {quantity:+} -> {variant.quantity}"
        )
        return movement

    @staticmethod
    @transaction.atomic
    def set_stock(variant_id, new_quantity, note='', user=None):
        """
        Set the counted quantity for a variant, logging the difference as COUNT_ADJUST.
        Returns None when the quantity does not change.
        """
        new_quantity = Decimal(str(new_quantity))
        if new_quantity < 0:
            raise ValidationError('La cantidad no puede ser negativa', field='quantity')

        variant = ProductVariant.objects.select_for_update().get(pk=variant_id)
        difference = new_quantity - variant.quantity
        if difference == 0:
            return None

        variant.quantity = new_quantity
        variant.updated_by = user
        variant.save(update_fields=['quantity', 'updated_by', 'updated_at'])

        return StockMovement.objects.create(
            variant=variant,
            movement_type='COUNT_ADJUST',
            quantity=difference,
            balance=new_quantity,
            reference_type='PRODUCT',
            reference_id=variant.product_id,
            note=note,
            created_by=user
        )
