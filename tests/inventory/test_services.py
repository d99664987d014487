"""
Tests for inventory services.
"""
from decimal import Decimal

import pytest

from apps.core.exceptions import InsufficientStockError, ValidationError
from apps.inventory.models import StockMovement
from apps.inventory.services import InventoryService, _format_quantity


@pytest.mark.django_db
class TestInventoryService:
    """Tests for InventoryService."""

    def test_adjust_stock_increase(self, create_product, user):
        """Test increasing stock."""
        product = create_product(is_stock_item=True, quantity=Decimal('5'))
        variant = product.variants.first()

        movement = InventoryService.adjust_stock(variant.id, 3, 'ADJUST_IN', user=user)

        variant.refresh_from_db()
        assert variant.quantity == Decimal('8')
        assert movement.quantity == Decimal('3')
        assert movement.balance == Decimal('8')
        assert movement.created_by == user

    def test_adjust_stock_decrease(self, create_product):
        """Test decreasing stock."""
        product = create_product(is_stock_item=True, quantity=Decimal('5'))
        variant = product.variants.first()

        InventoryService.adjust_stock(variant.id, Decimal('-1.5'), 'ADJUST_OUT')

        variant.refresh_from_db()
        assert variant.quantity == Decimal('3.5')

    def test_adjust_stock_insufficient(self, create_product):
        """Test decreasing below zero."""
        product = create_product(name='Cerveza', variant_name='Lata', is_stock_item=True, quantity=Decimal('2'))
        variant = product.variants.first()

        with pytest.raises(InsufficientStockError) as exc_info:
            InventoryService.adjust_stock(variant.id, -3, 'ADJUST_OUT')

        assert exc_info.value.message == 'Stock insuficiente para Cerveza (Lata). Disponible: 2'
        variant.refresh_from_db()
        assert variant.quantity == Decimal('2')
        assert not StockMovement.objects.exists()

    def test_adjust_stock_unknown_variant(self):
        """Test adjusting an unknown variant."""
        with pytest.raises(ValidationError):
            InventoryService.adjust_stock(999999, 1, 'ADJUST_IN')

    def test_set_stock_records_difference(self, create_product):
        """Test that setting stock records the difference."""
        product = create_product(quantity=Decimal('10'))
        variant = product.variants.first()

        movement = InventoryService.set_stock(variant.id, 4)

        assert movement.movement_type == 'COUNT_ADJUST'
        assert movement.quantity == Decimal('-6')
        assert movement.balance == Decimal('4')

    def test_set_stock_unchanged(self, create_product):
        """Test setting stock to its current value."""
        product = create_product(quantity=Decimal('10'))

        assert InventoryService.set_stock(product.variants.first().id, 10) is None
        assert not StockMovement.objects.exists()

    def test_set_stock_negative(self, product):
        """Test setting negative stock."""
        with pytest.raises(ValidationError):
            InventoryService.set_stock(product.variants.first().id, -1)


class TestFormatQuantity:

    @pytest.mark.parametrize('value,expected', [
        (Decimal('2.000'), '2'),
        (Decimal('1.500'), '1.5'),
        (Decimal('0'), '0'),
    ])
    def test_format(self, value, expected):
        """Test movement string representation."""
        assert _format_quantity(value) == expected
