"""
Tests for sales models.
"""
from decimal import Decimal

import pytest

from apps.sales.models import Order, OrderItem


@pytest.mark.django_db
class TestOrderItem:

    def test_total_computed_on_save(self, variant):
        """Test item total computed on save."""
        order = Order.objects.create(order_number='POS-TEST-1')
        item = OrderItem.objects.create(
            order=order,
            variant=variant,
            qty=Decimal('1.5'),
            unit_price=Decimal('2000')
        )

        assert item.total == Decimal('3000')

    def test_order_defaults(self):
        """Test order defaults."""
        order = Order.objects.create(order_number='POS-TEST-2')

        assert order.status == 'DELIVERED'
        assert order.channel == 'SALON'
        assert order.opened_at is not None
