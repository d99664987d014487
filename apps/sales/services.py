"""
Sales services.
"""
import logging
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from apps.core.exceptions import InvalidOperationError, ValidationError
from apps.core.utils import generate_order_number
from apps.inventory.services import InventoryService
from apps.products.models import ProductVariant
from .models import Order, OrderItem, Payment

logger = logging.getLogger(__name__)

# Largest value the 12-digit, 2-decimal money columns hold
MAX_AMOUNT = Decimal('9999999999.99')


class SalesService:
    """Sales business logic service."""

    @staticmethod
    @transaction.atomic
    def create_order(data, user):
        """
        Create a delivered POS order, its items and the stock decrements.
        Any failing item rolls the whole order back.
        """
        items_data = data['items']

        variant_ids = {item['variant'] for item in items_data}
        variants = ProductVariant.objects.select_related('product').in_bulk(variant_ids)
        missing = sorted(variant_ids - set(variants))
        if missing:
            raise ValidationError(
                f'Variante inexistente: {", ".join(str(v) for v in missing)}',
                field='items'
            )

        line_totals = [
            Decimal(str(item['unit_price'])) * Decimal(str(item['qty'])) for item in items_data
        ]
        if any(line_total > MAX_AMOUNT for line_total in line_totals):
            raise ValidationError('El total de un ítem excede el máximo permitido', field='items')

        subtotal = sum(line_totals, Decimal('0'))
        tip = Decimal(str(data.get('tip') or 0))
        discount = Decimal(str(data.get('discount') or 0))
        total = subtotal + tip - discount
        if total < 0:
            raise ValidationError('El descuento no puede superar el total del pedido', field='discount')
        if subtotal > MAX_AMOUNT or total > MAX_AMOUNT:
            raise ValidationError('El total del pedido excede el máximo permitido', field='items')

        now = timezone.now()
        order = Order.objects.create(
            order_number=generate_order_number('POS'),
            channel='SALON',
            status='DELIVERED',
            subtotal=subtotal,
            tax=Decimal('0'),
            tip=tip,
            discount=discount,
            total=total,
            user=user,
            opened_at=now,
            closed_at=now,
            created_by=user
        )

        for item in items_data:
            variant = variants[item['variant']]
            OrderItem.objects.create(
                order=order,
                variant=variant,
                description=item.get('description') or '',
                qty=item['qty'],
                unit_price=item['unit_price'],
                created_by=user
            )

            if variant.product.is_stock_item:
                InventoryService.adjust_stock(
                    variant_id=variant.id,
                    quantity=-Decimal(str(item['qty'])),
                    movement_type='SALE_OUT',
                    reference_type='ORDER',
                    reference_id=order.id,
                    note=f'Venta {order.order_number}',
                    user=user
                )

        logger.info(f"Order {order.order_number} created by {user}: total {order.total}")
        return order

    @staticmethod
    @transaction.atomic
    def add_payment(order, method, amount, user):
        """Record a payment against an order."""
        if order.status == 'CANCELLED':
            raise InvalidOperationError('No se pueden registrar pagos en un pedido anulado')

        payment = Payment.objects.create(
            order=order,
            method=method,
            amount=amount,
            created_by=user
        )
        logger.info(f"Payment {payment.id} ({method} {amount}) recorded for order {order.order_number}")
        return payment
