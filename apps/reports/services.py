"""
Report services: aggregates over orders, stock and expenses.
"""
import logging
from decimal import Decimal

from django.db.models import Count, DecimalField, F, Q, Sum, Value
from django.db.models.functions import Coalesce, ExtractHour

from apps.core.utils import range_filter
from apps.products.models import variant_label

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


def _range_q(prefix, gte, lt):
    return Q(**range_filter(prefix, gte, lt))


def _decimal_sum(expression, **extra):
    return Coalesce(
        Sum(expression, **extra),
        Value(ZERO),
        output_field=DecimalField(max_digits=14, decimal_places=3)
    )


class ReportService:
    """Read-only reports. Every window is a half-open (gte, lt) pair on order opened_at."""

    @staticmethod
    def top_products(gte=None, lt=None, limit=10):
        """Best-selling variants by quantity."""
        from apps.sales.models import OrderItem

        rows = OrderItem.objects.filter(
            **range_filter('order__opened_at', gte, lt)
        ).values(
            'variant_id', 'variant__name', 'variant__product__name'
        ).annotate(
            sold_qty=Sum('qty'),
            revenue=Sum('total')
        ).order_by('-sold_qty', 'variant_id')[:limit]

        return [
            {
                'id': row['variant_id'],
                'name': variant_label(row['variant__product__name'], row['variant__name']),
                'qty': row['sold_qty'],
                'total': row['revenue'],
            }
            for row in rows
        ]

    @staticmethod
    def sales_by_hour(gte, lt):
        """Order count and revenue per local hour; hours without orders are omitted."""
        from apps.sales.models import Order

        rows = Order.objects.filter(
            **range_filter('opened_at', gte, lt)
        ).annotate(
            hour=ExtractHour('opened_at')
        ).values('hour').annotate(
            order_count=Count('id'),
            revenue=Sum('total')
        ).order_by('hour')

        return [
            {'hour': row['hour'], 'orders': row['order_count'], 'total': row['revenue']}
            for row in rows
        ]

    @staticmethod
    def inventory_valuation():
        """
        Stock value per variant at cost.

        A missing cost counts as zero. Returns {'items': [...], 'total': Decimal}.
        """
        from apps.products.models import ProductVariant

        variants = ProductVariant.objects.select_related('product').order_by(
            'product__name', 'name', 'id'
        )
        items = []
        total = ZERO
        for variant in variants:
            value = variant.quantity * (variant.cost or ZERO)
            total += value
            items.append({
                'id': variant.product_id,
                'name': variant.product.name,
                'variant_id': variant.id,
                'variant_name': variant.name,
                'quantity': variant.quantity,
                'cost': variant.cost,
                'value': value,
            })
        return {'items': items, 'total': total}

    @staticmethod
    def low_rotation(gte=None, lt=None, threshold=Decimal('3')):
        """Variants that sold at most `threshold` units in the window, slowest first."""
        from apps.products.models import ProductVariant

        sold_in_range = _range_q('order_items__order__opened_at', gte, lt)
        rows = ProductVariant.objects.values(
            'id', 'name', 'product__name'
        ).annotate(
            sold_qty=_decimal_sum('order_items__qty', filter=sold_in_range)
        ).filter(
            sold_qty__lte=threshold
        ).order_by('sold_qty', 'id')

        return [
            {
                'id': row['id'],
                'name': variant_label(row['product__name'], row['name']),
                'qty': row['sold_qty'],
            }
            for row in rows
        ]

    @staticmethod
    def employees_sales(gte=None, lt=None):
        """Orders and revenue per user; users without sales are listed with zeros."""
        from apps.accounts.models import User

        in_range = _range_q('orders__opened_at', gte, lt)
        rows = User.objects.values('id', 'full_name').annotate(
            order_count=Count('orders', filter=in_range),
            revenue=_decimal_sum('orders__total', filter=in_range)
        ).order_by('-revenue', 'id')

        return [
            {
                'id': row['id'],
                'name': row['full_name'],
                'orders': row['order_count'],
                'total': row['revenue'],
            }
            for row in rows
        ]

    @staticmethod
    def financial_summary(gte=None, lt=None):
        """Income from orders against expenses; expenses use occurred_at."""
        from apps.purchasing.models import Expense
        from apps.sales.models import Order

        income = Order.objects.filter(
            **range_filter('opened_at', gte, lt)
        ).aggregate(total_sum=_decimal_sum('total'))['total_sum']
        expense = Expense.objects.filter(
            **range_filter('occurred_at', gte, lt)
        ).aggregate(amount_sum=_decimal_sum('amount'))['amount_sum']

        return {'income': income, 'expense': expense, 'profit': income - expense}

    @staticmethod
    def orders(gte=None, lt=None):
        """Flat order rows for export."""
        from apps.sales.models import Order

        return list(
            Order.objects.filter(
                **range_filter('opened_at', gte, lt)
            ).annotate(
                cashier=F('user__full_name')
            ).order_by('opened_at', 'id').values(
                'order_number', 'opened_at', 'channel', 'status',
                'cashier', 'subtotal', 'discount', 'tip', 'total'
            )
        )
