"""
Tests for report services.
"""
from datetime import datetime
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.core.utils import parse_date_range
from apps.purchasing.models import Expense
from apps.reports.services import ReportService


def local(year, month, day, hour=12, minute=0):
    return timezone.make_aware(datetime(year, month, day, hour, minute))


@pytest.fixture
def catalog(create_product):
    burger = create_product(name='Hamburguesa', variant_name='Doble', cost=Decimal('1500'), quantity=Decimal('4'))
    fries = create_product(name='Papas', variant_name='', cost=None, quantity=Decimal('10'))
    juice = create_product(name='Jugo', variant_name='Único', cost=Decimal('300'), quantity=Decimal('2'))
    return {
        'burger': burger.variants.first(),
        'fries': fries.variants.first(),
        'juice': juice.variants.first(),
    }


@pytest.mark.django_db
class TestTopProducts:

    def test_ordered_by_quantity(self, catalog, create_order):
        """Test ordering by quantity sold."""
        create_order([
            {'variant': catalog['burger'].id, 'qty': 2, 'unit_price': 4000},
            {'variant': catalog['fries'].id, 'qty': 5, 'unit_price': 1000},
        ])
        create_order([{'variant': catalog['burger'].id, 'qty': 1, 'unit_price': 4000}])

        rows = ReportService.top_products()

        assert [row['name'] for row in rows] == ['Papas', 'Hamburguesa · Doble']
        assert rows[1]['qty'] == Decimal('3')
        assert rows[1]['total'] == Decimal('12000')

    def test_limit_and_window(self, catalog, create_order):
        """Test limit and date window."""
        create_order([{'variant': catalog['burger'].id, 'qty': 9, 'unit_price': 100}], opened_at=local(2024, 1, 5))
        create_order([{'variant': catalog['fries'].id, 'qty': 1, 'unit_price': 100}], opened_at=local(2024, 2, 5))
        create_order([{'variant': catalog['juice'].id, 'qty': 2, 'unit_price': 100}], opened_at=local(2024, 2, 6))

        gte, lt = parse_date_range({'from': '2024-02-01', 'to': '2024-03-01'})
        rows = ReportService.top_products(gte, lt, limit=1)

        assert [row['id'] for row in rows] == [catalog['juice'].id]


@pytest.mark.django_db
class TestSalesByHour:

    def test_groups_by_local_hour(self, catalog, create_order):
        """Test grouping by local hour."""
        item = [{'variant': catalog['fries'].id, 'qty': 1, 'unit_price': 1000}]
        create_order(item, opened_at=local(2024, 3, 15, 13, 5))
        create_order(item, opened_at=local(2024, 3, 15, 13, 50))
        create_order(item, opened_at=local(2024, 3, 15, 20, 0))
        create_order(item, opened_at=local(2024, 3, 16, 13, 0))

        gte, lt = parse_date_range({'date': '2024-03-15'})
        rows = ReportService.sales_by_hour(gte, lt)

        assert [(row['hour'], row['orders']) for row in rows] == [(13, 2), (20, 1)]
        assert rows[0]['total'] == Decimal('2000')


@pytest.mark.django_db
class TestInventoryValuation:

    def test_values_at_cost(self, catalog):
        """Test valuing stock at cost."""
        report = ReportService.inventory_valuation()

        assert [item['name'] for item in report['items']] == ['Hamburguesa', 'Jugo', 'Papas']
        by_variant = {item['variant_id']: item for item in report['items']}
        assert by_variant[catalog['burger'].id]['value'] == Decimal('6000')
        assert by_variant[catalog['fries'].id]['value'] == Decimal('0')
        assert report['total'] == Decimal('6600')


@pytest.mark.django_db
class TestLowRotation:

    def test_includes_unsold_and_orders_ascending(self, catalog, create_order):
        """Test that unsold variants are included."""
        create_order([{'variant': catalog['burger'].id, 'qty': 2, 'unit_price': 100}])
        create_order([{'variant': catalog['fries'].id, 'qty': 8, 'unit_price': 100}])

        rows = ReportService.low_rotation(threshold=Decimal('3'))

        assert [row['id'] for row in rows] == [catalog['juice'].id, catalog['burger'].id]
        assert rows[0]['qty'] == Decimal('0')
        assert rows[0]['name'] == 'Jugo · Único'

    def test_sales_outside_window_do_not_count(self, catalog, create_order):
        """Test sales outside the window."""
        create_order([{'variant': catalog['fries'].id, 'qty': 8, 'unit_price': 100}], opened_at=local(2024, 1, 5))

        gte, lt = parse_date_range({'from': '2024-02-01'})
        rows = ReportService.low_rotation(gte, lt, Decimal('3'))

        assert catalog['fries'].id in [row['id'] for row in rows]


@pytest.mark.django_db
class TestEmployeesSales:

    def test_every_user_listed(self, catalog, create_order, create_user, user):
        """Test that every user is listed."""
        other = create_user(email='otro@example.com', full_name='Otro')
        idle = create_user(email='idle@example.com', full_name='Sin ventas')
        create_order([{'variant': catalog['fries'].id, 'qty': 1, 'unit_price': 1000}], seller=user)
        create_order([{'variant': catalog['fries'].id, 'qty': 3, 'unit_price': 1000}], seller=other)
        create_order([{'variant': catalog['fries'].id, 'qty': 1, 'unit_price': 1000}], seller=other)

        rows = ReportService.employees_sales()

        assert [row['id'] for row in rows] == [other.id, user.id, idle.id]
        assert rows[0]['orders'] == 2
        assert rows[0]['total'] == Decimal('4000')
        assert rows[2]['orders'] == 0
        assert rows[2]['total'] == Decimal('0')


@pytest.mark.django_db
class TestFinancialSummary:

    def test_income_minus_expense(self, catalog, create_order):
        """Test profit calculation."""
        create_order([{'variant': catalog['fries'].id, 'qty': 5, 'unit_price': 1000}])
        Expense.objects.create(description='Gas', amount=Decimal('1200'))
        Expense.objects.create(description='Antiguo', amount=Decimal('999'), occurred_at=local(2020, 1, 1))

        gte, lt = parse_date_range({'from': '2024-01-01'})
        summary = ReportService.financial_summary(gte, lt)

        assert summary == {
            'income': Decimal('5000'),
            'expense': Decimal('1200'),
            'profit': Decimal('3800'),
        }

    def test_empty(self):
        """Test an empty summary."""
        assert ReportService.financial_summary() == {
            'income': Decimal('0'),
            'expense': Decimal('0'),
            'profit': Decimal('0'),
        }
