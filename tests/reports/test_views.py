"""
Tests for reports API endpoints.
"""
from decimal import Decimal

import pytest
from rest_framework import status


@pytest.fixture
def sold_variant(create_product, create_order):
    variant = create_product(name='Hamburguesa', cost=Decimal('1000'), quantity=Decimal('3')).variants.first()
    create_order([{'variant': variant.id, 'qty': 2, 'unit_price': 3500}])
    return variant


@pytest.mark.django_db
class TestReportAccess:

    @pytest.mark.parametrize('path', [
        'top-products',
        'sales-by-hour',
        'inventory-valuation',
        'low-rotation',
        'employees-sales',
        'financial-summary',
    ])
    def test_cashier_forbidden(self, auth_client, path):
        """Test that cashiers cannot read reports."""
        response = auth_client.get(f'/api/v1/reports/{path}/')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.parametrize('path', [
        'top-products',
        'sales-by-hour',
        'inventory-valuation',
        'low-rotation',
        'employees-sales',
        'financial-summary',
    ])
    def test_shift_lead_allowed(self, shift_lead_client, path):
        """Test that shift leads can read reports."""
        response = shift_lead_client.get(f'/api/v1/reports/{path}/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True


@pytest.mark.django_db
class TestReportEndpoints:

    def test_top_products(self, shift_lead_client, sold_variant):
        """Test the top products report."""
        response = shift_lead_client.get('/api/v1/reports/top-products/', {'limit': 5})

        row = response.data['data'][0]
        assert row['id'] == sold_variant.id
        assert row['name'] == 'Hamburguesa · Único'
        assert Decimal(str(row['qty'])) == Decimal('2')
        assert Decimal(str(row['total'])) == Decimal('7000')

    def test_sales_by_hour_today(self, shift_lead_client, sold_variant):
        """Test sales by hour for today."""
        response = shift_lead_client.get('/api/v1/reports/sales-by-hour/')

        rows = response.data['data']
        assert len(rows) == 1
        assert rows[0]['orders'] == 1

    def test_inventory_valuation(self, admin_client, sold_variant):
        """Test the inventory valuation report."""
        response = admin_client.get('/api/v1/reports/inventory-valuation/')

        data = response.data['data']
        assert Decimal(str(data['total'])) == Decimal('3000')
        assert data['items'][0]['variant_id'] == sold_variant.id

    def test_low_rotation_threshold(self, shift_lead_client, sold_variant):
        """Test low rotation with a threshold."""
        below = shift_lead_client.get('/api/v1/reports/low-rotation/', {'threshold': '1'})
        above = shift_lead_client.get('/api/v1/reports/low-rotation/', {'threshold': '2'})

        assert below.data['data'] == []
        assert [row['id'] for row in above.data['data']] == [sold_variant.id]

    def test_financial_summary(self, shift_lead_client, sold_variant):
        """Test the financial summary report."""
        response = shift_lead_client.get('/api/v1/reports/financial-summary/')

        data = response.data['data']
        assert Decimal(str(data['income'])) == Decimal('7000')
        assert Decimal(str(data['profit'])) == Decimal('7000')

    def test_invalid_range(self, shift_lead_client):
        """Test an invalid date range."""
        response = shift_lead_client.get('/api/v1/reports/top-products/', {'from': 'mañana'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'

    def test_invalid_limit(self, shift_lead_client):
        """Test an invalid limit."""
        response = shift_lead_client.get('/api/v1/reports/top-products/', {'limit': 'diez'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestReportExport:

    def test_csv(self, shift_lead_client, sold_variant):
        """Test exporting CSV."""
        response = shift_lead_client.get('/api/v1/reports/export/top-products/')

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'].startswith('text/csv')
        assert 'attachment; filename="top-products_' in response['Content-Disposition']
        body = response.content.decode('utf-8')
        assert body.startswith('\ufeff')
        assert 'Producto' in body
        assert 'Hamburguesa · Único' in body

    def test_excel(self, shift_lead_client, sold_variant):
        """Test exporting Excel."""
        response = shift_lead_client.get('/api/v1/reports/export/orders/', {'export_format': 'excel'})

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == (
            'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        assert response.content[:2] == b'PK'

    def test_pdf(self, shift_lead_client, sold_variant):
        """Test exporting PDF."""
        response = shift_lead_client.get('/api/v1/reports/export/employees-sales/', {'export_format': 'pdf'})

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'application/pdf'
        assert response.content.startswith(b'%PDF')

    def test_inventory_valuation_csv(self, shift_lead_client, sold_variant):
        """Test exporting inventory valuation."""
        response = shift_lead_client.get('/api/v1/reports/export/inventory-valuation/')

        assert response.status_code == status.HTTP_200_OK
        assert 'Valor' in response.content.decode('utf-8')

    def test_unknown_report(self, shift_lead_client):
        """Test exporting an unknown report."""
        response = shift_lead_client.get('/api/v1/reports/export/sales-by-hour/')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_format(self, shift_lead_client):
        """Test exporting an unknown format."""
        response = shift_lead_client.get('/api/v1/reports/export/orders/', {'export_format': 'xml'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_cashier_forbidden(self, auth_client):
        """Test that cashiers cannot export."""
        response = auth_client.get('/api/v1/reports/export/orders/')

        assert response.status_code == status.HTTP_403_FORBIDDEN
