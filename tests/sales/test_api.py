"""
Tests for orders API endpoints.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework import status

from apps.sales.models import Order


@pytest.mark.django_db
class TestOrderCreateAPI:

    def test_cashier_creates_order(self, auth_client, user, create_product):
        """Test creating an order."""
        variant = create_product(is_stock_item=True, quantity=Decimal('5')).variants.first()

        response = auth_client.post('/api/v1/orders/', {
            'items': [{'variant': variant.id, 'qty': '2', 'unit_price': '3500', 'description': 'Sin cebolla'}],
            'tip': '700',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        data = response.data['data']
        assert Decimal(str(data['total'])) == Decimal('7700')
        assert data['status'] == 'DELIVERED'
        assert data['user'] == user.id
        assert data['items'][0]['description'] == 'Sin cebolla'
        variant.refresh_from_db()
        assert variant.quantity == Decimal('3')

    def test_empty_items_rejected(self, auth_client):
        """Test creating an order without items."""
        response = auth_client.post('/api/v1/orders/', {'items': []}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_negative_price_rejected(self, auth_client, variant):
        """Test creating an order with a negative price."""
        response = auth_client.post('/api/v1/orders/', {
            'items': [{'variant': variant.id, 'qty': '1', 'unit_price': '-10'}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_insufficient_stock(self, auth_client, create_product):
        """Test creating an order with insufficient stock."""
        variant = create_product(is_stock_item=True, quantity=Decimal('1')).variants.first()

        response = auth_client.post('/api/v1/orders/', {
            'items': [{'variant': variant.id, 'qty': '2', 'unit_price': '100'}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'INSUFFICIENT_STOCK'

    def test_oversized_total_rejected(self, auth_client, create_product):
        """Test that a line total too large to store is rejected with 400."""
        variant = create_product(is_stock_item=True, quantity=Decimal('5')).variants.first()

        response = auth_client.post('/api/v1/orders/', {
            'items': [{'variant': variant.id, 'qty': '999999999', 'unit_price': '9999999999'}],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'
        assert not Order.objects.exists()
        variant.refresh_from_db()
        assert variant.quantity == Decimal('5')

    def test_tip_pushing_total_over_limit_rejected(self, auth_client, variant):
        """Test that subtotal plus tip must still fit the money columns."""
        response = auth_client.post('/api/v1/orders/', {
            'items': [{'variant': variant.id, 'qty': '1', 'unit_price': '9999999999'}],
            'tip': '5',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'

    def test_requires_authentication(self, api_client, variant):
        """Test creating an order without authentication."""
        response = api_client.post('/api/v1/orders/', {
            'items': [{'variant': variant.id, 'qty': '1', 'unit_price': '100'}],
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestOrderListAPI:

    def test_defaults_to_today(self, auth_client, create_order, variant):
        """Test that listing defaults to today."""
        today = create_order([{'variant': variant.id, 'qty': 1, 'unit_price': 100}])
        create_order(
            [{'variant': variant.id, 'qty': 1, 'unit_price': 100}],
            opened_at=timezone.now() - timedelta(days=3)
        )

        response = auth_client.get('/api/v1/orders/')

        assert response.status_code == status.HTTP_200_OK
        assert [row['id'] for row in response.data['data']] == [today.id]

    def test_date_param(self, auth_client, create_order, variant):
        """Test filtering orders by date."""
        past = timezone.now() - timedelta(days=3)
        old = create_order([{'variant': variant.id, 'qty': 1, 'unit_price': 100}], opened_at=past)

        response = auth_client.get('/api/v1/orders/', {'date': timezone.localtime(past).date().isoformat()})

        assert [row['id'] for row in response.data['data']] == [old.id]

    def test_from_to_params(self, auth_client, create_order, variant):
        """Test filtering orders by range."""
        now = timezone.now()
        create_order([{'variant': variant.id, 'qty': 1, 'unit_price': 100}], opened_at=now - timedelta(days=10))
        recent = create_order([{'variant': variant.id, 'qty': 1, 'unit_price': 100}], opened_at=now - timedelta(days=2))

        response = auth_client.get('/api/v1/orders/', {
            'from': (now - timedelta(days=5)).isoformat(),
            'to': (now + timedelta(minutes=1)).isoformat(),
        })

        assert [row['id'] for row in response.data['data']] == [recent.id]

    def test_invalid_date(self, auth_client):
        """Test listing with an invalid date."""
        response = auth_client.get('/api/v1/orders/', {'date': 'ayer'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'VALIDATION_ERROR'

    def test_retrieve(self, auth_client, create_order, variant):
        """Test getting order detail."""
        order = create_order([{'variant': variant.id, 'qty': 1, 'unit_price': 100}])

        response = auth_client.get(f'/api/v1/orders/{order.id}/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['order_number'] == order.order_number


@pytest.mark.django_db
class TestPaymentAPI:

    def test_add_payment(self, auth_client, create_order, variant):
        """Test adding a payment."""
        order = create_order([{'variant': variant.id, 'qty': 1, 'unit_price': 3500}])

        response = auth_client.post(f'/api/v1/orders/{order.id}/payments/', {
            'method': 'CASH',
            'amount': '3500',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['method'] == 'CASH'
        assert order.payments.count() == 1

    def test_invalid_method(self, auth_client, create_order, variant):
        """Test adding a payment with an invalid method."""
        order = create_order([{'variant': variant.id, 'qty': 1, 'unit_price': 3500}])

        response = auth_client.post(f'/api/v1/orders/{order.id}/payments/', {
            'method': 'BITCOIN',
            'amount': '3500',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
