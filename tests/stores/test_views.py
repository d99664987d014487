"""
Tests for store settings API.
"""
from decimal import Decimal

import pytest
from django.test import override_settings
from rest_framework import status

from apps.stores.models import StoreSettings


@pytest.mark.django_db
class TestStoreSettingsAPI:

    def test_defaults_when_never_saved(self, api_client):
        """Test getting defaults before any save."""
        response = api_client.get('/api/v1/settings/')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['currency'] == 'CLP'
        assert data['date_time_format'] == 'DD/MM/YYYY HH:mm'
        assert data['tax_name'] == 'IVA'
        assert Decimal(str(data['tax_rate'])) == Decimal('0')
        assert data['auto_copies'] == 1
        assert data['has_logo'] is False
        assert 'logo' not in data
        assert not StoreSettings.objects.exists()

    def test_admin_updates_json(self, admin_client, api_client):
        """Test updating settings."""
        response = admin_client.put('/api/v1/settings/', {
            'company_name': 'Sanguchería Don Pepe',
            'rut': '76.123.456-7',
            'tax_rate': '19',
            'auto_copies': 2,
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['company_name'] == 'Sanguchería Don Pepe'

        public = api_client.get('/api/v1/settings/')
        assert public.data['data']['rut'] == '76.123.456-7'
        assert Decimal(str(public.data['data']['tax_rate'])) == Decimal('19')
        assert StoreSettings.objects.count() == 1

    def test_repeated_updates_keep_one_row(self, admin_client):
        """Test that updates keep a single row."""
        admin_client.put('/api/v1/settings/', {'company_name': 'Uno'}, format='json')
        admin_client.put('/api/v1/settings/', {'phone': '+56 9 1234 5678'}, format='json')

        settings_row = StoreSettings.objects.get()
        assert settings_row.company_name == 'Uno'
        assert settings_row.phone == '+56 9 1234 5678'

    def test_negative_tax_rate(self, admin_client):
        """Test a negative tax rate."""
        response = admin_client.put('/api/v1/settings/', {'tax_rate': '-1'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'Tasa de impuesto inválida'

    def test_non_admin_cannot_update(self, shift_lead_client, api_client):
        """Test updating without admin role."""
        assert shift_lead_client.put('/api/v1/settings/', {'company_name': 'X'}, format='json').status_code \
            == status.HTTP_403_FORBIDDEN
        assert api_client.put('/api/v1/settings/', {'company_name': 'X'}, format='json').status_code \
            == status.HTTP_401_UNAUTHORIZED

    def test_logo_upload_and_download(self, admin_client, api_client, png_file):
        """Test uploading and getting the logo."""
        response = admin_client.put('/api/v1/settings/', {
            'company_name': 'Con logo',
            'logo': png_file('logo.png'),
        }, format='multipart')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['has_logo'] is True

        logo = api_client.get('/api/v1/settings/logo/')
        assert logo.status_code == status.HTTP_200_OK
        assert logo['Content-Type'] == 'image/png'

    @override_settings(PRODUCT_IMAGE_MAX_SIZE=10)
    def test_logo_over_size_limit(self, admin_client, png_file):
        """Test that a logo over the size limit is rejected."""
        response = admin_client.put('/api/v1/settings/', {
            'logo': png_file('logo.png'),
        }, format='multipart')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'El logo supera el tamaño máximo de 5 MB'
        assert not StoreSettings.objects.exists()

    def test_logo_missing(self, api_client):
        """Test getting a missing logo."""
        response = api_client.get('/api/v1/settings/logo/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
