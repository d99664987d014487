"""
Pytest configuration and shared fixtures.
"""
import io
from decimal import Decimal

import pytest
from PIL import Image
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken


def authenticate(client, user):
    """Attach a bearer access token for `user` to the client."""
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an API client instance."""
    return APIClient()


@pytest.fixture
def create_user(db):
    """Factory fixture to create users."""
    def _create_user(
        email='test@example.com',
        password='testpass123',
        full_name='Test User',
        role='CASHIER',
        **kwargs
    ):
        from apps.accounts.models import User
        return User.objects.create_user(
            email=email,
            password=password,
            full_name=full_name,
            role=role,
            **kwargs
        )
    return _create_user


@pytest.fixture
def user(create_user):
    """Create a cashier."""
    return create_user()


@pytest.fixture
def admin_user(create_user):
    """Create an administrator."""
    return create_user(
        email='admin@example.com',
        full_name='Admin User',
        role='ADMIN',
        is_staff=True,
        is_superuser=True
    )


@pytest.fixture
def shift_lead(create_user):
    """Create a shift lead."""
    return create_user(email='lead@example.com', full_name='Shift Lead', role='SHIFT_LEAD')


@pytest.fixture
def auth_client(user):
    """Return an API client authenticated as a cashier."""
    return authenticate(APIClient(), user)


@pytest.fixture
def cashier_client(auth_client):
    return auth_client


@pytest.fixture
def admin_client(admin_user):
    """Return an API client authenticated as an administrator."""
    return authenticate(APIClient(), admin_user)


@pytest.fixture
def shift_lead_client(shift_lead):
    """Return an API client authenticated as a shift lead."""
    return authenticate(APIClient(), shift_lead)


@pytest.fixture
def create_product_type(db):
    """Factory fixture to create product types."""
    def _create_product_type(name='Comida', **kwargs):
        from apps.products.models import ProductType
        product_type, _ = ProductType.objects.get_or_create(name=name, defaults=kwargs)
        return product_type
    return _create_product_type


@pytest.fixture
def create_category(db):
    """Factory fixture to create categories."""
    def _create_category(name='Comida', **kwargs):
        from apps.products.models import Category
        category, _ = Category.objects.get_or_create(name=name, defaults=kwargs)
        return category
    return _create_category


@pytest.fixture
def create_product(db, create_product_type, create_category):
    """
    Factory fixture to create a product with one variant.
    Returns the product; the variant is `product.variants.first()`.
    """
    def _create_product(
        name='Hamburguesa',
        price=Decimal('3500'),
        cost=None,
        quantity=Decimal('0'),
        variant_name='Único',
        type_name='Comida',
        is_stock_item=False,
        is_sellable=True,
        active=True,
        **kwargs
    ):
        from apps.products.models import Product, ProductVariant
        product = Product.objects.create(
            name=name,
            category=create_category(type_name),
            type=create_product_type(type_name),
            is_stock_item=is_stock_item,
            is_sellable=is_sellable,
            **kwargs
        )
        ProductVariant.objects.create(
            product=product,
            name=variant_name,
            price=price,
            cost=cost,
            quantity=quantity,
            active=active
        )
        return product
    return _create_product


@pytest.fixture
def product(create_product):
    """Create a default product."""
    return create_product()


@pytest.fixture
def variant(product):
    """The default product's variant."""
    return product.variants.first()


@pytest.fixture
def create_order(db, user):
    """Factory fixture to create orders through the sales service."""
    def _create_order(items, seller=None, tip=0, discount=0, opened_at=None):
        from apps.sales.services import SalesService
        order = SalesService.create_order(
            {'items': items, 'tip': tip, 'discount': discount},
            seller or user
        )
        if opened_at is not None:
            order.opened_at = opened_at
            order.save(update_fields=['opened_at'])
        return order
    return _create_order


@pytest.fixture
def png_file():
    """Factory for small in-memory PNG uploads."""
    def _png_file(name='image.png', size=(4, 4), color='red'):
        from django.core.files.uploadedfile import SimpleUploadedFile
        buffer = io.BytesIO()
        Image.new('RGB', size, color).save(buffer, format='PNG')
        return SimpleUploadedFile(name, buffer.getvalue(), content_type='image/png')
    return _png_file
