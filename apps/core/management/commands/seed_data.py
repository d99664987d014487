"""
Bootstrap data seeding command.
Crea el administrador inicial y el catálogo base.

Usage:
    python manage.py seed_data          # crea lo que falte
    python manage.py seed_data --demo   # agrega usuarios de ejemplo
    python manage.py seed_data --reset  # borra catálogo y ventas antes de sembrar
"""
from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

PRODUCT_TYPES = ['Comida', 'Bebidas', 'Alcohol']

PRODUCTS = [
    {'name': 'Hamburguesa Clásica', 'type': 'Comida', 'price': Decimal('3500')},
    {'name': 'Papas Fritas 150g', 'type': 'Comida', 'price': Decimal('1800')},
]

DEMO_USERS = [
    {'email': 'jefe@local.test', 'full_name': 'Jefa de Local', 'role': 'SHIFT_LEAD'},
    {'email': 'caja@local.test', 'full_name': 'Vendedor Caja', 'role': 'CASHIER'},
]


class Command(BaseCommand):
    help = 'Crea el administrador inicial y los datos base'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Borra catálogo, ventas y movimientos antes de sembrar',
        )
        parser.add_argument(
            '--demo',
            action='store_true',
            help='Agrega usuarios de ejemplo (contraseña demo123)',
        )

    def handle(self, *args, **options):
        if options['reset']:
            self.stdout.write('Borrando datos existentes...')
            self.clear_data()

        with transaction.atomic():
            admin = self.create_admin()
            self.create_product_types()
            self.create_products(admin)
            self.create_store_settings()
            if options['demo']:
                self.create_demo_users()

        self.stdout.write(self.style.SUCCESS('Datos base listos'))

    def clear_data(self):
        """Remove sales and catalog data; users and settings are kept."""
        from apps.inventory.models import StockMovement
        from apps.products.models import Category, Product, ProductType, ProductVariant
        from apps.sales.models import Order, OrderItem, Payment

        Payment.objects.all().delete()
        OrderItem.objects.all().delete()
        Order.objects.all().delete()
        StockMovement.objects.all().delete()
        ProductVariant.objects.all().delete()
        Product.objects.all().delete()
        Category.objects.all().delete()
        ProductType.objects.all().delete()

    def create_admin(self):
        from apps.accounts.models import User

        email = settings.ADMIN_EMAIL
        admin = User.objects.filter(email__iexact=email).first()
        if admin is None:
            admin = User.objects.create_superuser(
                email=email,
                password=settings.ADMIN_PASSWORD,
                full_name='Administrador',
            )
            self.stdout.write(f'  Administrador creado: {email}')
        return admin

    def create_product_types(self):
        from apps.products.models import Category, ProductType

        for name in PRODUCT_TYPES:
            ProductType.objects.get_or_create(name=name)
            Category.objects.get_or_create(name=name)
        self.stdout.write(f'  Tipos de producto: {", ".join(PRODUCT_TYPES)}')

    def create_products(self, admin):
        from apps.products.models import (
            DEFAULT_VARIANT_NAME, Category, Product, ProductType, ProductVariant
        )

        for data in PRODUCTS:
            if Product.objects.filter(name=data['name']).exists():
                continue
            product = Product.objects.create(
                name=data['name'],
                category=Category.objects.get(name=data['type']),
                type=ProductType.objects.get(name=data['type']),
                is_sellable=True,
                created_by=admin,
            )
            ProductVariant.objects.create(
                product=product,
                name=DEFAULT_VARIANT_NAME,
                price=data['price'],
                created_by=admin,
            )
            self.stdout.write(f'  Producto creado: {product.name}')

    def create_store_settings(self):
        from apps.stores.models import StoreSettings

        StoreSettings.objects.get_or_create(pk=StoreSettings.SINGLETON_ID)

    def create_demo_users(self):
        from apps.accounts.models import User

        for data in DEMO_USERS:
            if User.objects.filter(email__iexact=data['email']).exists():
                continue
            User.objects.create_user(password='demo123', **data)
            self.stdout.write(f"  Usuario de ejemplo: {data['email']} / demo123")
