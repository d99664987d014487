"""
Product models: ProductType, Category, Product, ProductVariant.
"""
from django.db import models
from apps.core.models import BaseModel

DEFAULT_VARIANT_NAME = 'Único'


def variant_label(product_name, variant_name):
    """Product name, plus the variant name when it has one."""
    if variant_name:
        return f'{product_name} · {variant_name}'
    return product_name


class ProductType(BaseModel):
    """Product type (Comida, Bebidas, Alcohol...)."""
    name = models.CharField(max_length=100, unique=True, verbose_name='Nombre')

    class Meta:
        db_table = 'product_types'
        verbose_name = 'Tipo de producto'
        verbose_name_plural = 'Tipos de producto'
        ordering = ['name']

    def __str__(self):
        return self.name


class Category(BaseModel):
    """Product category. Its name must match an existing product type."""
    name = models.CharField(max_length=100, unique=True, verbose_name='Nombre')

    class Meta:
        db_table = 'categories'
        verbose_name = 'Categoría'
        verbose_name_plural = 'Categorías'
        ordering = ['name']

    def __str__(self):
        return self.name


class Product(BaseModel):
    """Product model."""
    name = models.CharField(max_length=200, verbose_name='Nombre')
    description = models.TextField(blank=True, verbose_name='Descripción')
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Categoría'
    )
    type = models.ForeignKey(
        ProductType,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Tipo'
    )
    is_sellable = models.BooleanField(default=True, verbose_name='Se vende')
    is_stock_item = models.BooleanField(default=False, verbose_name='Controla stock')
    image = models.ImageField(
        upload_to='products/',
        null=True,
        blank=True,
        verbose_name='Imagen'
    )
    image_type = models.CharField(max_length=100, blank=True, verbose_name='Tipo de imagen')
    image_url = models.CharField(max_length=500, blank=True, verbose_name='URL de imagen')

    class Meta:
        db_table = 'products'
        verbose_name = 'Producto'
        verbose_name_plural = 'Productos'
        ordering = ['name']
        indexes = [
            models.Index(fields=['is_sellable']),
            models.Index(fields=['type']),
        ]

    def __str__(self):
        return self.name

    @property
    def has_image(self):
        return bool(self.image)


class ProductVariant(BaseModel):
    """Sellable variant (size) of a product. Stock on hand lives here."""
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Producto'
    )
    name = models.CharField(max_length=100, default=DEFAULT_VARIANT_NAME, verbose_name='Variante')
    price = models.DecimalField(max_digits=12, decimal_places=2, verbose_name='Precio')
    cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Costo'
    )
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=0,
        verbose_name='Stock'
    )
    active = models.BooleanField(default=True, verbose_name='Activa')

    class Meta:
        db_table = 'product_variants'
        verbose_name = 'Variante'
        verbose_name_plural = 'Variantes'
        ordering = ['id']

    def __str__(self):
        return variant_label(self.product.name, self.name)
