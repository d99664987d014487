"""
Inventory models: StockMovement.
"""
from django.db import models
from apps.core.models import BaseModel


class StockMovement(BaseModel):
    """Stock movement log for a product variant."""
    TYPE_CHOICES = [
        ('SALE_OUT', 'Salida por venta'),
        ('ADJUST_IN', 'Ajuste de entrada'),
        ('ADJUST_OUT', 'Ajuste de salida'),
        ('COUNT_ADJUST', 'Ajuste por conteo'),
    ]

    variant = models.ForeignKey(
        'products.ProductVariant',
        on_delete=models.CASCADE,
        related_name='movements',
        verbose_name='Variante'
    )
    movement_type = models.CharField(
        max_length=20,
        choices=TYPE_CHOICES,
        verbose_name='Tipo de movimiento'
    )
    quantity = models.DecimalField(max_digits=12, decimal_places=3, verbose_name='Cantidad')
    balance = models.DecimalField(max_digits=12, decimal_places=3, verbose_name='Saldo')
    reference_type = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='Tipo de referencia'
    )
    reference_id = models.BigIntegerField(null=True, blank=True, verbose_name='ID de referencia')
    note = models.TextField(blank=True, verbose_name='Nota')

    class Meta:
        db_table = 'stock_movements'
        verbose_name = 'Movimiento de stock'
        verbose_name_plural = 'Movimientos de stock'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['variant', 'created_at']),
        ]

    def __str__(self):
        return f'{self.variant}: {self.quantity:+}'
