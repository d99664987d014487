"""
Sales models: Order, OrderItem, Payment.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone
from apps.core.models import BaseModel


class Order(BaseModel):
    """Sales order."""
    CHANNEL_CHOICES = [
        ('SALON', 'Salón'),
        ('TAKEAWAY', 'Para llevar'),
        ('DELIVERY', 'Delivery'),
    ]

    STATUS_CHOICES = [
        ('OPEN', 'Abierto'),
        ('DELIVERED', 'Entregado'),
        ('CANCELLED', 'Anulado'),
    ]

    order_number = models.CharField(max_length=50, unique=True, verbose_name='Número de pedido')
    channel = models.CharField(
        max_length=10,
        choices=CHANNEL_CHOICES,
        default='SALON',
        verbose_name='Canal'
    )
    status = models.CharField(
        max_length=10,
        choices=STATUS_CHOICES,
        default='DELIVERED',
        verbose_name='Estado'
    )
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=0, verbose_name='Subtotal')
    tax = models.DecimalField(max_digits=12, decimal_places=2, default=0, verbose_name='Impuesto')
    tip = models.DecimalField(max_digits=12, decimal_places=2, default=0, verbose_name='Propina')
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=0, verbose_name='Descuento')
    total = models.DecimalField(max_digits=12, decimal_places=2, default=0, verbose_name='Total')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
        verbose_name='Vendedor'
    )
    opened_at = models.DateTimeField(default=timezone.now, verbose_name='Apertura')
    closed_at = models.DateTimeField(null=True, blank=True, verbose_name='Cierre')

    class Meta:
        db_table = 'orders'
        verbose_name = 'Pedido'
        verbose_name_plural = 'Pedidos'
        ordering = ['-opened_at']
        indexes = [
            models.Index(fields=['opened_at']),
            models.Index(fields=['status']),
        ]

    def __str__(self):
        return self.order_number


class OrderItem(BaseModel):
    """Order line item."""
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='Pedido'
    )
    variant = models.ForeignKey(
        'products.ProductVariant',
        on_delete=models.PROTECT,
        related_name='order_items',
        verbose_name='Variante'
    )
    description = models.CharField(max_length=255, blank=True, verbose_name='Descripción')
    qty = models.DecimalField(max_digits=12, decimal_places=3, verbose_name='Cantidad')
    unit_price = models.DecimalField(max_digits=12, decimal_places=2, verbose_name='Precio unitario')
    total = models.DecimalField(max_digits=12, decimal_places=2, verbose_name='Total')

    class Meta:
        db_table = 'order_items'
        verbose_name = 'Ítem de pedido'
        verbose_name_plural = 'Ítems de pedido'
        ordering = ['id']

    def __str__(self):
        return f'{self.order.order_number} - {self.variant}'

    def save(self, *args, **kwargs):
        self.total = self.unit_price * self.qty
        super().save(*args, **kwargs)


class Payment(BaseModel):
    """Payment recorded against an order."""
    METHOD_CHOICES = [
        ('CASH', 'Efectivo'),
        ('CARD', 'Tarjeta'),
        ('TRANSFER', 'Transferencia'),
        ('QR', 'QR'),
        ('OTHER', 'Otro'),
    ]

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='payments',
        verbose_name='Pedido'
    )
    method = models.CharField(
        max_length=10,
        choices=METHOD_CHOICES,
        verbose_name='Medio de pago'
    )
    amount = models.DecimalField(max_digits=12, decimal_places=2, verbose_name='Monto')

    class Meta:
        db_table = 'payments'
        verbose_name = 'Pago'
        verbose_name_plural = 'Pagos'
        ordering = ['id']

    def __str__(self):
        return f'{self.order.order_number} - {self.get_method_display()} {self.amount}'
