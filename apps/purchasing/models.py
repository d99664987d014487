"""
Purchasing models: PurchaseInvoice, Expense.
"""
from django.db import models
from django.utils import timezone
from apps.core.models import BaseModel


class PurchaseInvoice(BaseModel):
    """Archived supplier invoice with its scanned file."""
    invoice_number = models.CharField(max_length=100, verbose_name='Número de factura')
    company_name = models.CharField(max_length=200, verbose_name='Proveedor')
    invoice_date = models.DateTimeField(default=timezone.now, verbose_name='Fecha de factura')
    uploaded_at = models.DateTimeField(auto_now_add=True, verbose_name='Fecha de carga')
    total = models.DecimalField(max_digits=12, decimal_places=2, verbose_name='Total')
    file = models.FileField(upload_to='purchase_invoices/%Y/%m/', verbose_name='Archivo')
    file_type = models.CharField(max_length=100, verbose_name='Tipo de archivo')
    file_name = models.CharField(max_length=255, blank=True, verbose_name='Nombre de archivo')

    class Meta:
        db_table = 'purchase_invoices'
        verbose_name = 'Factura de compra'
        verbose_name_plural = 'Facturas de compra'
        ordering = ['-invoice_date']
        indexes = [
            models.Index(fields=['invoice_date']),
        ]

    def __str__(self):
        return f'{self.invoice_number} - {self.company_name}'


class Expense(BaseModel):
    """Operating expense; feeds the financial summary."""
    description = models.CharField(max_length=255, verbose_name='Descripción')
    category = models.CharField(max_length=100, blank=True, verbose_name='Categoría')
    amount = models.DecimalField(max_digits=12, decimal_places=2, verbose_name='Monto')
    occurred_at = models.DateTimeField(default=timezone.now, verbose_name='Fecha')

    class Meta:
        db_table = 'expenses'
        verbose_name = 'Gasto'
        verbose_name_plural = 'Gastos'
        ordering = ['-occurred_at']

    def __str__(self):
        return f'{self.description} ({self.amount})'
