"""
Store models: StoreSettings.
"""
from django.conf import settings
from django.db import models
from apps.core.models import BaseModel


def default_currency():
    return settings.POS_CURRENCY


class StoreSettings(BaseModel):
    """Business settings for the store. A single row is kept."""
    SINGLETON_ID = 1

    company_name = models.CharField(max_length=200, blank=True, verbose_name='Razón social')
    rut = models.CharField(max_length=20, blank=True, verbose_name='RUT')
    address = models.CharField(max_length=255, blank=True, verbose_name='Dirección')
    phone = models.CharField(max_length=50, blank=True, verbose_name='Teléfono')
    email = models.EmailField(blank=True, verbose_name='Correo')
    receipt_message = models.TextField(blank=True, verbose_name='Mensaje de boleta')
    currency = models.CharField(max_length=10, default=default_currency, verbose_name='Moneda')
    date_time_format = models.CharField(
        max_length=50,
        default='DD/MM/YYYY HH:mm',
        verbose_name='Formato de fecha y hora'
    )
    tax_name = models.CharField(max_length=20, default='IVA', verbose_name='Nombre del impuesto')
    tax_rate = models.DecimalField(max_digits=5, decimal_places=2, default=0, verbose_name='Tasa de impuesto (%)')
    document_type = models.CharField(max_length=50, blank=True, verbose_name='Tipo de documento')
    auto_copies = models.PositiveIntegerField(default=1, verbose_name='Copias automáticas')
    logo = models.ImageField(upload_to='settings/', null=True, blank=True, verbose_name='Logo')
    logo_type = models.CharField(max_length=100, blank=True, verbose_name='Tipo de logo')

    class Meta:
        db_table = 'store_settings'
        verbose_name = 'Configuración del local'
        verbose_name_plural = 'Configuración del local'

    def __str__(self):
        return self.company_name or 'Configuración'

    @classmethod
    def load(cls):
        """Return the saved settings row, or unsaved defaults."""
        return cls.objects.filter(pk=cls.SINGLETON_ID).first() or cls(pk=cls.SINGLETON_ID)

    @property
    def has_logo(self):
        return bool(self.logo and self.logo_type)
