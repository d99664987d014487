"""
Core abstract models for the application.
"""
from django.db import models
from django.conf import settings


class TimeStampedModel(models.Model):
    """Abstract base model with created and updated timestamps."""
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Fecha de creación'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Fecha de actualización'
    )

    class Meta:
        abstract = True


class UserTrackingModel(TimeStampedModel):
    """Abstract model that tracks user who created/updated the record."""
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(class)s_created',
        verbose_name='Creado por'
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(class)s_updated',
        verbose_name='Actualizado por'
    )

    class Meta:
        abstract = True


class BaseModel(UserTrackingModel):
    """Base model with big integer key, timestamps and user tracking."""
    id = models.BigAutoField(primary_key=True)

    class Meta:
        abstract = True


class AuditLog(models.Model):
    """Audit log entry for a user operation."""
    ACTION_CHOICES = [
        ('CREATE', 'Crear'),
        ('UPDATE', 'Actualizar'),
        ('DELETE', 'Eliminar'),
        ('ADJUST', 'Ajustar'),
        ('EXPORT', 'Exportar'),
        ('LOGIN', 'Inicio de sesión'),
        ('LOGOUT', 'Cierre de sesión'),
    ]

    MODULE_CHOICES = [
        ('AUTH', 'Autenticación'),
        ('USER', 'Usuarios'),
        ('PRODUCT', 'Productos'),
        ('CATEGORY', 'Categorías'),
        ('PRODUCT_TYPE', 'Tipos de producto'),
        ('INVENTORY', 'Inventario'),
        ('ORDER', 'Pedidos'),
        ('PURCHASE_INVOICE', 'Facturas de compra'),
        ('EXPENSE', 'Gastos'),
        ('SETTINGS', 'Configuración'),
        ('REPORT', 'Informes'),
        ('UNKNOWN', 'Desconocido'),
    ]

    id = models.BigAutoField(primary_key=True)
    audit_id = models.CharField(
        max_length=64,
        unique=True,
        verbose_name='ID de auditoría'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
        verbose_name='Usuario'
    )
    username = models.CharField(
        max_length=254,
        verbose_name='Usuario (texto)'
    )
    action = models.CharField(
        max_length=20,
        choices=ACTION_CHOICES,
        verbose_name='Acción'
    )
    module = models.CharField(
        max_length=30,
        choices=MODULE_CHOICES,
        verbose_name='Módulo'
    )
    target_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        verbose_name='ID objetivo'
    )
    new_value = models.JSONField(
        null=True,
        blank=True,
        verbose_name='Valor nuevo'
    )
    ip_address = models.GenericIPAddressField(
        null=True,
        blank=True,
        verbose_name='Dirección IP'
    )
    user_agent = models.CharField(
        max_length=500,
        blank=True,
        verbose_name='User Agent'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Fecha'
    )

    class Meta:
        db_table = 'audit_logs'
        verbose_name = 'Registro de auditoría'
        verbose_name_plural = 'Registros de auditoría'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user']),
            models.Index(fields=['module']),
            models.Index(fields=['created_at']),
        ]

    def __str__(self):
        return f"{self.username} - {self.action} - {self.module} - {self.created_at}"
