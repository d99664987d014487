"""
Store admin configuration.
"""
from django.contrib import admin
from .models import StoreSettings


@admin.register(StoreSettings)
class StoreSettingsAdmin(admin.ModelAdmin):
    list_display = ['company_name', 'rut', 'currency', 'tax_name', 'tax_rate']
    readonly_fields = ['logo_type', 'updated_at']

    def has_add_permission(self, request):
        return not StoreSettings.objects.exists()
