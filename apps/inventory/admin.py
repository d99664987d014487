"""
Inventory admin configuration.
"""
from django.contrib import admin
from .models import StockMovement


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'variant', 'movement_type', 'quantity', 'balance', 'created_by']
    list_filter = ['movement_type']
    search_fields = ['variant__product__name', 'note']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['variant']
