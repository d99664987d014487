"""
Sales admin configuration.
"""
from django.contrib import admin
from .models import Order, OrderItem, Payment


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ['variant', 'description', 'qty', 'unit_price', 'total']
    readonly_fields = ['total']
    raw_id_fields = ['variant']


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    fields = ['method', 'amount', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['order_number', 'channel', 'status', 'total', 'user', 'opened_at']
    list_filter = ['status', 'channel']
    search_fields = ['order_number']
    date_hierarchy = 'opened_at'
    inlines = [OrderItemInline, PaymentInline]
