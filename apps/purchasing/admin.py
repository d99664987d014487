"""
Purchasing admin configuration.
"""
from django.contrib import admin
from .models import Expense, PurchaseInvoice


@admin.register(PurchaseInvoice)
class PurchaseInvoiceAdmin(admin.ModelAdmin):
    list_display = ['invoice_number', 'company_name', 'invoice_date', 'total', 'file_type']
    search_fields = ['invoice_number', 'company_name']
    date_hierarchy = 'invoice_date'
    readonly_fields = ['uploaded_at', 'file_type', 'file_name']


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'category', 'amount', 'occurred_at']
    list_filter = ['category']
    search_fields = ['description']
    date_hierarchy = 'occurred_at'
