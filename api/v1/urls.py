"""
API v1 URL Configuration.
"""
from django.urls import path, include

urlpatterns = [
    # Auth & Users
    path('', include('apps.accounts.urls')),

    # Catalog
    path('', include('apps.products.urls')),

    # Stock movements
    path('', include('apps.inventory.urls')),

    # Orders & Payments
    path('', include('apps.sales.urls')),

    # Purchase invoices & Expenses
    path('', include('apps.purchasing.urls')),

    # Business settings
    path('', include('apps.stores.urls')),

    # Reports
    path('', include('apps.reports.urls')),

    # Audit log
    path('', include('apps.core.urls')),
]
