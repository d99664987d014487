"""
Purchasing URLs.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ExpenseViewSet, PurchaseInvoiceViewSet

router = DefaultRouter()
router.register(r'purchase-invoices', PurchaseInvoiceViewSet, basename='purchase-invoice')
router.register(r'expenses', ExpenseViewSet, basename='expense')

urlpatterns = [
    path('', include(router.urls)),
]
