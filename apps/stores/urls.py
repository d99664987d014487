"""
Store URLs.
"""
from django.urls import path

from .views import StoreLogoView, StoreSettingsView

urlpatterns = [
    path('settings/', StoreSettingsView.as_view(), name='store-settings'),
    path('settings/logo/', StoreLogoView.as_view(), name='store-settings-logo'),
]
