"""
URL configuration for the ventas-inventario project.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

from apps.core.views import HealthView, RootView

urlpatterns = [
    path('', RootView.as_view(), name='root'),
    path('health/', HealthView.as_view(), name='health'),
    path('admin/', admin.site.urls),
    path('api/v1/', include('api.v1.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
