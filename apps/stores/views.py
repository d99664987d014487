"""
Store views.
"""
import logging

from django.http import FileResponse, Http404
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.core.mixins import StandardResponseMixin
from apps.core.permissions import IsAdminUser
from .models import StoreSettings
from .serializers import StoreSettingsSerializer

logger = logging.getLogger(__name__)


class StoreSettingsView(StandardResponseMixin, APIView):
    """
    Business settings.
    Anyone may read them (receipts and the login screen need them); only administrators write.
    """

    def get_permissions(self):
        if self.request.method == 'PUT':
            return [IsAdminUser()]
        return [AllowAny()]

    def get(self, request):
        settings_row = StoreSettings.load()
        return self.success_response(data=StoreSettingsSerializer(settings_row).data)

    def put(self, request):
        settings_row = StoreSettings.load()
        serializer = StoreSettingsSerializer(settings_row, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        settings_row = serializer.save(updated_by=request.user)
        logger.info(f"Store settings updated by {request.user.email}")
        return self.success_response(
            data=StoreSettingsSerializer(settings_row).data,
            message='Configuración guardada'
        )


class StoreLogoView(APIView):
    """Serve the uploaded store logo."""
    permission_classes = [AllowAny]

    def get(self, request):
        settings_row = StoreSettings.load()
        if not settings_row.has_logo:
            raise Http404('No hay logo configurado')
        try:
            logo = settings_row.logo.open('rb')
        except FileNotFoundError:
            raise Http404('No hay logo configurado')
        return FileResponse(logo, content_type=settings_row.logo_type)
