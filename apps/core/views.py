"""
Core views and viewsets for the application.
"""
from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter, OrderingFilter

from .models import AuditLog
from .pagination import StandardPagination
from .permissions import IsAuthenticatedAndActive, IsAdminUser
from .serializers import AuditLogSerializer
from .utils import parse_date_range, range_filter


class BaseViewSet(viewsets.ModelViewSet):
    """Base ViewSet with common functionality."""
    pagination_class = StandardPagination
    permission_classes = [IsAuthenticatedAndActive]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]

    def perform_create(self, serializer):
        """Set created_by on create."""
        serializer.save(created_by=self.request.user)

    def perform_update(self, serializer):
        """Set updated_by on update."""
        serializer.save(updated_by=self.request.user)


class ReadOnlyViewSet(viewsets.ReadOnlyModelViewSet):
    """Read-only ViewSet."""
    pagination_class = StandardPagination
    permission_classes = [IsAuthenticatedAndActive]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]


class AuditLogViewSet(ReadOnlyViewSet):
    """Audit log browsing for administrators."""
    queryset = AuditLog.objects.select_related('user').all()
    serializer_class = AuditLogSerializer
    permission_classes = [IsAdminUser]
    filterset_fields = ['user', 'action', 'module']
    search_fields = ['username', 'target_id']
    ordering_fields = ['created_at']

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            gte, lt = parse_date_range(self.request.query_params)
            queryset = queryset.filter(**range_filter('created_at', gte, lt))
        return queryset


class RootView(APIView):
    """Service banner."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({
            'status': 'ok',
            'name': 'ventas-inventario-api',
            'docs': ['/api/v1/products/', '/health/'],
        })


class HealthView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'ok'})
