"""
Purchasing views.
"""
import logging
from urllib.parse import quote

from django.db.models import Q
from django.http import FileResponse, Http404
from rest_framework.decorators import action

from apps.core.mixins import MultiSerializerMixin, StandardResponseMixin
from apps.core.permissions import IsShiftLeadOrAbove
from apps.core.utils import parse_date_range, range_filter
from apps.core.views import BaseViewSet
from .models import Expense, PurchaseInvoice
from .serializers import (
    ExpenseSerializer,
    PurchaseInvoiceSerializer,
    PurchaseInvoiceUploadSerializer,
)

logger = logging.getLogger(__name__)


class PurchaseInvoiceViewSet(MultiSerializerMixin, StandardResponseMixin, BaseViewSet):
    """Purchase invoice archive: upload, search and file download."""
    queryset = PurchaseInvoice.objects.select_related('created_by').all()
    serializer_class = PurchaseInvoiceSerializer
    serializer_classes = {
        'create': PurchaseInvoiceUploadSerializer,
    }
    permission_classes = [IsShiftLeadOrAbove]
    http_method_names = ['get', 'post', 'delete', 'head', 'options']
    ordering_fields = ['invoice_date', 'total']
    ordering = ['-invoice_date']

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            params = self.request.query_params
            gte, lt = parse_date_range(params)
            queryset = queryset.filter(**range_filter('invoice_date', gte, lt))
            q = params.get('q', '').strip()
            if q:
                queryset = queryset.filter(
                    Q(invoice_number__icontains=q) | Q(company_name__icontains=q)
                )
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        invoice = serializer.save(created_by=request.user)
        logger.info(
            f"Purchase invoice {invoice.id} ({invoice.invoice_number}) uploaded by {request.user.email}"
        )
        return self.created_response(data={'id': invoice.id}, message='Factura guardada')

    def perform_destroy(self, instance):
        instance.file.delete(save=False)
        instance.delete()

    @action(detail=True, methods=['get'])
    def file(self, request, pk=None):
        """Serve the stored invoice file inline."""
        invoice = self.get_object()
        if not invoice.file:
            raise Http404('La factura no tiene archivo')
        try:
            stored = invoice.file.open('rb')
        except FileNotFoundError:
            raise Http404('La factura no tiene archivo')

        response = FileResponse(stored, content_type=invoice.file_type)
        if invoice.file_name:
            response['Content-Disposition'] = f'inline; filename="{quote(invoice.file_name)}"'
        return response


class ExpenseViewSet(BaseViewSet):
    """Expense management ViewSet."""
    queryset = Expense.objects.all()
    serializer_class = ExpenseSerializer
    permission_classes = [IsShiftLeadOrAbove]
    filterset_fields = ['category']
    search_fields = ['description', 'category']
    ordering_fields = ['occurred_at', 'amount']
    ordering = ['-occurred_at']

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            gte, lt = parse_date_range(self.request.query_params)
            queryset = queryset.filter(**range_filter('occurred_at', gte, lt))
        return queryset
