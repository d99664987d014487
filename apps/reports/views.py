"""
Reports views.
"""
import logging

from django.utils import timezone
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound

from apps.core.exceptions import ValidationError
from apps.core.export import ExportService
from apps.core.mixins import StandardResponseMixin
from apps.core.permissions import IsShiftLeadOrAbove
from apps.core.throttling import ExportThrottle, ReportThrottle
from apps.core.utils import parse_date_range, parse_decimal, parse_positive_int
from .services import ReportService

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = {
    'top-products': [
        ('id', 'ID'),
        ('name', 'Producto'),
        ('qty', 'Cantidad'),
        ('total', 'Total'),
    ],
    'inventory-valuation': [
        ('name', 'Producto'),
        ('variant_name', 'Variante'),
        ('quantity', 'Stock'),
        ('cost', 'Costo'),
        ('value', 'Valor'),
    ],
    'employees-sales': [
        ('name', 'Empleado'),
        ('orders', 'Pedidos'),
        ('total', 'Total'),
    ],
    'orders': [
        ('order_number', 'Número'),
        ('opened_at', 'Apertura'),
        ('channel', 'Canal'),
        ('status', 'Estado'),
        ('cashier', 'Vendedor'),
        ('subtotal', 'Subtotal'),
        ('discount', 'Descuento'),
        ('tip', 'Propina'),
        ('total', 'Total'),
    ],
}

EXPORT_TITLES = {
    'top-products': 'Productos más vendidos',
    'inventory-valuation': 'Valorización de inventario',
    'employees-sales': 'Ventas por empleado',
    'orders': 'Pedidos',
}


class ReportViewSet(StandardResponseMixin, viewsets.ViewSet):
    """Sales, stock and financial reports for shift leads and administrators."""
    permission_classes = [IsShiftLeadOrAbove]
    throttle_classes = [ReportThrottle]

    def get_throttles(self):
        if self.action == 'export':
            return [ExportThrottle()]
        return super().get_throttles()

    @action(detail=False, methods=['get'], url_path='top-products')
    def top_products(self, request):
        """Best-selling variants by quantity."""
        gte, lt = parse_date_range(request.query_params)
        limit = parse_positive_int(request.query_params.get('limit'), 10, 'limit')
        return self.success_response(data=ReportService.top_products(gte, lt, limit))

    @action(detail=False, methods=['get'], url_path='sales-by-hour')
    def sales_by_hour(self, request):
        """Sales per hour for one day (today by default)."""
        gte, lt = parse_date_range(request.query_params, default_today=True)
        return self.success_response(data=ReportService.sales_by_hour(gte, lt))

    @action(detail=False, methods=['get'], url_path='inventory-valuation')
    def inventory_valuation(self, request):
        return self.success_response(data=ReportService.inventory_valuation())

    @action(detail=False, methods=['get'], url_path='low-rotation')
    def low_rotation(self, request):
        """Variants selling at or below the threshold."""
        gte, lt = parse_date_range(request.query_params)
        threshold = parse_decimal(request.query_params.get('threshold'), 3, 'threshold')
        return self.success_response(data=ReportService.low_rotation(gte, lt, threshold))

    @action(detail=False, methods=['get'], url_path='employees-sales')
    def employees_sales(self, request):
        gte, lt = parse_date_range(request.query_params)
        return self.success_response(data=ReportService.employees_sales(gte, lt))

    @action(detail=False, methods=['get'], url_path='financial-summary')
    def financial_summary(self, request):
        """Income, expenses and profit for the window."""
        gte, lt = parse_date_range(request.query_params)
        return self.success_response(data=ReportService.financial_summary(gte, lt))

    @action(detail=False, methods=['get'], url_path=r'export/(?P<report>[^/.]+)')
    def export(self, request, report=None):
        """
        Download a report as CSV, Excel or PDF.

        Query params:
            export_format: csv (default), excel or pdf
            date / from / to: order window
        """
        if report not in EXPORT_COLUMNS:
            raise NotFound(f'Informe no disponible para exportar: {report}')

        export_format = request.query_params.get('export_format', 'csv')
        if export_format not in ExportService.FORMATS:
            raise ValidationError(
                f'Formato de exportación inválido: {export_format}',
                field='export_format'
            )

        gte, lt = parse_date_range(request.query_params)
        if report == 'top-products':
            limit = parse_positive_int(request.query_params.get('limit'), 10, 'limit')
            data = ReportService.top_products(gte, lt, limit)
        elif report == 'inventory-valuation':
            data = ReportService.inventory_valuation()['items']
        elif report == 'employees-sales':
            data = ReportService.employees_sales(gte, lt)
        else:
            data = ReportService.orders(gte, lt)

        timestamp = timezone.localtime().strftime('%Y%m%d_%H%M%S')
        filename = f'{report}_{timestamp}'
        logger.info(f"Report {report} exported as {export_format} by {request.user.email}")
        return ExportService.export(
            export_format,
            data,
            filename,
            columns=EXPORT_COLUMNS[report],
            title=EXPORT_TITLES[report]
        )
