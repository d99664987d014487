"""
Custom middleware for the POS API.
"""
import json
import logging
import re

from django.core.exceptions import SuspiciousOperation
from django.http.request import RawPostDataException
from django.utils.deprecation import MiddlewareMixin

from apps.core.audit import AuditService

logger = logging.getLogger(__name__)


class AuditLogMiddleware(MiddlewareMixin):
    """
    Middleware to automatically log API write operations.
    """

    # Paths to exclude from audit logging (auth views record their own entries)
    EXCLUDED_PATHS = [
        r'^/api/v1/auth/',
        r'^/admin',
        r'^/static',
        r'^/media',
    ]

    # Methods to audit
    AUDIT_METHODS = ['POST', 'PUT', 'PATCH', 'DELETE']

    # Module mapping based on URL patterns
    MODULE_MAPPING = {
        r'^/api/v1/users/': 'USER',
        r'^/api/v1/products/': 'PRODUCT',
        r'^/api/v1/categories/': 'CATEGORY',
        r'^/api/v1/product-types/': 'PRODUCT_TYPE',
        r'^/api/v1/stock-movements/': 'INVENTORY',
        r'^/api/v1/orders/': 'ORDER',
        r'^/api/v1/purchase-invoices/': 'PURCHASE_INVOICE',
        r'^/api/v1/expenses/': 'EXPENSE',
        r'^/api/v1/settings/': 'SETTINGS',
        r'^/api/v1/reports/': 'REPORT',
    }

    # Action mapping based on HTTP method
    ACTION_MAPPING = {
        'POST': 'CREATE',
        'PUT': 'UPDATE',
        'PATCH': 'UPDATE',
        'DELETE': 'DELETE',
    }

    def __init__(self, get_response=None):
        super().__init__(get_response)
        self.excluded_patterns = [re.compile(p) for p in self.EXCLUDED_PATHS]
        self.module_patterns = [(re.compile(p), m) for p, m in self.MODULE_MAPPING.items()]

    def process_request(self, request):
        """Keep a parsed copy of JSON bodies before the view consumes the stream."""
        request._audit_body = None
        if request.method not in self.AUDIT_METHODS:
            return None
        if request.content_type != 'application/json':
            return None
        try:
            request._audit_body = json.loads(request.body.decode('utf-8') or 'null')
        except (ValueError, UnicodeDecodeError, RawPostDataException, SuspiciousOperation):
            request._audit_body = None
        return None

    def _should_audit(self, request):
        """Check if this request should be audited."""
        if request.method not in self.AUDIT_METHODS:
            return False

        user = getattr(request, 'user', None)
        if not user or not user.is_authenticated:
            return False

        if not request.path.startswith('/api/v1/'):
            return False

        for pattern in self.excluded_patterns:
            if pattern.search(request.path):
                return False

        return True

    def _get_module(self, path):
        """Determine module from request path."""
        for pattern, module in self.module_patterns:
            if pattern.search(path):
                return module
        return 'UNKNOWN'

    def _get_action(self, request):
        """Determine action from request method and path."""
        if '/adjust/' in request.path:
            return 'ADJUST'
        if '/export/' in request.path:
            return 'EXPORT'
        return self.ACTION_MAPPING.get(request.method, 'UPDATE')

    def _get_target_id(self, request, response):
        """Extract target ID from request path or response."""
        path_parts = request.path.rstrip('/').split('/')
        for part in reversed(path_parts):
            if part.isdigit():
                return part

        if request.method == 'POST' and hasattr(response, 'data'):
            data = response.data
            if isinstance(data, dict):
                nested = data.get('data')
                if isinstance(nested, dict) and nested.get('id') is not None:
                    return nested['id']
                return data.get('id')

        return None

    def _get_request_body(self, request):
        """Return the JSON body captured earlier, or submitted form fields."""
        if request._audit_body is not None:
            return request._audit_body
        try:
            if request.POST:
                return request.POST.dict()
        except (RawPostDataException, SuspiciousOperation):
            return None
        return None

    def _get_client_ip(self, request):
        """Get client IP address."""
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')

    def process_response(self, request, response):
        """Log the operation after response is generated."""
        if not hasattr(request, '_audit_body'):
            return response

        if not self._should_audit(request):
            return response

        # Only log successful operations (2xx status codes)
        if not (200 <= response.status_code < 300):
            return response

        new_value = None
        if request.method in ['POST', 'PUT', 'PATCH']:
            new_value = self._get_request_body(request)

        AuditService.record(
            user=request.user,
            action=self._get_action(request),
            module=self._get_module(request.path),
            target_id=self._get_target_id(request, response),
            new_value=new_value,
            ip=self._get_client_ip(request),
            user_agent=request.META.get('HTTP_USER_AGENT', '')[:500],
        )

        return response
