"""
Custom exception handling for the application.
"""
import logging

from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns responses in a standard format.
    """
    if isinstance(exc, BusinessException):
        logger.info(f"Business rule rejected request: {exc.code} - {exc.message}")
        return Response(
            {
                'success': False,
                'error': {
                    'code': exc.code,
                    'message': exc.message,
                }
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    response = exception_handler(exc, context)

    if response is not None:
        custom_response = {
            'success': False,
            'error': {
                'code': exc.__class__.__name__,
                'message': _first_message(exc.detail) if hasattr(exc, 'detail') else str(exc),
            }
        }

        if hasattr(exc, 'detail') and isinstance(exc.detail, dict):
            custom_response['error']['details'] = exc.detail

        response.data = custom_response

    return response


def _first_message(detail):
    """Flatten a DRF error detail down to its first message."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


class BusinessException(Exception):
    """Base exception for business logic errors."""
    def __init__(self, message, code='BUSINESS_ERROR'):
        self.message = message
        self.code = code
        super().__init__(message)


class InsufficientStockError(BusinessException):
    """Exception raised when stock is insufficient."""
    def __init__(self, product_name, variant_name, available):
        self.available = available
        message = f'Stock insuficiente para {product_name} ({variant_name}). Disponible: {available}'
        super().__init__(message, 'INSUFFICIENT_STOCK')


class InvalidOperationError(BusinessException):
    """Exception raised for invalid operations."""
    def __init__(self, message):
        super().__init__(message, 'INVALID_OPERATION')


class ValidationError(BusinessException):
    """Exception raised for validation errors."""
    def __init__(self, message, field=None):
        self.field = field
        super().__init__(message, 'VALIDATION_ERROR')
