"""
Mixins for views and serializers.
"""
from rest_framework import status
from rest_framework.response import Response


class StandardResponseMixin:
    """Mixin for standard API responses."""

    def success_response(self, data=None, message='Operación exitosa', status_code=status.HTTP_200_OK):
        """Return a success response."""
        response_data = {
            'success': True,
            'message': message,
        }
        if data is not None:
            response_data['data'] = data
        return Response(response_data, status=status_code)

    def error_response(self, message='Operación fallida', errors=None, status_code=status.HTTP_400_BAD_REQUEST):
        """Return an error response."""
        response_data = {
            'success': False,
            'message': message,
        }
        if errors is not None:
            response_data['errors'] = errors
        return Response(response_data, status=status_code)

    def created_response(self, data=None, message='Creado correctamente'):
        """Return a created response."""
        return self.success_response(data, message, status.HTTP_201_CREATED)

    def deleted_response(self, message='Eliminado correctamente'):
        """Return a deleted response."""
        return self.success_response(message=message, status_code=status.HTTP_200_OK)


class MultiSerializerMixin:
    """
    Mixin that allows different serializers for different actions.
    Usage:
        serializer_classes = {
            'list': ListSerializer,
            'retrieve': DetailSerializer,
            'create': CreateSerializer,
        }
    """
    serializer_classes = {}

    def get_serializer_class(self):
        """Return serializer class based on action."""
        return self.serializer_classes.get(
            self.action,
            super().get_serializer_class()
        )


class ClientInfoMixin:
    """Mixin that extracts client network details from the request."""

    def get_client_ip(self, request):
        """Get client IP address."""
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')

    def get_user_agent(self, request):
        return request.META.get('HTTP_USER_AGENT', '')[:500]
