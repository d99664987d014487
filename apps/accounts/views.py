"""
Account views.
"""
import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView
from django.utils import timezone

from apps.core.audit import AuditService
from apps.core.views import BaseViewSet
from apps.core.permissions import IsAdminUser, IsAuthenticatedAndActive
from apps.core.mixins import ClientInfoMixin, MultiSerializerMixin, StandardResponseMixin
from apps.core.throttling import LoginThrottle
from .models import User
from .serializers import (
    UserListSerializer,
    UserDetailSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
    RegisterSerializer,
    ChangePasswordSerializer,
    LoginSerializer,
)

logger = logging.getLogger(__name__)


class UserViewSet(MultiSerializerMixin, StandardResponseMixin, BaseViewSet):
    """User management ViewSet."""
    queryset = User.objects.all()
    serializer_class = UserListSerializer
    serializer_classes = {
        'list': UserListSerializer,
        'retrieve': UserDetailSerializer,
        'create': UserCreateSerializer,
        'update': UserUpdateSerializer,
        'partial_update': UserUpdateSerializer,
    }
    search_fields = ['email', 'full_name']
    filterset_fields = ['role', 'is_active']
    ordering_fields = ['email', 'full_name', 'created_at', 'last_login']

    def get_permissions(self):
        if self.action in ['me', 'change_password']:
            return [IsAuthenticatedAndActive()]
        return [IsAdminUser()]

    # User has no created_by/updated_by columns
    def perform_create(self, serializer):
        serializer.save()

    def perform_update(self, serializer):
        serializer.save()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"User {user.email} created with role {user.role} by {request.user.email}")
        return self.created_response(data=UserListSerializer(user).data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        user = self.get_object()
        serializer = self.get_serializer(user, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return self.success_response(data=UserListSerializer(user).data, message='Usuario actualizado')

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        if user.pk == request.user.pk:
            return self.error_response(message='No puede eliminar su propia cuenta')
        user.delete()
        logger.info(f"User {user.email} deleted by {request.user.email}")
        return self.deleted_response(message='Usuario eliminado')

    @action(detail=False, methods=['get'])
    def me(self, request):
        """Get current user info."""
        serializer = UserDetailSerializer(request.user)
        return self.success_response(data=serializer.data)

    @action(detail=False, methods=['post'])
    def change_password(self, request):
        """Change current user's password."""
        serializer = ChangePasswordSerializer(
            data=request.data,
            context={'request': request}
        )
        serializer.is_valid(raise_exception=True)

        user = request.user
        user.set_password(serializer.validated_data['new_password'])
        user.password_changed_at = timezone.now()
        user.save(update_fields=['password', 'password_changed_at'])

        return self.success_response(message='Contraseña actualizada')


class RegisterView(StandardResponseMixin, APIView):
    """Public sign-up; creates a cashier account."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"User {user.email} registered")
        return self.created_response(
            data={'user': UserListSerializer(user).data},
            message='Usuario registrado'
        )


class LoginView(ClientInfoMixin, TokenObtainPairView):
    """
    JWT login by e-mail with rate limiting.
    Stores the caller IP and writes a LOGIN audit entry.
    """
    serializer_class = LoginSerializer
    throttle_classes = [LoginThrottle]

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)

        if response.status_code == status.HTTP_200_OK:
            client_ip = self.get_client_ip(request)
            user = User.objects.get(pk=response.data['user']['id'])
            user.last_login = timezone.now()
            user.last_login_ip = client_ip
            user.save(update_fields=['last_login', 'last_login_ip'])

            AuditService.record(
                user=user,
                action='LOGIN',
                module='AUTH',
                target_id=user.id,
                ip=client_ip,
                user_agent=self.get_user_agent(request),
            )

            response.data = {
                'success': True,
                'message': 'Inicio de sesión exitoso',
                'data': response.data
            }

        return response


class LogoutView(ClientInfoMixin, StandardResponseMixin, APIView):
    """
    Logout view that blacklists the refresh token.
    """
    permission_classes = [IsAuthenticatedAndActive]

    def post(self, request):
        refresh_token = request.data.get('refresh')
        if not refresh_token:
            raise ValidationError({'refresh': 'Debe enviar el token de refresco'})

        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError as e:
            raise ValidationError({'refresh': str(e)})

        AuditService.record(
            user=request.user,
            action='LOGOUT',
            module='AUTH',
            target_id=request.user.id,
            ip=self.get_client_ip(request),
            user_agent=self.get_user_agent(request),
        )

        return self.success_response(message='Sesión cerrada')
