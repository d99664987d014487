"""
Account serializers.
"""
from django.utils import timezone
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import User

PASSWORD_MIN_LENGTH = 6

PASSWORD_MISMATCH = 'Las contraseñas no coinciden'
EMAIL_TAKEN = 'El correo ya está registrado'


def validate_unique_email(value, instance=None):
    email = value.strip().lower()
    queryset = User.objects.filter(email__iexact=email)
    if instance is not None:
        queryset = queryset.exclude(pk=instance.pk)
    if queryset.exists():
        raise serializers.ValidationError(EMAIL_TAKEN)
    return email


class UserListSerializer(serializers.ModelSerializer):
    """User list serializer (minimal fields)."""
    role_display = serializers.CharField(source='get_role_display', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'full_name', 'role', 'role_display',
            'is_active', 'created_at'
        ]


class UserDetailSerializer(serializers.ModelSerializer):
    """User detail serializer (full fields)."""
    role_display = serializers.CharField(source='get_role_display', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'full_name', 'role', 'role_display',
            'is_active', 'is_staff', 'last_login',
            'last_login_ip', 'password_changed_at',
            'created_at', 'updated_at'
        ]


class UserCreateSerializer(serializers.ModelSerializer):
    """User create serializer (administrators may pick the role)."""
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=PASSWORD_MIN_LENGTH,
        style={'input_type': 'password'}
    )
    confirm_password = serializers.CharField(write_only=True)
    role = serializers.ChoiceField(choices=User.Role.choices, default=User.Role.CASHIER)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'full_name', 'role', 'is_active',
            'password', 'confirm_password'
        ]
        read_only_fields = ['id', 'is_active']

    def validate_email(self, value):
        return validate_unique_email(value)

    def validate(self, attrs):
        if attrs['password'] != attrs['confirm_password']:
            raise serializers.ValidationError({'confirm_password': PASSWORD_MISMATCH})
        return attrs

    def create(self, validated_data):
        validated_data.pop('confirm_password')
        return User.objects.create_user(**validated_data)


class RegisterSerializer(UserCreateSerializer):
    """Public sign-up; every new account starts as a cashier."""
    role = serializers.CharField(read_only=True)

    def create(self, validated_data):
        validated_data['role'] = User.Role.CASHIER
        return super().create(validated_data)


class UserUpdateSerializer(serializers.ModelSerializer):
    """User update serializer; a password change needs its confirmation."""
    password = serializers.CharField(
        write_only=True,
        required=False,
        min_length=PASSWORD_MIN_LENGTH,
        style={'input_type': 'password'}
    )
    confirm_password = serializers.CharField(write_only=True, required=False)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'full_name', 'role', 'is_active',
            'password', 'confirm_password'
        ]
        read_only_fields = ['id', 'email']

    def validate(self, attrs):
        password = attrs.get('password')
        if password is not None and password != attrs.get('confirm_password'):
            raise serializers.ValidationError({'confirm_password': PASSWORD_MISMATCH})
        return attrs

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        validated_data.pop('confirm_password', None)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
            instance.password_changed_at = timezone.now()
        instance.save()
        return instance


class ChangePasswordSerializer(serializers.Serializer):
    """Change password serializer."""
    old_password = serializers.CharField(required=True)
    new_password = serializers.CharField(required=True, min_length=PASSWORD_MIN_LENGTH)
    confirm_password = serializers.CharField(required=True)

    def validate(self, attrs):
        if attrs['new_password'] != attrs['confirm_password']:
            raise serializers.ValidationError({'confirm_password': PASSWORD_MISMATCH})
        return attrs

    def validate_old_password(self, value):
        user = self.context['request'].user
        if not user.check_password(value):
            raise serializers.ValidationError('La contraseña actual no es correcta')
        return value


class LoginSerializer(TokenObtainPairSerializer):
    """Token pair plus the public profile of the user who logged in."""

    def validate(self, attrs):
        attrs[self.username_field] = (attrs.get(self.username_field) or '').strip().lower()
        data = super().validate(attrs)
        data['user'] = {
            'id': self.user.id,
            'email': self.user.email,
            'full_name': self.user.full_name,
            'role': self.user.role,
        }
        return data
