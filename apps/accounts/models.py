"""
Account models: User with a POS role.
"""
from django.db import models
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from apps.core.models import TimeStampedModel


class UserManager(BaseUserManager):
    """Custom user manager keyed by e-mail."""

    def normalize_email(self, email):
        return super().normalize_email((email or '').strip()).lower()

    def get_by_natural_key(self, username):
        return self.get(email__iexact=(username or '').strip())

    def create_user(self, email, password=None, **extra_fields):
        """Create and save a regular user."""
        if not email:
            raise ValueError('El usuario debe tener un correo')

        email = self.normalize_email(email)
        extra_fields.setdefault('full_name', email.split('@')[0])
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """Create and save a superuser."""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', User.Role.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin, TimeStampedModel):
    """Custom User model."""

    class Role(models.TextChoices):
        ADMIN = 'ADMIN', 'Administrador'
        SHIFT_LEAD = 'SHIFT_LEAD', 'Jefe de local'
        CASHIER = 'CASHIER', 'Vendedor'

    email = models.EmailField(
        unique=True,
        verbose_name='Correo electrónico'
    )
    full_name = models.CharField(
        max_length=120,
        verbose_name='Nombre completo'
    )
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.CASHIER,
        verbose_name='Rol'
    )

    is_active = models.BooleanField(default=True, verbose_name='Activo')
    is_staff = models.BooleanField(default=False, verbose_name='Acceso al admin')

    # Login tracking
    last_login_ip = models.GenericIPAddressField(
        null=True,
        blank=True,
        verbose_name='IP del último ingreso'
    )
    password_changed_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Cambio de contraseña'
    )

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['full_name']

    class Meta:
        db_table = 'users'
        verbose_name = 'Usuario'
        verbose_name_plural = 'Usuarios'
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.full_name} ({self.email})'
