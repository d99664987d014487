"""
Custom permissions for the application.
"""
from rest_framework import permissions


class IsAuthenticatedAndActive(permissions.BasePermission):
    """
    Permission that checks if user is authenticated and active.
    """
    def has_permission(self, request, view):
        if not request.user:
            return False
        return (
            request.user.is_authenticated and
            request.user.is_active
        )


class HasRole(permissions.BasePermission):
    """
    Permission that allows access only to users whose role is listed.
    """
    ALLOWED_ROLES = []
    message = 'Acceso denegado'

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False

        if not request.user.is_active:
            return False

        if request.user.is_superuser:
            return True

        return getattr(request.user, 'role', None) in self.ALLOWED_ROLES


class IsAdminUser(HasRole):
    """
    Permission that allows access only to administrators.
    """
    ALLOWED_ROLES = ['ADMIN']


class IsShiftLeadOrAbove(HasRole):
    """
    Permission that allows access to shift leads and administrators.
    """
    ALLOWED_ROLES = ['ADMIN', 'SHIFT_LEAD']


class IsStaffMember(HasRole):
    """
    Permission that allows access to every POS role (cashier and above).
    """
    ALLOWED_ROLES = ['ADMIN', 'SHIFT_LEAD', 'CASHIER']


class IsShiftLeadOrReadOnly(IsShiftLeadOrAbove):
    """
    Anyone may read; writes need a shift lead or administrator.
    """
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
