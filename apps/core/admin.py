"""
Core admin configuration.
"""
from django.contrib import admin
from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'username', 'action', 'module', 'target_id', 'ip_address']
    list_filter = ['action', 'module']
    search_fields = ['username', 'target_id', 'audit_id']
    ordering = ['-created_at']
    readonly_fields = [f.name for f in AuditLog._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
