"""
Core serializers for the application.
"""
from rest_framework import serializers

from .models import AuditLog


class AuditLogSerializer(serializers.ModelSerializer):
    """AuditLog serializer."""
    action_display = serializers.CharField(source='get_action_display', read_only=True)
    module_display = serializers.CharField(source='get_module_display', read_only=True)
    created_at = serializers.DateTimeField(read_only=True, format='%Y-%m-%d %H:%M:%S')

    class Meta:
        model = AuditLog
        fields = [
            'id', 'audit_id', 'user', 'username',
            'action', 'action_display', 'module', 'module_display',
            'target_id', 'new_value', 'ip_address', 'user_agent',
            'created_at'
        ]
        read_only_fields = fields
