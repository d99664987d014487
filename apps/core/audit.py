"""
Audit trail service.
Writes AuditLog rows for user operations.
"""
import logging
import uuid

from django.db import DatabaseError

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = {'password', 'confirm_password', 'old_password', 'new_password',
                  'new_password_confirm', 'token', 'secret', 'refresh', 'access'}


def sanitize(payload):
    """Drop credential fields from a request payload before storing it."""
    if isinstance(payload, dict):
        return {k: v for k, v in payload.items() if k.lower() not in SENSITIVE_KEYS}
    return payload


class AuditService:
    """Records audit log entries; failures are logged and never raised."""

    @classmethod
    def record(
        cls,
        user,
        action,
        module,
        target_id=None,
        new_value=None,
        ip=None,
        user_agent='',
    ):
        from apps.core.models import AuditLog

        try:
            return AuditLog.objects.create(
                audit_id=f'audit-{uuid.uuid4()}',
                user=user,
                username=getattr(user, 'email', '') or str(user),
                action=action,
                module=module,
                target_id=str(target_id) if target_id not in (None, '') else None,
                new_value=sanitize(new_value),
                ip_address=ip,
                user_agent=user_agent or '',
            )
        except DatabaseError as e:
            logger.error(f"Failed to write audit log: {e}")
            return None
