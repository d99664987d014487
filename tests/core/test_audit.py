"""
Tests for the audit service.
"""
from unittest import mock

import pytest
from django.db import DatabaseError

from apps.core.audit import AuditService, sanitize
from apps.core.models import AuditLog


class TestSanitize:

    def test_drops_credentials(self):
        """Test that password fields are removed."""
        payload = {'email': 'a@b.cl', 'password': 'x', 'Confirm_Password': 'x', 'refresh': 't'}

        assert sanitize(payload) == {'email': 'a@b.cl'}

    def test_non_dict_passthrough(self):
        """Test that non-dict payloads pass through."""
        assert sanitize(['a']) == ['a']


@pytest.mark.django_db
class TestAuditService:

    def test_record(self, user):
        """Test recording an audit entry."""
        entry = AuditService.record(
            user=user,
            action='UPDATE',
            module='PRODUCT',
            target_id=7,
            new_value={'name': 'Papas', 'password': 'x'},
            ip='127.0.0.1',
        )

        assert entry.username == user.email
        assert entry.target_id == '7'
        assert entry.new_value == {'name': 'Papas'}
        assert entry.audit_id.startswith('audit-')

    def test_database_failure_is_swallowed(self, user):
        """Test that a database failure does not propagate."""
        with mock.patch.object(AuditLog.objects, 'create', side_effect=DatabaseError('down')):
            assert AuditService.record(user=user, action='LOGIN', module='AUTH') is None
