"""
Tests for the task audit trail.

Covers:
1. audit_service.record_change() creates an AuditLog with correct fields
2. audit_service.get_logs(): chronological listing, unknown task
3. Storage failures propagate instead of being swallowed
"""
from uuid import uuid4

from django.db import IntegrityError, transaction
from django.test import TestCase

from apps.audit.audit_service import ChangeType, get_logs, record_change
from apps.audit.models import AuditLog
from apps.core.exceptions import NotFound
from apps.identity.models import User, UserRole
from apps.tasks.models import Task


def make_user(role=UserRole.ADMIN, username=None):
    """Create a test User."""
    username = username or f"user_{uuid4().hex[:8]}"
    return User.objects.create_user(
        username=username,
        email=f"{username}@test.com",
        password="testpass123",
        role=role,
    )


def make_task(creator, assignee):
    """Create a Task directly, without the service side effects."""
    return Task.objects.create(
        name="Audit me",
        description="desc",
        creator=creator,
        assignee=assignee,
    )


class RecordChangeTest(TestCase):
    """Test the record_change() helper directly."""

    def setUp(self):
        self.user = make_user()
        self.other = make_user(UserRole.USER)
        self.task = make_task(self.user, self.other)

    def test_record_change_creates_audit_log(self):
        log = record_change(
            task=self.task,
            performed_by=self.user,
            change_type=ChangeType.STATUS_UPDATE,
            old_value="ASSIGNED",
            new_value="DONE",
        )
        log.refresh_from_db()
        self.assertEqual(log.task, self.task)
        self.assertEqual(log.performed_by, self.user)
        self.assertEqual(log.type, ChangeType.STATUS_UPDATE)
        self.assertEqual(log.old_value, "ASSIGNED")
        self.assertEqual(log.new_value, "DONE")
        self.assertIsNotNone(log.performed_at)

    def test_values_are_stored_as_strings(self):
        log = record_change(
            task=self.task,
            performed_by=self.user,
            change_type=ChangeType.ASSIGNMENT_UPDATE,
            old_value=self.user.id,
            new_value=self.other.id,
        )
        log.refresh_from_db()
        self.assertEqual(log.old_value, str(self.user.id))
        self.assertEqual(log.new_value, str(self.other.id))

    def test_none_is_stored_as_empty_string(self):
        log = record_change(
            task=self.task,
            performed_by=self.user,
            change_type=ChangeType.STATUS_UPDATE,
            old_value=None,
            new_value="DONE",
        )
        self.assertEqual(log.old_value, "")

    def test_long_values_are_stored_unbounded(self):
        value = "V" * 500
        log = record_change(
            task=self.task,
            performed_by=self.user,
            change_type=ChangeType.STATUS_UPDATE,
            old_value=value,
            new_value=value,
        )
        log.refresh_from_db()
        self.assertEqual(log.new_value, value)
        for field in ("old_value", "new_value"):
            self.assertIsNone(AuditLog._meta.get_field(field).max_length)

    def test_storage_failure_propagates(self):
        """record_change() must raise rather than silently drop the entry."""
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                record_change(
                    task=self.task,
                    performed_by=self.user,
                    change_type=None,
                    old_value="A",
                    new_value="B",
                )
        self.assertFalse(AuditLog.objects.exists())


class GetLogsTest(TestCase):

    def setUp(self):
        self.user = make_user()
        self.task = make_task(self.user, self.user)

    def test_logs_are_chronological(self):
        for old, new in [("ASSIGNED", "IN_PROGRESS"), ("IN_PROGRESS", "DONE"), ("DONE", "ASSIGNED")]:
            record_change(
                task=self.task,
                performed_by=self.user,
                change_type=ChangeType.STATUS_UPDATE,
                old_value=old,
                new_value=new,
            )

        logs = get_logs(self.task.id)
        self.assertEqual([l.new_value for l in logs], ["IN_PROGRESS", "DONE", "ASSIGNED"])

    def test_logs_are_scoped_to_task(self):
        other_task = make_task(self.user, self.user)
        record_change(
            task=other_task,
            performed_by=self.user,
            change_type=ChangeType.STATUS_UPDATE,
            old_value="ASSIGNED",
            new_value="DONE",
        )
        self.assertEqual(get_logs(self.task.id), [])

    def test_unknown_task_raises_not_found(self):
        with self.assertRaises(NotFound):
            get_logs(uuid4())

    def test_logs_survive_actor_deletion(self):
        actor = make_user(UserRole.USER)
        log = record_change(
            task=self.task,
            performed_by=actor,
            change_type=ChangeType.STATUS_UPDATE,
            old_value="ASSIGNED",
            new_value="DONE",
        )
        actor.delete()
        log.refresh_from_db()
        self.assertIsNone(log.performed_by)
