"""
Audit logging service for task changes.

Use record_change() whenever a task's status or assignment changes, before
the task itself is mutated so old_value still reflects the stored state.
Unlike fire-and-forget activity logs, failures here propagate: the caller's
transaction rolls back rather than leaving a change without its audit row.

Usage:
    from apps.audit.audit_service import record_change, ChangeType

    record_change(
        task=task,
        performed_by=actor,
        change_type=ChangeType.STATUS_UPDATE,
        old_value=task.status,
        new_value="DONE",
    )
"""
import logging
from typing import List
from uuid import UUID

from apps.core.exceptions import NotFound
from apps.tasks.models import Task
from .models import AuditLog, ChangeType

__all__ = ["ChangeType", "record_change", "get_logs"]

logger = logging.getLogger(__name__)


def record_change(
    *,
    task: Task,
    performed_by,
    change_type: str,
    old_value,
    new_value,
) -> AuditLog:
    """
    Append one AuditLog entry for a field change on `task`.

    Args:
        task:          The Task whose field is changing.
        performed_by:  User performing the change.
        change_type:   ChangeType.STATUS_UPDATE or ChangeType.ASSIGNMENT_UPDATE.
        old_value:     Value before the change (stored as a string).
        new_value:     Value after the change (stored as a string).
    """
    log = AuditLog.objects.create(
        task=task,
        performed_by=performed_by,
        type=change_type,
        old_value="" if old_value is None else str(old_value),
        new_value="" if new_value is None else str(new_value),
    )
    logger.debug(f"Audit {change_type} on task {task.id}: {log.old_value} -> {log.new_value}")
    return log


def get_logs(task_id: UUID) -> List[AuditLog]:
    """Chronological audit trail of a task. Raises NotFound for unknown tasks."""
    if not Task.objects.filter(id=task_id).exists():
        raise NotFound("Task not found")
    return list(AuditLog.objects.filter(task_id=task_id).order_by('id'))
