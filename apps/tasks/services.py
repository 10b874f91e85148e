"""
Task service: create, list, update and delete tasks.

Each operation takes the acting user explicitly and composes the task store
with the audit log writer and the notification dispatcher. Writes run inside
one transaction, so a failure part-way leaves no audit row or notification
behind.
"""
import logging
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import QuerySet

from apps.audit.audit_service import ChangeType, record_change
from apps.core.exceptions import NotFound, PermissionDenied, Unauthenticated, ValidationError
from apps.identity.models import User
from apps.identity.permissions import Permissions, has_permission
from apps.identity.services import get_user
from apps.notifications.services import notify_assigned
from .dtos import TaskChanges
from .models import Task, TaskStatus

logger = logging.getLogger(__name__)


def require_actor(actor) -> User:
    if actor is None or not actor.is_authenticated or not actor.is_active:
        raise Unauthenticated()
    return actor


def get_task(task_id: UUID, for_update: bool = False) -> Task:
    queryset = Task.objects.select_for_update() if for_update else Task.objects.all()
    try:
        return queryset.get(id=task_id)
    except (Task.DoesNotExist, DjangoValidationError, ValueError):
        raise NotFound("Task not found")


def _clean(value):
    return value.strip() if isinstance(value, str) else value


def _resolve_assignee(assignee_id) -> User:
    assignee = get_user(assignee_id)
    if assignee is None:
        raise ValidationError("Assigned user does not exist")
    if not assignee.is_active:
        raise ValidationError("Assigned user is inactive")
    return assignee


def list_tasks(actor) -> QuerySet:
    """
    Tasks visible to the actor.

    Users without TASKS_VIEW_ALL only see tasks assigned to them.
    Pagination is left to the caller.
    """
    actor = require_actor(actor)
    queryset = Task.objects.all()
    if not has_permission(actor, Permissions.TASKS_VIEW_ALL):
        queryset = queryset.filter(assignee_id=actor.id)
    return queryset.order_by('created_at', 'id')


@transaction.atomic
def create_task(actor, name: str, description: str, assignee_id: UUID) -> Task:
    """
    Create a task assigned to `assignee_id`, notify the assignee and record
    the assignment.

    The audit entry stores the creating actor as old_value.
    """
    actor = require_actor(actor)

    name, description = _clean(name), _clean(description)
    if not name or not description or assignee_id is None:
        raise ValidationError("Please fill all required fields")

    assignee = _resolve_assignee(assignee_id)

    task = Task.objects.create(
        name=name,
        description=description,
        status=TaskStatus.ASSIGNED.value,
        creator=actor,
        assignee=assignee,
    )

    notify_assigned(assignee, task.name)

    record_change(
        task=task,
        performed_by=actor,
        change_type=ChangeType.ASSIGNMENT_UPDATE,
        old_value=actor.id,
        new_value=assignee.id,
    )

    logger.info(f"Task {task.id} created by {actor.id} and assigned to {assignee.id}")
    return task


@transaction.atomic
def update_task(actor, task_id: UUID, changes: TaskChanges) -> Task:
    """
    Apply a partial update to a task.

    Status and assignment changes each write an audit entry before the field
    is mutated; a new assignee is also notified. Status is handled before
    assignment when both are present.
    """
    actor = require_actor(actor)
    task = get_task(task_id, for_update=True)

    if not has_permission(actor, Permissions.TASKS_UPDATE_ANY) and task.assignee_id != actor.id:
        logger.warning(f"User {actor.id} denied update on task {task.id}")
        raise PermissionDenied("You don't have permission to update this task")

    if changes.name is not None:
        name = _clean(changes.name)
        if not name:
            raise ValidationError("Task name cannot be empty")
        task.name = name

    if changes.description is not None:
        description = _clean(changes.description)
        if not description:
            raise ValidationError("Task description cannot be empty")
        task.description = description

    if changes.status is not None:
        record_change(
            task=task,
            performed_by=actor,
            change_type=ChangeType.STATUS_UPDATE,
            old_value=task.status,
            new_value=changes.status,
        )
        task.status = changes.status

    if changes.assignee_id is not None:
        assignee = _resolve_assignee(changes.assignee_id)

        record_change(
            task=task,
            performed_by=actor,
            change_type=ChangeType.ASSIGNMENT_UPDATE,
            old_value=task.assignee_id,
            new_value=assignee.id,
        )
        task.assignee = assignee
        notify_assigned(assignee, task.name)

    task.save()
    logger.info(f"Task {task.id} updated by {actor.id}")
    return task


@transaction.atomic
def delete_task(actor, task_id: UUID) -> None:
    """
    Delete a task. Only holders of TASKS_DELETE may delete, whoever owns it.
    Comments and audit logs are removed with the task.
    """
    actor = require_actor(actor)

    if not has_permission(actor, Permissions.TASKS_DELETE):
        logger.warning(f"User {actor.id} denied delete on task {task_id}")
        raise PermissionDenied("You don't have permission to delete this task")

    task = get_task(task_id, for_update=True)
    task.delete()
    logger.info(f"Task {task_id} deleted by {actor.id}")
