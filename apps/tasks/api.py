"""
Task API endpoints.

Provides task CRUD plus the comment and audit-log views of a task.
Every response uses the {"status": ..., "data"/"message": ...} envelope.
"""
from uuid import UUID

from django.conf import settings
from django.http import HttpRequest
from ninja import Router

from apps.audit.audit_service import get_logs
from apps.audit.dtos import AuditLogOut
from apps.core.envelopes import success
from apps.core.pagination import paginate
from apps.identity.security import require_auth
from .dtos import TaskIn, TaskUpdateIn, TaskOut, CommentIn, CommentOut
from .services import list_tasks, create_task, update_task, delete_task
from .comment_service import add_comment, get_comments

router = Router(tags=["Tasks"])


@router.get("", auth=None)
def list_tasks_api(request: HttpRequest, page: int = 1):
    """
    List tasks, one page at a time.

    - Admins/Managers see every task
    - Users see only tasks assigned to them
    """
    user = require_auth(request)
    queryset = list_tasks(user)
    return success(paginate(queryset, page, settings.TASKS_PAGE_SIZE, TaskOut))


@router.post("", auth=None)
def create_task_api(request: HttpRequest, payload: TaskIn):
    """
    Create a task and assign it to an existing user.
    """
    user = require_auth(request)
    task = create_task(user, payload.name, payload.description, payload.assign)
    return success(TaskOut.from_orm(task))


@router.put("/{task_id}", auth=None)
def update_task_api(request: HttpRequest, task_id: UUID, payload: TaskUpdateIn):
    """
    Update any subset of name, description, status and assign.

    Users may only update tasks assigned to them.
    """
    user = require_auth(request)
    update_task(user, task_id, payload.to_changes())
    return success("Task updated")


@router.delete("/{task_id}", auth=None)
def delete_task_api(request: HttpRequest, task_id: UUID):
    """
    Delete a task. Admin only.
    """
    user = require_auth(request)
    delete_task(user, task_id)
    return success()


@router.post("/{task_id}/comments", auth=None)
def add_comment_api(request: HttpRequest, task_id: UUID, payload: CommentIn):
    user = require_auth(request)
    add_comment(user, task_id, payload.comment)
    return success("Comment posted")


@router.get("/{task_id}/comments", auth=None)
def get_comments_api(request: HttpRequest, task_id: UUID):
    return success([CommentOut.from_orm(c) for c in get_comments(task_id)])


@router.get("/{task_id}/logs", auth=None)
def get_logs_api(request: HttpRequest, task_id: UUID):
    """
    Chronological audit trail of status and assignment changes.
    """
    return success([AuditLogOut.from_orm(log) for log in get_logs(task_id)])
