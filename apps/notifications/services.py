"""Notification dispatcher: persists inbox messages for users."""
import logging
from typing import List
from uuid import UUID

from apps.core.exceptions import NotFound
from apps.identity.models import User
from .models import Notification

logger = logging.getLogger(__name__)

ASSIGNED_MESSAGE = "Task {name} has been assigned to you"


def notify(user: User, message: str) -> Notification:
    notification = Notification.objects.create(user=user, message=message)
    logger.info(f"Notification {notification.id} queued for user {user.id}")
    return notification


def notify_assigned(user: User, task_name: str) -> Notification:
    return notify(user, ASSIGNED_MESSAGE.format(name=task_name))


def get_notifications(user_id: UUID) -> List[Notification]:
    """Notifications for a user in the order they were created."""
    if not User.objects.filter(id=user_id).exists():
        raise NotFound("User not found")
    return list(Notification.objects.filter(user_id=user_id).order_by('id'))
