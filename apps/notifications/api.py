"""
Notification API endpoints.
"""
from uuid import UUID

from django.http import HttpRequest
from ninja import Router

from apps.core.envelopes import success
from .dtos import NotificationOut
from .services import get_notifications

router = Router(tags=["Notifications"])


@router.get("/{user_id}", auth=None)
def list_notifications_api(request: HttpRequest, user_id: UUID):
    """
    List notifications received by a user, oldest first.
    """
    notifications = get_notifications(user_id)
    return success([NotificationOut.from_orm(n) for n in notifications])
