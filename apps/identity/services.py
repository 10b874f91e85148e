"""Services for Identity app."""
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError

from .models import User
from .dtos import UserDTO
from .permissions import get_user_permissions


def get_user_dto(user_id) -> Optional[UserDTO]:
    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        return None
    return UserDTO(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        is_active=user.is_active,
        permissions=get_user_permissions(user),
    )


def get_user(user_id: UUID) -> Optional[User]:
    """Look up a user by id, active or not; None when absent or malformed."""
    try:
        return User.objects.get(id=user_id)
    except (User.DoesNotExist, DjangoValidationError, ValueError, TypeError):
        return None


def get_active_user(user_id: UUID) -> Optional[User]:
    user = get_user(user_id)
    if user is None or not user.is_active:
        return None
    return user
