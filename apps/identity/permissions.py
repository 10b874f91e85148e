from typing import List, Dict
from .models import UserRole, User


# Define all available permissions here for reference
class Permissions:
    # Tasks
    TASKS_VIEW_ALL = "tasks.view_all"
    TASKS_UPDATE_ANY = "tasks.update_any"
    TASKS_DELETE = "tasks.delete"


# Static Role -> Permission Mapping
ROLE_PERMISSIONS: Dict[str, List[str]] = {
    UserRole.ADMIN: [
        Permissions.TASKS_VIEW_ALL,
        Permissions.TASKS_UPDATE_ANY,
        Permissions.TASKS_DELETE,
    ],
    UserRole.MANAGER: [
        # Can see and update every task but not delete
        Permissions.TASKS_VIEW_ALL,
        Permissions.TASKS_UPDATE_ANY,
    ],
    UserRole.USER: [
        # Plain users only work on tasks assigned to them.
        # This is enforced at the service level, not here
    ],
}


def get_user_permissions(user: User) -> List[str]:
    """
    Returns a list of permission strings for the given user based on their role.
    """
    if not user or not user.is_active:
        return []

    return ROLE_PERMISSIONS.get(user.role, [])


def has_permission(user: User, permission: str) -> bool:
    return permission in get_user_permissions(user)
