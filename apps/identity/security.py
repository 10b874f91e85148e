"""
Request actor resolution.

Every endpoint that needs an actor calls require_auth(request) and hands the
returned User to the service layer explicitly.
"""
from typing import Optional

from django.http import HttpRequest

from apps.core.exceptions import Unauthenticated
from .jwt_auth import get_user_id_from_token
from .models import User


def _bearer_token(request: HttpRequest) -> Optional[str]:
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() == 'bearer' and token:
        return token.strip()
    return None


def get_current_user(request: HttpRequest) -> Optional[User]:
    """
    Resolve the authenticated user for a request.

    Checks, in order: an `Authorization: Bearer` access token, the
    `access_token` cookie, and the Django session user.
    Returns None when no active user can be resolved.
    """
    token = _bearer_token(request) or request.COOKIES.get('access_token')
    if token:
        user_id = get_user_id_from_token(token)
        if not user_id:
            return None
        try:
            return User.objects.get(id=user_id, is_active=True)
        except User.DoesNotExist:
            return None

    session_user = getattr(request, 'user', None)
    if session_user is not None and session_user.is_authenticated and session_user.is_active:
        return session_user
    return None


def require_auth(request: HttpRequest) -> User:
    """
    Require authentication. Raises Unauthenticated (401) if no actor resolves.
    """
    user = get_current_user(request)
    if not user:
        raise Unauthenticated()
    return user
