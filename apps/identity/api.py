"""
Identity API endpoints with JWT authentication.

Provides login, logout, token refresh and the current-user profile.
Uses JWT tokens in httpOnly cookies for secure stateless authentication;
the access token is also returned in the body for Bearer-header clients.
"""
from dataclasses import asdict

from django.conf import settings
from django.contrib.auth import authenticate
from django.core.serializers.json import DjangoJSONEncoder
from django.http import HttpRequest, JsonResponse
from ninja import Router

from apps.core.envelopes import success
from apps.core.exceptions import NotFound, Unauthenticated
from .dtos import LoginIn
from .services import get_user_dto, get_active_user
from .security import require_auth
from .jwt_auth import (
    create_token_pair,
    create_access_token,
    get_user_id_from_token,
    get_access_token_cookie_settings,
    get_refresh_token_cookie_settings,
)

router = Router(tags=["Identity"])


def is_production() -> bool:
    return not settings.DEBUG


def _json(body: dict) -> JsonResponse:
    return JsonResponse(body, encoder=DjangoJSONEncoder)


@router.post("/login", auth=None)
def login_user(request: HttpRequest, payload: LoginIn):
    """
    Authenticate user and set JWT tokens in httpOnly cookies.
    """
    user = authenticate(request, username=payload.username, password=payload.password)

    if user is None:
        raise Unauthenticated("Invalid username or password")

    if not user.is_active:
        raise Unauthenticated("Account is disabled")

    access_token, refresh_token = create_token_pair(user.id)

    response = _json(success({
        "user": asdict(get_user_dto(user.id)),
        "access_token": access_token,
    }))

    prod = is_production()
    response.set_cookie('access_token', access_token, **get_access_token_cookie_settings(prod))
    response.set_cookie('refresh_token', refresh_token, **get_refresh_token_cookie_settings(prod))

    return response


@router.post("/logout", auth=None)
def logout_user(request: HttpRequest):
    """
    Clear authentication cookies.
    """
    response = _json(success("Logged out"))
    response.delete_cookie('access_token', path='/')
    response.delete_cookie('refresh_token', path='/')
    return response


@router.post("/refresh", auth=None)
def refresh_token(request: HttpRequest):
    """
    Refresh the access token using the refresh token cookie.
    """
    refresh_token_value = request.COOKIES.get('refresh_token')
    if not refresh_token_value:
        raise Unauthenticated("No refresh token")

    user_id = get_user_id_from_token(refresh_token_value, token_type='refresh')
    user = get_active_user(user_id) if user_id else None
    if user is None:
        raise Unauthenticated("Invalid refresh token")

    new_access_token = create_access_token(user.id)

    response = _json(success({
        "user": asdict(get_user_dto(user.id)),
        "access_token": new_access_token,
    }))
    response.set_cookie('access_token', new_access_token, **get_access_token_cookie_settings(is_production()))
    return response


@router.get("/me", auth=None)
def get_me(request: HttpRequest):
    """
    Get current authenticated user's profile.
    """
    user = require_auth(request)
    user_dto = get_user_dto(user.id)
    if not user_dto:
        raise NotFound("User not found")
    return success(asdict(user_dto))
