import json
from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase, Client, RequestFactory

from apps.core.exceptions import Unauthenticated
from .jwt_auth import JWT_ALGORITHM, create_access_token, create_refresh_token, get_user_id_from_token
from .models import User, UserRole
from .permissions import get_user_permissions, Permissions
from .security import get_current_user, require_auth
from .services import get_active_user, get_user


class RBACTest(TestCase):
    def test_admin_permissions(self):
        user = User.objects.create_user(username="admin", password="pw", role=UserRole.ADMIN)
        perms = get_user_permissions(user)
        self.assertIn(Permissions.TASKS_VIEW_ALL, perms)
        self.assertIn(Permissions.TASKS_UPDATE_ANY, perms)
        self.assertIn(Permissions.TASKS_DELETE, perms)

    def test_manager_permissions(self):
        user = User.objects.create_user(username="manager", password="pw", role=UserRole.MANAGER)
        perms = get_user_permissions(user)
        self.assertIn(Permissions.TASKS_VIEW_ALL, perms)
        self.assertNotIn(Permissions.TASKS_DELETE, perms)

    def test_user_permissions(self):
        user = User.objects.create_user(username="plain", password="pw")
        self.assertEqual(user.role, UserRole.USER)
        self.assertEqual(get_user_permissions(user), [])

    def test_inactive_user_has_no_permissions(self):
        user = User.objects.create_user(username="gone", password="pw", role=UserRole.ADMIN, is_active=False)
        self.assertEqual(get_user_permissions(user), [])


class JWTTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="alice", password="pw")

    def test_access_token_round_trip(self):
        token = create_access_token(self.user.id)
        self.assertEqual(get_user_id_from_token(token), self.user.id)

    def test_refresh_token_is_not_an_access_token(self):
        token = create_refresh_token(self.user.id)
        self.assertIsNone(get_user_id_from_token(token))
        self.assertEqual(get_user_id_from_token(token, token_type='refresh'), self.user.id)

    def test_expired_token_is_rejected(self):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {'sub': str(self.user.id), 'exp': past, 'iat': past, 'type': 'access'},
            settings.JWT_SECRET,
            algorithm=JWT_ALGORITHM,
        )
        self.assertIsNone(get_user_id_from_token(token))

    def test_tampered_token_is_rejected(self):
        token = jwt.encode({'sub': str(self.user.id), 'type': 'access'}, 'wrong-secret', algorithm=JWT_ALGORITHM)
        self.assertIsNone(get_user_id_from_token(token))


class ActorResolutionTest(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.user = User.objects.create_user(username="alice", password="pw")

    def _request(self, **extra):
        request = self.factory.get("/api/tasks/", **extra)
        request.user = AnonymousUser()
        return request

    def test_bearer_header(self):
        request = self._request(HTTP_AUTHORIZATION=f"Bearer {create_access_token(self.user.id)}")
        self.assertEqual(get_current_user(request), self.user)

    def test_cookie(self):
        request = self._request()
        request.COOKIES['access_token'] = create_access_token(self.user.id)
        self.assertEqual(require_auth(request), self.user)

    def test_session_user(self):
        request = self._request()
        request.user = self.user
        self.assertEqual(get_current_user(request), self.user)

    def test_inactive_user_is_not_resolved(self):
        self.user.is_active = False
        self.user.save()
        request = self._request(HTTP_AUTHORIZATION=f"Bearer {create_access_token(self.user.id)}")
        self.assertIsNone(get_current_user(request))

    def test_anonymous_request(self):
        with self.assertRaises(Unauthenticated):
            require_auth(self._request())


class AuthAPITest(TestCase):
    def setUp(self):
        self.client = Client()
        self.user = User.objects.create_user(username="alice", password="testpass123", role=UserRole.MANAGER)

    def _login(self, password="testpass123"):
        return self.client.post(
            "/api/identity/login",
            data=json.dumps({"username": "alice", "password": password}),
            content_type="application/json",
        )

    def test_login_sets_cookies_and_returns_profile(self):
        response = self._login()
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "success")
        self.assertEqual(body["data"]["user"]["role"], UserRole.MANAGER)
        self.assertIn("access_token", response.cookies)
        self.assertIn("refresh_token", response.cookies)

    def test_login_with_wrong_password(self):
        response = self._login(password="nope")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["status"], "error")

    def test_me_uses_access_cookie(self):
        self._login()
        response = self.client.get("/api/identity/me")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["username"], "alice")

    def test_refresh_issues_new_access_token(self):
        self._login()
        response = self.client.post("/api/identity/refresh")
        self.assertEqual(response.status_code, 200)
        self.assertIn("access_token", response.cookies)

    def test_logout_clears_cookies(self):
        self._login()
        self.client.post("/api/identity/logout")
        response = self.client.get("/api/identity/me")
        self.assertEqual(response.status_code, 401)


class UserLookupTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="dora", password="pw")

    def test_get_user_includes_inactive(self):
        self.user.is_active = False
        self.user.save()
        self.assertEqual(get_user(self.user.id), self.user)
        self.assertIsNone(get_active_user(self.user.id))

    def test_malformed_id(self):
        self.assertIsNone(get_user("not-a-uuid"))


class UserAdminTest(TestCase):
    def test_change_page_renders(self):
        admin_user = User.objects.create_superuser(username="root", password="pw", role=UserRole.ADMIN)
        client = Client()
        client.force_login(admin_user)
        response = client.get(f"/admin/identity/user/{admin_user.id}/change/")
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("phone", [f.name for f in User._meta.get_fields()])
