"""
Tests for the notification dispatcher and its endpoint.
"""
from uuid import uuid4

from django.test import TestCase, Client

from apps.core.exceptions import NotFound
from apps.identity.models import User, UserRole
from apps.notifications.models import Notification
from apps.notifications.services import get_notifications, notify, notify_assigned


def make_user(role=UserRole.USER, username=None):
    username = username or f"user_{uuid4().hex[:8]}"
    return User.objects.create_user(username=username, password="testpass123", role=role)


class NotificationServiceTest(TestCase):

    def setUp(self):
        self.user = make_user()

    def test_notify_persists_message(self):
        notification = notify(self.user, "hello")
        self.assertEqual(Notification.objects.get(), notification)
        self.assertEqual(notification.user, self.user)
        self.assertEqual(notification.message, "hello")

    def test_assigned_message(self):
        notification = notify_assigned(self.user, "Fix bug")
        self.assertEqual(notification.message, "Task Fix bug has been assigned to you")

    def test_notifications_in_insertion_order(self):
        other = make_user()
        notify(self.user, "one")
        notify(other, "not yours")
        notify(self.user, "two")

        self.assertEqual([n.message for n in get_notifications(self.user.id)], ["one", "two"])

    def test_unknown_user(self):
        with self.assertRaises(NotFound):
            get_notifications(uuid4())


class NotificationAPITest(TestCase):

    def setUp(self):
        self.client = Client()
        self.user = make_user()

    def test_list_notifications(self):
        notify(self.user, "first")
        notify(self.user, "second")

        response = self.client.get(f"/api/notifications/{self.user.id}")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "success")
        self.assertEqual([n["message"] for n in body["data"]], ["first", "second"])
        self.assertEqual(body["data"][0]["user_id"], str(self.user.id))

    def test_empty_inbox(self):
        response = self.client.get(f"/api/notifications/{self.user.id}")
        self.assertEqual(response.json(), {"status": "success", "data": []})

    def test_unknown_user_returns_error_envelope(self):
        response = self.client.get(f"/api/notifications/{uuid4()}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"status": "error", "message": "User not found"})
