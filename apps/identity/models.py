import uuid
from django.db import models
from django.contrib.auth.models import AbstractUser


class UserRole(models.TextChoices):
    ADMIN = 'ADMIN', 'Administrator'
    MANAGER = 'MANAGER', 'Manager'
    USER = 'USER', 'User'


class User(AbstractUser):
    """
    Custom User model carrying the role used for task permission checks.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.USER
    )

    class Meta:
        ordering = ['username']

    def __str__(self):
        return self.email or self.username
