from django.conf import settings
from django.db import models


class Notification(models.Model):
    """
    A user-facing message stored for later retrieval.
    Delivery (push/email) happens elsewhere; this is the inbox record.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications'
    )
    message = models.CharField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"To {self.user_id}: {self.message}"
