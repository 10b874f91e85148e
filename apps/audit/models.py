from django.conf import settings
from django.db import models


class ChangeType(models.TextChoices):
    STATUS_UPDATE = 'STATUS_UPDATE', 'Status Update'
    ASSIGNMENT_UPDATE = 'ASSIGNMENT_UPDATE', 'Assignment Update'


class AuditLog(models.Model):
    """
    Append-only trail of status and assignment changes on a task.
    Keeps a record of who changed what, from which value to which.
    """
    task = models.ForeignKey(
        'tasks.Task',
        on_delete=models.CASCADE,
        related_name='logs'
    )
    performed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='audit_logs'
    )
    type = models.CharField(max_length=30, choices=ChangeType.choices)
    old_value = models.TextField(blank=True, default='')
    new_value = models.TextField(blank=True, default='')
    performed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']
        verbose_name = "Audit Log"
        verbose_name_plural = "Audit Logs"

    def __str__(self):
        return f"{self.type} on task {self.task_id}: {self.old_value} -> {self.new_value}"
