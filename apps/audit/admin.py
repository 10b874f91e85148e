from django.contrib import admin
from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ['task', 'type', 'old_value', 'new_value', 'performed_by', 'performed_at']
    list_filter = ['type']
    search_fields = ['old_value', 'new_value']
    readonly_fields = ['task', 'performed_by', 'type', 'old_value', 'new_value', 'performed_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
