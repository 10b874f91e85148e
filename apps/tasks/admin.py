from django.contrib import admin
from .models import Task, Comment


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    readonly_fields = ['author', 'comment', 'created_at']


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['name', 'status', 'creator', 'assignee', 'created_at']
    list_filter = ['status']
    search_fields = ['name', 'description']
    inlines = [CommentInline]
