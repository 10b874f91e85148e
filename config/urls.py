"""
URL configuration for the Taskflow project.
"""
from django.contrib import admin
from django.urls import path
from ninja import NinjaAPI

from apps.core.handlers import register_exception_handlers

api = NinjaAPI(
    title="Taskflow API",
    version="1.0.0",
    description="Task tracking API: tasks, assignments, comments, notifications and audit logs",
    docs_url="/docs",
)
register_exception_handlers(api)

from apps.identity.api import router as identity_router
from apps.tasks.api import router as tasks_router
from apps.notifications.api import router as notifications_router

api.add_router("/identity/", identity_router)
api.add_router("/tasks/", tasks_router)
api.add_router("/notifications/", notifications_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]
