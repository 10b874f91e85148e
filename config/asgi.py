"""
ASGI config for the Taskflow project.

Serves the Django application (and the Ninja API mounted in config.urls)
through any ASGI server (Daphne, Uvicorn).
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

application = get_asgi_application()
