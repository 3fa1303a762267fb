"""
WSGI entry point for the marketing plan backend.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "marketing_plan.settings.dev")

application = get_wsgi_application()
