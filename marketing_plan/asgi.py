"""
ASGI entry point for the marketing plan backend.

Interaction updates are delivered by read-after-write refetches rather
than server push, so only the plain Django HTTP application is mounted.
The default settings module is the development configuration.
"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "marketing_plan.settings.dev")

from django.conf import settings
from django.core.asgi import get_asgi_application
from django.contrib.staticfiles.handlers import ASGIStaticFilesHandler

application = get_asgi_application()

# Serve /static/ when using uvicorn in DEBUG mode
if settings.DEBUG:
    application = ASGIStaticFilesHandler(application)
