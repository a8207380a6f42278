"""WSGI entrypoint for the showcase project."""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'showcase.settings')

application = get_wsgi_application()
