"""WSGI config for the playground BFF project."""

import os

from django.core.management import call_command
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

# The database only lives in memory, so it is built on every start
call_command("migrate", interactive=False, verbosity=0)
