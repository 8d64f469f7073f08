"""ASGI config for the playground BFF project."""

import os

from django.core.asgi import get_asgi_application
from django.core.management import call_command

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_asgi_application()

# The database only lives in memory, so it is built on every start
call_command("migrate", interactive=False, verbosity=0)
