# marginalia/conf.py
"""Django settings for running marginalia outside of a Django project."""

import django
from django.conf import settings


def configure_django(**overrides):
    """
    Configure Django just enough for templates and management commands.

    Does nothing when settings were already configured, e.g. when marginalia
    is installed as an app of an existing project.

    Args:
        overrides: Extra settings passed to ``settings.configure``
    """
    if settings.configured:
        return

    options = {
        "INSTALLED_APPS": ["marginalia"],
        "USE_TZ": True,
    }
    options.update(overrides)

    settings.configure(**options)
    django.setup()
