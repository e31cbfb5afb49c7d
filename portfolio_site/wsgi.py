"""
WSGI config for portfolio_site project.

It exposes the WSGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/5.2/howto/deployment/wsgi/
"""

import os

from django.core.wsgi import get_wsgi_application

_existing = os.environ.get("DJANGO_SETTINGS_MODULE")
if _existing:
	os.environ["DJANGO_SETTINGS_MODULE"] = _existing.strip()
else:
	os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portfolio_site.settings")

application = get_wsgi_application()
