"""
WSGI config for pressroom.

Exposes the WSGI callable as a module-level variable named ``application``.
"""
import os
import sys

from django.core.wsgi import get_wsgi_application

# pressroom/ holds the Django apps, which are imported as top-level packages.
app_path = os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir))
sys.path.append(os.path.join(app_path, 'pressroom'))

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')

application = get_wsgi_application()
