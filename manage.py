#!/usr/bin/env python
import os
import sys

if __name__ == '__main__':
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')

    from django.core.management import execute_from_command_line

    # pressroom/ holds the Django apps, which are imported as top-level packages.
    current_path = os.path.dirname(os.path.abspath(__file__))
    sys.path.append(os.path.join(current_path, 'pressroom'))

    execute_from_command_line(sys.argv)
