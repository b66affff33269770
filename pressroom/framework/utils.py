from django.urls import reverse


def admin_url(path=''):
    """Absolute path of an admin page, relative to the admin index."""
    return reverse('admin:index') + path.lstrip('/')
