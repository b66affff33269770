from datetime import timedelta

from django.apps import apps
from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone


class Command(BaseCommand):
    help = 'Deletes auto-drafts that were never saved'

    def add_arguments(self, parser):
        parser.add_argument('--days', type=int, default=settings.AUTO_DRAFT_MAX_AGE)

    def handle(self, *args, **options):
        model = apps.get_model(settings.EDITOR_MODEL)
        cutoff = timezone.now() - timedelta(days=options['days'])
        deleted, _ = model.objects.filter(status=model.AUTO_DRAFT, created__lt=cutoff).delete()
        self.stdout.write(self.style.SUCCESS(f'Deleted {deleted} auto-drafts.'))
