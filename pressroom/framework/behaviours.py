from datetime import date
import logging

from django.db import models
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class StatusAble(models.Model):
    """Makes a model publishable through an editorial status."""

    AUTO_DRAFT = 'auto-draft'
    DRAFT = 'draft'
    PENDING = 'pending'
    FUTURE = 'future'
    PUBLISH = 'publish'
    PRIVATE = 'private'
    TRASH = 'trash'

    STATUS_CHOICES = [
        (AUTO_DRAFT, _('Auto Draft')),
        (DRAFT, _('Draft')),
        (PENDING, _('Pending Review')),
        (FUTURE, _('Scheduled')),
        (PUBLISH, _('Published')),
        (PRIVATE, _('Private')),
        (TRASH, _('Trash')),
    ]

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=DRAFT)
    publish_date = models.DateField(null=True, blank=True)

    @property
    def is_published(self):
        return self.status == self.PUBLISH

    def publish(self):
        self.status = self.PUBLISH
        self.save()
        logger.info(f'{self} published.')

    def save(self, *args, **kwargs):
        if self.is_published and not self.publish_date:
            self.publish_date = date.today()
        super().save(*args, **kwargs)

    class Meta:
        abstract = True
        ordering = ['-publish_date', '-id']
