import logging

from django.conf import settings
from django.db import models
from django_extensions.db.models import TimeStampedModel, TitleDescriptionModel

from framework.behaviours import StatusAble
from framework.managers import PublishedManager


logger = logging.getLogger(__name__)


class Post(TimeStampedModel, TitleDescriptionModel, StatusAble):
    text = models.TextField(blank=True)
    post_type = models.CharField(max_length=20, default='post')
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)

    objects = PublishedManager()

    def __str__(self):
        return self.title or f'#{self.pk}'

    class Meta(StatusAble.Meta):
        verbose_name = "Post"
        verbose_name_plural = "Posts"
