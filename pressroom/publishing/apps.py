from django.apps import AppConfig


class PublishingConfig(AppConfig):
    name = 'publishing'
    verbose_name = 'Publish & Add New'

    def ready(self):
        from . import handlers
        handlers.register()
