from django.apps import AppConfig


class EventsProjectConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "eventsproject"
    verbose_name = "Events project"
