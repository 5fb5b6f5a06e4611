"""Recompute event costs from reserved logistics.

Meant to be run periodically, e.g. from cron:

    python manage.py recalculate_costs
"""

from django.core.management.base import BaseCommand

from eventsproject.services import EventService
from eventsproject.stores.django_store import (
    DjangoEventStore,
    DjangoLogisticsStore,
    DjangoParticipantStore,
)


class Command(BaseCommand):
    help = "Recompute the cost of the organizer's events from reserved logistics."

    def handle(self, *args, **options):
        service = EventService(
            DjangoEventStore(), DjangoParticipantStore(), DjangoLogisticsStore()
        )
        service.calculate_costs()
        self.stdout.write(self.style.SUCCESS("Event costs recalculated"))
