"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from decimal import Decimal

from django.db import models


class Participant(models.Model):
    """Persistence model for participants."""

    class Role(models.TextChoices):
        ORGANIZER = "ORGANIZER", "Organizer"
        ANIMATOR = "ANIMATOR", "Animator"
        GUEST = "GUEST", "Guest"

    id = models.AutoField(primary_key=True)
    last_name = models.CharField(max_length=100)
    first_name = models.CharField(max_length=100)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.GUEST)

    class Meta:
        indexes = [
            models.Index(
                fields=["last_name", "first_name", "role"],
                name="participant_identity_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.role})"


class Logistics(models.Model):
    """Persistence model for logistics items."""

    id = models.AutoField(primary_key=True)
    description = models.CharField(max_length=255, blank=True)
    reserved = models.BooleanField(default=False)
    unit_price = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0")
    )
    quantity = models.IntegerField(default=0)

    class Meta:
        verbose_name_plural = "logistics"

    def __str__(self) -> str:
        return f"{self.description} x{self.quantity}"


class Event(models.Model):
    """Persistence model for events."""

    id = models.AutoField(primary_key=True)
    description = models.CharField(max_length=255, unique=True)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    cost = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    participants = models.ManyToManyField(
        Participant, related_name="events", blank=True
    )
    logistics = models.ManyToManyField(Logistics, related_name="events", blank=True)

    class Meta:
        ordering = ["start_date", "id"]
        indexes = [
            models.Index(fields=["start_date"], name="event_start_date_idx"),
        ]

    def __str__(self) -> str:
        return self.description
