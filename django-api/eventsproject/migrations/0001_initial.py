from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Logistics",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("description", models.CharField(blank=True, max_length=255)),
                ("reserved", models.BooleanField(default=False)),
                (
                    "unit_price",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0"), max_digits=12
                    ),
                ),
                ("quantity", models.IntegerField(default=0)),
            ],
            options={
                "verbose_name_plural": "logistics",
            },
        ),
        migrations.CreateModel(
            name="Participant",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("last_name", models.CharField(max_length=100)),
                ("first_name", models.CharField(max_length=100)),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("ORGANIZER", "Organizer"),
                            ("ANIMATOR", "Animator"),
                            ("GUEST", "Guest"),
                        ],
                        default="GUEST",
                        max_length=20,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(
                        fields=["last_name", "first_name", "role"],
                        name="participant_identity_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("description", models.CharField(max_length=255, unique=True)),
                ("start_date", models.DateField(blank=True, null=True)),
                ("end_date", models.DateField(blank=True, null=True)),
                (
                    "cost",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0"), max_digits=14
                    ),
                ),
                (
                    "logistics",
                    models.ManyToManyField(
                        blank=True, related_name="events", to="eventsproject.logistics"
                    ),
                ),
                (
                    "participants",
                    models.ManyToManyField(
                        blank=True,
                        related_name="events",
                        to="eventsproject.participant",
                    ),
                ),
            ],
            options={
                "ordering": ["start_date", "id"],
                "indexes": [
                    models.Index(fields=["start_date"], name="event_start_date_idx")
                ],
            },
        ),
    ]
