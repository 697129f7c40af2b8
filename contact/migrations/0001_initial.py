import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ContactSubmission",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.TextField()),
                ("email", models.TextField()),
                (
                    "company",
                    models.TextField(blank=True, default=""),
                ),
                ("message", models.TextField()),
                (
                    "submission_date",
                    models.DateTimeField(
                        db_column="submissionDate",
                        default=django.utils.timezone.now,
                    ),
                ),
            ],
            options={
                "ordering": ["-submission_date"],
            },
        ),
    ]
