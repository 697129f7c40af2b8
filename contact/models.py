from django.db import models
from django.utils import timezone


class ContactSubmission(models.Model):
    name = models.TextField()
    email = models.TextField()
    company = models.TextField(blank=True, default="")
    message = models.TextField()
    submission_date = models.DateTimeField(
        default=timezone.now, db_column="submissionDate"
    )

    class Meta:
        ordering = ["-submission_date"]

    def __str__(self):
        return f"ContactSubmission from {self.name}"
