import logging
from dataclasses import dataclass
from typing import Optional

from django.core.mail import get_connection

from .emails import build_client_acknowledgment, build_operator_notification
from .models import ContactSubmission

logger = logging.getLogger("django")

PERSIST = "persist"
CLIENT_EMAIL = "client_email"
OPERATOR_EMAIL = "operator_email"


@dataclass
class PersistResult:
    submission: Optional[ContactSubmission] = None
    error: Optional[Exception] = None

    @property
    def ok(self):
        return self.error is None and self.submission is not None


@dataclass
class SendResult:
    recipient: str
    error: Optional[Exception] = None

    @property
    def ok(self):
        return self.error is None


@dataclass
class SubmissionOutcome:
    """What happened to one submission, step by step.

    Steps after the first failure are never attempted, so their result stays
    ``None``.
    """

    persisted: Optional[PersistResult] = None
    client_email: Optional[SendResult] = None
    operator_email: Optional[SendResult] = None

    @property
    def saved(self):
        return self.persisted is not None and self.persisted.ok

    @property
    def failed_step(self):
        for step, result in (
            (PERSIST, self.persisted),
            (CLIENT_EMAIL, self.client_email),
            (OPERATOR_EMAIL, self.operator_email),
        ):
            if result is None or not result.ok:
                return step
        return None

    @property
    def succeeded(self):
        return self.failed_step is None


class SubmissionStore:
    """Durable, write-once storage of contact submissions."""

    def save(self, name, email, company, message):
        return ContactSubmission.objects.create(
            name=name, email=email, company=company, message=message
        )


class ContactMailer:
    """Sends contact emails over one long-lived email backend connection."""

    def __init__(self, connection=None):
        self.connection = connection or get_connection(fail_silently=False)

    def send(self, email):
        email.connection = self.connection
        email.send(fail_silently=False)

    def close(self):
        self.connection.close()


class SubmissionHandler:
    def __init__(self, store, mailer):
        self.store = store
        self.mailer = mailer

    def handle(self, name, email, message, company=""):
        outcome = SubmissionOutcome()

        outcome.persisted = self._persist(name, email, company or "", message)
        if not outcome.persisted.ok:
            return outcome
        submission = outcome.persisted.submission

        outcome.client_email = self._send(
            build_client_acknowledgment(submission), "Welcome email sent to client."
        )
        if not outcome.client_email.ok:
            return outcome

        outcome.operator_email = self._send(
            build_operator_notification(submission), "Notification email sent to operator."
        )
        return outcome

    def _persist(self, name, email, company, message):
        try:
            submission = self.store.save(name, email, company, message)
        except Exception as e:
            logger.error(f"Failed to save contact submission from {email}: {e}", exc_info=True)
            return PersistResult(error=e)

        logger.info(
            "Contact form data saved.",
            extra={"submission_id": submission.pk, "email": submission.email},
        )
        return PersistResult(submission=submission)

    def _send(self, email, success_message):
        recipient = ", ".join(email.to)
        try:
            self.mailer.send(email)
        except Exception as e:
            logger.error(
                f"Failed to send email to {email.to} with subject '{email.subject}': {e}",
                exc_info=True,
            )
            return SendResult(recipient=recipient, error=e)

        logger.info(success_message, extra={"recipient": recipient})
        return SendResult(recipient=recipient)
