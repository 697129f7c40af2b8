import atexit
import logging

from django.apps import AppConfig

logger = logging.getLogger("django")


class ContactConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "contact"

    def ready(self):
        from contact.services import ContactMailer, SubmissionHandler, SubmissionStore

        self.mailer = ContactMailer()
        self.handler = SubmissionHandler(store=SubmissionStore(), mailer=self.mailer)

        atexit.register(self.mailer.close)

        logger.info("Contact submission handler is ready.")
