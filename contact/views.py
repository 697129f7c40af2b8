import logging

from django.apps import apps
from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import SUCCESS_MESSAGE, SubmissionProcessingError, SubmissionValidationError
from .serializers import ContactSubmissionSerializer

logger = logging.getLogger("django")


class ContactSubmissionView(APIView):
    handler = None

    def get_handler(self):
        if self.handler is not None:
            return self.handler
        return apps.get_app_config("contact").handler

    def post(self, request):
        try:
            data = request.data
        except ParseError:
            data = None
        if not isinstance(data, dict):
            data = {}
        serializer = ContactSubmissionSerializer(data=data)
        if not serializer.is_valid():
            logger.warning(
                "Contact form rejected due to missing fields.",
                extra={"errors": serializer.errors},
            )
            error = SubmissionValidationError()
            return Response(error.to_dict(), status=error.status_code)

        outcome = self.get_handler().handle(**serializer.validated_data)

        if not outcome.succeeded:
            logger.error(
                "Error processing contact form.",
                extra={"failed_step": outcome.failed_step, "saved": outcome.saved},
            )
            extra_data = None
            if settings.CONTACT_EXPOSE_PARTIAL_RESULTS:
                extra_data = {"saved": outcome.saved, "failed_step": outcome.failed_step}
            error = SubmissionProcessingError(extra_data=extra_data)
            return Response(error.to_dict(), status=error.status_code)

        return Response({"message": SUCCESS_MESSAGE}, status=status.HTTP_200_OK)
