from django.http import HttpResponse
from django.views import View


class LivenessView(View):
    """Answers without touching the database or the mail server."""

    def get(self, request, *args, **kwargs):
        return HttpResponse("Backend server is running!", content_type="text/plain")
