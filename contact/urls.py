from django.urls import re_path

from .views import ContactSubmissionView

urlpatterns = [
    re_path(r"^api/contact/?$", ContactSubmissionView.as_view(), name="contacts"),
]
