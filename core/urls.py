from django.urls import path

from .views import LivenessView

urlpatterns = [
    path("", LivenessView.as_view(), name="liveness"),
]
