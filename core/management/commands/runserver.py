from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    help = "Starts a development server on the port given by the PORT setting."

    default_port = str(settings.PORT)
