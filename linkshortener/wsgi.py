"""WSGI entry point, e.g. `flask --app linkshortener.wsgi run`"""

from linkshortener.api import create_app
from linkshortener.utils import initialize_logging


initialize_logging()
app = create_app()
