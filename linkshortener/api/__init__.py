from linkshortener.api.app import create_app
from linkshortener.api.services import AppServices, services


__all__ = [
    'create_app',
    'services',
    'AppServices',
]
