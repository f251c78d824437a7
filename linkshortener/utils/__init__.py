from linkshortener.utils.config import app_env, app_name, load_config, collector_token
from linkshortener.utils.helpers import base_url, get_short_url, is_valid_url, isoformat_z, require_environment
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'load_config',
    'collector_token',
    'base_url',
    'get_short_url',
    'is_valid_url',
    'isoformat_z',
    'require_environment',
    'initialize_logging',
]
