import logging

from flask import jsonify

from linkshortener.api.services import services


logger = logging.getLogger(__name__)


def list_urls():
    """List every shortcode in the record store, expired ones included (order not guaranteed)."""
    shortcodes = services().short_urls.shortcodes()
    logger.debug('Listing %d shortcodes.', len(shortcodes))
    return jsonify({'shortcodes': shortcodes})
