import logging

from flask import jsonify, request

from linkshortener.api.services import services
from linkshortener.api.constants import SHORT_URL_NOT_FOUND, NOT_FOUND_MESSAGE
from linkshortener.collector import Level, Package
from linkshortener.dao.exceptions import ShortURLNotFoundError
from linkshortener.exceptions import NotFoundError
from linkshortener.utils import get_short_url, isoformat_z


logger = logging.getLogger(__name__)


def url_stats(shortcode: str):
    """Report usage statistics for a short URL

    Expired short URLs still report their statistics.

    HTTP responses:
        200: Statistics
            shortlink, originalUrl, createdAt, expiry, totalClicks,
            clickData: [{timestamp, referrer, location}, ...] in request order
        404: Not found
            error: shortcode unknown
    """
    svc = services()

    try:
        short_url = svc.short_urls.get(shortcode)
    except ShortURLNotFoundError as e:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        svc.forward(Level.ERROR, Package.REPOSITORY, f'Stats not found: {shortcode}')
        raise NotFoundError(NOT_FOUND_MESSAGE) from e

    clicks = svc.clicks.all(shortcode)
    return jsonify(
        {
            'shortlink': get_short_url(shortcode, request),
            'originalUrl': short_url.target,
            'createdAt': isoformat_z(short_url.created_at),
            'expiry': isoformat_z(short_url.expires_at),
            'totalClicks': len(clicks),
            'clickData': [
                {
                    'timestamp': isoformat_z(click.timestamp),
                    'referrer': click.referrer,
                    'location': click.location,
                }
                for click in clicks
            ],
        }
    )
