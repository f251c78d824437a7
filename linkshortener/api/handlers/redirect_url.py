import logging
from datetime import datetime, UTC

from flask import redirect, request

from linkshortener.api.services import services
from linkshortener.api.constants import (
    SHORT_URL_NOT_FOUND,
    SHORT_URL_EXPIRED,
    REDIRECT_SUCCESS,
    NOT_FOUND_OR_EXPIRED_MESSAGE,
)
from linkshortener.collector import Level, Package
from linkshortener.constants import UNKNOWN
from linkshortener.dao.exceptions import ShortURLNotFoundError
from linkshortener.exceptions import NotFoundError
from linkshortener.models import ClickModel


logger = logging.getLogger(__name__)


def redirect_url(shortcode: str):
    """Handle requests to redirect short URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Get short URL record from database
    - Step 2: Check the record hasn't expired
    - Step 3: Record the click (timestamp, referrer, location)
    - Step 4: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        404: Not found
            error: shortcode unknown or short URL expired

    Example:
        >>> response = client.get('/Xa9k2B', headers={'Referer': 'https://news.example'})
        >>> response.status_code
        302
        >>> response.headers['Location']
        'https://example.com/my-page'
    """
    svc = services()

    # 1- Get short_url record from database
    try:
        short_url = svc.short_urls.get(shortcode)
    except ShortURLNotFoundError as e:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        svc.forward(Level.ERROR, Package.ROUTE, f'Shortcode not found: {shortcode}')
        raise NotFoundError(NOT_FOUND_OR_EXPIRED_MESSAGE) from e

    # 2- Expired records are kept for stats but no longer redirect
    now = datetime.now(UTC)
    if short_url.is_expired(now):
        logger.info(
            'Short URL expired. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_EXPIRED},
        )
        svc.forward(Level.WARN, Package.ROUTE, f'Shortcode expired: {shortcode}')
        raise NotFoundError(NOT_FOUND_OR_EXPIRED_MESSAGE)

    # 3- Record click
    referrer = request.headers.get('Referer') or request.headers.get('Referrer') or UNKNOWN
    total_clicks = svc.clicks.append(shortcode, ClickModel(timestamp=now, referrer=referrer))

    # 4- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'totalClicks': total_clicks, 'event': REDIRECT_SUCCESS},
    )
    return redirect(short_url.target, code=302)
