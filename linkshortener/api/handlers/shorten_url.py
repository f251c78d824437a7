import math
import logging
from datetime import datetime, timedelta, UTC

from flask import current_app, jsonify, request

from linkshortener.api.services import services
from linkshortener.api.constants import (
    SHORT_URL_CREATED,
    CUSTOM_SHORTCODE_TAKEN,
    INVALID_JSON_BODY,
    INVALID_URL,
    INVALID_VALIDITY,
    RESERVED_SHORTCODES,
    INVALID_JSON_BODY_MESSAGE,
    INVALID_URL_MESSAGE,
    VALIDITY_NOT_A_NUMBER_MESSAGE,
    VALIDITY_NOT_POSITIVE_MESSAGE,
    VALIDITY_TOO_LARGE_MESSAGE,
)
from linkshortener.collector import Level, Package
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError
from linkshortener.exceptions import InvalidInputError
from linkshortener.models import ShortURLModel
from linkshortener.types import JsonBody
from linkshortener.utils import generate_shortcode, get_short_url, is_valid_url, isoformat_z


logger = logging.getLogger(__name__)


def _validity_minutes(body: JsonBody) -> int | float:
    validity = body.get('validity')
    if validity is None:
        return current_app.config['DEFAULT_VALIDITY_MINUTES']

    # bool is an int subclass, but `true` is not a duration
    if isinstance(validity, bool) or not isinstance(validity, (int, float)) or not math.isfinite(validity):
        logger.info(
            'Validity is not a number. Responding with 400.',
            extra={'validity': repr(validity), 'event': INVALID_VALIDITY},
        )
        raise InvalidInputError(VALIDITY_NOT_A_NUMBER_MESSAGE)
    if validity <= 0:
        logger.info(
            'Validity is not positive. Responding with 400.',
            extra={'validity': validity, 'event': INVALID_VALIDITY},
        )
        raise InvalidInputError(VALIDITY_NOT_POSITIVE_MESSAGE)
    return validity


def _custom_shortcode(body: JsonBody) -> str | None:
    shortcode = body.get('shortcode')
    # JSON integers are accepted as their decimal text, e.g. 123 -> "123"
    if isinstance(shortcode, int) and not isinstance(shortcode, bool):
        shortcode = str(shortcode)
    if not isinstance(shortcode, str) or not shortcode or shortcode in RESERVED_SHORTCODES:
        return None
    return shortcode


def shorten_url():
    """Handle requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Parse the JSON request body
    - Step 2: Validate the original URL
    - Step 3: Validate the requested validity (minutes)
    - Step 4: Pick the shortcode: the custom one if free, a generated one otherwise
    - Step 5: Store the short URL and an empty click log (via DAOs)
    - Step 6: Respond to user with 201 created

    Request body:
        url (str): original URL, must be absolute (scheme + host)
        validity (int | float, optional): lifetime in minutes, 30 by default
        shortcode (str | int, optional): custom shortcode, used as-is when free and not reserved

    HTTP responses:
        201: Short URL created
            shortlink: newly generated short URL
            expiry: expiry time (ISO-8601 UTC)
        400: Bad client request
            error: invalid JSON body, invalid URL or non-positive validity
        503: No free shortcode could be generated
            error: alias space exhausted

    Example:
        >>> response = client.post('/shorturls', json={'url': 'https://example.com', 'validity': 5})
        >>> response.status_code
        201
        >>> response.get_json()
        {'expiry': '2026-10-19T12:05:00.000Z', 'shortlink': 'http://localhost:5000/Xa9k2B'}
    """
    svc = services()

    # 1- Parse JSON body
    body = request.get_json(force=True, silent=True)
    if body is None and request.get_data():
        logger.info('Request body is not valid JSON. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        raise InvalidInputError(INVALID_JSON_BODY_MESSAGE)
    body = {} if body is None else body
    if not isinstance(body, dict):
        logger.info('Request body is not a JSON object. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        raise InvalidInputError(INVALID_JSON_BODY_MESSAGE)

    # 2- Validate original URL
    target_url = body.get('url')
    if not target_url or not is_valid_url(target_url):
        logger.info('Invalid URL in request body. Responding with 400.', extra={'event': INVALID_URL})
        svc.forward(Level.WARN, Package.HANDLER, f'Rejected invalid URL: {target_url!r}')
        raise InvalidInputError(INVALID_URL_MESSAGE)
    target_url = target_url.strip()

    # 3- Validate validity
    validity = _validity_minutes(body)
    created_at = datetime.now(UTC)
    try:
        expires_at = created_at + timedelta(minutes=validity)
    except OverflowError as e:
        logger.info('Validity is too large. Responding with 400.', extra={'validity': validity, 'event': INVALID_VALIDITY})
        raise InvalidInputError(VALIDITY_TOO_LARGE_MESSAGE) from e

    # 4- Pick shortcode
    custom = _custom_shortcode(body)
    if custom is not None and not svc.short_urls.exists(custom):
        shortcode = custom
    else:
        if body.get('shortcode'):
            logger.info(
                'Custom shortcode unusable, generating one instead.',
                extra={'shortcode': repr(body['shortcode']), 'event': CUSTOM_SHORTCODE_TAKEN},
            )
        shortcode = generate_shortcode(svc.short_urls.exists)

    # 5- Store short URL and click log
    short_url = ShortURLModel(shortcode=shortcode, target=target_url, created_at=created_at, expires_at=expires_at)
    try:
        svc.short_urls.insert(short_url)
    except ShortURLAlreadyExistsError:
        # Lost a race for the shortcode; never overwrite, pick a fresh one
        shortcode = generate_shortcode(svc.short_urls.exists)
        short_url = ShortURLModel(shortcode=shortcode, target=target_url, created_at=created_at, expires_at=expires_at)
        svc.short_urls.insert(short_url)
    svc.clicks.initialize(shortcode)

    # 6- Respond with short link
    shortlink = get_short_url(shortcode, request)
    logger.info(
        'Short URL created. Responding with 201.',
        extra={'shortcode': shortcode, 'event': SHORT_URL_CREATED},
    )
    svc.forward(Level.INFO, Package.HANDLER, f'Created short URL {shortlink}')
    return jsonify({'shortlink': shortlink, 'expiry': isoformat_z(expires_at)}), 201
