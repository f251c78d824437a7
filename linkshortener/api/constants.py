# Structured log event names (logged as `extra={'event': ...}`)
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
CUSTOM_SHORTCODE_TAKEN = 'CUSTOM_SHORTCODE_TAKEN'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
INVALID_URL = 'INVALID_URL'
INVALID_VALIDITY = 'INVALID_VALIDITY'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
SHORT_URL_EXPIRED = 'SHORT_URL_EXPIRED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'

# Client-facing error messages
INVALID_JSON_BODY_MESSAGE = 'Invalid JSON body'
INVALID_URL_MESSAGE = 'Invalid URL'
VALIDITY_NOT_A_NUMBER_MESSAGE = 'Validity must be a number'
VALIDITY_NOT_POSITIVE_MESSAGE = 'Validity must be positive'
VALIDITY_TOO_LARGE_MESSAGE = 'Validity is too large'
NOT_FOUND_OR_EXPIRED_MESSAGE = 'Short URL not found or expired'
NOT_FOUND_MESSAGE = 'Short URL not found'

# Custom shortcodes that collide with static routes (`/shorturls/all`)
RESERVED_SHORTCODES = frozenset({'all'})
