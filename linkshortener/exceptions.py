class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'
    status_code = 500


class InvalidInputError(LinkShortenerError):
    """Raised when a client sends a malformed or missing value."""

    error_code = 'app:invalid_input_error'
    status_code = 400


class NotFoundError(LinkShortenerError):
    """Raised when a short URL doesn't exist or is no longer served."""

    error_code = 'app:not_found_error'
    status_code = 404


class AliasSpaceExhaustedError(LinkShortenerError):
    """Raised when no free shortcode could be generated within the retry budget."""

    error_code = 'app:alias_space_exhausted_error'
    status_code = 503


class MalformedResponseError(LinkShortenerError):
    """Raised when a response is malformed."""

    error_code = 'app:malformed_response_error'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
