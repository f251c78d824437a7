from typing import Any


# Type aliases for Python dictionaries
type JsonBody = dict[str, Any]
type HttpHeaders = dict[str, str]
type AppConfiguration = dict[str, Any]
type CollectorPayload = dict[str, str]
