from dataclasses import dataclass
from datetime import datetime, UTC

from linkshortener.constants import UNKNOWN


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    shortcode: str                      # Unique short identifier of shortened URL
    target: str                         # Original long URL
    created_at: datetime                # Creation time (UTC)
    expires_at: datetime                # After this moment the link no longer redirects

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True once `now` is past the expiry time. Expired records are kept, not purged."""
        return (now or datetime.now(UTC)) > self.expires_at


@dataclass(frozen=True)
class ClickModel:
    timestamp: datetime                 # Time of the redirect request (UTC)
    referrer: str = UNKNOWN             # Referer header of the redirect request
    location: str = UNKNOWN             # Geolocation is not resolved
# fmt: on
