"""ICE portal endpoints and request defaults."""

ICEPORTAL_API_BASE = "https://iceportal.de/api1/rs"
DEFAULT_STATUS_URL = f"{ICEPORTAL_API_BASE}/status"
DEFAULT_TRIP_URL = f"{ICEPORTAL_API_BASE}/tripInfo/trip"

# The portal answers 403 to clients that do not look like a browser.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
)

__all__ = ["DEFAULT_STATUS_URL", "DEFAULT_TRIP_URL", "DEFAULT_USER_AGENT", "ICEPORTAL_API_BASE"]
