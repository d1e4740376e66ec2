"""URL construction shared by the endpoint modules."""

from urllib.parse import quote

BASE_URL = "https://api.kingtime.jp/v1.0"


def endpoint(path: str, *segments: str, base_url: str | None = None) -> str:
    """Build an endpoint URL, percent-encoding each trailing path segment."""
    url = f"{base_url or BASE_URL}{path}"
    for segment in segments:
        url += "/" + quote(segment, safe="")
    return url
