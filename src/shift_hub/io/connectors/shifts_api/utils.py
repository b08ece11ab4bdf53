"""
Utility functions for the shifts API connector.
"""

from urllib.parse import urlsplit, urlunsplit


def sanitize_url_for_logging(url: str) -> str:
    """
    Strip credentials and query parameters from a URL before logging.

    Args:
        url: Original URL that may carry userinfo or query tokens

    Returns:
        URL safe for logging
    """
    parts = urlsplit(url)
    netloc = parts.netloc.rsplit("@", 1)[-1]
    query = "[QUERY_SANITIZED]" if parts.query else ""
    return urlunsplit((parts.scheme, netloc, parts.path, query, ""))
