"""
URL canonicalization.
Produces the key used to deduplicate pages within a crawl job.
"""

from urllib.parse import urlsplit


def canonicalize_url(raw: str) -> str:
    """
    Canonical form for crawl URLs:
    - scheme + host (port kept when explicit), userinfo dropped
    - path with trailing slashes removed (root path becomes empty)
    - query appended verbatim, fragment dropped
    - no case folding beyond what the parser does, no query sorting,
      no percent-decoding

    A string that cannot be parsed as an absolute URL is returned unchanged.
    Such strings still act as dedup keys, but two spellings of the same
    malformed link will not collapse into one entry.
    """
    try:
        parts = urlsplit(raw.strip())
        host = parts.hostname
        port = parts.port
    except (AttributeError, TypeError, ValueError):
        return _unparsed(raw)

    if not parts.scheme or not host:
        return _unparsed(raw)

    if ":" in host:
        host = f"[{host}]"
    netloc = f"{host}:{port}" if port is not None else host

    canonical = f"{parts.scheme}://{netloc}{parts.path.rstrip('/')}"
    if parts.query:
        canonical += f"?{parts.query}"
    return canonical


def _unparsed(raw):
    # Fallback branch: opaque key, lower dedup precision for malformed input
    return raw
