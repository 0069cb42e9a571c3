from typing import Iterable, List, Optional
from urllib.parse import urldefrag, urljoin, urlsplit

from crawler.normalizer import canonicalize_url

HTTP_SCHEMES = ("http", "https")


def get_hostname(url: str) -> Optional[str]:
    """Return the parsed hostname of url, or None when it has none or cannot be parsed."""
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a malformed port
    except (AttributeError, TypeError, ValueError):
        return None
    return parts.hostname or None


def is_valid_url(url) -> bool:
    """True for an absolute http(s) URL with a host."""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        scheme = urlsplit(url.strip()).scheme
    except ValueError:
        return False
    return scheme in HTTP_SCHEMES and get_hostname(url.strip()) is not None


def is_same_domain(url: str, base_domain: str) -> bool:
    """Exact hostname match; subdomains of base_domain do not count."""
    return get_hostname(url) == base_domain


def resolve_links(hrefs: Iterable[str], page_url: str, base_domain: str) -> List[str]:
    """
    Resolve raw hrefs found on page_url and keep the ones on base_domain.
    Returns canonical URLs in the order the hrefs were given.
    Hrefs that cannot be resolved are dropped without being reported.
    """
    accepted = []
    for href in hrefs:
        try:
            absolute = urljoin(page_url, href.strip())
            absolute = urldefrag(absolute)[0]
        except (AttributeError, TypeError, ValueError):
            continue

        if not is_same_domain(absolute, base_domain):
            continue

        accepted.append(canonicalize_url(absolute))
    return accepted
