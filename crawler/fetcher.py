"""
HTTP fetching module for the crawler.
Fetches one URL with bounded time and redirects.
Every failure is raised as FetchError so the caller can record it per URL.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, Optional

import requests

from crawler.config import ACCEPT_HEADER, MAX_REDIRECTS, REQUEST_TIMEOUT, USER_AGENT
from crawler.errors import FetchError

CHUNK_SIZE = 8192


@dataclass(frozen=True)
class FetchResponse:
    """Raw response of a successful (2xx) fetch."""
    url: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def content_type(self) -> str:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value or ""
        return ""


def is_html(content_type: Optional[str]) -> bool:
    return "text/html" in (content_type or "").lower()


def fetch(
    url: str,
    user_agent: str = USER_AGENT,
    accept: str = ACCEPT_HEADER,
    timeout: float = REQUEST_TIMEOUT,
    max_redirects: int = MAX_REDIRECTS,
    session: Optional[requests.Session] = None,
) -> FetchResponse:
    """
    GET url and return a FetchResponse for 2xx answers.
    timeout bounds the whole request, body included, not just each socket read.
    Only HTML bodies are downloaded; other content types come back with an empty body.
    Raises FetchError for timeouts, connection errors, redirect loops and non-2xx statuses.
    """
    owns_session = session is None
    if owns_session:
        session = requests.Session()
    session.max_redirects = max_redirects

    deadline = time.monotonic() + timeout
    r = None
    try:
        r = session.get(
            url,
            timeout=timeout,
            headers={"User-Agent": user_agent, "Accept": accept},
            allow_redirects=True,
            stream=True,
        )
        if not 200 <= r.status_code < 300:
            raise FetchError(url, f"Request failed with status code {r.status_code}")

        body = ""
        if is_html(r.headers.get("Content-Type")):
            body = _read_body(url, r, deadline, timeout)

        return FetchResponse(
            url=r.url or url,
            status_code=r.status_code,
            headers=dict(r.headers),
            body=body,
        )
    except requests.exceptions.Timeout:
        raise FetchError(url, f"timeout of {timeout}s exceeded")
    except requests.exceptions.TooManyRedirects:
        raise FetchError(url, f"maximum redirects exceeded ({max_redirects})")
    except requests.exceptions.ConnectionError as e:
        raise FetchError(url, f"connection error: {e}")
    except requests.exceptions.RequestException as e:
        raise FetchError(url, f"request error: {e}")
    finally:
        if r is not None:
            r.close()
        if owns_session:
            session.close()


def _read_body(url, r, deadline, timeout):
    # read1 returns on the first bytes available; deadline checked between reads
    chunks = []
    while True:
        if time.monotonic() > deadline:
            raise FetchError(url, f"timeout of {timeout}s exceeded")
        chunk = r.raw.read1(CHUNK_SIZE, decode_content=True)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode(r.encoding or "utf-8", errors="replace")
