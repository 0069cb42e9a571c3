"""
In-memory stand-in for the fetch collaborator used by crawl tests.
"""

import threading

from crawler.errors import FetchError
from crawler.fetcher import FetchResponse

HTML = {"Content-Type": "text/html; charset=utf-8"}


class FakeSite:
    """
    Maps URL -> page. A page is an HTML string, a FetchResponse or an
    exception instance to raise. Unknown URLs fail with a 404 FetchError.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            raise FetchError(url, "Request failed with status code 404")
        if isinstance(page, Exception):
            raise page
        if isinstance(page, FetchResponse):
            return page
        return FetchResponse(url=url, status_code=200, headers=dict(HTML), body=page)


class GatedSite(FakeSite):
    """FakeSite whose fetches block until release() is called."""

    def __init__(self, pages=None):
        super().__init__(pages)
        self.gate = threading.Event()
        self.entered = threading.Event()

    def release(self):
        self.gate.set()

    def __call__(self, url):
        self.entered.set()
        self.gate.wait(timeout=5)
        return super().__call__(url)


def links(*hrefs):
    return "<html><body>" + "".join(f'<a href="{h}">{h}</a>' for h in hrefs) + "</body></html>"
