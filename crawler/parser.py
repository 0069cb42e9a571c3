"""
Link extraction from HTML for the crawler.
Returns raw href values; resolution and scoping happen in url_utils.
"""

from bs4 import BeautifulSoup


def extract_hrefs(html):
    """Raw href of every <a> element in document order, empty ones skipped."""
    soup = BeautifulSoup(html or "", 'html.parser')
    hrefs = []
    for a in soup.find_all('a', href=True):
        href = a['href']
        if href and href.strip():
            hrefs.append(href)
    return hrefs
