"""
Crawl orchestration: drives one CrawlJob from its seed URL to completion.

Traversal is sequential within a job: dequeue, fetch, extract links,
resolve and canonicalize, enqueue, until the frontier is empty or the
page budget is spent. A page that fails to fetch is recorded on the job
and the traversal moves on.
"""

import time

from crawler.errors import CrawlFailed, FetchError, InvalidInput
from crawler.fetcher import fetch, is_html
from crawler.normalizer import canonicalize_url
from crawler.parser import extract_hrefs
from crawler.url_utils import get_hostname, is_valid_url, resolve_links
from jobs.models import JobStatus, PageError


class CrawlOrchestrator:
    """
    FLOW: Validates the seed -> seeds the frontier -> loops over the frontier
    fetching pages and feeding same-host links back into it -> closes the job.

    fetch_fn(url) must return an object with content_type, body and raise
    FetchError on failure; extract_fn(html) must return raw hrefs.
    """

    def __init__(self, fetch_fn=fetch, extract_fn=extract_hrefs):
        self.fetch_fn = fetch_fn
        self.extract_fn = extract_fn

    def run(self, job):
        """
        Run job to completion and return its result payload.
        Raises CrawlFailed (job stored as failed) if the traversal cannot run.
        """
        job.log.info(f"Starting crawl for {job.base_url} (maxUrls={job.max_urls})")
        try:
            self._prepare(job)
            self._traverse(job)
        except Exception as e:
            message = str(e) or e.__class__.__name__
            with job.lock:
                job.status = JobStatus.FAILED
                job.error = message
                job.end_time = time.time()
            job.log.error(f"Crawler failed for {job.base_url}: {message}")
            raise CrawlFailed(job.job_id, message) from e

        with job.lock:
            job.status = JobStatus.COMPLETED
            job.end_time = time.time()

        job.log.info(
            f"Crawl completed for {job.base_url}. Found {len(job.discovered)} URLs "
            f"in {job.duration} seconds ({len(job.errors)} errors, "
            f"{'complete' if job.crawl_complete else 'limit reached'}).",
        )
        job.log.debug(f"Frontier memory: {job.frontier.get_memory_stats()}")
        return job.result_snapshot()

    def _prepare(self, job):
        if not is_valid_url(job.base_url):
            raise InvalidInput(f"Invalid URL: {job.base_url}")
        job.base_domain = get_hostname(job.base_url.strip())
        job.frontier.enqueue(canonicalize_url(job.base_url))

    def _traverse(self, job):
        frontier = job.frontier

        while not frontier.is_empty() and job.pages_visited < job.max_urls:
            url = frontier.dequeue()
            if url is None:
                break
            # Visited guard: a URL is fetched at most once per job
            if not frontier.mark_visited(url):
                continue

            with job.lock:
                job.discovered.append(url)

            job.log.info(f"Crawling ({job.pages_visited + 1}/{job.max_urls}): {url}")
            try:
                self._visit(job, url)
            except FetchError as e:
                job.log.warning(f"Error crawling {url}: {e.message}")
                self._record_error(job, url, e.message)
            except Exception as e:
                job.log.exception(f"Error processing {url}: {e}")
                self._record_error(job, url, str(e) or e.__class__.__name__)

            with job.lock:
                job.pages_visited += 1

    def _visit(self, job, url):
        response = self.fetch_fn(url)
        if not is_html(response.content_type):
            return

        hrefs = self.extract_fn(response.body)
        queued = 0
        for link in resolve_links(hrefs, url, job.base_domain):
            if job.frontier.enqueue(link):
                queued += 1
        job.log.debug(f"{url}: {len(hrefs)} links found, {queued} queued")

    @staticmethod
    def _record_error(job, url, message):
        with job.lock:
            job.errors.append(PageError(url=url, message=message))
