"""
Crawl service handed to request handlers.
Validates crawl requests, registers jobs and runs them either inline
(caller waits for the result) or on a bounded pool of worker threads.
"""

from concurrent.futures import ThreadPoolExecutor

from crawler.config import DEFAULT_MAX_URLS, MAX_PARALLEL_JOBS
from crawler.engine import CrawlOrchestrator
from crawler.errors import CrawlFailed, InvalidInput
from crawler.logger import setup_logger
from crawler.url_utils import is_valid_url
from jobs.registry import JobRegistry

logger = setup_logger("crawler.service")


def parse_max_urls(value):
    """Validate a page budget; None means the configured default."""
    if value is None:
        return DEFAULT_MAX_URLS
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidInput("maxUrls must be a positive integer")
    try:
        max_urls = int(value)
    except (TypeError, ValueError):
        raise InvalidInput("maxUrls must be a positive integer")
    if max_urls < 1:
        raise InvalidInput("maxUrls must be a positive integer")
    return max_urls


class CrawlService:

    def __init__(self, registry=None, orchestrator=None, max_workers=MAX_PARALLEL_JOBS):
        self.registry = registry if registry is not None else JobRegistry()
        self.orchestrator = orchestrator if orchestrator is not None else CrawlOrchestrator()
        self._executor = ThreadPoolExecutor(
            max_workers=max(1, max_workers), thread_name_prefix="crawl-job"
        )
        self._futures = {}

    def start_crawl(self, url, max_urls=None, wait=True):
        """
        Create a crawl job for url.
        wait=True runs the traversal now and returns the result payload.
        wait=False schedules it and returns {id, status} straight away.
        Raises InvalidInput before any job exists, CrawlFailed if the job failed.
        """
        if url is None or (isinstance(url, str) and not url.strip()):
            raise InvalidInput("URL is required")
        if not is_valid_url(url):
            raise InvalidInput(f"Invalid URL: {url}")
        budget = parse_max_urls(max_urls)

        job_id = self.registry.create(url, budget)
        job = self.registry.require(job_id)

        if wait:
            return self.orchestrator.run(job)

        self._futures[job_id] = self._executor.submit(self._run_background, job)
        return {"id": job_id, "status": job.status.value}

    def _run_background(self, job):
        try:
            return self.orchestrator.run(job)
        except CrawlFailed:
            # Already stored on the job and logged by the orchestrator
            return None

    def wait_for(self, job_id, timeout=None):
        """Block until a background job finishes. No-op for inline jobs."""
        future = self._futures.get(job_id)
        if future is not None:
            future.result(timeout=timeout)

    def get_status(self, job_id):
        return self.registry.snapshot_status(job_id)

    def get_results(self, job_id):
        return self.registry.snapshot_results(job_id)

    def shutdown(self, wait=True):
        logger.info("Shutting down crawl service")
        self._executor.shutdown(wait=wait)
