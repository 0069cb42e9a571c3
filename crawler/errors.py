"""
Exceptions raised by the crawl engine.

InvalidInput, JobNotFound and JobNotReady surface to callers.
FetchError is absorbed into a job's error list and never stops a traversal.
"""


class CrawlerError(Exception):
    """Base class for crawler failures."""


class InvalidInput(CrawlerError):
    """Crawl request rejected before a job was created."""


class FetchError(CrawlerError):
    """A single page could not be fetched."""

    def __init__(self, url, message):
        super().__init__(message)
        self.url = url
        self.message = message


class JobNotFound(CrawlerError):
    def __init__(self, job_id):
        super().__init__(f"Crawl job not found: {job_id}")
        self.job_id = job_id


class JobNotReady(CrawlerError):
    """Results were requested before the job completed."""

    def __init__(self, job_id, status, progress):
        super().__init__(f"Crawl job {job_id} not completed yet ({status})")
        self.job_id = job_id
        self.status = status
        self.progress = progress


class CrawlFailed(CrawlerError):
    """The job could not start its traversal and is stored as failed."""

    def __init__(self, job_id, message):
        super().__init__(message)
        self.job_id = job_id
        self.message = message
