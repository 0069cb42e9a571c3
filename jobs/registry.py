"""
Job registry: the entry and query point for crawl jobs.
Creates jobs, looks them up by id and hands out read-only snapshots.
"""

import uuid
from typing import Optional

from crawler.errors import JobNotFound, JobNotReady
from jobs.models import CrawlJob, JobStatus
from jobs.storage import InMemoryJobStore, JobStore


class JobRegistry:

    def __init__(self, store: Optional[JobStore] = None):
        self._store = store if store is not None else InMemoryJobStore()

    def create(self, base_url: str, max_urls: int) -> str:
        """Allocate and register a job in the in-progress state. Returns its id."""
        job = CrawlJob(job_id=str(uuid.uuid4()), base_url=base_url, max_urls=max_urls)
        self._store.add(job)
        job.log.info(f"Created crawl job for {base_url} (maxUrls={max_urls})")
        return job.job_id

    def get(self, job_id: str) -> Optional[CrawlJob]:
        return self._store.get(job_id)

    def require(self, job_id: str) -> CrawlJob:
        job = self._store.get(job_id)
        if job is None:
            raise JobNotFound(job_id)
        return job

    def snapshot_status(self, job_id: str):
        """{id, status, progress, discoveredCount, baseUrl}; raises JobNotFound."""
        return self.require(job_id).status_snapshot()

    def snapshot_results(self, job_id: str):
        """
        Full result payload of a completed job.
        Raises JobNotFound for unknown ids and JobNotReady while the job is
        running or after it failed.
        """
        job = self.require(job_id)
        with job.lock:
            status = job.status
            progress = job.progress
        if status != JobStatus.COMPLETED:
            raise JobNotReady(job_id, status.value, progress)
        return job.result_snapshot()

    def ids(self):
        return self._store.ids()
