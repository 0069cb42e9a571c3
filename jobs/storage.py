from abc import ABC, abstractmethod
from threading import Lock
from typing import List, Optional

from jobs.models import CrawlJob


class JobStore(ABC):
    """
    Abstract interface for crawl job storage.
    Implementations must allow concurrent inserts and reads.
    """

    @abstractmethod
    def add(self, job: CrawlJob) -> None:
        """Register a new job. Job ids are unique for the store's lifetime."""
        pass

    @abstractmethod
    def get(self, job_id: str) -> Optional[CrawlJob]:
        """Retrieve a job by id, or None if unknown."""
        pass

    @abstractmethod
    def ids(self) -> List[str]:
        """Ids of all stored jobs in insertion order."""
        pass


class InMemoryJobStore(JobStore):
    """
    Process-local job map. Entries are never evicted.
    """

    def __init__(self):
        self._jobs = {}
        self._lock = Lock()

    def add(self, job: CrawlJob) -> None:
        with self._lock:
            if job.job_id in self._jobs:
                raise ValueError(f"Duplicate crawl job id: {job.job_id}")
            self._jobs[job.job_id] = job

    def get(self, job_id: str) -> Optional[CrawlJob]:
        with self._lock:
            return self._jobs.get(job_id)

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._jobs)
