import time
from dataclasses import dataclass, field
from enum import Enum
from threading import Lock
from typing import List, Optional

from crawler.frontier import Frontier
from crawler.logger import job_logger


class JobStatus(Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class PageError:
    """A page that could not be fetched during a crawl."""
    url: str
    message: str

    def to_dict(self):
        return {"url": self.url, "error": self.message}


@dataclass
class CrawlJob:
    """
    One traversal run.
    Invariants: discovered follows dequeue order and holds no duplicates;
    only the orchestrator running the job mutates it, readers go through snapshots.
    """
    job_id: str
    base_url: str
    max_urls: int
    base_domain: Optional[str] = None
    frontier: Frontier = field(default_factory=Frontier)
    discovered: List[str] = field(default_factory=list)
    errors: List[PageError] = field(default_factory=list)
    status: JobStatus = JobStatus.IN_PROGRESS
    pages_visited: int = 0
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None
    error: Optional[str] = None
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    @property
    def log(self):
        return job_logger(self.job_id)

    @property
    def progress(self) -> float:
        if self.max_urls <= 0:
            return 0.0
        return round(self.pages_visited / self.max_urls * 100, 2)

    @property
    def duration(self) -> Optional[float]:
        if self.end_time is None:
            return None
        return round(self.end_time - self.start_time, 3)

    @property
    def crawl_complete(self) -> bool:
        return self.status == JobStatus.COMPLETED and self.frontier.is_empty()

    @property
    def limit_reached(self) -> bool:
        return (
            self.status == JobStatus.COMPLETED
            and self.pages_visited >= self.max_urls
            and not self.frontier.is_empty()
        )

    def status_snapshot(self):
        with self.lock:
            return {
                "id": self.job_id,
                "status": self.status.value,
                "progress": self.progress,
                "discoveredCount": len(self.discovered),
                "baseUrl": self.base_url,
            }

    def result_snapshot(self):
        with self.lock:
            return {
                "id": self.job_id,
                "baseUrl": self.base_url,
                "discoveredUrls": list(self.discovered),
                "totalDiscovered": len(self.discovered),
                "crawlComplete": self.crawl_complete,
                "limitReached": self.limit_reached,
                "duration": self.duration,
                "errors": [e.to_dict() for e in self.errors],
            }
