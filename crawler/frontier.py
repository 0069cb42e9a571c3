"""
Thread-safe frontier for a crawl job.
Holds the FIFO queue of canonical URLs awaiting fetch and the visited set.
A URL is queued at most once and never queued again after it was visited.
"""

import os
from collections import deque
from threading import Lock

import psutil

from crawler.logger import setup_logger

logger = setup_logger("crawler.frontier")


class Frontier:
    """
    FIFO queue plus visited set, guarded by a single lock.
    Dequeue order follows enqueue order, which gives breadth-first traversal.
    """

    def __init__(self, seeds=()):
        self.state_lock = Lock()
        self.queue = deque()     # canonical URLs awaiting fetch
        self.pending = set()     # mirror of queue for O(1) membership
        self.visited = set()     # canonical URLs already dequeued and claimed
        for url in seeds:
            self.enqueue(url)

    def enqueue(self, url):
        """
        Append url unless it is already pending or visited.
        Returns True if enqueued, False otherwise.
        """
        with self.state_lock:
            if url in self.visited:
                logger.debug(f"enqueue: skipped (already visited): {url}")
                return False
            if url in self.pending:
                logger.debug(f"enqueue: skipped (already queued): {url}")
                return False
            self.queue.append(url)
            self.pending.add(url)
        logger.debug(f"enqueue: queued {url} qsize={len(self.queue)}")
        return True

    def dequeue(self):
        """Pop the oldest pending URL, or None if the queue is empty."""
        with self.state_lock:
            if not self.queue:
                return None
            url = self.queue.popleft()
            self.pending.discard(url)
            return url

    def mark_visited(self, url):
        """
        Claim url for fetching.
        Returns False if it was already visited, in which case it must be skipped.
        """
        with self.state_lock:
            if url in self.visited:
                return False
            self.visited.add(url)
            return True

    def is_empty(self):
        with self.state_lock:
            return not self.queue

    def snapshot(self):
        """Copy of the pending queue in dequeue order."""
        with self.state_lock:
            return list(self.queue)

    def get_stats(self):
        with self.state_lock:
            return {
                'queue_size': len(self.queue),
                'visited_count': len(self.visited),
            }

    def get_memory_stats(self):
        """
        Return memory stats for frontier structures.
        Per-structure figures are rough estimates, not measurements.
        """
        process = psutil.Process(os.getpid())
        total_memory = process.memory_info().rss / 1024 / 1024  # MB
        stats = self.get_stats()
        queue_memory = stats['queue_size'] * 0.1 / 1024       # ~100 bytes per entry (deque + set)
        visited_memory = stats['visited_count'] * 0.05 / 1024  # ~50 bytes per URL string
        return {
            'total_process_memory_mb': total_memory,
            'frontier_memory_mb': queue_memory + visited_memory,
            'queue_memory_mb': queue_memory,
            'visited_memory_mb': visited_memory,
        }
