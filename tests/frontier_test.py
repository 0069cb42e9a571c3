import threading
import unittest

from crawler.frontier import Frontier


class TestFrontier(unittest.TestCase):
    def setUp(self):
        self.frontier = Frontier()

    def test_fifo_order(self):
        for url in ("https://a.com", "https://a.com/1", "https://a.com/2"):
            self.frontier.enqueue(url)
        self.assertEqual(self.frontier.dequeue(), "https://a.com")
        self.assertEqual(self.frontier.dequeue(), "https://a.com/1")
        self.assertEqual(self.frontier.dequeue(), "https://a.com/2")
        self.assertIsNone(self.frontier.dequeue())

    def test_pending_duplicate_is_queued_once(self):
        self.assertTrue(self.frontier.enqueue("https://a.com/x"))
        self.assertFalse(self.frontier.enqueue("https://a.com/x"))
        self.assertEqual(self.frontier.snapshot(), ["https://a.com/x"])

    def test_visited_url_never_requeued(self):
        self.frontier.enqueue("https://a.com/x")
        url = self.frontier.dequeue()
        self.assertTrue(self.frontier.mark_visited(url))
        self.assertFalse(self.frontier.enqueue("https://a.com/x"))
        self.assertTrue(self.frontier.is_empty())

    def test_mark_visited_claims_once(self):
        self.assertTrue(self.frontier.mark_visited("https://a.com/x"))
        self.assertFalse(self.frontier.mark_visited("https://a.com/x"))
        self.assertEqual(self.frontier.get_stats()["visited_count"], 1)

    def test_seeds_enqueued_in_order(self):
        frontier = Frontier(seeds=["https://a.com", "https://a.com", "https://a.com/b"])
        self.assertEqual(frontier.snapshot(), ["https://a.com", "https://a.com/b"])

    def test_concurrent_enqueue_keeps_single_entry(self):
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(self.frontier.enqueue("https://a.com/race"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(results.count(True), 1)
        self.assertEqual(self.frontier.snapshot(), ["https://a.com/race"])

    def test_stats(self):
        self.frontier.enqueue("https://a.com/1")
        self.frontier.enqueue("https://a.com/2")
        self.frontier.mark_visited(self.frontier.dequeue())
        self.assertEqual(self.frontier.get_stats(), {'queue_size': 1, 'visited_count': 1})

        memory = self.frontier.get_memory_stats()
        self.assertGreater(memory['total_process_memory_mb'], 0)
        self.assertIn('frontier_memory_mb', memory)


if __name__ == "__main__":
    unittest.main()
