import unittest

from crawler.normalizer import canonicalize_url


class TestCanonicalizeUrl(unittest.TestCase):

    def test_fragment_is_dropped(self):
        self.assertEqual(canonicalize_url("https://a.com/x#frag"), canonicalize_url("https://a.com/x"))

    def test_trailing_slash_is_stripped(self):
        self.assertEqual(canonicalize_url("https://a.com/x/"), "https://a.com/x")
        self.assertEqual(canonicalize_url("https://a.com/x/"), canonicalize_url("https://a.com/x"))

    def test_repeated_trailing_slashes_collapse(self):
        self.assertEqual(canonicalize_url("https://a.com/x//"), "https://a.com/x")
        self.assertEqual(canonicalize_url("https://a.com///?q=1"), "https://a.com?q=1")

    def test_root_path_collapses_to_empty(self):
        self.assertEqual(canonicalize_url("https://example.com/"), "https://example.com")
        self.assertEqual(canonicalize_url("https://example.com"), "https://example.com")

    def test_query_is_kept_verbatim(self):
        self.assertEqual(canonicalize_url("https://a.com/list/?b=2&a=1#top"), "https://a.com/list?b=2&a=1")
        self.assertEqual(canonicalize_url("https://a.com/?q=1"), "https://a.com?q=1")

    def test_path_case_and_encoding_untouched(self):
        self.assertEqual(canonicalize_url("https://a.com/Docs/%7Euser"), "https://a.com/Docs/%7Euser")

    def test_explicit_port_kept_and_userinfo_dropped(self):
        self.assertEqual(canonicalize_url("http://bob:pw@localhost:8080/a/"), "http://localhost:8080/a")

    def test_idempotent(self):
        samples = [
            "https://a.com",
            "https://a.com/",
            "https://a.com/x//",
            "https://a.com/x/?q=1#f",
            "http://localhost:8080/",
            "https://a.com?only=query",
            "http://[::1]:8000/x/",
            "not a url",
        ]
        for raw in samples:
            once = canonicalize_url(raw)
            self.assertEqual(canonicalize_url(once), once, raw)

    def test_unparseable_input_returned_unchanged(self):
        self.assertEqual(canonicalize_url("not a url"), "not a url")
        self.assertEqual(canonicalize_url("/relative/path/"), "/relative/path/")
        self.assertEqual(canonicalize_url("http://[broken"), "http://[broken")
        self.assertEqual(canonicalize_url("http://a.com:notaport/"), "http://a.com:notaport/")


if __name__ == "__main__":
    unittest.main()
