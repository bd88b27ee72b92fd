from pathlib import Path
import sys
import unittest

SERVER_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(SERVER_DIR))

from link_detector import LinkPart, PlainTextDetector, TextPart, UrlLinkDetector


class UrlLinkDetectorTests(unittest.TestCase):
    def setUp(self):
        self.detector = UrlLinkDetector()

    def assertCovers(self, text, parts):
        self.assertEqual("".join(p.text for p in parts), text)

    def test_no_links(self):
        self.assertEqual(self.detector.detect("just text"), [TextPart("just text")])
        self.assertEqual(self.detector.detect(""), [])

    def test_trailing_punctuation_stays_text(self):
        text = "see https://example.com/a."
        parts = self.detector.detect(text)
        self.assertEqual(
            parts,
            [
                TextPart("see "),
                LinkPart("https://example.com/a", "https://example.com/a"),
                TextPart("."),
            ],
        )
        self.assertCovers(text, parts)

    def test_balanced_parentheses(self):
        text = "(http://x.org/wiki_(foo))"
        parts = self.detector.detect(text)
        self.assertEqual(parts[1], LinkPart("http://x.org/wiki_(foo)", "http://x.org/wiki_(foo)"))
        self.assertEqual(parts[-1], TextPart(")"))
        self.assertCovers(text, parts)

    def test_scheme_without_target_is_text(self):
        self.assertEqual(self.detector.detect("http://."), [TextPart("http://.")])

    def test_multiple_links_and_file_urls(self):
        text = "log at file:///tmp/run.log and https://a.io/x?y=1"
        parts = self.detector.detect(text)
        links = [p.target for p in parts if isinstance(p, LinkPart)]
        self.assertEqual(links, ["file:///tmp/run.log", "https://a.io/x?y=1"])
        self.assertCovers(text, parts)


class PlainTextDetectorTests(unittest.TestCase):
    def test_never_links(self):
        detector = PlainTextDetector()
        self.assertEqual(detector.detect("https://a.io"), [TextPart("https://a.io")])
        self.assertEqual(detector.detect(""), [])


if __name__ == "__main__":
    unittest.main()
