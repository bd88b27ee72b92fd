from pathlib import Path
import logging
import sys
import unittest
from unittest.mock import patch

SERVER_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(SERVER_DIR))

from logging_setup import init_logging


class InitLoggingTests(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, [(h, h.level) for h in root.handlers])
        self.addCleanup(self._restore)

    def _restore(self):
        root = logging.getLogger()
        level, handlers = self._saved
        root.setLevel(level)
        root.handlers[:] = [h for h, _ in handlers]
        for handler, handler_level in handlers:
            handler.setLevel(handler_level)

    def test_level_from_env(self):
        with patch.dict("os.environ", {"ANSI_SPANS_LOG_LEVEL": "debug"}):
            self.assertEqual(init_logging(), logging.DEBUG)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_unknown_level_falls_back_to_info(self):
        self.assertEqual(init_logging("chatty"), logging.INFO)

    def test_does_not_duplicate_stream_handlers(self):
        init_logging("INFO")
        before = list(logging.getLogger().handlers)
        init_logging("INFO")
        self.assertEqual(logging.getLogger().handlers, before)


if __name__ == "__main__":
    unittest.main()
