import logging
import unittest

from fret_log.logger import get_logger, logger_name
from fret_log.logging_config import setup_logging


class TestLoggerNames(unittest.TestCase):
    def test_package_modules_keep_their_names(self):
        self.assertEqual(logger_name("fret_log"), "fret_log")
        self.assertEqual(logger_name("fret_log.note_matcher"), "fret_log.note_matcher")

    def test_script_and_outside_modules_join_the_package(self):
        self.assertEqual(logger_name("__main__"), "fret_log.main")
        self.assertEqual(logger_name("recorder"), "fret_log.recorder")
        self.assertEqual(logger_name("fret_logger"), "fret_log.fret_logger")

    def test_loggers_are_cached(self):
        first = get_logger("fret_log.audio.sample_extractor")
        self.assertIs(first, get_logger("fret_log.audio.sample_extractor"))
        self.assertIs(first, logging.getLogger("fret_log.audio.sample_extractor"))


def test_setup_logging_applies_override(capsys):
    setup_logging(level="DEBUG")
    try:
        assert logging.getLogger("fret_log.note_matcher").level == logging.DEBUG
        assert logging.getLogger("soundfile").level == logging.ERROR

        get_logger("__main__").info("take started")
        assert "fret_log.main - INFO - take started" in capsys.readouterr().out
    finally:
        setup_logging(level="WARNING")
