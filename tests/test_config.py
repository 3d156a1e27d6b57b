"""
Tests for environment-driven configuration.
"""

import logging
import unittest
import sys
import os
from unittest import mock

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from netstrutils import Config, configure_logging, get_config


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            config = get_config()
        self.assertFalse(config.strict_hex)
        self.assertIsNone(config.log_level)

    def test_reads_environment(self):
        env = {"NETSTRUTILS_STRICT_HEX": "Yes", "NETSTRUTILS_LOG_LEVEL": "debug"}
        with mock.patch.dict(os.environ, env, clear=True):
            config = get_config()
        self.assertTrue(config.strict_hex)
        self.assertEqual(config.log_level, "debug")

    def test_configure_logging_sets_package_level(self):
        package_logger = logging.getLogger("netstrutils")
        original = package_logger.level
        try:
            configure_logging(Config(log_level="warning"))
            self.assertEqual(package_logger.level, logging.WARNING)
        finally:
            package_logger.setLevel(original)

    def test_configure_logging_unset_is_noop(self):
        package_logger = logging.getLogger("netstrutils")
        original = package_logger.level
        configure_logging(Config())
        self.assertEqual(package_logger.level, original)

    def test_configure_logging_rejects_unknown_level(self):
        with self.assertRaises(ValueError):
            configure_logging(Config(log_level="chatty"))


if __name__ == '__main__':
    unittest.main()
