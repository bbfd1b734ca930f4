import logging
import unittest
from unittest import mock

from ratelim import logger


class LoggerTest(unittest.TestCase):
    def test_development_logs_debug(self):
        with mock.patch.dict(logger.load_env.environment, {"env": "development"}), \
                mock.patch("logging.basicConfig") as basic_config:
            log = logger.init("ratelim.test")
        basic_config.assert_called_once_with(
            level=logging.DEBUG, format=logger.FORMAT, datefmt="%H:%M:%S"
        )
        self.assertEqual(log.name, "ratelim.test")

    def test_uses_configured_level(self):
        with mock.patch.dict(
            logger.load_env.environment, {"env": "production", "log_level": "WARNING"}
        ), mock.patch("logging.basicConfig") as basic_config:
            logger.init()
        self.assertEqual(basic_config.call_args.kwargs["level"], "WARNING")


if __name__ == "__main__":
    unittest.main()
