import logging
import unittest

from tango.utils.logger import configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level
        self.addCleanup(self._restore)

    def _restore(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_configure_installs_single_handler(self) -> None:
        configure_logging(logging.DEBUG)
        configure_logging(logging.DEBUG)
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.DEBUG)

    def test_default_logger_name(self) -> None:
        self.assertEqual(get_logger().name, "tango")
        self.assertEqual(get_logger("tango.engine.minimizer").name, "tango.engine.minimizer")

    def test_minimiser_steps_are_debug_only(self) -> None:
        configure_logging(logging.INFO)
        self.assertFalse(get_logger("tango.engine.minimizer").isEnabledFor(logging.DEBUG))
        self.assertTrue(get_logger("tango.engine.generator").isEnabledFor(logging.INFO))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
