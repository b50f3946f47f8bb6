"""Unit tests for queue-based log forwarding."""
import logging
import queue

import pytest

from tempconv.gui.utils.logging_utils import (
    QueueLogHandler,
    attach_queue_handler,
    detach_queue_handler,
)


@pytest.fixture
def log_queue():
    return queue.Queue()


class TestQueueLogHandler:

    def test_emit_puts_message_and_level(self, log_queue):
        handler = QueueLogHandler(log_queue)
        record = logging.LogRecord("tempconv.test", logging.WARNING, __file__, 1, "too %s", ("cold",), None)
        handler.emit(record)
        assert log_queue.get_nowait() == ("too cold", "WARNING")

    def test_debug_is_shown_as_info(self, log_queue):
        handler = QueueLogHandler(log_queue, level=logging.DEBUG)
        record = logging.LogRecord("tempconv.test", logging.DEBUG, __file__, 1, "detail", None, None)
        handler.emit(record)
        assert log_queue.get_nowait() == ("detail", "INFO")


class TestAttachDetach:

    def test_attached_handler_receives_child_logger_records(self, log_queue):
        handler = attach_queue_handler(log_queue, "tempconv.testing")
        try:
            logging.getLogger("tempconv.testing.child").info("Converted 1.0 °C -> 33.8 °F")
            assert log_queue.get_nowait() == ("Converted 1.0 °C -> 33.8 °F", "INFO")
        finally:
            detach_queue_handler(handler, "tempconv.testing")

    def test_records_below_level_are_dropped(self, log_queue):
        handler = attach_queue_handler(log_queue, "tempconv.testing", logging.WARNING)
        try:
            logging.getLogger("tempconv.testing").info("quiet")
            assert log_queue.empty()
        finally:
            detach_queue_handler(handler, "tempconv.testing")

    def test_detach_stops_forwarding(self, log_queue):
        handler = attach_queue_handler(log_queue, "tempconv.testing")
        detach_queue_handler(handler, "tempconv.testing")
        logging.getLogger("tempconv.testing").warning("after detach")
        assert log_queue.empty()
