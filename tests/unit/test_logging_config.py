import io
import logging

from applog.logging.config import PACKAGE_LOGGER_NAME, configure_logging, is_package_record


def test_configure_logging_is_idempotent() -> None:
    stream = io.StringIO()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    before = list(package_logger.handlers)
    try:
        configure_logging(stream=stream)
        configure_logging(stream=stream)
        added = [handler for handler in package_logger.handlers if handler not in before]
        assert len(added) == 1

        logging.getLogger("applog.storage.text_file").debug("visible %s", "now")
        assert "DEBUG applog.storage.text_file visible now" in stream.getvalue()
    finally:
        for handler in list(package_logger.handlers):
            if handler not in before:
                package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)


def test_is_package_record() -> None:
    def record(name: str) -> logging.LogRecord:
        return logging.LogRecord(name, logging.INFO, __file__, 1, "m", (), None)

    assert is_package_record(record("applog"))
    assert is_package_record(record("applog.services.app_log"))
    assert not is_package_record(record("applogger"))
    assert not is_package_record(record("app"))
