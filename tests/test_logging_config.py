import logging

from animmath.logging_config import setup_logging


def test_setup_logging_configures_package_logger(tmp_path):
    log_file = tmp_path / "animmath.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert logger.name == "animmath"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logging.getLogger("animmath.vector").debug("hello from vector")
        for handler in logger.handlers:
            handler.flush()
        assert "animmath.vector - DEBUG - hello from vector" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_setup_logging_does_not_stack_handlers():
    logger = setup_logging()
    setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
