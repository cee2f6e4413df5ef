import logging

from app.core.logging_config import LOG_FORMAT, configure_logging, get_logger


def test_configure_logging():
    logger = configure_logging("debug")

    assert logger.name == "voice_feedback"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_is_idempotent():
    configure_logging()
    logger = configure_logging()

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_module_loggers_are_children():
    assert get_logger("app.services.agent_service").name == "voice_feedback.app.services.agent_service"
