"""Application logger configuration."""

import logging

from doctor_portal.core.logging import LOGGER_NAME, setup_logging


def test_setup_is_idempotent_and_honours_level():
    try:
        first = setup_logging("DEBUG")
        second = setup_logging("debug")

        assert first is second is logging.getLogger(LOGGER_NAME)
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG
    finally:
        setup_logging()


def test_unknown_level_falls_back_to_info():
    try:
        assert setup_logging("chatty").level == logging.INFO
    finally:
        setup_logging()


def test_library_noise_is_quieted():
    setup_logging()

    assert logging.getLogger("passlib").level == logging.ERROR
    assert logging.getLogger("pymongo").level == logging.WARNING
