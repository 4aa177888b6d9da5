import logging

import pytest


@pytest.fixture(autouse=True)
def _configure_logging_for_tests() -> None:
    """
    Automatically configure logging for all unit tests to ensure
    consistent output and proper environment tagging.
    """
    from argmatch.core.common.logging_utils import (
        configure_logging_with_environment_tagging,
    )

    configure_logging_with_environment_tagging(level=logging.INFO)
