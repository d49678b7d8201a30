"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from taskrecur.models.pattern import EndCondition, PatternConfig, PatternKind

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Route config and log files into *tmp_path* for every test.

    Also clears the cached ConfigService and the logger singleton so state
    never leaks between tests.
    """
    import taskrecur.utils.logger as logger_mod
    from taskrecur.services.config_service import get_config_service
    from taskrecur.utils.ui.console import set_color

    config_dir = str(tmp_path / "config")
    log_dir = str(tmp_path / "logs")

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("taskrecur").handlers.clear()

    with patch("taskrecur.services.config_service.user_config_dir", return_value=config_dir):
        with patch("taskrecur.utils.logger.user_log_dir", return_value=log_dir):
            yield tmp_path

    set_color(True)
    get_config_service.cache_clear()
    for handler in logging.getLogger("taskrecur").handlers:
        handler.close()
    logging.getLogger("taskrecur").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def tmp_config():
    """Provide a real ConfigService backed by the isolated config directory."""
    from taskrecur.services.config_service import ConfigService

    return ConfigService()


# ---------------------------------------------------------------------------
# Rule helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def today() -> date:
    """Fixed reference date for end-date and safety-horizon checks."""
    return date(2024, 1, 1)


@pytest.fixture()
def weekly_mwf() -> PatternConfig:
    """Weekly on Monday, Wednesday and Friday, never ending."""
    return PatternConfig(
        kind=PatternKind.WEEKLY,
        interval=1,
        custom_weekdays=[1, 3, 5],
        end_condition=EndCondition.NEVER,
    )
