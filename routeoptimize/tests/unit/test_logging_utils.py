from __future__ import annotations

import logging

import pytest

from routeoptimize.utils import logging as logging_utils
from routeoptimize.viewmodels.settings_vm import SettingsVM


@pytest.fixture(autouse=True)
def _restore_package_level():
    logger = logging.getLogger(logging_utils.PACKAGE_LOGGER)
    level = logger.level
    yield
    logger.setLevel(level)


def test_debug_setting_drives_package_level_without_env() -> None:
    assert logging_utils.apply_gui_preferences(True, environ={}) == logging.DEBUG
    assert logging.getLogger("routeoptimize.app.session").getEffectiveLevel() == logging.DEBUG
    assert logging_utils.apply_gui_preferences(False, environ={}) == logging.INFO


def test_env_level_overrides_debug_setting() -> None:
    env = {"ROUTEOPT_LOG_LEVEL": "warning"}
    assert logging_utils.apply_gui_preferences(True, environ=env) == logging.WARNING
    assert logging_utils.env_requests_debug(env) is False


@pytest.mark.parametrize("raw,expected", [("10", 10), ("error", logging.ERROR), ("loud", None), ("", None)])
def test_parse_level(raw, expected) -> None:
    assert logging_utils.parse_level(raw) == expected


def test_debug_flag_forces_debug() -> None:
    env = {"ROUTEOPT_DEBUG": "yes"}
    assert logging_utils.env_requests_debug(env) is True
    assert logging_utils.configure_root(False, environ=env) == logging.DEBUG


def test_settings_and_logging_share_truthy_values() -> None:
    env = {"ROUTEOPT_DEBUG_LOGGING": " On "}
    assert logging_utils.env_requests_debug(env) is True
    assert SettingsVM.from_env(env).debug_logging is True

    env = {"ROUTEOPT_DEBUG_LOGGING": "enabled"}
    assert logging_utils.env_requests_debug(env) is False
    assert SettingsVM.from_env(env).debug_logging is False
