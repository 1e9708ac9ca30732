from __future__ import annotations

import logging

import pytest

import config
from config.rules import RULES


def test_truthy_flag_parsing() -> None:
    assert config._is_truthy_flag("yes") is True
    assert config._is_truthy_flag("OFF", default=True) is False
    assert config._is_truthy_flag(None, default=True) is True
    assert config._is_truthy_flag("  ", default=True) is True
    with pytest.warns(RuntimeWarning):
        assert config._is_truthy_flag("maybe") is False


def test_timeout_normalisation() -> None:
    assert config._normalise_timeout("2.5", env_var="T", default=10.0) == 2.5
    assert config._normalise_timeout(None, env_var="T", default=10.0) == 10.0
    with pytest.warns(RuntimeWarning):
        assert config._normalise_timeout("soon", env_var="T", default=10.0) == 10.0
    with pytest.warns(RuntimeWarning):
        assert config._normalise_timeout("-1", env_var="T", default=10.0) == 10.0


def test_language_prefix_and_level_normalisation() -> None:
    assert config._normalise_language("de-DE") == "de"
    assert config._normalise_language("fr") == "en"
    assert config._normalise_prefix(" job ") == "JOB"
    assert config._normalise_prefix("HL-A") == "HLA"
    assert config._normalise_log_level("debug") == logging.DEBUG
    assert config._normalise_log_level("chatty") == logging.INFO


def test_validation_rules_defaults() -> None:
    assert RULES.skills_max_items == 20
    assert RULES.resume_max_bytes == 5_242_880
    assert RULES.notes_max_length == 500
    with pytest.raises(AttributeError):
        RULES.skills_max_items = 5  # type: ignore[misc]
