from __future__ import annotations

import sys
import types
from datetime import timedelta

import pytest

from src.employee_payroll.employee_payroll.config import get_settings_module, load_settings
from src.employee_payroll.employee_payroll.container import build_container
from src.employee_payroll.employee_payroll.core.exceptions import ConfigurationError, HashingUnavailableError


@pytest.mark.parametrize(
    "env, suffix",
    [("production", ".production"), ("prod", ".production"), ("testing", ".testing"), ("dev", ".development")],
)
def test_settings_module_follows_app_env(monkeypatch, env, suffix):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module().endswith("config" + suffix)


def test_default_settings_module_is_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module().endswith("config.development")


def test_load_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = load_settings()

    assert settings.max_login_attempts == 3
    assert settings.session_ttl == timedelta(minutes=2)
    assert settings.download_ttl == timedelta(minutes=1)
    assert settings.hash_algorithm == "sha256"
    assert settings.registration_log.name == "employee_data.txt"


def _fake_settings(monkeypatch, name, **overrides):
    module = types.ModuleType(name)
    values = {
        "DATA_DIR": "/tmp/payroll",
        "MAX_LOGIN_ATTEMPTS": 3,
        "SESSION_TTL_SECONDS": 120,
        "DOWNLOAD_TOKEN_TTL_SECONDS": 60,
    }
    values.update(overrides)
    for key, value in values.items():
        setattr(module, key, value)
    monkeypatch.setitem(sys.modules, name, module)
    return name


def test_invalid_settings_raise_configuration_error(monkeypatch):
    name = _fake_settings(monkeypatch, "payroll_bad_attempts", MAX_LOGIN_ATTEMPTS=0)
    with pytest.raises(ConfigurationError):
        load_settings(name)

    name = _fake_settings(monkeypatch, "payroll_bad_ttl", SESSION_TTL_SECONDS="soon")
    with pytest.raises(ConfigurationError):
        load_settings(name)


def test_unavailable_digest_algorithm_is_fatal(monkeypatch):
    name = _fake_settings(monkeypatch, "payroll_bad_hash", HASH_ALGORITHM="rot13")
    with pytest.raises(HashingUnavailableError):
        build_container(settings=load_settings(name))


def test_missing_settings_module_is_configuration_error():
    with pytest.raises(ConfigurationError):
        load_settings("payroll_settings_that_do_not_exist")
