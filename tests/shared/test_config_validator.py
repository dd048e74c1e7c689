import pytest

from src.shared.utils.config_validator import (
    ConfigurationError,
    get_env_or_default,
    require_env,
)


def test_require_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PROVISIONING_TEST_VALUE", "present")

    assert require_env("PROVISIONING_TEST_VALUE") == "present"


def test_require_env_reads_supplied_mapping():
    assert require_env("KEY", environ={"KEY": "value"}) == "value"


@pytest.mark.parametrize("environ", [{}, {"KEY": ""}])
def test_require_env_rejects_missing_or_empty(environ):
    with pytest.raises(ConfigurationError) as excinfo:
        require_env("KEY", "mounted secret", environ=environ)

    assert "KEY (mounted secret)" in str(excinfo.value)


def test_get_env_or_default_falls_back_for_empty_values():
    assert get_env_or_default("KEY", "fallback", environ={"KEY": ""}) == "fallback"
    assert get_env_or_default("KEY", "fallback", environ={"KEY": "set"}) == "set"
