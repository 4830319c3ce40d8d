"""Process-wide settings and the User-Agent."""

import pytest

from doppler_sdk import settings
from doppler_sdk.settings import AppInfo


def test_default_user_agent():
    assert settings.user_agent() == "doppler-go/0.2.0"


def test_app_info_is_appended():
    settings.set_app_info(AppInfo(name="deployer", version="1.4.2", url="https://deployer.example.com"))
    assert settings.user_agent() == "doppler-go/0.2.0 deployer/1.4.2 (https://deployer.example.com)"
    assert settings.get_app_info().name == "deployer"


def test_app_info_name_only():
    settings.set_app_info(AppInfo(name="deployer"))
    assert settings.user_agent() == "doppler-go/0.2.0 deployer"


def test_app_info_requires_a_name():
    with pytest.raises(ValueError):
        settings.set_app_info(AppInfo(name=""))
    assert settings.get_app_info() is None


def test_clearing_app_info():
    settings.set_app_info(AppInfo(name="deployer", version="1"))
    settings.set_app_info(None)
    assert settings.get_app_info() is None
    assert settings.user_agent() == "doppler-go/0.2.0"


def test_api_key_env_fallback(monkeypatch):
    assert settings.api_key() is None
    monkeypatch.setenv("DOPPLER_TOKEN", "dp.st.from-env")
    assert settings.api_key() == "dp.st.from-env"
    monkeypatch.setattr(settings, "key", "dp.st.explicit")
    assert settings.api_key() == "dp.st.explicit"


def test_api_host_env(monkeypatch):
    assert settings.api_host() is None
    monkeypatch.setenv("DOPPLER_API_HOST", "https://doppler.internal")
    assert settings.api_host() == "https://doppler.internal"
