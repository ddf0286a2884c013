import pytest
from pydantic import ValidationError

from app.core.config import MissingCredentialError, get_settings, require_credential


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")

    assert get_settings().LOG_LEVEL == "WARNING"


def test_unknown_log_level_rejected_at_settings_load(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        get_settings()


def test_log_level_default():
    assert get_settings().LOG_LEVEL == "INFO"


def test_require_credential_strips():
    assert require_credential("X_KEY", "  abc ") == "abc"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_credential_names_variable(value):
    with pytest.raises(MissingCredentialError, match="X_KEY"):
        require_credential("X_KEY", value)
