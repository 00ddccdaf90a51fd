import pytest

from password_mint.config import Settings, get_settings, validate_settings


def make_settings(**overrides) -> Settings:
    values = {
        "MINT_DEFAULT_LENGTH": 20,
        "MINT_DEFAULT_SECURITY_LEVEL": "standard",
        "MINT_DEFAULT_VERSION": "1",
        "MINT_LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


def test_validate_settings_accepts_valid_values():
    settings = make_settings()
    validate_settings(settings)


def test_defaults_are_valid():
    validate_settings(Settings())


@pytest.mark.parametrize("length", [11, 65])
def test_validate_settings_rejects_length_out_of_range(length: int):
    settings = make_settings(MINT_DEFAULT_LENGTH=length)

    with pytest.raises(ValueError) as exc:
        validate_settings(settings)

    assert "MINT_DEFAULT_LENGTH" in str(exc.value)


def test_validate_settings_rejects_unknown_security_level():
    settings = make_settings(MINT_DEFAULT_SECURITY_LEVEL="paranoid")

    with pytest.raises(ValueError) as exc:
        validate_settings(settings)

    assert "MINT_DEFAULT_SECURITY_LEVEL" in str(exc.value)


def test_validate_settings_rejects_blank_version():
    settings = make_settings(MINT_DEFAULT_VERSION="  ")

    with pytest.raises(ValueError) as exc:
        validate_settings(settings)

    assert "MINT_DEFAULT_VERSION" in str(exc.value)


def test_validate_settings_rejects_bad_log_level():
    settings = make_settings(MINT_LOG_LEVEL="LOUD")

    with pytest.raises(ValueError) as exc:
        validate_settings(settings)

    assert "MINT_LOG_LEVEL" in str(exc.value)


def test_validate_settings_reports_every_problem():
    settings = make_settings(MINT_DEFAULT_LENGTH=5, MINT_DEFAULT_SECURITY_LEVEL="max")

    with pytest.raises(ValueError) as exc:
        validate_settings(settings)

    assert "MINT_DEFAULT_LENGTH" in str(exc.value)
    assert "MINT_DEFAULT_SECURITY_LEVEL" in str(exc.value)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("MINT_DEFAULT_LENGTH", "32")
    monkeypatch.setenv("MINT_EXCLUDE_AMBIGUOUS", "true")

    settings = get_settings()

    assert settings.MINT_DEFAULT_LENGTH == 32
    assert settings.MINT_EXCLUDE_AMBIGUOUS is True
