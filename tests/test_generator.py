"""
End-to-end tests for the derivation pipeline
"""

import pytest
from pydantic import ValidationError

from password_mint import (
    EmptyInput,
    InvalidLength,
    NoCharacterTypesSelected,
    PrimitiveUnavailable,
    derive_from_request,
    derive_from_request_async,
    derive_password,
    derive_password_async,
)
from password_mint.schemas.derivation import CharacterClass, DerivationRequest, SecurityLevel
from password_mint.services import generator, telemetry

GITHUB_V1 = "T{0{CBCL(h?6w]C|X|U<"
GITHUB_V2 = "%ny]nL/Fv7F-&>=X5:S6"


def test_golden_vector(test_phrase: str):
    password = derive_password(test_phrase, "https://www.GitHub.com/settings", "1", 20)
    assert password == GITHUB_V1


def test_version_changes_password(test_phrase: str):
    assert derive_password(test_phrase, "github.com", "2", 20) == GITHUB_V2


def test_high_level_with_restricted_classes():
    password = derive_password(
        "my iphone purchase",
        "Apple",
        "1",
        16,
        security_level="high",
        enabled_classes={CharacterClass.LOWER, CharacterClass.DIGIT},
        exclude_ambiguous=True,
    )
    assert password == "2f5hd7x2tdwvb6e4"


def test_all_filters_enabled():
    password = derive_password(
        "My Phrase",
        "example.org:8443/login?next=/#top",
        "1",
        32,
        security_level=SecurityLevel.STANDARD,
        exclude_ambiguous=True,
        exclude_problematic=True,
    )
    assert password == "DBJi($kyT_Y<<X<D:P[v7d*@kD^6#4WH"


def test_determinism(test_phrase: str):
    first = derive_password(test_phrase, "github.com", "1", 24)
    second = derive_password(test_phrase, "github.com", "1", 24)
    assert first == second


def test_phrase_case_and_spacing_invariance():
    assert derive_password("My Phrase", "github.com", "1", 16) == derive_password(
        "  my   phrase  ", "github.com", "1", 16
    )


def test_word_sensitivity():
    assert derive_password("my phrase", "github.com", "1", 16) != derive_password(
        "my phrases", "github.com", "1", 16
    )


def test_site_format_invariance(test_phrase: str):
    assert derive_password(test_phrase, "GITHUB.COM", "1", 20) == GITHUB_V1


def test_length_and_class_coverage(test_phrase: str):
    password = derive_password(test_phrase, "github.com", "1", 12)
    assert len(password) == 12
    assert any(c.isupper() for c in password)
    assert any(c.islower() for c in password)
    assert any(c.isdigit() for c in password)
    assert any(not c.isalnum() for c in password)


@pytest.mark.parametrize("length", [11, 65, 0])
def test_length_out_of_range(test_phrase: str, length: int):
    with pytest.raises(InvalidLength):
        derive_password(test_phrase, "github.com", "1", length)


@pytest.mark.parametrize("site", ["", "   ", "https://"])
def test_blank_site_is_rejected(test_phrase: str, site: str):
    with pytest.raises(EmptyInput) as exc:
        derive_password(test_phrase, site, "1", 20)

    assert exc.value.field == "site"


def test_blank_phrase_is_rejected():
    with pytest.raises(EmptyInput) as exc:
        derive_password(" \t ", "github.com", "1", 20)

    assert exc.value.field == "phrase"


def test_no_classes_fails_before_key_derivation(test_phrase: str, monkeypatch):
    def unexpected(*_args, **_kwargs):
        raise AssertionError("key derivation must not run")

    monkeypatch.setattr(generator, "derive_bytes", unexpected)

    with pytest.raises(NoCharacterTypesSelected):
        derive_password(test_phrase, "github.com", "1", 20, enabled_classes=set())


def test_primitive_unavailable_propagates(test_phrase: str, monkeypatch):
    def unavailable(*_args, **_kwargs):
        raise PrimitiveUnavailable()

    monkeypatch.setattr(generator, "derive_bytes", unavailable)

    with pytest.raises(PrimitiveUnavailable):
        derive_password(test_phrase, "github.com", "1", 20)

    assert telemetry.get_counters_snapshot() == {"derivations_failed.primitive_unavailable": 1}


def test_telemetry_counts_outcomes(test_phrase: str):
    derive_password(test_phrase, "github.com", "1", 20)
    with pytest.raises(EmptyInput):
        derive_password("", "github.com", "1", 20)

    counters = telemetry.get_counters_snapshot()
    assert counters["derivations_completed"] == 1
    assert counters["derivations_failed.empty_input"] == 1


@pytest.mark.asyncio
async def test_async_matches_sync(test_phrase: str):
    password = await derive_password_async(test_phrase, "github.com", "1", 20)
    assert password == GITHUB_V1


def test_derive_from_request(test_phrase: str):
    request = DerivationRequest(phrase=test_phrase, site="https://www.github.com/settings", version=1)
    result = derive_from_request(request)

    assert result.password.get_secret_value() == GITHUB_V1
    assert result.normalized_site == "github.com"
    assert result.security_level == SecurityLevel.STANDARD
    assert test_phrase not in repr(request)
    assert GITHUB_V1 not in repr(result)


@pytest.mark.asyncio
async def test_derive_from_request_async(test_phrase: str):
    request = DerivationRequest(phrase=test_phrase, site="github.com", version="2")
    result = await derive_from_request_async(request)
    assert result.password.get_secret_value() == GITHUB_V2


def test_request_schema_enforces_length_bounds(test_phrase: str):
    with pytest.raises(ValidationError):
        DerivationRequest(phrase=test_phrase, site="github.com", length=11)
    with pytest.raises(ValidationError):
        DerivationRequest(phrase=test_phrase, site="github.com", length=65)


def test_request_schema_rejects_unknown_class(test_phrase: str):
    with pytest.raises(ValidationError):
        DerivationRequest(phrase=test_phrase, site="github.com", enabled_classes={"emoji"})


def test_request_schema_accepts_class_names(test_phrase: str):
    request = DerivationRequest(phrase=test_phrase, site="github.com", enabled_classes={"lower", "digit"})
    assert request.enabled_classes == frozenset({CharacterClass.LOWER, CharacterClass.DIGIT})
