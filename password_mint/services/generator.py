"""
Password derivation pipeline

raw inputs -> (site normalizer, phrase hardener) -> salt -> PBKDF2 -> assembler

Every call is independent: no state is kept between derivations, so the same
inputs always give the same password, whether called sequentially or
concurrently.
"""

import time
from dataclasses import dataclass
from typing import Iterable, List, Union

from password_mint.constants import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH
from password_mint.errors import DerivationError, EmptyInput, InvalidLength
from password_mint.logging_config import (
    log_derivation_completed,
    log_derivation_failed,
    log_derivation_started,
)
from password_mint.schemas.derivation import (
    ALL_CHARACTER_CLASSES,
    DerivationRequest,
    DerivationResult,
    SecurityLevel,
)
from password_mint.services.assembler import assemble_password, validate_pools
from password_mint.services.kdf import (
    build_salt,
    derive_bytes,
    derive_bytes_async,
    iterations_for,
)
from password_mint.services.pools import CharacterPool, build_pools, combine_pools
from password_mint.services.telemetry import (
    DERIVATIONS_COMPLETED,
    increment_counter,
    record_failure,
)
from password_mint.utils.phrase import harden_phrase
from password_mint.utils.site import normalize_site


@dataclass(frozen=True)
class _DerivationPlan:
    hardened_phrase: str
    normalized_site: str
    salt: str
    iterations: int
    length: int
    pools: List[CharacterPool]
    combined_pool: str

    def __repr__(self) -> str:
        # Keep the hardened phrase out of tracebacks and debug output
        return f"_DerivationPlan(site={self.normalized_site!r}, iterations={self.iterations})"


def _plan(
    raw_phrase: str,
    raw_site: str,
    version: str,
    length: int,
    security_level: Union[SecurityLevel, str],
    enabled_classes: Iterable,
    exclude_ambiguous: bool,
    exclude_problematic: bool,
) -> _DerivationPlan:
    """Validate inputs and compute everything that precedes the KDF call"""
    if not MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH:
        raise InvalidLength(
            f"Password length must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
        )

    normalized_site = normalize_site(raw_site)
    if not normalized_site:
        raise EmptyInput("site")

    hardened = harden_phrase(raw_phrase)
    if not hardened:
        raise EmptyInput("phrase")

    pools = build_pools(enabled_classes, exclude_ambiguous, exclude_problematic)
    combined = combine_pools(pools)
    # Fail before spending PBKDF2 iterations on an unusable pool set
    validate_pools(pools, combined, length)

    iterations = iterations_for(security_level)
    level_name = getattr(security_level, "value", security_level)
    log_derivation_started(normalized_site, version, str(level_name), length)

    return _DerivationPlan(
        hardened_phrase=hardened,
        normalized_site=normalized_site,
        salt=build_salt(normalized_site, version),
        iterations=iterations,
        length=length,
        pools=pools,
        combined_pool=combined,
    )


def _finish(plan: _DerivationPlan, derived: bytes, started: float) -> str:
    password = assemble_password(derived, plan.length, plan.pools, plan.combined_pool)
    increment_counter(DERIVATIONS_COMPLETED)
    log_derivation_completed(plan.normalized_site, time.monotonic() - started)
    return password


def _fail(error: DerivationError):
    record_failure(error.error)
    log_derivation_failed(error.error)


def derive_password(
    raw_phrase: str,
    raw_site: str,
    version: str,
    length: int,
    security_level: Union[SecurityLevel, str] = SecurityLevel.STANDARD,
    enabled_classes: Iterable = ALL_CHARACTER_CLASSES,
    exclude_ambiguous: bool = False,
    exclude_problematic: bool = False,
) -> str:
    """
    Derive the password for (phrase, site, version, options)

    Raises:
      EmptyInput, InvalidLength, NoCharacterTypesSelected,
      LengthTooShortForSelectedTypes, PrimitiveUnavailable
    """
    started = time.monotonic()
    try:
        plan = _plan(
            raw_phrase, raw_site, version, length, security_level,
            enabled_classes, exclude_ambiguous, exclude_problematic,
        )
        derived = derive_bytes(plan.hardened_phrase, plan.salt, plan.iterations)
        return _finish(plan, derived, started)
    except DerivationError as e:
        _fail(e)
        raise


async def derive_password_async(
    raw_phrase: str,
    raw_site: str,
    version: str,
    length: int,
    security_level: Union[SecurityLevel, str] = SecurityLevel.STANDARD,
    enabled_classes: Iterable = ALL_CHARACTER_CLASSES,
    exclude_ambiguous: bool = False,
    exclude_problematic: bool = False,
) -> str:
    """derive_password with the PBKDF2 call awaited off the event loop"""
    started = time.monotonic()
    try:
        plan = _plan(
            raw_phrase, raw_site, version, length, security_level,
            enabled_classes, exclude_ambiguous, exclude_problematic,
        )
        derived = await derive_bytes_async(plan.hardened_phrase, plan.salt, plan.iterations)
        return _finish(plan, derived, started)
    except DerivationError as e:
        _fail(e)
        raise


def _request_args(request: DerivationRequest) -> tuple:
    return (
        request.phrase.get_secret_value(),
        request.site,
        request.version,
        request.length,
        request.security_level,
        request.enabled_classes,
        request.exclude_ambiguous,
        request.exclude_problematic,
    )


def derive_from_request(request: DerivationRequest) -> DerivationResult:
    password = derive_password(*_request_args(request))
    return DerivationResult(
        password=password,
        normalized_site=normalize_site(request.site),
        security_level=request.security_level,
    )


async def derive_from_request_async(request: DerivationRequest) -> DerivationResult:
    password = await derive_password_async(*_request_args(request))
    return DerivationResult(
        password=password,
        normalized_site=normalize_site(request.site),
        security_level=request.security_level,
    )
