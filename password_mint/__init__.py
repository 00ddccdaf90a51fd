"""
Password Mint - deterministic, stateless password derivation
The same phrase, site and version always give the same password.
"""

from password_mint.errors import (
    DerivationError,
    EmptyInput,
    InvalidLength,
    LengthTooShortForSelectedTypes,
    NoCharacterTypesSelected,
    PrimitiveUnavailable,
)
from password_mint.services.generator import (
    derive_from_request,
    derive_from_request_async,
    derive_password,
    derive_password_async,
)

__version__ = "1.0.0"

__all__ = [
    "DerivationError",
    "EmptyInput",
    "InvalidLength",
    "LengthTooShortForSelectedTypes",
    "NoCharacterTypesSelected",
    "PrimitiveUnavailable",
    "derive_from_request",
    "derive_from_request_async",
    "derive_password",
    "derive_password_async",
]
