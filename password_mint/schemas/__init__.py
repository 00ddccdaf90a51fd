# Password Mint Pydantic Schemas
from password_mint.schemas.derivation import (
    ALL_CHARACTER_CLASSES,
    CharacterClass,
    DerivationRequest,
    DerivationResult,
    SecurityLevel,
)

__all__ = [
    "ALL_CHARACTER_CLASSES",
    "CharacterClass",
    "DerivationRequest",
    "DerivationResult",
    "SecurityLevel",
]
