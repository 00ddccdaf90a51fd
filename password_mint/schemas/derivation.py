"""
Derivation request and result schemas
"""

from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, Field, SecretStr, field_validator

from password_mint.constants import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH


class SecurityLevel(str, Enum):
    STANDARD = "standard"
    HIGH = "high"


class CharacterClass(str, Enum):
    """Character classes in assembler visiting order"""
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"


ALL_CHARACTER_CLASSES: FrozenSet[CharacterClass] = frozenset(CharacterClass)


class DerivationRequest(BaseModel):
    """Explicit parameters for one derivation"""
    phrase: SecretStr = Field(..., description="Secret phrase (never logged)")
    site: str = Field(..., max_length=2048, description="Site, app name or URL")
    version: str = Field("1", max_length=64, description="Rotation version")
    length: int = Field(20, ge=MIN_PASSWORD_LENGTH, le=MAX_PASSWORD_LENGTH)
    security_level: SecurityLevel = SecurityLevel.STANDARD
    enabled_classes: FrozenSet[CharacterClass] = ALL_CHARACTER_CLASSES
    exclude_ambiguous: bool = False
    exclude_problematic: bool = False

    @field_validator('version', mode='before')
    @classmethod
    def coerce_version(cls, v):
        # Accept integer versions from config files and argparse
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class DerivationResult(BaseModel):
    """Derived password plus the site identifier it was bound to"""
    password: SecretStr
    normalized_site: str
    security_level: SecurityLevel
