"""
Derivation error taxonomy
All errors are terminal for the request that raised them.
"""

from typing import Optional


class DerivationError(Exception):
    """Base class for every failure a derivation request can report"""

    error = "derivation_error"
    default_message = "Password derivation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class EmptyInput(DerivationError, ValueError):
    """Phrase or site is blank after normalization"""

    error = "empty_input"

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"{field} must not be empty")


class NoCharacterTypesSelected(DerivationError):
    error = "no_character_types"
    default_message = "No character types selected"


class LengthTooShortForSelectedTypes(DerivationError):
    error = "length_too_short"
    default_message = "Password length too short for selected character types"


class InvalidLength(DerivationError, ValueError):
    error = "invalid_length"
    default_message = "Password length out of range"


class PrimitiveUnavailable(DerivationError, RuntimeError):
    """PBKDF2-HMAC-SHA256 cannot be used on this interpreter"""

    error = "primitive_unavailable"
    default_message = "PBKDF2-HMAC-SHA256 is not available"
