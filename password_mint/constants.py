"""
Fixed derivation parameters
Every value here is part of the compatibility surface - changing any of them
changes every password ever derived.
"""

SALT_PREFIX = "password-mint::v1::"
SALT_SEPARATOR = "::"

# PBKDF2-HMAC parameters
HASH_ALGORITHM = "sha256"
DERIVED_BYTES = 64
ITERATIONS = {
    "standard": 210_000,
    "high": 400_000,
}

# Password length bounds accepted by the caller-facing function
MIN_PASSWORD_LENGTH = 12
MAX_PASSWORD_LENGTH = 64

# Character classes, in the order the assembler visits them
UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
DIGIT_CHARS = "0123456789"
SYMBOL_CHARS = "!@#$%^&*()-_=+[]{}|;:,.<>?/"

AMBIGUOUS_CHARS = "O0Il1"
PROBLEMATIC_CHARS = "\"' \\`"

# Phrase hardening suffix alphabets (8 entries each, 3-bit windows)
HARDEN_SYMBOLS = "!@#$%^&*"
HARDEN_DIGITS = "23456789"

# djb2 rolling hash
SEED_INITIAL = 5381
SEED_MULTIPLIER = 33
SEED_MASK = 0xFFFFFFFF
