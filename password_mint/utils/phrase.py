"""
Phrase normalization and hardening
The hardened phrase is the only form of the secret that reaches PBKDF2.

Hardening adds fixed, guessable structure (capitalized words and a short
symbol/digit suffix) so the key material satisfies naive composition rules.
It does not add entropy and must never be treated as compensating for a weak
phrase.
"""

import re
import struct
from typing import List

from password_mint.constants import (
    HARDEN_DIGITS,
    HARDEN_SYMBOLS,
    SEED_INITIAL,
    SEED_MASK,
    SEED_MULTIPLIER,
)

# ECMAScript whitespace and line terminators; differs from str.isspace()
# (adds U+FEFF, leaves out U+001C..U+001F and U+0085)
PHRASE_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_RUN = re.compile("[" + re.escape(PHRASE_WHITESPACE) + "]+")


def normalize_phrase(phrase: str) -> str:
    """
    Normalize a phrase for consistent derivation
    - trimmed
    - lowercase
    - single spaces between words
    """
    return _WHITESPACE_RUN.sub(" ", phrase.strip(PHRASE_WHITESPACE).lower())


def _utf16_code_units(text: str) -> List[int]:
    # Characters outside the BMP count as two surrogate units
    data = text.encode("utf-16-be", "surrogatepass")
    return list(struct.unpack(f">{len(data) // 2}H", data))


def phrase_seed(normalized: str) -> int:
    """djb2-style hash of the normalized phrase, as an unsigned 32-bit int"""
    seed = SEED_INITIAL
    for code_unit in _utf16_code_units(normalized):
        seed = ((seed * SEED_MULTIPLIER) ^ code_unit) & SEED_MASK
    return seed


def _capitalize_words(words: List[str], seed: int) -> List[str]:
    words = list(words)
    count = len(words)

    if count >= 2:
        first = seed % count
        second = (seed // count) % count
        words[first] = words[first].upper()
        if count > 2 and second != first:
            words[second] = words[second].upper()
    elif count == 1 and words[0]:
        words[0] = words[0][:1].upper() + words[0][1:]

    return words


def hardening_suffix(seed: int) -> str:
    """Symbol, digit, symbol taken from three 3-bit windows of the seed"""
    return (
        HARDEN_SYMBOLS[seed % len(HARDEN_SYMBOLS)]
        + HARDEN_DIGITS[(seed >> 4) % len(HARDEN_DIGITS)]
        + HARDEN_SYMBOLS[(seed >> 8) % len(HARDEN_SYMBOLS)]
    )


def harden_phrase(phrase: str) -> str:
    """
    Deterministically harden a raw phrase

    Example:
        "my iphone purchase" -> "MY IPHONE purchase*2!"

    Returns an empty string when the phrase is blank after normalization;
    callers reject that before key derivation.
    """
    normalized = normalize_phrase(phrase)
    if not normalized:
        return normalized

    seed = phrase_seed(normalized)
    words = _capitalize_words(normalized.split(" "), seed)
    return " ".join(words) + hardening_suffix(seed)
