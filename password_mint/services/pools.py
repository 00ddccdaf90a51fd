"""
Character pools
Pool order and the order of characters inside each pool are index-addressed
by the assembler and must not change.
"""

from dataclasses import dataclass
from typing import Iterable, List

from password_mint.constants import (
    AMBIGUOUS_CHARS,
    DIGIT_CHARS,
    LOWER_CHARS,
    PROBLEMATIC_CHARS,
    SYMBOL_CHARS,
    UPPER_CHARS,
)
from password_mint.schemas.derivation import CharacterClass


CLASS_ALPHABETS = (
    (CharacterClass.UPPER, UPPER_CHARS),
    (CharacterClass.LOWER, LOWER_CHARS),
    (CharacterClass.DIGIT, DIGIT_CHARS),
    (CharacterClass.SYMBOL, SYMBOL_CHARS),
)


@dataclass(frozen=True)
class CharacterPool:
    """Characters available for one enabled class"""
    character_class: CharacterClass
    chars: str

    def __len__(self) -> int:
        return len(self.chars)


def _strip_chars(chars: str, excluded: str) -> str:
    return "".join(c for c in chars if c not in excluded)


def build_pools(
    enabled_classes: Iterable,
    exclude_ambiguous: bool = False,
    exclude_problematic: bool = False,
) -> List[CharacterPool]:
    """
    Filtered pools for the enabled classes, in fixed class order
    Classes whose pool ends up empty are skipped.
    """
    enabled = {CharacterClass(c) for c in enabled_classes}

    excluded = ""
    if exclude_ambiguous:
        excluded += AMBIGUOUS_CHARS
    if exclude_problematic:
        excluded += PROBLEMATIC_CHARS

    pools = []
    for character_class, alphabet in CLASS_ALPHABETS:
        if character_class not in enabled:
            continue
        chars = _strip_chars(alphabet, excluded)
        if chars:
            pools.append(CharacterPool(character_class, chars))
    return pools


def combine_pools(pools: Iterable[CharacterPool]) -> str:
    """Union of the pools, concatenated in pool order"""
    return "".join(pool.chars for pool in pools)
