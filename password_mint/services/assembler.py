"""
Password assembly from derived bytes

Byte consumption order is fixed: one word per mandatory character (pool
order), one word per fill position, then one word per Fisher-Yates step.
Index selection is `word % pool_length`; the modulo bias is accepted.
Reordering any of these phases changes every password.
"""

from typing import List, Sequence

from password_mint.errors import LengthTooShortForSelectedTypes, NoCharacterTypesSelected
from password_mint.services.pools import CharacterPool


class ByteCursor:
    """
    Reads derived bytes in order, wrapping to the start when exhausted
    Reuse after wraparound is expected for long passwords.
    """

    def __init__(self, data: bytes):
        if not data:
            raise ValueError("derived bytes must not be empty")
        self._data = bytes(data)
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    def next_byte(self) -> int:
        value = self._data[self._index % len(self._data)]
        self._index += 1
        return value

    def next_word(self) -> int:
        """Two bytes as an unsigned 16-bit big-endian value"""
        high = self.next_byte()
        low = self.next_byte()
        return (high << 8) | low


def validate_pools(pools: Sequence[CharacterPool], combined_pool: str, length: int) -> None:
    """Reject pool sets that cannot produce a valid password of `length`"""
    if not combined_pool:
        raise NoCharacterTypesSelected()
    if len(pools) > length:
        raise LengthTooShortForSelectedTypes()


def assemble_password(
    derived: bytes,
    length: int,
    pools: Sequence[CharacterPool],
    combined_pool: str,
) -> str:
    """Build a password of exactly `length` chars with one char per pool"""
    validate_pools(pools, combined_pool, length)
    mandatory_count = len(pools)

    cursor = ByteCursor(derived)
    chars: List[str] = []

    for pool in pools:
        chars.append(pool.chars[cursor.next_word() % len(pool.chars)])

    for _ in range(mandatory_count, length):
        chars.append(combined_pool[cursor.next_word() % len(combined_pool)])

    # Fisher-Yates so mandatory characters are not always up front
    for i in range(length - 1, 0, -1):
        j = cursor.next_word() % (i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars)
