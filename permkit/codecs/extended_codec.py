'''Extended string codec (rwxr-xr-x). Special bits are not representable in this format'''
from typing import Final

from permkit.errors import InvalidFormatError
from permkit.models.constants import CODEC_CONSTANTS
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import Permission, CONCRETE_PRINCIPALS, PERMISSION_FIELDS

__all__ = ('decode_extended', 'encode_extended')

# Column order: owner rwx, group rwx, other rwx
_COLUMNS: Final[tuple[str, ...]] = tuple(PERMISSION_FIELDS[(principal, permission)]
                                         for principal in CONCRETE_PRINCIPALS
                                         for permission in (Permission.READ, Permission.WRITE, Permission.EXECUTABLE))

def decode_extended(extended: str) -> PermissionSet:
    if not isinstance(extended, str) or len(extended) != CODEC_CONSTANTS.extended.length:
        raise InvalidFormatError(f'Extended permission string must have exactly {CODEC_CONSTANTS.extended.length} characters, got {extended!r}')

    unset: str = CODEC_CONSTANTS.extended.unset_character
    bits: dict[str, bool] = {}
    for position, (char, letter, field) in enumerate(zip(extended, CODEC_CONSTANTS.extended.column_letters, _COLUMNS)):
        if char not in (letter, unset):
            raise InvalidFormatError(f'Invalid character {char!r} at position {position} of {extended!r}, expected {letter!r} or {unset!r}')
        bits[field] = char == letter

    return PermissionSet(**bits)

def encode_extended(permission_set: PermissionSet) -> str:
    unset: str = CODEC_CONSTANTS.extended.unset_character
    return ''.join(letter if getattr(permission_set, field) else unset
                   for letter, field in zip(CODEC_CONSTANTS.extended.column_letters, _COLUMNS))
