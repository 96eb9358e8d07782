'''Numeric (chmod-style) codec.

Values are written the way they are typed on a shell, i.e. 755 and 4755 are decimal integers
whose digits are octal digits. The leading (thousands) digit carries the special bits and is
tested bitwise: 4 = setuid, 2 = setgid, 1 = sticky.
'''
from types import MappingProxyType
from typing import Final

from permkit.errors import InvalidRangeError
from permkit.models.constants import CODEC_CONSTANTS
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import Principal, Permission, CONCRETE_PRINCIPALS, PERMISSION_FIELDS

__all__ = ('decode_chmod', 'encode_chmod', 'decode_umask', 'encode_umask')

_DIGIT_BITS: Final[tuple[tuple[Permission, int], ...]] = ((Permission.READ, 4),
                                                          (Permission.WRITE, 2),
                                                          (Permission.EXECUTABLE, 1))

# Place value of each principal's digit
_PLACE_VALUES: MappingProxyType[Principal, int] = MappingProxyType({Principal.USER : 100, Principal.GROUP : 10, Principal.OTHER : 1})
_SPECIAL_PLACE_VALUE: Final[int] = 1000

def _validate(value: int, lower: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRangeError(f'Chmod value must be an integer, got {type(value).__name__}')
    if not (lower <= value <= upper):
        raise InvalidRangeError(f'Chmod value must be between {lower} and {upper}, got {value}')
    if any(int(digit) > CODEC_CONSTANTS.numeric.max_digit for digit in str(value)):
        raise InvalidRangeError(f'Chmod value {value} contains a non-octal digit')

def _decode_standard(value: int) -> dict[str, bool]:
    bits: dict[str, bool] = {}
    for principal in CONCRETE_PRINCIPALS:
        digit: int = (value // _PLACE_VALUES[principal]) % 10
        for permission, mask in _DIGIT_BITS:
            bits[PERMISSION_FIELDS[(principal, permission)]] = bool(digit & mask)
    return bits

def _encode_standard(permission_set: PermissionSet) -> int:
    value: int = 0
    for principal in CONCRETE_PRINCIPALS:
        for permission, mask in _DIGIT_BITS:
            if permission_set.is_enabled(principal, permission):
                value += mask * _PLACE_VALUES[principal]
    return value

def decode_chmod(value: int) -> PermissionSet:
    _validate(value, *CODEC_CONSTANTS.numeric.chmod_range)

    special_digit: int = value // _SPECIAL_PLACE_VALUE
    return PermissionSet(**_decode_standard(value % _SPECIAL_PLACE_VALUE),
                         setuid=bool(special_digit & 4),
                         setgid=bool(special_digit & 2),
                         sticky=bool(special_digit & 1))

def encode_chmod(permission_set: PermissionSet) -> int:
    special_digit: int = (4 if permission_set.setuid else 0) + (2 if permission_set.setgid else 0) + (1 if permission_set.sticky else 0)
    return special_digit * _SPECIAL_PLACE_VALUE + _encode_standard(permission_set)

def decode_umask(value: int) -> PermissionSet:
    '''Decode a 3 digit umask (e.g. 22) into the set of bits it masks out'''
    _validate(value, *CODEC_CONSTANTS.numeric.umask_range)
    return PermissionSet(**_decode_standard(value))

def encode_umask(permission_set: PermissionSet) -> int:
    return _encode_standard(permission_set)
