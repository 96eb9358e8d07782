'''Unified POSIX permission management over flag, numeric, symbolic and extended representations'''
from permkit.codecs import (set_flag, get_flag, decode_chmod, encode_chmod, decode_umask, encode_umask,
                            apply_symbolic, parse_symbolic, decode_extended, encode_extended)
from permkit.errors import (PermissionException, InvalidRangeError, MalformedExpressionError, InvalidFormatError,
                            UnsupportedAttributeError, PrincipalNotFoundError, StoreIOError,
                            SpecialAttributeError, SpecialAttributeWarning)
from permkit.manager import FilePermissionManager
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import Principal, Permission, SpecialAttribute

__version__ = '0.1.0'

__all__ = ('PermissionSet', 'Principal', 'Permission', 'SpecialAttribute',
           'set_flag', 'get_flag',
           'decode_chmod', 'encode_chmod', 'decode_umask', 'encode_umask',
           'apply_symbolic', 'parse_symbolic',
           'decode_extended', 'encode_extended',
           'FilePermissionManager',
           'PermissionException', 'InvalidRangeError', 'MalformedExpressionError', 'InvalidFormatError',
           'UnsupportedAttributeError', 'PrincipalNotFoundError', 'StoreIOError',
           'SpecialAttributeError', 'SpecialAttributeWarning')
