from abc import ABC
from datetime import datetime
from typing import Optional

from permkit.models.error_codes import ErrorCodes

__all__ = ('PermissionException',
           'InvalidRangeError',
           'MalformedExpressionError',
           'InvalidFormatError',
           'UnsupportedAttributeError',
           'PrincipalNotFoundError',
           'StoreIOError',
           'SpecialAttributeError',
           'SpecialAttributeWarning')

class PermissionException(ABC, Exception):
    '''Abstract base exception class for all permkit exceptions. Carries a stable error code alongside a human readable description'''
    code: str
    description: str
    exception_iso_timestamp: str

    def __init__(self, description: Optional[str] = None):
        self.description = description or self.__class__.description
        self.exception_iso_timestamp = datetime.now().isoformat()
        super().__init__(self.description)


# Codec errors, raised before any store call
class InvalidRangeError(PermissionException):
    code: str = ErrorCodes.INVALID_RANGE.value
    description: str = 'Chmod value must be between 0 and 7777, with every digit between 0 and 7'

class MalformedExpressionError(PermissionException):
    code: str = ErrorCodes.MALFORMED_EXPRESSION.value
    description: str = 'Malformed symbolic expression'

class InvalidFormatError(PermissionException):
    code: str = ErrorCodes.INVALID_FORMAT.value
    description: str = 'Extended permission string must be exactly 9 characters of the form rwxrwxrwx'


# Store errors
class UnsupportedAttributeError(PermissionException):
    code: str = ErrorCodes.UNSUPPORTED_ATTRIBUTE.value
    description: str = 'Filesystem does not support POSIX permissions for {path}'

    def __init__(self, path: str, description: Optional[str] = None):
        super().__init__((description or UnsupportedAttributeError.description).format(path=path))
        self.path = path

class PrincipalNotFoundError(PermissionException):
    code: str = ErrorCodes.PRINCIPAL_NOT_FOUND.value
    description: str = 'No {kind} named {name} found on this host'

    def __init__(self, name: str, kind: str = 'user', description: Optional[str] = None):
        super().__init__((description or PrincipalNotFoundError.description).format(name=name, kind=kind))
        self.name = name
        self.kind = kind

class StoreIOError(PermissionException):
    code: str = ErrorCodes.STORE_IO.value
    description: str = 'Permission store failed to access {path}'

    def __init__(self, path: str, description: Optional[str] = None):
        super().__init__((description or StoreIOError.description).format(path=path))
        self.path = path

class SpecialAttributeError(PermissionException):
    code: str = ErrorCodes.SPECIAL_ATTRIBUTE.value
    description: str = 'Unable to set special attribute {kind} on {path}'

    def __init__(self, path: str, kind: str, description: Optional[str] = None):
        super().__init__((description or SpecialAttributeError.description).format(path=path, kind=kind))
        self.path = path
        self.kind = kind


class SpecialAttributeWarning(RuntimeWarning):
    '''Emitted instead of raising SpecialAttributeError when special attribute writes are non-strict'''
