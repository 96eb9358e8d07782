from enum import Enum
from types import MappingProxyType
from typing import Final

from permkit.models.flags import ModeFlags, SpecialFlags

__all__ = ('Principal',
           'Permission',
           'SpecialAttribute',
           'CONCRETE_PRINCIPALS',
           'PERMISSION_FIELDS',
           'PERMISSION_BITS',
           'SPECIAL_FIELDS',
           'SPECIAL_BITS')

class Principal(Enum):
    USER    = 'user'
    GROUP   = 'group'
    OTHER   = 'other'
    ALL     = 'all'     # Aggregate selector over USER, GROUP and OTHER

class Permission(Enum):
    READ        = 'read'
    WRITE       = 'write'
    EXECUTABLE  = 'executable'

class SpecialAttribute(Enum):
    SETUID  = 'setuid'
    SETGID  = 'setgid'
    STICKY  = 'sticky'


CONCRETE_PRINCIPALS: Final[tuple[Principal, ...]] = (Principal.USER, Principal.GROUP, Principal.OTHER)

# Field names of PermissionSet for every concrete (principal, permission) cell of the 3x3 matrix
PERMISSION_FIELDS: MappingProxyType[tuple[Principal, Permission], str] = MappingProxyType(
    {
        (Principal.USER, Permission.READ) : 'owner_read',
        (Principal.USER, Permission.WRITE) : 'owner_write',
        (Principal.USER, Permission.EXECUTABLE) : 'owner_execute',
        (Principal.GROUP, Permission.READ) : 'group_read',
        (Principal.GROUP, Permission.WRITE) : 'group_write',
        (Principal.GROUP, Permission.EXECUTABLE) : 'group_execute',
        (Principal.OTHER, Permission.READ) : 'other_read',
        (Principal.OTHER, Permission.WRITE) : 'other_write',
        (Principal.OTHER, Permission.EXECUTABLE) : 'other_execute'
    }
)

PERMISSION_BITS: MappingProxyType[str, ModeFlags] = MappingProxyType(
    {
        'owner_read' : ModeFlags.OWNER_READ,
        'owner_write' : ModeFlags.OWNER_WRITE,
        'owner_execute' : ModeFlags.OWNER_EXECUTE,
        'group_read' : ModeFlags.GROUP_READ,
        'group_write' : ModeFlags.GROUP_WRITE,
        'group_execute' : ModeFlags.GROUP_EXECUTE,
        'other_read' : ModeFlags.OTHER_READ,
        'other_write' : ModeFlags.OTHER_WRITE,
        'other_execute' : ModeFlags.OTHER_EXECUTE
    }
)

SPECIAL_FIELDS: MappingProxyType[SpecialAttribute, str] = MappingProxyType(
    {
        SpecialAttribute.SETUID : 'setuid',
        SpecialAttribute.SETGID : 'setgid',
        SpecialAttribute.STICKY : 'sticky'
    }
)

SPECIAL_BITS: MappingProxyType[SpecialAttribute, SpecialFlags] = MappingProxyType(
    {
        SpecialAttribute.SETUID : SpecialFlags.SETUID,
        SpecialAttribute.SETGID : SpecialFlags.SETGID,
        SpecialAttribute.STICKY : SpecialFlags.STICKY
    }
)
