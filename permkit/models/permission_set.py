'''Canonical in-memory representation of a file's permission state'''
from typing import Annotated
from typing_extensions import Self

from permkit.models.flags import SpecialFlags, STANDARD_BITMASK, SPECIAL_BITMASK
from permkit.models.permissions import (Principal, Permission, SpecialAttribute,
                                        CONCRETE_PRINCIPALS, PERMISSION_FIELDS, PERMISSION_BITS, SPECIAL_FIELDS)

from pydantic import BaseModel, ConfigDict, Field

__all__ = ('PermissionSet',)

class PermissionSet(BaseModel):
    '''12 mutually independent bits: the 3x3 read/write/execute matrix plus setuid, setgid and sticky.
    Instances are frozen, every update produces a new set.'''
    model_config = ConfigDict(frozen=True, extra='forbid')

    # Owner
    owner_read: Annotated[bool, Field(default=False)]
    owner_write: Annotated[bool, Field(default=False)]
    owner_execute: Annotated[bool, Field(default=False)]

    # Group
    group_read: Annotated[bool, Field(default=False)]
    group_write: Annotated[bool, Field(default=False)]
    group_execute: Annotated[bool, Field(default=False)]

    # Others
    other_read: Annotated[bool, Field(default=False)]
    other_write: Annotated[bool, Field(default=False)]
    other_execute: Annotated[bool, Field(default=False)]

    # Special bits
    setuid: Annotated[bool, Field(default=False)]
    setgid: Annotated[bool, Field(default=False)]
    sticky: Annotated[bool, Field(default=False)]

    @classmethod
    def from_mode(cls, mode: int) -> Self:
        '''Build a set from a raw st_mode value, file type bits are ignored'''
        bits: dict[str, bool] = {field : bool(mode & flag) for field, flag in PERMISSION_BITS.items()}
        bits.update(setuid=bool(mode & SpecialFlags.SETUID),
                    setgid=bool(mode & SpecialFlags.SETGID),
                    sticky=bool(mode & SpecialFlags.STICKY))
        return cls(**bits)

    @property
    def mode(self) -> int:
        '''Raw mode bits, e.g. 0o4755'''
        mode: int = 0
        for field, flag in PERMISSION_BITS.items():
            if getattr(self, field):
                mode |= flag
        if self.setuid: mode |= SpecialFlags.SETUID
        if self.setgid: mode |= SpecialFlags.SETGID
        if self.sticky: mode |= SpecialFlags.STICKY
        return int(mode)

    @property
    def standard_mode(self) -> int:
        return self.mode & STANDARD_BITMASK

    @property
    def special_mode(self) -> int:
        return self.mode & SPECIAL_BITMASK

    def is_enabled(self, principal: Principal, permission: Permission) -> bool:
        if principal is Principal.ALL:
            return all(getattr(self, PERMISSION_FIELDS[(p, permission)]) for p in CONCRETE_PRINCIPALS)
        return getattr(self, PERMISSION_FIELDS[(principal, permission)])

    def is_special_enabled(self, kind: SpecialAttribute) -> bool:
        return getattr(self, SPECIAL_FIELDS[kind])

    def standard_bits_only(self) -> Self:
        return self.model_copy(update={'setuid' : False, 'setgid' : False, 'sticky' : False})

    def with_standard_bits(self, other: 'PermissionSet') -> Self:
        '''Copy of this set with the 9 standard bits taken from `other`, special bits kept'''
        return self.model_copy(update={field : getattr(other, field) for field in PERMISSION_BITS})

    def with_special(self, kind: SpecialAttribute, enabled: bool) -> Self:
        return self.model_copy(update={SPECIAL_FIELDS[kind] : enabled})

    def __str__(self) -> str:
        return f'{self.__class__.__name__}({oct(self.mode)})'
