'''Typing support for the collaborators the permission manager calls through'''
import os
from typing import Protocol, TypeAlias, Union

from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import SpecialAttribute

__all__ = ('StrPath', 'PermissionStore', 'PrincipalLookup')

StrPath: TypeAlias = Union[str, os.PathLike]

class PrincipalLookup(Protocol):
    def uid_for(self, name: str) -> int: ...
    def gid_for(self, name: str) -> int: ...
    def user_name(self, uid: int) -> str: ...
    def group_name(self, gid: int) -> str: ...

class PermissionStore(Protocol):
    def supports_posix(self, path: StrPath) -> bool: ...

    def read_permission_set(self, path: StrPath) -> PermissionSet: ...
    def write_permission_set(self, path: StrPath, permission_set: PermissionSet) -> None: ...

    def read_owner(self, path: StrPath) -> str: ...
    def write_owner(self, path: StrPath, name: str) -> None: ...
    def read_group(self, path: StrPath) -> str: ...
    def write_group(self, path: StrPath, name: str) -> None: ...

    def read_special_attribute(self, path: StrPath, kind: SpecialAttribute) -> bool: ...
    def write_special_attribute(self, path: StrPath, kind: SpecialAttribute, enabled: bool) -> None: ...
