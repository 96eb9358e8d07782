'''Host independent permission store keeping every entry in memory'''
import os
from typing import Iterable, Optional

from permkit.errors import StoreIOError, SpecialAttributeError, PrincipalNotFoundError
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import SpecialAttribute
from permkit.typing import StrPath

__all__ = ('StoreEntry', 'InMemoryPermissionStore')

class StoreEntry:
    __slots__ = ('permission_set', 'owner', 'group')
    permission_set: PermissionSet
    owner: str
    group: str

    def __init__(self, permission_set: PermissionSet, owner: str, group: str):
        self.permission_set = permission_set
        self.owner = owner
        self.group = group

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}({self.permission_set}, owner={self.owner!r}, group={self.group!r}) at {hex(id(self))}>'

class InMemoryPermissionStore:
    __slots__ = ('entries', 'users', 'groups', 'posix', 'unsupported_special_attributes', 'write_count')

    def __init__(self,
                 users: Iterable[str] = ('root',),
                 groups: Iterable[str] = ('root',),
                 posix: bool = True,
                 unsupported_special_attributes: Iterable[SpecialAttribute] = ()):
        self.entries: dict[str, StoreEntry] = {}
        self.users: set[str] = set(users)
        self.groups: set[str] = set(groups)
        self.posix: bool = posix
        self.unsupported_special_attributes: frozenset[SpecialAttribute] = frozenset(unsupported_special_attributes)
        self.write_count: int = 0

    def add(self, path: StrPath, permission_set: Optional[PermissionSet] = None, owner: str = 'root', group: str = 'root') -> StoreEntry:
        entry = StoreEntry(permission_set or PermissionSet(), owner, group)
        self.entries[os.fspath(path)] = entry
        return entry

    def _entry(self, path: StrPath) -> StoreEntry:
        entry: Optional[StoreEntry] = self.entries.get(os.fspath(path))
        if not entry:
            raise StoreIOError(os.fspath(path), f'No such file: {os.fspath(path)}')
        return entry

    def supports_posix(self, path: StrPath) -> bool:
        return self.posix

    def read_permission_set(self, path: StrPath) -> PermissionSet:
        return self._entry(path).permission_set

    def write_permission_set(self, path: StrPath, permission_set: PermissionSet) -> None:
        self._entry(path).permission_set = permission_set
        self.write_count += 1

    def read_owner(self, path: StrPath) -> str:
        return self._entry(path).owner

    def write_owner(self, path: StrPath, name: str) -> None:
        entry: StoreEntry = self._entry(path)
        if name not in self.users:
            raise PrincipalNotFoundError(name, kind='user')
        entry.owner = name

    def read_group(self, path: StrPath) -> str:
        return self._entry(path).group

    def write_group(self, path: StrPath, name: str) -> None:
        entry: StoreEntry = self._entry(path)
        if name not in self.groups:
            raise PrincipalNotFoundError(name, kind='group')
        entry.group = name

    def read_special_attribute(self, path: StrPath, kind: SpecialAttribute) -> bool:
        entry: Optional[StoreEntry] = self.entries.get(os.fspath(path))
        if not entry or kind in self.unsupported_special_attributes:
            return False
        return entry.permission_set.is_special_enabled(kind)

    def write_special_attribute(self, path: StrPath, kind: SpecialAttribute, enabled: bool) -> None:
        entry: StoreEntry = self._entry(path)
        if kind in self.unsupported_special_attributes:
            raise SpecialAttributeError(os.fspath(path), kind.value)
        entry.permission_set = entry.permission_set.with_special(kind, bool(enabled))
        self.write_count += 1
