'''Permission store backed by the host filesystem (os.stat / os.chmod / os.chown)'''
import os
from typing import Final

from permkit.errors import StoreIOError, SpecialAttributeError
from permkit.models.flags import SPECIAL_BITMASK, STANDARD_BITMASK
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import SpecialAttribute, SPECIAL_BITS
from permkit.typing import PrincipalLookup, StrPath

__all__ = ('PosixPermissionStore',)

class PosixPermissionStore:
    __slots__ = ('lookup', 'verify_special_attributes')

    def __init__(self, lookup: PrincipalLookup, verify_special_attributes: bool = True):
        self.lookup: Final[PrincipalLookup] = lookup
        self.verify_special_attributes: bool = verify_special_attributes

    def _stat(self, path: StrPath) -> os.stat_result:
        try:
            return os.stat(path)
        except OSError as e:
            raise StoreIOError(os.fspath(path), f'Failed to stat {os.fspath(path)}: {e.strerror}') from e

    def _chmod(self, path: StrPath, mode: int) -> None:
        try:
            os.chmod(path, mode)
        except OSError as e:
            raise StoreIOError(os.fspath(path), f'Failed to change mode of {os.fspath(path)} to {oct(mode)}: {e.strerror}') from e

    def _chown(self, path: StrPath, uid: int, gid: int) -> None:
        try:
            os.chown(path, uid, gid)
        except OSError as e:
            raise StoreIOError(os.fspath(path), f'Failed to change ownership of {os.fspath(path)}: {e.strerror}') from e

    def supports_posix(self, path: StrPath) -> bool:
        return os.name == 'posix'

    def read_permission_set(self, path: StrPath) -> PermissionSet:
        return PermissionSet.from_mode(self._stat(path).st_mode)

    def write_permission_set(self, path: StrPath, permission_set: PermissionSet) -> None:
        self._chmod(path, permission_set.mode)

    def read_owner(self, path: StrPath) -> str:
        return self.lookup.user_name(self._stat(path).st_uid)

    def write_owner(self, path: StrPath, name: str) -> None:
        self._chown(path, self.lookup.uid_for(name), -1)

    def read_group(self, path: StrPath) -> str:
        return self.lookup.group_name(self._stat(path).st_gid)

    def write_group(self, path: StrPath, name: str) -> None:
        self._chown(path, -1, self.lookup.gid_for(name))

    def read_special_attribute(self, path: StrPath, kind: SpecialAttribute) -> bool:
        try:
            mode: int = os.stat(path).st_mode
        except OSError:
            return False
        return bool(mode & SPECIAL_BITS[kind])

    def write_special_attribute(self, path: StrPath, kind: SpecialAttribute, enabled: bool) -> None:
        # Access failures surface as StoreIOError, only the chmod itself is a special attribute failure
        current_mode: int = self._stat(path).st_mode & (STANDARD_BITMASK | SPECIAL_BITMASK)
        special_bit: int = int(SPECIAL_BITS[kind])
        new_mode: int = (current_mode | special_bit) if enabled else (current_mode & ~special_bit)
        try:
            os.chmod(path, new_mode)
        except OSError as e:
            raise SpecialAttributeError(os.fspath(path), kind.value, f'Unable to set {kind.value} on {os.fspath(path)}: {e.strerror}') from e

        # The kernel may silently drop setgid (e.g. caller not in the file's group)
        if self.verify_special_attributes and self.read_special_attribute(path, kind) != bool(enabled):
            raise SpecialAttributeError(os.fspath(path), kind.value)
