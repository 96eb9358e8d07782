'''Permission manager bound to a single path.

Every operation round trips through the permission store: the current state is read fresh,
translated through one of the codecs and written back as a single store call. Nothing is cached
between calls.

Flag and symbolic updates are read-then-write. Two callers updating the same path concurrently
can lose one another's changes, serialising access to a path is up to the caller.
'''
import os
import warnings
from pathlib import Path
from typing import Final, Optional

from permkit.codecs.extended_codec import decode_extended, encode_extended
from permkit.codecs.flag_codec import get_flag, set_flag
from permkit.codecs.numeric_codec import decode_chmod, encode_chmod, decode_umask, encode_umask
from permkit.codecs.symbolic_codec import parse_symbolic, apply_symbolic
from permkit.config.manager_config import ManagerConfig
from permkit.errors import SpecialAttributeError, SpecialAttributeWarning, UnsupportedAttributeError
from permkit.logging import Logger
from permkit.models.log_models import ActivityLog, LogAuthor, LogType, Severity
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import Principal, Permission, SpecialAttribute
from permkit.typing import PermissionStore, StrPath

__all__ = ('FilePermissionManager',)

_DEFAULT_FILE_MODE: Final[int] = 0o666
_DEFAULT_DIRECTORY_MODE: Final[int] = 0o777

def _read_umask() -> int:
    # umask can only be read by setting it, restore immediately
    current: int = os.umask(0)
    os.umask(current)
    return current

class FilePermissionManager:
    __slots__ = ('_file_path', 'store', 'config', 'logger')

    def __init__(self,
                 path: StrPath,
                 store: PermissionStore,
                 config: Optional[ManagerConfig] = None,
                 logger: Optional[Logger] = None):
        self.file_path = path
        self.store: Final[PermissionStore] = store
        self.config: Final[ManagerConfig] = config or ManagerConfig()
        self.logger: Final[Logger] = logger or Logger(log_filepath=self.config.log_filepath,
                                                      batch_size=self.config.log_batch_size,
                                                      min_severity=self.config.log_min_severity)

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}({str(self._file_path)!r}) at {hex(id(self))}>'

    def __enter__(self) -> 'FilePermissionManager':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        '''Flush any activity logs still below the logger's batch size'''
        self.logger.close()

    @property
    def file_path(self) -> Path:
        return self._file_path
    @file_path.setter
    def file_path(self, value: StrPath) -> None:
        self._file_path = Path(os.fspath(value))

    def _check_posix_support(self) -> None:
        if not self.store.supports_posix(self._file_path):
            raise UnsupportedAttributeError(str(self._file_path))

    def _log(self, details: str, category: LogType = LogType.PERMISSION, severity: int = Severity.INFO) -> None:
        self.logger.enqueue_log(ActivityLog(severity=severity,
                                            logged_by=LogAuthor.PERMISSION_MANAGER,
                                            log_category=category,
                                            log_details=details,
                                            path_concerned=str(self._file_path)))

    def _read(self) -> PermissionSet:
        self._check_posix_support()
        return self.store.read_permission_set(self._file_path)

    def _write(self, permission_set: PermissionSet) -> None:
        self.store.write_permission_set(self._file_path, permission_set)
        self._log(f'Mode set to {oct(permission_set.mode)}')

    def _write_special(self, kind: SpecialAttribute, enabled: bool) -> None:
        try:
            self.store.write_special_attribute(self._file_path, kind, enabled)
        except SpecialAttributeError as special_error:
            # path_concerned already carries the path, keep the details short
            self._log(f'{kind.value} could not be {"enabled" if enabled else "disabled"}',
                      category=LogType.SPECIAL_ATTRIBUTE, severity=Severity.NON_CRITICAL_FAILURE)
            if self.config.strict_special_attributes:
                raise
            warnings.warn(special_error.description, category=SpecialAttributeWarning, stacklevel=3)
            return

        self._log(f'{kind.value} {"enabled" if enabled else "disabled"}', category=LogType.SPECIAL_ATTRIBUTE)

    def get_permission_set(self) -> PermissionSet:
        return self._read()

    # Flag style
    def set_permission(self, principal: Principal, permission: Permission, enabled: bool) -> None:
        self._write(set_flag(self._read(), principal, permission, enabled))

    def get_permission(self, principal: Principal, permission: Permission) -> bool:
        return get_flag(self._read(), principal, permission)

    # Numeric
    def set_chmod(self, value: int) -> None:
        '''Apply a 3 or 4 digit chmod value. Standard bits are written first, then each special bit.
        A special bit that cannot be written does not roll back the standard bits.'''
        permission_set: PermissionSet = decode_chmod(value)
        self._check_posix_support()

        # Writing the standard bits clears every special bit, only enabled ones need a second write
        self._write(permission_set.standard_bits_only())
        for kind in SpecialAttribute:
            if permission_set.is_special_enabled(kind):
                self._write_special(kind, True)

    def get_chmod(self) -> int:
        permission_set: PermissionSet = self._read()
        for kind in SpecialAttribute:
            permission_set = permission_set.with_special(kind, self.store.read_special_attribute(self._file_path, kind))
        return encode_chmod(permission_set)

    # Symbolic
    def apply_symbolic(self, expression: str) -> None:
        parse_symbolic(expression)  # Fail fast before touching the store
        self._write(apply_symbolic(self._read(), expression))

    # Extended
    def set_extended(self, extended: str) -> None:
        decoded: PermissionSet = decode_extended(extended)
        self._write(self._read().with_standard_bits(decoded))

    def get_extended(self) -> str:
        return encode_extended(self._read())

    # Ownership
    def get_owner(self) -> str:
        self._check_posix_support()
        return self.store.read_owner(self._file_path)

    def set_owner(self, name: str) -> None:
        self._check_posix_support()
        self.store.write_owner(self._file_path, name)
        self._log(f'Owner set to {name}', category=LogType.OWNERSHIP)

    def get_group(self) -> str:
        self._check_posix_support()
        return self.store.read_group(self._file_path)

    def set_group(self, name: str) -> None:
        self._check_posix_support()
        self.store.write_group(self._file_path, name)
        self._log(f'Group set to {name}', category=LogType.OWNERSHIP)

    # Special attributes
    def _is_special_enabled(self, kind: SpecialAttribute) -> bool:
        self._check_posix_support()
        return self.store.read_special_attribute(self._file_path, kind)

    def _set_special_enabled(self, kind: SpecialAttribute, enabled: bool) -> None:
        self._check_posix_support()
        self._write_special(kind, enabled)

    def is_setuid_enabled(self) -> bool:
        return self._is_special_enabled(SpecialAttribute.SETUID)

    def set_setuid_enabled(self, enabled: bool) -> None:
        self._set_special_enabled(SpecialAttribute.SETUID, enabled)

    def is_setgid_enabled(self) -> bool:
        return self._is_special_enabled(SpecialAttribute.SETGID)

    def set_setgid_enabled(self, enabled: bool) -> None:
        self._set_special_enabled(SpecialAttribute.SETGID, enabled)

    def is_sticky_enabled(self) -> bool:
        return self._is_special_enabled(SpecialAttribute.STICKY)

    def set_sticky_enabled(self, enabled: bool) -> None:
        self._set_special_enabled(SpecialAttribute.STICKY, enabled)

    # Process umask
    @staticmethod
    def get_umask() -> int:
        '''Current process umask in chmod notation (e.g. 22)'''
        return encode_umask(PermissionSet.from_mode(_read_umask()))

    def set_umask(self, value: int) -> int:
        '''Set the process umask, returning the previous one. Affects the whole process'''
        previous: int = os.umask(decode_umask(value).standard_mode)
        self._log(f'Umask set to {value:03d}', category=LogType.UMASK)
        return encode_umask(PermissionSet.from_mode(previous))

    @classmethod
    def default_permissions(cls, directory: bool = False) -> PermissionSet:
        '''Permissions a newly created file (or directory) receives under the current umask'''
        base_mode: int = _DEFAULT_DIRECTORY_MODE if directory else _DEFAULT_FILE_MODE
        return PermissionSet.from_mode(base_mode & ~_read_umask())
