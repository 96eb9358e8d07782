from pathlib import Path

import pytest

from permkit.codecs.numeric_codec import decode_chmod
from permkit.config.manager_config import ManagerConfig
from permkit.errors import (InvalidFormatError, InvalidRangeError, MalformedExpressionError, PrincipalNotFoundError,
                            SpecialAttributeError, SpecialAttributeWarning, StoreIOError, UnsupportedAttributeError)
from permkit.logging import Logger
from permkit.manager import FilePermissionManager
from permkit.models.log_models import LogType, Severity
from permkit.models.permissions import Principal, Permission, SpecialAttribute
from permkit.store.memory_store import InMemoryPermissionStore

from tests.conftest import TARGET


def test_file_path_accepts_str_and_pathlike(manager: FilePermissionManager) -> None:
    assert manager.file_path == Path(TARGET)
    manager.file_path = Path("/srv/other")
    assert manager.file_path == Path("/srv/other")


def test_flag_operations(manager: FilePermissionManager) -> None:
    manager.set_permission(Principal.ALL, Permission.EXECUTABLE, True)
    assert manager.get_chmod() == 755
    assert manager.get_permission(Principal.ALL, Permission.READ)
    manager.set_permission(Principal.OTHER, Permission.READ, False)
    assert not manager.get_permission(Principal.ALL, Permission.READ)
    assert manager.get_permission(Principal.GROUP, Permission.READ)


def test_numeric_operations(manager: FilePermissionManager, memory_store: InMemoryPermissionStore) -> None:
    manager.set_chmod(4755)
    assert manager.get_chmod() == 4755
    assert manager.is_setuid_enabled()
    assert memory_store.read_permission_set(TARGET) == decode_chmod(4755)

    manager.set_chmod(750)
    assert manager.get_chmod() == 750
    assert not manager.is_setuid_enabled()


def test_symbolic_operations(manager: FilePermissionManager) -> None:
    manager.apply_symbolic("u+x,g-r,a+r")
    assert manager.get_extended() == "rwxr--r--"


def test_extended_operations_keep_special_bits(manager: FilePermissionManager) -> None:
    manager.set_chmod(2644)
    manager.set_extended("rwxr-x---")
    assert manager.get_extended() == "rwxr-x---"
    assert manager.get_chmod() == 2750


def test_validation_happens_before_store_access(manager: FilePermissionManager, memory_store: InMemoryPermissionStore) -> None:
    with pytest.raises(InvalidRangeError):
        manager.set_chmod(8000)
    with pytest.raises(MalformedExpressionError):
        manager.apply_symbolic("u+x,o=r")
    with pytest.raises(InvalidFormatError):
        manager.set_extended("rwxrwxrw")
    assert memory_store.write_count == 0
    assert manager.get_chmod() == 644


def test_ownership(manager: FilePermissionManager) -> None:
    manager.set_owner("alice")
    manager.set_group("staff")
    assert manager.get_owner() == "alice"
    assert manager.get_group() == "staff"


def test_unknown_principals(manager: FilePermissionManager) -> None:
    with pytest.raises(PrincipalNotFoundError) as user_error:
        manager.set_owner("mallory")
    assert user_error.value.kind == "user"

    with pytest.raises(PrincipalNotFoundError) as group_error:
        manager.set_group("wheel")
    assert group_error.value.kind == "group"
    assert manager.get_owner() == "root"


def test_special_bit_accessors(manager: FilePermissionManager) -> None:
    manager.set_setgid_enabled(True)
    manager.set_sticky_enabled(True)
    assert manager.is_setgid_enabled() and manager.is_sticky_enabled()
    assert not manager.is_setuid_enabled()
    assert manager.get_chmod() == 3644

    manager.set_sticky_enabled(False)
    assert manager.get_chmod() == 2644


def test_unsupported_filesystem(memory_store: InMemoryPermissionStore, logger: Logger) -> None:
    memory_store.posix = False
    manager = FilePermissionManager(TARGET, store=memory_store, logger=logger)
    for operation in (manager.get_chmod, manager.get_owner, manager.get_group, manager.is_sticky_enabled):
        with pytest.raises(UnsupportedAttributeError):
            operation()
    with pytest.raises(UnsupportedAttributeError):
        manager.set_chmod(755)
    with pytest.raises(UnsupportedAttributeError):
        manager.set_owner("alice")
    assert memory_store.write_count == 0


def test_missing_file_surfaces_store_error(memory_store: InMemoryPermissionStore, logger: Logger) -> None:
    manager = FilePermissionManager("/missing", store=memory_store, logger=logger)
    with pytest.raises(StoreIOError):
        manager.get_chmod()
    with pytest.raises(StoreIOError):
        manager.set_permission(Principal.USER, Permission.READ, True)


def test_special_attribute_failure_is_a_warning_by_default(logger: Logger) -> None:
    store = InMemoryPermissionStore(unsupported_special_attributes=(SpecialAttribute.STICKY,))
    store.add(TARGET, decode_chmod(600))
    manager = FilePermissionManager(TARGET, store=store, logger=logger)

    with pytest.warns(SpecialAttributeWarning):
        manager.set_chmod(5755)

    # Standard bits and the other special bit are not rolled back
    assert manager.get_chmod() == 4755


def test_special_attribute_failure_raises_when_strict(logger: Logger) -> None:
    store = InMemoryPermissionStore(unsupported_special_attributes=(SpecialAttribute.SETUID,))
    store.add(TARGET, decode_chmod(600))
    manager = FilePermissionManager(TARGET, store=store, config=ManagerConfig(strict_special_attributes=True), logger=logger)

    with pytest.raises(SpecialAttributeError):
        manager.set_chmod(4755)
    assert manager.get_chmod() == 755


def test_unsupported_special_attribute_reads_false(logger: Logger) -> None:
    store = InMemoryPermissionStore(unsupported_special_attributes=(SpecialAttribute.SETGID,))
    store.add(TARGET, decode_chmod(2755))
    manager = FilePermissionManager(TARGET, store=store, logger=logger)
    assert not manager.is_setgid_enabled()
    assert manager.get_chmod() == 755


def test_mutations_are_logged(memory_store: InMemoryPermissionStore) -> None:
    logger = Logger(log_filepath=None, batch_size=64)
    manager = FilePermissionManager(TARGET, store=memory_store, logger=logger)
    manager.set_chmod(755)
    manager.set_owner("alice")
    assert logger.pending == 2


def test_failed_special_writes_are_logged() -> None:
    logger = Logger(log_filepath=None, batch_size=64, min_severity=Severity.NON_CRITICAL_FAILURE)
    store = InMemoryPermissionStore(unsupported_special_attributes=(SpecialAttribute.STICKY,))
    store.add(TARGET)
    manager = FilePermissionManager(TARGET, store=store, logger=logger)
    with pytest.warns(SpecialAttributeWarning):
        manager.set_sticky_enabled(True)
    assert logger.pending == 1


def test_umask(manager: FilePermissionManager) -> None:
    previous = manager.set_umask(27)
    try:
        assert FilePermissionManager.get_umask() == 27
        assert FilePermissionManager.default_permissions() == decode_chmod(640)
        assert FilePermissionManager.default_permissions(directory=True) == decode_chmod(750)
    finally:
        manager.set_umask(previous)
    assert FilePermissionManager.get_umask() == previous

    with pytest.raises(InvalidRangeError):
        manager.set_umask(1022)


def test_special_attribute_failure_on_long_path_is_still_a_warning(logger: Logger) -> None:
    long_path = "/srv/" + "d" * 500 + "/file"
    store = InMemoryPermissionStore(unsupported_special_attributes=(SpecialAttribute.STICKY,))
    store.add(long_path, decode_chmod(600))
    manager = FilePermissionManager(long_path, store=store, logger=logger)

    with pytest.warns(SpecialAttributeWarning):
        manager.set_chmod(5755)
    assert manager.get_chmod() == 4755
    assert logger.pending == 3


def test_unwritable_log_file_does_not_interrupt_operations(memory_store: InMemoryPermissionStore, tmp_path: Path) -> None:
    logger = Logger(log_filepath=tmp_path / "nodir" / "activity.jsonl", batch_size=1)
    manager = FilePermissionManager(TARGET, store=memory_store, logger=logger)

    with pytest.warns(RuntimeWarning, match="Dropped 1 activity logs"):
        manager.set_chmod(1755)
    assert manager.get_chmod() == 1755
    assert logger.pending == 0


def test_closing_the_manager_flushes_pending_logs(memory_store: InMemoryPermissionStore, tmp_path: Path) -> None:
    log_file = tmp_path / "activity.jsonl"
    with FilePermissionManager(TARGET, store=memory_store, logger=Logger(log_filepath=log_file, batch_size=64)) as manager:
        manager.set_chmod(755)
        manager.set_owner("alice")
        assert not log_file.exists()

    assert manager.logger.pending == 0
    assert len(log_file.read_bytes().splitlines()) == 2


def test_store_entry_repr(memory_store: InMemoryPermissionStore) -> None:
    entry = memory_store.add("/srv/data/notes.txt", decode_chmod(640), owner="alice", group="staff")
    assert "owner='alice', group='staff'" in repr(entry)
    assert "self." not in repr(entry)
