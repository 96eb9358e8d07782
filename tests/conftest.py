import pytest

from permkit.config.manager_config import ManagerConfig
from permkit.codecs.numeric_codec import decode_chmod
from permkit.logging import Logger
from permkit.manager import FilePermissionManager
from permkit.store.memory_store import InMemoryPermissionStore

TARGET = "/srv/data/report.txt"


@pytest.fixture
def memory_store() -> InMemoryPermissionStore:
    store = InMemoryPermissionStore(users=("root", "alice"), groups=("root", "staff"))
    store.add(TARGET, decode_chmod(644), owner="root", group="root")
    return store


@pytest.fixture
def logger() -> Logger:
    return Logger(log_filepath=None, batch_size=64)


@pytest.fixture
def manager(memory_store: InMemoryPermissionStore, logger: Logger) -> FilePermissionManager:
    return FilePermissionManager(TARGET, store=memory_store, config=ManagerConfig(), logger=logger)
