'''Helper module for building configured managers, stores and loggers'''
from pathlib import Path
from typing import Any, Final, Optional

from permkit.config.manager_config import ManagerConfig
from permkit.logging import Logger
from permkit.manager import FilePermissionManager
from permkit.typing import PermissionStore, StrPath

import pytomlpp

__all__ = ('create_manager_config',
           'create_logger',
           'create_posix_store',
           'create_manager')

def create_manager_config(filepath: Optional[StrPath] = None) -> ManagerConfig:
    config_path: Final[Path] = Path(filepath) if filepath else Path(__file__).parent.joinpath('config', 'manager_config.toml')
    loaded_constants: dict[str, Any] = pytomlpp.load(config_path)

    flattened_dict: dict[str, Any] = {}
    leftover_mappings: list[dict[str, Any]] = [loaded_constants]
    while leftover_mappings:
        mapping = leftover_mappings.pop()
        for k, v in mapping.items():
            if isinstance(v, dict):
                leftover_mappings.append(mapping[k])
                continue
            flattened_dict.update({k:v})

    manager_config: Final[ManagerConfig] = ManagerConfig.model_validate(flattened_dict)
    manager_config.resolve_log_filepath(config_path.parent)
    return manager_config

def create_logger(config: ManagerConfig) -> Logger:
    return Logger(log_filepath=config.log_filepath,
                  batch_size=config.log_batch_size,
                  min_severity=config.log_min_severity)

def create_posix_store(config: ManagerConfig) -> PermissionStore:
    # Imported here since pwd and grp only exist on POSIX hosts
    from permkit.store.lookup import PosixPrincipalLookup
    from permkit.store.posix_store import PosixPermissionStore

    return PosixPermissionStore(lookup=PosixPrincipalLookup(),
                                verify_special_attributes=config.verify_special_attributes)

def create_manager(path: StrPath,
                   config: Optional[ManagerConfig] = None,
                   store: Optional[PermissionStore] = None,
                   logger: Optional[Logger] = None) -> FilePermissionManager:
    config = config or create_manager_config()
    return FilePermissionManager(path,
                                 store=store or create_posix_store(config),
                                 config=config,
                                 logger=logger or create_logger(config))
