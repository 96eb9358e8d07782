from permkit.config.manager_config import ManagerConfig

__all__ = ('ManagerConfig',)
