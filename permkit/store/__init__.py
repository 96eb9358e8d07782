'''Permission store implementations. The POSIX store and lookup are imported from their own modules since they need pwd and grp'''
from permkit.store.memory_store import InMemoryPermissionStore, StoreEntry

__all__ = ('InMemoryPermissionStore', 'StoreEntry')
