'''Flag-style access to a PermissionSet: (principal, permission) -> bool'''
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import Principal, Permission, CONCRETE_PRINCIPALS, PERMISSION_FIELDS

__all__ = ('set_flag', 'get_flag')

def set_flag(permission_set: PermissionSet, principal: Principal, permission: Permission, enabled: bool) -> PermissionSet:
    targets: tuple[Principal, ...] = CONCRETE_PRINCIPALS if principal is Principal.ALL else (principal,)
    return permission_set.model_copy(update={PERMISSION_FIELDS[(target, permission)] : bool(enabled) for target in targets})

def get_flag(permission_set: PermissionSet, principal: Principal, permission: Permission) -> bool:
    # ALL holds only when USER, GROUP and OTHER all hold
    return permission_set.is_enabled(principal, permission)
