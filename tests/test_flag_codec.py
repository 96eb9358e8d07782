import itertools

import pytest

from permkit.codecs.flag_codec import get_flag, set_flag
from permkit.codecs.numeric_codec import decode_chmod, encode_chmod
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import Principal, Permission

CONCRETE = (Principal.USER, Principal.GROUP, Principal.OTHER)


def test_set_all_read_enables_every_principal() -> None:
    updated = set_flag(PermissionSet(), Principal.ALL, Permission.READ, True)
    assert all(get_flag(updated, principal, Permission.READ) for principal in CONCRETE)
    assert encode_chmod(updated) == 444


def test_set_single_principal_leaves_others() -> None:
    updated = set_flag(decode_chmod(644), Principal.GROUP, Permission.WRITE, True)
    assert encode_chmod(updated) == 664
    updated = set_flag(updated, Principal.USER, Permission.READ, False)
    assert encode_chmod(updated) == 264


def test_set_flag_returns_new_set() -> None:
    original = decode_chmod(600)
    set_flag(original, Principal.ALL, Permission.EXECUTABLE, True)
    assert encode_chmod(original) == 600


@pytest.mark.parametrize("value", [0, 111, 444, 640, 755, 777, 4751])
@pytest.mark.parametrize("permission", list(Permission))
def test_get_all_is_and_of_concrete_principals(value: int, permission: Permission) -> None:
    permission_set = decode_chmod(value)
    expected = all(get_flag(permission_set, principal, permission) for principal in CONCRETE)
    assert get_flag(permission_set, Principal.ALL, permission) is expected


def test_disable_all_keeps_special_bits() -> None:
    updated = set_flag(decode_chmod(4755), Principal.ALL, Permission.EXECUTABLE, False)
    assert encode_chmod(updated) == 4644


def test_every_concrete_cell_is_independent() -> None:
    for principal, permission in itertools.product(CONCRETE, Permission):
        updated = set_flag(PermissionSet(), principal, permission, True)
        assert updated.mode.bit_count() == 1
