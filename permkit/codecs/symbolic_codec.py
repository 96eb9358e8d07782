'''Symbolic chmod codec supporting "+" and "-" clauses, e.g. "u+x", "g-w,a+r"'''
import re
from types import MappingProxyType
from typing import Final, NamedTuple

from permkit.codecs.flag_codec import set_flag
from permkit.errors import MalformedExpressionError
from permkit.models.constants import CODEC_CONSTANTS
from permkit.models.permission_set import PermissionSet
from permkit.models.permissions import Principal, Permission

__all__ = ('SymbolicClause', 'parse_symbolic', 'apply_symbolic')

PRINCIPAL_SYMBOLS: MappingProxyType[str, Principal] = MappingProxyType(
    dict(zip(CODEC_CONSTANTS.symbolic.principals, (Principal.USER, Principal.GROUP, Principal.OTHER, Principal.ALL)))
)
PERMISSION_SYMBOLS: MappingProxyType[str, Permission] = MappingProxyType(
    dict(zip(CODEC_CONSTANTS.symbolic.permissions, (Permission.READ, Permission.WRITE, Permission.EXECUTABLE)))
)

_ENABLE_OPERATOR, _DISABLE_OPERATOR = CODEC_CONSTANTS.symbolic.operators
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r'\s+')

class SymbolicClause(NamedTuple):
    principals: tuple[Principal, ...]
    permissions: tuple[Permission, ...]
    enabled: bool

def _parse_clause(clause: str) -> SymbolicClause:
    operator_indices: list[int] = [index for index, char in enumerate(clause) if char in (_ENABLE_OPERATOR, _DISABLE_OPERATOR)]
    if not operator_indices:
        raise MalformedExpressionError(f'No operator ({_ENABLE_OPERATOR} or {_DISABLE_OPERATOR}) found in clause: {clause}')
    if len(operator_indices) > 1:
        raise MalformedExpressionError(f'Clause must contain exactly one operator: {clause}')

    operator_index: int = operator_indices[0]
    principal_string, permission_string = clause[:operator_index], clause[operator_index+1:]
    if not principal_string:
        raise MalformedExpressionError(f'No principal given in clause: {clause}')
    if not permission_string:
        raise MalformedExpressionError(f'No permission given in clause: {clause}')

    for char in principal_string:
        if char not in PRINCIPAL_SYMBOLS:
            raise MalformedExpressionError(f'Invalid symbolic principal: {char}')
    for char in permission_string:
        if char not in PERMISSION_SYMBOLS:
            raise MalformedExpressionError(f'Invalid symbolic permission: {char}')

    return SymbolicClause(principals=tuple(PRINCIPAL_SYMBOLS[char] for char in principal_string),
                          permissions=tuple(PERMISSION_SYMBOLS[char] for char in permission_string),
                          enabled=clause[operator_index] == _ENABLE_OPERATOR)

def parse_symbolic(expression: str) -> list[SymbolicClause]:
    '''Validate a whole expression up front. Empty clauses left by stray separators are skipped'''
    if not isinstance(expression, str):
        raise MalformedExpressionError(f'Symbolic expression must be a string, got {type(expression).__name__}')

    normalised: str = _WHITESPACE.sub('', expression).lower()
    return [_parse_clause(clause)
            for clause in normalised.split(CODEC_CONSTANTS.symbolic.clause_separator)
            if clause]

def apply_symbolic(permission_set: PermissionSet, expression: str) -> PermissionSet:
    # Clauses fold left to right, so "u+x,a-x" leaves user execute disabled
    for clause in parse_symbolic(expression):
        for principal in clause.principals:
            for permission in clause.permissions:
                permission_set = set_flag(permission_set, principal, permission, clause.enabled)
    return permission_set
