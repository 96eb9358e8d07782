'''Owner and group name resolution backed by the host's user and group databases'''
import grp
import pwd

from permkit.errors import PrincipalNotFoundError

__all__ = ('PosixPrincipalLookup',)

class PosixPrincipalLookup:
    __slots__ = ()

    def uid_for(self, name: str) -> int:
        try:
            return pwd.getpwnam(name).pw_uid
        except KeyError:
            raise PrincipalNotFoundError(name, kind='user')

    def gid_for(self, name: str) -> int:
        try:
            return grp.getgrnam(name).gr_gid
        except KeyError:
            raise PrincipalNotFoundError(name, kind='group')

    def user_name(self, uid: int) -> str:
        # Orphaned ids (no passwd entry) are reported numerically, like ls does
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return str(uid)

    def group_name(self, gid: int) -> str:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return str(gid)
