'''Module containing IntFlags for POSIX file mode bits (standard and special)'''
from enum import IntFlag

__all__ = ('ModeFlags', 'SpecialFlags', 'STANDARD_BITMASK', 'SPECIAL_BITMASK')

class ModeFlags(IntFlag):
    '''The 9 standard permission bits of st_mode'''
    # Owner
    OWNER_READ      = 0o400
    OWNER_WRITE     = 0o200
    OWNER_EXECUTE   = 0o100

    # Group
    GROUP_READ      = 0o040
    GROUP_WRITE     = 0o020
    GROUP_EXECUTE   = 0o010

    # Others
    OTHER_READ      = 0o004
    OTHER_WRITE     = 0o002
    OTHER_EXECUTE   = 0o001

class SpecialFlags(IntFlag):
    '''Special bits of st_mode, independent of the standard bits'''
    SETUID  = 0o4000
    SETGID  = 0o2000
    STICKY  = 0o1000

STANDARD_BITMASK: int = 0o777
SPECIAL_BITMASK: int = 0o7000
