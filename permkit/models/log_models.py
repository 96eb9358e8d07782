from datetime import datetime
from enum import Enum, IntFlag
from typing import Annotated, Optional

from pydantic import BaseModel, Field

__all__ = ('Severity', 'LogType', 'LogAuthor', 'ActivityLog')

class Severity(IntFlag):
    INFO                    = 1
    TRACE                   = 2
    ERROR                   = 3
    NON_CRITICAL_FAILURE    = 4
    CRITICAL_FAILURE        = 5

class LogType(Enum):
    PERMISSION          = 'permission'
    OWNERSHIP           = 'ownership'
    SPECIAL_ATTRIBUTE   = 'special_attribute'
    UMASK               = 'umask'
    INTERNAL            = 'internal'
    UNKNOWN             = 'unknown'

class LogAuthor(Enum):
    PERMISSION_MANAGER  = 'permission_manager'
    PERMISSION_STORE    = 'permission_store'
    BOOTUP_HANDLER      = 'bootup_handler'
    EXCEPTION_FALLBACK  = 'exception_fallback'


class ActivityLog(BaseModel):
    '''Single structured log record, serialised as one JSON line by the logger'''
    occurance_time: Annotated[datetime, Field(frozen=True, default_factory=datetime.now)]
    severity: Annotated[int, Field(le=5, ge=1, default=Severity.INFO)]
    logged_by: Annotated[LogAuthor, Field(default=LogAuthor.PERMISSION_MANAGER)]
    log_category: Annotated[LogType, Field(default=LogType.UNKNOWN)]
    log_details: Annotated[Optional[str], Field(max_length=512, default=None)]
    path_concerned: Annotated[Optional[str], Field(max_length=4096, default=None)]
