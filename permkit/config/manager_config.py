from pathlib import Path
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field

__all__ = ('ManagerConfig',)

def _empty_path_to_none(arg: Optional[str]) -> Optional[str]:
    if isinstance(arg, str) and not arg.strip():
        return None
    return arg

class ManagerConfig(BaseModel):
    # Special attributes
    strict_special_attributes: Annotated[bool, Field(default=False)]    # Raise instead of warning when a special bit cannot be written
    verify_special_attributes: Annotated[bool, Field(default=True)]

    # Logging
    log_filepath: Annotated[Optional[Path], Field(default=None), BeforeValidator(_empty_path_to_none)]
    log_batch_size: Annotated[int, Field(ge=1, default=16)]
    log_min_severity: Annotated[int, Field(ge=1, le=5, default=1)]

    def resolve_log_filepath(self, root: Path) -> None:
        if self.log_filepath and not self.log_filepath.is_absolute():
            self.log_filepath = root / self.log_filepath
