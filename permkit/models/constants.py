from pathlib import Path
from typing import Annotated, Any, Final

import pytomlpp
from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self

__all__ = ('NumericCodecConstants',
           'ExtendedCodecConstants',
           'SymbolicCodecConstants',
           'CodecConstants',
           'CODEC_CONSTANTS',
           'load_constants')

class NumericCodecConstants(BaseModel):
    chmod_range: tuple[
        Annotated[int, Field(ge=0)],
        Annotated[int, Field(ge=0)]
        ]
    umask_range: tuple[
        Annotated[int, Field(ge=0)],
        Annotated[int, Field(ge=0)]
        ]
    max_digit: Annotated[int, Field(frozen=True, ge=1, le=7)]

class ExtendedCodecConstants(BaseModel):
    length: Annotated[int, Field(frozen=True, ge=1)]
    unset_character: Annotated[str, Field(frozen=True, min_length=1, max_length=1)]
    column_letters: Annotated[str, Field(frozen=True)]

    @model_validator(mode='after')
    def validate_columns(self) -> Self:
        if len(self.column_letters) != self.length:
            raise ValueError(f'Column letters ({self.column_letters}) must have exactly {self.length} characters')
        return self

class SymbolicCodecConstants(BaseModel):
    principals: Annotated[str, Field(frozen=True, min_length=1)]
    permissions: Annotated[str, Field(frozen=True, min_length=1)]
    operators: Annotated[str, Field(frozen=True, min_length=2, max_length=2)]
    clause_separator: Annotated[str, Field(frozen=True, min_length=1, max_length=1)]

class CodecConstants(BaseModel):
    numeric: NumericCodecConstants
    extended: ExtendedCodecConstants
    symbolic: SymbolicCodecConstants

def load_constants(filepath: Path = Path(__file__).parent.joinpath('constants.toml')) -> CodecConstants:
    loaded_constants: dict[str, Any] = pytomlpp.load(filepath)
    return CodecConstants.model_validate({'numeric' : NumericCodecConstants.model_validate(loaded_constants['codecs']['numeric']),
                                          'extended' : ExtendedCodecConstants.model_validate(loaded_constants['codecs']['extended']),
                                          'symbolic' : SymbolicCodecConstants.model_validate(loaded_constants['codecs']['symbolic'])})

CODEC_CONSTANTS: Final[CodecConstants] = load_constants()
