from enum import Enum

__all__ = ('ErrorCodes',)

class ErrorCodes(Enum):
    # Codec validation
    INVALID_RANGE = "codec:range"
    MALFORMED_EXPRESSION = "codec:expr"
    INVALID_FORMAT = "codec:fmt"

    # Store boundary
    UNSUPPORTED_ATTRIBUTE = "store:unsup"
    PRINCIPAL_NOT_FOUND = "store:nopr"
    STORE_IO = "store:io"
    SPECIAL_ATTRIBUTE = "store:spec"
