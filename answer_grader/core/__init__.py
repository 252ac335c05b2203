# Core package
# Loggers live in answer_grader.core.logger and are imported from there, so
# that importing exceptions or constants stays free of file I/O.
from .constants import MatchKind, ErrorCode, MatchThresholds, Messages
from .exceptions import (
    BaseAPIException,
    NotFoundException,
    BadRequestException,
    InvalidReferenceDataException,
)

__all__ = [
    # Constants
    "MatchKind",
    "ErrorCode",
    "MatchThresholds",
    "Messages",
    # Exceptions
    "BaseAPIException",
    "NotFoundException",
    "BadRequestException",
    "InvalidReferenceDataException",
]
