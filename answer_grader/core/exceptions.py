"""
Custom exceptions for the Answer Grader API
"""
from fastapi import HTTPException, status

from .constants import ErrorCode


class BaseAPIException(HTTPException):
    """Base exception for all API errors"""
    
    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str = None,
        headers: dict = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class NotFoundException(BaseAPIException):
    """Resource not found"""
    
    def __init__(self, resource: str, identifier: str = None):
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} '{identifier}' not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=ErrorCode.NOT_FOUND.value
        )


class BadRequestException(BaseAPIException):
    """Bad request - invalid input"""
    
    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            error_code=ErrorCode.BAD_REQUEST.value
        )


class InvalidReferenceDataException(BaseAPIException):
    """Reference answers stored for a question are malformed"""
    
    def __init__(self, reason: str, question_id: str = None):
        detail = f"Invalid reference answer data: {reason}"
        if question_id:
            detail = f"Invalid reference answer data for question '{question_id}': {reason}"
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_code=ErrorCode.INVALID_REFERENCE_DATA.value
        )
        self.reason = reason
        self.question_id = question_id
