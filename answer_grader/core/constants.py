"""
Application constants
"""
from enum import Enum


class MatchKind(str, Enum):
    """Kind of reference answer a student answer matched"""
    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


class ErrorCode(str, Enum):
    """Error tags attached to responses and per-question outcomes"""
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INVALID_REFERENCE_DATA = "INVALID_REFERENCE_DATA"
    QUESTION_NOT_FOUND = "QUESTION_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Similarity thresholds
class MatchThresholds:
    """Similarity needed to award marks"""
    FULL = 0.95
    PARTIAL = 0.80


# API Response Messages
class Messages:
    """API response messages"""
    
    # Success messages
    ANSWER_VALIDATED = "Answer validated successfully"
    ANSWERS_GRADED = "Answers submitted and validated successfully"
    DETAILS_RETRIEVED = "Answer validation details retrieved successfully"
    SIMILARITY_CALCULATED = "Similarity calculated successfully"
    
    # Error messages
    DETAILS_PARAMS_REQUIRED = "question_id and answer are required"
    SIMILARITY_PARAMS_REQUIRED = "Both answers are required for similarity testing"
    ANSWERS_REQUIRED = "Answers array is required and cannot be empty"
    UNEXPECTED_ERROR = "An unexpected error occurred"
    
    # Feedback
    FEEDBACK_FULL = "Excellent! Your answer matches {percent}% with the correct answer."
    FEEDBACK_PARTIAL = (
        'Good attempt! Your answer matches {percent}% with "{matched}". '
        "You earned partial marks."
    )
    FEEDBACK_NONE = (
        "Your answer does not match any of the expected answers. "
        "Please review the question and try again."
    )
