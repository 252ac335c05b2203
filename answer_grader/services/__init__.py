# Services package
from .question_bank import Question, QuestionBank
from .validation_service import ValidationService, get_validation_service

__all__ = [
    "Question",
    "QuestionBank",
    "ValidationService",
    "get_validation_service",
]
