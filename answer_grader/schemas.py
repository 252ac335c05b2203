"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Any
from datetime import datetime

from .config import settings


# ===== Common =====
class ApiResponse(BaseModel):
    success: bool = True
    message: str
    data: Optional[Any] = None


# ===== Validation Schemas =====
class ValidateAnswerRequest(BaseModel):
    question_id: str = Field(..., min_length=1, description="Question to validate against")
    answer: str = Field(
        ...,
        max_length=settings.MAX_ANSWER_LENGTH,
        description="Student answer, may be empty"
    )


class ReferenceAnswerData(BaseModel):
    text: str
    mark: float


class ValidationResult(BaseModel):
    question_id: Optional[str] = None
    student_answer: str
    marks_obtained: float = 0
    match_kind: str
    similarity: float = 0
    matched_text: Optional[str] = None
    feedback: str
    error: Optional[str] = None
    error_code: Optional[str] = None


class SingleValidationResult(ValidationResult):
    correct_answer: Optional[str] = None
    partial_options: List[ReferenceAnswerData] = []


class QuestionDetails(BaseModel):
    id: str
    text: str
    topic: Optional[str] = None
    full_answer: Optional[ReferenceAnswerData] = None
    partial_answers: List[ReferenceAnswerData] = []


class ValidationDetails(BaseModel):
    question: QuestionDetails
    validation: SingleValidationResult


# ===== Similarity Schemas =====
class SimilarityRequest(BaseModel):
    answer1: str = Field(default="", max_length=settings.MAX_ANSWER_LENGTH)
    answer2: str = Field(default="", max_length=settings.MAX_ANSWER_LENGTH)


class SimilarityResult(BaseModel):
    answer1: str
    answer2: str
    similarity: float
    similarity_percentage: int


# ===== Grading Schemas =====
class AnswerItem(BaseModel):
    question_id: str = Field(..., min_length=1)
    answer: str = Field(..., max_length=settings.MAX_ANSWER_LENGTH)


class GradeRequest(BaseModel):
    assignment_id: Optional[str] = None
    total_questions: Optional[int] = Field(
        default=None, ge=0, description="Questions in the assignment, defaults to len(answers)"
    )
    answers: List[AnswerItem] = Field(default=[], description="Submitted answers")


class GradingData(BaseModel):
    assignment_id: Optional[str] = None
    results: List[ValidationResult] = []
    total_marks_obtained: float
    total_questions: int
    completion_rate: int
    missing_questions: List[str] = []
    graded_at: datetime


# ===== Status Schemas =====
class HealthResponse(BaseModel):
    status: str
    version: str
    questions_loaded: int = 0
