"""
Answer validation API routes
Validates single answers, grades submissions and probes similarity
"""
from typing import Optional
from fastapi import APIRouter, Depends

from answer_grader.core import Messages
from answer_grader.grader import AnswerSubmission
from answer_grader.schemas import (
    ApiResponse,
    GradeRequest,
    GradingData,
    SimilarityRequest,
    SimilarityResult,
    SingleValidationResult,
    ValidateAnswerRequest,
    ValidationDetails,
)
from answer_grader.services import ValidationService, get_validation_service

router = APIRouter()


@router.post("/validate-single", response_model=ApiResponse)
async def validate_single_answer(
    request: ValidateAnswerRequest,
    service: ValidationService = Depends(get_validation_service)
):
    """
    Validate a single answer (for practice/testing)
    """
    result = service.validate_single_answer(request.question_id, request.answer)
    return ApiResponse(
        message=Messages.ANSWER_VALIDATED,
        data=SingleValidationResult(**result)
    )


@router.post("/grade", response_model=ApiResponse)
async def grade_answers(
    request: GradeRequest,
    service: ValidationService = Depends(get_validation_service)
):
    """
    Grade all answers of an assignment submission
    """
    submissions = [
        AnswerSubmission(question_id=item.question_id, answer_text=item.answer)
        for item in request.answers
    ]
    result = service.grade_submission(
        submissions,
        total_questions=request.total_questions,
        assignment_id=request.assignment_id
    )
    return ApiResponse(
        message=Messages.ANSWERS_GRADED,
        data=GradingData(**result)
    )


@router.get("/validation-details", response_model=ApiResponse)
async def get_validation_details(
    question_id: Optional[str] = None,
    answer: Optional[str] = None,
    service: ValidationService = Depends(get_validation_service)
):
    """
    Get detailed validation for a specific answer
    """
    result = service.get_validation_details(question_id or "", answer or "")
    return ApiResponse(
        message=Messages.DETAILS_RETRIEVED,
        data=ValidationDetails(**result)
    )


@router.post("/test-similarity", response_model=ApiResponse)
async def test_similarity(
    request: SimilarityRequest,
    service: ValidationService = Depends(get_validation_service)
):
    """
    Test answer similarity (useful for admins to understand matching)
    """
    result = service.test_similarity(request.answer1, request.answer2)
    return ApiResponse(
        message=Messages.SIMILARITY_CALCULATED,
        data=SimilarityResult(**result)
    )
