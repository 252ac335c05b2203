"""
Validation Service
Validates student answers against the question bank and grades submissions
"""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from answer_grader.config import settings
from answer_grader.core import (
    BadRequestException,
    NotFoundException,
    Messages,
)
from answer_grader.core.logger import grading_logger
from answer_grader.grader import (
    AnswerSubmission,
    GradingEngine,
    ValidationOutcome,
    similarity,
)
from answer_grader.utils import (
    build_feedback,
    round_half_up,
    round_similarity,
    similarity_percentage,
)
from .question_bank import Question, QuestionBank


class ValidationService:
    """Service for answer validation and submission grading"""
    
    def __init__(
        self,
        question_bank: Optional[QuestionBank] = None,
        engine: Optional[GradingEngine] = None
    ):
        self.question_bank = (
            question_bank if question_bank is not None
            else QuestionBank.from_json_file(settings.QUESTIONS_FILE)
        )
        self.engine = engine or GradingEngine(
            full_threshold=settings.FULL_MATCH_THRESHOLD,
            partial_threshold=settings.PARTIAL_MATCH_THRESHOLD,
        )
    
    def _get_question(self, question_id: str) -> Question:
        question = self.question_bank.get(question_id)
        if question is None:
            raise NotFoundException("Question", question_id)
        return question
    
    def _outcome_to_dict(self, outcome: ValidationOutcome, student_answer: str) -> Dict[str, Any]:
        return {
            "question_id": outcome.question_id,
            "student_answer": student_answer,
            "marks_obtained": outcome.marks_obtained,
            "match_kind": outcome.match_kind.value,
            "similarity": outcome.similarity,
            "matched_text": outcome.matched_text,
            "feedback": build_feedback(outcome),
            "error": outcome.error,
            "error_code": outcome.error_code,
        }
    
    def validate_single_answer(self, question_id: str, answer: str) -> Dict[str, Any]:
        """
        Validate one answer for one question.
        
        Raises:
            NotFoundException: If the question is unknown or inactive
        """
        question = self._get_question(question_id)
        reference_set = question.reference_set
        
        outcome = self.engine.grade_answer(
            AnswerSubmission(question_id=question_id, answer_text=answer),
            reference_set,
        )
        
        result = self._outcome_to_dict(outcome, answer)
        result["correct_answer"] = (
            reference_set.full_answer.text if reference_set.full_answer else None
        )
        result["partial_options"] = reference_set.to_dict()["partial_answers"]
        return result
    
    def get_validation_details(self, question_id: str, answer: str) -> Dict[str, Any]:
        """Validate an answer and include the question it was graded against"""
        if not question_id or not answer:
            raise BadRequestException(Messages.DETAILS_PARAMS_REQUIRED)
        
        validation = self.validate_single_answer(question_id, answer)
        question = self._get_question(question_id)
        
        return {
            "question": question.to_dict(),
            "validation": validation,
        }
    
    def test_similarity(self, answer1: str, answer2: str) -> Dict[str, Any]:
        """Raw similarity between two answers, for checking how matching behaves"""
        if not answer1 or not answer2:
            raise BadRequestException(Messages.SIMILARITY_PARAMS_REQUIRED)
        
        score = similarity(answer1, answer2)
        return {
            "answer1": answer1,
            "answer2": answer2,
            "similarity": round_similarity(score),
            "similarity_percentage": similarity_percentage(score),
        }
    
    def grade_submission(
        self,
        answers: Iterable[AnswerSubmission],
        total_questions: Optional[int] = None,
        assignment_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Grade all answers of an assignment submission.
        
        Args:
            answers: Submitted answers
            total_questions: Questions in the assignment, defaults to the
                number of answers
            assignment_id: Assignment being graded
            
        Returns:
            Dict with per-answer results, total marks and completion rate
        """
        answers: List[AnswerSubmission] = list(answers)
        if not answers:
            raise BadRequestException(Messages.ANSWERS_REQUIRED)
        
        total = len(answers) if total_questions is None else total_questions
        result = self.engine.grade(answers, self.question_bank.lookup, total)
        
        for question_id in result.missing_question_ids:
            grading_logger.warning(
                f"Question {question_id} not found while grading assignment {assignment_id}"
            )
        grading_logger.info(
            f"Graded {len(answers)} answers for assignment {assignment_id}: "
            f"{result.total_marks_obtained} marks, {result.completion_rate:.1f}% complete"
        )
        
        return {
            "assignment_id": assignment_id,
            "results": [
                self._outcome_to_dict(outcome, submission.answer_text)
                for outcome, submission in zip(result.per_question_outcomes, answers)
            ],
            "total_marks_obtained": result.total_marks_obtained,
            "total_questions": total,
            "completion_rate": round_half_up(result.completion_rate),
            "missing_questions": result.missing_question_ids,
            "graded_at": datetime.now(),
        }


_validation_service: Optional[ValidationService] = None


def get_validation_service() -> ValidationService:
    """Shared service instance, created on first use"""
    global _validation_service
    if _validation_service is None:
        _validation_service = ValidationService()
    return _validation_service
