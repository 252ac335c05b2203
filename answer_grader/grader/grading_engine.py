"""
Grading Engine Module
Grades a batch of answers and aggregates marks and completion rate
"""
import inspect
import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Iterable, List, Mapping, Optional, Union

from ..core.constants import ErrorCode, MatchThresholds
from ..core.exceptions import NotFoundException
from .classifier import classify
from .models import (
    AnswerSubmission,
    GradingResult,
    ReferenceAnswerSet,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)

ReferenceSetLookup = Union[
    Callable[[str], Optional[ReferenceAnswerSet]],
    Mapping[str, ReferenceAnswerSet],
]
AsyncReferenceSetLookup = Union[
    Callable[[str], Union[Optional[ReferenceAnswerSet], Awaitable[Optional[ReferenceAnswerSet]]]],
    Mapping[str, ReferenceAnswerSet],
]


def completion_rate(submitted_count: int, total_expected: int) -> float:
    """
    Percentage of expected questions that were answered.
    
    Returns 0 when no questions are expected.
    """
    if not total_expected:
        return 0.0
    return submitted_count / total_expected * 100


def _missing_outcome(question_id: str) -> ValidationOutcome:
    return ValidationOutcome.no_match(
        question_id=question_id,
        error=f"Question '{question_id}' not found",
        error_code=ErrorCode.QUESTION_NOT_FOUND.value,
    )


def _resolve(lookup, question_id: str) -> Any:
    """Call the lookup; unknown ids come back as None."""
    try:
        if isinstance(lookup, Mapping):
            return lookup.get(question_id)
        return lookup(question_id)
    except (KeyError, NotFoundException):
        return None


class GradingEngine:
    """
    Engine for grading free-text answers against reference answers.
    """
    
    def __init__(
        self,
        full_threshold: float = MatchThresholds.FULL,
        partial_threshold: float = MatchThresholds.PARTIAL
    ):
        self.full_threshold = full_threshold
        self.partial_threshold = partial_threshold
    
    def grade_answer(
        self,
        submission: AnswerSubmission,
        reference_set: Optional[ReferenceAnswerSet]
    ) -> ValidationOutcome:
        """
        Grade one submission against its (possibly missing) reference set.
        
        Raises:
            InvalidReferenceDataException: If the reference data is malformed
        """
        if reference_set is None:
            logger.warning(f"No reference answers for question {submission.question_id}")
            return _missing_outcome(submission.question_id)
        
        outcome = classify(
            submission.answer_text,
            reference_set,
            self.full_threshold,
            self.partial_threshold,
        )
        return replace(outcome, question_id=submission.question_id)
    
    def aggregate(
        self,
        outcomes: List[ValidationOutcome],
        total_expected_question_count: int
    ) -> GradingResult:
        """Sum marks and compute completion rate over graded outcomes"""
        return GradingResult(
            per_question_outcomes=outcomes,
            total_marks_obtained=sum(o.marks_obtained for o in outcomes),
            completion_rate=completion_rate(len(outcomes), total_expected_question_count),
        )
    
    def grade(
        self,
        submissions: Iterable[AnswerSubmission],
        reference_set_lookup: ReferenceSetLookup,
        total_expected_question_count: int
    ) -> GradingResult:
        """
        Grade a batch of submissions.
        
        Args:
            submissions: Answers in the order they were submitted
            reference_set_lookup: Callable or mapping from question id to
                ReferenceAnswerSet; None means the question is gone
            total_expected_question_count: Questions in the assignment
            
        Returns:
            GradingResult with outcomes in input order
            
        Raises:
            TypeError: If the lookup returns an awaitable
        """
        outcomes = []
        for submission in submissions:
            reference_set = _resolve(reference_set_lookup, submission.question_id)
            if inspect.isawaitable(reference_set):
                if inspect.iscoroutine(reference_set):
                    reference_set.close()
                raise TypeError(
                    "reference_set_lookup returned an awaitable; use grade_async for async lookups"
                )
            outcomes.append(self.grade_answer(submission, reference_set))
        return self.aggregate(outcomes, total_expected_question_count)
    
    async def grade_async(
        self,
        submissions: Iterable[AnswerSubmission],
        reference_set_lookup: AsyncReferenceSetLookup,
        total_expected_question_count: int
    ) -> GradingResult:
        """Same as :meth:`grade` but awaits lookups that return awaitables"""
        outcomes = []
        for submission in submissions:
            try:
                reference_set = _resolve(reference_set_lookup, submission.question_id)
                if inspect.isawaitable(reference_set):
                    reference_set = await reference_set
            except (KeyError, NotFoundException):
                reference_set = None
            outcomes.append(self.grade_answer(submission, reference_set))
        return self.aggregate(outcomes, total_expected_question_count)


_default_engine = GradingEngine()


def grade(
    submissions: Iterable[AnswerSubmission],
    reference_set_lookup: ReferenceSetLookup,
    total_expected_question_count: int
) -> GradingResult:
    """Grade submissions with the default thresholds"""
    return _default_engine.grade(
        submissions, reference_set_lookup, total_expected_question_count
    )


async def grade_async(
    submissions: Iterable[AnswerSubmission],
    reference_set_lookup: AsyncReferenceSetLookup,
    total_expected_question_count: int
) -> GradingResult:
    """Grade submissions with the default thresholds, awaiting async lookups"""
    return await _default_engine.grade_async(
        submissions, reference_set_lookup, total_expected_question_count
    )
