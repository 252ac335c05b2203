"""
Match Classifier Module
Decides between full, partial and no marks for a single answer
"""
import logging
from typing import Any, Mapping, Optional, Union

from ..core.constants import MatchKind, MatchThresholds
from ..core.exceptions import InvalidReferenceDataException
from .models import ReferenceAnswer, ReferenceAnswerSet, ValidationOutcome
from .similarity import similarity

logger = logging.getLogger(__name__)


def _as_reference_set(
    reference_set: Union[ReferenceAnswerSet, Mapping[str, Any]]
) -> ReferenceAnswerSet:
    if isinstance(reference_set, ReferenceAnswerSet):
        return reference_set
    if isinstance(reference_set, Mapping):
        return ReferenceAnswerSet.from_dict(reference_set)
    raise InvalidReferenceDataException(
        f"expected a reference answer set, got {type(reference_set).__name__}"
    )


def best_partial_match(
    student_answer: str,
    reference_set: ReferenceAnswerSet,
    threshold: float = MatchThresholds.PARTIAL
) -> Optional[ValidationOutcome]:
    """
    Pick the qualifying partial answer worth the most marks.
    
    Partial answers scoring at least ``threshold`` qualify. Among them the
    highest mark wins, not the closest text; equal marks keep the first one.
    A partial answer worth 0 marks never counts as a match.
    
    Returns:
        Partial outcome, or None if no partial answer qualifies
    """
    best: Optional[ReferenceAnswer] = None
    best_mark = 0.0
    best_similarity = 0.0
    
    for partial in reference_set.partial_answers:
        score = similarity(student_answer, partial.text)
        if score >= threshold and partial.mark > best_mark:
            best = partial
            best_mark = partial.mark
            best_similarity = score
    
    if best is None:
        return None
    
    return ValidationOutcome(
        match_kind=MatchKind.PARTIAL,
        marks_obtained=best.mark,
        similarity=best_similarity,
        matched_text=best.text,
    )


def classify(
    student_answer: str,
    reference_set: Union[ReferenceAnswerSet, Mapping[str, Any]],
    full_threshold: float = MatchThresholds.FULL,
    partial_threshold: float = MatchThresholds.PARTIAL
) -> ValidationOutcome:
    """
    Classify a student answer against a question's reference answers.
    
    The full answer is checked first and wins outright when it reaches
    ``full_threshold``. Only then are partial answers considered.
    
    Args:
        student_answer: Text typed by the student
        reference_set: Reference answers, or their stored mapping form
        full_threshold: Similarity needed for the full answer
        partial_threshold: Similarity needed for a partial answer
        
    Returns:
        ValidationOutcome
        
    Raises:
        InvalidReferenceDataException: If the reference data is malformed
    """
    reference_set = _as_reference_set(reference_set)
    
    full_answer = reference_set.full_answer
    if full_answer is not None:
        score = similarity(student_answer, full_answer.text)
        if score >= full_threshold:
            logger.debug(f"Full match ({score:.3f}) against {full_answer.text!r}")
            return ValidationOutcome(
                match_kind=MatchKind.FULL,
                marks_obtained=full_answer.mark,
                similarity=score,
                matched_text=full_answer.text,
            )
    
    partial = best_partial_match(student_answer, reference_set, partial_threshold)
    if partial is not None:
        logger.debug(
            f"Partial match ({partial.similarity:.3f}) against {partial.matched_text!r}"
        )
        return partial
    
    return ValidationOutcome.no_match()
