"""
Grader Module
Scores free-text answers against stored reference answers using
edit-distance similarity

Usage:
    from answer_grader.grader import (
        AnswerSubmission, ReferenceAnswer, ReferenceAnswerSet, classify, grade
    )
    
    reference = ReferenceAnswerSet(full_answer=ReferenceAnswer("Paris", 10))
    
    # Classify single answer
    outcome = classify("paris", reference)
    
    # Grade a submission
    result = grade(
        [AnswerSubmission("q1", "Paris")],
        {"q1": reference}.get,
        total_expected_question_count=1,
    )
"""

from .similarity import (
    levenshtein_distance,
    normalize_answer,
    similarity,
)

from .models import (
    AnswerSubmission,
    GradingResult,
    ReferenceAnswer,
    ReferenceAnswerSet,
    ValidationOutcome,
)

from .classifier import (
    best_partial_match,
    classify,
)

from .grading_engine import (
    GradingEngine,
    completion_rate,
    grade,
    grade_async,
)

__all__ = [
    # Similarity
    "levenshtein_distance",
    "normalize_answer",
    "similarity",
    # Models
    "AnswerSubmission",
    "GradingResult",
    "ReferenceAnswer",
    "ReferenceAnswerSet",
    "ValidationOutcome",
    # Classification
    "best_partial_match",
    "classify",
    # Grading
    "GradingEngine",
    "completion_rate",
    "grade",
    "grade_async",
]
