"""
Grading Models
Reference answers, submissions and grading outcomes
"""
import math
from dataclasses import dataclass, field, asdict
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..core.constants import MatchKind
from ..core.exceptions import InvalidReferenceDataException


def _validate_mark(mark: Any, question_id: Optional[str] = None) -> float:
    if isinstance(mark, bool) or not isinstance(mark, Real):
        raise InvalidReferenceDataException(
            f"mark must be a number, got {mark!r}", question_id
        )
    if math.isnan(mark) or math.isinf(mark) or mark < 0:
        raise InvalidReferenceDataException(
            f"mark must be a finite non-negative number, got {mark!r}", question_id
        )
    return float(mark)


@dataclass(frozen=True)
class ReferenceAnswer:
    """An authored answer text paired with the marks it is worth"""
    text: str
    mark: float

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise InvalidReferenceDataException(
                f"answer text must be a string, got {self.text!r}"
            )
        object.__setattr__(self, "mark", _validate_mark(self.mark))

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        question_id: Optional[str] = None
    ) -> "ReferenceAnswer":
        """
        Build a reference answer from a stored ``{"text", "mark"}`` mapping.
        
        Raises:
            InvalidReferenceDataException: If a field is missing or malformed
        """
        if not isinstance(data, Mapping):
            raise InvalidReferenceDataException(
                f"reference answer must be an object, got {type(data).__name__}",
                question_id
            )
        for key in ("text", "mark"):
            if data.get(key) is None:
                raise InvalidReferenceDataException(
                    f"reference answer is missing '{key}'", question_id
                )
        if not isinstance(data["text"], str):
            raise InvalidReferenceDataException(
                f"answer text must be a string, got {data['text']!r}", question_id
            )
        return cls(text=data["text"], mark=_validate_mark(data["mark"], question_id))


@dataclass(frozen=True)
class ReferenceAnswerSet:
    """Full-mark answer and partial-credit variants stored for one question"""
    full_answer: Optional[ReferenceAnswer] = None
    partial_answers: Tuple[ReferenceAnswer, ...] = ()

    def __post_init__(self):
        if self.full_answer is not None and not isinstance(self.full_answer, ReferenceAnswer):
            raise InvalidReferenceDataException("full_answer must be a ReferenceAnswer")
        partials = tuple(self.partial_answers or ())
        for partial in partials:
            if not isinstance(partial, ReferenceAnswer):
                raise InvalidReferenceDataException(
                    "partial_answers must only contain ReferenceAnswer items"
                )
        object.__setattr__(self, "partial_answers", partials)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        question_id: Optional[str] = None
    ) -> "ReferenceAnswerSet":
        """
        Build a reference set from stored question data.
        
        Expected shape::
        
            {
                "full_answer": {"text": "Paris", "mark": 10},
                "partial_answers": [{"text": "Paris, France", "mark": 5}]
            }
        
        Both keys are optional. A null ``partial_answers`` counts as empty.
        
        Raises:
            InvalidReferenceDataException: If the data is malformed
        """
        if not isinstance(data, Mapping):
            raise InvalidReferenceDataException(
                f"reference set must be an object, got {type(data).__name__}",
                question_id
            )
        
        full_data = data.get("full_answer")
        full_answer = (
            ReferenceAnswer.from_dict(full_data, question_id)
            if full_data is not None else None
        )
        
        partial_data = data.get("partial_answers") or []
        if isinstance(partial_data, (str, bytes)) or not isinstance(partial_data, (list, tuple)):
            raise InvalidReferenceDataException(
                "partial_answers must be a list", question_id
            )
        partial_answers = tuple(
            ReferenceAnswer.from_dict(item, question_id) for item in partial_data
        )
        
        return cls(full_answer=full_answer, partial_answers=partial_answers)

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return {
            "full_answer": asdict(self.full_answer) if self.full_answer else None,
            "partial_answers": [asdict(p) for p in self.partial_answers],
        }


@dataclass(frozen=True)
class AnswerSubmission:
    """A student's answer to one question"""
    question_id: str
    answer_text: str


@dataclass(frozen=True)
class ValidationOutcome:
    """Marks awarded for one answer and the reference answer that earned them"""
    match_kind: MatchKind
    marks_obtained: float = 0.0
    similarity: float = 0.0
    matched_text: Optional[str] = None
    question_id: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def no_match(cls, **kwargs) -> "ValidationOutcome":
        return cls(match_kind=MatchKind.NONE, **kwargs)

    @property
    def matched(self) -> bool:
        return self.match_kind != MatchKind.NONE

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        result = asdict(self)
        result["match_kind"] = self.match_kind.value
        # Remove None values
        return {k: v for k, v in result.items() if v is not None}


@dataclass(frozen=True)
class GradingResult:
    """Aggregate result over one submission"""
    per_question_outcomes: List[ValidationOutcome] = field(default_factory=list)
    total_marks_obtained: float = 0.0
    completion_rate: float = 0.0

    @property
    def missing_question_ids(self) -> List[str]:
        """Question ids that could not be resolved during grading"""
        return [
            o.question_id for o in self.per_question_outcomes
            if o.error_code is not None
        ]

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return {
            "per_question_outcomes": [o.to_dict() for o in self.per_question_outcomes],
            "total_marks_obtained": self.total_marks_obtained,
            "completion_rate": self.completion_rate,
        }
