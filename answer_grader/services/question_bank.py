"""
Question Bank
In-memory store of questions and their reference answers
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from answer_grader.core import InvalidReferenceDataException
from answer_grader.grader import ReferenceAnswerSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    """A question and the reference answers used to grade it"""
    id: str
    question_text: str
    reference_set: ReferenceAnswerSet
    topic: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Question":
        """
        Build a question from its stored form.
        
        Args:
            data: Dict with 'id', 'question_text', optional 'topic',
                'is_active', 'full_answer' and 'partial_answers'
            
        Raises:
            InvalidReferenceDataException: If the id or answers are malformed
        """
        question_id = data.get("id")
        if question_id is None or str(question_id) == "":
            raise InvalidReferenceDataException("question is missing 'id'")
        question_id = str(question_id)
        
        return cls(
            id=question_id,
            question_text=data.get("question_text", ""),
            reference_set=ReferenceAnswerSet.from_dict(data, question_id),
            topic=data.get("topic"),
            is_active=bool(data.get("is_active", True)),
        )

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "text": self.question_text,
            "topic": self.topic,
            **self.reference_set.to_dict(),
        }


class QuestionBank:
    """
    Question store backing reference-set lookups.
    
    Inactive questions are kept but treated as missing.
    """
    
    def __init__(self, questions: Iterable[Question] = ()):
        self._questions: Dict[str, Question] = {}
        for question in questions:
            self.add(question)
    
    @classmethod
    def from_dicts(cls, items: Iterable[Mapping[str, Any]]) -> "QuestionBank":
        """Create bank from stored question dicts"""
        return cls(Question.from_dict(item) for item in items)
    
    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "QuestionBank":
        """
        Create bank from a JSON file holding a list of questions.
        
        Args:
            path: Path to questions JSON
            
        Returns:
            QuestionBank instance, empty if the file does not exist
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Questions file not found: {path}")
            return cls()
        
        with open(path, "r", encoding="utf-8") as f:
            items = json.load(f)
        
        bank = cls.from_dicts(items)
        logger.info(f"Loaded {len(bank)} questions from {path.name}")
        return bank
    
    def add(self, question: Question) -> None:
        """Add or replace a question"""
        self._questions[question.id] = question
    
    def get(self, question_id: str) -> Optional[Question]:
        """Get an active question by id"""
        question = self._questions.get(question_id)
        if question is None or not question.is_active:
            return None
        return question
    
    def lookup(self, question_id: str) -> Optional[ReferenceAnswerSet]:
        """Reference answers for an active question, or None"""
        question = self.get(question_id)
        return question.reference_set if question else None
    
    def active_questions(self) -> List[Question]:
        return [q for q in self._questions.values() if q.is_active]
    
    def __len__(self) -> int:
        return len(self._questions)
    
    def __contains__(self, question_id: str) -> bool:
        return self.get(question_id) is not None
