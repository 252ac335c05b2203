"""
Shared fixtures for the test suite
"""
import pytest

from answer_grader.grader import ReferenceAnswer, ReferenceAnswerSet
from answer_grader.services import QuestionBank, ValidationService


QUESTIONS = [
    {
        "id": "q1",
        "question_text": "What is the capital of France?",
        "topic": "Geography",
        "full_answer": {"text": "Paris", "mark": 10},
        "partial_answers": [],
    },
    {
        "id": "q2",
        "question_text": "Which gas do plants absorb?",
        "topic": "Biology",
        "full_answer": {"text": "Carbon dioxide", "mark": 5},
        "partial_answers": [
            {"text": "CO2", "mark": 4},
            {"text": "Carbon", "mark": 1},
        ],
    },
    {
        "id": "q3",
        "question_text": "Retired question",
        "is_active": False,
        "full_answer": {"text": "Anything", "mark": 3},
    },
]


@pytest.fixture
def paris_set():
    """Full answer only"""
    return ReferenceAnswerSet(full_answer=ReferenceAnswer("Paris", 10))


@pytest.fixture
def question_bank():
    return QuestionBank.from_dicts(QUESTIONS)


@pytest.fixture
def validation_service(question_bank):
    return ValidationService(question_bank=question_bank)
