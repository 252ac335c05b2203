"""
Unit tests for grading engine
"""
import asyncio

import pytest

from answer_grader.core import InvalidReferenceDataException, MatchKind, NotFoundException
from answer_grader.grader import (
    AnswerSubmission,
    GradingEngine,
    ReferenceAnswer,
    ReferenceAnswerSet,
    completion_rate,
    grade,
    grade_async,
)


@pytest.fixture
def reference_sets():
    return {
        "q1": ReferenceAnswerSet(full_answer=ReferenceAnswer("Paris", 10)),
        "q2": ReferenceAnswerSet(full_answer=ReferenceAnswer("Jupiter", 8)),
        "q3": ReferenceAnswerSet(
            full_answer=ReferenceAnswer("Carbon dioxide", 6),
            partial_answers=(ReferenceAnswer("CO2", 5),),
        ),
    }


@pytest.fixture
def submissions():
    return [
        AnswerSubmission("q1", "paris"),
        AnswerSubmission("q2", "Saturn"),
        AnswerSubmission("q3", "co2"),
    ]


class TestCompletionRate:
    """Test cases for completion rate"""
    
    def test_half_answered(self):
        assert completion_rate(2, 4) == 50
    
    def test_no_expected_questions(self):
        """Zero expected questions gives 0 instead of dividing by zero"""
        assert completion_rate(3, 0) == 0
    
    def test_not_clamped(self):
        assert completion_rate(5, 4) == 125


class TestGrade:
    """Test cases for batch grading"""
    
    def test_aggregates_marks(self, reference_sets, submissions):
        """Marks of 10, 0 and 5 add up to 15"""
        result = grade(submissions, reference_sets.get, 3)
        assert [o.marks_obtained for o in result.per_question_outcomes] == [10, 0, 5]
        assert result.total_marks_obtained == 15
        assert result.completion_rate == 100
    
    def test_preserves_order(self, reference_sets, submissions):
        result = grade(list(reversed(submissions)), reference_sets.get, 3)
        assert [o.question_id for o in result.per_question_outcomes] == ["q3", "q2", "q1"]
        assert [o.match_kind for o in result.per_question_outcomes] == [
            MatchKind.PARTIAL, MatchKind.NONE, MatchKind.FULL
        ]
    
    def test_completion_rate(self, reference_sets):
        result = grade(
            [AnswerSubmission("q1", "Paris"), AnswerSubmission("q2", "Jupiter")],
            reference_sets.get,
            4,
        )
        assert result.completion_rate == 50
    
    def test_zero_expected_questions(self, reference_sets, submissions):
        result = grade(submissions, reference_sets.get, 0)
        assert result.completion_rate == 0
    
    def test_mapping_lookup(self, reference_sets, submissions):
        """A plain dict can serve as the lookup"""
        result = grade(submissions, reference_sets, 3)
        assert result.total_marks_obtained == 15
    
    def test_empty_batch(self, reference_sets):
        result = grade([], reference_sets.get, 5)
        assert result.per_question_outcomes == []
        assert result.total_marks_obtained == 0
        assert result.completion_rate == 0
    
    def test_idempotent(self, reference_sets, submissions):
        first = grade(submissions, reference_sets.get, 3)
        second = grade(submissions, reference_sets.get, 3)
        assert first == second


class TestMissingQuestions:
    """Test cases for questions that cannot be resolved"""
    
    def test_missing_question_does_not_stop_batch(self, reference_sets):
        submissions = [
            AnswerSubmission("q1", "Paris"),
            AnswerSubmission("deleted", "whatever"),
            AnswerSubmission("q3", "carbon dioxide"),
        ]
        result = grade(submissions, reference_sets.get, 3)
        
        missing = result.per_question_outcomes[1]
        assert missing.match_kind == MatchKind.NONE
        assert missing.marks_obtained == 0
        assert missing.error_code == "QUESTION_NOT_FOUND"
        assert "deleted" in missing.error
        
        assert result.total_marks_obtained == 16
        assert result.missing_question_ids == ["deleted"]
    
    def test_wrong_answer_has_no_error_tag(self, reference_sets):
        """A wrong answer is distinguishable from a vanished question"""
        result = grade([AnswerSubmission("q1", "Rome")], reference_sets.get, 1)
        outcome = result.per_question_outcomes[0]
        assert outcome.match_kind == MatchKind.NONE
        assert outcome.error is None
        assert outcome.error_code is None
    
    @pytest.mark.parametrize("error", [KeyError("q1"), NotFoundException("Question", "q1")])
    def test_lookup_raising_not_found(self, error):
        def lookup(question_id):
            raise error
        
        result = grade([AnswerSubmission("q1", "Paris")], lookup, 1)
        assert result.per_question_outcomes[0].error_code == "QUESTION_NOT_FOUND"
    
    def test_async_lookup_rejected_by_sync_grade(self, reference_sets):
        """Coroutine lookups must go through grade_async"""
        async def lookup(question_id):
            return reference_sets.get(question_id)
        
        with pytest.raises(TypeError, match="grade_async"):
            grade([AnswerSubmission("q1", "Paris")], lookup, 1)
    
    def test_invalid_reference_data_propagates(self):
        """Malformed reference answers are not swallowed"""
        lookup = {"q1": {"full_answer": {"text": "Paris"}}}
        with pytest.raises(InvalidReferenceDataException):
            grade([AnswerSubmission("q1", "Paris")], lookup, 1)


class TestGradingEngine:
    """Test cases for engine configuration"""
    
    def test_custom_thresholds(self, reference_sets):
        engine = GradingEngine(full_threshold=0.8)
        result = engine.grade([AnswerSubmission("q1", "Pariss")], reference_sets.get, 1)
        assert result.per_question_outcomes[0].match_kind == MatchKind.FULL
    
    def test_to_dict(self, reference_sets, submissions):
        data = grade(submissions, reference_sets.get, 3).to_dict()
        assert data["total_marks_obtained"] == 15
        first = data["per_question_outcomes"][0]
        assert first["match_kind"] == "full"
        assert "error" not in first


class TestGradeAsync:
    """Test cases for grading with async lookups"""
    
    def test_async_lookup(self, reference_sets, submissions):
        async def lookup(question_id):
            await asyncio.sleep(0)
            return reference_sets.get(question_id)
        
        result = asyncio.run(grade_async(submissions, lookup, 6))
        assert result.total_marks_obtained == 15
        assert result.completion_rate == 50
    
    def test_async_missing_question(self, reference_sets):
        async def lookup(question_id):
            raise KeyError(question_id)
        
        result = asyncio.run(grade_async([AnswerSubmission("q1", "Paris")], lookup, 1))
        assert result.per_question_outcomes[0].error_code == "QUESTION_NOT_FOUND"
    
    def test_sync_lookup_also_works(self, reference_sets, submissions):
        result = asyncio.run(grade_async(submissions, reference_sets.get, 3))
        assert result == grade(submissions, reference_sets.get, 3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
