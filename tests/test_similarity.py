"""
Unit tests for similarity module
"""
import pytest

from answer_grader.grader import levenshtein_distance, normalize_answer, similarity


class TestLevenshteinDistance:
    """Test cases for edit distance"""
    
    def test_classic_example(self):
        """kitten -> sitting needs three edits"""
        assert levenshtein_distance("kitten", "sitting") == 3
    
    def test_empty_strings(self):
        """Distance to an empty string is the other string's length"""
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("", "abcd") == 4
    
    def test_no_transposition(self):
        """Swapping two characters costs two substitutions"""
        assert levenshtein_distance("ab", "ba") == 2
    
    def test_symmetric(self):
        """Distance does not depend on argument order"""
        assert levenshtein_distance("flaw", "lawn") == levenshtein_distance("lawn", "flaw") == 2


class TestNormalizeAnswer:
    """Test cases for answer normalization"""
    
    def test_case_and_whitespace(self):
        assert normalize_answer("  PaRiS \n") == "paris"
    
    def test_keeps_punctuation(self):
        """Only case and surrounding whitespace are normalized"""
        assert normalize_answer("Paris, France!") == "paris, france!"
        assert normalize_answer("New  York") == "new  york"


class TestSimilarity:
    """Test cases for similarity score"""
    
    @pytest.mark.parametrize("text", ["", "Paris", "carbon dioxide", "  x  "])
    def test_identity(self, text):
        """A string is fully similar to itself, including the empty string"""
        assert similarity(text, text) == 1.0
    
    def test_empty_against_non_empty(self):
        """An empty answer never partially matches anything"""
        assert similarity("", "nonempty") == 0.0
        assert similarity("nonempty", "") == 0.0
        assert similarity("   ", "nonempty") == 0.0
    
    def test_case_insensitive(self):
        assert similarity("Paris", "paris") == 1.0
    
    def test_whitespace_insensitive(self):
        assert similarity("Paris", "  Paris  ") == 1.0
    
    def test_one_extra_character(self):
        """One insertion in a six-character string scores 5/6"""
        assert similarity("Pariss", "Paris") == pytest.approx(5 / 6)
    
    def test_completely_different(self):
        """Distance equal to the longer length scores 0"""
        assert similarity("abc", "xyz") == 0.0
    
    @pytest.mark.parametrize("a,b", [
        ("Paris", "London"),
        ("carbon dioxide", "CO2"),
        ("short", "a much longer answer"),
        ("photosynthesis", "photosynthesys"),
    ])
    def test_bounded(self, a, b):
        """Scores stay within [0, 1]"""
        assert 0.0 <= similarity(a, b) <= 1.0
    
    def test_symmetric(self):
        assert similarity("Photosynthesis", "photo synthesis") == similarity("photo synthesis", "Photosynthesis")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
