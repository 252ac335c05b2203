"""
Similarity Module
Edit-distance based similarity between a student answer and a reference answer
"""
from typing import List


def normalize_answer(text: str) -> str:
    """Case-fold and trim surrounding whitespace. Nothing else is normalized."""
    return text.casefold().strip()


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``.
    
    Args:
        a: First string
        b: Second string
        
    Returns:
        Edit distance
    """
    rows = len(a) + 1
    cols = len(b) + 1
    matrix: List[List[int]] = [[0] * cols for _ in range(rows)]
    
    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j
    
    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],      # insertion
                    matrix[i - 1][j],      # deletion
                )
    
    return matrix[rows - 1][cols - 1]


def similarity(a: str, b: str) -> float:
    """
    Normalized similarity between two answers.
    
    Identical answers (after normalization, including two empty answers)
    score 1.0. An empty answer against a non-empty one scores 0.0.
    Otherwise the score is ``(max_len - distance) / max_len``.
    
    Args:
        a: First answer
        b: Second answer
        
    Returns:
        Score in [0, 1]
    """
    a = normalize_answer(a)
    b = normalize_answer(b)
    
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    
    max_len = max(len(a), len(b))
    distance = levenshtein_distance(a, b)
    return (max_len - distance) / max_len
