"""
Utility functions for the application
"""
import math
from pathlib import Path
from typing import Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure a directory exists, create if not"""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves rounded up"""
    return int(math.floor(value + 0.5))


def similarity_percentage(score: float) -> int:
    """Similarity score as a whole percentage"""
    return round_half_up(score * 100)


def round_similarity(score: float, digits: int = 2) -> float:
    """Similarity score rounded for display, halves rounded up"""
    scale = 10 ** digits
    return round_half_up(score * scale) / scale


def build_feedback(outcome) -> str:
    """Human-readable feedback for a validation outcome"""
    from answer_grader.core.constants import MatchKind, Messages
    
    percent = similarity_percentage(outcome.similarity)
    if outcome.match_kind == MatchKind.FULL:
        return Messages.FEEDBACK_FULL.format(percent=percent)
    elif outcome.match_kind == MatchKind.PARTIAL:
        return Messages.FEEDBACK_PARTIAL.format(
            percent=percent, matched=outcome.matched_text
        )
    return Messages.FEEDBACK_NONE
