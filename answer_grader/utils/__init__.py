# Utils package
from .helpers import (
    ensure_directory,
    round_half_up,
    similarity_percentage,
    round_similarity,
    build_feedback
)

__all__ = [
    "ensure_directory",
    "round_half_up",
    "similarity_percentage",
    "round_similarity",
    "build_feedback"
]
