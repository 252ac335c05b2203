"""
Answer Grader - free-text answer validation service

The ``grader`` subpackage is the pure scoring core; settings live in
``answer_grader.config`` and are only loaded by the service layer.
"""

__version__ = "1.0.0"
